"""
Data models for design-token variables.

Mirrors the shape of the Figma variables payload: collections own an ordered
list of variable ids, variables carry one value per mode, and a value is
either concrete data or an alias pointing at another variable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, NamedTuple, Optional, Union


ALIAS_TYPE = "VARIABLE_ALIAS"


class ResolvedType(str, Enum):
    """Variable types reported by the design tool."""

    COLOR = "COLOR"
    FLOAT = "FLOAT"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"

    @classmethod
    def parse(cls, value: Any) -> Union["ResolvedType", str]:
        """Return the enum member for known types, the raw string otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return str(value)


@dataclass(frozen=True)
class VariableAlias:
    """A value that refers to another variable by id."""

    id: str
    type: str = ALIAS_TYPE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VariableAlias":
        return cls(id=str(data["id"]))


@dataclass(frozen=True)
class Color:
    """Normalized RGBA color, channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        d = {"r": self.r, "g": self.g, "b": self.b}
        if self.a is not None:
            d["a"] = self.a
        return d


def is_alias(value: Any) -> bool:
    """Whether a value is an alias, either parsed or as a raw mapping."""
    if isinstance(value, VariableAlias):
        return True
    return isinstance(value, Mapping) and value.get("type") == ALIAS_TYPE and "id" in value


def parse_value(value: Any) -> Any:
    """Turn raw alias mappings into VariableAlias; leave anything else as is."""
    if isinstance(value, Mapping) and is_alias(value):
        return VariableAlias.from_dict(value)
    return value


class ModeValue(NamedTuple):
    """A variable's value under one mode."""

    mode_id: str
    value: Any


@dataclass(frozen=True)
class Variable:
    """A named design token with one value per mode."""

    id: str
    name: str
    resolved_type: Union[ResolvedType, str]
    values_by_mode: tuple[ModeValue, ...] = ()
    collection_id: Optional[str] = None
    description: str = ""

    @property
    def first_value(self) -> Any:
        """Value under the first mode, or None if the variable has no values."""
        if not self.values_by_mode:
            return None
        return self.values_by_mode[0].value

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        mode_order: Optional[Iterable[str]] = None,
    ) -> "Variable":
        """
        Create from a Figma variable record.

        Args:
            data: Record with ``id``, ``name``, ``resolvedType`` and ``valuesByMode``
            mode_order: Preferred mode order (usually the owning collection's modes).
                Modes not listed keep their payload order after the listed ones.
        """
        raw_values = data.get("valuesByMode") or {}
        ordered: list[str] = []
        for mode_id in mode_order or ():
            if mode_id in raw_values and mode_id not in ordered:
                ordered.append(mode_id)
        ordered.extend(m for m in raw_values if m not in ordered)

        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            resolved_type=ResolvedType.parse(data.get("resolvedType", "")),
            values_by_mode=tuple(
                ModeValue(mode_id, parse_value(raw_values[mode_id])) for mode_id in ordered
            ),
            collection_id=data.get("variableCollectionId"),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class Mode:
    """A named context (e.g. light/dark) inside a collection."""

    mode_id: str
    name: str = ""


@dataclass(frozen=True)
class VariableCollection:
    """An ordered set of variable ids, as organized by the design tool."""

    id: str
    name: str
    variable_ids: tuple[str, ...] = ()
    modes: tuple[Mode, ...] = ()
    default_mode_id: Optional[str] = None
    remote: bool = False

    @property
    def mode_ids(self) -> tuple[str, ...]:
        return tuple(m.mode_id for m in self.modes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VariableCollection":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            variable_ids=tuple(data.get("variableIds") or ()),
            modes=tuple(
                Mode(mode_id=m.get("modeId", ""), name=m.get("name", ""))
                for m in data.get("modes") or ()
            ),
            default_mode_id=data.get("defaultModeId"),
            remote=bool(data.get("remote", False)),
        )


@dataclass(frozen=True)
class ResolvedAlias:
    """The target of an alias: its full name and its first-mode value."""

    alias_name: str
    value: Any = None


@dataclass
class CollectedCollection:
    """A collection together with its variables, in provider order."""

    collection: VariableCollection
    variables: list[Variable] = field(default_factory=list)
