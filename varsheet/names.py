"""
Variable name parsing.

Design-tool variable names are slash-delimited paths such as
``"Theme colors/Primary/Base"``. Everything but the last segment forms the
group used to section the CSS output; the last segment is the short name.
"""

from typing import NamedTuple


NAME_SEPARATOR = "/"


class VariableInfo(NamedTuple):
    """Group and short name parsed from a hierarchical variable name."""

    group: str
    name: str


def get_variable_info(full_name: str) -> VariableInfo:
    """
    Split a hierarchical variable name into (group, short name).

    Args:
        full_name: Slash-delimited name, e.g. ``"UI Sizes/Radius/Small"``

    Returns:
        VariableInfo with group segments joined by single spaces

    Example:
        >>> get_variable_info("A/B/C")
        VariableInfo(group='A B', name='C')
        >>> get_variable_info("Solo")
        VariableInfo(group='', name='Solo')
    """
    parts = full_name.split(NAME_SEPARATOR)
    return VariableInfo(group=" ".join(parts[:-1]), name=parts[-1])


def short_name(full_name: str) -> str:
    """Last path segment of a variable name."""
    return get_variable_info(full_name).name
