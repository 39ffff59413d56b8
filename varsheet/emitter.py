"""
CSS custom-property emitter.

Walks collected variables group by group (in the configured priority order)
and renders one ``--name: value;`` declaration per variable mode, with a
``/* group */`` comment before the first declaration of each group.

Ordering is significant at every level: group order, then collection order,
then variable order, then mode order.
"""

import logging
import math
from decimal import Decimal
from typing import Any, Iterable, Optional

from .aliases import resolve_alias
from .colors import format_color, has_rgb_channels
from .config import ExportConfig
from .exceptions import FormatError, InvalidColorError, InvalidStringError, ProviderError
from .models import CollectedCollection, ResolvedAlias, ResolvedType, Variable, is_alias
from .names import get_variable_info, short_name
from .providers.base import VariableProvider

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """
    Print a float as the design tool's Number-to-string does.

    Shortest round-trip digits, plain notation for magnitudes in
    ``[1e-6, 1e21)`` and ``1e-7`` / ``1.5e+21`` style exponents outside it.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    parts = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    k = len(digits)
    n = parts.exponent + k  # value == 0.<digits> * 10**n

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        exponent = n - 1
        text = f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"
    return sign + text


def format_value(value: Any) -> str:
    """
    Stringify a scalar the way the design tool prints it.

    Floats go through ``format_number`` (``8.0`` -> ``8``, ``1e-07`` ->
    ``1e-7``), booleans are lowercase and None is ``null``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def declaration(name: str, value: str) -> str:
    return f"--{name}: {value};\n"


def group_header(group: str) -> str:
    return f"\n/* {group} */\n"


class CSSEmitter:
    """
    Renders collected variables as CSS custom properties.

    Usage:
        emitter = CSSEmitter(ExportConfig(add_px=True))
        css = await emitter.emit(collected, provider)
        for warning in emitter.warnings:
            print(warning)
    """

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()
        self.warnings: list[str] = []

    async def emit(
        self,
        collected: Iterable[CollectedCollection],
        provider: VariableProvider,
    ) -> str:
        """
        Render declarations for every variable in a prioritized group.

        Args:
            collected: Output of ``collect_variables``
            provider: Used to resolve alias targets

        Returns:
            CSS text; empty if no variable belongs to a configured group

        Raises:
            ProviderError: If an alias target lookup fails
        """
        collected = list(collected)
        self.warnings = []
        rendered_groups: set[str] = set()
        lines: list[str] = []

        for group_name in self.config.group_order:
            for entry in collected:
                for variable in entry.variables:
                    group, name = get_variable_info(variable.name)
                    if group != group_name:
                        continue

                    for mode_value in variable.values_by_mode:
                        if group not in rendered_groups:
                            lines.append(group_header(group))
                            rendered_groups.add(group)

                        line = await self._render(variable, group, name, mode_value.value, provider)
                        if line is not None:
                            lines.append(line)

        return "".join(lines)

    async def _render(
        self,
        variable: Variable,
        group: str,
        name: str,
        value: Any,
        provider: VariableProvider,
    ) -> Optional[str]:
        try:
            resolved = await resolve_alias(value, provider)
        except ProviderError:
            raise
        except Exception as e:
            logger.error(f"Error resolving alias for {variable.name}: {type(e).__name__}: {e}")
            raise ProviderError(f"Failed to resolve alias for variable: {variable.name}", cause=e) from e
        if isinstance(resolved, ResolvedAlias):
            return declaration(name, f"var(--{short_name(resolved.alias_name)})")

        try:
            return self._format(variable, group, name, resolved)
        except FormatError as e:
            self._warn(f"Skipping variable {variable.name}: {e.message}")
            return None

    def _format(self, variable: Variable, group: str, name: str, value: Any) -> Optional[str]:
        resolved_type = variable.resolved_type

        if is_alias(value):
            self._warn(f"Skipping unresolved alias for variable: {variable.name}")
            return None

        if (
            group == self.config.px_group
            and resolved_type == ResolvedType.FLOAT
            and self.config.add_px
        ):
            return declaration(name, f"{format_value(value)}px")

        if resolved_type == ResolvedType.COLOR:
            if not has_rgb_channels(value):
                self._warn(f"Skipping invalid color value for variable: {variable.name}")
                return None
            try:
                return declaration(name, format_color(value))
            except InvalidColorError as e:
                raise InvalidColorError(e.reason, value=value, variable=variable.name) from e

        if resolved_type == ResolvedType.FLOAT:
            return declaration(name, format_value(value))

        if resolved_type == ResolvedType.STRING:
            if value is None:
                raise InvalidStringError(variable.name)
            # Strings are emitted verbatim, unquoted
            return declaration(name, format_value(value))

        return declaration(name, format_value(value))

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)
