"""
Color formatting for CSS output.

Converts normalized color values (channels in [0, 1]) into either
``#rrggbb`` hex or ``rgba(R, G, B, A)`` functional notation.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any, Mapping, Union

from .exceptions import InvalidColorError
from .models import Color


ColorLike = Union[Color, Mapping[str, Any]]


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _channels(color: ColorLike) -> dict[str, Any]:
    if isinstance(color, Color):
        return color.to_dict()
    if isinstance(color, Mapping):
        return dict(color)
    raise InvalidColorError("expected a color mapping", value=color)


def _to_byte(component: float) -> int:
    # Half rounds up, as in the design tool's Math.round
    return int(math.floor(component * 255 + 0.5))


def _format_alpha(alpha: float) -> str:
    # Exact binary value, ties away from zero, as in the design tool's toFixed(2)
    return str(Decimal(float(alpha)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _check_rgb(channels: dict[str, Any], value: Any) -> None:
    for key in ("r", "g", "b"):
        if not _is_number(channels.get(key)):
            raise InvalidColorError(f"channel '{key}' is missing or not numeric", value=value)


def rgb_to_hex(color: ColorLike) -> str:
    """
    Format a color as lowercase ``#rrggbb``; alpha is ignored.

    Raises:
        InvalidColorError: If r, g or b is missing or not numeric
    """
    channels = _channels(color)
    _check_rgb(channels, color)
    return "#" + "".join(f"{_to_byte(channels[k]):02x}" for k in ("r", "g", "b"))


def rgb_to_rgba(color: ColorLike) -> str:
    """
    Format a color as ``rgba(R, G, B, A)`` with alpha at two decimals.

    Raises:
        InvalidColorError: If r, g, b or a is missing or not numeric
    """
    channels = _channels(color)
    _check_rgb(channels, color)
    if not _is_number(channels.get("a")):
        raise InvalidColorError("channel 'a' is missing or not numeric", value=color)

    r, g, b = (_to_byte(channels[k]) for k in ("r", "g", "b"))
    return f"rgba({r}, {g}, {b}, {_format_alpha(channels['a'])})"


def format_color(color: ColorLike) -> str:
    """
    Pick the notation for a color: rgba when translucent, hex otherwise.

    Args:
        color: Color or mapping with r, g, b and optional a

    Returns:
        ``rgba(...)`` if ``a`` is present and below 1, else ``#rrggbb``
    """
    channels = _channels(color)
    alpha = channels.get("a")
    if alpha is not None and (not _is_number(alpha) or alpha < 1):
        # Non-numeric alpha takes the rgba path so it is rejected there
        return rgb_to_rgba(channels)
    return rgb_to_hex(channels)


def has_rgb_channels(value: Any) -> bool:
    """Whether a value carries r, g and b keys at all (numeric or not)."""
    if isinstance(value, Color):
        return True
    return isinstance(value, Mapping) and all(
        value.get(k) is not None for k in ("r", "g", "b")
    )
