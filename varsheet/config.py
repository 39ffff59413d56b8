"""
Configuration for CSS export.
"""

from dataclasses import dataclass, field, replace
from typing import Any


# Output order of groups; variables in any other group are not exported
DEFAULT_GROUP_ORDER: tuple[str, ...] = (
    "Theme colors",
    "Content",
    "Font sizes",
    "Support colors",
    "UI Sizes",
    "UI Colors",
    "Buttons",
    "UI Borders",
)

DEFAULT_PX_GROUP = "UI Sizes"


@dataclass(frozen=True)
class ExportConfig:
    """Configuration for a single CSS export."""

    # Group priority
    group_order: tuple[str, ...] = field(default_factory=lambda: DEFAULT_GROUP_ORDER)

    # Units
    px_group: str = DEFAULT_PX_GROUP  # FLOAT values here get "px" when add_px is set
    add_px: bool = False

    # Collection
    concurrent_fetch: bool = True  # gather variable fetches within a collection

    def __post_init__(self):
        """Normalize group_order to a tuple and reject an empty list."""
        if not isinstance(self.group_order, tuple):
            object.__setattr__(self, "group_order", tuple(self.group_order))
        if not self.group_order:
            raise ValueError("group_order must contain at least one group")

    def with_options(self, **changes: Any) -> "ExportConfig":
        """Copy with per-request options applied, e.g. ``with_options(add_px=True)``."""
        return replace(self, **changes)

