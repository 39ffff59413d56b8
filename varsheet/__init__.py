"""
varsheet - Export design-token variables as CSS custom properties.

Reads variable collections from a design tool (Figma), resolves aliases
between variables and renders deterministic, group-ordered CSS.

Usage:
    from varsheet import ExportConfig, LocalVariablesProvider, export_css

    provider = LocalVariablesProvider.from_file("variables.json")
    css = await export_css(provider, ExportConfig(add_px=True))

Output:

    /* Theme colors */
    --Base: #3366ff;
    --Overlay: rgba(0, 0, 0, 0.50);

    /* UI Sizes */
    --Radius Small: 8px;
"""

__version__ = "0.1.0"

from .config import ExportConfig, DEFAULT_GROUP_ORDER, DEFAULT_PX_GROUP
from .models import (
    Color,
    CollectedCollection,
    Mode,
    ModeValue,
    ResolvedAlias,
    ResolvedType,
    Variable,
    VariableAlias,
    VariableCollection,
)
from .names import VariableInfo, get_variable_info
from .colors import format_color, rgb_to_hex, rgb_to_rgba
from .aliases import resolve_alias
from .collector import collect_variables
from .emitter import CSSEmitter
from .exporter import export_css, handle_message
from .providers import (
    VariableProvider,
    LocalVariablesProvider,
    FigmaConfig,
    FigmaProvider,
)
from .exceptions import (
    VarsheetError,
    FormatError,
    InvalidColorError,
    InvalidStringError,
    EmptyInputError,
    ProviderError,
    FigmaAPIError,
)

__all__ = [
    # Config
    "ExportConfig",
    "DEFAULT_GROUP_ORDER",
    "DEFAULT_PX_GROUP",
    # Models
    "Color",
    "CollectedCollection",
    "Mode",
    "ModeValue",
    "ResolvedAlias",
    "ResolvedType",
    "Variable",
    "VariableAlias",
    "VariableCollection",
    # Pipeline
    "VariableInfo",
    "get_variable_info",
    "format_color",
    "rgb_to_hex",
    "rgb_to_rgba",
    "resolve_alias",
    "collect_variables",
    "CSSEmitter",
    "export_css",
    "handle_message",
    # Providers
    "VariableProvider",
    "LocalVariablesProvider",
    "FigmaConfig",
    "FigmaProvider",
    # Exceptions
    "VarsheetError",
    "FormatError",
    "InvalidColorError",
    "InvalidStringError",
    "EmptyInputError",
    "ProviderError",
    "FigmaAPIError",
]
