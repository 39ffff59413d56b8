"""
Variable providers - where variable data comes from.

- VariableProvider: the async interface the exporter depends on
- LocalVariablesProvider: in-memory, from a Figma variables payload or JSON file
- FigmaProvider: fetches the payload from the Figma REST API
"""

from .base import VariableProvider
from .local import LocalVariablesProvider
from .figma import FigmaConfig, FigmaProvider, HAS_HTTPX

__all__ = [
    "VariableProvider",
    "LocalVariablesProvider",
    "FigmaConfig",
    "FigmaProvider",
    "HAS_HTTPX",
]
