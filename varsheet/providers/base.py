"""
Provider interface for variable data.

A provider is the only thing that talks to the design tool. Everything
downstream works on the immutable snapshots it returns.
"""

from typing import Optional, Protocol, runtime_checkable

from ..models import Variable, VariableCollection


@runtime_checkable
class VariableProvider(Protocol):
    """Async source of variable collections and variables."""

    async def list_variable_collections(self) -> list[VariableCollection]:
        """Return collections in the order the design tool reports them."""
        ...

    async def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        """Return the variable with this id, or None if it does not exist."""
        ...
