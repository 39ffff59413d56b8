"""
Alias resolution.

Resolution is a single hop: the target's own value is returned as stored,
even if it is another alias.
"""

import logging
from typing import Any, Union

from .models import ResolvedAlias, VariableAlias, is_alias
from .providers.base import VariableProvider

logger = logging.getLogger(__name__)


async def resolve_alias(value: Any, provider: VariableProvider) -> Union[ResolvedAlias, Any]:
    """
    Dereference an alias value one level.

    Args:
        value: Any variable value
        provider: Source used to look up the alias target

    Returns:
        ResolvedAlias with the target's full name and first-mode value, or
        ``value`` unchanged if it is not an alias or the target is missing
    """
    if not is_alias(value):
        return value

    alias_id = value.id if isinstance(value, VariableAlias) else str(value["id"])
    target = await provider.get_variable_by_id(alias_id)
    if target is None:
        logger.debug(f"Alias target not found: {alias_id}")
        return value

    return ResolvedAlias(alias_name=target.name, value=target.first_value)
