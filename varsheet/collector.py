"""
Token collection from a variable provider.
"""

import asyncio
import logging
from typing import Optional

from .exceptions import EmptyInputError
from .models import CollectedCollection, Variable, VariableCollection
from .providers.base import VariableProvider

logger = logging.getLogger(__name__)


async def _fetch_variables(
    provider: VariableProvider,
    collection: VariableCollection,
    concurrent: bool,
) -> list[Optional[Variable]]:
    if concurrent:
        # gather returns results in argument order regardless of completion order
        return list(await asyncio.gather(
            *(provider.get_variable_by_id(vid) for vid in collection.variable_ids)
        ))
    return [await provider.get_variable_by_id(vid) for vid in collection.variable_ids]


async def collect_variables(
    provider: VariableProvider,
    concurrent: bool = True,
) -> list[CollectedCollection]:
    """
    Gather every collection and its variables in provider order.

    Args:
        provider: Source of collections and variables
        concurrent: Fetch the variables of one collection concurrently

    Returns:
        One CollectedCollection per collection, variables in id-list order

    Raises:
        EmptyInputError: If the provider reports no collections
    """
    collections = await provider.list_variable_collections()
    if not collections:
        raise EmptyInputError()

    collected = []
    for collection in collections:
        fetched = await _fetch_variables(provider, collection, concurrent)

        variables = []
        for variable_id, variable in zip(collection.variable_ids, fetched):
            if variable is None:
                logger.warning(
                    f"Variable {variable_id} listed in collection '{collection.name}' was not found"
                )
                continue
            variables.append(variable)

        collected.append(CollectedCollection(collection=collection, variables=variables))

    logger.debug(
        f"Collected {sum(len(c.variables) for c in collected)} variables "
        f"from {len(collected)} collections"
    )
    return collected
