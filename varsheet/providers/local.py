"""
In-memory provider built from a Figma local-variables payload.

Accepts the body of ``GET /v1/files/:file_key/variables/local`` (or just its
``meta`` object), either as a dict or as a JSON file on disk.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from ..models import Variable, VariableCollection

logger = logging.getLogger(__name__)


class LocalVariablesProvider:
    """
    Serves collections and variables from memory.

    Usage:
        provider = LocalVariablesProvider.from_file("variables.json")
        collections = await provider.list_variable_collections()
    """

    def __init__(
        self,
        collections: Iterable[VariableCollection] = (),
        variables: Iterable[Variable] = (),
        include_remote: bool = False,
    ):
        """
        Initialize provider.

        Args:
            collections: Collections in design-tool order
            variables: Every variable that may be looked up, including alias targets
            include_remote: Also list collections published from other files
        """
        self._collections = [c for c in collections if include_remote or not c.remote]
        self._variables = {v.id: v for v in variables}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], include_remote: bool = False) -> "LocalVariablesProvider":
        """Build from a local-variables response body or its ``meta`` object."""
        meta = payload.get("meta", payload)
        raw_collections: Mapping[str, Any] = meta.get("variableCollections") or {}
        raw_variables: Mapping[str, Any] = meta.get("variables") or {}

        collections = []
        mode_order: dict[str, tuple[str, ...]] = {}
        for collection_id, data in raw_collections.items():
            collection = VariableCollection.from_dict({"id": collection_id, **data})
            collections.append(collection)
            mode_order[collection.id] = collection.mode_ids

        variables = []
        for variable_id, data in raw_variables.items():
            record = {"id": variable_id, **data}
            order = mode_order.get(record.get("variableCollectionId", ""), ())
            variables.append(Variable.from_dict(record, mode_order=order))

        logger.debug(
            f"Loaded {len(collections)} collections and {len(variables)} variables from payload"
        )
        return cls(collections, variables, include_remote=include_remote)

    @classmethod
    def from_file(cls, path: Union[str, Path], include_remote: bool = False) -> "LocalVariablesProvider":
        """Build from a JSON file holding a local-variables payload."""
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            payload = json.load(f)
        return cls.from_payload(payload, include_remote=include_remote)

    async def list_variable_collections(self) -> list[VariableCollection]:
        return list(self._collections)

    async def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        return self._variables.get(variable_id)
