"""
Mock variable payloads for testing and development.

Generates Figma local-variables payloads shaped like a real design system:
theme and support colors, content strings, font and UI sizes, and button
colors aliased to the theme palette.
"""

import random
from typing import Any, Optional

from .models import ALIAS_TYPE


# Variable templates per collection: (name, resolvedType, value)
# A value of ("alias", "<name>") becomes an alias to the variable with that name.
COLLECTION_TEMPLATES = {
    "Primitives": [
        ("Theme colors/Primary", "COLOR", {"r": 0.2, "g": 0.4, "b": 1.0, "a": 1.0}),
        ("Theme colors/Primary hover", "COLOR", {"r": 0.0, "g": 0.2, "b": 0.8, "a": 1.0}),
        ("Theme colors/Overlay", "COLOR", {"r": 0.0, "g": 0.0, "b": 0.0, "a": 0.5}),
        ("Support colors/Success", "COLOR", {"r": 0.0, "g": 0.6, "b": 0.2}),
        ("Support colors/Error", "COLOR", {"r": 1, "g": 0, "b": 0, "a": 1}),
        ("Font sizes/Body", "FLOAT", 16),
        ("Font sizes/Heading", "FLOAT", 32),
        ("UI Sizes/Radius Small", "FLOAT", 8),
        ("UI Sizes/Radius Large", "FLOAT", 16.5),
    ],
    "Semantic": [
        ("Content/Font family", "STRING", "Inter, sans-serif"),
        ("Content/Show banner", "BOOLEAN", True),
        ("Buttons/Primary", "COLOR", ("alias", "Theme colors/Primary")),
        ("Buttons/Primary hover", "COLOR", ("alias", "Theme colors/Primary hover")),
        ("UI Colors/Surface", "COLOR", {"r": 1, "g": 1, "b": 1, "a": 1}),
        ("UI Borders/Width", "FLOAT", 1),
        ("Experimental/Glow", "COLOR", {"r": 1, "g": 0.8, "b": 0.1, "a": 1}),
    ],
}


class MockPayloadGenerator:
    """Generates Figma local-variables payloads."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self._counter = 0

    def _id(self, prefix: str) -> str:
        # Counter keeps ids unique; the random part mimics Figma's node ids
        self._counter += 1
        return f"{prefix}{self._counter}:{self.rng.randrange(1, 10_000)}"

    def generate_payload(
        self,
        templates: Optional[dict[str, list[tuple[str, str, Any]]]] = None,
        mode_names: tuple[str, ...] = ("Light",),
    ) -> dict[str, Any]:
        """
        Generate a payload in the ``GET /files/:key/variables/local`` shape.

        Args:
            templates: Collection name -> variable templates
            mode_names: Modes each collection gets; every variable carries the
                same value in every mode

        Returns:
            Payload dict with ``meta.variableCollections`` and ``meta.variables``
        """
        templates = templates or COLLECTION_TEMPLATES
        collections: dict[str, Any] = {}
        variables: dict[str, Any] = {}
        ids_by_name: dict[str, str] = {}
        pending_aliases: list[tuple[str, str, str]] = []

        for collection_name, entries in templates.items():
            collection_id = f"VariableCollectionId:{self._id('c')}"
            modes = [{"modeId": self._id("m"), "name": name} for name in mode_names]
            variable_ids = []

            for name, resolved_type, value in entries:
                variable_id = f"VariableID:{self._id('v')}"
                ids_by_name[name] = variable_id
                variable_ids.append(variable_id)

                values_by_mode = {}
                for mode in modes:
                    if isinstance(value, tuple) and value[0] == "alias":
                        pending_aliases.append((variable_id, mode["modeId"], value[1]))
                        values_by_mode[mode["modeId"]] = None
                    else:
                        values_by_mode[mode["modeId"]] = value

                variables[variable_id] = {
                    "id": variable_id,
                    "name": name,
                    "variableCollectionId": collection_id,
                    "resolvedType": resolved_type,
                    "valuesByMode": values_by_mode,
                    "remote": False,
                    "description": "",
                }

            collections[collection_id] = {
                "id": collection_id,
                "name": collection_name,
                "modes": modes,
                "defaultModeId": modes[0]["modeId"],
                "remote": False,
                "variableIds": variable_ids,
            }

        for variable_id, mode_id, target_name in pending_aliases:
            variables[variable_id]["valuesByMode"][mode_id] = {
                "type": ALIAS_TYPE,
                "id": ids_by_name[target_name],
            }

        return {
            "status": 200,
            "error": False,
            "meta": {"variableCollections": collections, "variables": variables},
        }


def generate_sample_payload(seed: int = 42, mode_names: tuple[str, ...] = ("Light",)) -> dict[str, Any]:
    """Convenience wrapper returning the default sample payload."""
    return MockPayloadGenerator(seed=seed).generate_payload(mode_names=mode_names)
