"""
Pytest fixtures for varsheet tests.
"""

import asyncio
from typing import Any, Optional

import pytest

from varsheet.mock import MockPayloadGenerator, generate_sample_payload
from varsheet.models import ModeValue, Variable, VariableCollection, parse_value
from varsheet.providers import LocalVariablesProvider


class ScriptedProvider:
    """
    Provider wrapper that delays or fails chosen lookups.

    Lets tests make fetches complete out of order and simulate host failures.
    """

    def __init__(
        self,
        inner: LocalVariablesProvider,
        delays: Optional[dict[str, float]] = None,
        fail_on: Optional[str] = None,
        fail_listing: bool = False,
    ):
        self.inner = inner
        self.delays = delays or {}
        self.fail_on = fail_on
        self.fail_listing = fail_listing
        self.requested: list[str] = []
        self.completed: list[str] = []

    async def list_variable_collections(self) -> list[VariableCollection]:
        if self.fail_listing:
            raise ConnectionError("host unavailable")
        return await self.inner.list_variable_collections()

    async def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        self.requested.append(variable_id)
        await asyncio.sleep(self.delays.get(variable_id, 0))
        if variable_id == self.fail_on:
            raise TimeoutError(f"lookup of {variable_id} timed out")
        self.completed.append(variable_id)
        return await self.inner.get_variable_by_id(variable_id)


def make_variable(
    variable_id: str,
    name: str,
    resolved_type: str,
    *values: Any,
    modes: tuple[str, ...] = ("m1", "m2", "m3"),
) -> Variable:
    """Build a Variable with one value per mode, in mode order."""
    return Variable(
        id=variable_id,
        name=name,
        resolved_type=resolved_type,
        values_by_mode=tuple(
            ModeValue(mode_id, parse_value(value)) for mode_id, value in zip(modes, values)
        ),
    )


def make_provider(*collections: tuple[str, list[Variable]], extra: tuple[Variable, ...] = ()) -> LocalVariablesProvider:
    """Build a provider from (collection name, variables) pairs."""
    built = []
    variables = list(extra)
    for index, (name, members) in enumerate(collections):
        built.append(VariableCollection(
            id=f"c{index}",
            name=name,
            variable_ids=tuple(v.id for v in members),
        ))
        variables.extend(members)
    return LocalVariablesProvider(built, variables)


@pytest.fixture
def sample_payload() -> dict:
    """Figma local-variables payload with the default design system."""
    return generate_sample_payload(seed=42)


@pytest.fixture
def sample_provider(sample_payload: dict) -> LocalVariablesProvider:
    """Provider serving the sample payload."""
    return LocalVariablesProvider.from_payload(sample_payload)


@pytest.fixture
def mock_generator() -> MockPayloadGenerator:
    """Create mock payload generator with fixed seed."""
    return MockPayloadGenerator(seed=42)


@pytest.fixture
def empty_provider() -> LocalVariablesProvider:
    """Provider with no collections at all."""
    return LocalVariablesProvider()


# Expected export of the sample payload with add_px disabled
SAMPLE_CSS = (
    "\n/* Theme colors */\n"
    "--Primary: #3366ff;\n"
    "--Primary hover: #0033cc;\n"
    "--Overlay: rgba(0, 0, 0, 0.50);\n"
    "\n/* Content */\n"
    "--Font family: Inter, sans-serif;\n"
    "--Show banner: true;\n"
    "\n/* Font sizes */\n"
    "--Body: 16;\n"
    "--Heading: 32;\n"
    "\n/* Support colors */\n"
    "--Success: #009933;\n"
    "--Error: #ff0000;\n"
    "\n/* UI Sizes */\n"
    "--Radius Small: 8;\n"
    "--Radius Large: 16.5;\n"
    "\n/* UI Colors */\n"
    "--Surface: #ffffff;\n"
    "\n/* Buttons */\n"
    "--Primary: var(--Primary);\n"
    "--Primary hover: var(--Primary hover);\n"
    "\n/* UI Borders */\n"
    "--Width: 1;\n"
)


@pytest.fixture
def sample_css() -> str:
    """Expected CSS for the sample payload (add_px off)."""
    return SAMPLE_CSS


@pytest.fixture
def variable_factory():
    """Factory for Variable objects: ``variable_factory(id, name, type, *values)``."""
    return make_variable


@pytest.fixture
def provider_factory():
    """Factory for providers: ``provider_factory(("Collection", [variables]), ...)``."""
    return make_provider


@pytest.fixture
def scripted_provider():
    """The ScriptedProvider class, for delaying or failing lookups."""
    return ScriptedProvider
