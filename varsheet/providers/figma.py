"""
Figma REST API provider.

Fetches a file's local variables once and serves lookups from memory:

    config = FigmaConfig.from_env()
    async with FigmaProvider(config) as provider:
        css = await export_css(provider)

Requires a personal access token with ``file_variables:read`` scope
(Figma Enterprise plans).
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

try:
    import httpx
    HAS_HTTPX = True
except ImportError:
    HAS_HTTPX = False

from ..exceptions import FigmaAPIError
from ..models import Variable, VariableCollection
from .local import LocalVariablesProvider

logger = logging.getLogger(__name__)

FIGMA_API_URL = "https://api.figma.com/v1"


@dataclass
class FigmaConfig:
    """Connection settings for the Figma REST API."""

    access_token: str = ""
    file_key: str = ""
    base_url: str = FIGMA_API_URL
    timeout: float = 30.0
    include_remote: bool = False

    @property
    def is_valid(self) -> bool:
        """Whether both a token and a file key are set."""
        return bool(self.access_token) and bool(self.file_key)

    @classmethod
    def from_env(cls) -> FigmaConfig:
        """
        Load from FIGMA_ACCESS_TOKEN, FIGMA_FILE_KEY, FIGMA_API_URL and FIGMA_TIMEOUT.

        Raises:
            FigmaAPIError: If FIGMA_TIMEOUT is not a number
        """
        timeout = os.environ.get("FIGMA_TIMEOUT", "")
        try:
            timeout_seconds = float(timeout) if timeout else 30.0
        except ValueError as e:
            raise FigmaAPIError(f"Invalid FIGMA_TIMEOUT: {timeout!r}", cause=e) from e

        return cls(
            access_token=os.environ.get("FIGMA_ACCESS_TOKEN", ""),
            file_key=os.environ.get("FIGMA_FILE_KEY", ""),
            base_url=os.environ.get("FIGMA_API_URL", "") or FIGMA_API_URL,
            timeout=timeout_seconds,
        )


class FigmaProvider:
    """
    Variable provider backed by the Figma REST API.

    The variables payload is fetched on first use and cached for the
    lifetime of the provider, so one provider equals one snapshot.
    """

    def __init__(self, config: FigmaConfig, client: Optional[Any] = None):
        """
        Initialize provider.

        Args:
            config: Figma connection settings
            client: Pre-built ``httpx.AsyncClient`` (mainly for tests)

        Raises:
            ImportError: If httpx is not installed
            FigmaAPIError: If the token or file key is missing
        """
        if not HAS_HTTPX:
            raise ImportError("httpx required for FigmaProvider. Install with: pip install httpx")
        if not config.access_token:
            raise FigmaAPIError("access_token required")
        if not config.file_key:
            raise FigmaAPIError("file_key required")

        self.config = config
        self._client = client or httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "X-Figma-Token": config.access_token,
                "Accept": "application/json",
            },
            timeout=config.timeout,
        )
        self._snapshot: Optional[LocalVariablesProvider] = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_env(cls) -> FigmaProvider:
        """Create provider from environment variables."""
        return cls(FigmaConfig.from_env())

    async def get_local_variables(self) -> dict[str, Any]:
        """Fetch the raw local-variables payload for the configured file."""
        path = f"/files/{self.config.file_key}/variables/local"
        try:
            response = await self._client.get(path)
        except httpx.TimeoutException as e:
            raise FigmaAPIError(
                f"Timed out fetching variables after {self.config.timeout}s", cause=e
            ) from e
        except httpx.HTTPError as e:
            raise FigmaAPIError(f"Failed to get variables: {e}", cause=e) from e

        if response.status_code != 200:
            raise FigmaAPIError(
                f"Failed to get variables: {response.status_code} {response.text}",
                status_code=response.status_code,
            )
        logger.debug(f"Fetched local variables for file {self.config.file_key}")
        return response.json()

    async def _load(self) -> LocalVariablesProvider:
        async with self._lock:
            if self._snapshot is None:
                payload = await self.get_local_variables()
                self._snapshot = LocalVariablesProvider.from_payload(
                    payload, include_remote=self.config.include_remote
                )
            return self._snapshot

    async def list_variable_collections(self) -> list[VariableCollection]:
        snapshot = await self._load()
        return await snapshot.list_variable_collections()

    async def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        snapshot = await self._load()
        return await snapshot.get_variable_by_id(variable_id)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> FigmaProvider:
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()
