"""
FastAPI layer for CSS export.

Provides REST endpoints for:
- Health checks
- Exporting variables as CSS (the plugin UI's ``export-css`` request)
"""

import logging
from typing import Callable, Literal, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from . import __version__
from .config import ExportConfig
from .exceptions import ProviderError
from .exporter import EXPORT_REQUEST, handle_message
from .providers import FigmaProvider, VariableProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], VariableProvider]


# Pydantic models for API
class ExportRequest(BaseModel):
    """Request to export variables as CSS."""

    add_px: bool = Field(False, alias="addPx")

    model_config = {"populate_by_name": True}


class ExportResponse(BaseModel):
    """Reply to an export request; ``type`` tells success from failure."""

    type: Literal["exported-css", "error"]
    css: Optional[str] = None
    message: Optional[str] = None
    warnings: list[str] = []


def create_app(
    provider_factory: Optional[ProviderFactory] = None,
    config: Optional[ExportConfig] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        provider_factory: Returns a fresh provider per request; defaults to
            a FigmaProvider configured from the environment
        config: Base export configuration (group order, px group)

    Returns:
        Configured FastAPI app
    """
    config = config or ExportConfig()
    provider_factory = provider_factory or FigmaProvider.from_env

    app = FastAPI(
        title="varsheet API",
        description="Export design-token variables as CSS custom properties",
        version=__version__,
    )

    # Health check
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.post("/export", response_model=ExportResponse)
    async def export(request: ExportRequest):
        """
        Export variables as CSS.

        Always answers 200; the reply ``type`` carries the outcome, as in the
        plugin message protocol.
        """
        try:
            provider = provider_factory()
        except ProviderError as e:
            logger.error(f"Could not create provider: {e}")
            return ExportResponse(type="error", message=f"Export failed: {e.message}")

        try:
            reply = await handle_message(
                {"type": EXPORT_REQUEST, "addPx": request.add_px},
                provider,
                config,
            )
        finally:
            aclose = getattr(provider, "aclose", None)
            if aclose is not None:
                await aclose()

        return ExportResponse(**reply)

    return app
