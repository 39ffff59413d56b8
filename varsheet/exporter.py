"""
Export entry points.

``export_css`` is the programmatic API: it returns the full CSS text or
raises. ``handle_message`` speaks the plugin UI protocol and turns every
outcome into a reply message:

    {"type": "export-css", "addPx": true}
        -> {"type": "exported-css", "css": "..."}
        -> {"type": "error", "message": "No variables to export."}
"""

import logging
from typing import Any, Mapping, Optional

from .collector import collect_variables
from .config import ExportConfig
from .emitter import CSSEmitter
from .exceptions import EmptyInputError, ProviderError
from .providers.base import VariableProvider

logger = logging.getLogger(__name__)

EXPORT_REQUEST = "export-css"
EXPORT_REPLY = "exported-css"
ERROR_REPLY = "error"

NO_VARIABLES_MESSAGE = "No variables to export."


async def export_css(
    provider: VariableProvider,
    config: Optional[ExportConfig] = None,
    emitter: Optional[CSSEmitter] = None,
) -> str:
    """
    Export all prioritized variables as CSS custom properties.

    Args:
        provider: Source of collections and variables
        config: Group order and unit options
        emitter: Emitter to render with (exposes ``warnings`` afterwards)

    Returns:
        The complete CSS text (possibly empty if no group matched)

    Raises:
        EmptyInputError: If the provider has no collections
        ProviderError: If the provider fails; no partial output is returned
    """
    config = config or ExportConfig()
    emitter = emitter or CSSEmitter(config)
    logger.info("Starting CSS export")

    try:
        collected = await collect_variables(provider, concurrent=config.concurrent_fetch)
    except (EmptyInputError, ProviderError):
        raise
    except Exception as e:
        logger.error(f"Error fetching local variables: {type(e).__name__}: {e}")
        raise ProviderError("Failed to read variables from provider", cause=e) from e

    css = await emitter.emit(collected, provider)

    logger.info(f"CSS exported ({len(emitter.warnings)} declarations skipped)")
    return css


async def handle_message(
    message: Mapping[str, Any],
    provider: VariableProvider,
    config: Optional[ExportConfig] = None,
) -> Optional[dict[str, Any]]:
    """
    Handle a message from the plugin UI.

    Args:
        message: Message with a ``type`` key; ``export-css`` may carry ``addPx``
        provider: Source of collections and variables
        config: Base configuration; ``addPx`` from the message overrides ``add_px``

    Returns:
        Reply message, or None for message types this handler does not know
    """
    msg_type = message.get("type")
    if msg_type != EXPORT_REQUEST:
        logger.debug(f"Ignoring message of type: {msg_type}")
        return None

    config = (config or ExportConfig()).with_options(add_px=bool(message.get("addPx", False)))
    emitter = CSSEmitter(config)

    try:
        css = await export_css(provider, config, emitter=emitter)
    except EmptyInputError as e:
        logger.info(f"Nothing to export: {e.message}")
        return {"type": ERROR_REPLY, "message": NO_VARIABLES_MESSAGE}
    except ProviderError as e:
        logger.error(f"Export failed: {e}")
        return {"type": ERROR_REPLY, "message": f"Export failed: {e.message}"}

    if not css:
        logger.info("Export produced no declarations")
        return {"type": ERROR_REPLY, "message": NO_VARIABLES_MESSAGE}

    return {"type": EXPORT_REPLY, "css": css, "warnings": list(emitter.warnings)}
