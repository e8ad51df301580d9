"""
Message bridge between a host UI and the token pipeline.

Mirrors the plugin's UI messaging contract as a pure request -> response
function:

- ``scan-document``  -> ``scan-complete`` with style counts
- ``export-tokens``  -> ``export-result`` with the document and its counts
- ``close-plugin``   -> ``closed``

This is the one boundary that turns exceptions into messages: any failure
while scanning or exporting becomes a single ``error`` response, never a
partial document.
"""

from __future__ import annotations

import logging
from typing import Any

from .document import Clock, export_tokens, utc_now
from .snapshot_loader import StyleSource, scan_summary

logger = logging.getLogger(__name__)

SCAN_DOCUMENT = "scan-document"
EXPORT_TOKENS = "export-tokens"
CLOSE_PLUGIN = "close-plugin"


def _error(prefix: str, exc: Exception) -> dict[str, Any]:
    detail = str(exc) or "Unknown error"
    return {"type": "error", "message": f"{prefix}: {detail}"}


def handle_scan(source: StyleSource) -> dict[str, Any]:
    try:
        stats = scan_summary(source)
    except Exception as e:
        logger.exception("Error scanning document")
        return _error("Error scanning document", e)
    return {"type": "scan-complete", "stats": stats.model_dump()}


def handle_export(source: StyleSource, *, clock: Clock = utc_now) -> dict[str, Any]:
    try:
        result = export_tokens(source, clock=clock)
    except Exception as e:
        logger.exception("Error generating tokens")
        return _error("Error generating tokens", e)

    response: dict[str, Any] = {
        "type": "export-result",
        "tokens": result.document.to_dict(),
        "stats": result.stats.model_dump(),
    }
    if result.collisions:
        response["warnings"] = [collision.describe() for collision in result.collisions]
    return response


def handle_message(
    message: dict[str, Any],
    source: StyleSource,
    *,
    clock: Clock = utc_now,
) -> dict[str, Any] | None:
    """Dispatch one UI message.

    Args:
        message: Message from the UI; only ``type`` is read.
        source: Style source to scan or export.
        clock: Export clock, forwarded to the assembler.

    Returns:
        Response message, or None for message types the bridge ignores.
    """
    message_type = message.get("type")

    if message_type == SCAN_DOCUMENT:
        return handle_scan(source)
    if message_type == EXPORT_TOKENS:
        return handle_export(source, clock=clock)
    if message_type == CLOSE_PLUGIN:
        return {"type": "closed"}

    logger.debug("Ignoring message of type %r", message_type)
    return None
