"""Opik client bootstrap."""
from __future__ import annotations

import logging

import opik

from agenda.core.config import settings

logger = logging.getLogger(__name__)

_client: opik.Opik | None = None


def init_opik() -> None:
    """Create the Opik client when tracing is enabled; otherwise leave tracing local."""
    global _client
    if not settings.opik_enabled:
        logger.info("Opik tracing disabled")
        _client = None
        return
    if not settings.opik_api_key:
        logger.warning("OPIK_ENABLED=true but OPIK_API_KEY is missing; traces stay local.")
        _client = None
        return
    try:
        _client = opik.Opik(project_name=settings.opik_project, api_key=settings.opik_api_key)
    except Exception:
        logger.exception("Failed to initialise Opik client; traces stay local.")
        _client = None
        return
    logger.info("Opik tracing enabled (project=%s)", settings.opik_project)


def get_opik_client() -> opik.Opik | None:
    return _client
