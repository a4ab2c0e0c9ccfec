"""Lightweight metric emission through the logging pipeline."""
from __future__ import annotations

import logging
from typing import Any, Dict

logger = logging.getLogger("agenda.metrics")


def log_metric(name: str, value: float, metadata: Dict[str, Any] | None = None) -> None:
    logger.info("metric name=%s value=%s metadata=%s", name, value, metadata or {})
