"""Tracing context manager used around route operations."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from time import perf_counter
from typing import Any, Dict, Iterator

from agenda.observability.client import get_opik_client

logger = logging.getLogger(__name__)


@contextmanager
def trace(name: str, *, metadata: Dict[str, Any] | None = None, request_id: str | None = None) -> Iterator[None]:
    """Time the wrapped block and forward it to Opik when a client is configured."""
    client = get_opik_client()
    span_metadata = {**(metadata or {}), "request_id": request_id}
    opik_trace = client.trace(name=name, metadata=span_metadata) if client else None
    start = perf_counter()
    failed = False
    try:
        yield
    except Exception:
        failed = True
        raise
    finally:
        duration_ms = (perf_counter() - start) * 1000
        if opik_trace is not None:
            opik_trace.end()
        logger.debug("trace %s finished (failed=%s, duration_ms=%0.2f)", name, failed, duration_ms)
