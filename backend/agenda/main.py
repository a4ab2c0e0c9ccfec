"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request

from agenda.api.routes import daily, history, reviews, weeks
from agenda.core.config import settings
from agenda.core.logging import configure_logging
from agenda.db import models  # noqa: F401  registers tables on Base.metadata
from agenda.db.base import Base
from agenda.db.session import engine
from agenda.observability.client import init_opik
from agenda.services.working_hours import get_working_hours

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(log_level=settings.log_level)
    init_opik()
    hours = get_working_hours()
    logger.info(
        "Working hours: morning %s-%s, afternoon %s-%s (reserve_existing_slots=%s)",
        hours.morning_start,
        hours.morning_end,
        hours.afternoon_start,
        hours.afternoon_end,
        settings.reserve_existing_slots,
    )
    if settings.auto_create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ensured")
    yield


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)


@app.middleware("http")
async def attach_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(weeks.router)
app.include_router(daily.router)
app.include_router(reviews.router)
app.include_router(history.router)


@app.get("/health", tags=["health"])
def health_check() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":  # pragma: no cover - manual launch
    import uvicorn

    uvicorn.run("agenda.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
