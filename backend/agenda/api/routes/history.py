"""History API route."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from agenda.api.schemas.history import HistoryResponse
from agenda.db.deps import get_db
from agenda.observability.metrics import log_metric
from agenda.observability.tracing import trace
from agenda.services.history_service import build_history

router = APIRouter()


@router.get("/history", response_model=HistoryResponse, tags=["history"])
def get_history(request: Request, db: Session = Depends(get_db)) -> HistoryResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("history.list", request_id=request_id):
        history = build_history(db)

    log_metric("history.weeks.count", len(history.weeks))
    return HistoryResponse(
        weeks=history.weeks,
        daily_dates=history.daily_dates,
        review_dates=history.review_dates,
        request_id=request_id or "",
    )
