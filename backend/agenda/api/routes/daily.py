"""Daily check-in API routes."""
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from agenda.api.schemas.daily_ops import DailyOpsPayload, DailyOpsRequest, DailyOpsResponse
from agenda.db.deps import get_db
from agenda.observability.metrics import log_metric
from agenda.observability.tracing import trace
from agenda.services.agenda_store import get_daily_ops
from agenda.services.weekly_plan_service import save_daily_check_in

router = APIRouter()


@router.get("/daily/{day}", response_model=DailyOpsResponse, tags=["daily"])
def get_daily(day: date, request: Request, db: Session = Depends(get_db)) -> DailyOpsResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("daily.get", metadata={"date": day.isoformat()}, request_id=request_id):
        ops = get_daily_ops(db, day)
    if not ops:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Daily check-in not found")
    return _serialize_ops(ops, [], request_id)


@router.post("/daily/{day}", response_model=DailyOpsResponse, tags=["daily"])
def save_daily(day: date, payload: DailyOpsRequest, request: Request, db: Session = Depends(get_db)) -> DailyOpsResponse:
    request_id = getattr(request.state, "request_id", None)
    metadata = {"date": day.isoformat(), "task_updates": len(payload.task_updates)}
    with trace("daily.save", metadata=metadata, request_id=request_id):
        result = save_daily_check_in(db, day=day, request=payload)

    log_metric("daily.save.success", 1, metadata={"date": day.isoformat()})
    log_metric("daily.save.tasks_updated", len(result.updated_task_ids), metadata={"date": day.isoformat()})
    return _serialize_ops(result.ops, result.updated_task_ids, request_id)


def _serialize_ops(ops: DailyOpsPayload, updated_task_ids: list[str], request_id: str | None) -> DailyOpsResponse:
    return DailyOpsResponse(
        **ops.model_dump(),
        updated_task_ids=updated_task_ids,
        request_id=request_id or "",
    )
