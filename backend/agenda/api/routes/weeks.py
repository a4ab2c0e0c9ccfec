"""Weekly agenda API routes."""
from __future__ import annotations

from datetime import date
from time import perf_counter

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from agenda.api.schemas.history import WeekSummaryResponse
from agenda.api.schemas.weekly_plan import (
    WeekGridResponse,
    WeeklyAgendaPayload,
    WeeklyAgendaRequest,
    WeeklyAgendaResponse,
)
from agenda.db.deps import get_db
from agenda.observability.metrics import log_metric
from agenda.observability.tracing import trace
from agenda.services.agenda_store import get_weekly_agenda
from agenda.services.history_service import build_week_grid, summarize_stored_week
from agenda.services.scheduler import unscheduled_tasks
from agenda.services.weekly_plan_service import save_weekly_plan

router = APIRouter()


@router.get("/weeks/{week_of}", response_model=WeeklyAgendaResponse, tags=["weeks"])
def get_week(week_of: date, request: Request, db: Session = Depends(get_db)) -> WeeklyAgendaResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("weeks.get", metadata={"week_of": week_of.isoformat()}, request_id=request_id):
        agenda = get_weekly_agenda(db, week_of)
    if not agenda:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Weekly agenda not found")
    return _serialize_agenda(agenda, request_id)


@router.post("/weeks/{week_of}", response_model=WeeklyAgendaResponse, tags=["weeks"])
def save_week(
    week_of: date,
    payload: WeeklyAgendaRequest,
    request: Request,
    db: Session = Depends(get_db),
) -> WeeklyAgendaResponse:
    """Auto-schedule any unslotted tasks and store the week's agenda."""
    request_id = getattr(request.state, "request_id", None)
    start = perf_counter()
    metadata = {"week_of": week_of.isoformat(), "task_count": len(payload.tasks)}
    with trace("weeks.save", metadata=metadata, request_id=request_id):
        try:
            agenda = save_weekly_plan(db, week_of=week_of, tasks=payload.tasks, created_at=payload.created_at)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    response = _serialize_agenda(agenda, request_id)
    latency_ms = (perf_counter() - start) * 1000
    log_metric("weeks.save.success", 1, metadata={"week_of": week_of.isoformat()})
    log_metric("weeks.save.unscheduled", len(response.unscheduled_task_ids), metadata={"week_of": week_of.isoformat()})
    log_metric("weeks.save.latency_ms", latency_ms, metadata={"week_of": week_of.isoformat()})
    return response


@router.get("/weeks/{week_of}/summary", response_model=WeekSummaryResponse, tags=["weeks"])
def get_week_summary(week_of: date, request: Request, db: Session = Depends(get_db)) -> WeekSummaryResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("weeks.summary", metadata={"week_of": week_of.isoformat()}, request_id=request_id):
        summary = summarize_stored_week(db, week_of)
    if not summary:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Weekly agenda not found")
    return WeekSummaryResponse(**summary.model_dump(), request_id=request_id or "")


@router.get("/weeks/{week_of}/grid", response_model=WeekGridResponse, tags=["weeks"])
def get_week_grid(week_of: date, request: Request, db: Session = Depends(get_db)) -> WeekGridResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("weeks.grid", metadata={"week_of": week_of.isoformat()}, request_id=request_id):
        agenda = get_weekly_agenda(db, week_of)
        if not agenda:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Weekly agenda not found")
        grid = build_week_grid(agenda)

    log_metric("weeks.grid.unscheduled", len(grid.unscheduled), metadata={"week_of": week_of.isoformat()})
    return WeekGridResponse(
        week_of=grid.week_of,
        label=grid.label,
        lunch_start=grid.lunch_start,
        lunch_end=grid.lunch_end,
        days=grid.days,
        unscheduled=grid.unscheduled,
        request_id=request_id or "",
    )


def _serialize_agenda(agenda: WeeklyAgendaPayload, request_id: str | None) -> WeeklyAgendaResponse:
    return WeeklyAgendaResponse(
        week_of=agenda.week_of,
        tasks=agenda.tasks,
        created_at=agenda.created_at,
        updated_at=agenda.updated_at,
        unscheduled_task_ids=[task.id for task in unscheduled_tasks(agenda.tasks)],
        request_id=request_id or "",
    )
