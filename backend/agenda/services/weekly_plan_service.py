"""Save flows for weekly plans, daily check-ins and reviews."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import List, Sequence

from sqlalchemy.orm import Session

from agenda.api.schemas.daily_ops import DailyOpsPayload, DailyOpsRequest
from agenda.api.schemas.review import WeeklyReviewPayload, WeeklyReviewRequest
from agenda.api.schemas.weekly_plan import WeeklyAgendaPayload, WeeklyTaskPayload
from agenda.core.config import settings
from agenda.services import agenda_store
from agenda.services.scheduler import schedule_tasks
from agenda.services.week_calendar import get_monday_of, is_monday
from agenda.services.working_hours import get_working_hours

logger = logging.getLogger(__name__)


@dataclass
class DailyCheckInResult:
    ops: DailyOpsPayload
    updated_task_ids: List[str]


def save_weekly_plan(
    db: Session,
    *,
    week_of: date,
    tasks: Sequence[WeeklyTaskPayload],
    created_at: datetime | None = None,
) -> WeeklyAgendaPayload:
    """
    Schedule any unslotted tasks and persist the agenda for ``week_of``.

    Raises ValueError when ``week_of`` is not a Monday. The stored ``created_at`` is kept when
    the caller does not supply one.
    """
    if not is_monday(week_of):
        raise ValueError("week_of must be a Monday")

    scheduled = schedule_tasks(
        tasks,
        week_of,
        hours=get_working_hours(),
        reserve_existing_slots=settings.reserve_existing_slots,
    )
    if created_at is None:
        existing = agenda_store.get_weekly_agenda(db, week_of)
        created_at = existing.created_at if existing else _now()

    agenda = WeeklyAgendaPayload(
        week_of=week_of,
        tasks=scheduled,
        created_at=created_at,
        updated_at=_now(),
    )
    return agenda_store.save_weekly_agenda(db, agenda)


def save_daily_check_in(db: Session, *, day: date, request: DailyOpsRequest) -> DailyCheckInResult:
    """Persist the check-in for ``day`` and push its task status changes onto the week's agenda."""
    existing = agenda_store.get_daily_ops(db, day)
    created_at = request.created_at or (existing.created_at if existing else _now())
    ops = DailyOpsPayload(
        date=day,
        week_of=request.week_of or get_monday_of(day),
        yesterday=request.yesterday,
        today=request.today,
        blockers=request.blockers,
        energy=request.energy,
        task_updates=request.task_updates,
        created_at=created_at,
        updated_at=_now(),
    )
    stored = agenda_store.save_daily_ops(db, ops)
    before = agenda_store.get_weekly_agenda(db, stored.week_of)
    updated_ids = _changed_task_ids(before, stored) if before else []
    apply_task_updates(db, stored)
    return DailyCheckInResult(ops=stored, updated_task_ids=updated_ids)


def apply_task_updates(db: Session, ops: DailyOpsPayload) -> WeeklyAgendaPayload | None:
    """
    Copy the check-in's status updates onto the week's agenda.

    Returns the agenda after the updates, re-saved only when a status changed, or None when
    no agenda exists for ``ops.week_of``.
    """
    agenda = agenda_store.get_weekly_agenda(db, ops.week_of)
    if agenda is None:
        if ops.task_updates:
            logger.info("No agenda for week %s; skipping %s task updates", ops.week_of, len(ops.task_updates))
        return None

    changed = set(_changed_task_ids(agenda, ops))
    if not changed:
        return agenda

    statuses = {update.task_id: update.status for update in ops.task_updates}
    tasks: List[WeeklyTaskPayload] = [
        task.model_copy(update={"status": statuses[task.id]}) if task.id in changed else task
        for task in agenda.tasks
    ]
    return save_weekly_plan(db, week_of=agenda.week_of, tasks=tasks, created_at=agenda.created_at)


def _changed_task_ids(agenda: WeeklyAgendaPayload, ops: DailyOpsPayload) -> List[str]:
    statuses = {update.task_id: update.status for update in ops.task_updates}
    return [
        task.id
        for task in agenda.tasks
        if task.id in statuses and statuses[task.id] != task.status
    ]


def save_review(db: Session, *, week_of: date, request: WeeklyReviewRequest) -> WeeklyReviewPayload:
    """Persist the review; completed task ids default to the agenda's done tasks."""
    if not is_monday(week_of):
        raise ValueError("week_of must be a Monday")

    completed = request.completed_task_ids
    if completed is None:
        agenda = agenda_store.get_weekly_agenda(db, week_of)
        completed = [task.id for task in agenda.tasks if task.status == "done"] if agenda else []

    existing = agenda_store.get_weekly_review(db, week_of)
    created_at = request.created_at or (existing.created_at if existing else _now())
    review = WeeklyReviewPayload(
        week_of=week_of,
        accomplishments=request.accomplishments,
        difficulties=request.difficulties,
        learnings=request.learnings,
        next_week_focus=request.next_week_focus,
        completed_task_ids=completed,
        created_at=created_at,
        updated_at=_now(),
    )
    return agenda_store.save_weekly_review(db, review)


def _now() -> datetime:
    return datetime.now(timezone.utc)
