"""Aggregation helpers for the history, summary and week grid endpoints."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Sequence

from sqlalchemy.orm import Session

from agenda.api.schemas.history import WeekSummaryPayload
from agenda.api.schemas.weekly_plan import (
    CATEGORY_PRIORITY,
    GridDayPayload,
    GridTaskPayload,
    WeeklyAgendaPayload,
    WeeklyTaskPayload,
)
from agenda.services import agenda_store
from agenda.services.scheduler import unscheduled_tasks
from agenda.services.week_calendar import (
    format_week_range,
    get_day_name,
    get_today,
    get_week_days,
    is_current_week,
)
from agenda.services.working_hours import get_working_hours


@dataclass
class History:
    weeks: List[WeekSummaryPayload]
    daily_dates: List[date]
    review_dates: List[date]


@dataclass
class WeekGrid:
    week_of: date
    label: str
    lunch_start: str
    lunch_end: str
    days: List[GridDayPayload]
    unscheduled: List[WeeklyTaskPayload]


def summarize_week(
    agenda: WeeklyAgendaPayload,
    *,
    has_review: bool,
    daily_dates: Sequence[date],
) -> WeekSummaryPayload:
    tasks = agenda.tasks
    breakdown: Dict[str, float] = {category: 0.0 for category in CATEGORY_PRIORITY}
    for task in tasks:
        breakdown[task.category] = breakdown.get(task.category, 0.0) + task.estimated_hours

    week_end = agenda.week_of + timedelta(days=6)
    return WeekSummaryPayload(
        week_of=agenda.week_of,
        label=format_week_range(agenda.week_of),
        is_current=is_current_week(agenda.week_of),
        total_hours=sum(task.estimated_hours for task in tasks),
        task_count=len(tasks),
        done_count=sum(1 for task in tasks if task.status == "done"),
        blocked_count=sum(1 for task in tasks if task.status == "blocked"),
        unscheduled_count=len(unscheduled_tasks(tasks)),
        has_review=has_review,
        category_breakdown=breakdown,
        daily_entries=sorted(day for day in daily_dates if agenda.week_of <= day <= week_end),
    )


def summarize_stored_week(db: Session, week_of: date) -> WeekSummaryPayload | None:
    agenda = agenda_store.get_weekly_agenda(db, week_of)
    if agenda is None:
        return None
    return summarize_week(
        agenda,
        has_review=agenda_store.get_weekly_review(db, week_of) is not None,
        daily_dates=agenda_store.list_daily_ops(db),
    )


def build_history(db: Session) -> History:
    """Summaries for every stored week, newest first, plus the check-in and review dates."""
    week_dates = agenda_store.list_weekly_agendas(db)
    daily_dates = agenda_store.list_daily_ops(db)
    review_dates = agenda_store.list_weekly_reviews(db)
    reviewed = set(review_dates)

    weeks: List[WeekSummaryPayload] = []
    for week_of in week_dates:
        agenda = agenda_store.get_weekly_agenda(db, week_of)
        if agenda is None:
            continue
        weeks.append(summarize_week(agenda, has_review=week_of in reviewed, daily_dates=daily_dates))

    return History(weeks=weeks, daily_dates=daily_dates, review_dates=review_dates)


def build_week_grid(agenda: WeeklyAgendaPayload) -> WeekGrid:
    """Group scheduled tasks by work day, ordered by start time."""
    hours = get_working_hours()
    today = get_today()
    days: List[GridDayPayload] = []
    for day in get_week_days(agenda.week_of):
        placed = sorted(
            (task for task in agenda.tasks if task.scheduled_slot and task.scheduled_slot.day == day),
            key=lambda task: task.scheduled_slot.start,
        )
        days.append(
            GridDayPayload(
                day=day,
                day_name=get_day_name(day),
                is_today=day == today,
                tasks=[
                    GridTaskPayload(
                        id=task.id,
                        title=task.title,
                        category=task.category,
                        status=task.status,
                        start=task.scheduled_slot.start,
                        end=task.scheduled_slot.end,
                    )
                    for task in placed
                ],
            )
        )

    return WeekGrid(
        week_of=agenda.week_of,
        label=format_week_range(agenda.week_of),
        lunch_start=hours.lunch_start,
        lunch_end=hours.lunch_end,
        days=days,
        unscheduled=unscheduled_tasks(agenda.tasks),
    )
