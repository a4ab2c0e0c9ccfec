"""Document persistence for weekly agendas, daily check-ins and weekly reviews."""
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from agenda.api.schemas.daily_ops import DailyOpsPayload
from agenda.api.schemas.review import WeeklyReviewPayload
from agenda.api.schemas.weekly_plan import WeeklyAgendaPayload
from agenda.db.models.daily_ops import DailyOps
from agenda.db.models.weekly_agenda import WeeklyAgenda
from agenda.db.models.weekly_review import WeeklyReview


# ---------------------------------------------------------------------------
# Weekly agendas
# ---------------------------------------------------------------------------

def get_weekly_agenda(db: Session, week_of: date) -> WeeklyAgendaPayload | None:
    row = db.get(WeeklyAgenda, week_of)
    if not row:
        return None
    return WeeklyAgendaPayload.model_validate(row.data)


def save_weekly_agenda(db: Session, agenda: WeeklyAgendaPayload) -> WeeklyAgendaPayload:
    """Upsert the agenda keyed by its Monday; the last write wins."""
    stored = agenda.model_copy(update={"updated_at": _now()})
    document = _dump(stored)
    row = db.get(WeeklyAgenda, stored.week_of)
    if row:
        row.data = document
    else:
        row = WeeklyAgenda(week_of=stored.week_of, data=document)
        db.add(row)
    db.commit()
    return stored


def list_weekly_agendas(db: Session) -> List[date]:
    rows = db.query(WeeklyAgenda.week_of).order_by(WeeklyAgenda.week_of.desc()).all()
    return [row.week_of for row in rows]


# ---------------------------------------------------------------------------
# Daily check-ins
# ---------------------------------------------------------------------------

def get_daily_ops(db: Session, day: date) -> DailyOpsPayload | None:
    row = db.get(DailyOps, day)
    if not row:
        return None
    return DailyOpsPayload.model_validate(row.data)


def save_daily_ops(db: Session, ops: DailyOpsPayload) -> DailyOpsPayload:
    stored = ops.model_copy(update={"updated_at": _now()})
    document = _dump(stored)
    row = db.get(DailyOps, stored.date)
    if row:
        row.week_of = stored.week_of
        row.data = document
    else:
        row = DailyOps(date=stored.date, week_of=stored.week_of, data=document)
        db.add(row)
    db.commit()
    return stored


def list_daily_ops(db: Session) -> List[date]:
    rows = db.query(DailyOps.date).order_by(DailyOps.date.desc()).all()
    return [row.date for row in rows]


# ---------------------------------------------------------------------------
# Weekly reviews
# ---------------------------------------------------------------------------

def get_weekly_review(db: Session, week_of: date) -> WeeklyReviewPayload | None:
    row = db.get(WeeklyReview, week_of)
    if not row:
        return None
    return WeeklyReviewPayload.model_validate(row.data)


def save_weekly_review(db: Session, review: WeeklyReviewPayload) -> WeeklyReviewPayload:
    stored = review.model_copy(update={"updated_at": _now()})
    document = _dump(stored)
    row = db.get(WeeklyReview, stored.week_of)
    if row:
        row.data = document
    else:
        row = WeeklyReview(week_of=stored.week_of, data=document)
        db.add(row)
    db.commit()
    return stored


def list_weekly_reviews(db: Session) -> List[date]:
    rows = db.query(WeeklyReview.week_of).order_by(WeeklyReview.week_of.desc()).all()
    return [row.week_of for row in rows]


def _dump(document) -> dict:
    return document.model_dump(mode="json", by_alias=True)


def _now() -> datetime:
    return datetime.now(timezone.utc)
