"""ORM models exposed for metadata discovery."""
from agenda.db.models.daily_ops import DailyOps
from agenda.db.models.weekly_agenda import WeeklyAgenda
from agenda.db.models.weekly_review import WeeklyReview

__all__ = [
    "DailyOps",
    "WeeklyAgenda",
    "WeeklyReview",
]
