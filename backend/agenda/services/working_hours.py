"""Daily working windows available to the scheduler."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from agenda.core.config import settings
from agenda.services.week_calendar import time_to_minutes


@dataclass(frozen=True)
class WorkingHours:
    """Morning and afternoon windows; the gap between them is lunch."""

    morning_start: str = "09:00"
    morning_end: str = "13:30"
    afternoon_start: str = "15:30"
    afternoon_end: str = "20:00"

    def __post_init__(self) -> None:
        bounds = [
            time_to_minutes(self.morning_start),
            time_to_minutes(self.morning_end),
            time_to_minutes(self.afternoon_start),
            time_to_minutes(self.afternoon_end),
        ]
        if not (bounds[0] < bounds[1] <= bounds[2] < bounds[3]):
            raise ValueError(
                "Working hours must satisfy morning_start < morning_end <= afternoon_start < afternoon_end"
            )

    @property
    def lunch_start(self) -> str:
        return self.morning_end

    @property
    def lunch_end(self) -> str:
        return self.afternoon_start

    def morning_minutes(self) -> Tuple[int, int]:
        return time_to_minutes(self.morning_start), time_to_minutes(self.morning_end)

    def afternoon_minutes(self) -> Tuple[int, int]:
        return time_to_minutes(self.afternoon_start), time_to_minutes(self.afternoon_end)

    def lunch_minutes(self) -> Tuple[int, int]:
        return time_to_minutes(self.lunch_start), time_to_minutes(self.lunch_end)


DEFAULT_WORKING_HOURS = WorkingHours()


class WorkingHoursConfigError(RuntimeError):
    """The configured working-hour settings do not describe valid windows."""


def get_working_hours() -> WorkingHours:
    """
    Build working hours from application settings.

    Raises WorkingHoursConfigError when the settings describe invalid windows.
    """
    try:
        return WorkingHours(
            morning_start=settings.morning_start,
            morning_end=settings.morning_end,
            afternoon_start=settings.afternoon_start,
            afternoon_end=settings.afternoon_end,
        )
    except ValueError as exc:
        raise WorkingHoursConfigError(f"Invalid working hours configuration: {exc}") from exc
