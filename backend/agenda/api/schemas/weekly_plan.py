"""Schemas for weekly agendas and their tasks."""
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import Field, field_validator, model_validator

from agenda.api.schemas.base import DocumentModel
from agenda.services.week_calendar import time_to_minutes

TaskCategory = Literal["personal", "management", "creation", "consumption", "ideation"]
TaskStatus = Literal["pending", "in-progress", "done", "blocked"]

# Scheduling priority, highest first.
CATEGORY_PRIORITY: Tuple[str, ...] = ("personal", "management", "creation", "consumption", "ideation")

CATEGORY_DESCRIPTIONS: Dict[str, str] = {
    "personal": "Life commitments & personal blocks",
    "management": "Meetings, calls, email, people",
    "creation": "Writing, building, coding",
    "consumption": "Reading, listening, studying",
    "ideation": "Brainstorming, journaling, reflecting",
}

TIME_PATTERN = r"^\d{2}:\d{2}$"


class TimeSlotPayload(DocumentModel):
    day: date
    start: str = Field(..., pattern=TIME_PATTERN)
    end: str = Field(..., pattern=TIME_PATTERN)

    @field_validator("start", "end")
    @classmethod
    def time_in_range(cls, value: str) -> str:
        time_to_minutes(value)
        return value

    @model_validator(mode="after")
    def end_not_before_start(self) -> "TimeSlotPayload":
        if time_to_minutes(self.end) < time_to_minutes(self.start):
            raise ValueError("Slot end must not be before its start")
        return self


class WeeklyTaskPayload(DocumentModel):
    id: str = Field(..., min_length=1)
    title: str
    category: TaskCategory
    estimated_hours: float = Field(..., ge=0, le=24 * 5)
    stakeholders: List[str] = Field(default_factory=list)
    blocks: str = ""
    requested_by: str = ""
    notes: str = ""
    scheduled_slot: Optional[TimeSlotPayload] = None
    status: TaskStatus = "pending"


class WeeklyAgendaPayload(DocumentModel):
    week_of: date
    tasks: List[WeeklyTaskPayload] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class WeeklyAgendaRequest(DocumentModel):
    tasks: List[WeeklyTaskPayload] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class WeeklyAgendaResponse(WeeklyAgendaPayload):
    unscheduled_task_ids: List[str] = Field(default_factory=list)
    request_id: str


class GridTaskPayload(DocumentModel):
    id: str
    title: str
    category: TaskCategory
    status: TaskStatus
    start: str
    end: str


class GridDayPayload(DocumentModel):
    day: date
    day_name: str
    is_today: bool
    tasks: List[GridTaskPayload]


class WeekGridResponse(DocumentModel):
    week_of: date
    label: str
    lunch_start: str
    lunch_end: str
    days: List[GridDayPayload]
    unscheduled: List[WeeklyTaskPayload]
    request_id: str
