"""Schemas for daily check-ins."""
from __future__ import annotations

import datetime as dt
from typing import List, Literal, Optional

from pydantic import Field

from agenda.api.schemas.base import DocumentModel
from agenda.api.schemas.weekly_plan import TaskStatus

Energy = Literal["high", "medium", "low"]


class DailyTaskUpdatePayload(DocumentModel):
    task_id: str
    status: TaskStatus
    note: str = ""


class DailyOpsPayload(DocumentModel):
    date: dt.date
    week_of: dt.date
    yesterday: str = ""
    today: str = ""
    blockers: str = ""
    energy: Energy = "medium"
    task_updates: List[DailyTaskUpdatePayload] = Field(default_factory=list)
    created_at: dt.datetime
    updated_at: dt.datetime


class DailyOpsRequest(DocumentModel):
    week_of: Optional[dt.date] = None
    yesterday: str = ""
    today: str = ""
    blockers: str = ""
    energy: Energy = "medium"
    task_updates: List[DailyTaskUpdatePayload] = Field(default_factory=list)
    created_at: Optional[dt.datetime] = None


class DailyOpsResponse(DailyOpsPayload):
    updated_task_ids: List[str] = Field(default_factory=list)
    request_id: str
