"""Schemas for weekly reviews."""
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from agenda.api.schemas.base import DocumentModel


class WeeklyReviewPayload(DocumentModel):
    week_of: date
    accomplishments: str = ""
    difficulties: str = ""
    learnings: str = ""
    next_week_focus: str = ""
    completed_task_ids: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class WeeklyReviewRequest(DocumentModel):
    accomplishments: str = ""
    difficulties: str = ""
    learnings: str = ""
    next_week_focus: str = ""
    completed_task_ids: Optional[List[str]] = None
    created_at: Optional[datetime] = None


class WeeklyReviewResponse(WeeklyReviewPayload):
    request_id: str
