"""Schemas for the history and week summary views."""
from __future__ import annotations

from datetime import date
from typing import Dict, List

from agenda.api.schemas.base import DocumentModel


class WeekSummaryPayload(DocumentModel):
    week_of: date
    label: str
    is_current: bool
    total_hours: float
    task_count: int
    done_count: int
    blocked_count: int
    unscheduled_count: int
    has_review: bool
    category_breakdown: Dict[str, float]
    daily_entries: List[date]


class WeekSummaryResponse(WeekSummaryPayload):
    request_id: str


class HistoryResponse(DocumentModel):
    weeks: List[WeekSummaryPayload]
    daily_dates: List[date]
    review_dates: List[date]
    request_id: str
