"""Weekly review API routes."""
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from agenda.api.schemas.review import WeeklyReviewRequest, WeeklyReviewResponse
from agenda.db.deps import get_db
from agenda.observability.metrics import log_metric
from agenda.observability.tracing import trace
from agenda.services.agenda_store import get_weekly_review
from agenda.services.weekly_plan_service import save_review

router = APIRouter()


@router.get("/reviews/{week_of}", response_model=WeeklyReviewResponse, tags=["reviews"])
def get_review(week_of: date, request: Request, db: Session = Depends(get_db)) -> WeeklyReviewResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("reviews.get", metadata={"week_of": week_of.isoformat()}, request_id=request_id):
        review = get_weekly_review(db, week_of)
    if not review:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Weekly review not found")
    return WeeklyReviewResponse(**review.model_dump(), request_id=request_id or "")


@router.post("/reviews/{week_of}", response_model=WeeklyReviewResponse, tags=["reviews"])
def save_review_endpoint(
    week_of: date,
    payload: WeeklyReviewRequest,
    request: Request,
    db: Session = Depends(get_db),
) -> WeeklyReviewResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("reviews.save", metadata={"week_of": week_of.isoformat()}, request_id=request_id):
        try:
            review = save_review(db, week_of=week_of, request=payload)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    log_metric("reviews.save.success", 1, metadata={"week_of": week_of.isoformat()})
    log_metric("reviews.save.completed", len(review.completed_task_ids), metadata={"week_of": week_of.isoformat()})
    return WeeklyReviewResponse(**review.model_dump(), request_id=request_id or "")
