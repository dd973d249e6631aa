"""
Reviews Router
API endpoints for SM-2 review scheduling

Stateless: the caller sends the item's current state and stores the
returned one.
"""

from datetime import date
from typing import List, Optional

import structlog
from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from config import MIN_EASINESS_FACTOR
from services import GRADE_LABELS, Grade, ReviewState, due_items, new_review_state, review

logger = structlog.get_logger()

router = APIRouter(prefix="/reviews", tags=["Reviews"])


class ReviewStateModel(BaseModel):
    repetition_count: int = Field(..., ge=0)
    easiness_factor: float = Field(..., ge=MIN_EASINESS_FACTOR)
    interval_days: int = Field(..., ge=1)
    next_review_on: date

    def to_state(self) -> ReviewState:
        return ReviewState(
            repetition_count=self.repetition_count,
            easiness_factor=self.easiness_factor,
            interval_days=self.interval_days,
            next_review_on=self.next_review_on,
        )

    @classmethod
    def from_state(cls, state: ReviewState) -> "ReviewStateModel":
        return cls(
            repetition_count=state.repetition_count,
            easiness_factor=state.easiness_factor,
            interval_days=state.interval_days,
            next_review_on=state.next_review_on,
        )


class ReviewRequest(BaseModel):
    state: ReviewStateModel
    grade: int = Field(..., ge=0, le=5, description="Recall quality, 0 (blackout) to 5 (perfect)")
    today: Optional[date] = None


class ReviewResponse(BaseModel):
    grade: int
    grade_label: str
    state: ReviewStateModel


class DueItem(BaseModel):
    item_id: str
    state: ReviewStateModel


class DueRequest(BaseModel):
    items: List[DueItem]
    today: Optional[date] = None


@router.get("/new", response_model=ReviewStateModel)
async def create_review_state(created_on: Optional[date] = Query(default=None)):
    """
    Initial scheduling state for a new learning item.

    - **created_on**: Creation date, the item is due that day (defaults to today)
    """
    state = new_review_state(created_on or date.today())
    return ReviewStateModel.from_state(state)


@router.post("", response_model=ReviewResponse)
async def review_item(request: ReviewRequest):
    """
    Record a review and compute the item's next schedule.

    - **state**: The item's current scheduling state
    - **grade**: 0-5; below 3 resets the item to tomorrow
    - **today**: Review date (defaults to today)
    """
    today = request.today or date.today()
    updated = review(request.state.to_state(), request.grade, today)

    logger.info("review_scheduled",
        grade=request.grade,
        repetition_count=updated.repetition_count,
        interval_days=updated.interval_days,
        easiness_factor=round(updated.easiness_factor, 3),
        next_review_on=updated.next_review_on.isoformat(),
    )

    return ReviewResponse(
        grade=request.grade,
        grade_label=GRADE_LABELS[Grade(request.grade)],
        state=ReviewStateModel.from_state(updated),
    )


@router.post("/due")
async def list_due_items(request: DueRequest):
    """
    Filter items down to those due for review.

    - **items**: Item ids with their current scheduling state
    - **today**: Cutoff date, inclusive (defaults to today)
    """
    today = request.today or date.today()
    states = {item.item_id: item.state.to_state() for item in request.items}
    due = due_items(states, today)

    logger.info("due_items_listed", checked=len(states), due=len(due))

    return {
        "today": today.isoformat(),
        "due_count": len(due),
        "item_ids": due
    }
