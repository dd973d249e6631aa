"""
Strength Router
API endpoints for one-rep max estimates and progressive overload trends
"""

from datetime import date
from typing import List, Optional

import structlog
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from config import DEFAULT_LAST_N, ONE_REP_MAX_FORMULA
from services import (
    InvalidInput,
    SetSample,
    estimate_one_rep_max,
    fit_trend,
    get_strategy,
    one_rep_max_history,
    top_sets,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/strength", tags=["Strength"])

FORMULA_PATTERN = "^(epley|brzycki)$"


class SetSampleModel(BaseModel):
    session_id: str
    session_date: date
    weight: float = Field(..., gt=0)
    reps: int = Field(..., ge=1)

    def to_sample(self) -> SetSample:
        return SetSample(
            session_id=self.session_id,
            session_date=self.session_date,
            weight=self.weight,
            reps=self.reps,
        )


class TrendRequest(BaseModel):
    samples: List[SetSampleModel]
    last_n: Optional[int] = Field(default=None, ge=1)
    y_axis: str = Field(default="weight", pattern="^(weight|one_rep_max)$")
    formula: Optional[str] = Field(default=None, pattern=FORMULA_PATTERN)


class HistoryRequest(BaseModel):
    samples: List[SetSampleModel]
    last_n: Optional[int] = Field(default=None, ge=1)
    formula: Optional[str] = Field(default=None, pattern=FORMULA_PATTERN)


@router.get("/1rm/calculate")
async def calculate_one_rep_max(
    weight: float = Query(..., gt=0),
    reps: int = Query(..., ge=1),
    formula: str = Query(default=ONE_REP_MAX_FORMULA, pattern=FORMULA_PATTERN)
):
    """
    Calculate estimated 1RM.

    - **weight**: Weight lifted
    - **reps**: Number of reps completed
    - **formula**: Formula to use (epley, brzycki)
    """
    try:
        result = estimate_one_rep_max(weight, reps, get_strategy(formula))
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "weight": weight,
        "reps": reps,
        "formula": formula,
        "estimated_1rm": round(result, 1)
    }


@router.post("/trend")
async def overload_trend(request: TrendRequest):
    """
    Progressive overload trend over the most recent sessions.

    Each session is reduced to its heaviest set, then a line is fitted over
    the last N sessions. A positive slope means the lifter is progressing.

    - **samples**: Sets for one exercise
    - **last_n**: Sessions to analyze (defaults to DEFAULT_LAST_N)
    - **y_axis**: Fit raw top-set weight or its estimated 1RM
    """
    last_n = request.last_n or DEFAULT_LAST_N
    samples = [s.to_sample() for s in request.samples]

    try:
        strategy = None
        if request.y_axis == "one_rep_max":
            strategy = get_strategy(request.formula or ONE_REP_MAX_FORMULA)
        top = top_sets(samples, last_n)
        slope = fit_trend(top, strategy)
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=str(e))

    sessions_used = len(top)
    logger.info("trend_computed",
        samples=len(samples),
        sessions_used=sessions_used,
        y_axis=request.y_axis,
        slope=round(slope, 4),
    )

    return {
        "last_n": last_n,
        "sessions_used": sessions_used,
        "y_axis": request.y_axis,
        "slope": slope,
        "direction": "up" if slope > 0 else "down" if slope < 0 else "flat"
    }


@router.post("/1rm/history")
async def one_rep_max_stats(request: HistoryRequest):
    """
    Estimated 1RM of each of the most recent sessions, oldest first.

    - **samples**: Sets for one exercise
    - **last_n**: Sessions to include (defaults to DEFAULT_LAST_N)
    - **formula**: Formula to use (epley, brzycki)
    """
    last_n = request.last_n or DEFAULT_LAST_N
    formula = request.formula or ONE_REP_MAX_FORMULA
    samples = [s.to_sample() for s in request.samples]

    try:
        points = one_rep_max_history(samples, last_n, get_strategy(formula))
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info("one_rep_max_history", samples=len(samples), sessions=len(points))

    return [
        {
            "session_id": point.session_id,
            "session_date": point.session_date.isoformat(),
            "one_rep_max": round(point.one_rep_max, 1)
        }
        for point in points
    ]
