"""
Analytics Services Package

Contains the core computation logic:
- review: SM-2 spaced repetition scheduling
- estimate_one_rep_max: 1RM formula strategies (Epley, Brzycki)
- compute_trend: Progressive overload trend over recent top sets
"""

from .review_scheduler import (
    Grade,
    GRADE_LABELS,
    ReviewState,
    new_review_state,
    review,
    is_due,
    due_items,
)
from .one_rep_max import (
    InvalidInput,
    OneRepMaxStrategy,
    EpleyStrategy,
    BrzyckiStrategy,
    get_strategy,
    estimate_one_rep_max,
)
from .overload_trend import (
    SetSample,
    OneRepMaxPoint,
    top_sets,
    compute_trend,
    fit_trend,
    one_rep_max_history,
)

__all__ = [
    'Grade',
    'GRADE_LABELS',
    'ReviewState',
    'new_review_state',
    'review',
    'is_due',
    'due_items',
    'InvalidInput',
    'OneRepMaxStrategy',
    'EpleyStrategy',
    'BrzyckiStrategy',
    'get_strategy',
    'estimate_one_rep_max',
    'SetSample',
    'OneRepMaxPoint',
    'top_sets',
    'compute_trend',
    'fit_trend',
    'one_rep_max_history',
]
