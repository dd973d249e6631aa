"""
Review Scheduler Service
SM-2 spaced repetition scheduling for learning items

CONCEPTS DEMONSTRATED:
1. Immutable State Transitions - each review returns a new state value
2. Graded Recall - a 0-5 grade drives interval growth or reset
3. Adaptive Growth - the easiness factor tunes how fast intervals grow

Reference: https://www.supermemo.com/en/archives1990-2015/english/ol/sm2
"""

import math
from dataclasses import dataclass, replace
from datetime import date, timedelta
from enum import IntEnum
from typing import Hashable, List, Mapping

from config import (
    FIRST_INTERVAL_DAYS,
    INITIAL_EASINESS_FACTOR,
    LAPSE_INTERVAL_DAYS,
    MIN_EASINESS_FACTOR,
    PASSING_GRADE,
    SECOND_INTERVAL_DAYS,
)


class Grade(IntEnum):
    """Quality of recall reported by the reviewer"""
    BLACKOUT = 0
    INCORRECT = 1
    INCORRECT_FAMILIAR = 2
    HARD = 3
    GOOD = 4
    PERFECT = 5


GRADE_LABELS = {
    Grade.BLACKOUT: "complete blackout",
    Grade.INCORRECT: "incorrect, answer remembered when shown",
    Grade.INCORRECT_FAMILIAR: "incorrect, answer felt familiar",
    Grade.HARD: "correct with serious difficulty",
    Grade.GOOD: "correct after hesitation",
    Grade.PERFECT: "perfect recall",
}


@dataclass(frozen=True)
class ReviewState:
    """
    Scheduling facts for one learning item.

    Attributes:
        repetition_count: Consecutive successful reviews since the last lapse
        easiness_factor: Interval multiplier, never below 1.3
        interval_days: Days until the next review, at least 1
        next_review_on: Calendar date of the next review
    """
    repetition_count: int
    easiness_factor: float
    interval_days: int
    next_review_on: date


def new_review_state(created_on: date) -> ReviewState:
    """State of an item that has never been reviewed."""
    return ReviewState(
        repetition_count=0,
        easiness_factor=INITIAL_EASINESS_FACTOR,
        interval_days=FIRST_INTERVAL_DAYS,
        next_review_on=created_on,
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _next_easiness_factor(easiness_factor: float, grade: int) -> float:
    miss = 5 - grade
    updated = easiness_factor + (0.1 - miss * (0.08 + miss * 0.02))
    return max(updated, MIN_EASINESS_FACTOR)


def review(state: ReviewState, grade: int, today: date) -> ReviewState:
    """
    Apply one SM-2 review to an item's scheduling state.

    A grade below 3 is a lapse: the repetition count resets and the item
    comes back tomorrow. Otherwise the count grows and the interval follows
    1 day, 6 days, then previous interval * easiness factor. The easiness
    factor is updated on every review, lapses included.

    Args:
        state: Current scheduling state (not modified)
        grade: Recall quality, 0-5, validated by the caller
        today: Date the review took place

    Returns:
        New ReviewState with updated count, factor, interval and due date
    """
    if grade < PASSING_GRADE:
        repetition_count = 0
        interval_days = LAPSE_INTERVAL_DAYS
    else:
        repetition_count = state.repetition_count + 1
        if repetition_count == 1:
            interval_days = FIRST_INTERVAL_DAYS
        elif repetition_count == 2:
            interval_days = SECOND_INTERVAL_DAYS
        else:
            interval_days = _round_half_up(state.interval_days * state.easiness_factor)

    return replace(
        state,
        repetition_count=repetition_count,
        easiness_factor=_next_easiness_factor(state.easiness_factor, grade),
        interval_days=interval_days,
        next_review_on=today + timedelta(days=interval_days),
    )


def is_due(state: ReviewState, today: date) -> bool:
    """True when the item should be reviewed on or before today."""
    return state.next_review_on <= today


def due_items(states: Mapping[Hashable, ReviewState], today: date) -> List[Hashable]:
    """
    Select the items due for review.

    Args:
        states: Item key -> current scheduling state
        today: Cutoff date (inclusive)

    Returns:
        Keys of due items, earliest due date first
    """
    due = [(key, state) for key, state in states.items() if is_due(state, today)]
    # sorted() is stable, so items due the same day keep their input order
    due = sorted(due, key=lambda item: item[1].next_review_on)
    return [key for key, _ in due]
