"""
Overload Trend Service
Progressive overload analysis over per-session top sets

CONCEPTS DEMONSTRATED:
1. Aggregation - reducing every session to its heaviest set
2. Windowing - keeping only the most recent N sessions
3. Linear Regression - the fitted slope as a progress signal
"""

from dataclasses import dataclass
from datetime import date
from typing import Hashable, List, Optional

import numpy as np
import pandas as pd
import structlog
from sklearn.linear_model import LinearRegression

from .one_rep_max import OneRepMaxStrategy, estimate_one_rep_max

logger = structlog.get_logger()

SAMPLE_COLUMNS = ['session_id', 'session_date', 'weight', 'reps']


@dataclass(frozen=True)
class SetSample:
    """One lift: the session it belongs to, when, how heavy and how many reps"""
    session_id: Hashable
    session_date: date
    weight: float
    reps: int


@dataclass(frozen=True)
class OneRepMaxPoint:
    """Estimated 1RM of a session's top set"""
    session_id: Hashable
    session_date: date
    one_rep_max: float


def top_sets(samples: List[SetSample], last_n: int) -> pd.DataFrame:
    """
    Reduce raw samples to the top set of each of the last N sessions.

    Args:
        samples: Sets in any order, possibly several per session
        last_n: Maximum number of sessions to keep

    Returns:
        DataFrame with SAMPLE_COLUMNS, one row per session, oldest first
    """
    df = pd.DataFrame(
        [(s.session_id, s.session_date, float(s.weight), int(s.reps)) for s in samples],
        columns=SAMPLE_COLUMNS,
    )
    if df.empty:
        return df

    # Heaviest set per session; idxmax keeps the first of equal weights.
    # None is a valid session id, so missing keys form their own group.
    heaviest = df.groupby('session_id', sort=False, dropna=False)['weight'].idxmax()
    df = df.loc[heaviest]

    df = df.sort_values('session_date', kind='mergesort')
    return df.tail(max(last_n, 0)).reset_index(drop=True)


def compute_trend(
    samples: List[SetSample],
    last_n: int,
    strategy: Optional[OneRepMaxStrategy] = None
) -> float:
    """
    Slope of a linear fit over the top sets of the most recent sessions.

    The x-axis is the session index (0, 1, 2, ...) in date order, so
    irregular gaps between sessions do not distort the trend. The y-axis
    is the top-set weight, or its estimated 1RM when a strategy is given.

    Args:
        samples: Sets for one exercise
        last_n: Number of most recent sessions to analyze
        strategy: Optional 1RM formula for the y-axis

    Returns:
        Fitted slope per session; 0.0 when fewer than 2 sessions remain
    """
    return fit_trend(top_sets(samples, last_n), strategy)


def fit_trend(df: pd.DataFrame, strategy: Optional[OneRepMaxStrategy] = None) -> float:
    """
    Fit the trend line over a frame already reduced by top_sets().

    Args:
        df: One row per session, oldest first
        strategy: Optional 1RM formula for the y-axis

    Returns:
        Fitted slope per session; 0.0 when fewer than 2 sessions
    """
    if len(df) < 2:
        logger.debug("trend_skipped", sessions=len(df))
        return 0.0

    if strategy is None:
        y = df['weight'].to_numpy()
    else:
        y = np.array([
            estimate_one_rep_max(row.weight, row.reps, strategy)
            for row in df.itertuples(index=False)
        ])
    X = np.arange(len(df)).reshape(-1, 1)

    model = LinearRegression()
    model.fit(X, y)
    slope = float(model.coef_[0])

    logger.debug("trend_computed", sessions=len(df), slope=round(slope, 4))
    return slope


def one_rep_max_history(
    samples: List[SetSample],
    last_n: int,
    strategy: Optional[OneRepMaxStrategy] = None
) -> List[OneRepMaxPoint]:
    """
    Estimated 1RM of each of the last N sessions, oldest first.

    Raises:
        InvalidInput: If a top set has fewer than 1 rep
    """
    df = top_sets(samples, last_n)
    return [
        OneRepMaxPoint(
            session_id=row.session_id,
            session_date=row.session_date,
            one_rep_max=estimate_one_rep_max(row.weight, row.reps, strategy),
        )
        for row in df.itertuples(index=False)
    ]
