"""Session load and acute:chronic load ratio for recovery scoring.

References:
    - Foster et al. (2001): session-RPE method
    - Williams et al. (2017): EWMA-based ACWR
    - Gabbett (2016): ACWR injury risk thresholds
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from workout_engine.models.enums import (
    ACWR_CAUTION_HIGH,
    ACWR_DANGER_THRESHOLD,
    ACWR_OPTIMAL_LOW,
    EWMA_ACUTE_SPAN,
    EWMA_CHRONIC_SPAN,
)


def session_load(duration_minutes: float, intensity: float) -> float:
    """Session-RPE load: minutes x intensity on the 1-10 scale.

    Reference:
        Foster et al. (2001). J Strength Cond Res 15(1):109-115.
    """
    return max(0.0, float(duration_minutes)) * max(0.0, float(intensity))


def load_ewma(daily_loads: Sequence[float], span: int) -> float:
    """Latest point of the load EWMA (series oldest first); 0.0 when empty."""
    if len(daily_loads) == 0:
        return 0.0
    smoothed = pd.Series(daily_loads, dtype=np.float64).ewm(span=span, adjust=False).mean()
    return float(smoothed.iloc[-1])


def acute_chronic_ratio(daily_loads: Sequence[float]) -> float:
    """Acute (7-day) over chronic (28-day) EWMA load.

    Args:
        daily_loads: One load per day, oldest first.

    Returns:
        The ratio, or 0.0 with under a week of data or a near-zero
        chronic load.
    """
    if len(daily_loads) < EWMA_ACUTE_SPAN:
        return 0.0
    chronic = load_ewma(daily_loads, EWMA_CHRONIC_SPAN)
    if chronic < 1e-6:
        return 0.0
    return load_ewma(daily_loads, EWMA_ACUTE_SPAN) / chronic


def load_band(ratio: float) -> str:
    """Band name for a ratio: danger, caution, optimal or undertrained."""
    for floor, band in (
        (ACWR_DANGER_THRESHOLD, "danger"),
        (ACWR_CAUTION_HIGH, "caution"),
        (ACWR_OPTIMAL_LOW, "optimal"),
    ):
        if ratio >= floor:
            return band
    return "undertrained"


def daily_load_series(
    sessions: list[tuple[int, float]], days: int
) -> tuple[float, ...]:
    """Bucket ``(days_ago, load)`` pairs into a daily series, oldest first.

    Sessions older than ``days`` are ignored; days without sessions are 0.
    """
    if not sessions:
        return tuple(0.0 for _ in range(days))
    frame = pd.DataFrame(sessions, columns=["days_ago", "load"])
    frame = frame[(frame["days_ago"] >= 0) & (frame["days_ago"] < days)]
    totals = frame.groupby("days_ago")["load"].sum()
    series = totals.reindex(range(days - 1, -1, -1), fill_value=0.0)
    return tuple(float(v) for v in series.to_numpy(dtype=np.float64))
