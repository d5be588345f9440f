"""Composite recovery score from wearable-style signals.

Each available signal is mapped to a 0-100 component and the components
are combined with a weighted mean. Missing signals are skipped, and the
weights of the remaining ones are renormalized.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from workout_engine.math.training_load import acute_chronic_ratio, load_band
from workout_engine.models.enums import EWMA_ACUTE_SPAN, HRV_RATIO_FLOOR, HRV_RATIO_FULL

COMPONENT_WEIGHTS = {
    "sleep": 0.35,
    "hrv": 0.25,
    "body_battery": 0.20,
    "stress": 0.10,
    "load": 0.10,
}

# ACWR risk class -> component score
_LOAD_SCORES = {
    "undertrained": 90.0,
    "optimal": 100.0,
    "caution": 50.0,
    "danger": 15.0,
}


@dataclass(frozen=True)
class RecoverySignals:
    """Optional readiness inputs for one day."""

    sleep_score: float | None = None     # 0-100
    hrv_ratio: float | None = None       # today's HRV / baseline
    body_battery: float | None = None    # 0-100
    stress: float | None = None          # 0-10, higher = more stressed
    daily_loads: tuple[float, ...] = ()  # oldest first


def _clamp_score(value: float) -> float:
    return float(min(100.0, max(0.0, value)))


def component_scores(signals: RecoverySignals) -> dict[str, float]:
    """Map each available signal onto a 0-100 score."""
    scores: dict[str, float] = {}
    if signals.sleep_score is not None:
        scores["sleep"] = _clamp_score(signals.sleep_score)
    if signals.hrv_ratio is not None:
        span = HRV_RATIO_FULL - HRV_RATIO_FLOOR
        scores["hrv"] = _clamp_score((signals.hrv_ratio - HRV_RATIO_FLOOR) / span * 100.0)
    if signals.body_battery is not None:
        scores["body_battery"] = _clamp_score(signals.body_battery)
    if signals.stress is not None:
        scores["stress"] = _clamp_score(100.0 - signals.stress * 10.0)
    if len(signals.daily_loads) >= EWMA_ACUTE_SPAN:
        ratio = acute_chronic_ratio(signals.daily_loads)
        if ratio > 0:
            scores["load"] = _LOAD_SCORES[load_band(ratio)]
    return scores


def composite_recovery_score(signals: RecoverySignals) -> float | None:
    """Weighted 0-100 recovery score, or None when no signal is usable."""
    scores = component_scores(signals)
    if not scores:
        return None
    keys = sorted(scores)
    values = np.array([scores[k] for k in keys], dtype=np.float64)
    weights = np.array([COMPONENT_WEIGHTS[k] for k in keys], dtype=np.float64)
    return round(float(np.average(values, weights=weights)), 1)
