"""Daily suggestions: pick today's focus, duration and intensity.

The suggestion balances focus across the week, scales duration and
intensity to a fatigue estimate, and carries a deterministic seed so
the suggested plan can be generated and replayed exactly.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

import numpy as np

from workout_engine.math.training_load import daily_load_series, session_load
from workout_engine.models.enums import MAX_DURATION_MINUTES, Focus
from workout_engine.models.request import GenerationRequest
from workout_engine.normalizer import normalize_request
from workout_engine.rng import SeededRandom

ROTATION_ORDER: tuple[Focus, ...] = (
    Focus.STRENGTH,
    Focus.CONDITIONING,
    Focus.ENDURANCE,
    Focus.MIXED,
)

# Focus to complement the previous session with, in preference order
_COMPLEMENTS: dict[Focus, tuple[Focus, ...]] = {
    Focus.STRENGTH: (Focus.CONDITIONING, Focus.ENDURANCE),
    Focus.ENDURANCE: (Focus.STRENGTH, Focus.MIXED),
    Focus.CONDITIONING: (Focus.STRENGTH, Focus.ENDURANCE),
    Focus.MIXED: (Focus.STRENGTH, Focus.CONDITIONING, Focus.ENDURANCE),
}

DEFAULT_DURATION_MINUTES = 30
DEFAULT_INTENSITY = 5
BASELINE_FATIGUE = 0.5

# Fatigue (0-1) -> allowed intensity band
_INTENSITY_BANDS: tuple[tuple[float, tuple[int, int]], ...] = (
    (0.8, (3, 5)),
    (0.6, (4, 6)),
    (0.3, (5, 7)),
    (0.0, (6, 8)),
)


@dataclass(frozen=True)
class HistoryEntry:
    day: date
    focus: Focus
    duration_minutes: int
    intensity: int

    @property
    def load(self) -> float:
        return session_load(self.duration_minutes, self.intensity)


@dataclass(frozen=True)
class HealthSnapshot:
    """Optional wearable readings for today, with recent baselines."""

    sleep_score: float | None = None        # 0-100
    stress: float | None = None             # 0-10
    hrv: float | None = None                # ms
    resting_hr: float | None = None         # bpm
    hrv_baseline: tuple[float, ...] = ()
    resting_hr_baseline: tuple[float, ...] = ()


@dataclass(frozen=True)
class Suggestion:
    day: date
    config: GenerationRequest
    seed: str
    nonce: int
    fatigue: float
    rationale: tuple[str, ...] = ()


def daily_seed(user_id: str, day: date, focus: Focus, nonce: int = 0) -> str:
    """Deterministic seed for a user's suggestion on a given day."""
    return f"{user_id}-{day.isoformat()}-{focus.value}-{nonce}"


def _recent(history: Iterable[HistoryEntry], today: date, days: int) -> list[HistoryEntry]:
    """Entries from the last ``days`` days (today included), newest first."""
    recent = [e for e in history if 0 <= (today - e.day).days < days]
    return sorted(recent, key=lambda e: e.day, reverse=True)


def compute_fatigue(health: HealthSnapshot | None) -> float:
    """Fatigue estimate in [0, 1]; 0.5 when nothing is known."""
    fatigue = BASELINE_FATIGUE
    if health is None:
        return fatigue
    if health.sleep_score is not None:
        if health.sleep_score < 60:
            fatigue += 0.2
        elif health.sleep_score >= 80:
            fatigue -= 0.1
    if health.stress is not None:
        if health.stress >= 7:
            fatigue += 0.15
        elif health.stress <= 3:
            fatigue -= 0.05
    if health.hrv is not None and len(health.hrv_baseline) >= 3:
        baseline = np.array(health.hrv_baseline, dtype=np.float64)
        mean, std = float(baseline.mean()), float(baseline.std())
        if health.hrv < mean - std:
            fatigue += 0.15
        elif health.hrv > mean + std:
            fatigue -= 0.1
    if health.resting_hr is not None and len(health.resting_hr_baseline) >= 3:
        baseline = np.array(health.resting_hr_baseline, dtype=np.float64)
        if health.resting_hr > float(baseline.mean() + baseline.std()):
            fatigue += 0.1
    return round(min(1.0, max(0.0, fatigue)), 2)


def training_load_series(history: Sequence[HistoryEntry], today: date, days: int = 28) -> tuple[float, ...]:
    """Daily session-RPE loads for the last ``days`` days, oldest first."""
    return daily_load_series([((today - e.day).days, e.load) for e in history], days)


def choose_focus(history: Sequence[HistoryEntry], today: date) -> tuple[Focus, str]:
    """Complement the last session while balancing the week."""
    recent = _recent(history, today, 28)
    if not recent:
        focus = Focus.ENDURANCE if today.toordinal() % 2 == 0 else Focus.CONDITIONING
        return focus, f"No recent workouts; starting with {focus.value}."
    last = recent[0]
    week_counts = Counter(e.focus for e in _recent(history, today, 7))
    options = _COMPLEMENTS[last.focus]
    focus = min(options, key=lambda f: (week_counts[f], options.index(f)))
    return focus, (
        f"Last session was {last.focus.value}; {focus.value} balances the week "
        f"({week_counts[focus]} this week)."
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def suggest_duration(history: Sequence[HistoryEntry], today: date, fatigue: float) -> int:
    recent = _recent(history, today, 14)
    if recent:
        duration = float(np.median([e.duration_minutes for e in recent]))
    else:
        duration = float(DEFAULT_DURATION_MINUTES)
    if fatigue >= 0.7:
        duration = max(15.0, duration * 0.75)
    elif fatigue <= 0.3:
        duration = min(float(MAX_DURATION_MINUTES), duration * 1.2)
    return _round_half_up(duration)


def intensity_band(fatigue: float) -> tuple[int, int]:
    for floor, band in _INTENSITY_BANDS:
        if fatigue >= floor:
            return band
    return _INTENSITY_BANDS[-1][1]


def suggest_intensity(
    history: Sequence[HistoryEntry], today: date, fatigue: float, rng: SeededRandom
) -> int:
    """Recent mean intensity clamped to the fatigue band.

    If the two most recent sessions were both at the resulting level it
    is nudged by one step (direction drawn from ``rng``).
    """
    low, high = intensity_band(fatigue)
    recent = _recent(history, today, 7)
    if recent:
        base = _round_half_up(float(np.mean([e.intensity for e in recent])))
    else:
        base = DEFAULT_INTENSITY
    level = max(low, min(high, base))

    last_two = _recent(history, today, 28)[:2]
    if len(last_two) == 2 and all(e.intensity == level for e in last_two):
        step = 1 if rng.random() < 0.5 else -1
        nudged = level + step
        if not low <= nudged <= high:
            nudged = level - step
        level = max(low, min(high, nudged))
    return level


def _build(
    focus: Focus,
    focus_reason: str,
    user_id: str,
    history: Sequence[HistoryEntry],
    today: date,
    health: HealthSnapshot | None,
    equipment: Iterable[str] | None,
    constraints: Iterable[str] | None,
    nonce: int,
) -> Suggestion:
    fatigue = compute_fatigue(health)
    seed = daily_seed(user_id, today, focus, nonce)
    rng = SeededRandom(seed)
    duration = suggest_duration(history, today, fatigue)
    intensity = suggest_intensity(history, today, fatigue, rng)
    config = normalize_request(focus, duration, intensity, equipment, constraints)
    rationale = (
        focus_reason,
        f"Fatigue {fatigue:.2f}: {config.duration_minutes} min at intensity {config.intensity}.",
    )
    return Suggestion(
        day=today,
        config=config,
        seed=seed,
        nonce=nonce,
        fatigue=fatigue,
        rationale=rationale,
    )


def suggest_today(
    user_id: str,
    history: Sequence[HistoryEntry],
    today: date,
    health: HealthSnapshot | None = None,
    equipment: Iterable[str] | None = None,
    constraints: Iterable[str] | None = None,
    nonce: int = 0,
) -> Suggestion:
    """Suggest today's workout configuration and seed.

    Args:
        user_id: Stable user identifier, part of the seed.
        history: Past sessions, any order.
        today: The day to suggest for.
        health: Optional readiness readings.
        equipment: Owned equipment; empty means bodyweight only.
        constraints: Exclusions forwarded to the request.
        nonce: Rotation counter, part of the seed.

    Returns:
        A Suggestion whose config and seed fully determine the plan.
    """
    focus, reason = choose_focus(history, today)
    return _build(focus, reason, user_id, history, today, health, equipment, constraints, nonce)


def rotate_suggestion(
    previous: Suggestion,
    user_id: str,
    history: Sequence[HistoryEntry],
    health: HealthSnapshot | None = None,
) -> Suggestion:
    """Swap to the next focus in rotation order with a new seed."""
    index = ROTATION_ORDER.index(previous.config.focus)
    focus = ROTATION_ORDER[(index + 1) % len(ROTATION_ORDER)]
    reason = f"Rotated from {previous.config.focus.value} to {focus.value}."
    return _build(
        focus,
        reason,
        user_id,
        history,
        previous.day,
        health,
        previous.config.equipment,
        previous.config.constraints,
        previous.nonce + 1,
    )
