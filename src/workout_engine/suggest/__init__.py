"""Daily workout suggestions."""

from workout_engine.suggest.daily import (
    ROTATION_ORDER,
    HealthSnapshot,
    HistoryEntry,
    Suggestion,
    compute_fatigue,
    daily_seed,
    rotate_suggestion,
    suggest_today,
)

__all__ = [
    "ROTATION_ORDER",
    "HealthSnapshot",
    "HistoryEntry",
    "Suggestion",
    "compute_fatigue",
    "daily_seed",
    "rotate_suggestion",
    "suggest_today",
]
