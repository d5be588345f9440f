"""In-memory persistence for generated workouts and suggestions.

Swappable through the ``get_store`` dependency; nothing here is durable.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass
from datetime import date

from workout_engine.models.plan import WorkoutPlan
from workout_engine.suggest.daily import HistoryEntry, Suggestion


@dataclass(frozen=True)
class StoredWorkout:
    id: str
    user_id: str
    created_on: date
    plan: WorkoutPlan


class WorkoutStore:
    """Thread-safe store keyed by workout id and (user, day)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._workouts: dict[str, StoredWorkout] = {}
        self._suggestions: dict[tuple[str, date], Suggestion] = {}

    def save(self, user_id: str, plan: WorkoutPlan, created_on: date) -> StoredWorkout:
        stored = StoredWorkout(
            id=f"wkt_{uuid.uuid4().hex[:12]}",
            user_id=user_id,
            created_on=created_on,
            plan=plan,
        )
        with self._lock:
            self._workouts[stored.id] = stored
        return stored

    def get(self, workout_id: str) -> StoredWorkout | None:
        with self._lock:
            return self._workouts.get(workout_id)

    def list_for(self, user_id: str) -> list[StoredWorkout]:
        with self._lock:
            workouts = [w for w in self._workouts.values() if w.user_id == user_id]
        return sorted(workouts, key=lambda w: w.created_on)

    def history_for(self, user_id: str) -> list[HistoryEntry]:
        return [
            HistoryEntry(
                day=w.created_on,
                focus=w.plan.focus,
                duration_minutes=w.plan.duration_minutes,
                intensity=w.plan.intensity,
            )
            for w in self.list_for(user_id)
        ]

    def last_suggestion(self, user_id: str, day: date) -> Suggestion | None:
        with self._lock:
            return self._suggestions.get((user_id, day))

    def remember_suggestion(self, user_id: str, suggestion: Suggestion) -> None:
        with self._lock:
            self._suggestions[(user_id, suggestion.day)] = suggestion
