"""Custom exception hierarchy for the workout engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from workout_engine.models.plan import EmptyBlockDefect


class WorkoutEngineError(Exception):
    """Base exception for all workout_engine errors."""


class ValidationError(WorkoutEngineError):
    """Caller input could not be normalized into a request."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CatalogError(WorkoutEngineError):
    """The movement catalog snapshot is malformed."""


class EmptyBlockError(WorkoutEngineError):
    """A plan was asked to be complete but has blocks with no movements."""

    def __init__(self, defects: tuple[EmptyBlockDefect, ...]) -> None:
        keys = ", ".join(d.block_key.value for d in defects)
        super().__init__(f"Plan has {len(defects)} empty block(s): {keys}")
        self.defects = defects
