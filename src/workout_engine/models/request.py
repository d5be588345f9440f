"""Normalized generation request: the only input the core pipeline sees."""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import DEFAULT_EQUIPMENT, Focus


@dataclass(frozen=True)
class GenerationRequest:
    """Caller constraints after normalization.

    Instances are built by ``normalize_request``; values are already
    clamped, so downstream code never re-validates them.
    """

    focus: Focus
    duration_minutes: int
    intensity: int
    equipment: frozenset[str] = DEFAULT_EQUIPMENT
    constraints: tuple[str, ...] = ()

    @property
    def duration_seconds(self) -> int:
        return self.duration_minutes * 60
