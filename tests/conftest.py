"""Shared test fixtures: catalog, generator, typical requests, history."""

from __future__ import annotations

from datetime import date, timedelta
from itertools import count
from typing import Callable

import pytest

from workout_engine.catalog.catalog import MovementCatalog
from workout_engine.envelope import WorkoutGenerator
from workout_engine.models.enums import Focus
from workout_engine.models.request import GenerationRequest
from workout_engine.normalizer import normalize_request
from workout_engine.suggest.daily import HistoryEntry

TODAY = date(2026, 10, 19)


@pytest.fixture
def catalog() -> MovementCatalog:
    return MovementCatalog.default()


@pytest.fixture
def seed_factory() -> Callable[[], str]:
    """Deterministic seed source: seed-1, seed-2, ..."""
    counter = count(1)
    return lambda: f"seed-{next(counter)}"


@pytest.fixture
def generator(catalog: MovementCatalog, seed_factory: Callable[[], str]) -> WorkoutGenerator:
    return WorkoutGenerator(catalog=catalog, seed_factory=seed_factory)


@pytest.fixture
def strength_request() -> GenerationRequest:
    """30-min barbell strength session at intensity 6."""
    return normalize_request("strength", 30, 6, ["barbell", "bodyweight"])


@pytest.fixture
def full_gym_request() -> GenerationRequest:
    return normalize_request(
        "mixed",
        45,
        7,
        ["barbell", "bench", "dumbbell", "kettlebell", "pullup-bar", "box", "rower", "bodyweight"],
    )


@pytest.fixture
def make_request() -> Callable[..., GenerationRequest]:
    def _make(**overrides) -> GenerationRequest:
        defaults = dict(
            focus="strength",
            duration_minutes=30,
            intensity=6,
            equipment=["barbell", "dumbbell", "bodyweight"],
            constraints=[],
        )
        defaults.update(overrides)
        return normalize_request(**defaults)

    return _make


@pytest.fixture
def week_history() -> list[HistoryEntry]:
    """Last week: strength, endurance, strength (most recent yesterday)."""
    return [
        HistoryEntry(day=TODAY - timedelta(days=5), focus=Focus.STRENGTH, duration_minutes=40, intensity=7),
        HistoryEntry(day=TODAY - timedelta(days=3), focus=Focus.ENDURANCE, duration_minutes=30, intensity=5),
        HistoryEntry(day=TODAY - timedelta(days=1), focus=Focus.STRENGTH, duration_minutes=45, intensity=6),
    ]
