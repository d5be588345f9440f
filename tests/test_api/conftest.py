"""API fixtures: an app with generator, store and clock overridden."""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from workout_api.app import create_app
from workout_api.deps import get_generator, get_store, get_today
from workout_api.store import WorkoutStore
from workout_engine.envelope import WorkoutGenerator

API_TODAY = date(2026, 10, 19)


@pytest.fixture
def store() -> WorkoutStore:
    return WorkoutStore()


@pytest.fixture
def client(generator: WorkoutGenerator, store: WorkoutStore) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_generator] = lambda: generator
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_today] = lambda: API_TODAY
    return TestClient(app)


@pytest.fixture
def inputs() -> dict:
    return {
        "archetype": "strength",
        "minutes": 30,
        "targetIntensity": 6,
        "equipment": ["barbell", "bodyweight"],
        "constraints": [],
    }
