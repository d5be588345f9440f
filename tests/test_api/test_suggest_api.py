"""Tests for the daily suggestion endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from workout_engine.models.enums import Focus
from workout_engine.suggest.daily import ROTATION_ORDER


class TestSuggestToday:
    def test_first_suggestion(self, client: TestClient) -> None:
        resp = client.get("/api/workouts/suggest/today", headers={"X-User-Id": "u1"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["ok"] is True
        assert data["date"] == "2026-10-19"
        assert data["nonce"] == 0
        assert data["seed"].startswith("u1-2026-10-19-")
        assert data["config"]["focus"] in ("endurance", "conditioning")

    def test_equipment_query(self, client: TestClient) -> None:
        resp = client.get(
            "/api/workouts/suggest/today",
            params=[("equipment", "dumbbell"), ("equipment", "bodyweight")],
        )
        assert resp.json()["config"]["equipment"] == ["bodyweight", "dumbbell"]

    def test_stable_within_a_day(self, client: TestClient) -> None:
        first = client.get("/api/workouts/suggest/today").json()
        second = client.get("/api/workouts/suggest/today").json()
        assert first == second

    def test_history_shapes_focus(self, client: TestClient) -> None:
        inputs = {"archetype": "strength", "minutes": 45, "targetIntensity": 6, "equipment": ["barbell", "bodyweight"]}
        client.post("/api/workouts/generate", json={"inputs": inputs}, headers={"X-User-Id": "u2"})
        data = client.get("/api/workouts/suggest/today", headers={"X-User-Id": "u2"}).json()
        assert data["config"]["focus"] == "conditioning"
        assert data["config"]["durationMinutes"] == 45


class TestRotate:
    def test_rotate_without_prior(self, client: TestClient) -> None:
        resp = client.post("/api/workouts/suggest/rotate", json={"equipment": ["kettlebell"]})
        data = resp.json()
        assert resp.status_code == 200
        assert data["nonce"] == 1
        assert data["config"]["equipment"] == ["kettlebell"]

    def test_rotate_advances_from_today(self, client: TestClient) -> None:
        today = client.get("/api/workouts/suggest/today").json()
        rotated = client.post("/api/workouts/suggest/rotate").json()
        current = Focus(today["config"]["focus"])
        expected = ROTATION_ORDER[(ROTATION_ORDER.index(current) + 1) % len(ROTATION_ORDER)]
        assert rotated["config"]["focus"] == expected.value
        assert rotated["seed"] != today["seed"]

    def test_rotation_is_remembered(self, client: TestClient) -> None:
        rotated = client.post("/api/workouts/suggest/rotate").json()
        assert client.get("/api/workouts/suggest/today").json() == rotated
        again = client.post("/api/workouts/suggest/rotate").json()
        assert again["nonce"] == 2
