"""Tests for the composite recovery score."""

from __future__ import annotations

import pytest

from workout_engine.recovery.composite import (
    RecoverySignals,
    component_scores,
    composite_recovery_score,
)


class TestComponentScores:
    def test_empty_signals(self) -> None:
        assert component_scores(RecoverySignals()) == {}

    def test_hrv_ratio_mapping(self) -> None:
        assert component_scores(RecoverySignals(hrv_ratio=1.0))["hrv"] == pytest.approx(100.0)
        assert component_scores(RecoverySignals(hrv_ratio=0.6))["hrv"] == pytest.approx(0.0)
        assert component_scores(RecoverySignals(hrv_ratio=0.8))["hrv"] == pytest.approx(50.0)

    def test_stress_inverted(self) -> None:
        assert component_scores(RecoverySignals(stress=2))["stress"] == pytest.approx(80.0)
        assert component_scores(RecoverySignals(stress=10))["stress"] == pytest.approx(0.0)

    def test_scores_clamped(self) -> None:
        scores = component_scores(RecoverySignals(sleep_score=130, hrv_ratio=1.6))
        assert scores["sleep"] == 100.0
        assert scores["hrv"] == 100.0

    def test_load_needs_a_week_of_data(self) -> None:
        assert "load" not in component_scores(RecoverySignals(daily_loads=(100.0,) * 3))

    def test_steady_load_is_optimal(self) -> None:
        scores = component_scores(RecoverySignals(daily_loads=(200.0,) * 28))
        assert scores["load"] == 100.0

    def test_load_spike_is_penalized(self) -> None:
        loads = (50.0,) * 21 + (600.0,) * 7
        assert component_scores(RecoverySignals(daily_loads=loads))["load"] < 100.0


class TestCompositeScore:
    def test_none_without_signals(self) -> None:
        assert composite_recovery_score(RecoverySignals()) is None

    def test_single_signal_passes_through(self) -> None:
        assert composite_recovery_score(RecoverySignals(sleep_score=72)) == 72.0

    def test_weights_renormalized(self) -> None:
        # (80 * 0.35 + 100 * 0.25) / 0.60
        score = composite_recovery_score(RecoverySignals(sleep_score=80, hrv_ratio=1.0))
        assert score == 88.3

    def test_poor_signals_score_low(self) -> None:
        score = composite_recovery_score(
            RecoverySignals(sleep_score=30, hrv_ratio=0.65, body_battery=15, stress=9)
        )
        assert score < 30
