"""Tests for session load, load EWMA and the acute:chronic ratio."""

from __future__ import annotations

import pytest

from workout_engine.math.training_load import (
    acute_chronic_ratio,
    daily_load_series,
    load_band,
    load_ewma,
    session_load,
)


class TestSessionLoad:
    def test_duration_times_intensity(self) -> None:
        assert session_load(40, 7) == 280.0

    def test_negative_inputs_floor_at_zero(self) -> None:
        assert session_load(-10, 5) == 0.0


class TestEWMA:
    def test_stable_series_returns_mean(self) -> None:
        assert load_ewma([50.0] * 28, 7) == pytest.approx(50.0)

    def test_empty_returns_zero(self) -> None:
        assert load_ewma([], 7) == 0.0

    def test_recent_values_weigh_more(self) -> None:
        rising = [10.0] * 14 + [100.0] * 7
        assert load_ewma(rising, 7) > load_ewma(rising, 28)


class TestAcuteChronicRatio:
    def test_too_little_data(self) -> None:
        assert acute_chronic_ratio([100.0] * 6) == 0.0

    def test_steady_load_ratio_one(self) -> None:
        assert acute_chronic_ratio([80.0] * 28) == pytest.approx(1.0)

    def test_all_zero_returns_zero(self) -> None:
        assert acute_chronic_ratio([0.0] * 28) == 0.0

    def test_spike_raises_ratio(self) -> None:
        loads = [50.0] * 21 + [300.0] * 7
        assert acute_chronic_ratio(loads) > 1.5


class TestLoadBand:
    @pytest.mark.parametrize(
        "ratio,expected",
        [(0.5, "undertrained"), (1.0, "optimal"), (1.4, "caution"), (1.8, "danger")],
    )
    def test_bands(self, ratio: float, expected: str) -> None:
        assert load_band(ratio) == expected


class TestDailyLoadSeries:
    def test_no_sessions_all_zero(self) -> None:
        assert daily_load_series([], 5) == (0.0,) * 5

    def test_oldest_first_and_summed(self) -> None:
        series = daily_load_series([(0, 100.0), (0, 50.0), (2, 30.0)], 4)
        assert series == (0.0, 30.0, 0.0, 150.0)

    def test_out_of_window_ignored(self) -> None:
        assert daily_load_series([(10, 99.0), (1, 20.0)], 3) == (0.0, 20.0, 0.0)
