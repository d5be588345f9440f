"""Tests for recovery-driven intensity capping."""

from __future__ import annotations

import pytest

from workout_engine.exceptions import ValidationError
from workout_engine.recovery.intensity_cap import (
    CapPolicy,
    cap_intensity,
    validate_recovery_score,
)


class TestCapPolicy:
    def test_no_ceiling_at_or_above_threshold(self) -> None:
        policy = CapPolicy()
        assert policy.ceiling_for(60.0) is None
        assert policy.ceiling_for(95.0) is None

    def test_ceiling_rises_with_score(self) -> None:
        policy = CapPolicy()
        assert policy.ceiling_for(0.0) == 1
        assert policy.ceiling_for(20.0) == 3
        assert policy.ceiling_for(59.0) == 7

    def test_ceiling_is_monotone(self) -> None:
        policy = CapPolicy()
        ceilings = [policy.ceiling_for(float(s)) for s in range(0, 60)]
        assert ceilings == sorted(ceilings)

    def test_custom_threshold(self) -> None:
        assert CapPolicy(threshold=80.0).ceiling_for(70.0) is not None

    def test_reason_wording(self) -> None:
        policy = CapPolicy()
        assert "high fatigue" in policy.reason_for(10.0)
        assert "moderate fatigue" in policy.reason_for(45.0)


class TestCapIntensity:
    def test_no_score_no_cap(self) -> None:
        decision = cap_intensity(9, None)
        assert decision.effective == 9
        assert not decision.capped

    def test_high_recovery_no_cap(self) -> None:
        decision = cap_intensity(9, 85)
        assert decision.effective == 9
        assert decision.cap is None

    def test_low_recovery_caps(self) -> None:
        decision = cap_intensity(9, 20)
        assert decision.effective == 3
        assert decision.cap.original == 9
        assert decision.cap.capped == 3
        assert "capped from 9 to 3" in decision.cap.reason
        assert "high fatigue" in decision.cap.reason

    def test_request_below_ceiling_untouched(self) -> None:
        decision = cap_intensity(2, 20)
        assert decision.effective == 2
        assert not decision.capped

    def test_never_raises_effective_above_requested(self) -> None:
        for requested in range(1, 11):
            for score in range(0, 101, 5):
                assert cap_intensity(requested, score).effective <= requested

    def test_out_of_range_score_clamped(self) -> None:
        assert cap_intensity(9, -40).effective == 1
        assert cap_intensity(9, 250).effective == 9


class TestValidateRecoveryScore:
    def test_none(self) -> None:
        assert validate_recovery_score(None) is None

    def test_clamps(self) -> None:
        assert validate_recovery_score(140) == 100.0
        assert validate_recovery_score(-5) == 0.0

    @pytest.mark.parametrize("bad", ["70", float("nan"), float("inf"), True])
    def test_rejects_bad_values(self, bad: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_recovery_score(bad)
        assert exc_info.value.field == "recovery"
