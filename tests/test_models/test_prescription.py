"""Tests for prescription variants, time estimates and descriptions."""

from __future__ import annotations

import pytest

from workout_engine.models.enums import PrescriptionKind
from workout_engine.models.prescription import (
    DistancePrescription,
    RepsPrescription,
    TimePrescription,
    describe_prescription,
    estimate_seconds,
)


class TestValidation:
    def test_zero_sets_rejected(self) -> None:
        with pytest.raises(ValueError):
            RepsPrescription(sets=0, reps=5)

    def test_negative_rest_rejected(self) -> None:
        with pytest.raises(ValueError):
            TimePrescription(sets=3, seconds=30, rest_sec=-1)

    def test_zero_meters_rejected(self) -> None:
        with pytest.raises(ValueError):
            DistancePrescription(sets=1, meters=0)

    def test_kinds(self) -> None:
        assert RepsPrescription(3, 5).kind == PrescriptionKind.REPS
        assert TimePrescription(3, 30).kind == PrescriptionKind.TIME
        assert DistancePrescription(1, 400).kind == PrescriptionKind.DISTANCE


class TestEstimateSeconds:
    def test_reps_counts_rest_between_sets_only(self) -> None:
        # 4 x 6 reps at 3 s/rep = 72 s work, 3 rests of 120 s
        assert estimate_seconds(RepsPrescription(sets=4, reps=6, rest_sec=120)) == 72 + 360

    def test_time(self) -> None:
        assert estimate_seconds(TimePrescription(sets=5, seconds=40, rest_sec=20)) == 200 + 80

    def test_single_set_has_no_rest(self) -> None:
        assert estimate_seconds(TimePrescription(sets=1, seconds=45, rest_sec=15)) == 45

    def test_distance_uses_assumed_speed(self) -> None:
        assert estimate_seconds(DistancePrescription(sets=1, meters=3000)) == 1000

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(TypeError):
            estimate_seconds("3x5")  # type: ignore[arg-type]


class TestDescribe:
    def test_reps_with_load_and_rest(self) -> None:
        text = describe_prescription(RepsPrescription(4, 6, load="70-85% 1RM", rest_sec=120))
        assert text == "4 x 6 @ 70-85% 1RM, rest 120s"

    def test_time_single_set_omits_rest(self) -> None:
        assert describe_prescription(TimePrescription(1, 45, rest_sec=15)) == "1 x 45s"

    def test_distance_with_pace(self) -> None:
        text = describe_prescription(DistancePrescription(6, 400, rest_sec=75, pace="RPE 8"))
        assert text == "6 x 400m @ RPE 8, rest 75s"

    def test_time_with_load(self) -> None:
        text = describe_prescription(TimePrescription(4, 40, load="RPE 7", rest_sec=20))
        assert text == "4 x 40s @ RPE 7, rest 20s"

    def test_distance_with_load_and_pace(self) -> None:
        text = describe_prescription(DistancePrescription(1, 500, load="20 kg vest", pace="RPE 6"))
        assert text == "1 x 500m @ 20 kg vest, RPE 6"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(TypeError):
            describe_prescription(object())  # type: ignore[arg-type]
