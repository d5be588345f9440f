"""End-to-end generation scenarios and cross-cutting properties."""

from __future__ import annotations

import pytest

from workout_engine.catalog.catalog import MovementCatalog, is_excluded
from workout_engine.envelope import WorkoutGenerator
from workout_engine.models.enums import TRANSITION_SECONDS, BlockKey, Focus, PrescriptionKind
from workout_engine.normalizer import normalize_request


class TestScenarios:
    def test_basic_strength_no_cap(self, generator: WorkoutGenerator, catalog: MovementCatalog) -> None:
        request = normalize_request("strength", 30, 6, ["barbell", "bodyweight"])
        plan = generator.generate(request, seed="abc").plan

        assert plan.intensity == 6
        assert plan.intensity_cap is None
        main_blocks = [b for b in plan.blocks if b.key == BlockKey.MAIN]
        assert main_blocks
        for block in main_blocks:
            assert block.items
            for item in block.items:
                assert item.prescription.kind == PrescriptionKind.REPS
                assert catalog.require(item.movement_id).required_equipment <= {"barbell", "bodyweight"}

    def test_unknown_equipment_yields_empty_block(self, generator: WorkoutGenerator) -> None:
        request = normalize_request("strength", 30, 6, ["specialized-machine-not-in-catalog"])
        plan = generator.generate(request, seed="abc").plan

        assert any(not b.items for b in plan.blocks)
        assert plan.defects
        assert not plan.is_complete
        assert "No available movement fits" in plan.coaching_notes

    def test_capped_intensity(self, generator: WorkoutGenerator) -> None:
        request = normalize_request("conditioning", 30, 9, ["bodyweight"])
        plan = generator.generate(request, seed="abc", recovery_score=20).plan

        assert plan.intensity < 9
        assert plan.intensity_cap is not None
        assert plan.intensity_cap.original == 9
        assert plan.intensity_cap.reason

    def test_replay_matches_original(self, generator: WorkoutGenerator) -> None:
        request = normalize_request("mixed", 40, 7, ["dumbbell", "bodyweight"])
        first = generator.generate(request)
        second = generator.replay(request, first.seed, first.plan.generator_version)
        assert second.plan == first.plan


_EQUIPMENT_SETS = (
    ["bodyweight"],
    ["barbell", "bodyweight"],
    ["dumbbell", "kettlebell", "bodyweight"],
    ["barbell", "bench", "dumbbell", "pullup-bar", "rower", "box", "bodyweight"],
)


class TestProperties:
    @pytest.mark.parametrize("focus", [f.value for f in Focus])
    def test_equipment_containment(self, generator: WorkoutGenerator, catalog: MovementCatalog, focus: str) -> None:
        for equipment in _EQUIPMENT_SETS:
            request = normalize_request(focus, 35, 6, equipment)
            for i in range(5):
                plan = generator.generate(request, seed=f"{focus}-{i}").plan
                for movement_id in plan.movement_ids:
                    assert catalog.require(movement_id).required_equipment <= request.equipment

    @pytest.mark.parametrize("focus", [f.value for f in Focus])
    def test_duration_within_tolerance(self, generator: WorkoutGenerator, focus: str) -> None:
        for minutes in (10, 17, 25, 33, 45, 60):
            request = normalize_request(focus, minutes, 5, ["dumbbell", "bodyweight"])
            plan = generator.generate(request, seed=f"d{minutes}").plan
            target = minutes * 60
            assert abs(plan.total_seconds - target) <= 0.10 * target

    @pytest.mark.parametrize("focus", [f.value for f in Focus])
    def test_composed_content_matches_duration(
        self, generator: WorkoutGenerator, catalog: MovementCatalog, focus: str
    ) -> None:
        everything = sorted(set().union(*(m.required_equipment for m in catalog)) | {"bodyweight"})
        for minutes in (10, 15, 20, 25, 30, 40, 45, 50, 60):
            for intensity in (1, 4, 7, 10):
                request = normalize_request(focus, minutes, intensity, everything)
                plan = generator.generate(request, seed=f"abc-{minutes}-{intensity}").plan
                target = minutes * 60
                assert abs(plan.content_seconds - target) <= 0.10 * target, (focus, minutes, intensity)
                for block in plan.blocks:
                    slack = max(0.10 * block.target_seconds, TRANSITION_SECONDS)
                    assert abs(block.content_seconds - block.target_seconds) <= slack, (
                        focus, minutes, intensity, block.key,
                    )

    @pytest.mark.parametrize("focus", [f.value for f in Focus])
    def test_equipment_without_bodyweight_still_warms_up(self, generator: WorkoutGenerator, focus: str) -> None:
        request = normalize_request(focus, 30, 6, ["dumbbell"])
        for i in range(5):
            plan = generator.generate(request, seed=f"db-{i}").plan
            for block in plan.blocks:
                if block.key in (BlockKey.WARMUP, BlockKey.COOLDOWN):
                    assert block.items, (focus, block.key)

    def test_constraints_respected(self, generator: WorkoutGenerator, catalog: MovementCatalog) -> None:
        constraints = ["low_impact", "no_running", "burpee"]
        request = normalize_request("conditioning", 30, 7, ["bodyweight", "rower"], constraints)
        for i in range(10):
            plan = generator.generate(request, seed=f"c{i}").plan
            for movement_id in plan.movement_ids:
                assert not is_excluded(catalog.require(movement_id), request.constraints)

    def test_effective_intensity_monotone_in_recovery(self, generator: WorkoutGenerator) -> None:
        request = normalize_request("strength", 30, 10, ["barbell", "bodyweight"])
        levels = [
            generator.generate(request, seed="m", recovery_score=score).plan.intensity
            for score in range(0, 101, 10)
        ]
        assert levels == sorted(levels)
        assert levels[-1] == 10

    def test_never_above_requested(self, generator: WorkoutGenerator) -> None:
        for requested in (1, 4, 7, 10):
            request = normalize_request("mixed", 30, requested, ["dumbbell", "bodyweight"])
            for score in (None, 0, 35, 59, 100):
                plan = generator.generate(request, seed="n", recovery_score=score).plan
                assert plan.intensity <= requested

    def test_bodyweight_only_plans_are_complete(self, generator: WorkoutGenerator) -> None:
        for focus in ("strength", "conditioning", "mixed", "endurance"):
            request = normalize_request(focus, 30, 5, [])
            for i in range(5):
                assert generator.generate(request, seed=f"bw{i}").plan.is_complete, focus
