"""Tests for the block composer."""

from __future__ import annotations

from workout_engine.catalog.catalog import MovementCatalog
import pytest

from workout_engine.generator.composer import compose_block, compose_blocks, fit_block, slot_candidates
from workout_engine.generator.templates import WORKOUT_TEMPLATES, SkeletonSlot, build_skeleton, get_template
from workout_engine.models.enums import TRANSITION_SECONDS, BlockKey, BlockStructure, Focus
from workout_engine.models.movement import Movement
from workout_engine.models.plan import Block, BlockItem
from workout_engine.models.prescription import TimePrescription
from workout_engine.rng import SeededRandom


def _make_skeleton_slot(template_id: str, index: int, seconds: int) -> SkeletonSlot:
    return SkeletonSlot(slot=get_template(template_id).slots[index], target_seconds=seconds)


class TestSlotCandidates:
    def test_filters_by_pattern(self, catalog: MovementCatalog) -> None:
        slot = get_template("strength-full-body").slots[1]
        assert all(m.has_any_pattern(slot.patterns) for m in slot_candidates(slot, catalog.movements))

    def test_drops_used_ids(self, catalog: MovementCatalog) -> None:
        slot = get_template("strength-full-body").slots[1]
        ids = {m.id for m in slot_candidates(slot, catalog.movements, {"back-squat"})}
        assert "back-squat" not in ids

    def test_falls_back_to_used_when_nothing_fresh(self) -> None:
        slot = get_template("strength-full-body").slots[1]
        only = Movement(id="push-up", name="Push-Up", patterns=frozenset({"push"}))
        assert slot_candidates(slot, [only], {"push-up"}) == [only]


class TestComposeBlock:
    def test_fills_block(self, catalog: MovementCatalog) -> None:
        pool = catalog.pool_for(frozenset({"barbell", "bodyweight"}))
        block = compose_block(_make_skeleton_slot("strength-full-body", 1, 810), pool, 6, SeededRandom("a"), focus=Focus.STRENGTH)
        assert block.key == BlockKey.MAIN
        assert 1 <= len(block.items) <= 3
        assert block.coaching_cues

    def test_prefers_compound_for_main(self, catalog: MovementCatalog) -> None:
        pool = catalog.pool_for(frozenset({"barbell", "dumbbell", "bodyweight"}))
        for i in range(20):
            block = compose_block(_make_skeleton_slot("strength-full-body", 1, 810), pool, 6, SeededRandom(f"c{i}"))
            first = catalog.require(block.items[0].movement_id)
            assert "compound" in first.patterns

    def test_no_duplicates_within_block(self, catalog: MovementCatalog) -> None:
        pool = catalog.pool_for(frozenset({"bodyweight"}))
        for i in range(20):
            block = compose_block(_make_skeleton_slot("conditioning-amrap", 1, 1800), pool, 7, SeededRandom(f"d{i}"))
            ids = [item.movement_id for item in block.items]
            assert len(ids) == len(set(ids))

    def test_empty_pool_yields_empty_block(self) -> None:
        block = compose_block(_make_skeleton_slot("strength-full-body", 1, 810), [], 6, SeededRandom("a"))
        assert block.is_empty
        assert block.target_seconds == 810

    def test_amrap_gets_workout_title(self, catalog: MovementCatalog) -> None:
        block = compose_block(
            _make_skeleton_slot("conditioning-amrap", 1, 1200),
            catalog.pool_for(frozenset({"bodyweight"})),
            7,
            SeededRandom("t"),
        )
        assert block.workout_title == "AMRAP 20 min"
        assert block.score_type == "rounds"

    def test_deterministic(self, catalog: MovementCatalog) -> None:
        pool = catalog.pool_for(frozenset({"dumbbell", "bodyweight"}))
        slot = _make_skeleton_slot("mixed-couplet", 2, 600)
        assert compose_block(slot, pool, 5, SeededRandom("x")) == compose_block(slot, pool, 5, SeededRandom("x"))


class TestBlockContent:
    @pytest.mark.parametrize("intensity", [1, 5, 10])
    def test_content_fills_budget(self, catalog: MovementCatalog, intensity: int) -> None:
        for template in WORKOUT_TEMPLATES:
            for minutes in (template.min_minutes, template.max_minutes):
                for i, skeleton_slot in enumerate(build_skeleton(template, minutes).slots):
                    rng = SeededRandom(f"{template.id}-{minutes}-{i}")
                    block = compose_block(skeleton_slot, catalog.movements, intensity, rng)
                    budget = skeleton_slot.target_seconds
                    slack = max(0.10 * budget, TRANSITION_SECONDS)
                    assert abs(block.content_seconds - budget) <= slack, (template.id, minutes, block.key)

    def test_short_budget_is_not_overfilled(self, catalog: MovementCatalog) -> None:
        pool = catalog.pool_for(frozenset({"dumbbell", "bodyweight"}))
        block = compose_block(_make_skeleton_slot("mixed-couplet", 1, 210), pool, 6, SeededRandom("abc"))
        assert block.items
        assert block.content_seconds <= 210 + TRANSITION_SECONDS


class TestFitBlock:
    def test_refits_items_to_new_target(self) -> None:
        block = Block(
            key=BlockKey.CONDITIONING,
            title="Conditioning",
            target_seconds=600,
            items=(BlockItem("burpee", "Burpee", TimePrescription(3, 40, rest_sec=20)),),
            structure=BlockStructure.AMRAP,
            workout_title="AMRAP 10 min",
            score_type="rounds",
        )
        fitted = fit_block(block, 900)
        assert fitted.target_seconds == 900
        assert fitted.workout_title == "AMRAP 15 min"
        assert [i.movement_id for i in fitted.items] == ["burpee"]
        assert abs(fitted.content_seconds - 900) < 5

    def test_empty_block_only_retargeted(self) -> None:
        block = Block(key=BlockKey.MAIN, title="Main", target_seconds=600)
        fitted = fit_block(block, 720)
        assert fitted.is_empty
        assert fitted.target_seconds == 720


class TestComposeBlocks:
    def test_one_block_per_slot_in_order(self, catalog: MovementCatalog) -> None:
        skeleton = build_skeleton(get_template("mixed-strength-metcon"), 40)
        blocks = compose_blocks(skeleton, catalog.movements, 6, SeededRandom("o"), Focus.MIXED)
        assert [b.key for b in blocks] == [s.slot.key for s in skeleton.slots]
        assert [b.target_seconds for b in blocks] == [s.target_seconds for s in skeleton.slots]

    def test_avoids_repeats_across_blocks(self, catalog: MovementCatalog) -> None:
        skeleton = build_skeleton(get_template("strength-upper-lower"), 50)
        for i in range(10):
            blocks = compose_blocks(skeleton, catalog.movements, 7, SeededRandom(f"r{i}"), Focus.STRENGTH)
            ids = [item.movement_id for b in blocks for item in b.items]
            assert len(ids) == len(set(ids))
