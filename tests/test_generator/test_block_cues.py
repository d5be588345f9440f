"""Tests for block coaching cues and focus notes."""

from __future__ import annotations

from workout_engine.generator.coaching_cues import get_coaching_cue, get_focus_note
from workout_engine.models.enums import BlockKey, BlockStructure, Focus


class TestCoachingCues:
    def test_every_block_key_has_a_cue(self) -> None:
        for focus in Focus:
            for key in BlockKey:
                assert get_coaching_cue(focus, key), (focus, key)

    def test_strength_main_is_specific(self) -> None:
        assert get_coaching_cue(Focus.STRENGTH, BlockKey.MAIN) != get_coaching_cue(
            Focus.CONDITIONING, BlockKey.MAIN
        )

    def test_structure_specific_cue(self) -> None:
        cue = get_coaching_cue(Focus.CONDITIONING, BlockKey.CONDITIONING, BlockStructure.EMOM)
        assert "minute" in cue.lower()

    def test_focus_and_structure_beats_structure_only(self) -> None:
        endurance = get_coaching_cue(Focus.ENDURANCE, BlockKey.CONDITIONING, BlockStructure.INTERVALS)
        generic = get_coaching_cue(Focus.MIXED, BlockKey.CONDITIONING, BlockStructure.INTERVALS)
        assert endurance != generic

    def test_unknown_structure_falls_back(self) -> None:
        cue = get_coaching_cue(Focus.MIXED, BlockKey.CONDITIONING, BlockStructure.FLOW)
        assert cue == get_coaching_cue(Focus.MIXED, BlockKey.CONDITIONING)

    def test_steady_cue_mentions_rpe(self) -> None:
        cue = get_coaching_cue(Focus.ENDURANCE, BlockKey.CONDITIONING, BlockStructure.STEADY)
        assert "RPE" in cue


class TestFocusNotes:
    def test_every_focus_has_a_note(self) -> None:
        for focus in Focus:
            assert get_focus_note(focus)
