"""Tests for the seeded random source."""

from __future__ import annotations

import pytest

from workout_engine.rng import SeededRandom, next_value, seed_to_state


class TestSeedToState:
    def test_same_seed_same_state(self) -> None:
        assert seed_to_state("abc") == seed_to_state("abc")

    def test_different_seeds_differ(self) -> None:
        assert seed_to_state("abc") != seed_to_state("abd")

    def test_empty_seed_is_fnv_offset_basis(self) -> None:
        assert seed_to_state("") == 2166136261

    def test_known_fnv1a_value(self) -> None:
        # FNV-1a 32-bit of "a"
        assert seed_to_state("a") == 0xE40C292C

    def test_unicode_and_odd_seeds_never_raise(self) -> None:
        for seed in ("", " ", "🏋️", "x" * 1000, "\x00\n"):
            state = seed_to_state(seed)
            assert 0 <= state <= 0xFFFFFFFF


class TestNextValue:
    def test_pure(self) -> None:
        assert next_value(12345) == next_value(12345)

    def test_value_in_unit_interval(self) -> None:
        state = seed_to_state("range-check")
        for _ in range(2000):
            value, state = next_value(state)
            assert 0.0 <= value < 1.0

    def test_state_advances(self) -> None:
        _, new_state = next_value(0)
        assert new_state == 0x6D2B79F5

    def test_state_stays_32_bit(self) -> None:
        _, new_state = next_value(0xFFFFFFFF)
        assert 0 <= new_state <= 0xFFFFFFFF


class TestSeededRandom:
    def test_sequences_reproducible(self) -> None:
        a = SeededRandom("abc")
        b = SeededRandom("abc")
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_different_seeds_diverge(self) -> None:
        a = SeededRandom("abc")
        b = SeededRandom("xyz")
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_draws_counted(self) -> None:
        rng = SeededRandom("count")
        rng.random()
        rng.randint(5)
        rng.choice([1, 2, 3])
        assert rng.draws == 3

    def test_randint_bounds(self) -> None:
        rng = SeededRandom("bounds")
        values = {rng.randint(4) for _ in range(500)}
        assert values == {0, 1, 2, 3}

    def test_randint_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError):
            SeededRandom("x").randint(0)

    def test_choice_empty_raises(self) -> None:
        with pytest.raises(IndexError):
            SeededRandom("x").choice([])

    def test_shuffle_is_permutation_and_copy(self) -> None:
        items = list(range(10))
        shuffled = SeededRandom("shuffle").shuffle(items)
        assert sorted(shuffled) == items
        assert items == list(range(10))

    def test_sample_without_replacement_distinct(self) -> None:
        picked = SeededRandom("sample").sample_without_replacement("abcdefgh", 5)
        assert len(picked) == 5
        assert len(set(picked)) == 5

    def test_sample_more_than_available(self) -> None:
        picked = SeededRandom("sample").sample_without_replacement([1, 2], 5)
        assert sorted(picked) == [1, 2]
