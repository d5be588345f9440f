"""Deterministic pseudo-random source for generation.

Seeds are arbitrary strings. They are hashed with 32-bit FNV-1a into a
state, and values are produced by the mulberry32 step. The step is a
pure function of the state, so the same seed always yields the same
sequence on every platform. Nothing here reads the clock or OS entropy.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK_32 = 0xFFFFFFFF
_FNV_OFFSET_BASIS = 2166136261
_FNV_PRIME = 16777619
_MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply."""
    return (a * b) & _MASK_32


def seed_to_state(seed: str) -> int:
    """Hash any seed string into a 32-bit state. Never raises."""
    h = _FNV_OFFSET_BASIS
    for byte in str(seed).encode("utf-8", errors="replace"):
        h ^= byte
        h = _imul(h, _FNV_PRIME)
    return h


def next_value(state: int) -> tuple[float, int]:
    """Advance a mulberry32 state by one step.

    Args:
        state: Current 32-bit state.

    Returns:
        ``(value, new_state)`` with value in [0, 1).
    """
    state = (state + _MULBERRY_INCREMENT) & _MASK_32
    t = state
    t = _imul(t ^ (t >> 15), t | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK_32
    value = ((t ^ (t >> 14)) & _MASK_32) / _TWO_POW_32
    return value, state


class SeededRandom:
    """A cursor over the seeded sequence, owned by a single generation.

    Usage::

        rng = SeededRandom("abc123")
        template = rng.choice(candidates)
    """

    def __init__(self, seed: str) -> None:
        self.seed = seed
        self._state = seed_to_state(seed)
        self.draws = 0

    @property
    def state(self) -> int:
        return self._state

    def random(self) -> float:
        value, self._state = next_value(self._state)
        self.draws += 1
        return value

    def randint(self, n: int) -> int:
        """Uniform integer in ``[0, n)``."""
        if n <= 0:
            raise ValueError("randint() requires n > 0")
        return min(int(self.random() * n), n - 1)

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("choice() from an empty sequence")
        return items[self.randint(len(items))]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a Fisher-Yates shuffled copy of ``items``."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.randint(i + 1)
            result[i], result[j] = result[j], result[i]
        return result

    def sample_without_replacement(self, items: Sequence[T], k: int) -> list[T]:
        """Draw up to ``k`` distinct positions from ``items`` in draw order."""
        pool = list(items)
        picked: list[T] = []
        while pool and len(picked) < k:
            picked.append(pool.pop(self.randint(len(pool))))
        return picked
