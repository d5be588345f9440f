"""Movement: a single exercise in the catalog."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from workout_engine.models.enums import MovementCategory


@dataclass(frozen=True)
class Movement:
    """A catalog entry.

    An empty ``required_equipment`` set means the movement is always
    available, whatever the caller owns.
    """

    id: str
    name: str
    patterns: frozenset[str]
    required_equipment: frozenset[str] = frozenset()
    category: MovementCategory = MovementCategory.STRENGTH

    def is_available_with(self, equipment: frozenset[str]) -> bool:
        return self.required_equipment <= equipment

    def has_any_pattern(self, patterns: Iterable[str]) -> bool:
        return not self.patterns.isdisjoint(patterns)
