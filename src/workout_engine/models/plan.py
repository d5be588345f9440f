"""Workout plan models: the output of one generation."""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.exceptions import EmptyBlockError
from workout_engine.models.enums import TRANSITION_SECONDS, BlockKey, BlockStructure, Focus
from workout_engine.models.prescription import Prescription, estimate_seconds


@dataclass(frozen=True)
class BlockItem:
    movement_id: str
    name: str
    prescription: Prescription


@dataclass(frozen=True)
class Block:
    """An ordered group of movements sharing a role and a time budget.

    ``workout_title`` and ``score_type`` are set for scored conditioning
    pieces (e.g. ``"AMRAP 12 min"`` scored in rounds).
    """

    key: BlockKey
    title: str
    target_seconds: int
    items: tuple[BlockItem, ...] = ()
    structure: BlockStructure = BlockStructure.STRAIGHT
    workout_title: str | None = None
    score_type: str | None = None
    coaching_cues: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def content_seconds(self) -> int:
        """Estimated time the items take, one transition per item included."""
        return sum(estimate_seconds(i.prescription) + TRANSITION_SECONDS for i in self.items)


@dataclass(frozen=True)
class IntensityCap:
    """Record of a recovery-driven reduction of the requested intensity."""

    original: int
    capped: int
    reason: str


@dataclass(frozen=True)
class EmptyBlockDefect:
    """A block the composer could not fill from the available movements."""

    block_index: int
    block_key: BlockKey
    message: str


@dataclass(frozen=True)
class WorkoutPlan:
    """A complete, immutable workout plan.

    ``intensity`` is the effective (possibly capped) level; the original
    request lives in ``intensity_cap.original`` when a cap was applied.
    Empty blocks are reported through ``defects`` rather than raised.
    """

    focus: Focus
    duration_minutes: int
    intensity: int
    title: str
    summary: str
    equipment: frozenset[str]
    blocks: tuple[Block, ...]
    coaching_notes: str
    seed: str
    generator_version: str
    template_id: str = ""
    intensity_cap: IntensityCap | None = None

    @property
    def total_seconds(self) -> int:
        return sum(b.target_seconds for b in self.blocks)

    @property
    def content_seconds(self) -> int:
        return sum(b.content_seconds for b in self.blocks)

    @property
    def defects(self) -> tuple[EmptyBlockDefect, ...]:
        return tuple(
            EmptyBlockDefect(
                block_index=i,
                block_key=b.key,
                message=f"No available movement fits the {b.title} block",
            )
            for i, b in enumerate(self.blocks)
            if b.is_empty
        )

    @property
    def is_complete(self) -> bool:
        return all(not b.is_empty for b in self.blocks)

    @property
    def movement_ids(self) -> tuple[str, ...]:
        return tuple(item.movement_id for b in self.blocks for item in b.items)

    def raise_for_defects(self) -> None:
        """Raise ``EmptyBlockError`` if any block has no movements."""
        defects = self.defects
        if defects:
            raise EmptyBlockError(defects)


@dataclass(frozen=True)
class GenerationChoices:
    """The concrete random choices a seed resolved to."""

    template_id: str
    movement_ids: tuple[str, ...]
    scheme_id: str


@dataclass(frozen=True)
class GenerationResult:
    """Plan plus the reproducibility envelope around it."""

    plan: WorkoutPlan
    choices: GenerationChoices
    requested_version: str
    version_mismatch: bool = False

    @property
    def seed(self) -> str:
        return self.plan.seed
