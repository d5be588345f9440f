"""Workout templates: block structure for each focus.

Each template is an ordered tuple of slots. A slot owns a share of the
session time, the movement patterns it may draw from, and the
prescription convention for its items. Shares of a template sum to 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from workout_engine.math.allocation import apportion
from workout_engine.models.enums import (
    BlockKey,
    BlockStructure,
    Focus,
    PrescriptionKind,
)
from workout_engine.rng import SeededRandom

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotTemplate:
    """One block position inside a template.

    Attributes:
        key: Block role.
        title: Display title of the block.
        share: Fraction of total session time.
        patterns: A movement qualifies if it carries any of these tags.
        prescription_kind: Default dose convention for items.
        preferred_patterns: Movements with these tags are drawn first.
        max_items: Upper bound on movements in the block.
        structure: How the block is run (straight sets, AMRAP, ...).
        score_type: What the athlete records for scored pieces.
        allow_distance: Cardio movements get distance doses here.
    """

    key: BlockKey
    title: str
    share: float
    patterns: frozenset[str]
    prescription_kind: PrescriptionKind
    preferred_patterns: frozenset[str] = frozenset()
    max_items: int = 3
    structure: BlockStructure = BlockStructure.STRAIGHT
    score_type: str | None = None
    allow_distance: bool = False


@dataclass(frozen=True)
class WorkoutTemplate:
    id: str
    name: str
    focus: Focus
    min_minutes: int
    max_minutes: int
    intensity_range: tuple[int, int]
    slots: tuple[SlotTemplate, ...]

    def fits_duration(self, duration_minutes: int) -> bool:
        return self.min_minutes <= duration_minutes <= self.max_minutes

    def fits_intensity(self, intensity: int) -> bool:
        low, high = self.intensity_range
        return low <= intensity <= high

    @property
    def midpoint_minutes(self) -> float:
        return (self.min_minutes + self.max_minutes) / 2


@dataclass(frozen=True)
class SkeletonSlot:
    slot: SlotTemplate
    target_seconds: int


@dataclass(frozen=True)
class TemplateSkeleton:
    """A template with its shares resolved to whole seconds."""

    template: WorkoutTemplate
    slots: tuple[SkeletonSlot, ...]

    @property
    def total_seconds(self) -> int:
        return sum(s.target_seconds for s in self.slots)


# ---------------------------------------------------------------------------
# Slot building blocks
# ---------------------------------------------------------------------------

_WARMUP_PATTERNS = frozenset({"warmup", "mobility"})
_COOLDOWN_PATTERNS = frozenset({"stretch", "mobility"})
_MAIN_PATTERNS = frozenset({"squat", "hinge", "push", "pull"})
_ACCESSORY_PATTERNS = frozenset({"push", "pull", "lunge", "carry", "hinge"})
_CORE_PATTERNS = frozenset({"core"})
_CONDITIONING_PATTERNS = frozenset({"conditioning"})
_CARDIO_PATTERNS = frozenset({"cardio"})
_COMPOUND = frozenset({"compound"})


def _warmup(share: float) -> SlotTemplate:
    return SlotTemplate(
        key=BlockKey.WARMUP,
        title="Warm-up",
        share=share,
        patterns=_WARMUP_PATTERNS,
        prescription_kind=PrescriptionKind.TIME,
        max_items=3,
        structure=BlockStructure.FLOW,
    )


def _cooldown(share: float) -> SlotTemplate:
    return SlotTemplate(
        key=BlockKey.COOLDOWN,
        title="Cool-down",
        share=share,
        patterns=_COOLDOWN_PATTERNS,
        prescription_kind=PrescriptionKind.TIME,
        max_items=3,
        structure=BlockStructure.FLOW,
    )


def _main(share: float, title: str = "Main Lifts", max_items: int = 3) -> SlotTemplate:
    return SlotTemplate(
        key=BlockKey.MAIN,
        title=title,
        share=share,
        patterns=_MAIN_PATTERNS,
        prescription_kind=PrescriptionKind.REPS,
        preferred_patterns=_COMPOUND,
        max_items=max_items,
    )


def _accessory(share: float) -> SlotTemplate:
    return SlotTemplate(
        key=BlockKey.ACCESSORY,
        title="Accessory Work",
        share=share,
        patterns=_ACCESSORY_PATTERNS,
        prescription_kind=PrescriptionKind.REPS,
        preferred_patterns=frozenset({"isolation"}),
        max_items=3,
        structure=BlockStructure.SUPERSET,
    )


def _conditioning(
    share: float,
    structure: BlockStructure,
    title: str = "Conditioning",
    patterns: frozenset[str] = _CONDITIONING_PATTERNS,
    max_items: int = 4,
    score_type: str | None = None,
    allow_distance: bool = False,
) -> SlotTemplate:
    return SlotTemplate(
        key=BlockKey.CONDITIONING,
        title=title,
        share=share,
        patterns=patterns,
        prescription_kind=PrescriptionKind.TIME,
        max_items=max_items,
        structure=structure,
        score_type=score_type,
        allow_distance=allow_distance,
    )


# ---------------------------------------------------------------------------
# Template catalog
# ---------------------------------------------------------------------------

WORKOUT_TEMPLATES: tuple[WorkoutTemplate, ...] = (
    # --- Strength ---
    WorkoutTemplate(
        id="strength-quick",
        name="Quick Strength",
        focus=Focus.STRENGTH,
        min_minutes=10,
        max_minutes=25,
        intensity_range=(1, 10),
        slots=(_warmup(0.20), _main(0.70, max_items=2), _cooldown(0.10)),
    ),
    WorkoutTemplate(
        id="strength-full-body",
        name="Full-Body Strength",
        focus=Focus.STRENGTH,
        min_minutes=20,
        max_minutes=45,
        intensity_range=(3, 8),
        slots=(_warmup(0.15), _main(0.45), _accessory(0.30), _cooldown(0.10)),
    ),
    WorkoutTemplate(
        id="strength-upper-lower",
        name="Upper / Lower Split",
        focus=Focus.STRENGTH,
        min_minutes=30,
        max_minutes=60,
        intensity_range=(4, 9),
        slots=(
            _warmup(0.12),
            _main(0.38, title="Primary Lifts", max_items=2),
            _main(0.25, title="Secondary Lifts", max_items=2),
            _accessory(0.15),
            _cooldown(0.10),
        ),
    ),
    WorkoutTemplate(
        id="strength-heavy",
        name="Heavy Compound Day",
        focus=Focus.STRENGTH,
        min_minutes=40,
        max_minutes=60,
        intensity_range=(7, 10),
        slots=(
            _warmup(0.15),
            _main(0.55, title="Heavy Compounds", max_items=2),
            _accessory(0.20),
            _cooldown(0.10),
        ),
    ),
    # --- Conditioning ---
    WorkoutTemplate(
        id="conditioning-emom",
        name="EMOM Engine",
        focus=Focus.CONDITIONING,
        min_minutes=10,
        max_minutes=20,
        intensity_range=(1, 10),
        slots=(
            _warmup(0.20),
            _conditioning(0.70, BlockStructure.EMOM, max_items=3),
            _cooldown(0.10),
        ),
    ),
    WorkoutTemplate(
        id="conditioning-amrap",
        name="AMRAP Grinder",
        focus=Focus.CONDITIONING,
        min_minutes=15,
        max_minutes=45,
        intensity_range=(4, 10),
        slots=(
            _warmup(0.15),
            _conditioning(0.75, BlockStructure.AMRAP, score_type="rounds"),
            _cooldown(0.10),
        ),
    ),
    WorkoutTemplate(
        id="conditioning-intervals",
        name="Interval Conditioning",
        focus=Focus.CONDITIONING,
        min_minutes=25,
        max_minutes=60,
        intensity_range=(3, 9),
        slots=(
            _warmup(0.15),
            _conditioning(
                0.55,
                BlockStructure.INTERVALS,
                title="Intervals",
                max_items=3,
                allow_distance=True,
            ),
            _conditioning(
                0.15,
                BlockStructure.CIRCUIT,
                title="Core Finisher",
                patterns=_CORE_PATTERNS,
                max_items=2,
            ),
            _cooldown(0.15),
        ),
    ),
    # --- Mixed ---
    WorkoutTemplate(
        id="mixed-couplet",
        name="Strength + Metcon Couplet",
        focus=Focus.MIXED,
        min_minutes=10,
        max_minutes=30,
        intensity_range=(1, 10),
        slots=(
            _warmup(0.20),
            _main(0.35, title="Strength", max_items=2),
            _conditioning(0.35, BlockStructure.CIRCUIT, max_items=2),
            _cooldown(0.10),
        ),
    ),
    WorkoutTemplate(
        id="mixed-strength-metcon",
        name="Lift Then Burn",
        focus=Focus.MIXED,
        min_minutes=25,
        max_minutes=60,
        intensity_range=(3, 10),
        slots=(
            _warmup(0.15),
            _main(0.35, title="Strength"),
            _conditioning(0.40, BlockStructure.AMRAP, title="Metcon", score_type="rounds"),
            _cooldown(0.10),
        ),
    ),
    WorkoutTemplate(
        id="mixed-complex",
        name="Hybrid Complex",
        focus=Focus.MIXED,
        min_minutes=35,
        max_minutes=60,
        intensity_range=(5, 10),
        slots=(
            _warmup(0.12),
            _main(0.28, title="Strength", max_items=2),
            _accessory(0.20),
            _conditioning(0.30, BlockStructure.CIRCUIT, title="For Time", score_type="time"),
            _cooldown(0.10),
        ),
    ),
    # --- Endurance ---
    WorkoutTemplate(
        id="endurance-steady",
        name="Steady State",
        focus=Focus.ENDURANCE,
        min_minutes=10,
        max_minutes=60,
        intensity_range=(1, 6),
        slots=(
            _warmup(0.15),
            _conditioning(
                0.75,
                BlockStructure.STEADY,
                title="Steady Effort",
                patterns=_CARDIO_PATTERNS,
                max_items=1,
                allow_distance=True,
            ),
            _cooldown(0.10),
        ),
    ),
    WorkoutTemplate(
        id="endurance-intervals",
        name="Endurance Intervals",
        focus=Focus.ENDURANCE,
        min_minutes=20,
        max_minutes=60,
        intensity_range=(5, 10),
        slots=(
            _warmup(0.20),
            _conditioning(
                0.60,
                BlockStructure.INTERVALS,
                title="Intervals",
                patterns=_CARDIO_PATTERNS,
                max_items=2,
                allow_distance=True,
            ),
            _cooldown(0.20),
        ),
    ),
)

_TEMPLATES_BY_ID = {t.id: t for t in WORKOUT_TEMPLATES}


def get_template(template_id: str) -> WorkoutTemplate:
    """Look up a template by id.

    Raises:
        KeyError: If no template has this id.
    """
    return _TEMPLATES_BY_ID[template_id]


def templates_for(focus: Focus) -> tuple[WorkoutTemplate, ...]:
    return tuple(t for t in WORKOUT_TEMPLATES if t.focus == focus)


def select_template(
    focus: Focus,
    duration_minutes: int,
    intensity: int,
    rng: SeededRandom,
) -> WorkoutTemplate:
    """Pick a template for the request.

    Exactly one value is drawn from ``rng`` whatever the candidate count,
    so later draws do not shift when the template list changes shape.

    Args:
        focus: Requested focus.
        duration_minutes: Normalized duration.
        intensity: Effective (possibly capped) intensity.
        rng: The generation's random cursor.

    Returns:
        The chosen template.
    """
    draw = rng.random()
    own = templates_for(focus)
    candidates = [t for t in own if t.fits_duration(duration_minutes)]
    if not candidates:
        closest = min(own, key=lambda t: (abs(t.midpoint_minutes - duration_minutes), t.id))
        logger.debug("No %s template fits %d min, using %s", focus.value, duration_minutes, closest.id)
        return closest

    preferred = [t for t in candidates if t.fits_intensity(intensity)]
    pool = preferred or candidates
    chosen = pool[min(int(draw * len(pool)), len(pool) - 1)]
    logger.debug(
        "Template %s picked from %d candidate(s) for %s/%d min/i%d",
        chosen.id,
        len(pool),
        focus.value,
        duration_minutes,
        intensity,
    )
    return chosen


def build_skeleton(template: WorkoutTemplate, duration_minutes: int) -> TemplateSkeleton:
    """Resolve slot shares into whole seconds summing to the duration."""
    seconds = apportion([s.share for s in template.slots], duration_minutes * 60)
    return TemplateSkeleton(
        template=template,
        slots=tuple(
            SkeletonSlot(slot=slot, target_seconds=target)
            for slot, target in zip(template.slots, seconds)
        ),
    )
