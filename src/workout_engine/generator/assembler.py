"""Plan assembler: titles, summary, coaching notes, duration enforcement.

Pure text and arithmetic over already-chosen blocks; never draws from
the random source.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping, Sequence

from workout_engine.generator.coaching_cues import get_focus_note
from workout_engine.generator.composer import fit_block
from workout_engine.generator.prescriptions import get_intensity_parameters
from workout_engine.generator.templates import WorkoutTemplate
from workout_engine.math.allocation import apportion
from workout_engine.models.enums import DURATION_TOLERANCE_PCT, Focus
from workout_engine.models.movement import Movement
from workout_engine.models.plan import Block, WorkoutPlan
from workout_engine.models.request import GenerationRequest
from workout_engine.recovery.intensity_cap import IntensityDecision

logger = logging.getLogger(__name__)

_INTENSITY_LABELS: dict[int, str] = {
    1: "Recovery",
    2: "Easy",
    3: "Light",
    4: "Moderate",
    5: "Steady",
    6: "Solid",
    7: "Hard",
    8: "Very Hard",
    9: "Intense",
    10: "Maximal",
}

_FOCUS_LABELS: dict[Focus, str] = {
    Focus.STRENGTH: "Strength",
    Focus.CONDITIONING: "Conditioning",
    Focus.MIXED: "Mixed",
    Focus.ENDURANCE: "Endurance",
}

# Tags describing role rather than movement pattern
_ROLE_TAGS = frozenset(
    {"compound", "isolation", "upper", "lower", "full", "warmup", "mobility",
     "stretch", "impact", "running", "conditioning"}
)


def _within(seconds: int, target_seconds: int, tolerance: float) -> bool:
    return abs(seconds - target_seconds) <= tolerance * target_seconds


def enforce_duration(
    blocks: Sequence[Block],
    target_seconds: int,
    tolerance: float = DURATION_TOLERANCE_PCT,
) -> tuple[Block, ...]:
    """Keep the composed content within tolerance of the session length.

    Content is what the doses actually take (``Block.content_seconds``),
    not the budgets the skeleton handed out. When it drifts too far, block
    targets are rescaled in proportion to the content each block holds,
    with largest-remainder rounding so they sum exactly to
    ``target_seconds``, and every block's doses are refit to its new
    target. Plans with empty blocks are left as they are; the empty block
    is already reported as a defect.
    """
    blocks = tuple(blocks)
    content = sum(b.content_seconds for b in blocks)
    if not blocks or _within(content, target_seconds, tolerance):
        return blocks
    if any(b.is_empty for b in blocks):
        logger.debug("Not rescaling a plan with empty blocks")
        return blocks

    logger.info("Rescaling plan content from %ds to %ds", content, target_seconds)
    targets = apportion([b.content_seconds for b in blocks], target_seconds)
    rescaled = tuple(fit_block(b, t) for b, t in zip(blocks, targets))
    content = sum(b.content_seconds for b in rescaled)
    if not _within(content, target_seconds, tolerance):
        logger.warning(
            "Plan content %ds still outside %d%% of %ds after rescaling",
            content,
            round(tolerance * 100),
            target_seconds,
        )
    return rescaled


def dominant_patterns(
    blocks: Sequence[Block], movements: Mapping[str, Movement], limit: int = 3
) -> list[str]:
    """Most frequent movement patterns across the plan, ties by name."""
    counts: Counter[str] = Counter()
    for block in blocks:
        for item in block.items:
            movement = movements.get(item.movement_id)
            if movement is not None:
                counts.update(p for p in movement.patterns if p not in _ROLE_TAGS)
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return [name for name, _ in ranked[:limit]]


def equipment_used(blocks: Sequence[Block], movements: Mapping[str, Movement]) -> list[str]:
    used: set[str] = set()
    for block in blocks:
        for item in block.items:
            movement = movements.get(item.movement_id)
            if movement is not None:
                used |= movement.required_equipment
    return sorted(used)


def build_title(focus: Focus, intensity: int, template: WorkoutTemplate) -> str:
    label = _INTENSITY_LABELS.get(intensity, "")
    return f"{label} {_FOCUS_LABELS[focus]}: {template.name}".strip()


def build_summary(
    request: GenerationRequest,
    template: WorkoutTemplate,
    blocks: Sequence[Block],
    movements: Mapping[str, Movement],
) -> str:
    parts = [f"{request.duration_minutes}-min {request.focus.value} session ({template.name})."]
    patterns = dominant_patterns(blocks, movements)
    if patterns:
        parts.append(f"Emphasis: {', '.join(patterns)}.")
    used = equipment_used(blocks, movements)
    parts.append(f"Equipment: {', '.join(used) if used else 'none'}.")
    return " ".join(parts)


def build_coaching_notes(
    focus: Focus,
    decision: IntensityDecision,
    blocks: Sequence[Block],
) -> str:
    params = get_intensity_parameters(decision.effective)
    notes = [get_focus_note(focus), f"Target effort around RPE {params.rpe}/10."]
    if decision.cap is not None:
        notes.append(decision.cap.reason)
    empty = [b.title for b in blocks if b.is_empty]
    if empty:
        notes.append(
            f"No available movement fits: {', '.join(empty)}. "
            "Add equipment, relax constraints, or regenerate."
        )
    return " ".join(n for n in notes if n)


def assemble_plan(
    request: GenerationRequest,
    template: WorkoutTemplate,
    blocks: Sequence[Block],
    decision: IntensityDecision,
    seed: str,
    generator_version: str,
    movements: Mapping[str, Movement],
) -> WorkoutPlan:
    """Wrap composed blocks into a complete WorkoutPlan.

    Args:
        request: The normalized request.
        template: Template the blocks were composed from.
        blocks: Composed blocks, in template order.
        decision: Effective intensity and optional cap.
        seed: Seed the plan was generated with.
        generator_version: Version stamped on the plan.
        movements: Lookup used to describe the chosen movements.

    Returns:
        The assembled, immutable plan.
    """
    blocks = enforce_duration(blocks, request.duration_seconds)
    return WorkoutPlan(
        focus=request.focus,
        duration_minutes=request.duration_minutes,
        intensity=decision.effective,
        title=build_title(request.focus, decision.effective, template),
        summary=build_summary(request, template, blocks, movements),
        equipment=request.equipment,
        blocks=blocks,
        coaching_notes=build_coaching_notes(request.focus, decision, blocks),
        seed=seed,
        generator_version=generator_version,
        template_id=template.id,
        intensity_cap=decision.cap,
    )
