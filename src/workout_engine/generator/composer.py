"""Block composer: fills a skeleton slot with movements and doses."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from workout_engine.generator.coaching_cues import get_coaching_cue
from workout_engine.generator.prescriptions import fit_prescription, prescribe
from workout_engine.generator.templates import SkeletonSlot, SlotTemplate, TemplateSkeleton
from workout_engine.math.allocation import apportion
from workout_engine.models.enums import TRANSITION_SECONDS, BlockStructure, Focus
from workout_engine.models.movement import Movement
from workout_engine.models.plan import Block, BlockItem
from workout_engine.models.prescription import estimate_seconds
from workout_engine.rng import SeededRandom

logger = logging.getLogger(__name__)


def _workout_title(
    structure: BlockStructure, score_type: str | None, target_seconds: int
) -> str | None:
    minutes = max(1, round(target_seconds / 60))
    if structure == BlockStructure.AMRAP:
        return f"AMRAP {minutes} min"
    if structure == BlockStructure.EMOM:
        return f"EMOM {minutes} min"
    if structure == BlockStructure.CIRCUIT and score_type == "time":
        return f"For Time ({minutes} min cap)"
    return None


def slot_candidates(
    slot: SlotTemplate,
    pool: Sequence[Movement],
    used_ids: frozenset[str] | set[str] = frozenset(),
) -> list[Movement]:
    """Movements that may fill ``slot``, in catalog order.

    Movements already used elsewhere in the plan are dropped unless that
    would leave the slot with nothing.
    """
    matching = [m for m in pool if m.has_any_pattern(slot.patterns)]
    fresh = [m for m in matching if m.id not in used_ids]
    return fresh or matching


def fit_block(block: Block, target_seconds: int) -> Block:
    """Give ``block`` a new target and resize its doses to fill it.

    The target, less one transition per item, is split across the items in
    proportion to their current estimated time; each dose is then refit to
    its share. The movements themselves never change.
    """
    title = _workout_title(block.structure, block.score_type, target_seconds)
    if block.is_empty:
        return replace(block, target_seconds=target_seconds, workout_title=title)
    work_budget = max(0, target_seconds - len(block.items) * TRANSITION_SECONDS)
    shares = apportion([estimate_seconds(i.prescription) for i in block.items], work_budget)
    items = tuple(
        replace(item, prescription=fit_prescription(item.prescription, share, block.structure))
        for item, share in zip(block.items, shares)
    )
    return replace(block, target_seconds=target_seconds, workout_title=title, items=items)


def compose_block(
    skeleton_slot: SkeletonSlot,
    pool: Sequence[Movement],
    intensity: int,
    rng: SeededRandom,
    used_ids: frozenset[str] | set[str] = frozenset(),
    focus: Focus | None = None,
) -> Block:
    """Draw movements for one block until its time budget is used.

    Preferred-pattern movements are drawn first. Draws are without
    replacement and stop once the estimated time reaches the budget or
    ``max_items`` movements were picked. The drawn doses are then fitted
    so the block content fills the budget. An empty candidate list yields a
    block with no items; callers detect that through ``WorkoutPlan.defects``.

    Args:
        skeleton_slot: Slot with its resolved time budget.
        pool: Movements allowed by equipment and constraints.
        intensity: Effective intensity, 1-10.
        rng: The generation's random cursor.
        used_ids: Movement ids already placed in earlier blocks.
        focus: Plan focus, used for coaching cues.

    Returns:
        The composed Block.
    """
    slot = skeleton_slot.slot
    budget = skeleton_slot.target_seconds
    cue = get_coaching_cue(focus, slot.key, slot.structure) if focus else ""
    block = Block(
        key=slot.key,
        title=slot.title,
        target_seconds=budget,
        structure=slot.structure,
        workout_title=_workout_title(slot.structure, slot.score_type, budget),
        score_type=slot.score_type,
        coaching_cues=cue,
    )

    candidates = slot_candidates(slot, pool, used_ids)
    if not candidates:
        logger.warning("No movements available for %s block", slot.key.value)
        return block

    preferred = [m for m in candidates if m.has_any_pattern(slot.preferred_patterns)]
    others = [m for m in candidates if not m.has_any_pattern(slot.preferred_patterns)]

    items: list[BlockItem] = []
    consumed = 0
    while (preferred or others) and len(items) < slot.max_items and consumed < budget:
        source = preferred if preferred else others
        movement = source.pop(rng.randint(len(source)))
        prescription = prescribe(movement, slot, intensity, rng, budget_seconds=budget)
        items.append(BlockItem(movement_id=movement.id, name=movement.name, prescription=prescription))
        consumed += estimate_seconds(prescription) + TRANSITION_SECONDS

    fitted = fit_block(replace(block, items=tuple(items)), budget)
    logger.debug(
        "Composed %s block: %d item(s), ~%ds of %ds",
        slot.key.value,
        len(items),
        fitted.content_seconds,
        budget,
    )
    return fitted


def compose_blocks(
    skeleton: TemplateSkeleton,
    pool: Sequence[Movement],
    intensity: int,
    rng: SeededRandom,
    focus: Focus | None = None,
) -> tuple[Block, ...]:
    """Compose every slot of a skeleton in order, avoiding repeats across blocks."""
    used: set[str] = set()
    blocks = []
    for skeleton_slot in skeleton.slots:
        block = compose_block(skeleton_slot, pool, intensity, rng, frozenset(used), focus)
        used.update(item.movement_id for item in block.items)
        blocks.append(block)
    return tuple(blocks)
