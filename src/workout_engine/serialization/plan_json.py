"""JSON serialization for plans, choices, requests and suggestions.

Produces the camelCase wire shape used by the HTTP boundary. The
canonical string form (sorted keys, compact separators) is what replay
checks compare byte for byte.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from workout_engine.models.plan import (
    Block,
    BlockItem,
    GenerationChoices,
    GenerationResult,
    IntensityCap,
    WorkoutPlan,
)
from workout_engine.models.prescription import (
    DistancePrescription,
    Prescription,
    RepsPrescription,
    TimePrescription,
    describe_prescription,
)
from workout_engine.models.request import GenerationRequest
from workout_engine.suggest.daily import Suggestion


def prescription_to_dict(prescription: Prescription) -> dict:
    if isinstance(prescription, RepsPrescription):
        result = {
            "type": prescription.kind.value,
            "sets": prescription.sets,
            "reps": prescription.reps,
            "restSec": prescription.rest_sec,
        }
        if prescription.load is not None:
            result["load"] = prescription.load
        return result
    if isinstance(prescription, TimePrescription):
        result = {
            "type": prescription.kind.value,
            "sets": prescription.sets,
            "seconds": prescription.seconds,
            "restSec": prescription.rest_sec,
        }
        if prescription.load is not None:
            result["load"] = prescription.load
        return result
    if isinstance(prescription, DistancePrescription):
        result = {
            "type": prescription.kind.value,
            "sets": prescription.sets,
            "meters": prescription.meters,
            "restSec": prescription.rest_sec,
        }
        if prescription.load is not None:
            result["load"] = prescription.load
        if prescription.pace is not None:
            result["pace"] = prescription.pace
        return result
    raise TypeError(f"Unknown prescription type: {type(prescription).__name__}")


def _item_to_dict(item: BlockItem) -> dict:
    return {
        "movementId": item.movement_id,
        "name": item.name,
        "prescription": prescription_to_dict(item.prescription),
    }


def _block_to_dict(block: Block) -> dict:
    result = {
        "key": block.key.value,
        "title": block.title,
        "targetSeconds": block.target_seconds,
        "estimatedSeconds": block.content_seconds,
        "structure": block.structure.value,
        "items": [_item_to_dict(item) for item in block.items],
    }
    if block.workout_title is not None:
        result["workoutTitle"] = block.workout_title
    if block.score_type is not None:
        result["scoreType"] = block.score_type
    if block.coaching_cues:
        result["coachingCues"] = block.coaching_cues
    return result


def cap_to_dict(cap: IntensityCap) -> dict:
    return {"original": cap.original, "capped": cap.capped, "reason": cap.reason}


def plan_to_dict(plan: WorkoutPlan) -> dict:
    """Convert a WorkoutPlan to its wire dict."""
    result = {
        "focus": plan.focus.value,
        "durationMinutes": plan.duration_minutes,
        "intensity": plan.intensity,
        "title": plan.title,
        "summary": plan.summary,
        "equipment": sorted(plan.equipment),
        "blocks": [_block_to_dict(b) for b in plan.blocks],
        "coachingNotes": plan.coaching_notes,
        "seed": plan.seed,
        "generatorVersion": plan.generator_version,
        "templateId": plan.template_id,
        "defects": [
            {"blockIndex": d.block_index, "blockKey": d.block_key.value, "message": d.message}
            for d in plan.defects
        ],
    }
    if plan.intensity_cap is not None:
        result["intensityCap"] = cap_to_dict(plan.intensity_cap)
    return result


def plan_to_json(plan: WorkoutPlan) -> str:
    """Canonical JSON string: sorted keys, no whitespace."""
    return json.dumps(plan_to_dict(plan), sort_keys=True, separators=(",", ":"))


def choices_to_dict(choices: GenerationChoices) -> dict:
    return {
        "templateId": choices.template_id,
        "movementIds": list(choices.movement_ids),
        "schemeId": choices.scheme_id,
    }


def result_to_dict(result: GenerationResult) -> dict:
    payload = {
        "workout": plan_to_dict(result.plan),
        "choices": choices_to_dict(result.choices),
        "seed": result.seed,
        "generatorVersion": result.plan.generator_version,
        "requestedVersion": result.requested_version,
        "versionMismatch": result.version_mismatch,
    }
    if result.plan.intensity_cap is not None:
        payload["cappedIntensity"] = cap_to_dict(result.plan.intensity_cap)
    return payload


def request_to_dict(request: GenerationRequest) -> dict:
    return {
        "focus": request.focus.value,
        "durationMinutes": request.duration_minutes,
        "intensity": request.intensity,
        "equipment": sorted(request.equipment),
        "constraints": list(request.constraints),
    }


def suggestion_to_dict(suggestion: Suggestion) -> dict:
    return {
        "date": suggestion.day.isoformat(),
        "config": request_to_dict(suggestion.config),
        "seed": suggestion.seed,
        "nonce": suggestion.nonce,
        "fatigue": suggestion.fatigue,
        "rationale": list(suggestion.rationale),
    }


def format_seconds(seconds: int) -> str:
    """Format seconds as ``'M:SS'``. e.g. 95 -> '1:35'."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{secs:02d}"


def render_plan_text(plan: WorkoutPlan) -> str:
    """Human-readable, multi-line rendering of a plan."""
    lines = [
        plan.title,
        plan.summary,
        f"Intensity {plan.intensity}/10 | seed {plan.seed} | v{plan.generator_version}",
    ]
    if plan.intensity_cap is not None:
        lines.append(f"Capped: {plan.intensity_cap.reason}")
    for block in plan.blocks:
        header = f"\n{block.title} ({format_seconds(block.target_seconds)})"
        if block.workout_title:
            header += f" - {block.workout_title}"
        lines.append(header)
        if block.is_empty:
            lines.append("  (no available movements)")
        for item in block.items:
            lines.append(f"  - {item.name}: {describe_prescription(item.prescription)}")
    lines.append("")
    lines.append(plan.coaching_notes)
    return "\n".join(lines)
