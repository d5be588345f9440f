"""
Workout Generation API Router

Endpoints:
- preview: generate without persisting
- simulate: generate with explicit seed/version, returning the random choices
- generate: generate and persist (refuses plans with empty blocks)
- replay: re-run an exact seed under a version
- regenerate: same constraints, fresh seed
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from workout_api.deps import get_generator, get_store, get_today, get_user_id
from workout_api.schemas import (
    GenerateRequest,
    PreviewRequest,
    RegenerateRequest,
    ReplayRequest,
    SimulateRequest,
    WorkoutInputs,
)
from workout_api.store import WorkoutStore
from workout_engine.envelope import WorkoutGenerator
from workout_engine.models.request import GenerationRequest
from workout_engine.normalizer import normalize_request
from workout_engine.serialization.plan_json import plan_to_dict, result_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/workouts", tags=["Workouts"])


def _request_from_inputs(inputs: WorkoutInputs) -> GenerationRequest:
    return normalize_request(
        inputs.archetype,
        inputs.minutes,
        inputs.target_intensity,
        inputs.equipment,
        inputs.constraints,
    )


@router.post("/preview")
def preview_workout(
    body: PreviewRequest,
    generator: WorkoutGenerator = Depends(get_generator),
) -> Dict:
    """Generate a plan without saving it."""
    request = normalize_request(
        body.focus, body.duration_min, body.intensity, body.equipment, body.constraints
    )
    result = generator.generate(request, seed=body.seed, recovery_score=body.recovery_score())
    return {"ok": True, "preview": plan_to_dict(result.plan), "seed": result.seed}


@router.post("/simulate")
def simulate_workout(
    body: SimulateRequest,
    generator: WorkoutGenerator = Depends(get_generator),
) -> Dict:
    """Generate with an optional explicit seed and version, echoing the choices."""
    request = _request_from_inputs(body.inputs)
    result = generator.generate(
        request,
        seed=body.rng_seed,
        generator_version=body.generator_version,
        recovery_score=body.recovery_score(),
    )
    return {"ok": True, **result_to_dict(result)}


@router.post("/generate")
def generate_workout(
    body: GenerateRequest,
    generator: WorkoutGenerator = Depends(get_generator),
    store: WorkoutStore = Depends(get_store),
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
):
    """Generate and persist a plan for the caller."""
    request = _request_from_inputs(body.inputs)
    result = generator.generate(
        request,
        seed=body.seed,
        generator_version=body.generator_version,
        recovery_score=body.recovery_score(),
    )
    plan = result.plan
    if plan.defects:
        logger.info("Refusing to persist plan %s with %d empty block(s)", plan.seed, len(plan.defects))
        return JSONResponse(
            status_code=422,
            content={
                "ok": False,
                "error": "Generated plan has empty blocks; regenerate or adjust equipment",
                "retryable": True,
                "seed": plan.seed,
                "defects": plan_to_dict(plan)["defects"],
            },
        )
    stored = store.save(user_id, plan, created_on=today)
    logger.info("Saved workout %s for %s", stored.id, user_id)
    return {"ok": True, "id": stored.id, **plan_to_dict(plan)}


@router.post("/replay")
def replay_workout(
    body: ReplayRequest,
    generator: WorkoutGenerator = Depends(get_generator),
) -> Dict:
    """Re-run a generation with its exact seed and version."""
    request = _request_from_inputs(body.inputs)
    result = generator.replay(
        request, body.seed, body.generator_version, recovery_score=body.recovery_score()
    )
    return {"ok": True, **result_to_dict(result)}


@router.post("/regenerate")
def regenerate_workout(
    body: RegenerateRequest,
    generator: WorkoutGenerator = Depends(get_generator),
) -> Dict:
    """Same constraints, freshly minted seed."""
    request = _request_from_inputs(body.inputs)
    result = generator.regenerate(
        request,
        body.previous_seed,
        generator_version=body.generator_version,
        recovery_score=body.recovery_score(),
    )
    return {"ok": True, **result_to_dict(result)}


@router.get("/{workout_id}")
def get_workout(
    workout_id: str,
    store: WorkoutStore = Depends(get_store),
    user_id: str = Depends(get_user_id),
) -> Dict:
    """Fetch a saved workout owned by the caller."""
    stored = store.get(workout_id)
    if stored is None or stored.user_id != user_id:
        raise HTTPException(status_code=404, detail="Workout not found")
    return {"ok": True, "id": stored.id, **plan_to_dict(stored.plan)}
