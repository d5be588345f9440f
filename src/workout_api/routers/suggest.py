"""
Daily Suggestion API Router

Endpoints:
- GET suggest/today: today's suggested config and seed
- POST suggest/rotate: swap to the next focus with a new seed
"""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from workout_api.deps import get_store, get_today, get_user_id
from workout_api.schemas import RotateRequest
from workout_api.store import WorkoutStore
from workout_engine.serialization.plan_json import suggestion_to_dict
from workout_engine.suggest.daily import rotate_suggestion, suggest_today

router = APIRouter(prefix="/api/workouts/suggest", tags=["Suggestions"])


@router.get("/today")
def get_today_suggestion(
    equipment: List[str] = Query(default=[]),
    store: WorkoutStore = Depends(get_store),
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
) -> Dict:
    """Suggest today's workout, reusing a rotation made earlier today."""
    suggestion = store.last_suggestion(user_id, today)
    if suggestion is None:
        suggestion = suggest_today(user_id, store.history_for(user_id), today, equipment=equipment)
        store.remember_suggestion(user_id, suggestion)
    return {"ok": True, **suggestion_to_dict(suggestion)}


@router.post("/rotate")
def rotate_today_suggestion(
    body: Optional[RotateRequest] = None,
    store: WorkoutStore = Depends(get_store),
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
) -> Dict:
    """Rotate today's suggestion to the next focus.

    Equipment and constraints in the body only seed the first suggestion
    of the day; later rotations keep the configuration already in play.
    """
    history = store.history_for(user_id)
    previous = store.last_suggestion(user_id, today)
    if previous is None:
        previous = suggest_today(
            user_id,
            history,
            today,
            equipment=body.equipment if body else None,
            constraints=body.constraints if body else None,
        )
    rotated = rotate_suggestion(previous, user_id, history)
    store.remember_suggestion(user_id, rotated)
    return {"ok": True, **suggestion_to_dict(rotated)}
