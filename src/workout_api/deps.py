"""FastAPI dependencies: generator, store, caller identity, clock."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import Header

from workout_api import config
from workout_api.store import WorkoutStore
from workout_engine.catalog.catalog import MovementCatalog, load_catalog
from workout_engine.envelope import WorkoutGenerator
from workout_engine.recovery.intensity_cap import CapPolicy

logger = logging.getLogger(__name__)

_generator: WorkoutGenerator | None = None
_store = WorkoutStore()


def build_generator() -> WorkoutGenerator:
    """Build the generator from environment configuration."""
    if config.CATALOG_PATH is not None:
        catalog = load_catalog(config.CATALOG_PATH)
    else:
        catalog = MovementCatalog.default()
    logger.info(
        "Workout generator v%s ready with %d movements",
        config.GENERATOR_VERSION,
        len(catalog),
    )
    return WorkoutGenerator(
        catalog=catalog,
        cap_policy=CapPolicy(threshold=config.RECOVERY_THRESHOLD),
        generator_version=config.GENERATOR_VERSION,
    )


def get_generator() -> WorkoutGenerator:
    global _generator
    if _generator is None:
        _generator = build_generator()
    return _generator


def get_store() -> WorkoutStore:
    return _store


def get_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """Caller identity from the ``X-User-Id`` header."""
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return config.ANONYMOUS_USER_ID


def get_today() -> date:
    return date.today()
