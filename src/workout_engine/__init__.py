"""Seeded, recovery-aware workout generation."""

from workout_engine.envelope import (
    GENERATOR_VERSION,
    WorkoutGenerator,
    generate,
    mint_seed,
    regenerate,
    replay,
)
from workout_engine.exceptions import (
    CatalogError,
    EmptyBlockError,
    ValidationError,
    WorkoutEngineError,
)
from workout_engine.normalizer import normalize_request

__all__ = [
    "GENERATOR_VERSION",
    "CatalogError",
    "EmptyBlockError",
    "ValidationError",
    "WorkoutEngineError",
    "WorkoutGenerator",
    "generate",
    "mint_seed",
    "normalize_request",
    "regenerate",
    "replay",
]
