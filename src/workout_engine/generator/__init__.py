"""Workout generator: templates, block composition, plan assembly."""

from workout_engine.generator.assembler import assemble_plan
from workout_engine.generator.composer import compose_block, compose_blocks, fit_block
from workout_engine.generator.templates import (
    WORKOUT_TEMPLATES,
    build_skeleton,
    select_template,
)

__all__ = [
    "WORKOUT_TEMPLATES",
    "assemble_plan",
    "build_skeleton",
    "compose_block",
    "compose_blocks",
    "fit_block",
    "select_template",
]
