"""Data models for the workout engine."""

from workout_engine.models.enums import (
    BlockKey,
    BlockStructure,
    Focus,
    MovementCategory,
    PrescriptionKind,
)
from workout_engine.models.movement import Movement
from workout_engine.models.plan import (
    Block,
    BlockItem,
    EmptyBlockDefect,
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
    estimate_seconds,
)
from workout_engine.models.request import GenerationRequest

__all__ = [
    "Block",
    "BlockItem",
    "BlockKey",
    "BlockStructure",
    "DistancePrescription",
    "EmptyBlockDefect",
    "Focus",
    "GenerationChoices",
    "GenerationRequest",
    "GenerationResult",
    "IntensityCap",
    "Movement",
    "MovementCategory",
    "Prescription",
    "PrescriptionKind",
    "RepsPrescription",
    "TimePrescription",
    "WorkoutPlan",
    "describe_prescription",
    "estimate_seconds",
]
