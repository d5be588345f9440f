"""Prescription variants: the dose attached to each block item.

Exactly one of three shapes. Code that consumes a prescription matches
on the concrete class and raises ``TypeError`` for anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from workout_engine.models.enums import (
    ASSUMED_SPEED_M_PER_S,
    SECONDS_PER_REP,
    PrescriptionKind,
)


@dataclass(frozen=True)
class RepsPrescription:
    sets: int
    reps: int
    load: str | None = None     # e.g. "70-85% 1RM", "bodyweight"
    rest_sec: int = 0

    kind: ClassVar[PrescriptionKind] = PrescriptionKind.REPS

    def __post_init__(self) -> None:
        if self.sets <= 0 or self.reps <= 0:
            raise ValueError("sets and reps must be positive")
        if self.rest_sec < 0:
            raise ValueError("rest_sec must be non-negative")


@dataclass(frozen=True)
class TimePrescription:
    sets: int
    seconds: int
    load: str | None = None     # e.g. "RPE 7" for loaded conditioning
    rest_sec: int = 0

    kind: ClassVar[PrescriptionKind] = PrescriptionKind.TIME

    def __post_init__(self) -> None:
        if self.sets <= 0 or self.seconds <= 0:
            raise ValueError("sets and seconds must be positive")
        if self.rest_sec < 0:
            raise ValueError("rest_sec must be non-negative")


@dataclass(frozen=True)
class DistancePrescription:
    sets: int
    meters: int
    load: str | None = None
    rest_sec: int = 0
    pace: str | None = None     # e.g. "RPE 7", "conversational"

    kind: ClassVar[PrescriptionKind] = PrescriptionKind.DISTANCE

    def __post_init__(self) -> None:
        if self.sets <= 0 or self.meters <= 0:
            raise ValueError("sets and meters must be positive")
        if self.rest_sec < 0:
            raise ValueError("rest_sec must be non-negative")


Prescription = Union[RepsPrescription, TimePrescription, DistancePrescription]


def estimate_seconds(prescription: Prescription) -> int:
    """Estimate wall-clock seconds needed to perform a prescription.

    Rest is counted between sets, not after the last one.
    """
    if isinstance(prescription, RepsPrescription):
        work = prescription.sets * prescription.reps * SECONDS_PER_REP
    elif isinstance(prescription, TimePrescription):
        work = prescription.sets * prescription.seconds
    elif isinstance(prescription, DistancePrescription):
        work = round(prescription.sets * prescription.meters / ASSUMED_SPEED_M_PER_S)
    else:
        raise TypeError(f"Unknown prescription type: {type(prescription).__name__}")
    return int(work + (prescription.sets - 1) * prescription.rest_sec)


def describe_prescription(prescription: Prescription) -> str:
    """Human-readable dose, e.g. ``'4 x 6 @ 70-85% 1RM, rest 120s'``."""
    if isinstance(prescription, RepsPrescription):
        text = f"{prescription.sets} x {prescription.reps}"
        if prescription.load:
            text += f" @ {prescription.load}"
    elif isinstance(prescription, TimePrescription):
        text = f"{prescription.sets} x {prescription.seconds}s"
        if prescription.load:
            text += f" @ {prescription.load}"
    elif isinstance(prescription, DistancePrescription):
        text = f"{prescription.sets} x {prescription.meters}m"
        hints = [h for h in (prescription.load, prescription.pace) if h]
        if hints:
            text += f" @ {', '.join(hints)}"
    else:
        raise TypeError(f"Unknown prescription type: {type(prescription).__name__}")
    if prescription.rest_sec and prescription.sets > 1:
        text += f", rest {prescription.rest_sec}s"
    return text
