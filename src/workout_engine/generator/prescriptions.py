"""Prescription assigner: turns (movement, slot, intensity) into a dose.

Magnitudes come from a per-level intensity table. Higher levels mean a
heavier load hint and shorter conditioning rest; total volume never
grows past the safety caps (5 sets, 20 reps, 60 s work intervals,
15 s minimum rest). ``fit_prescription`` then resizes a dose to the time
share its block can give it.

References:
    Haff & Triplett (2016). Essentials of Strength Training and
        Conditioning, 4th ed., ch. 17 (load/rep relationships).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from workout_engine.generator.templates import SlotTemplate
from workout_engine.models.enums import (
    ASSUMED_SPEED_M_PER_S,
    DISTANCE_ROUNDING_M,
    FIT_STEP_SECONDS,
    MAX_INTENSITY,
    MAX_REPS,
    MAX_REST_SECONDS,
    MAX_SETS,
    MAX_WORK_INTERVAL_SECONDS,
    MIN_INTENSITY,
    MIN_REST_SECONDS,
    MIN_WORK_SECONDS,
    SECONDS_PER_REP,
    BlockKey,
    BlockStructure,
    MovementCategory,
    PrescriptionKind,
)
from workout_engine.models.movement import Movement
from workout_engine.models.prescription import (
    DistancePrescription,
    Prescription,
    RepsPrescription,
    TimePrescription,
    estimate_seconds,
)
from workout_engine.rng import SeededRandom

_FREE_WEIGHTS = frozenset({"barbell", "dumbbell", "kettlebell", "medicine-ball", "sandbag"})


@dataclass(frozen=True)
class IntensityParameters:
    """Dose magnitudes for one intensity level.

    Attributes:
        sets: Working sets for main lifts and conditioning rounds.
        main_reps: Rep options for main lifts.
        accessory_reps: Rep options for accessory work.
        load_pct: Load hint as a %1RM range for main lifts.
        main_rest: Rest between main-lift sets (s).
        accessory_rest: Rest between accessory sets (s).
        work_seconds: Work interval for timed conditioning items.
        conditioning_rest: Rest between conditioning rounds (s).
        rpe: Target rating of perceived exertion.
    """

    sets: int
    main_reps: tuple[int, ...]
    accessory_reps: tuple[int, ...]
    load_pct: tuple[int, int]
    main_rest: int
    accessory_rest: int
    work_seconds: int
    conditioning_rest: int
    rpe: int


# ---------------------------------------------------------------------------
# Intensity table, level 1-10
# ---------------------------------------------------------------------------

INTENSITY_TABLE: dict[int, IntensityParameters] = {
    1: IntensityParameters(2, (12, 15), (12, 15), (40, 55), 60, 45, 20, 40, 3),
    2: IntensityParameters(2, (12,), (12, 15), (45, 60), 75, 45, 25, 40, 3),
    3: IntensityParameters(3, (10, 12), (12, 15), (50, 65), 90, 60, 30, 35, 4),
    4: IntensityParameters(3, (10,), (10, 12), (55, 70), 90, 60, 30, 30, 5),
    5: IntensityParameters(3, (8, 10), (10, 12), (60, 75), 120, 60, 35, 30, 5),
    6: IntensityParameters(4, (6, 8), (8, 10), (65, 80), 120, 75, 40, 25, 6),
    7: IntensityParameters(4, (5, 6), (8, 10), (70, 85), 150, 75, 40, 20, 7),
    8: IntensityParameters(4, (4, 5), (8,), (75, 90), 165, 90, 45, 20, 8),
    9: IntensityParameters(5, (3, 5), (6, 8), (80, 95), 180, 90, 50, 15, 9),
    10: IntensityParameters(5, (2, 3), (6, 8), (85, 100), 180, 90, 60, 15, 10),
}

_WARMUP_SECONDS = (30, 45)
_COOLDOWN_SECONDS = (45, 60)
_EMOM_MINUTE = 60
_EMOM_MAX_WORK = _EMOM_MINUTE - MIN_REST_SECONDS


def get_intensity_parameters(intensity: int) -> IntensityParameters:
    level = max(MIN_INTENSITY, min(MAX_INTENSITY, int(intensity)))
    return INTENSITY_TABLE[level]


def scheme_id(intensity: int) -> str:
    """Stable identifier of the loading scheme used at a level."""
    p = get_intensity_parameters(intensity)
    return (
        f"L{intensity}:{p.sets}x{min(p.main_reps)}-{max(p.main_reps)}"
        f"@{p.load_pct[0]}-{p.load_pct[1]}%"
    )


def _round_distance(meters: float) -> int:
    steps = max(1, round(meters / DISTANCE_ROUNDING_M))
    return int(steps * DISTANCE_ROUNDING_M)


def _is_loaded(movement: Movement) -> bool:
    return not movement.required_equipment.isdisjoint(_FREE_WEIGHTS)


def _reps(
    movement: Movement, slot: SlotTemplate, params: IntensityParameters, rng: SeededRandom
) -> RepsPrescription:
    if slot.key == BlockKey.MAIN:
        sets = params.sets
        reps = rng.choice(params.main_reps)
        rest = params.main_rest
        load = f"{params.load_pct[0]}-{params.load_pct[1]}% 1RM" if _is_loaded(movement) else "bodyweight"
    else:
        sets = max(2, params.sets - 1)
        reps = rng.choice(params.accessory_reps)
        rest = params.accessory_rest
        load = f"RPE {params.rpe}" if _is_loaded(movement) else "bodyweight"
    return RepsPrescription(
        sets=min(sets, MAX_SETS),
        reps=min(reps, MAX_REPS),
        load=load,
        rest_sec=max(rest, MIN_REST_SECONDS),
    )


def _time(
    movement: Movement, slot: SlotTemplate, params: IntensityParameters, rng: SeededRandom
) -> TimePrescription:
    if slot.key == BlockKey.WARMUP:
        return TimePrescription(sets=1, seconds=rng.choice(_WARMUP_SECONDS), rest_sec=MIN_REST_SECONDS)
    if slot.key == BlockKey.COOLDOWN:
        return TimePrescription(sets=1, seconds=rng.choice(_COOLDOWN_SECONDS), rest_sec=MIN_REST_SECONDS)

    work = min(params.work_seconds, MAX_WORK_INTERVAL_SECONDS)
    rest = params.conditioning_rest
    if slot.structure == BlockStructure.EMOM:
        # Work fits inside the minute; the remainder is rest
        work = min(work, _EMOM_MAX_WORK)
        rest = _EMOM_MINUTE - work
    return TimePrescription(
        sets=min(params.sets, MAX_SETS),
        seconds=work,
        load=f"RPE {params.rpe}" if _is_loaded(movement) else None,
        rest_sec=max(rest, MIN_REST_SECONDS),
    )


def _distance(
    slot: SlotTemplate, params: IntensityParameters, rng: SeededRandom, budget_seconds: int
) -> DistancePrescription:
    if slot.structure == BlockStructure.STEADY:
        pace = "conversational" if params.rpe <= 4 else f"steady, RPE {params.rpe}"
        return DistancePrescription(
            sets=1,
            meters=_round_distance(budget_seconds * 0.9 * ASSUMED_SPEED_M_PER_S),
            rest_sec=MIN_REST_SECONDS,
            pace=pace,
        )
    # Harder days use shorter, faster repeats
    options = (200, 400) if params.rpe >= 7 else (400, 600)
    return DistancePrescription(
        sets=min(params.sets, MAX_SETS),
        meters=rng.choice(options),
        rest_sec=max(params.conditioning_rest * 3, MIN_REST_SECONDS),
        pace=f"RPE {params.rpe}",
    )


def prescription_kind_for(movement: Movement, slot: SlotTemplate) -> PrescriptionKind:
    if slot.allow_distance and movement.category == MovementCategory.CARDIO:
        return PrescriptionKind.DISTANCE
    return slot.prescription_kind


def prescribe(
    movement: Movement,
    slot: SlotTemplate,
    intensity: int,
    rng: SeededRandom,
    budget_seconds: int = 0,
) -> Prescription:
    """Build the dose for one movement in one slot.

    Args:
        movement: The chosen movement.
        slot: Slot the movement fills.
        intensity: Effective intensity, 1-10.
        rng: The generation's random cursor.
        budget_seconds: Slot time budget (used for steady distance work).

    Returns:
        A reps, time, or distance prescription.
    """
    params = get_intensity_parameters(intensity)
    kind = prescription_kind_for(movement, slot)
    if kind == PrescriptionKind.REPS:
        return _reps(movement, slot, params, rng)
    if kind == PrescriptionKind.TIME:
        return _time(movement, slot, params, rng)
    if kind == PrescriptionKind.DISTANCE:
        return _distance(slot, params, rng, budget_seconds)
    raise TypeError(f"Unknown prescription kind: {kind!r}")


# ---------------------------------------------------------------------------
# Fitting doses to a time share
# ---------------------------------------------------------------------------


def _clamp(value: float, low: int, high: int, step: int = 1) -> int:
    return int(min(high, max(low, round(value / step) * step)))


def _fill_rest(seconds: int, sets: int, work_per_set: int, fallback: int) -> int:
    # Rest absorbs whatever the work leaves of the share
    if sets == 1:
        return fallback
    return _clamp((seconds - sets * work_per_set) / (sets - 1), MIN_REST_SECONDS, MAX_REST_SECONDS)


def _reps_options(rx: RepsPrescription, seconds: int) -> list[RepsPrescription]:
    # Reps only ever come down, and never below half the prescribed count
    options = []
    for reps in range(rx.reps, (rx.reps + 1) // 2 - 1, -1):
        work = reps * SECONDS_PER_REP
        for sets in range(1, MAX_SETS + 1):
            rest = _fill_rest(seconds, sets, work, rx.rest_sec)
            options.append(replace(rx, sets=sets, reps=reps, rest_sec=rest))
    return options


def _time_options(rx: TimePrescription, seconds: int, emom: bool) -> list[TimePrescription]:
    options = []
    for sets in range(1, MAX_SETS + 1):
        if emom:
            # Every set starts on the minute, so only the last work bout varies
            work = _clamp(seconds - (sets - 1) * _EMOM_MINUTE, MIN_WORK_SECONDS, _EMOM_MAX_WORK, 5)
            options.append(replace(rx, sets=sets, seconds=work, rest_sec=_EMOM_MINUTE - work))
            continue
        nearest = _clamp(
            (seconds - (sets - 1) * rx.rest_sec) / sets,
            MIN_WORK_SECONDS,
            MAX_WORK_INTERVAL_SECONDS,
            5,
        )
        for work in sorted({max(MIN_WORK_SECONDS, nearest - 5), nearest,
                            min(MAX_WORK_INTERVAL_SECONDS, nearest + 5)}):
            rest = _fill_rest(seconds, sets, work, rx.rest_sec)
            options.append(replace(rx, sets=sets, seconds=work, rest_sec=rest))
    return options


def _distance_options(
    rx: DistancePrescription, seconds: int, steady: bool
) -> list[DistancePrescription]:
    options = []
    for sets in range(1, 2 if steady else MAX_SETS + 1):
        run_seconds = max(0.0, (seconds - (sets - 1) * rx.rest_sec) / sets)
        meters = _round_distance(run_seconds * ASSUMED_SPEED_M_PER_S)
        run = round(meters / ASSUMED_SPEED_M_PER_S)
        rest = _fill_rest(seconds, sets, run, rx.rest_sec)
        options.append(replace(rx, sets=sets, meters=meters, rest_sec=rest))
    return options


def _fit_key(rx: Prescription, original: Prescription, seconds: int) -> tuple[int, int, int, int]:
    reps_shift = (
        original.reps - rx.reps
        if isinstance(rx, RepsPrescription) and isinstance(original, RepsPrescription)
        else 0
    )
    return (
        abs(estimate_seconds(rx) - seconds) // FIT_STEP_SECONDS,
        reps_shift,
        abs(rx.rest_sec - original.rest_sec),
        abs(rx.sets - original.sets),
    )


def fit_prescription(
    prescription: Prescription,
    seconds: int,
    structure: BlockStructure | None = None,
) -> Prescription:
    """Resize a dose so its estimated time lands on ``seconds``.

    Sets, work time, distance and rest move inside the safety caps. Reps
    may drop to half when a share is too short for the prescribed count;
    load and pace are kept. Among doses equally close to the share, the
    one with the fewest dropped reps, then the rest and set count nearest
    the original, wins. EMOM sets stay on the minute and steady efforts
    stay a single set. Never draws from the random source.

    Args:
        prescription: Dose to resize.
        seconds: Time share for the item, transitions excluded.
        structure: Structure of the block the item sits in.

    Returns:
        A prescription of the same kind.
    """
    seconds = max(0, int(seconds))
    if isinstance(prescription, RepsPrescription):
        options: list[Prescription] = list(_reps_options(prescription, seconds))
    elif isinstance(prescription, TimePrescription):
        options = list(_time_options(prescription, seconds, structure == BlockStructure.EMOM))
    elif isinstance(prescription, DistancePrescription):
        options = list(_distance_options(prescription, seconds, structure == BlockStructure.STEADY))
    else:
        raise TypeError(f"Unknown prescription type: {type(prescription).__name__}")
    return min(options, key=lambda rx: _fit_key(rx, prescription, seconds))
