"""Enumerations and generation constants for the workout engine.

Magnitude caps follow common strength & conditioning guidance
(NSCA Essentials of Strength Training and Conditioning, 4th ed.).
"""

from enum import Enum


class Focus(str, Enum):
    """Workout archetype requested by the caller."""

    STRENGTH = "strength"
    CONDITIONING = "conditioning"
    MIXED = "mixed"
    ENDURANCE = "endurance"


class BlockKey(str, Enum):
    """Role of a block inside a plan."""

    WARMUP = "warmup"
    MAIN = "main"
    ACCESSORY = "accessory"
    CONDITIONING = "conditioning"
    COOLDOWN = "cooldown"


class PrescriptionKind(str, Enum):
    """How the dose of a single movement is expressed."""

    REPS = "reps"
    TIME = "time"
    DISTANCE = "distance"


class MovementCategory(str, Enum):
    """Coarse movement family, used for prescription conventions."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    PLYOMETRIC = "plyometric"
    MOBILITY = "mobility"
    CORE = "core"


class BlockStructure(str, Enum):
    """How the items of a block are sequenced."""

    STRAIGHT = "straight"
    SUPERSET = "superset"
    CIRCUIT = "circuit"
    EMOM = "emom"
    AMRAP = "amrap"
    INTERVALS = "intervals"
    STEADY = "steady"
    FLOW = "flow"


# ---------------------------------------------------------------------------
# Request bounds
# ---------------------------------------------------------------------------
MIN_DURATION_MINUTES = 10
MAX_DURATION_MINUTES = 60
MIN_INTENSITY = 1
MAX_INTENSITY = 10

BODYWEIGHT = "bodyweight"
DEFAULT_EQUIPMENT = frozenset({BODYWEIGHT})

# Names used by older clients, mapped onto the four focus values
FOCUS_ALIASES = {
    "hiit": Focus.CONDITIONING,
    "metcon": Focus.CONDITIONING,
    "cardio": Focus.ENDURANCE,
    "crossfit": Focus.MIXED,
    "hybrid": Focus.MIXED,
    "powerlifting": Focus.STRENGTH,
}

# ---------------------------------------------------------------------------
# Plan timing
# ---------------------------------------------------------------------------
# Sum of block targets may drift this far from the requested duration
DURATION_TOLERANCE_PCT = 0.10

SECONDS_PER_REP = 3  # Controlled tempo, roughly 1-0-2
TRANSITION_SECONDS = 15  # Setup / walk between movements

# Assumed steady pace for distance prescriptions (~5:30/km)
ASSUMED_SPEED_M_PER_S = 3.0
DISTANCE_ROUNDING_M = 50

# ---------------------------------------------------------------------------
# Prescription safety bounds
# ---------------------------------------------------------------------------
MAX_SETS = 5
MAX_REPS = 20
MAX_WORK_INTERVAL_SECONDS = 60
MIN_WORK_SECONDS = 10
MIN_REST_SECONDS = 15
MAX_REST_SECONDS = 240

# Fitted doses may miss their time share by less than this
FIT_STEP_SECONDS = 5

# ---------------------------------------------------------------------------
# Recovery-aware capping
# ---------------------------------------------------------------------------
# Scores are 0-100. Below the threshold the ceiling scales linearly from 1
# up to RECOVERY_CEILING_AT_THRESHOLD.
RECOVERY_CAP_THRESHOLD = 60.0
RECOVERY_CEILING_AT_THRESHOLD = 8
RECOVERY_HIGH_FATIGUE_BELOW = 30.0

# ACWR thresholds: Gabbett (2016), Br J Sports Med 50(5):273-280
ACWR_DANGER_THRESHOLD = 1.5
ACWR_CAUTION_HIGH = 1.3
ACWR_OPTIMAL_LOW = 0.8

# EWMA spans for ACWR calculation: Williams et al. (2017)
EWMA_ACUTE_SPAN = 7
EWMA_CHRONIC_SPAN = 28

# HRV ratio (today / baseline) mapped to a 0-100 component score
HRV_RATIO_FLOOR = 0.6
HRV_RATIO_FULL = 1.0
