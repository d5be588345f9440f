"""Recovery signals and recovery-aware intensity capping."""

from workout_engine.recovery.composite import RecoverySignals, composite_recovery_score
from workout_engine.recovery.intensity_cap import (
    DEFAULT_CAP_POLICY,
    CapPolicy,
    IntensityDecision,
    cap_intensity,
)

__all__ = [
    "DEFAULT_CAP_POLICY",
    "CapPolicy",
    "IntensityDecision",
    "RecoverySignals",
    "cap_intensity",
    "composite_recovery_score",
]
