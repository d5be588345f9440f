"""Recovery-aware intensity capping.

Maps an optional 0-100 recovery score onto a ceiling for the requested
intensity. Above the threshold nothing is capped; below it the ceiling
rises linearly from 1 (score 0) towards ``ceiling_at_threshold``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from workout_engine.exceptions import ValidationError
from workout_engine.models.enums import (
    MIN_INTENSITY,
    RECOVERY_CAP_THRESHOLD,
    RECOVERY_CEILING_AT_THRESHOLD,
    RECOVERY_HIGH_FATIGUE_BELOW,
)
from workout_engine.models.plan import IntensityCap


@dataclass(frozen=True)
class CapPolicy:
    """Tunable shape of the recovery curve."""

    threshold: float = RECOVERY_CAP_THRESHOLD
    ceiling_at_threshold: int = RECOVERY_CEILING_AT_THRESHOLD
    high_fatigue_below: float = RECOVERY_HIGH_FATIGUE_BELOW

    def ceiling_for(self, score: float) -> int | None:
        """Highest allowed intensity for a score, or None when uncapped."""
        if score >= self.threshold:
            return None
        fraction = max(0.0, score) / self.threshold
        return MIN_INTENSITY + math.floor(fraction * (self.ceiling_at_threshold - 1))

    def reason_for(self, score: float) -> str:
        if score < self.high_fatigue_below:
            return "recovery signal indicates high fatigue"
        return "recovery signal indicates moderate fatigue"


DEFAULT_CAP_POLICY = CapPolicy()


@dataclass(frozen=True)
class IntensityDecision:
    requested: int
    effective: int
    cap: IntensityCap | None = None

    @property
    def capped(self) -> bool:
        return self.cap is not None


def validate_recovery_score(recovery_score: object) -> float | None:
    """Coerce a recovery score to a float in [0, 100], or None if absent.

    Raises:
        ValidationError: If the score is present but not a finite number.
    """
    if recovery_score is None:
        return None
    if isinstance(recovery_score, bool) or not isinstance(recovery_score, (int, float)):
        raise ValidationError("recovery score must be a number", field="recovery")
    score = float(recovery_score)
    if not math.isfinite(score):
        raise ValidationError("recovery score must be finite", field="recovery")
    return max(0.0, min(100.0, score))


def cap_intensity(
    requested: int,
    recovery_score: float | None = None,
    policy: CapPolicy = DEFAULT_CAP_POLICY,
) -> IntensityDecision:
    """Apply the recovery ceiling to a requested intensity.

    Args:
        requested: Normalized intensity, 1-10.
        recovery_score: Optional 0-100 readiness signal (higher = fresher).
        policy: Curve parameters.

    Returns:
        The effective intensity, plus a cap record when it was lowered.
    """
    score = validate_recovery_score(recovery_score)
    if score is None:
        return IntensityDecision(requested=requested, effective=requested)

    ceiling = policy.ceiling_for(score)
    if ceiling is None or ceiling >= requested:
        return IntensityDecision(requested=requested, effective=requested)

    reason = (
        f"{policy.reason_for(score).capitalize()} "
        f"(recovery {score:.0f}/100); intensity capped from {requested} to {ceiling}."
    )
    return IntensityDecision(
        requested=requested,
        effective=ceiling,
        cap=IntensityCap(original=requested, capped=ceiling, reason=reason),
    )
