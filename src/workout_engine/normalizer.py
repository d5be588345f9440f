"""Constraint normalization: raw caller input to a GenerationRequest.

Out-of-range numbers are clamped rather than rejected; only inputs that
cannot be interpreted at all raise ``ValidationError``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from workout_engine.exceptions import ValidationError
from workout_engine.models.enums import (
    DEFAULT_EQUIPMENT,
    FOCUS_ALIASES,
    MAX_DURATION_MINUTES,
    MAX_INTENSITY,
    MIN_DURATION_MINUTES,
    MIN_INTENSITY,
    Focus,
)
from workout_engine.models.request import GenerationRequest


def _coerce_focus(focus: object) -> Focus:
    if isinstance(focus, Focus):
        return focus
    if not isinstance(focus, str):
        raise ValidationError("focus must be a string", field="focus")
    key = focus.strip().lower()
    if key in FOCUS_ALIASES:
        return FOCUS_ALIASES[key]
    try:
        return Focus(key)
    except ValueError:
        allowed = ", ".join(f.value for f in Focus)
        raise ValidationError(
            f"Unknown focus {focus!r}; expected one of: {allowed}", field="focus"
        ) from None


def _coerce_number(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number", field=name)
    number = float(value)
    if not math.isfinite(number):
        raise ValidationError(f"{name} must be finite", field=name)
    return number


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: int, high: int) -> int:
    return max(low, min(high, _round_half_up(value)))


def _normalize_tokens(name: str, values: Iterable[str] | str | None) -> tuple[str, ...]:
    """Lower-case, strip and de-duplicate, keeping first-seen order."""
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    seen: dict[str, None] = {}
    for value in values:
        if not isinstance(value, str):
            raise ValidationError(f"{name} entries must be strings", field=name)
        token = value.strip().lower()
        if token:
            seen.setdefault(token, None)
    return tuple(seen)


def normalize_request(
    focus: object,
    duration_minutes: object,
    intensity: object,
    equipment: Iterable[str] | str | None = None,
    constraints: Iterable[str] | str | None = None,
) -> GenerationRequest:
    """Normalize raw constraints into a clamped, validated request.

    Args:
        focus: One of the focus values (or a legacy alias such as ``"hiit"``).
        duration_minutes: Requested length, clamped to [10, 60].
        intensity: Requested level, clamped to [1, 10].
        equipment: Owned equipment; empty means bodyweight only.
        constraints: Named exclusion rules or free-form movements to avoid.

    Returns:
        A GenerationRequest safe to feed to the pipeline.

    Raises:
        ValidationError: If focus is unknown or a numeric field is
            missing, non-numeric, or non-finite.
    """
    resolved_focus = _coerce_focus(focus)
    duration = _clamp(
        _coerce_number("duration_minutes", duration_minutes),
        MIN_DURATION_MINUTES,
        MAX_DURATION_MINUTES,
    )
    level = _clamp(_coerce_number("intensity", intensity), MIN_INTENSITY, MAX_INTENSITY)
    owned = frozenset(_normalize_tokens("equipment", equipment)) or DEFAULT_EQUIPMENT
    return GenerationRequest(
        focus=resolved_focus,
        duration_minutes=duration,
        intensity=level,
        equipment=owned,
        constraints=_normalize_tokens("constraints", constraints),
    )
