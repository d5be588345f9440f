"""Request bodies for the workout endpoints.

Numeric constraint fields accept any number. The engine clamps them to
range and only rejects values it cannot interpret.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from workout_engine.recovery.composite import RecoverySignals, composite_recovery_score


class RecoverySignalsIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sleep_score: Optional[float] = Field(None, alias="sleepScore")
    hrv_ratio: Optional[float] = Field(None, alias="hrvRatio")
    body_battery: Optional[float] = Field(None, alias="bodyBattery")
    stress: Optional[float] = None
    daily_loads: List[float] = Field(default_factory=list, alias="dailyLoads")

    def to_signals(self) -> RecoverySignals:
        return RecoverySignals(
            sleep_score=self.sleep_score,
            hrv_ratio=self.hrv_ratio,
            body_battery=self.body_battery,
            stress=self.stress,
            daily_loads=tuple(self.daily_loads),
        )


class RecoveryInput(BaseModel):
    """Either a ready 0-100 score or raw signals to combine into one."""

    model_config = ConfigDict(populate_by_name=True)

    recovery: Optional[float] = None
    recovery_signals: Optional[RecoverySignalsIn] = Field(None, alias="recoverySignals")

    def recovery_score(self) -> Optional[float]:
        if self.recovery is not None:
            return self.recovery
        if self.recovery_signals is not None:
            return composite_recovery_score(self.recovery_signals.to_signals())
        return None


class PreviewRequest(RecoveryInput):
    focus: str
    duration_min: float = Field(alias="durationMin")
    intensity: float
    equipment: List[str] = Field(default_factory=list)
    constraints: List[str] = Field(default_factory=list)
    seed: Optional[str] = None


class WorkoutInputs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    archetype: str
    minutes: float
    target_intensity: float = Field(alias="targetIntensity")
    equipment: List[str] = Field(default_factory=list)
    constraints: List[str] = Field(default_factory=list)
    location: Optional[str] = None


class SimulateRequest(RecoveryInput):
    inputs: WorkoutInputs
    rng_seed: Optional[str] = Field(None, alias="rngSeed")
    generator_version: Optional[str] = Field(None, alias="generatorVersion")


class GenerateRequest(RecoveryInput):
    inputs: WorkoutInputs
    seed: Optional[str] = None
    generator_version: Optional[str] = Field(None, alias="generatorVersion")


class ReplayRequest(RecoveryInput):
    inputs: WorkoutInputs
    seed: str
    generator_version: str = Field(alias="generatorVersion")


class RegenerateRequest(RecoveryInput):
    inputs: WorkoutInputs
    previous_seed: str = Field(alias="previousSeed")
    generator_version: Optional[str] = Field(None, alias="generatorVersion")


class RotateRequest(BaseModel):
    equipment: Optional[List[str]] = None
    constraints: Optional[List[str]] = None
