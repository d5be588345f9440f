"""Environment-variable-based configuration for the HTTP API."""

from __future__ import annotations

import os
from pathlib import Path

from workout_engine.envelope import GENERATOR_VERSION as ENGINE_GENERATOR_VERSION
from workout_engine.models.enums import RECOVERY_CAP_THRESHOLD

GENERATOR_VERSION: str = os.environ.get("WORKOUT_API_GENERATOR_VERSION", ENGINE_GENERATOR_VERSION)
CATALOG_PATH: Path | None = (
    Path(os.environ["WORKOUT_CATALOG_PATH"]) if os.environ.get("WORKOUT_CATALOG_PATH") else None
)
RECOVERY_THRESHOLD: float = float(
    os.environ.get("WORKOUT_RECOVERY_THRESHOLD", str(RECOVERY_CAP_THRESHOLD))
)
ANONYMOUS_USER_ID: str = os.environ.get("WORKOUT_API_ANONYMOUS_USER", "anonymous")
