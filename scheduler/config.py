"""Environment-variable-based configuration for the nightly scheduler."""

from __future__ import annotations

import os
from pathlib import Path

NIGHTLY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "21"))
NIGHTLY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))
PROFILES_PATH: Path = Path(
    os.environ.get("SUGGEST_PROFILES_PATH", "streamlit_app/profiles/profiles.json")
)
OUTPUT_PATH: Path = Path(
    os.environ.get("SUGGEST_OUTPUT_PATH", "streamlit_app/profiles/suggestions.json")
)
