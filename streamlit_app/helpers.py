"""Utility helpers bridging the Streamlit UI and the workout engine.

Pure functions for formatting, form-to-request conversion, and preset
persistence.
"""

from __future__ import annotations

import json
from pathlib import Path

from workout_engine.catalog.catalog import CONSTRAINT_RULES
from workout_engine.models.enums import BlockKey
from workout_engine.models.plan import Block
from workout_engine.models.prescription import describe_prescription
from workout_engine.models.request import GenerationRequest
from workout_engine.normalizer import normalize_request

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: int) -> str:
    """Convert seconds to a short string. e.g. 754 -> '12m 34s'."""
    if seconds <= 0:
        return "0s"
    m, s = divmod(int(seconds), 60)
    if m and s:
        return f"{m}m {s}s"
    if m:
        return f"{m}m"
    return f"{s}s"


def block_rows(block: Block) -> list[dict]:
    """Table rows for one block."""
    return [
        {"Movement": item.name, "Dose": describe_prescription(item.prescription)}
        for item in block.items
    ]


# ---------------------------------------------------------------------------
# Color maps and options
# ---------------------------------------------------------------------------

BLOCK_COLORS: dict[BlockKey, str] = {
    BlockKey.WARMUP: "#FF8C00",        # orange
    BlockKey.MAIN: "#E74C3C",          # red
    BlockKey.ACCESSORY: "#F5B041",     # amber
    BlockKey.CONDITIONING: "#8E44AD",  # purple
    BlockKey.COOLDOWN: "#4A90D9",      # blue
}

EQUIPMENT_OPTIONS = (
    "bodyweight",
    "barbell",
    "bench",
    "dumbbell",
    "kettlebell",
    "pullup-bar",
    "rings",
    "box",
    "medicine-ball",
    "jump-rope",
    "band",
    "rower",
    "bike",
    "ski-erg",
    "treadmill",
)

CONSTRAINT_OPTIONS = tuple(sorted(CONSTRAINT_RULES))


def build_request(form: dict) -> GenerationRequest:
    """Normalize the sidebar form into a GenerationRequest.

    Free-form avoid tokens are comma-separated in ``form["avoid"]``.
    """
    avoid = [t for t in (form.get("avoid") or "").split(",") if t.strip()]
    return normalize_request(
        form["focus"],
        form["duration"],
        form["intensity"],
        form.get("equipment") or [],
        list(form.get("constraints") or []) + avoid,
    )


# ---------------------------------------------------------------------------
# Preset persistence
# ---------------------------------------------------------------------------

_PRESETS_DIR = Path(__file__).parent / "profiles" / "presets"


def _ensure_presets_dir() -> Path:
    _PRESETS_DIR.mkdir(parents=True, exist_ok=True)
    return _PRESETS_DIR


def save_preset(name: str, form: dict) -> Path:
    """Save a form dict as JSON. Returns the file path."""
    d = _ensure_presets_dir()
    safe = "".join(c if c.isalnum() or c in "-_ " else "" for c in name).strip()
    if not safe:
        safe = "preset"
    path = d / f"{safe}.json"
    with open(path, "w") as f:
        json.dump(form, f, indent=2)
    return path


def load_preset(name: str) -> dict:
    with open(_PRESETS_DIR / f"{name}.json") as f:
        return json.load(f)


def list_presets() -> list[str]:
    """List available preset names (without .json extension)."""
    d = _ensure_presets_dir()
    return sorted(p.stem for p in d.glob("*.json"))
