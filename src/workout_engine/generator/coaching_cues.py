"""Coaching cues: per-block notes keyed by (Focus, BlockKey, BlockStructure).

Each cue carries RPE guidance so the athlete can gauge effort without a
timer or a 1RM test.
"""

from __future__ import annotations

from workout_engine.models.enums import BlockKey, BlockStructure, Focus

# ---------------------------------------------------------------------------
# Cue lookup. A None focus or structure means "any".
# ---------------------------------------------------------------------------

_CUES: dict[tuple[Focus | None, BlockKey, BlockStructure | None], str] = {
    # --- Generic cues ---
    (None, BlockKey.WARMUP, None): (
        "Move through each drill with control. Raise temperature, open the joints."
    ),
    (None, BlockKey.COOLDOWN, None): (
        "Slow nasal breathing. Hold each stretch without bouncing."
    ),
    (None, BlockKey.MAIN, None): (
        "Brace before every rep. Stop the set if form breaks down."
    ),
    (None, BlockKey.ACCESSORY, None): (
        "Controlled tempo, feel the target muscle. RPE 7/10."
    ),
    (None, BlockKey.CONDITIONING, None): (
        "Find a pace you can hold to the end. RPE 7-8/10."
    ),

    # --- Strength ---
    (Focus.STRENGTH, BlockKey.MAIN, None): (
        "Heavy but crisp: leave one or two reps in reserve. Full rest between sets."
    ),
    (Focus.STRENGTH, BlockKey.WARMUP, None): (
        "Prime the patterns you will load today. Finish with a few ramp-up sets."
    ),

    # --- Conditioning ---
    (None, BlockKey.CONDITIONING, BlockStructure.EMOM): (
        "Start each minute on the clock. Finish the work with 15+ seconds to spare."
    ),
    (None, BlockKey.CONDITIONING, BlockStructure.AMRAP): (
        "Steady rounds beat a fast start. Break sets before you are forced to. RPE 8/10."
    ),
    (None, BlockKey.CONDITIONING, BlockStructure.INTERVALS): (
        "Hard on, easy off. Keep every rep within a few seconds of the first."
    ),
    (None, BlockKey.CONDITIONING, BlockStructure.CIRCUIT): (
        "Move between stations with minimal transition. RPE 7-8/10."
    ),

    # --- Endurance ---
    (Focus.ENDURANCE, BlockKey.CONDITIONING, BlockStructure.STEADY): (
        "Conversational effort, nasal breathing where possible. RPE 4-5/10."
    ),
    (Focus.ENDURANCE, BlockKey.CONDITIONING, BlockStructure.INTERVALS): (
        "Controlled hard efforts. Recover fully enough to match your first split."
    ),

    # --- Mixed ---
    (Focus.MIXED, BlockKey.MAIN, None): (
        "Quality strength first. Save the intensity for the metcon."
    ),
}

# Focus-level notes used in plan coaching notes
_FOCUS_NOTES: dict[Focus, str] = {
    Focus.STRENGTH: "Progressive overload: add load only when every set is clean.",
    Focus.CONDITIONING: "Pace the work so the last round looks like the first.",
    Focus.MIXED: "Lift with intent, then shift gears into the conditioning piece.",
    Focus.ENDURANCE: "Build the aerobic base: most of this session should feel sustainable.",
}


def get_coaching_cue(
    focus: Focus,
    key: BlockKey,
    structure: BlockStructure | None = None,
) -> str:
    """Return the coaching cue for a block.

    Lookup order:
    1. (focus, key, structure)
    2. (None, key, structure)
    3. (focus, key, None)
    4. (None, key, None)
    5. Empty string
    """
    for lookup in (
        (focus, key, structure),
        (None, key, structure),
        (focus, key, None),
        (None, key, None),
    ):
        if lookup in _CUES:
            return _CUES[lookup]
    return ""


def get_focus_note(focus: Focus) -> str:
    return _FOCUS_NOTES.get(focus, "")
