"""Workout Engine: Streamlit preview playground.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import streamlit as st

from workout_engine.envelope import GENERATOR_VERSION, WorkoutGenerator
from workout_engine.exceptions import ValidationError
from workout_engine.models.enums import Focus
from workout_engine.recovery.composite import RecoverySignals, composite_recovery_score
from workout_engine.serialization import plan_to_json, render_plan_text

from helpers import (
    BLOCK_COLORS,
    CONSTRAINT_OPTIONS,
    EQUIPMENT_OPTIONS,
    block_rows,
    build_request,
    format_duration,
    list_presets,
    load_preset,
    save_preset,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Workout Engine",
    page_icon="🏋️",
    layout="wide",
)


@st.cache_resource
def get_generator() -> WorkoutGenerator:
    return WorkoutGenerator()


def _get_preset(key: str, default):
    return st.session_state.get("preset", {}).get(key, default)


# ---------------------------------------------------------------------------
# Sidebar: constraints
# ---------------------------------------------------------------------------

st.sidebar.title("Constraints")

presets = list_presets()
if presets:
    chosen = st.sidebar.selectbox("Load preset", ["--"] + presets)
    if chosen != "--" and st.sidebar.button("Load"):
        st.session_state["preset"] = load_preset(chosen)

focus_values = [f.value for f in Focus]
form = {
    "focus": st.sidebar.selectbox(
        "Focus", focus_values, index=focus_values.index(_get_preset("focus", "strength"))
    ),
    "duration": st.sidebar.slider("Duration (min)", 10, 60, _get_preset("duration", 30), step=5),
    "intensity": st.sidebar.slider("Intensity", 1, 10, _get_preset("intensity", 6)),
    "equipment": st.sidebar.multiselect(
        "Equipment", EQUIPMENT_OPTIONS, default=_get_preset("equipment", ["bodyweight"])
    ),
    "constraints": st.sidebar.multiselect(
        "Constraints", CONSTRAINT_OPTIONS, default=_get_preset("constraints", [])
    ),
    "avoid": st.sidebar.text_input("Avoid (comma-separated)", _get_preset("avoid", "")),
}

with st.sidebar.expander("Recovery", expanded=False):
    use_signals = st.checkbox("Use wearable signals", value=False)
    if use_signals:
        signals = RecoverySignals(
            sleep_score=st.slider("Sleep score", 0, 100, 75),
            hrv_ratio=st.slider("HRV vs baseline", 0.5, 1.3, 1.0, step=0.05),
            body_battery=st.slider("Body battery", 0, 100, 60),
            stress=st.slider("Stress (0-10)", 0, 10, 3),
        )
        recovery_score = composite_recovery_score(signals)
        st.caption(f"Composite recovery: {recovery_score}")
    else:
        use_score = st.checkbox("Set recovery score", value=False)
        recovery_score = st.slider("Recovery score", 0, 100, 70) if use_score else None

preset_name = st.sidebar.text_input("Preset name")
if st.sidebar.button("Save preset") and preset_name:
    path = save_preset(preset_name, form)
    st.sidebar.success(f"Saved to {path.name}")

# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

st.title("Workout Generator")
st.caption(f"Generator v{GENERATOR_VERSION}")

col_gen, col_regen, col_replay = st.columns(3)
replay_seed = st.text_input("Seed to replay", value=st.session_state.get("last_seed", ""))

generator = get_generator()
try:
    request = build_request(form)
except ValidationError as exc:
    st.error(str(exc))
    st.stop()

result = None
if col_gen.button("Generate", type="primary"):
    result = generator.generate(request, recovery_score=recovery_score)
elif col_regen.button("Regenerate") and st.session_state.get("last_seed"):
    result = generator.regenerate(request, st.session_state["last_seed"], recovery_score=recovery_score)
elif col_replay.button("Replay") and replay_seed:
    result = generator.replay(request, replay_seed, GENERATOR_VERSION, recovery_score=recovery_score)

if result is not None:
    st.session_state["last_result"] = result
    st.session_state["last_seed"] = result.seed

result = st.session_state.get("last_result")
if result is None:
    st.info("Set constraints in the sidebar and press Generate.")
    st.stop()

# ---------------------------------------------------------------------------
# Plan rendering
# ---------------------------------------------------------------------------

plan = result.plan
st.subheader(plan.title)
st.write(plan.summary)

m1, m2, m3, m4 = st.columns(4)
m1.metric("Duration", format_duration(plan.total_seconds))
m2.metric("Intensity", f"{plan.intensity}/10")
m3.metric("Template", plan.template_id)
m4.metric("Seed", plan.seed)

if plan.intensity_cap is not None:
    st.warning(plan.intensity_cap.reason)
if plan.defects:
    st.error(
        "Some blocks could not be filled: "
        + ", ".join(d.block_key.value for d in plan.defects)
        + ". Add equipment, relax constraints, or regenerate."
    )
if result.version_mismatch:
    st.warning(f"Requested v{result.requested_version}, generated with v{plan.generator_version}.")

for block in plan.blocks:
    color = BLOCK_COLORS.get(block.key, "#CCCCCC")
    heading = f"<strong>{block.title}</strong> | {format_duration(block.target_seconds)}"
    if block.workout_title:
        heading += f" | {block.workout_title}"
    st.markdown(
        f'<div style="background:{color};padding:6px 12px;border-radius:4px;'
        f'margin:6px 0;color:white;">{heading}</div>',
        unsafe_allow_html=True,
    )
    if block.coaching_cues:
        st.caption(block.coaching_cues)
    rows = block_rows(block)
    if rows:
        st.table(rows)
    else:
        st.write("_No available movements._")

st.divider()
st.write(plan.coaching_notes)

with st.expander("Text view"):
    st.code(render_plan_text(plan))

st.download_button(
    "Download JSON",
    data=plan_to_json(plan),
    file_name=f"workout-{plan.seed}.json",
    mime="application/json",
)
