"""Training tracker: Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import streamlit as st

from training_engine.examples import example_trainings
from training_engine.exceptions import TrainingEngineError
from training_engine.models.enums import TrainingKind
from training_engine.report import build_info, read_data
from training_engine.summary import summarize, totals

from helpers import ACTION_LABELS, KIND_LABELS, build_form_training, format_duration

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Training Tracker",
    page_icon="🏃",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Sidebar: training input
# ---------------------------------------------------------------------------

st.sidebar.title("Training")

kind = st.sidebar.selectbox(
    "Kind",
    list(TrainingKind),
    format_func=lambda k: KIND_LABELS.get(k, k.name),
)

with st.sidebar.expander("Session", expanded=True):
    action = st.number_input(ACTION_LABELS[kind], min_value=0, value=5000, step=100)
    col_h, col_m = st.columns(2)
    with col_h:
        hours = st.number_input("Hours", min_value=0, max_value=24, value=0)
    with col_m:
        minutes = st.number_input("Minutes", min_value=0, max_value=59, value=30)
    weight_kg = st.number_input("Weight (kg)", min_value=1.0, value=85.0, step=0.5)
    len_step = st.number_input(
        "Step length (m, 0 = default)",
        min_value=0.0,
        value=0.0,
        step=0.01,
        help=f"Default for this kind: {kind.default_len_step} m",
    )

form: dict = {
    "kind": kind,
    "action": action,
    "hours": hours,
    "minutes": minutes,
    "weight_kg": weight_kg,
    "len_step": len_step,
}

if kind is TrainingKind.WALKING:
    form["height_cm"] = st.sidebar.number_input("Height (cm)", min_value=1.0, value=185.0)
elif kind is TrainingKind.SWIMMING:
    form["length_pool"] = int(st.sidebar.number_input("Pool length (m)", min_value=1, value=50))
    form["count_pool"] = int(st.sidebar.number_input("Pool crossings", min_value=0, value=5))

# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------

tab_report, tab_examples = st.tabs(["Report", "Examples"])

with tab_report:
    try:
        training = build_form_training(form)
    except TrainingEngineError as e:
        st.error(str(e))
        st.stop()

    info = build_info(training)
    st.subheader(f"{KIND_LABELS[kind]}, {format_duration(info.duration_minutes)}")

    c1, c2, c3 = st.columns(3)
    c1.metric("Distance", f"{info.distance:.2f} km")
    c2.metric("Mean speed", f"{info.speed:.2f} km/h")
    c3.metric("Calories", f"{info.calories:.2f} kcal")

    st.code(read_data(training), language=None)

with tab_examples:
    frame = summarize(example_trainings())
    st.dataframe(frame, hide_index=True, use_container_width=True)

    summary = totals(frame)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total time", format_duration(summary["duration_min"]))
    c2.metric("Total distance", f"{summary['distance_km']:.2f} km")
    c3.metric("Mean speed", f"{summary['speed_kmh']:.2f} km/h")
    c4.metric("Total calories", f"{summary['calories_kcal']:.2f} kcal")
