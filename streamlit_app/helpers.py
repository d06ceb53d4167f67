"""Utility helpers bridging the Streamlit UI and the training engine.

Pure functions for formatting and for turning form values into a
calculator; nothing here touches Streamlit.
"""

from __future__ import annotations

from datetime import timedelta

from training_engine.calculators import CaloriesCalculator
from training_engine.factory import build_training
from training_engine.models.enums import TrainingKind

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(minutes: float) -> str:
    """Convert minutes to human string. e.g. 225.0 -> '3h 45m'."""
    if minutes <= 0:
        return "0m"
    h = int(minutes) // 60
    m = int(minutes) % 60
    if h > 0 and m > 0:
        return f"{h}h {m}m"
    if h > 0:
        return f"{h}h"
    return f"{m}m"


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

KIND_LABELS: dict[TrainingKind, str] = {
    TrainingKind.RUNNING: "Running",
    TrainingKind.WALKING: "Walking",
    TrainingKind.SWIMMING: "Swimming",
}

ACTION_LABELS: dict[TrainingKind, str] = {
    TrainingKind.RUNNING: "Steps",
    TrainingKind.WALKING: "Steps",
    TrainingKind.SWIMMING: "Strokes",
}


# ---------------------------------------------------------------------------
# Training construction
# ---------------------------------------------------------------------------


def build_form_training(form: dict) -> CaloriesCalculator:
    """Convert a UI form dict into a calculator.

    Expects ``kind``, ``action``, ``hours``, ``minutes`` and ``weight_kg``;
    ``height_cm``, ``length_pool`` and ``count_pool`` are passed through when
    present. A ``len_step`` of 0 means "use the kind's default".
    """
    kind = form["kind"]
    duration = timedelta(hours=form.get("hours", 0), minutes=form.get("minutes", 0))
    len_step = form.get("len_step") or None

    return build_training(
        kind,
        action=int(form["action"]),
        duration=duration,
        weight_kg=float(form["weight_kg"]),
        len_step=len_step,
        height_cm=form.get("height_cm"),
        length_pool=form.get("length_pool"),
        count_pool=form.get("count_pool"),
    )
