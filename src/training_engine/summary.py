"""Tabular summaries over several trainings.

All functions are pure: they compute reports via ``build_info`` and never
print or log results.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from training_engine.calculators.base import CaloriesCalculator
from training_engine.report import build_info

SUMMARY_COLUMNS = (
    "training_type",
    "duration_min",
    "distance_km",
    "speed_kmh",
    "calories_kcal",
)


def summarize(trainings: Iterable[CaloriesCalculator]) -> pd.DataFrame:
    """One row per training with its reported metrics.

    Args:
        trainings: Any calculators, in display order.

    Returns:
        DataFrame with columns SUMMARY_COLUMNS. Empty input gives an empty
        frame with the same columns.
    """
    rows = [build_info(training).to_dict() for training in trainings]
    return pd.DataFrame(rows, columns=list(SUMMARY_COLUMNS))


def totals(frame: pd.DataFrame) -> dict[str, float]:
    """Aggregate a summary frame.

    Speed is the duration-weighted mean of the per-training speeds, so a
    long walk counts for more than a short run.

    Returns:
        Mapping with duration_min, distance_km, calories_kcal and speed_kmh.
        speed_kmh is 0.0 when the total duration is zero.
    """
    durations = frame["duration_min"].to_numpy(dtype=np.float64)
    speeds = frame["speed_kmh"].to_numpy(dtype=np.float64)
    total_duration = float(durations.sum())

    if total_duration == 0:
        mean_speed = 0.0
    else:
        mean_speed = float(np.average(speeds, weights=durations))

    return {
        "duration_min": total_duration,
        "distance_km": float(frame["distance_km"].sum()),
        "calories_kcal": float(frame["calories_kcal"].sum()),
        "speed_kmh": mean_speed,
    }
