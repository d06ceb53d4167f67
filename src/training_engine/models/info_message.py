"""Training report: the final output of a calorie calculation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from training_engine.models.enums import SEC_IN_MIN


def format_minutes(minutes: float) -> str:
    """Shortest exact numeric form, e.g. 90.0 -> '90', 90 min 1 s -> '90.01666666666667'."""
    text = repr(float(minutes))
    return text[:-2] if text.endswith(".0") else text


@dataclass(frozen=True)
class InfoMessage:
    """Snapshot of a finished training's metrics, ready for display."""

    training_type: str
    duration: timedelta
    distance: float  # km
    speed: float  # km/h
    calories: float  # kcal

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / SEC_IN_MIN

    def to_dict(self) -> dict[str, str | float]:
        """Flat mapping of the report, one key per summary column."""
        return {
            "training_type": self.training_type,
            "duration_min": self.duration_minutes,
            "distance_km": self.distance,
            "speed_kmh": self.speed,
            "calories_kcal": self.calories,
        }

    def __str__(self) -> str:
        return (
            f"Тип тренировки: {self.training_type}\n"
            f"Длительность: {format_minutes(self.duration_minutes)} мин\n"
            f"Дистанция: {self.distance:.2f} км.\n"
            f"Ср. скорость: {self.speed:.2f} км/ч\n"
            f"Потрачено ккал: {self.calories:.2f}\n"
        )
