"""Walking calorie calculator."""

from __future__ import annotations

from dataclasses import dataclass

from training_engine.calculators.base import CaloriesCalculator
from training_engine.models.enums import (
    CM_IN_M,
    KMH_IN_MSEC,
    MIN_IN_HOURS,
    WALKING_CALORIES_SPEED_HEIGHT_MULTIPLIER,
    WALKING_CALORIES_WEIGHT_MULTIPLIER,
)
from training_engine.models.info_message import InfoMessage
from training_engine.models.session import Session


@dataclass(frozen=True)
class Walking(CaloriesCalculator):
    """Walking training; the formula also depends on the walker's height."""

    training: Session
    height_cm: float

    def calories(self) -> float:
        """(0.035 * weight + (speed_ms^2 / height_m) * 0.029 * weight) * minutes.

        Speed is converted from km/h to m/s and height from cm to m first.
        """
        speed_ms = self.training.mean_speed() * KMH_IN_MSEC
        height_m = self.height_cm / CM_IN_M
        weight = self.training.weight_kg
        return (
            WALKING_CALORIES_WEIGHT_MULTIPLIER * weight
            + (speed_ms**2 / height_m) * WALKING_CALORIES_SPEED_HEIGHT_MULTIPLIER * weight
        ) * self.training.duration_hours * MIN_IN_HOURS

    def training_info(self) -> InfoMessage:
        return self.training.training_info()
