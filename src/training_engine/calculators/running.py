"""Running calorie calculator."""

from __future__ import annotations

from dataclasses import dataclass

from training_engine.calculators.base import CaloriesCalculator
from training_engine.models.enums import (
    M_IN_KM,
    MIN_IN_HOURS,
    RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER,
    RUNNING_CALORIES_MEAN_SPEED_SHIFT,
)
from training_engine.models.info_message import InfoMessage
from training_engine.models.session import Session


@dataclass(frozen=True)
class Running(CaloriesCalculator):
    """Running training. Adds nothing to the shared session fields."""

    training: Session

    def calories(self) -> float:
        """(18 * speed + 1.79) * weight / 1000 * minutes."""
        speed = self.training.mean_speed()
        hours = self.training.duration_hours
        return (
            (RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER * speed + RUNNING_CALORIES_MEAN_SPEED_SHIFT)
            * self.training.weight_kg
            / M_IN_KM
            * hours
            * MIN_IN_HOURS
        )

    def training_info(self) -> InfoMessage:
        return self.training.training_info()
