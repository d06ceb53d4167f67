"""Swimming calorie calculator.

Swimming measures speed by pool crossings rather than strokes, so it
replaces the session's mean speed. The reported distance is still the
stroke-based session distance; the two are not reconciled.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from training_engine.calculators.base import CaloriesCalculator
from training_engine.models.enums import (
    M_IN_KM,
    SWIMMING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_WEIGHT_MULTIPLIER,
)
from training_engine.models.info_message import InfoMessage
from training_engine.models.session import Session


@dataclass(frozen=True)
class Swimming(CaloriesCalculator):
    """Swimming training in a pool."""

    training: Session
    length_pool: int  # meters
    count_pool: int  # number of pool crossings

    def mean_speed(self) -> float:
        """Pool distance over duration in km/h; 0.0 for a zero-length training."""
        hours = self.training.duration_hours
        if hours == 0:
            return 0.0
        return self.length_pool * self.count_pool / M_IN_KM / hours

    def calories(self) -> float:
        """(speed + 1.1) * 2 * weight * hours."""
        return (
            (self.mean_speed() + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
            * SWIMMING_CALORIES_WEIGHT_MULTIPLIER
            * self.training.weight_kg
            * self.training.duration_hours
        )

    def training_info(self) -> InfoMessage:
        info = self.training.training_info()
        return dataclasses.replace(info, speed=self.mean_speed())
