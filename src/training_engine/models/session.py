"""Frozen training session: the raw record shared by every training kind."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from training_engine.models.enums import M_IN_KM, MIN_IN_HOURS, SEC_IN_MIN
from training_engine.models.info_message import InfoMessage


@dataclass(frozen=True)
class Session:
    """Immutable record of one training.

    Calculators embed a Session and build on its distance and mean speed.
    Nothing here validates input: negative counts or zero weight simply flow
    through the formulas.
    """

    training_type: str
    action: int  # steps or strokes
    len_step: float  # meters per step/stroke
    duration: timedelta
    weight_kg: float

    @property
    def duration_hours(self) -> float:
        return self.duration.total_seconds() / (MIN_IN_HOURS * SEC_IN_MIN)

    def distance(self) -> float:
        """Distance covered in km."""
        return self.action * self.len_step / M_IN_KM

    def mean_speed(self) -> float:
        """Mean speed in km/h; 0.0 for a zero-length training."""
        hours = self.duration_hours
        if hours == 0:
            return 0.0
        return self.distance() / hours

    def calories(self) -> float:
        """Default calorie count. Calculators supply their own formula."""
        return 0.0

    def training_info(self) -> InfoMessage:
        return InfoMessage(
            training_type=self.training_type,
            duration=self.duration,
            distance=self.distance(),
            speed=self.mean_speed(),
            calories=self.calories(),
        )
