"""Enumerations and unit constants for the training engine.

Calorie coefficients are the empirical values used by the tracker for each
training kind; they are not meant to be tuned per athlete.
"""

from enum import Enum


class TrainingKind(Enum):
    """Supported training kinds, valued by their display label."""

    RUNNING = "Бег"
    WALKING = "Ходьба"
    SWIMMING = "Плавание"

    @property
    def label(self) -> str:
        return self.value

    @property
    def default_len_step(self) -> float:
        """Conventional length of one step or stroke in meters."""
        if self is TrainingKind.SWIMMING:
            return SWIMMING_LEN_STEP
        return LEN_STEP


# ---------------------------------------------------------------------------
# Unit conversions
# ---------------------------------------------------------------------------
M_IN_KM = 1000  # meters in a kilometer
MIN_IN_HOURS = 60  # minutes in an hour
SEC_IN_MIN = 60  # seconds in a minute
CM_IN_M = 100  # centimeters in a meter
KMH_IN_MSEC = 0.278  # km/h -> m/s
LEN_STEP = 0.65  # running/walking step length, meters

# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------
RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER = 18
RUNNING_CALORIES_MEAN_SPEED_SHIFT = 1.79

# ---------------------------------------------------------------------------
# Walking
# ---------------------------------------------------------------------------
WALKING_CALORIES_WEIGHT_MULTIPLIER = 0.035
WALKING_CALORIES_SPEED_HEIGHT_MULTIPLIER = 0.029

# ---------------------------------------------------------------------------
# Swimming
# ---------------------------------------------------------------------------
SWIMMING_LEN_STEP = 1.38  # one stroke, meters
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2
