"""The three reference trainings printed by the report runner."""

from __future__ import annotations

from datetime import timedelta

from training_engine.calculators import CaloriesCalculator, Running, Swimming, Walking
from training_engine.models.enums import LEN_STEP, SWIMMING_LEN_STEP, TrainingKind
from training_engine.models.session import Session


def example_trainings() -> tuple[CaloriesCalculator, ...]:
    """Swimming, walking and running sessions of an 85 kg athlete, in print order."""
    swimming = Swimming(
        training=Session(
            training_type=TrainingKind.SWIMMING.label,
            action=2000,
            len_step=SWIMMING_LEN_STEP,
            duration=timedelta(minutes=90),
            weight_kg=85,
        ),
        length_pool=50,
        count_pool=5,
    )

    walking = Walking(
        training=Session(
            training_type=TrainingKind.WALKING.label,
            action=20000,
            len_step=LEN_STEP,
            duration=timedelta(hours=3, minutes=45),
            weight_kg=85,
        ),
        height_cm=185,
    )

    running = Running(
        training=Session(
            training_type=TrainingKind.RUNNING.label,
            action=5000,
            len_step=LEN_STEP,
            duration=timedelta(minutes=30),
            weight_kg=85,
        ),
    )

    return (swimming, walking, running)
