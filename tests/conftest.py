"""Shared test fixtures: reference sessions for each training kind."""

from __future__ import annotations

from datetime import timedelta
from typing import Callable

import pytest

from training_engine.calculators import Running, Swimming, Walking
from training_engine.models.enums import LEN_STEP, SWIMMING_LEN_STEP, TrainingKind
from training_engine.models.session import Session


@pytest.fixture
def session_factory() -> Callable[..., Session]:
    """Factory fixture for Session instances.

    Usage:
        session = session_factory(action=1000, duration=timedelta(hours=1))
    """

    def factory(
        training_type: str = TrainingKind.RUNNING.label,
        action: int = 5000,
        len_step: float = LEN_STEP,
        duration: timedelta = timedelta(minutes=30),
        weight_kg: float = 85.0,
    ) -> Session:
        return Session(
            training_type=training_type,
            action=action,
            len_step=len_step,
            duration=duration,
            weight_kg=weight_kg,
        )

    return factory


@pytest.fixture
def running() -> Running:
    """5000 steps in 30 min, 85 kg → 3.25 km at 6.5 km/h."""
    return Running(
        training=Session(
            training_type=TrainingKind.RUNNING.label,
            action=5000,
            len_step=LEN_STEP,
            duration=timedelta(minutes=30),
            weight_kg=85,
        ),
    )


@pytest.fixture
def walking() -> Walking:
    """20000 steps in 3h45m, 185 cm, 85 kg → 13 km."""
    return Walking(
        training=Session(
            training_type=TrainingKind.WALKING.label,
            action=20000,
            len_step=LEN_STEP,
            duration=timedelta(hours=3, minutes=45),
            weight_kg=85,
        ),
        height_cm=185,
    )


@pytest.fixture
def swimming() -> Swimming:
    """2000 strokes, 5 crossings of a 50 m pool in 90 min, 85 kg."""
    return Swimming(
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
