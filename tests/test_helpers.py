"""Tests for the Streamlit helper functions."""

from __future__ import annotations

from datetime import timedelta

import pytest

from helpers import build_form_training, format_duration
from training_engine.calculators import Swimming, Walking
from training_engine.exceptions import MissingParameterError
from training_engine.models.enums import LEN_STEP, TrainingKind


class TestFormatDuration:
    def test_hours_and_minutes(self) -> None:
        assert format_duration(225.0) == "3h 45m"

    def test_whole_hours(self) -> None:
        assert format_duration(120.0) == "2h"

    def test_minutes_only(self) -> None:
        assert format_duration(30.0) == "30m"

    def test_zero(self) -> None:
        assert format_duration(0.0) == "0m"


class TestBuildFormTraining:
    def test_walking_form(self) -> None:
        training = build_form_training({
            "kind": TrainingKind.WALKING,
            "action": 20000,
            "hours": 3,
            "minutes": 45,
            "weight_kg": 85.0,
            "len_step": 0.0,
            "height_cm": 185.0,
        })
        assert isinstance(training, Walking)
        assert training.training.duration == timedelta(hours=3, minutes=45)
        assert training.training.len_step == LEN_STEP

    def test_swimming_form(self) -> None:
        training = build_form_training({
            "kind": "swimming",
            "action": 2000,
            "minutes": 90,
            "weight_kg": 85,
            "length_pool": 50,
            "count_pool": 5,
        })
        assert isinstance(training, Swimming)
        assert training.count_pool == 5

    def test_missing_height(self) -> None:
        with pytest.raises(MissingParameterError):
            build_form_training({
                "kind": TrainingKind.WALKING,
                "action": 100,
                "minutes": 10,
                "weight_kg": 70,
            })
