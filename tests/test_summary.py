"""Tests for tabular summaries over several trainings."""

from __future__ import annotations

from datetime import timedelta

import pytest

from training_engine.calculators import Running
from training_engine.examples import example_trainings
from training_engine.report import build_info
from training_engine.summary import SUMMARY_COLUMNS, summarize, totals


class TestSummarize:
    def test_one_row_per_training(self) -> None:
        frame = summarize(example_trainings())
        assert len(frame) == 3
        assert tuple(frame.columns) == SUMMARY_COLUMNS

    def test_rows_match_reports(self) -> None:
        trainings = example_trainings()
        frame = summarize(trainings)
        for (_, row), training in zip(frame.iterrows(), trainings):
            info = build_info(training)
            assert row["training_type"] == info.training_type
            assert row["calories_kcal"] == pytest.approx(info.calories)
            assert row["speed_kmh"] == pytest.approx(info.speed)

    def test_empty_input(self) -> None:
        frame = summarize([])
        assert frame.empty
        assert tuple(frame.columns) == SUMMARY_COLUMNS


class TestTotals:
    def test_sums(self) -> None:
        trainings = example_trainings()
        result = totals(summarize(trainings))
        infos = [build_info(t) for t in trainings]
        assert result["duration_min"] == pytest.approx(90 + 225 + 30)
        assert result["distance_km"] == pytest.approx(sum(i.distance for i in infos))
        assert result["calories_kcal"] == pytest.approx(sum(i.calories for i in infos))

    def test_duration_weighted_speed(self, session_factory) -> None:
        slow = Running(training=session_factory(action=1000, duration=timedelta(hours=3)))
        fast = Running(training=session_factory(action=10000, duration=timedelta(hours=1)))
        result = totals(summarize([slow, fast]))
        expected = (slow.training.mean_speed() * 180 + fast.training.mean_speed() * 60) / 240
        assert result["speed_kmh"] == pytest.approx(expected)

    def test_zero_duration_speed_zero(self, session_factory) -> None:
        idle = Running(training=session_factory(duration=timedelta(0)))
        assert totals(summarize([idle]))["speed_kmh"] == 0.0

    def test_empty_frame(self) -> None:
        result = totals(summarize([]))
        assert result == {
            "duration_min": 0.0,
            "distance_km": 0.0,
            "calories_kcal": 0.0,
            "speed_kmh": 0.0,
        }
