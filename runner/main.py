"""Report runner: prints the reports of the reference trainings.

Usage:
    python -m runner.main
    TRAINING_SUMMARY=1 python -m runner.main    # append a totals table
"""

from __future__ import annotations

import logging

from training_engine.examples import example_trainings
from training_engine.models.info_message import format_minutes
from training_engine.report import read_data
from training_engine.summary import summarize, totals

from runner.config import LOG_LEVEL, TRAINING_SUMMARY

logger = logging.getLogger(__name__)


def _format_totals(values: dict[str, float]) -> str:
    return (
        f"Итого: {format_minutes(values['duration_min'])} мин, "
        f"{values['distance_km']:.2f} км, "
        f"{values['speed_kmh']:.2f} км/ч, "
        f"{values['calories_kcal']:.2f} ккал"
    )


def run() -> None:
    """Print each reference training's report, then optionally the summary."""
    trainings = example_trainings()
    logger.info("Reporting %d trainings", len(trainings))

    for training in trainings:
        print(read_data(training))

    if TRAINING_SUMMARY:
        frame = summarize(trainings)
        print(frame.to_string(index=False, float_format=lambda v: f"{v:.2f}"))
        print(_format_totals(totals(frame)))

    logger.info("Report complete")


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    run()


if __name__ == "__main__":
    main()
