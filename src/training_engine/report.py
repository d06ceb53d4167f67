"""Report dispatch: turns any calorie calculator into a rendered report."""

from __future__ import annotations

import dataclasses
import logging

from training_engine.calculators.base import CaloriesCalculator
from training_engine.models.info_message import InfoMessage

logger = logging.getLogger(__name__)


def build_info(training: CaloriesCalculator) -> InfoMessage:
    """Return the training's report with its own calorie count filled in.

    ``calories()`` and ``training_info()`` are called separately and the
    calorie result overwrites whatever the report carried.
    """
    calories = training.calories()
    info = training.training_info()
    logger.debug("%s: %.2f kcal", info.training_type, calories)
    return dataclasses.replace(info, calories=calories)


def read_data(training: CaloriesCalculator) -> str:
    """Render the training's report as display text."""
    return str(build_info(training))
