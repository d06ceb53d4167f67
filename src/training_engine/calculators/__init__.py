"""Calorie calculators: one per training kind."""

from training_engine.calculators.base import CaloriesCalculator
from training_engine.calculators.running import Running
from training_engine.calculators.swimming import Swimming
from training_engine.calculators.walking import Walking

__all__ = [
    "CaloriesCalculator",
    "Running",
    "Swimming",
    "Walking",
]
