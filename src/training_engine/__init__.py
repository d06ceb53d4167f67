"""Workout statistics engine: distance, mean speed and calories per training."""

from training_engine.calculators import CaloriesCalculator, Running, Swimming, Walking
from training_engine.models import InfoMessage, Session, TrainingKind
from training_engine.report import build_info, read_data

__all__ = [
    "CaloriesCalculator",
    "InfoMessage",
    "Running",
    "Session",
    "Swimming",
    "TrainingKind",
    "Walking",
    "build_info",
    "read_data",
]
