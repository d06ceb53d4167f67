"""Data models for the training engine."""

from training_engine.models.enums import TrainingKind
from training_engine.models.info_message import InfoMessage
from training_engine.models.session import Session

__all__ = [
    "InfoMessage",
    "Session",
    "TrainingKind",
]
