"""Abstract interface implemented by every calorie calculator."""

from __future__ import annotations

from abc import ABC, abstractmethod

from training_engine.models.info_message import InfoMessage
from training_engine.models.session import Session


class CaloriesCalculator(ABC):
    """Capability shared by Running, Walking and Swimming.

    Implementations are frozen dataclasses that embed a ``Session`` as their
    ``training`` field and call into it for the shared formulas. There is no
    fallback implementation: each kind defines both methods itself.

    Subclasses must define:
        training: the embedded Session
        calories(): kcal burned over the whole training
        training_info(): the report snapshot for this training
    """

    training: Session

    @abstractmethod
    def calories(self) -> float:
        """Return kilocalories burned during the training."""
        ...

    @abstractmethod
    def training_info(self) -> InfoMessage:
        """Return the report snapshot for this training.

        The calorie field of the returned message is not guaranteed to match
        ``calories()``; ``report.build_info`` merges the two.
        """
        ...
