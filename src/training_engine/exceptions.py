"""Exception hierarchy for constructing trainings from loose input."""

from __future__ import annotations


class TrainingEngineError(Exception):
    """Base exception for all training_engine errors."""


class UnknownTrainingKindError(TrainingEngineError):
    """The requested training kind is not one of running, walking, swimming."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unknown training kind: {kind!r}")
        self.kind = kind


class MissingParameterError(TrainingEngineError):
    """A parameter required by the training kind was not supplied."""

    def __init__(self, kind: str, parameter: str) -> None:
        super().__init__(f"{kind} training requires '{parameter}'")
        self.kind = kind
        self.parameter = parameter
