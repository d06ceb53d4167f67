"""Build calorie calculators from loose values (form input, profiles)."""

from __future__ import annotations

from datetime import timedelta

from training_engine.calculators import CaloriesCalculator, Running, Swimming, Walking
from training_engine.exceptions import MissingParameterError, UnknownTrainingKindError
from training_engine.models.enums import TrainingKind
from training_engine.models.session import Session


def parse_kind(kind: TrainingKind | str) -> TrainingKind:
    """Resolve a TrainingKind from itself, its name or its display label.

    Names are matched case-insensitively, e.g. "swimming", "SWIMMING" and
    "Плавание" all resolve to TrainingKind.SWIMMING.
    """
    if isinstance(kind, TrainingKind):
        return kind
    if isinstance(kind, str):
        key = kind.strip()
        if key.upper() in TrainingKind.__members__:
            return TrainingKind[key.upper()]
        for member in TrainingKind:
            if member.label.lower() == key.lower():
                return member
    raise UnknownTrainingKindError(kind)


def build_training(
    kind: TrainingKind | str,
    *,
    action: int,
    duration: timedelta,
    weight_kg: float,
    len_step: float | None = None,
    height_cm: float | None = None,
    length_pool: int | None = None,
    count_pool: int | None = None,
) -> CaloriesCalculator:
    """Construct the calculator for ``kind``.

    Args:
        kind: TrainingKind, its name or its display label.
        action: Steps or strokes.
        duration: Elapsed training time.
        weight_kg: Body weight.
        len_step: Step/stroke length in meters. Defaults to the kind's
                  conventional length.
        height_cm: Required for walking.
        length_pool: Required for swimming.
        count_pool: Required for swimming.

    Returns:
        A Running, Walking or Swimming instance.

    Raises:
        UnknownTrainingKindError: ``kind`` could not be resolved.
        MissingParameterError: A kind-specific parameter is None.
    """
    resolved = parse_kind(kind)
    session = Session(
        training_type=resolved.label,
        action=action,
        len_step=resolved.default_len_step if len_step is None else len_step,
        duration=duration,
        weight_kg=weight_kg,
    )

    if resolved is TrainingKind.RUNNING:
        return Running(training=session)

    if resolved is TrainingKind.WALKING:
        if height_cm is None:
            raise MissingParameterError(resolved.label, "height_cm")
        return Walking(training=session, height_cm=height_cm)

    if length_pool is None:
        raise MissingParameterError(resolved.label, "length_pool")
    if count_pool is None:
        raise MissingParameterError(resolved.label, "count_pool")
    return Swimming(training=session, length_pool=length_pool, count_pool=count_pool)
