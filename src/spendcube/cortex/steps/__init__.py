"""Pipeline steps."""

from .classification import (
    CLASSIFIED_BY,
    ClassificationAgent,
    ClassificationOutcome,
    ClassificationStep,
)

__all__ = [
    "CLASSIFIED_BY",
    "ClassificationAgent",
    "ClassificationOutcome",
    "ClassificationStep",
]
