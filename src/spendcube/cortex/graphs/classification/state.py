"""State definition for the classification graph."""

from __future__ import annotations

import operator
from typing import Annotated, Any, TypedDict


class ClassificationGraphState(TypedDict, total=False):
    """Checkpointed state for the classification graph.

    Records and results are stored as plain dicts so any checkpoint
    serializer can round-trip them. `classifications` and `errors` are
    additive: re-running a thread appends only new results.
    """

    session_id: str
    records: list[dict[str, Any]]
    classifications: Annotated[list[dict[str, Any]], operator.add]
    errors: Annotated[list[dict[str, Any]], operator.add]
    skills: list[str]  # Skill ids selected for the last batch
    stage: str


__all__ = ["ClassificationGraphState"]
