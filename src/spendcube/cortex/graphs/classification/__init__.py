"""Checkpointed classification graph."""

from .builder import (
    build_classification_graph,
    compile_classification_graph,
    make_classify_node,
    run_classification,
)
from .state import ClassificationGraphState

__all__ = [
    "ClassificationGraphState",
    "build_classification_graph",
    "compile_classification_graph",
    "make_classify_node",
    "run_classification",
]
