"""Builder for the checkpointed classification graph.

    START → classify → END

State is persisted per `thread_id` by the checkpointer. Invoking the graph
again on the same thread resumes from the stored state: records that
already have a classification are skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Iterable, Mapping

from langchain_core.runnables import RunnableConfig
from langgraph.checkpoint.base import BaseCheckpointSaver
from langgraph.graph import END, START, StateGraph
from langgraph.graph.state import CompiledStateGraph

from spendcube.core.records import Classification, SpendRecord
from spendcube.cortex.steps.classification import ClassificationStep

from .state import ClassificationGraphState

logger = logging.getLogger(__name__)

ClassifyNode = Callable[[ClassificationGraphState], Awaitable[dict[str, Any]]]


def make_classify_node(step: ClassificationStep) -> ClassifyNode:
    async def classify_node(state: ClassificationGraphState) -> dict[str, Any]:
        existing = [Classification.model_validate(c) for c in state.get("classifications") or []]
        outcome = await step.run(
            state.get("records") or [],
            session_id=state.get("session_id") or None,
            existing=existing,
        )
        return {
            "classifications": [c.model_dump() for c in outcome.classifications],
            "errors": [e.model_dump() for e in outcome.errors],
            "skills": [s.id for s in outcome.skills],
            "stage": "classified",
        }

    return classify_node


def build_classification_graph(step: ClassificationStep) -> StateGraph:
    workflow = StateGraph(ClassificationGraphState)
    workflow.add_node("classify", make_classify_node(step))
    workflow.add_edge(START, "classify")
    workflow.add_edge("classify", END)
    return workflow


def compile_classification_graph(
    step: ClassificationStep, checkpointer: BaseCheckpointSaver | None = None
) -> CompiledStateGraph:
    """Compile the classification graph.

    Args:
        step: Configured classification step.
        checkpointer: Optional checkpoint saver for state persistence.
                     If None, no checkpointing is used.
    """
    workflow = build_classification_graph(step)
    if checkpointer is not None:
        return workflow.compile(checkpointer=checkpointer)
    return workflow.compile()


async def run_classification(
    graph: CompiledStateGraph,
    records: Iterable[SpendRecord | Mapping[str, Any]],
    *,
    thread_id: str,
    session_id: str | None = None,
) -> dict[str, Any]:
    """Invoke `graph` for `records` on `thread_id` and return the final state."""
    payload = [
        r.model_dump() if isinstance(r, SpendRecord) else SpendRecord.model_validate(r).model_dump()
        for r in records
    ]
    logger.debug("Running classification thread=%s records=%d", thread_id, len(payload))
    config: RunnableConfig = {"configurable": {"thread_id": thread_id}}
    return await graph.ainvoke(
        {"records": payload, "session_id": session_id or "", "stage": "classifying"},
        config=config,
    )


__all__ = [
    "build_classification_graph",
    "compile_classification_graph",
    "make_classify_node",
    "run_classification",
]
