"""Streaming events delivered to clients while the pipeline runs.

The public stream is a closed union tagged by ``type``:

    progress        aggregate tick for a long-running node
    status          node started / running / completed / error
    classification  one record's classification outcome
    insight         analysis finding

Internally the classification step produces `ClassificationProgressEvent`;
`create_progress_callback` translates each one into a ``progress`` and a
``classification`` wire event.
"""

from __future__ import annotations

import json
import logging
import math
import uuid
from dataclasses import dataclass
from typing import Annotated, Any, Callable, Literal, assert_never

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from spendcube.core.records import Classification, SpendRecord, utc_now_iso

logger = logging.getLogger(__name__)

AgentNodeType = Literal[
    "supervisor",
    "extraction",
    "cleansing",
    "normalization",
    "classification",
    "qa",
    "enrichment",
    "hitl",
    "analysis",
    "response",
]

SendEvent = Callable[[str, dict[str, Any]], None]


def new_event_id() -> str:
    return str(uuid.uuid4())


class _WireEvent(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(default_factory=new_event_id)
    timestamp: str = Field(default_factory=utc_now_iso)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ProgressEvent(_WireEvent):
    type: Literal["progress"] = "progress"
    node: AgentNodeType
    step: int
    total_steps: int
    message: str
    progress: int = Field(ge=0)
    detail: str | None = None


class StatusEvent(_WireEvent):
    type: Literal["status"] = "status"
    node: AgentNodeType
    status: Literal["started", "running", "completed", "error"]
    message: str
    duration: float | None = None  # ms
    records_processed: int | None = None


class ClassificationEvent(_WireEvent):
    type: Literal["classification"] = "classification"
    record_id: str
    vendor: str
    description: str
    category: str | None = None
    confidence: float | None = None
    status: Literal["pending", "processing", "completed", "error"]


class InsightEvent(_WireEvent):
    type: Literal["insight"] = "insight"
    insight_type: Literal["savings", "risk", "compliance", "quality"]
    severity: Literal["high", "medium", "low"]
    title: str
    dollar_impact: float | None = None


StreamingEvent = Annotated[
    ProgressEvent | StatusEvent | ClassificationEvent | InsightEvent,
    Field(discriminator="type"),
]

_streaming_event_adapter: TypeAdapter[StreamingEvent] = TypeAdapter(StreamingEvent)


def parse_streaming_event(data: dict[str, Any]) -> StreamingEvent:
    """Validate a wire dict into the matching event variant.

    Raises:
        pydantic.ValidationError: unknown ``type`` tag or invalid fields.
    """
    return _streaming_event_adapter.validate_python(data)


def event_name(event: StreamingEvent) -> str:
    """SSE event name for `event`."""
    match event:
        case ProgressEvent():
            return "progress"
        case StatusEvent():
            return "status"
        case ClassificationEvent():
            return "classification"
        case InsightEvent():
            return "insight"
        case _:
            assert_never(event)


def encode_sse(name: str, payload: dict[str, Any]) -> str:
    """Encode one Server-Sent-Events frame."""
    data = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return f"event: {name}\ndata: {data}\n\n"


def to_sse(event: StreamingEvent) -> str:
    return encode_sse(event_name(event), event.to_wire())


@dataclass(frozen=True)
class ClassificationProgressEvent:
    """Emitted by the classification step after each classified record."""

    completed: int
    total: int
    latest: Classification
    record: SpendRecord
    type: Literal["classification_progress"] = "classification_progress"


ProgressCallback = Callable[[ClassificationProgressEvent], None]


def compute_progress(completed: int, total: int) -> int:
    """Percentage complete, rounded half up; 0 when `total` is not positive."""
    if total <= 0:
        return 0
    return int(math.floor(100 * completed / total + 0.5))


def create_progress_callback(session_id: str, send_event: SendEvent) -> ProgressCallback:
    """Build a bridge listener that forwards classification progress to `send_event`.

    Each internal event becomes two wire events, ``progress`` then
    ``classification``, each with its own id and timestamp.
    """

    def _on_progress(event: ClassificationProgressEvent) -> None:
        progress = ProgressEvent(
            node="classification",
            step=event.completed,
            total_steps=event.total,
            message="Classifying records",
            progress=compute_progress(event.completed, event.total),
            detail=f"{event.completed} of {event.total} records classified",
        )
        send_event(event_name(progress), progress.to_wire())

        classification = ClassificationEvent(
            record_id=event.latest.record_id,
            vendor=event.record.vendor,
            description=event.record.description,
            category=event.latest.unspsc_title,
            confidence=event.latest.confidence,
            status="completed",
        )
        send_event(event_name(classification), classification.to_wire())
        logger.debug(
            "session=%s forwarded progress %d/%d", session_id, event.completed, event.total
        )

    return _on_progress


__all__ = [
    "AgentNodeType",
    "ClassificationEvent",
    "ClassificationProgressEvent",
    "InsightEvent",
    "ProgressCallback",
    "ProgressEvent",
    "SendEvent",
    "StatusEvent",
    "StreamingEvent",
    "compute_progress",
    "create_progress_callback",
    "encode_sse",
    "event_name",
    "new_event_id",
    "parse_streaming_event",
    "to_sse",
]
