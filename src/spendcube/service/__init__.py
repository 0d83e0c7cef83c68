"""Service-facing pieces: progress bridge, streaming events, runtime."""

from .events import (
    ClassificationEvent,
    ClassificationProgressEvent,
    InsightEvent,
    ProgressCallback,
    ProgressEvent,
    StatusEvent,
    StreamingEvent,
    compute_progress,
    create_progress_callback,
    encode_sse,
    event_name,
    parse_streaming_event,
    to_sse,
)
from .progress import ProgressBridge
from .runtime import PipelineRuntime

__all__ = [
    "ClassificationEvent",
    "ClassificationProgressEvent",
    "InsightEvent",
    "PipelineRuntime",
    "ProgressBridge",
    "ProgressCallback",
    "ProgressEvent",
    "StatusEvent",
    "StreamingEvent",
    "compute_progress",
    "create_progress_callback",
    "encode_sse",
    "event_name",
    "parse_streaming_event",
    "to_sse",
]
