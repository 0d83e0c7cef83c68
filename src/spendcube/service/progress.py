"""Per-session listener registry for classification progress.

The classification step advances through a batch sequentially and calls
`emit` after each record. The request handler that owns the client stream
subscribes a listener for its session (usually built with
`create_progress_callback`) and unsubscribes when the stream ends.

Usage:
    bridge = ProgressBridge()
    with bridge.session(session_id, create_progress_callback(session_id, send)):
        await step.run(records, session_id=session_id)
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from .events import ClassificationProgressEvent, ProgressCallback

logger = logging.getLogger(__name__)


class ProgressBridge:
    """Maps session ids to a single active progress listener.

    At most one listener per session: subscribing again replaces the previous
    listener. Emitting to a session without a listener is a no-op.
    """

    def __init__(self) -> None:
        # session_id → listener
        self._listeners: dict[str, ProgressCallback] = {}
        self._lock = threading.Lock()

    def subscribe(self, session_id: str, callback: ProgressCallback) -> None:
        with self._lock:
            replaced = session_id in self._listeners
            self._listeners[session_id] = callback
        if replaced:
            logger.debug("Progress listener replaced: session=%s", session_id)

    def unsubscribe(self, session_id: str) -> None:
        with self._lock:
            self._listeners.pop(session_id, None)

    def emit(self, session_id: str, event: ClassificationProgressEvent) -> None:
        """Deliver `event` synchronously to the session's listener, if any."""
        with self._lock:
            listener = self._listeners.get(session_id)
        if listener is not None:
            listener(event)

    def has_listener(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._listeners

    @contextmanager
    def session(self, session_id: str, callback: ProgressCallback) -> Iterator[None]:
        """Subscribe for the duration of the block.

        On exit the listener is removed unless another subscriber has
        replaced it in the meantime.
        """
        self.subscribe(session_id, callback)
        try:
            yield
        finally:
            with self._lock:
                if self._listeners.get(session_id) is callback:
                    del self._listeners[session_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)


__all__ = ["ProgressBridge"]
