"""Exception hierarchy for spendcube.

Usage:
    from spendcube.core.exceptions import SpendcubeError, CheckpointInitError
"""

from __future__ import annotations


class SpendcubeError(Exception):
    """Base exception for spendcube.

    Every subclass carries a stable `code` so callers (API layer, CLI) can
    report failures without matching on message text.
    """

    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "", **details: object) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class CheckpointConfigError(SpendcubeError):
    """Checkpoint backend misconfigured (e.g. durable without a connection string)."""

    code = "CONFIGURATION_ERROR"


class CheckpointInitError(SpendcubeError):
    """Checkpoint backend could not be constructed (pool connect or schema setup)."""

    code = "DB_CONNECTION_ERROR"


__all__ = [
    "SpendcubeError",
    "CheckpointConfigError",
    "CheckpointInitError",
]
