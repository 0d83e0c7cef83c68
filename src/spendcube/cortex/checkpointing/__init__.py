"""Checkpoint persistence for pipeline graphs (in-memory or PostgreSQL)."""

from .factory import (
    CheckpointerFactory,
    CheckpointHealth,
    ConfigLoader,
    NonDurableCheckpointWarning,
    validate_checkpoint_config,
)

__all__ = [
    "CheckpointerFactory",
    "CheckpointHealth",
    "ConfigLoader",
    "NonDurableCheckpointWarning",
    "validate_checkpoint_config",
]
