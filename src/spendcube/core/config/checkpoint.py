"""Checkpoint persistence configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .base import PRODUCTION_MODES, get_first_env, get_int_env

CheckpointKind = Literal["memory", "durable"]

DEFAULT_POOL_SIZE = 10
DEFAULT_IDLE_TIMEOUT_MS = 30_000
DEFAULT_CONNECT_TIMEOUT_MS = 2_000


class CheckpointConfig(BaseModel):
    """Backend selection for LangGraph checkpoint savers.

    `kind="durable"` stores checkpoints in PostgreSQL and needs a
    `connection_string`; `kind="memory"` keeps them in process.
    """

    model_config = ConfigDict(extra="ignore")

    kind: CheckpointKind = "memory"
    connection_string: str | None = None
    pool_size: int = DEFAULT_POOL_SIZE
    idle_timeout_ms: int = DEFAULT_IDLE_TIMEOUT_MS
    connect_timeout_ms: int = DEFAULT_CONNECT_TIMEOUT_MS

    @classmethod
    def from_env(cls, base: "CheckpointConfig | None" = None) -> "CheckpointConfig":
        """Derive the backend from the process environment.

        Durable is selected only when the execution mode is production-like
        and a connection string is present. `base` (usually the TOML
        ``[checkpoint]`` section) supplies the connection string and pool
        tuning when the environment does not; its `kind` is ignored.
        """
        base = base or cls()
        mode = execution_mode()
        connection_string = get_first_env("DATABASE_URL", "POSTGRES_URL") or base.connection_string
        tuning = {
            "pool_size": get_int_env("PG_POOL_SIZE") or base.pool_size,
            "idle_timeout_ms": get_int_env("SPENDCUBE_PG_IDLE_TIMEOUT_MS") or base.idle_timeout_ms,
            "connect_timeout_ms": get_int_env("SPENDCUBE_PG_CONNECT_TIMEOUT_MS")
            or base.connect_timeout_ms,
        }

        if mode in PRODUCTION_MODES and connection_string:
            return cls(kind="durable", connection_string=connection_string, **tuning)
        return cls(kind="memory", connection_string=connection_string, **tuning)

    @property
    def is_durable(self) -> bool:
        return self.kind == "durable"


def execution_mode() -> str:
    """Current execution mode, lower-cased ("" when unset)."""
    return (get_first_env("SPENDCUBE_ENV", "ENVIRONMENT") or "").lower()


__all__ = [
    "CheckpointConfig",
    "CheckpointKind",
    "DEFAULT_CONNECT_TIMEOUT_MS",
    "DEFAULT_IDLE_TIMEOUT_MS",
    "DEFAULT_POOL_SIZE",
    "execution_mode",
]
