"""Checkpoint saver factory for the pipeline graphs.

Selects between LangGraph's in-memory saver and the PostgreSQL saver,
constructs the chosen backend lazily, and owns its connection pool.

Lifecycle of the shared saver:

    uninitialized → selecting backend → memory-ready | durable-ready → shutdown

Backend selection is re-read from configuration on every call; the saver
built by the first successful `get()` is cached and shared until `reset()`
or `shutdown()`. A failed durable construction leaves nothing cached, so the
next `get()` starts over.
"""

from __future__ import annotations

import asyncio
import logging
import warnings
from dataclasses import dataclass
from typing import Any, Callable

from langgraph.checkpoint.base import BaseCheckpointSaver
from langgraph.checkpoint.memory import InMemorySaver
from langgraph.checkpoint.postgres.aio import AsyncPostgresSaver
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool
from pydantic import ValidationError

from spendcube.core.config import CheckpointConfig, CheckpointKind
from spendcube.core.exceptions import CheckpointConfigError, CheckpointInitError

logger = logging.getLogger(__name__)

ConfigLoader = Callable[[], CheckpointConfig]


class NonDurableCheckpointWarning(RuntimeWarning):
    """A durable backend is configured but an in-memory saver was handed out."""


@dataclass(frozen=True)
class CheckpointHealth:
    healthy: bool
    kind: CheckpointKind
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"healthy": self.healthy, "kind": self.kind}
        if self.error is not None:
            data["error"] = self.error
        return data


def validate_checkpoint_config(config: CheckpointConfig) -> CheckpointConfig:
    """Fail fast on configurations that cannot produce a backend.

    Raises:
        CheckpointConfigError: durable without a connection string, or a
            non-positive pool size.
    """
    if not config.is_durable:
        return config
    if not (config.connection_string or "").strip():
        raise CheckpointConfigError("PostgreSQL connection string is required for durable checkpoints")
    if config.pool_size < 1:
        raise CheckpointConfigError(
            f"Checkpoint pool size must be positive, got {config.pool_size}",
            pool_size=config.pool_size,
        )
    return config


class CheckpointerFactory:
    """Owns the shared checkpoint saver and its PostgreSQL pool.

    Construct one per process (see `PipelineRuntime`) and pass it by
    reference. Concurrent first calls to `get()` share one construction.
    """

    def __init__(self, config_loader: ConfigLoader | None = None) -> None:
        self._config_loader: ConfigLoader = config_loader or CheckpointConfig.from_env
        self._instance: BaseCheckpointSaver | None = None
        self._kind: CheckpointKind | None = None
        self._pool: AsyncConnectionPool | None = None
        # Pools opened by create(); closed on reset/shutdown
        self._owned_pools: list[AsyncConnectionPool] = []
        self._sync_fallback: InMemorySaver | None = None
        self._lock = asyncio.Lock()

    # ── configuration ───────────────────────────────────────

    def current_config(self) -> CheckpointConfig:
        return validate_checkpoint_config(self._config_loader())

    def is_durable_configured(self) -> bool:
        return self._config_loader().is_durable

    @property
    def kind(self) -> CheckpointKind | None:
        """Kind of the shared saver, or None before construction."""
        return self._kind

    # ── pool helpers ────────────────────────────────────────

    @staticmethod
    async def _open_pool(config: CheckpointConfig) -> AsyncConnectionPool:
        connect_timeout = config.connect_timeout_ms / 1000
        pool = AsyncConnectionPool(
            config.connection_string or "",
            min_size=1,
            max_size=config.pool_size,
            max_idle=config.idle_timeout_ms / 1000,
            timeout=connect_timeout,
            open=False,
            kwargs={
                "autocommit": True,
                "prepare_threshold": 0,
                "row_factory": dict_row,
                "connect_timeout": max(1, round(connect_timeout)),
            },
        )
        try:
            await pool.open(wait=True, timeout=connect_timeout)
        except Exception:
            await pool.close()
            raise
        logger.debug("Opened checkpoint pool (max_size=%d)", config.pool_size)
        return pool

    async def _build_durable(
        self, config: CheckpointConfig, pool: AsyncConnectionPool | None = None
    ) -> tuple[AsyncPostgresSaver, AsyncConnectionPool]:
        opened_here = pool is None
        try:
            if pool is None:
                pool = await self._open_pool(config)
            saver = AsyncPostgresSaver(conn=pool)
            # Creates/migrates checkpoint tables; idempotent
            await saver.setup()
        except Exception as e:
            if opened_here and pool is not None:
                await pool.close()
            raise CheckpointInitError(f"Failed to initialize PostgreSQL checkpointer: {e}") from e
        return saver, pool

    # ── public API ──────────────────────────────────────────

    async def get(self) -> BaseCheckpointSaver:
        """Return the shared saver, constructing it on first use.

        Raises:
            CheckpointConfigError: invalid backend configuration.
            CheckpointInitError: durable backend could not be initialized.
        """
        if self._instance is not None:
            return self._instance

        async with self._lock:
            # Double-check after acquiring lock
            if self._instance is not None:
                return self._instance

            config = self.current_config()
            if config.is_durable:
                logger.info("Using PostgreSQL checkpoint persistence")
                saver, pool = await self._build_durable(config, self._pool)
                self._pool = pool
                self._instance = saver
            else:
                logger.info("Using in-memory checkpoint persistence")
                self._instance = InMemorySaver()
            self._kind = config.kind
            self._sync_fallback = None
            return self._instance

    def get_sync(self) -> BaseCheckpointSaver:
        """Best-effort accessor for code that cannot await.

        When a durable backend is configured but not yet constructed this
        returns an in-memory saver: checkpoints written through it are NOT
        durable. A `NonDurableCheckpointWarning` is issued in that case and
        the fallback is not installed as the shared saver, so a later
        `get()` still builds the durable backend.
        """
        if self._instance is not None:
            return self._instance

        config = self.current_config()
        if config.is_durable:
            logger.warning(
                "Synchronous checkpointer access with PostgreSQL configured; "
                "returning in-memory saver. Use `await get()` for durable persistence."
            )
            warnings.warn(
                "Durable checkpointing is configured but not initialized; "
                "returning a non-durable in-memory saver",
                NonDurableCheckpointWarning,
                stacklevel=2,
            )
            if self._sync_fallback is None:
                self._sync_fallback = InMemorySaver()
            return self._sync_fallback

        self._instance = InMemorySaver()
        self._kind = "memory"
        return self._instance

    async def create(self, **overrides: Any) -> BaseCheckpointSaver:
        """Build a new, non-shared saver from current config plus `overrides`.

        The shared saver is untouched. Durable savers get their own pool,
        which the factory closes on `reset()`/`shutdown()`.

        Raises:
            CheckpointConfigError: overrides that do not form a valid config.
        """
        try:
            merged = {**self._config_loader().model_dump(), **overrides}
            config = CheckpointConfig.model_validate(merged)
        except ValidationError as e:
            raise CheckpointConfigError(f"Invalid checkpoint overrides: {e}", overrides=overrides) from e
        validate_checkpoint_config(config)
        if not config.is_durable:
            return InMemorySaver()

        saver, pool = await self._build_durable(config)
        self._owned_pools.append(pool)
        return saver

    async def health(self) -> CheckpointHealth:
        """Probe the configured backend; never raises on probe failure."""
        raw = self._config_loader()
        try:
            config = validate_checkpoint_config(raw)
        except CheckpointConfigError as e:
            return CheckpointHealth(healthy=False, kind=raw.kind, error=str(e))

        if not config.is_durable:
            return CheckpointHealth(healthy=True, kind="memory")

        try:
            async with self._lock:
                if self._pool is None:
                    self._pool = await self._open_pool(config)
                pool = self._pool
            async with pool.connection(timeout=config.connect_timeout_ms / 1000) as conn:
                await conn.execute("SELECT 1")
        except Exception as e:
            logger.warning("Checkpoint health probe failed: %s", e)
            return CheckpointHealth(healthy=False, kind="durable", error=str(e) or type(e).__name__)

        return CheckpointHealth(healthy=True, kind="durable")

    async def reset(self) -> None:
        """Close pools and drop the shared saver. Safe to call repeatedly."""
        async with self._lock:
            pools = self._owned_pools
            self._owned_pools = []
            if self._pool is not None:
                pools.append(self._pool)
                self._pool = None
            self._instance = None
            self._kind = None
            self._sync_fallback = None

        for pool in pools:
            try:
                await pool.close()
            except Exception as e:
                logger.warning("Error closing checkpoint pool: %s", e)

    async def shutdown(self) -> None:
        await self.reset()
        logger.info("Checkpointer shutdown complete")


__all__ = [
    "CheckpointHealth",
    "CheckpointerFactory",
    "ConfigLoader",
    "NonDurableCheckpointWarning",
    "validate_checkpoint_config",
]
