"""Modular configuration system for SpendCube."""

from .base import (
    PRODUCTION_MODES,
    get_bool_env,
    get_env,
    get_first_env,
    get_int_env,
)
from .checkpoint import (
    DEFAULT_CONNECT_TIMEOUT_MS,
    DEFAULT_IDLE_TIMEOUT_MS,
    DEFAULT_POOL_SIZE,
    CheckpointConfig,
    CheckpointKind,
    execution_mode,
)
from .main import (
    ClassificationConfig,
    Config,
    get_core_config,
    set_core_config,
)

__all__ = [
    # Main classes
    "Config",
    "ClassificationConfig",
    "CheckpointConfig",
    "CheckpointKind",
    # Main functions
    "get_core_config",
    "set_core_config",
    "execution_mode",
    # Base utilities
    "get_env",
    "get_bool_env",
    "get_int_env",
    "get_first_env",
    "PRODUCTION_MODES",
    "DEFAULT_POOL_SIZE",
    "DEFAULT_IDLE_TIMEOUT_MS",
    "DEFAULT_CONNECT_TIMEOUT_MS",
]
