"""Core primitives: configuration, exceptions, record payloads."""

from .config import Config, get_core_config, get_env, set_core_config
from .exceptions import CheckpointConfigError, CheckpointInitError, SpendcubeError
from .records import (
    Classification,
    ClassificationJudgment,
    SpendRecord,
    StepError,
    utc_now_iso,
)

__all__ = [
    "Config",
    "get_core_config",
    "set_core_config",
    "get_env",
    "SpendcubeError",
    "CheckpointConfigError",
    "CheckpointInitError",
    "Classification",
    "ClassificationJudgment",
    "SpendRecord",
    "StepError",
    "utc_now_iso",
]
