"""Main configuration class that combines all config modules."""

import logging
import tomllib
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .base import get_bool_env, get_env
from .checkpoint import CheckpointConfig

logger = logging.getLogger(__name__)


class ClassificationConfig(BaseModel):
    """Classification step controls."""

    model_config = ConfigDict(extra="ignore")

    # Few-shot examples injected into the classification prompt
    max_examples: int = 10
    # Confidence at or above which a judgment counts as high confidence
    high_confidence_threshold: float = 70.0
    max_retries: int = 3


class Config(BaseModel):
    """Main configuration class for SpendCube.

    Configuration is loaded from multiple sources in priority order:
    1. Environment variables
    2. TOML configuration file
    3. Default values
    """

    model_config = ConfigDict(extra="ignore")

    debug: bool = False
    log_level: str = "INFO"

    # TOML defaults only; the effective backend comes from checkpoint_config()
    checkpoint: CheckpointConfig = Field(default_factory=CheckpointConfig)
    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)

    loaded_from: list[Path] = Field(default_factory=list)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "Config":
        """Load configuration from files and environment."""
        load_dotenv()

        config = cls()

        env_path = get_env("SPENDCUBE_CONFIG_PATH")
        toml_path = Path(config_path or env_path or "settings.toml")
        if toml_path.exists():
            try:
                with open(toml_path, "rb") as f:
                    toml_data = tomllib.load(f)

                config_dict = config.model_dump()
                config_dict.update(toml_data)
                config = cls.model_validate(config_dict)
                config.loaded_from.append(toml_path)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                logger.warning("Failed to load TOML config from %s: %s", toml_path, e)

        config._apply_env_overrides()
        return config

    def checkpoint_config(self) -> CheckpointConfig:
        """Effective checkpoint backend, resolved against the current environment.

        The `[checkpoint]` section contributes the connection string and pool
        tuning; durable is still selected only in a production-like mode.
        """
        return CheckpointConfig.from_env(self.checkpoint)

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides to config."""
        if debug_val := get_bool_env("SPENDCUBE_DEBUG"):
            self.debug = debug_val
        if log_level := get_env("SPENDCUBE_LOG_LEVEL"):
            self.log_level = log_level


# ---- Global config management ----

_GLOBAL_CONFIG: Config | None = None


def get_core_config() -> Config:
    """Return process-global core config."""
    global _GLOBAL_CONFIG
    if _GLOBAL_CONFIG is None:
        _GLOBAL_CONFIG = Config.load()
    return _GLOBAL_CONFIG


def set_core_config(config: Config | None) -> None:
    """Set (or clear, with None) the global core config."""
    global _GLOBAL_CONFIG
    _GLOBAL_CONFIG = config
