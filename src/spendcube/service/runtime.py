"""Process-owned pipeline services.

The entry point builds one `PipelineRuntime` and passes it (or its parts) to
request handlers and pipeline steps; nothing here lives in module globals.

Usage:
    async with PipelineRuntime.create() as runtime:
        saver = await runtime.checkpoints.get()
        ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from spendcube.core.config import ClassificationConfig, Config
from spendcube.cortex.checkpointing import CheckpointerFactory
from spendcube.skills import DEFAULT_REGISTRY, SkillDetector, SkillRegistry

from .progress import ProgressBridge

if TYPE_CHECKING:
    from spendcube.cortex.steps.classification import ClassificationAgent, ClassificationStep

logger = logging.getLogger(__name__)


@dataclass
class PipelineRuntime:
    """Skill detector, progress bridge, checkpoint factory and step settings for one process."""

    detector: SkillDetector = field(default_factory=SkillDetector)
    progress: ProgressBridge = field(default_factory=ProgressBridge)
    checkpoints: CheckpointerFactory = field(default_factory=CheckpointerFactory)
    classification: ClassificationConfig = field(default_factory=ClassificationConfig)

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        *,
        registry: SkillRegistry = DEFAULT_REGISTRY,
    ) -> "PipelineRuntime":
        """Build the runtime.

        Checkpoint backend selection follows the process environment at call
        time. With `config`, its `[checkpoint]` section supplies connection
        and pool defaults and its `[classification]` section configures steps.
        """
        if config is None:
            return cls(detector=SkillDetector(registry), checkpoints=CheckpointerFactory())
        return cls(
            detector=SkillDetector(registry),
            progress=ProgressBridge(),
            checkpoints=CheckpointerFactory(config.checkpoint_config),
            classification=config.classification,
        )

    def classification_step(self, agent: "ClassificationAgent") -> "ClassificationStep":
        """Classification step wired to this runtime's detector, bridge and settings."""
        from spendcube.cortex.steps.classification import ClassificationStep

        return ClassificationStep.from_config(
            agent, self.classification, detector=self.detector, progress=self.progress
        )

    async def aclose(self) -> None:
        if len(self.progress):
            logger.warning("Closing runtime with %d active progress listeners", len(self.progress))
        await self.checkpoints.shutdown()

    async def __aenter__(self) -> "PipelineRuntime":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["PipelineRuntime"]
