"""Classification step: classify a record batch with skill-scoped context.

The agent doing the actual reasoning is opaque to this module: any async
callable that takes a record plus the loaded skill contexts and returns a
`ClassificationJudgment` (or an equivalent mapping).

Records are processed one at a time in input order. After each success a
`ClassificationProgressEvent` is passed to the optional `on_progress`
callback and emitted on the progress bridge for the session, if a listener
is subscribed. A failing record is recorded as a recoverable `StepError`
and processing continues.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Iterable, Mapping, Protocol, Sequence

from spendcube.core.config import ClassificationConfig
from spendcube.core.records import (
    Classification,
    ClassificationJudgment,
    SpendRecord,
    StepError,
)
from spendcube.service.events import ClassificationProgressEvent, ProgressCallback
from spendcube.service.progress import ProgressBridge
from spendcube.skills import (
    ClassificationExample,
    Skill,
    SkillContext,
    SkillDetector,
    get_combined_examples,
    load_skill_contexts,
)

logger = logging.getLogger(__name__)

CLASSIFIED_BY = "classification-agent"


class ClassificationAgent(Protocol):
    def __call__(
        self, record: SpendRecord, contexts: Sequence[SkillContext]
    ) -> Awaitable[ClassificationJudgment | Mapping[str, Any]]: ...


@dataclass
class ClassificationOutcome:
    classifications: list[Classification] = field(default_factory=list)
    errors: list[StepError] = field(default_factory=list)
    skills: list[Skill] = field(default_factory=list)
    # Few-shot examples for the selected skills, capped at the step's max_examples
    examples: list[ClassificationExample] = field(default_factory=list)
    high_confidence_threshold: float = 70.0

    def high_confidence(self, threshold: float | None = None) -> int:
        if threshold is None:
            threshold = self.high_confidence_threshold
        return sum(1 for c in self.classifications if c.confidence >= threshold)


def _as_record(record: SpendRecord | Mapping[str, Any]) -> SpendRecord:
    if isinstance(record, SpendRecord):
        return record
    return SpendRecord.model_validate(record)


def _to_classification(
    record: SpendRecord, judgment: ClassificationJudgment | Mapping[str, Any]
) -> Classification:
    if not isinstance(judgment, ClassificationJudgment):
        judgment = ClassificationJudgment.model_validate(judgment)
    return Classification(
        record_id=record.id,
        unspsc_code=judgment.unspsc_code or "00000000",
        unspsc_title=judgment.unspsc_title or "Unknown",
        segment=judgment.segment,
        family=judgment.family,
        confidence=min(100.0, max(0.0, judgment.confidence)),
        reasoning=judgment.reasoning or "Classification based on description analysis",
        classified_by=CLASSIFIED_BY,
    )


class ClassificationStep:
    """Runs the classification agent over a batch of spend records."""

    def __init__(
        self,
        agent: ClassificationAgent,
        *,
        detector: SkillDetector | None = None,
        progress: ProgressBridge | None = None,
        max_retries: int = 3,
        high_confidence_threshold: float = 70.0,
        max_examples: int = 10,
    ) -> None:
        self.agent = agent
        self.detector = detector or SkillDetector()
        self.progress = progress
        self.max_retries = max_retries
        self.high_confidence_threshold = high_confidence_threshold
        self.max_examples = max_examples

    @classmethod
    def from_config(
        cls,
        agent: ClassificationAgent,
        config: ClassificationConfig,
        *,
        detector: SkillDetector | None = None,
        progress: ProgressBridge | None = None,
    ) -> "ClassificationStep":
        return cls(
            agent,
            detector=detector,
            progress=progress,
            max_retries=config.max_retries,
            high_confidence_threshold=config.high_confidence_threshold,
            max_examples=config.max_examples,
        )

    async def run(
        self,
        records: Iterable[SpendRecord | Mapping[str, Any]],
        *,
        session_id: str | None = None,
        existing: Iterable[Classification] = (),
        on_progress: ProgressCallback | None = None,
    ) -> ClassificationOutcome:
        done = {c.record_id for c in existing}
        pending = [r for r in (_as_record(r) for r in records) if r.id not in done]

        outcome = ClassificationOutcome(high_confidence_threshold=self.high_confidence_threshold)
        if not pending:
            logger.info("All records have already been classified")
            return outcome

        outcome.skills = self.detector.detect(pending)
        contexts = load_skill_contexts(outcome.skills)
        outcome.examples = get_combined_examples(contexts, self.max_examples)
        total = len(pending)
        logger.info(
            "Classifying %d records with skills [%s]",
            total,
            ", ".join(s.id for s in outcome.skills),
        )

        for index, record in enumerate(pending, start=1):
            try:
                judgment = await self.agent(record, contexts)
                classification = _to_classification(record, judgment)
            except Exception as e:
                logger.warning("Classification failed for record %s: %s", record.id, e)
                outcome.errors.append(
                    StepError(
                        agent_type="classification",
                        code="PROCESSING_ERROR",
                        message=f"Failed to classify record {index} ({record.id}): {e}",
                        recoverable=True,
                        max_retries=self.max_retries,
                    )
                )
                continue

            outcome.classifications.append(classification)
            event = ClassificationProgressEvent(
                completed=index,
                total=total,
                latest=classification,
                record=record,
            )
            if on_progress is not None:
                on_progress(event)
            if session_id and self.progress is not None and self.progress.has_listener(session_id):
                self.progress.emit(session_id, event)

        logger.info(
            "Classification complete: %d of %d records, %d high confidence, %d errors",
            len(outcome.classifications),
            total,
            outcome.high_confidence(),
            len(outcome.errors),
        )
        return outcome


__all__ = [
    "CLASSIFIED_BY",
    "ClassificationAgent",
    "ClassificationOutcome",
    "ClassificationStep",
]
