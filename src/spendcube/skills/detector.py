"""Skill detection: pick the skills relevant to a batch of spend records.

Scoring is intentionally simple and explainable: every keyword pattern of a
skill that matches a record's search text adds `priority / 10` to the skill's
score. Always-load skills are included regardless of score; the result is
ordered by descending score (registry order on ties) and capped.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from spendcube.core.records import SpendRecord

from .registry import DEFAULT_REGISTRY, Skill, SkillRegistry

logger = logging.getLogger(__name__)

MAX_SKILLS = 5

RecordLike = SpendRecord | Mapping[str, Any]


def _field(record: RecordLike, name: str) -> str:
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    return "" if value is None else str(value)


def build_search_text(record: RecordLike) -> str:
    """Lower-cased `vendor description department` text for keyword matching."""
    vendor = _field(record, "vendor")
    description = _field(record, "description")
    department = _field(record, "department")
    return f"{vendor} {description} {department}".lower()


class SkillDetector:
    """Selects a bounded, ranked subset of skills for a record batch."""

    def __init__(self, registry: SkillRegistry = DEFAULT_REGISTRY, *, max_skills: int = MAX_SKILLS):
        self.registry = registry
        self.max_skills = max_skills

    def score(self, records: Iterable[RecordLike]) -> dict[str, float]:
        """Accumulated score per skill id; unmatched skills are absent."""
        scores: dict[str, float] = {}
        for record in records:
            text = build_search_text(record)
            for skill in self.registry.skills:
                hits = skill.matches(text)
                if hits:
                    scores[skill.id] = scores.get(skill.id, 0.0) + hits * (skill.priority / 10)
        return scores

    def detect(self, records: Iterable[RecordLike]) -> list[Skill]:
        scores = self.score(records)
        selected = [
            skill
            for skill in self.registry.skills
            if skill.always_load or scores.get(skill.id, 0.0) > 0
        ]
        # sorted() is stable: equal scores keep registry order
        ranked = sorted(selected, key=lambda s: scores.get(s.id, 0.0), reverse=True)
        result = ranked[: self.max_skills]
        logger.debug(
            "Detected skills: %s",
            ", ".join(f"{s.id}={scores.get(s.id, 0.0):g}" for s in result) or "none",
        )
        return result

    def by_segments(self, segment_codes: Sequence[str]) -> list[Skill]:
        return self.registry.by_segments(segment_codes)

    def by_id(self, skill_id: str) -> Skill | None:
        return self.registry.by_id(skill_id)


def detect_relevant_skills(
    records: Iterable[RecordLike], registry: SkillRegistry = DEFAULT_REGISTRY
) -> list[Skill]:
    """Top skills (at most 5) for `records`, most relevant first."""
    return SkillDetector(registry).detect(records)


__all__ = [
    "MAX_SKILLS",
    "RecordLike",
    "SkillDetector",
    "build_search_text",
    "detect_relevant_skills",
]
