"""Skill context loaders.

Resolve selected skills into the taxonomy slice and few-shot examples handed
to the classification stage, and format them for prompt injection.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable, Sequence

from .data import SKILL_DATA
from .registry import ClassificationExample, Skill, TaxonomyEntry


@dataclass(frozen=True)
class SkillContext:
    """Taxonomy + examples resolved for one skill, scoped to a batch."""

    skill_id: str
    taxonomy: tuple[TaxonomyEntry, ...] = ()
    examples: tuple[ClassificationExample, ...] = ()


_context_cache: dict[str, SkillContext] = {}
_cache_lock = threading.Lock()


def load_skill_context(skill: Skill) -> SkillContext:
    """Return the (memoised) context for `skill`; unknown skills load empty."""
    cached = _context_cache.get(skill.id)
    if cached is not None:
        return cached

    with _cache_lock:
        cached = _context_cache.get(skill.id)
        if cached is not None:
            return cached
        taxonomy, examples = SKILL_DATA.get(skill.id, ((), ()))
        context = SkillContext(skill_id=skill.id, taxonomy=taxonomy, examples=examples)
        _context_cache[skill.id] = context
        return context


def load_skill_contexts(skills: Iterable[Skill]) -> list[SkillContext]:
    return [load_skill_context(skill) for skill in skills]


def get_combined_taxonomy(contexts: Iterable[SkillContext]) -> list[TaxonomyEntry]:
    """Union of all context taxonomies, deduplicated by code and sorted by code."""
    seen: dict[str, TaxonomyEntry] = {}
    for context in contexts:
        for entry in context.taxonomy:
            seen.setdefault(entry.code, entry)
    return sorted(seen.values(), key=lambda e: e.code)


def get_combined_examples(
    contexts: Iterable[SkillContext], max_examples: int = 10
) -> list[ClassificationExample]:
    combined: list[ClassificationExample] = []
    for context in contexts:
        for example in context.examples:
            if len(combined) >= max_examples:
                return combined
            combined.append(example)
    return combined


def format_taxonomy_for_prompt(taxonomy: Sequence[TaxonomyEntry]) -> str:
    if not taxonomy:
        return "No specific taxonomy loaded. Use general UNSPSC knowledge."
    return "\n".join(f"{e.code}: {e.title} ({e.family})" for e in taxonomy)


def format_examples_for_prompt(examples: Sequence[ClassificationExample]) -> str:
    if not examples:
        return ""
    blocks = [
        f"Example {i}:\n"
        f"Input: {ex.vendor} - {ex.description}\n"
        f"Output: {ex.code} ({ex.title})\n"
        f"Reasoning: {ex.reasoning}\n"
        for i, ex in enumerate(examples, start=1)
    ]
    return "\n## Classification Examples\n\n" + "\n".join(blocks)


def clear_skill_context_cache() -> None:
    with _cache_lock:
        _context_cache.clear()


__all__ = [
    "SkillContext",
    "clear_skill_context_cache",
    "format_examples_for_prompt",
    "format_taxonomy_for_prompt",
    "get_combined_examples",
    "get_combined_taxonomy",
    "load_skill_context",
    "load_skill_contexts",
]
