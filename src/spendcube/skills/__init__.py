"""Progressive disclosure of the UNSPSC taxonomy via skills."""

from .detector import MAX_SKILLS, SkillDetector, build_search_text, detect_relevant_skills
from .loaders import (
    SkillContext,
    clear_skill_context_cache,
    format_examples_for_prompt,
    format_taxonomy_for_prompt,
    get_combined_examples,
    get_combined_taxonomy,
    load_skill_context,
    load_skill_contexts,
)
from .registry import (
    DEFAULT_REGISTRY,
    SKILLS,
    ClassificationExample,
    Skill,
    SkillRegistry,
    TaxonomyEntry,
    get_all_covered_segments,
    get_skill_by_id,
    get_skills_by_segments,
)

__all__ = [
    "ClassificationExample",
    "DEFAULT_REGISTRY",
    "MAX_SKILLS",
    "SKILLS",
    "Skill",
    "SkillContext",
    "SkillDetector",
    "SkillRegistry",
    "TaxonomyEntry",
    "build_search_text",
    "clear_skill_context_cache",
    "detect_relevant_skills",
    "format_examples_for_prompt",
    "format_taxonomy_for_prompt",
    "get_all_covered_segments",
    "get_combined_examples",
    "get_combined_taxonomy",
    "get_skill_by_id",
    "get_skills_by_segments",
    "load_skill_context",
    "load_skill_contexts",
]
