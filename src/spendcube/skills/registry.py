"""Taxonomy skill registry.

A skill bundles UNSPSC segments with the keyword patterns that signal them.
The registry is static: skills are defined once at import and never mutated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence


def _patterns(*sources: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(src, re.IGNORECASE) for src in sources)


@dataclass(frozen=True)
class Skill:
    """One purchasing domain used to narrow classification context.

    Attributes:
        id: Unique skill identifier.
        name: Human-readable name.
        description: Short summary of what the skill covers.
        segments: 2-digit UNSPSC segment codes covered by the skill.
        keywords: Ordered patterns matched against lower-cased record text.
        priority: Salience weight (higher = more important).
        always_load: Include the skill regardless of score.
    """

    id: str
    name: str
    description: str
    segments: tuple[str, ...]
    keywords: tuple[re.Pattern[str], ...]
    priority: int
    always_load: bool = False

    def matches(self, text: str) -> int:
        """Number of keyword patterns found in `text`."""
        return sum(1 for kw in self.keywords if kw.search(text))


@dataclass(frozen=True)
class TaxonomyEntry:
    """A single UNSPSC reference code."""

    code: str
    title: str
    segment: str
    family: str
    class_code: str | None = None
    commodity: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ClassificationExample:
    """Few-shot pair: (vendor, description) -> (code, title, reasoning)."""

    vendor: str
    description: str
    code: str
    title: str
    reasoning: str


SKILLS: tuple[Skill, ...] = (
    Skill(
        id="it_hardware",
        name="IT Hardware",
        description="Computers, laptops, servers, networking equipment, peripherals",
        segments=("43",),
        keywords=_patterns(
            r"computer|laptop|desktop|server|workstation",
            r"monitor|display|screen",
            r"keyboard|mouse|webcam|headset",
            r"router|switch|firewall|network",
            r"printer|scanner|copier",
            r"dell|hp|lenovo|apple|cisco|logitech",
        ),
        priority=90,
    ),
    Skill(
        id="it_software",
        name="IT Software & Services",
        description="Software licenses, subscriptions, cloud services, IT consulting",
        segments=("43", "81"),
        keywords=_patterns(
            r"software|license|subscription",
            r"saas|cloud|azure|aws|gcp",
            r"microsoft|adobe|salesforce|oracle|sap",
            r"it\s+service|it\s+support|it\s+consulting",
            r"cybersecurity|antivirus|backup",
        ),
        priority=85,
    ),
    Skill(
        id="office_supplies",
        name="Office Supplies",
        description="Paper, pens, staplers, folders, office equipment",
        segments=("44",),
        keywords=_patterns(
            r"paper|envelope|folder|binder",
            r"pen|pencil|marker|highlighter",
            r"stapler|tape|scissors|glue",
            r"office\s+suppl",
            r"staples|office\s*depot|amazon\s*business",
        ),
        priority=80,
    ),
    Skill(
        id="furniture",
        name="Furniture & Fixtures",
        description="Desks, chairs, storage, office furniture",
        segments=("56",),
        keywords=_patterns(
            r"desk|chair|table|cabinet",
            r"furniture|ergonomic|standing\s+desk",
            r"shelving|storage|filing",
            r"herman\s*miller|steelcase|ikea",
        ),
        priority=75,
    ),
    Skill(
        id="professional_services",
        name="Professional Services",
        description="Legal, accounting, consulting, marketing services",
        segments=("80", "81"),
        keywords=_patterns(
            r"legal|attorney|law\s+firm",
            r"accounting|audit|tax",
            r"consulting|advisory|strategy",
            r"marketing|advertising|pr|public\s+relation",
            r"deloitte|kpmg|pwc|mckinsey|bcg",
        ),
        priority=85,
    ),
    Skill(
        id="facilities",
        name="Facilities & Maintenance",
        description="Janitorial, repairs, utilities, building services",
        segments=("72", "76"),
        keywords=_patterns(
            r"janitorial|cleaning|custodial",
            r"maintenance|repair|hvac",
            r"utility|electric|water|gas",
            r"security|guard|alarm",
            r"landscaping|pest\s+control",
        ),
        priority=70,
    ),
    Skill(
        id="travel",
        name="Travel & Transportation",
        description="Airfare, hotels, car rental, ground transportation",
        segments=("78", "90"),
        keywords=_patterns(
            r"travel|airfare|flight|airline",
            r"hotel|lodging|accommodation",
            r"car\s+rental|uber|lyft|taxi",
            r"expense|per\s+diem",
            r"american\s+airlines|united|delta|marriott|hilton",
        ),
        priority=75,
    ),
    Skill(
        id="hr_services",
        name="HR & Staffing",
        description="Recruiting, staffing, training, employee benefits",
        segments=("80", "93"),
        keywords=_patterns(
            r"recruiting|staffing|temp\s+agency",
            r"training|learning|development",
            r"payroll|benefits|hr\s+service",
            r"background\s+check|drug\s+test",
            r"adp|workday|linkedin",
        ),
        priority=70,
    ),
    Skill(
        id="telecommunications",
        name="Telecommunications",
        description="Phone services, mobile plans, internet connectivity",
        segments=("43", "83"),
        keywords=_patterns(
            r"telecom|telephone|phone",
            r"mobile|cellular|wireless",
            r"internet|broadband|fiber",
            r"verizon|at&t|t-mobile|comcast",
        ),
        priority=75,
    ),
    Skill(
        id="raw_materials",
        name="Raw Materials & MRO",
        description="Industrial supplies, raw materials, maintenance supplies",
        segments=("31", "39", "40"),
        keywords=_patterns(
            r"raw\s+material|chemical|metal",
            r"mro|maintenance.*repair.*operations",
            r"industrial|manufacturing",
            r"lubricant|adhesive|fastener",
            r"grainger|fastenal|msc\s+industrial",
        ),
        priority=65,
    ),
)


@dataclass(frozen=True)
class SkillRegistry:
    """Read-only views over a fixed skill catalog."""

    skills: tuple[Skill, ...] = SKILLS
    _by_id: dict[str, Skill] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, Skill] = {}
        for skill in self.skills:
            if skill.id in index:
                raise ValueError(f"Duplicate skill id: {skill.id}")
            index[skill.id] = skill
        object.__setattr__(self, "_by_id", index)

    def all(self) -> list[Skill]:
        return list(self.skills)

    def by_segments(self, segment_codes: Iterable[str]) -> list[Skill]:
        """Skills whose segment set intersects `segment_codes`, in registry order."""
        wanted = set(segment_codes)
        if not wanted:
            return []
        return [s for s in self.skills if wanted.intersection(s.segments)]

    def by_id(self, skill_id: str) -> Skill | None:
        return self._by_id.get(skill_id)

    def all_covered_segments(self) -> list[str]:
        return sorted({seg for skill in self.skills for seg in skill.segments})

    def __len__(self) -> int:
        return len(self.skills)


DEFAULT_REGISTRY = SkillRegistry()


def get_skills_by_segments(
    segment_codes: Sequence[str], registry: SkillRegistry = DEFAULT_REGISTRY
) -> list[Skill]:
    return registry.by_segments(segment_codes)


def get_skill_by_id(skill_id: str, registry: SkillRegistry = DEFAULT_REGISTRY) -> Skill | None:
    return registry.by_id(skill_id)


def get_all_covered_segments(registry: SkillRegistry = DEFAULT_REGISTRY) -> list[str]:
    return registry.all_covered_segments()


__all__ = [
    "ClassificationExample",
    "DEFAULT_REGISTRY",
    "SKILLS",
    "Skill",
    "SkillRegistry",
    "TaxonomyEntry",
    "get_all_covered_segments",
    "get_skill_by_id",
    "get_skills_by_segments",
]
