"""Tests for the taxonomy skill registry."""

import re

import pytest

from spendcube.skills import (
    DEFAULT_REGISTRY,
    SKILLS,
    Skill,
    SkillRegistry,
    get_all_covered_segments,
    get_skill_by_id,
    get_skills_by_segments,
)


class TestRegistryCatalog:
    def test_ten_skills_with_unique_ids(self):
        ids = [s.id for s in SKILLS]
        assert len(ids) == 10
        assert len(set(ids)) == 10

    def test_priorities_positive(self):
        assert all(s.priority > 0 for s in SKILLS)

    def test_keywords_are_case_insensitive(self):
        skill = get_skill_by_id("it_hardware")
        assert skill is not None
        assert all(kw.flags & re.IGNORECASE for kw in skill.keywords)
        assert skill.matches("DELL LATITUDE LAPTOP") == 2

    def test_skill_is_frozen(self):
        skill = get_skill_by_id("travel")
        with pytest.raises(AttributeError):
            skill.priority = 1

    def test_duplicate_ids_rejected(self):
        skill = SKILLS[0]
        with pytest.raises(ValueError, match="Duplicate skill id"):
            SkillRegistry(skills=(skill, skill))


class TestRegistryLookups:
    def test_by_id_known(self):
        skill = DEFAULT_REGISTRY.by_id("office_supplies")
        assert skill is not None
        assert skill.name == "Office Supplies"
        assert skill.segments == ("44",)

    def test_by_id_unknown_returns_none(self):
        assert get_skill_by_id("underwater_basket_weaving") is None

    def test_by_segments_empty_query(self):
        assert get_skills_by_segments([]) == []

    def test_by_segments_returns_every_declaring_skill(self):
        skills = get_skills_by_segments(["43"])
        assert [s.id for s in skills] == ["it_hardware", "it_software", "telecommunications"]

    def test_by_segments_multiple_codes_keep_registry_order(self):
        skills = get_skills_by_segments(["93", "56"])
        assert [s.id for s in skills] == ["furniture", "hr_services"]

    def test_by_segments_uncovered_code(self):
        assert get_skills_by_segments(["99"]) == []

    def test_all_covered_segments_sorted_and_unique(self):
        segments = get_all_covered_segments()
        assert segments == sorted(set(segments))
        assert segments == [
            "31", "39", "40", "43", "44", "56", "72", "76", "78", "80", "81", "83", "90", "93",
        ]

    def test_every_covered_segment_resolves(self):
        for seg in get_all_covered_segments():
            assert get_skills_by_segments([seg])

    def test_custom_registry(self):
        custom = SkillRegistry(
            skills=(
                Skill(
                    id="energy",
                    name="Energy",
                    description="Fuel",
                    segments=("15",),
                    keywords=(re.compile("diesel", re.IGNORECASE),),
                    priority=50,
                ),
            )
        )
        assert len(custom) == 1
        assert custom.all_covered_segments() == ["15"]
        assert get_skill_by_id("energy", registry=custom) is not None
        assert get_skill_by_id("energy") is None
