"""Tests for SkillChoiceValidator and the available-skills listing.

Tests cover:
- Exact class skill count
- Duplicate selections
- Background-granted skills are never choices
- Overlap warning when a class pick is also a background grant
- Skill pools for display
"""

import pytest

from chardraft.validation import (
    SkillChoiceValidator,
    ValidationCode,
    format_skill_name,
    get_skill_ability,
)


@pytest.fixture
def validator(provider) -> SkillChoiceValidator:
    return SkillChoiceValidator(provider)


def codes(result) -> list[ValidationCode]:
    return [e.code for e in result.errors]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestSkillCount:

    def test_exact_count_is_valid(self, validator):
        result = validator.validate("fighter", "", ["athletics", "perception"])
        assert result.is_valid
        assert result.warnings == []

    @pytest.mark.parametrize(
        "skills",
        [[], ["athletics"], ["athletics", "perception", "survival"]],
    )
    def test_wrong_count(self, validator, skills):
        result = validator.validate("fighter", "", skills)
        assert codes(result) == [ValidationCode.INCORRECT_SKILL_COUNT]
        assert "Must select exactly 2 skills" in result.errors[0].message
        assert result.errors[0].field == "selected_skills"

    def test_rogue_needs_four(self, validator):
        result = validator.validate("rogue", "", ["acrobatics", "stealth"])
        assert "Must select exactly 4 skills" in result.errors[0].message

    def test_invalid_choices_do_not_count(self, validator):
        result = validator.validate("fighter", "", ["athletics", "arcana"])
        assert codes(result) == [ValidationCode.INVALID_SKILL_CHOICE, ValidationCode.INCORRECT_SKILL_COUNT]
        assert "arcana" in result.errors[0].message


class TestDuplicates:

    def test_duplicate_reported_once_and_not_counted(self, validator):
        result = validator.validate("fighter", "", ["athletics", "athletics", "perception"])
        assert codes(result) == [ValidationCode.DUPLICATE_SKILL]
        assert "Duplicate skill selection" in result.errors[0].message

    def test_duplicate_only_pushes_count_short(self, validator):
        result = validator.validate("fighter", "", ["athletics", "athletics"])
        assert set(codes(result)) == {ValidationCode.DUPLICATE_SKILL, ValidationCode.INCORRECT_SKILL_COUNT}


class TestBackgroundSkills:

    def test_background_skill_outside_class_list_is_not_a_choice(self, validator):
        result = validator.validate("wizard", "criminal", ["arcana", "history", "stealth"])
        assert codes(result) == [ValidationCode.BACKGROUND_SKILL_NOT_CHOICE]
        message = result.errors[0].message
        assert "stealth" in message
        assert "automatically granted by background" in message

    def test_overlap_with_class_list_is_a_warning(self, validator):
        result = validator.validate("fighter", "soldier", ["athletics", "perception"])
        assert result.is_valid
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.code == ValidationCode.SKILL_OVERLAP
        assert "athletics" in warning.message
        assert "maximize proficiencies" in warning.message

    def test_overlap_warning_suppressed_when_invalid(self, validator):
        result = validator.validate("fighter", "soldier", ["athletics"])
        assert not result.is_valid
        assert result.warnings == []

    def test_unknown_background_reported(self, validator):
        result = validator.validate("fighter", "pirate", ["athletics", "perception"])
        assert codes(result) == [ValidationCode.INVALID_BACKGROUND]

    def test_no_background_no_grants(self, validator):
        result = validator.validate("wizard", None, ["arcana", "history"])
        assert result.is_valid
        assert result.warnings == []


class TestClassPrerequisite:

    def test_class_required(self, validator):
        result = validator.validate("", "soldier", ["athletics"])
        assert codes(result) == [ValidationCode.REQUIRED]
        assert result.errors[0].field == "class_id"

    def test_unknown_class(self, validator):
        result = validator.validate("artificer", "", ["arcana", "history"])
        assert codes(result) == [ValidationCode.INVALID_CLASS]


# ---------------------------------------------------------------------------
# Available skills
# ---------------------------------------------------------------------------

class TestAvailableSkills:

    def test_class_and_background_pools(self, validator):
        available = validator.get_available_skills("fighter", "soldier")
        assert [s.skill_id for s in available.class_skills] == [
            "acrobatics", "animal_handling", "athletics", "history",
            "insight", "intimidation", "perception", "survival",
        ]
        assert [s.skill_id for s in available.background_skills] == ["athletics", "intimidation"]

    def test_entries_enriched_for_display(self, validator):
        available = validator.get_available_skills("fighter", "soldier")
        handling = available.class_skills[1]
        assert handling.skill_name == "Animal Handling"
        assert handling.ability == "wisdom"
        assert "Animal Handling" in handling.description
        assert "Fighter" in handling.description

        for skill in available.background_skills:
            assert "from background" in skill.description

    def test_empty_ids_give_empty_pools(self, validator):
        available = validator.get_available_skills("", "")
        assert available.class_skills == []
        assert available.background_skills == []

    def test_unknown_ids_give_empty_pools(self, validator):
        available = validator.get_available_skills("artificer", "pirate")
        assert available.class_skills == []
        assert available.background_skills == []

    def test_class_only(self, validator):
        available = validator.get_available_skills("wizard", "")
        assert len(available.class_skills) == 6
        assert available.background_skills == []


class TestSkillHelpers:

    @pytest.mark.parametrize(
        "skill_id,expected",
        [
            ("athletics", "Athletics"),
            ("sleight_of_hand", "Sleight Of Hand"),
            ("animal_handling", "Animal Handling"),
        ],
    )
    def test_format_skill_name(self, skill_id, expected):
        assert format_skill_name(skill_id) == expected

    @pytest.mark.parametrize(
        "skill_id,ability",
        [
            ("athletics", "strength"),
            ("stealth", "dexterity"),
            ("arcana", "intelligence"),
            ("survival", "wisdom"),
            ("persuasion", "charisma"),
            ("basket_weaving", "unknown"),
        ],
    )
    def test_get_skill_ability(self, skill_id, ability):
        assert get_skill_ability(skill_id) == ability
