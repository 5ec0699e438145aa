"""Tests for the CharacterEngine facade."""

import json
import logging

import pytest

from chardraft import CharacterEngine, EngineSettings
from chardraft.constants import AbilityScoreMethod
from chardraft.exceptions import EngineConfigError, PreconditionError
from chardraft.models import AbilityScores, CharacterDraft
from chardraft.rules import FileRuleDataProvider
from chardraft.validation import ValidationCode


@pytest.fixture
def engine(provider) -> CharacterEngine:
    return CharacterEngine(provider)


def make_fighter_draft() -> CharacterDraft:
    draft = CharacterDraft.new()
    draft.set_name("  Brakka ")
    draft.set_race("human")
    draft.set_class("fighter")
    draft.set_background("sage")
    draft.set_ability_scores(
        AbilityScores(strength=16, dexterity=14, constitution=15, intelligence=10, wisdom=12, charisma=8)
    )
    draft.set_skills(["athletics", "intimidation"])
    return draft


class TestConstruction:

    def test_provider_required(self):
        with pytest.raises(EngineConfigError):
            CharacterEngine(None)

    def test_config_error_is_a_precondition_error(self):
        with pytest.raises(PreconditionError):
            CharacterEngine(None)

    def test_from_settings_requires_rules_path(self):
        with pytest.raises(EngineConfigError, match="rules_path"):
            CharacterEngine.from_settings(EngineSettings())

    def test_from_settings_uses_ruleset_file(self, tmp_path):
        ruleset = tmp_path / "rules.json"
        ruleset.write_text(json.dumps({
            "name": "Mini",
            "content": {
                "races": [{"id": "human"}],
                "classes": [{"id": "fighter", "hit_dice": "1d10", "skills_count": 2,
                             "available_skills": ["athletics", "perception"]}],
                "backgrounds": [],
            },
        }))
        engine = CharacterEngine.from_settings(EngineSettings(rules_path=ruleset, log_level="DEBUG"))
        assert isinstance(engine.provider, FileRuleDataProvider)
        assert engine.validate_class_choice("fighter").hit_dice == "1d10"

    def test_from_settings_leaves_logging_alone(self, tmp_path):
        ruleset = tmp_path / "rules.json"
        ruleset.write_text(json.dumps({"races": [{"id": "human"}]}))
        package_logger = logging.getLogger("chardraft")
        root_handlers = list(logging.getLogger().handlers)
        level_before = package_logger.level

        CharacterEngine.from_settings(EngineSettings(rules_path=ruleset, log_level="DEBUG"))

        assert package_logger.level == level_before
        assert logging.getLogger().handlers == root_handlers


class TestDraftWorkflow:

    def test_fighter_end_to_end(self, engine):
        draft = make_fighter_draft()
        report = engine.validate_character_draft(draft)
        assert report.is_valid
        assert report.is_complete

        stats = engine.calculate_character_stats(draft)
        assert stats.max_hp == 12
        assert stats.armor_class == 12
        assert stats.initiative == 2
        assert stats.proficiency_bonus == 2
        assert stats.saving_throws["strength"] == 5
        assert stats.saving_throws["constitution"] == 4
        assert stats.saving_throws["dexterity"] == 2
        assert stats.skills["athletics"] == 5
        assert stats.skills["intimidation"] == 1
        assert stats.skills["acrobatics"] == 2

    def test_stats_precondition_propagates(self, engine):
        with pytest.raises(PreconditionError):
            engine.calculate_character_stats(CharacterDraft())

    def test_validate_none_draft(self, engine):
        with pytest.raises(PreconditionError):
            engine.validate_character_draft(None)


class TestSectionOperations:

    def test_validate_race_choice(self, engine):
        result = engine.validate_race_choice("halfling", "lightfoot")
        assert result.is_valid
        assert result.ability_mods == {"dexterity": 2, "charisma": 1}

    def test_validate_class_choice(self, engine):
        assert engine.validate_class_choice("barbarian").hit_dice == "1d12"

    def test_validate_ability_scores(self, engine):
        scores = AbilityScores(strength=15, dexterity=14, constitution=13, intelligence=12, wisdom=10, charisma=8)
        assert engine.validate_ability_scores(scores, AbilityScoreMethod.STANDARD_ARRAY).is_valid
        assert engine.validate_ability_scores(None, "manual").has_error(ValidationCode.REQUIRED)

    def test_validate_skill_choices(self, engine):
        result = engine.validate_skill_choices("wizard", "sage", ["arcana", "medicine"])
        assert result.is_valid
        assert result.warnings[0].code == ValidationCode.SKILL_OVERLAP

    def test_get_available_skills(self, engine):
        available = engine.get_available_skills("wizard", "sage")
        assert len(available.class_skills) == 6
        assert [s.skill_id for s in available.background_skills] == ["arcana", "history"]

    def test_validate_background_choice(self, engine):
        assert engine.validate_background_choice("criminal").skill_proficiencies == ["deception", "stealth"]

    def test_arithmetic_helpers(self, engine):
        assert engine.calculate_proficiency_bonus(9) == 4
        assert engine.calculate_proficiency_bonus(0) == 0
        assert engine.calculate_ability_modifier(7) == -2
        assert CharacterEngine.calculate_ability_modifier(20) == 5
