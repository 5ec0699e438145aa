"""
Character Engine: single entry point for draft validation and stats.

Wires the section validators and the stat calculator to one injected
RuleDataProvider. The engine holds no per-draft state, so one instance can
serve any number of concurrent callers.
"""

from __future__ import annotations

import logging

from .config import EngineSettings
from .constants import AbilityScoreMethod
from .exceptions import EngineConfigError
from .models import AbilityScores, Character, CharacterDraft, DerivedStats
from .rules.file_source import FileRuleDataProvider
from .rules.provider import RuleDataProvider
from .stats import StatCalculator, calculate_ability_modifier, calculate_proficiency_bonus
from .validation import (
    AbilityScoreResult,
    AbilityScoreValidator,
    AvailableSkills,
    BackgroundChoiceResult,
    BackgroundValidator,
    ChoiceValidator,
    ClassChoiceResult,
    DraftValidationReport,
    DraftValidator,
    RaceChoiceResult,
    SkillChoiceResult,
    SkillChoiceValidator,
)

logger = logging.getLogger("chardraft")


class CharacterEngine:
    """Validate character drafts and calculate derived stats.

    Usage:
        engine = CharacterEngine(provider)
        report = engine.validate_character_draft(draft)
        if report.is_valid and report.is_complete:
            stats = engine.calculate_character_stats(draft)
    """

    def __init__(self, provider: RuleDataProvider | None) -> None:
        if provider is None:
            raise EngineConfigError("rule data provider is required")
        self.provider = provider
        self._ability_scores = AbilityScoreValidator()
        self._choices = ChoiceValidator(provider)
        self._skills = SkillChoiceValidator(provider)
        self._backgrounds = BackgroundValidator(provider)
        self._drafts = DraftValidator(provider)
        self._stats = StatCalculator(provider)

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> CharacterEngine:
        """Build an engine backed by the ruleset file named in settings.

        Raises:
            EngineConfigError: If no rules_path is configured.
        """
        if settings.rules_path is None:
            raise EngineConfigError("rules_path is required to build an engine from settings")
        logger.info(f"🎲 Character engine using ruleset {settings.rules_path}")
        return cls(FileRuleDataProvider(settings.rules_path))

    # ------------------------------------------------------------------
    # Whole-draft operations
    # ------------------------------------------------------------------

    def validate_character_draft(self, draft: CharacterDraft | None) -> DraftValidationReport:
        return self._drafts.validate(draft)

    def calculate_character_stats(self, subject: CharacterDraft | Character | None) -> DerivedStats:
        return self._stats.calculate(subject)

    # ------------------------------------------------------------------
    # Section validators
    # ------------------------------------------------------------------

    def validate_race_choice(self, race_id: str, subrace_id: str | None = None) -> RaceChoiceResult:
        return self._choices.validate_race(race_id, subrace_id)

    def validate_class_choice(
        self,
        class_id: str,
        ability_scores: AbilityScores | None = None,
    ) -> ClassChoiceResult:
        return self._choices.validate_class(class_id, ability_scores)

    def validate_ability_scores(
        self,
        scores: AbilityScores | None,
        method: AbilityScoreMethod | str,
    ) -> AbilityScoreResult:
        return self._ability_scores.validate(scores, method)

    def validate_skill_choices(
        self,
        class_id: str,
        background_id: str | None,
        selected_skill_ids: list[str],
    ) -> SkillChoiceResult:
        return self._skills.validate(class_id, background_id, selected_skill_ids)

    def get_available_skills(self, class_id: str, background_id: str) -> AvailableSkills:
        return self._skills.get_available_skills(class_id, background_id)

    def validate_background_choice(self, background_id: str) -> BackgroundChoiceResult:
        return self._backgrounds.validate(background_id)

    # ------------------------------------------------------------------
    # Arithmetic helpers
    # ------------------------------------------------------------------

    @staticmethod
    def calculate_proficiency_bonus(level: int) -> int:
        return calculate_proficiency_bonus(level)

    @staticmethod
    def calculate_ability_modifier(score: int) -> int:
        return calculate_ability_modifier(score)
