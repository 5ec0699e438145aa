"""
Character draft validation.

Each validator returns a result object with errors and warnings; rule
violations are reported, never raised.
"""

from .ability_scores import AbilityScoreValidator, point_buy_cost
from .background import BackgroundValidator
from .choices import ChoiceValidator
from .completeness import DraftCompletenessChecker
from .draft import DraftValidator
from .report import (
    AbilityScoreResult,
    AvailableSkills,
    BackgroundChoiceResult,
    ClassChoiceResult,
    DraftValidationReport,
    RaceChoiceResult,
    SkillChoiceResult,
    ValidationCode,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from .skills import SkillChoiceValidator, format_skill_name, get_skill_ability

__all__ = [
    # Validators
    "AbilityScoreValidator",
    "ChoiceValidator",
    "SkillChoiceValidator",
    "BackgroundValidator",
    "DraftCompletenessChecker",
    "DraftValidator",
    # Records
    "ValidationCode",
    "ValidationError",
    "ValidationWarning",
    "ValidationResult",
    "AbilityScoreResult",
    "RaceChoiceResult",
    "ClassChoiceResult",
    "SkillChoiceResult",
    "BackgroundChoiceResult",
    "AvailableSkills",
    "DraftValidationReport",
    # Helpers
    "format_skill_name",
    "get_skill_ability",
    "point_buy_cost",
]
