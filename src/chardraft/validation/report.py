"""
Validation records and result types.

Rule violations are never raised. Each validator returns a result object that
accumulates ValidationError and ValidationWarning records; a result is valid
when it carries no errors. Warnings flag legal but sub-optimal choices.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..models import SkillChoice


class ValidationCode(str, Enum):
    """Machine-readable codes attached to errors and warnings."""
    REQUIRED = "REQUIRED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_METHOD = "INVALID_METHOD"
    INVALID_STANDARD_ARRAY = "INVALID_STANDARD_ARRAY"
    INVALID_POINT_BUY_RANGE = "INVALID_POINT_BUY_RANGE"
    POINT_BUY_EXCEEDED = "POINT_BUY_EXCEEDED"
    INVALID_ABILITY_SCORE_RANGE = "INVALID_ABILITY_SCORE_RANGE"
    INVALID_RACE = "INVALID_RACE"
    INVALID_SUBRACE = "INVALID_SUBRACE"
    INVALID_CLASS = "INVALID_CLASS"
    INVALID_BACKGROUND = "INVALID_BACKGROUND"
    DUPLICATE_SKILL = "DUPLICATE_SKILL"
    BACKGROUND_SKILL_NOT_CHOICE = "BACKGROUND_SKILL_NOT_CHOICE"
    INVALID_SKILL_CHOICE = "INVALID_SKILL_CHOICE"
    INCORRECT_SKILL_COUNT = "INCORRECT_SKILL_COUNT"
    # Warnings
    UNSPENT_POINTS = "UNSPENT_POINTS"
    SKILL_OVERLAP = "SKILL_OVERLAP"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationError:
    """A rule violation that makes the subject invalid."""
    field: str          # e.g., "race_id", "strength", "selected_skills"
    message: str        # Human-readable message
    code: ValidationCode

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code.value}


@dataclass(frozen=True)
class ValidationWarning:
    """A legal but questionable choice. Never affects validity."""
    field: str
    message: str
    code: ValidationCode

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code.value}


@dataclass
class ValidationResult:
    """Errors and warnings produced by one validator call."""
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, field_name: str, code: ValidationCode, message: str) -> None:
        self.errors.append(ValidationError(field=field_name, message=message, code=code))

    def add_warning(self, field_name: str, code: ValidationCode, message: str) -> None:
        self.warnings.append(ValidationWarning(field=field_name, message=message, code=code))

    def has_error(self, code: ValidationCode | str) -> bool:
        return any(e.code == code for e in self.errors)


@dataclass
class AbilityScoreResult(ValidationResult):
    pass


@dataclass
class RaceChoiceResult(ValidationResult):
    """Race validation plus the merged race/subrace traits and bonuses."""
    race_traits: list[str] = field(default_factory=list)
    ability_mods: dict[str, int] = field(default_factory=dict)


@dataclass
class ClassChoiceResult(ValidationResult):
    """Class validation plus the class data needed by later steps."""
    hit_dice: str = ""
    primary_abilities: list[str] = field(default_factory=list)
    saving_throws: list[str] = field(default_factory=list)
    skill_choices_count: int = 0
    available_skills: list[str] = field(default_factory=list)


@dataclass
class SkillChoiceResult(ValidationResult):
    pass


@dataclass
class BackgroundChoiceResult(ValidationResult):
    """Background validation plus the background's automatic grants."""
    skill_proficiencies: list[str] = field(default_factory=list)
    languages: int = 0
    equipment: list[str] = field(default_factory=list)


@dataclass
class AvailableSkills:
    """Skill pools for a class/background pair, enriched for display."""
    class_skills: list[SkillChoice] = field(default_factory=list)
    background_skills: list[SkillChoice] = field(default_factory=list)


@dataclass
class DraftValidationReport:
    """
    Aggregate validation report for a whole character draft.

    is_complete and is_valid are independent: a draft can be valid but
    incomplete (nothing chosen so far breaks a rule) or complete but invalid
    (every section filled, one of them illegal).
    """
    is_complete: bool
    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    missing_steps: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_complete": self.is_complete,
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "missing_steps": list(self.missing_steps),
        }

    def __str__(self) -> str:
        """Return a formatted summary of the report."""
        lines = [f"Status: {'✓ VALID' if self.is_valid else '✗ INVALID'}, "
                 f"{'complete' if self.is_complete else 'incomplete'}"]
        lines.append(f"Issues: {len(self.errors)} errors, {len(self.warnings)} warnings")

        if self.missing_steps:
            lines.append(f"Missing steps: {', '.join(self.missing_steps)}")

        if self.errors:
            lines.append("\nErrors:")
            for issue in self.errors:
                lines.append(f"  - [{issue.code.value}] {issue.field}: {issue.message}")

        if self.warnings:
            lines.append("\nWarnings:")
            for issue in self.warnings:
                lines.append(f"  - [{issue.code.value}] {issue.field}: {issue.message}")

        return "\n".join(lines)
