"""
Skill selection validation.

Players choose a fixed number of skills from their class's list. Skills a
background grants automatically are proficiencies already, not choices.
"""

from __future__ import annotations

from ..constants import SKILL_ABILITIES, UNKNOWN_ABILITY
from ..models import SkillChoice
from ..rules.provider import RuleDataProvider
from .background import FIELD_BACKGROUND_ID, invalid_background_error, resolve_background
from .choices import FIELD_CLASS_ID, invalid_class_error, resolve_class
from .report import AvailableSkills, SkillChoiceResult, ValidationCode

FIELD_SELECTED_SKILLS = "selected_skills"


def format_skill_name(skill_id: str) -> str:
    """Display name for a skill ID ("sleight_of_hand" -> "Sleight Of Hand")."""
    return " ".join(word.capitalize() for word in skill_id.split("_") if word)


def get_skill_ability(skill_id: str) -> str:
    """Governing ability for a skill, or "unknown" for unrecognised IDs."""
    return SKILL_ABILITIES.get(skill_id, UNKNOWN_ABILITY)


class SkillChoiceValidator:
    """Validate class skill selections and list the available skill pools."""

    def __init__(self, provider: RuleDataProvider) -> None:
        self.provider = provider

    def validate(
        self,
        class_id: str,
        background_id: str | None,
        selected_skill_ids: list[str],
    ) -> SkillChoiceResult:
        result = SkillChoiceResult()

        if not class_id:
            result.add_error(FIELD_CLASS_ID, ValidationCode.REQUIRED, "Class is required to choose skills")
            return result

        class_data = resolve_class(self.provider, class_id)
        if class_data is None:
            result.errors.append(invalid_class_error(class_id))
            return result

        background_skills: list[str] = []
        if background_id:
            background = resolve_background(self.provider, background_id)
            if background is None:
                result.errors.append(invalid_background_error(background_id))
            else:
                background_skills = list(background.skill_proficiencies)

        class_pool = set(class_data.available_skills)
        granted = set(background_skills)
        seen: set[str] = set()
        class_selections: list[str] = []

        for skill in selected_skill_ids:
            if skill in seen:
                result.add_error(
                    FIELD_SELECTED_SKILLS,
                    ValidationCode.DUPLICATE_SKILL,
                    f"Duplicate skill selection: {skill}",
                )
                continue
            seen.add(skill)

            if skill in class_pool:
                class_selections.append(skill)
            elif skill in granted:
                result.add_error(
                    FIELD_SELECTED_SKILLS,
                    ValidationCode.BACKGROUND_SKILL_NOT_CHOICE,
                    f"Skill '{skill}' is automatically granted by background '{background_id}' "
                    "and cannot be selected as a class skill",
                )
            else:
                result.add_error(
                    FIELD_SELECTED_SKILLS,
                    ValidationCode.INVALID_SKILL_CHOICE,
                    f"Skill '{skill}' is not available for class '{class_id}'",
                )

        required = class_data.skills_count
        if len(class_selections) != required:
            result.add_error(
                FIELD_SELECTED_SKILLS,
                ValidationCode.INCORRECT_SKILL_COUNT,
                f"Must select exactly {required} skills, got {len(class_selections)}",
            )

        if result.is_valid:
            for skill in class_selections:
                if skill in granted:
                    result.add_warning(
                        FIELD_SELECTED_SKILLS,
                        ValidationCode.SKILL_OVERLAP,
                        f"Skill '{skill}' is already granted by background '{background_id}'. "
                        "Choose a different skill to maximize proficiencies",
                    )

        return result

    def get_available_skills(self, class_id: str, background_id: str) -> AvailableSkills:
        """Class and background skill pools for display.

        Unknown or empty IDs give empty pools instead of errors.
        """
        available = AvailableSkills()

        if class_id:
            class_data = resolve_class(self.provider, class_id)
            if class_data is not None:
                source = class_data.name or class_id
                available.class_skills = [
                    _skill_choice(skill, f"choosable from class {source}")
                    for skill in class_data.available_skills
                ]

        if background_id:
            background = resolve_background(self.provider, background_id)
            if background is not None:
                source = background.name or background_id
                available.background_skills = [
                    _skill_choice(skill, f"granted automatically from background {source}")
                    for skill in background.skill_proficiencies
                ]

        return available


def _skill_choice(skill_id: str, origin: str) -> SkillChoice:
    name = format_skill_name(skill_id)
    ability = get_skill_ability(skill_id)
    return SkillChoice(
        skill_id=skill_id,
        skill_name=name,
        description=f"{name} ({ability.capitalize()}), {origin}",
        ability=ability,
    )
