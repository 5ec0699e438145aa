"""
Race, subrace and class choice validation.

Both "ID not found" and "rule data source unavailable" surface as the same
INVALID_RACE / INVALID_CLASS code; the distinction only reaches the log.
"""

from __future__ import annotations

import logging

from ..exceptions import RuleDataError
from ..models import AbilityScores, ClassData, RaceData
from ..rules.provider import RuleDataProvider
from .report import ClassChoiceResult, RaceChoiceResult, ValidationCode, ValidationError

logger = logging.getLogger("chardraft.validation")

FIELD_RACE_ID = "race_id"
FIELD_SUBRACE_ID = "subrace_id"
FIELD_CLASS_ID = "class_id"


def invalid_race_error(race_id: str) -> ValidationError:
    return ValidationError(FIELD_RACE_ID, f"Invalid race: {race_id}", ValidationCode.INVALID_RACE)


def invalid_class_error(class_id: str) -> ValidationError:
    return ValidationError(FIELD_CLASS_ID, f"Invalid class: {class_id}", ValidationCode.INVALID_CLASS)


def resolve_race(provider: RuleDataProvider, race_id: str) -> RaceData | None:
    """Fetch race data, returning None on any provider failure."""
    try:
        race = provider.get_race_data(race_id)
    except RuleDataError as e:
        logger.warning(f"Could not resolve race '{race_id}': {e}")
        return None
    if race is None:
        logger.warning(f"Provider returned no data for race '{race_id}'")
    return race


def resolve_class(provider: RuleDataProvider, class_id: str) -> ClassData | None:
    """Fetch class data, returning None on any provider failure."""
    try:
        class_data = provider.get_class_data(class_id)
    except RuleDataError as e:
        logger.warning(f"Could not resolve class '{class_id}': {e}")
        return None
    if class_data is None:
        logger.warning(f"Provider returned no data for class '{class_id}'")
    return class_data


class ChoiceValidator:
    """Validate race/subrace and class selections against rule data."""

    def __init__(self, provider: RuleDataProvider) -> None:
        self.provider = provider

    def validate_race(self, race_id: str, subrace_id: str | None = None) -> RaceChoiceResult:
        """Validate a race and optional subrace.

        On success the result carries the race traits followed by the subrace
        traits, and the sum of race and subrace ability bonuses.
        """
        result = RaceChoiceResult()

        if not race_id:
            result.add_error(FIELD_RACE_ID, ValidationCode.REQUIRED, "Race is required")
            return result

        race = resolve_race(self.provider, race_id)
        if race is None:
            result.errors.append(invalid_race_error(race_id))
            return result

        traits = list(race.traits)
        ability_mods = dict(race.ability_bonuses)

        if subrace_id:
            subrace = race.get_subrace(subrace_id)
            if subrace is None:
                valid = ", ".join(s.id for s in race.subraces) or "none"
                result.add_error(
                    FIELD_SUBRACE_ID,
                    ValidationCode.INVALID_SUBRACE,
                    f"Subrace '{subrace_id}' is not valid for race '{race_id}'. Valid subraces: {valid}",
                )
                return result
            traits.extend(subrace.traits)
            for ability, bonus in subrace.ability_bonuses.items():
                ability_mods[ability] = ability_mods.get(ability, 0) + bonus

        result.race_traits = traits
        result.ability_mods = ability_mods
        return result

    def validate_class(
        self,
        class_id: str,
        ability_scores: AbilityScores | None = None,
    ) -> ClassChoiceResult:
        """Validate a class selection and expose its creation data.

        ability_scores is accepted for multiclass prerequisite checks, which
        are not performed.
        """
        result = ClassChoiceResult()

        if not class_id:
            result.add_error(FIELD_CLASS_ID, ValidationCode.REQUIRED, "Class is required")
            return result

        class_data = resolve_class(self.provider, class_id)
        if class_data is None:
            result.errors.append(invalid_class_error(class_id))
            return result

        result.hit_dice = class_data.hit_dice
        result.primary_abilities = list(class_data.primary_abilities)
        result.saving_throws = list(class_data.saving_throws)
        result.skill_choices_count = class_data.skills_count
        result.available_skills = list(class_data.available_skills)
        return result
