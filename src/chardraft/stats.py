"""Stat Calculator: derived combat and skill statistics.

Given a fully chosen draft (treated as level 1) or a finalized character,
the calculator resolves class, race and background rule data and computes
hit points, armor class, initiative, speed, proficiency bonus, saving throws
and skill bonuses. Nothing is stored; every call recomputes from scratch.
"""

from __future__ import annotations

import logging

from .constants import (
    ALL_ABILITIES,
    BASE_ARMOR_CLASS,
    DEFAULT_HIT_DIE_MAX,
    HIT_DIE_MAX,
    SKILL_ABILITIES,
)
from .exceptions import PreconditionError, RuleDataError, RuleDataNotFoundError
from .models import Character, CharacterDraft, ClassData, DerivedStats, RaceData
from .rules.provider import CachedDraftProvider, RuleDataProvider
from .validation.background import resolve_background

logger = logging.getLogger("chardraft.stats")


def calculate_ability_modifier(score: int) -> int:
    """D&D 5e ability modifier: floor((score - 10) / 2)."""
    return (score - 10) // 2


def calculate_proficiency_bonus(level: int) -> int:
    """+2 at levels 1-4, +3 at 5-8, +4 at 9-12, +5 at 13-16, +6 at 17-20.

    Non-positive levels are not a valid character state and get 0.
    """
    if level <= 0:
        return 0
    return 2 + (level - 1) // 4


def extract_max_hit_die(hit_dice: str) -> int:
    """Maximum face of a "1dN" hit die; unknown strings fall back to d6."""
    return HIT_DIE_MAX.get(hit_dice.strip().lower(), DEFAULT_HIT_DIE_MAX)


def calculate_max_hp(hit_die_max: int, level: int, con_mod: int) -> int:
    """Level 1 = max die + CON; each later level adds die//2 + 1 + CON."""
    hp = hit_die_max + con_mod
    if level > 1:
        hp += (level - 1) * (hit_die_max // 2 + 1 + con_mod)
    return hp


class StatCalculator:
    """Compute DerivedStats for a draft or finalized character."""

    def __init__(self, provider: RuleDataProvider) -> None:
        self.provider = provider

    def calculate(self, subject: CharacterDraft | Character | None) -> DerivedStats:
        """Calculate derived stats.

        Raises:
            PreconditionError: If the subject is missing, lacks a class, race
                or ability scores, or its class/race cannot be resolved.
        """
        if subject is None:
            raise PreconditionError("draft is required")
        if not subject.class_id:
            raise PreconditionError("class ID is required")
        if not subject.race_id:
            raise PreconditionError("race ID is required")
        if subject.ability_scores is None:
            raise PreconditionError("ability scores are required")

        provider = self.provider
        level = 1
        if isinstance(subject, CharacterDraft):
            provider = CachedDraftProvider(self.provider, subject)
        else:
            level = subject.level

        class_data = self._resolve_class(provider, subject.class_id)
        race_data = self._resolve_race(provider, subject.race_id)

        background_skills: list[str] = []
        if subject.background_id:
            background = resolve_background(provider, subject.background_id)
            if background is None:
                logger.warning(
                    f"Background '{subject.background_id}' unavailable; "
                    "no background proficiencies applied"
                )
            else:
                background_skills = list(background.skill_proficiencies)

        scores = subject.ability_scores
        modifiers = {
            ability: calculate_ability_modifier(score)
            for ability, score in scores.as_dict().items()
        }
        prof_bonus = calculate_proficiency_bonus(level)

        saving_throw_profs = set(class_data.saving_throws)
        saving_throws = {
            ability: modifiers[ability] + (prof_bonus if ability in saving_throw_profs else 0)
            for ability in ALL_ABILITIES
        }

        skill_profs = set(subject.skill_ids) | set(background_skills)
        skills = {
            skill: modifiers[ability] + (prof_bonus if skill in skill_profs else 0)
            for skill, ability in SKILL_ABILITIES.items()
        }

        hit_die_max = extract_max_hit_die(class_data.hit_dice)
        stats = DerivedStats(
            max_hp=calculate_max_hp(hit_die_max, level, modifiers["constitution"]),
            armor_class=BASE_ARMOR_CLASS + modifiers["dexterity"],
            initiative=modifiers["dexterity"],
            speed=race_data.speed,
            proficiency_bonus=prof_bonus,
            saving_throws=saving_throws,
            skills=skills,
        )
        logger.debug(
            f"Calculated stats for {subject.id}: level {level} {class_data.id}, "
            f"HP {stats.max_hp}, AC {stats.armor_class}"
        )
        return stats

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_class(provider: RuleDataProvider, class_id: str) -> ClassData:
        try:
            class_data = provider.get_class_data(class_id)
        except RuleDataNotFoundError as e:
            raise PreconditionError(f"invalid class ID: {class_id}") from e
        except RuleDataError as e:
            raise PreconditionError(f"failed to get class data: {e}") from e
        if class_data is None:
            raise PreconditionError(f"invalid class ID: {class_id}")
        return class_data

    @staticmethod
    def _resolve_race(provider: RuleDataProvider, race_id: str) -> RaceData:
        try:
            race_data = provider.get_race_data(race_id)
        except RuleDataNotFoundError as e:
            raise PreconditionError(f"invalid race ID: {race_id}") from e
        except RuleDataError as e:
            raise PreconditionError(f"failed to get race data: {e}") from e
        if race_data is None:
            raise PreconditionError(f"invalid race ID: {race_id}")
        return race_data
