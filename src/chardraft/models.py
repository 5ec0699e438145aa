"""
Data models for character drafts, finalized characters, and rule records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator
from shortuuid import random

from .constants import (
    ALL_ABILITIES,
    CHARACTER_SCORE_MAX,
    CHARACTER_SCORE_MIN,
    DEFAULT_SPEED,
    MAX_LEVEL,
    AbilityScoreMethod,
)
from .exceptions import PreconditionError

if TYPE_CHECKING:
    from .config import EngineSettings


class AbilityScores(BaseModel):
    """The six core ability scores.

    Only non-negativity is enforced here; the valid range depends on the
    generation method and is checked by the validators.
    """
    strength: int = Field(default=0, ge=0)
    dexterity: int = Field(default=0, ge=0)
    constitution: int = Field(default=0, ge=0)
    intelligence: int = Field(default=0, ge=0)
    wisdom: int = Field(default=0, ge=0)
    charisma: int = Field(default=0, ge=0)

    def as_dict(self) -> dict[str, int]:
        """Return scores keyed by ability name in canonical order."""
        return {ability: getattr(self, ability) for ability in ALL_ABILITIES}

    def get(self, ability: str) -> int:
        if ability not in ALL_ABILITIES:
            raise KeyError(ability)
        return getattr(self, ability)

    def modifier(self, ability: str) -> int:
        """Ability modifier: floor((score - 10) / 2)."""
        return (self.get(ability) - 10) // 2


# ---------------------------------------------------------------------------
# Rule records supplied by a RuleDataProvider
# ---------------------------------------------------------------------------

class SubraceData(BaseModel):
    """Subrace rules. Bonuses and traits stack on top of the parent race."""
    id: str
    name: str = ""
    description: str = ""
    traits: list[str] = Field(default_factory=list)
    ability_bonuses: dict[str, int] = Field(default_factory=dict)


class RaceData(BaseModel):
    """Race rules."""
    id: str
    name: str = ""
    description: str = ""
    speed: int = DEFAULT_SPEED
    traits: list[str] = Field(default_factory=list)
    ability_bonuses: dict[str, int] = Field(default_factory=dict)
    subraces: list[SubraceData] = Field(default_factory=list)

    def get_subrace(self, subrace_id: str) -> SubraceData | None:
        for subrace in self.subraces:
            if subrace.id == subrace_id:
                return subrace
        return None


class ClassData(BaseModel):
    """Class rules relevant to character creation."""
    id: str
    name: str = ""
    description: str = ""
    hit_dice: str = Field(default="", description="Hit die for one level, e.g. '1d10'")
    primary_abilities: list[str] = Field(default_factory=list)
    saving_throws: list[str] = Field(default_factory=list)
    skills_count: int = Field(default=0, ge=0)
    available_skills: list[str] = Field(default_factory=list)


class BackgroundData(BaseModel):
    """Background rules. Skill proficiencies are granted, never chosen."""
    id: str
    name: str = ""
    description: str = ""
    skill_proficiencies: list[str] = Field(default_factory=list)
    languages: int = Field(default=0, ge=0, description="Number of bonus languages")
    equipment: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Drafts and characters
# ---------------------------------------------------------------------------

class CharacterDraft(BaseModel):
    """In-progress character choices, filled in one section at a time."""
    id: str = Field(default_factory=lambda: random(length=12))
    name: str = ""
    race_id: str = ""
    subrace_id: str = ""
    class_id: str = ""
    background_id: str = ""
    ability_scores: AbilityScores | None = None
    ability_score_method: AbilityScoreMethod = AbilityScoreMethod.MANUAL
    skill_ids: list[str] = Field(default_factory=list, description="Class-sourced skill selections")

    # Hydrated copies of the referenced rule records, to avoid refetching
    race: RaceData | None = None
    class_data: ClassData | None = None
    background: BackgroundData | None = None

    @classmethod
    def new(cls, settings: EngineSettings | None = None, **data) -> CharacterDraft:
        """Create an empty draft, honouring the configured default ability method."""
        if settings is not None and "ability_score_method" not in data:
            data["ability_score_method"] = settings.default_ability_method
        return cls(**data)

    def set_name(self, name: str) -> None:
        self.name = name.strip()

    def set_race(self, race_id: str, subrace_id: str = "") -> None:
        if race_id != self.race_id:
            self.race = None
        self.race_id = race_id
        self.subrace_id = subrace_id

    def set_class(self, class_id: str) -> None:
        if class_id != self.class_id:
            self.class_data = None
        self.class_id = class_id

    def set_background(self, background_id: str) -> None:
        if background_id != self.background_id:
            self.background = None
        self.background_id = background_id

    def set_ability_scores(
        self,
        scores: AbilityScores,
        method: AbilityScoreMethod | str = AbilityScoreMethod.MANUAL,
    ) -> None:
        self.ability_scores = scores
        self.ability_score_method = AbilityScoreMethod(method)

    def set_skills(self, skill_ids: list[str]) -> None:
        """Replace the skill selection, dropping repeats but keeping order."""
        self.skill_ids = list(dict.fromkeys(skill_ids))


class Character(BaseModel):
    """A finalized character. Derived stats are computed, never stored."""
    id: str = Field(default_factory=lambda: random(length=12))
    name: str
    level: int = Field(default=1, ge=1, le=MAX_LEVEL)
    race_id: str
    subrace_id: str = ""
    class_id: str
    background_id: str = ""
    ability_scores: AbilityScores
    skill_ids: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_score_bounds(self) -> Character:
        for ability, score in self.ability_scores.as_dict().items():
            if not CHARACTER_SCORE_MIN <= score <= CHARACTER_SCORE_MAX:
                raise ValueError(
                    f"{ability} must be between {CHARACTER_SCORE_MIN} and "
                    f"{CHARACTER_SCORE_MAX} (got {score})"
                )
        return self

    @classmethod
    def from_draft(cls, draft: CharacterDraft, level: int = 1) -> Character:
        """Finalize a draft. The draft's ID carries over to the character."""
        if draft.ability_scores is None:
            raise PreconditionError("ability scores are required to finalize a draft")
        return cls(
            id=draft.id,
            name=draft.name,
            level=level,
            race_id=draft.race_id,
            subrace_id=draft.subrace_id,
            class_id=draft.class_id,
            background_id=draft.background_id,
            ability_scores=draft.ability_scores,
            skill_ids=list(draft.skill_ids),
        )


# ---------------------------------------------------------------------------
# Engine outputs
# ---------------------------------------------------------------------------

class SkillChoice(BaseModel):
    """A skill offered to the player, enriched for display."""
    skill_id: str
    skill_name: str
    description: str
    ability: str


class DerivedStats(BaseModel):
    """Computed combat and skill statistics."""
    max_hp: int
    armor_class: int
    initiative: int
    speed: int
    proficiency_bonus: int
    saving_throws: dict[str, int]
    skills: dict[str, int]
