"""Fixed rule tables for character creation (D&D 5e PHB)."""

from enum import Enum
from types import MappingProxyType


class AbilityScoreMethod(str, Enum):
    """How a set of ability scores was generated."""
    STANDARD_ARRAY = "standard_array"
    POINT_BUY = "point_buy"
    MANUAL = "manual"


# Canonical ability order
ALL_ABILITIES = (
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
)

# Standard Array values per PHB
STANDARD_ARRAY = (15, 14, 13, 12, 10, 8)

# Point Buy costs per PHB
POINT_BUY_COSTS = MappingProxyType({8: 0, 9: 1, 10: 2, 11: 3, 12: 4, 13: 5, 14: 7, 15: 9})
POINT_BUY_BUDGET = 27
POINT_BUY_MIN = 8
POINT_BUY_MAX = 15

# Manual / rolled score bounds
MANUAL_SCORE_MIN = 3
MANUAL_SCORE_MAX = 18

# Bounds once scores belong to a finalized character
CHARACTER_SCORE_MIN = 3
CHARACTER_SCORE_MAX = 20

MAX_LEVEL = 20

# Skill → governing ability, in sheet order
SKILL_ABILITIES = MappingProxyType({
    "acrobatics": "dexterity",
    "animal_handling": "wisdom",
    "arcana": "intelligence",
    "athletics": "strength",
    "deception": "charisma",
    "history": "intelligence",
    "insight": "wisdom",
    "intimidation": "charisma",
    "investigation": "intelligence",
    "medicine": "wisdom",
    "nature": "intelligence",
    "perception": "wisdom",
    "performance": "charisma",
    "persuasion": "charisma",
    "religion": "intelligence",
    "sleight_of_hand": "dexterity",
    "stealth": "dexterity",
    "survival": "wisdom",
})

UNKNOWN_ABILITY = "unknown"

# Hit dice string → maximum face value. Anything else falls back to DEFAULT_HIT_DIE_MAX.
HIT_DIE_MAX = MappingProxyType({
    "1d6": 6,
    "1d8": 8,
    "1d10": 10,
    "1d12": 12,
})
DEFAULT_HIT_DIE_MAX = 6

BASE_ARMOR_CLASS = 10
DEFAULT_SPEED = 30

# Creation steps, in the order they are reported as missing
STEP_NAME = "name"
STEP_RACE = "race"
STEP_CLASS = "class"
STEP_ABILITY_SCORES = "ability_scores"
STEP_BACKGROUND = "background"
STEP_SKILLS = "skills"

CREATION_STEPS = (
    STEP_NAME,
    STEP_RACE,
    STEP_CLASS,
    STEP_ABILITY_SCORES,
    STEP_BACKGROUND,
    STEP_SKILLS,
)
