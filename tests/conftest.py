"""
Pytest configuration and fixtures for chardraft tests.

The rule tables below are a small slice of the 5e SRD: enough races, classes
and backgrounds to exercise subraces, non-default speed, every hit die the
calculator knows and background/class skill overlap.
"""

import pytest

from chardraft.models import BackgroundData, ClassData, RaceData, SubraceData
from chardraft.rules import InMemoryRuleDataProvider


# ---------------------------------------------------------------------------
# Rule records
# ---------------------------------------------------------------------------

def make_races() -> list[RaceData]:
    return [
        RaceData(
            id="human",
            name="Human",
            traits=["Extra Language"],
            ability_bonuses={
                "strength": 1, "dexterity": 1, "constitution": 1,
                "intelligence": 1, "wisdom": 1, "charisma": 1,
            },
        ),
        RaceData(
            id="elf",
            name="Elf",
            traits=["Darkvision", "Keen Senses", "Fey Ancestry", "Trance"],
            ability_bonuses={"dexterity": 2},
            subraces=[
                SubraceData(
                    id="high_elf",
                    name="High Elf",
                    traits=["Elf Weapon Training", "Cantrip"],
                    ability_bonuses={"intelligence": 1},
                ),
                SubraceData(
                    id="wood_elf",
                    name="Wood Elf",
                    traits=["Fleet of Foot", "Mask of the Wild"],
                    ability_bonuses={"wisdom": 1},
                ),
            ],
        ),
        RaceData(
            id="halfling",
            name="Halfling",
            speed=25,
            traits=["Lucky", "Brave", "Halfling Nimbleness"],
            ability_bonuses={"dexterity": 2},
            subraces=[
                SubraceData(
                    id="lightfoot",
                    name="Lightfoot",
                    traits=["Naturally Stealthy"],
                    ability_bonuses={"charisma": 1},
                ),
            ],
        ),
    ]


def make_classes() -> list[ClassData]:
    return [
        ClassData(
            id="fighter",
            name="Fighter",
            hit_dice="1d10",
            primary_abilities=["strength", "dexterity"],
            saving_throws=["strength", "constitution"],
            skills_count=2,
            available_skills=[
                "acrobatics", "animal_handling", "athletics", "history",
                "insight", "intimidation", "perception", "survival",
            ],
        ),
        ClassData(
            id="wizard",
            name="Wizard",
            hit_dice="1d6",
            primary_abilities=["intelligence"],
            saving_throws=["intelligence", "wisdom"],
            skills_count=2,
            available_skills=["arcana", "history", "insight", "investigation", "medicine", "religion"],
        ),
        ClassData(
            id="rogue",
            name="Rogue",
            hit_dice="1d8",
            primary_abilities=["dexterity"],
            saving_throws=["dexterity", "intelligence"],
            skills_count=4,
            available_skills=[
                "acrobatics", "athletics", "deception", "insight", "intimidation",
                "investigation", "perception", "performance", "persuasion",
                "sleight_of_hand", "stealth",
            ],
        ),
        ClassData(
            id="barbarian",
            name="Barbarian",
            hit_dice="1d12",
            primary_abilities=["strength"],
            saving_throws=["strength", "constitution"],
            skills_count=2,
            available_skills=["animal_handling", "athletics", "intimidation", "nature", "perception", "survival"],
        ),
    ]


def make_backgrounds() -> list[BackgroundData]:
    return [
        BackgroundData(
            id="soldier",
            name="Soldier",
            skill_proficiencies=["athletics", "intimidation"],
            equipment=["Insignia of rank", "Trophy", "Common clothes"],
        ),
        BackgroundData(
            id="sage",
            name="Sage",
            skill_proficiencies=["arcana", "history"],
            languages=2,
            equipment=["Bottle of ink", "Quill", "Small knife"],
        ),
        BackgroundData(
            id="criminal",
            name="Criminal",
            skill_proficiencies=["deception", "stealth"],
            equipment=["Crowbar", "Dark common clothes"],
        ),
    ]


def make_provider() -> InMemoryRuleDataProvider:
    return InMemoryRuleDataProvider(
        races=make_races(),
        classes=make_classes(),
        backgrounds=make_backgrounds(),
    )


@pytest.fixture
def provider() -> InMemoryRuleDataProvider:
    """In-memory provider loaded with the SRD slice above."""
    return make_provider()
