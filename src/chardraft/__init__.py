"""
chardraft - character draft validation and derived-stat calculation for D&D 5e.
"""

from .config import EngineSettings, load_settings
from .constants import AbilityScoreMethod
from .engine import CharacterEngine
from .exceptions import (
    ChardraftError,
    EngineConfigError,
    PreconditionError,
    RuleDataError,
    RuleDataNotFoundError,
    RuleDataUnavailableError,
)
from .logutils import configure_logging
from .models import (
    AbilityScores,
    BackgroundData,
    Character,
    CharacterDraft,
    ClassData,
    DerivedStats,
    RaceData,
    SkillChoice,
    SubraceData,
)
from .rules import (
    CachedDraftProvider,
    FileRuleDataProvider,
    InMemoryRuleDataProvider,
    RuleDataProvider,
)
from .stats import StatCalculator
from .validation import DraftValidationReport, ValidationCode, ValidationError, ValidationWarning

try:
    from importlib.metadata import PackageNotFoundError, version as _get_version
    __version__ = _get_version("chardraft")
except PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback when running from a source checkout

__all__ = [
    "CharacterEngine",
    "StatCalculator",
    "EngineSettings",
    "load_settings",
    "configure_logging",
    "AbilityScoreMethod",
    "AbilityScores",
    "SubraceData",
    "RaceData",
    "ClassData",
    "BackgroundData",
    "CharacterDraft",
    "Character",
    "SkillChoice",
    "DerivedStats",
    "RuleDataProvider",
    "InMemoryRuleDataProvider",
    "FileRuleDataProvider",
    "CachedDraftProvider",
    "DraftValidationReport",
    "ValidationCode",
    "ValidationError",
    "ValidationWarning",
    "ChardraftError",
    "PreconditionError",
    "EngineConfigError",
    "RuleDataError",
    "RuleDataNotFoundError",
    "RuleDataUnavailableError",
]
