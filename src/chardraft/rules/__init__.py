"""
Rule data access for chardraft.

This module provides:
- The RuleDataProvider protocol the engine consumes
- An in-memory provider for fixed rule tables
- A file-backed provider for JSON/YAML rulesets
"""

from .file_source import FileRuleDataProvider
from .provider import CachedDraftProvider, InMemoryRuleDataProvider, RuleDataProvider

__all__ = [
    "RuleDataProvider",
    "InMemoryRuleDataProvider",
    "CachedDraftProvider",
    "FileRuleDataProvider",
]
