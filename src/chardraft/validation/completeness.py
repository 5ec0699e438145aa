"""Which creation steps a draft still lacks."""

from __future__ import annotations

from ..constants import (
    CREATION_STEPS,
    STEP_ABILITY_SCORES,
    STEP_BACKGROUND,
    STEP_CLASS,
    STEP_NAME,
    STEP_RACE,
    STEP_SKILLS,
)
from ..models import CharacterDraft


class DraftCompletenessChecker:
    """Pure inspection of a draft; never consults rule data."""

    def missing_steps(self, draft: CharacterDraft) -> list[str]:
        """Missing step names in creation order."""
        filled = {
            STEP_NAME: bool(draft.name),
            STEP_RACE: bool(draft.race_id),
            STEP_CLASS: bool(draft.class_id),
            STEP_ABILITY_SCORES: draft.ability_scores is not None,
            STEP_BACKGROUND: bool(draft.background_id),
            STEP_SKILLS: bool(draft.skill_ids),
        }
        return [step for step in CREATION_STEPS if not filled[step]]

    def is_complete(self, draft: CharacterDraft) -> bool:
        return not self.missing_steps(draft)
