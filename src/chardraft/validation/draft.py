"""
Whole-draft validation.

Runs every section validator whose input is present and folds their output
into one DraftValidationReport. A failing section never stops the others
from being checked.
"""

from __future__ import annotations

import logging

from ..exceptions import PreconditionError
from ..models import CharacterDraft
from ..rules.provider import CachedDraftProvider, RuleDataProvider
from .ability_scores import AbilityScoreValidator
from .background import BackgroundValidator
from .choices import ChoiceValidator
from .completeness import DraftCompletenessChecker
from .report import DraftValidationReport, ValidationError, ValidationResult, ValidationWarning
from .skills import SkillChoiceValidator

logger = logging.getLogger("chardraft.validation")


class DraftValidator:
    """Compose the section validators into one report for a draft."""

    def __init__(self, provider: RuleDataProvider) -> None:
        self.provider = provider
        self.completeness = DraftCompletenessChecker()
        self.ability_scores = AbilityScoreValidator()

    def validate(self, draft: CharacterDraft | None) -> DraftValidationReport:
        """Validate a draft for completeness and rule compliance.

        Raises:
            PreconditionError: If no draft is given.
        """
        if draft is None:
            raise PreconditionError("draft is required")

        missing = self.completeness.missing_steps(draft)

        # Lookups for this call prefer the draft's hydrated records
        provider = CachedDraftProvider(self.provider, draft)
        choices = ChoiceValidator(provider)

        sections: list[ValidationResult] = []
        if draft.race_id:
            sections.append(choices.validate_race(draft.race_id, draft.subrace_id or None))
        if draft.class_id:
            sections.append(choices.validate_class(draft.class_id, draft.ability_scores))
        if draft.ability_scores is not None:
            sections.append(self.ability_scores.validate(draft.ability_scores, draft.ability_score_method))
        if draft.skill_ids and draft.class_id:
            sections.append(
                SkillChoiceValidator(provider).validate(draft.class_id, draft.background_id, draft.skill_ids)
            )
        if draft.background_id:
            sections.append(BackgroundValidator(provider).validate(draft.background_id))

        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []
        for section in sections:
            _extend_new(errors, section.errors)
            _extend_new(warnings, section.warnings)

        report = DraftValidationReport(
            is_complete=not missing,
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            missing_steps=missing,
        )
        logger.debug(
            f"Validated draft {draft.id}: valid={report.is_valid}, complete={report.is_complete}, "
            f"{len(errors)} errors, {len(warnings)} warnings"
        )
        return report


def _extend_new(target: list, records: list) -> None:
    """Append one section's records, skipping any an earlier section already reported.

    INVALID_CLASS comes from both the class and the skill checks. Repeats
    within a single section (one DUPLICATE_SKILL per extra pick) are kept.
    """
    earlier = set(target)
    target.extend(record for record in records if record not in earlier)
