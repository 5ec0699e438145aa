"""Background choice validation."""

from __future__ import annotations

import logging

from ..exceptions import RuleDataError
from ..models import BackgroundData
from ..rules.provider import RuleDataProvider
from .report import BackgroundChoiceResult, ValidationCode, ValidationError

logger = logging.getLogger("chardraft.validation")

FIELD_BACKGROUND_ID = "background_id"


def invalid_background_error(background_id: str) -> ValidationError:
    return ValidationError(
        FIELD_BACKGROUND_ID,
        f"Invalid background: {background_id}",
        ValidationCode.INVALID_BACKGROUND,
    )


def resolve_background(provider: RuleDataProvider, background_id: str) -> BackgroundData | None:
    """Fetch background data, returning None on any provider failure."""
    try:
        background = provider.get_background_data(background_id)
    except RuleDataError as e:
        logger.warning(f"Could not resolve background '{background_id}': {e}")
        return None
    if background is None:
        logger.warning(f"Provider returned no data for background '{background_id}'")
    return background


class BackgroundValidator:
    """Validate a background and expose what it grants automatically."""

    def __init__(self, provider: RuleDataProvider) -> None:
        self.provider = provider

    def validate(self, background_id: str) -> BackgroundChoiceResult:
        """Validate a background selection.

        A provider that raises yields INVALID_BACKGROUND; one that answers
        with no record yields NOT_FOUND. On success the background's skill
        proficiencies, bonus language count and equipment are returned as-is.
        """
        result = BackgroundChoiceResult()

        if not background_id:
            result.add_error(FIELD_BACKGROUND_ID, ValidationCode.REQUIRED, "Background is required")
            return result

        try:
            background = self.provider.get_background_data(background_id)
        except RuleDataError as e:
            logger.warning(f"Could not resolve background '{background_id}': {e}")
            result.errors.append(invalid_background_error(background_id))
            return result

        if background is None:
            result.add_error(
                FIELD_BACKGROUND_ID,
                ValidationCode.NOT_FOUND,
                f"Background not found: {background_id}",
            )
            return result

        result.skill_proficiencies = list(background.skill_proficiencies)
        result.languages = background.languages
        result.equipment = list(background.equipment)
        return result
