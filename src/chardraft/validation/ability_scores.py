"""Ability score validation for the three generation methods."""

from __future__ import annotations

from collections import Counter

from ..constants import (
    MANUAL_SCORE_MAX,
    MANUAL_SCORE_MIN,
    POINT_BUY_BUDGET,
    POINT_BUY_COSTS,
    POINT_BUY_MAX,
    POINT_BUY_MIN,
    STANDARD_ARRAY,
    AbilityScoreMethod,
)
from ..models import AbilityScores
from .report import AbilityScoreResult, ValidationCode

FIELD_ABILITY_SCORES = "ability_scores"
FIELD_METHOD = "method"


class AbilityScoreValidator:
    """Validate six ability scores against a generation method."""

    def validate(
        self,
        scores: AbilityScores | None,
        method: AbilityScoreMethod | str,
    ) -> AbilityScoreResult:
        result = AbilityScoreResult()

        if scores is None:
            result.add_error(FIELD_ABILITY_SCORES, ValidationCode.REQUIRED, "Ability scores are required")
            return result

        try:
            method = AbilityScoreMethod(method)
        except ValueError:
            result.add_error(
                FIELD_METHOD,
                ValidationCode.INVALID_METHOD,
                f"Unknown ability score method '{method}'. "
                f"Use {', '.join(m.value for m in AbilityScoreMethod)}.",
            )
            return result

        if method == AbilityScoreMethod.STANDARD_ARRAY:
            self._validate_standard_array(scores, result)
        elif method == AbilityScoreMethod.POINT_BUY:
            self._validate_point_buy(scores, result)
        else:
            self._validate_manual(scores, result)

        return result

    @staticmethod
    def _validate_standard_array(scores: AbilityScores, result: AbilityScoreResult) -> None:
        """Any assignment of the standard array values is allowed."""
        values = list(scores.as_dict().values())
        if Counter(values) != Counter(STANDARD_ARRAY):
            result.add_error(
                FIELD_ABILITY_SCORES,
                ValidationCode.INVALID_STANDARD_ARRAY,
                f"Standard Array values must be exactly {list(STANDARD_ARRAY)} (got {values})",
            )

    @staticmethod
    def _validate_point_buy(scores: AbilityScores, result: AbilityScoreResult) -> None:
        total_cost = 0
        for ability, score in scores.as_dict().items():
            if score < POINT_BUY_MIN or score > POINT_BUY_MAX:
                result.add_error(
                    ability,
                    ValidationCode.INVALID_POINT_BUY_RANGE,
                    f"Point Buy scores must be {POINT_BUY_MIN}-{POINT_BUY_MAX} (got {ability}={score})",
                )
                continue
            total_cost += POINT_BUY_COSTS[score]

        if total_cost > POINT_BUY_BUDGET:
            result.add_error(
                FIELD_ABILITY_SCORES,
                ValidationCode.POINT_BUY_EXCEEDED,
                f"Point Buy budget exceeded: {total_cost}/{POINT_BUY_BUDGET} points",
            )

        if result.is_valid and total_cost < POINT_BUY_BUDGET:
            remaining = POINT_BUY_BUDGET - total_cost
            result.add_warning(
                FIELD_ABILITY_SCORES,
                ValidationCode.UNSPENT_POINTS,
                f"Point Buy has {remaining} unspent points ({total_cost}/{POINT_BUY_BUDGET})",
            )

    @staticmethod
    def _validate_manual(scores: AbilityScores, result: AbilityScoreResult) -> None:
        for ability, score in scores.as_dict().items():
            if score < MANUAL_SCORE_MIN or score > MANUAL_SCORE_MAX:
                result.add_error(
                    ability,
                    ValidationCode.INVALID_ABILITY_SCORE_RANGE,
                    f"{ability.capitalize()} must be between {MANUAL_SCORE_MIN} and "
                    f"{MANUAL_SCORE_MAX} (got {score})",
                )


def point_buy_cost(scores: AbilityScores) -> int | None:
    """Total point-buy cost, or None if any score is outside the point-buy range."""
    total = 0
    for score in scores.as_dict().values():
        cost = POINT_BUY_COSTS.get(score)
        if cost is None:
            return None
        total += cost
    return total
