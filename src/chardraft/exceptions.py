"""
Exception hierarchy for chardraft.

Two families exist. Precondition errors are raised for caller mistakes
(missing required input, engine built without a provider). Rule-data errors
come from a RuleDataProvider; validators catch them and turn them into
rule-violation codes instead of letting them escape.
"""


class ChardraftError(Exception):
    """Base class for all chardraft errors."""


class PreconditionError(ChardraftError):
    """Raised when a call is missing input it cannot proceed without."""


class EngineConfigError(PreconditionError):
    """Raised when the engine or its settings are constructed incorrectly."""


class RuleDataError(ChardraftError):
    """Raised by a RuleDataProvider when a record cannot be resolved."""


class RuleDataNotFoundError(RuleDataError):
    """The requested race, class or background ID does not exist."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} '{record_id}' not found")


class RuleDataUnavailableError(RuleDataError):
    """The rule data source could not be read."""
