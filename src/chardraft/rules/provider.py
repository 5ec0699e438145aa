"""
RuleDataProvider contract and in-process implementations.

The engine never owns rule data. Every lookup goes through an object
implementing RuleDataProvider, injected by the caller, so tests and embedding
applications can substitute their own tables.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, runtime_checkable

from ..exceptions import RuleDataNotFoundError
from ..models import BackgroundData, CharacterDraft, ClassData, RaceData

logger = logging.getLogger("chardraft.rules")


@runtime_checkable
class RuleDataProvider(Protocol):
    """Read-only source of race, class and background records.

    Implementations return the record or raise RuleDataNotFoundError for an
    unknown ID. Failures of the underlying source raise
    RuleDataUnavailableError. Calls are synchronous and may block.
    """

    def get_race_data(self, race_id: str) -> RaceData: ...

    def get_class_data(self, class_id: str) -> ClassData: ...

    def get_background_data(self, background_id: str) -> BackgroundData: ...


class InMemoryRuleDataProvider:
    """Provider backed by fixed dictionaries of records keyed by ID."""

    def __init__(
        self,
        races: Iterable[RaceData] = (),
        classes: Iterable[ClassData] = (),
        backgrounds: Iterable[BackgroundData] = (),
    ) -> None:
        self._races: dict[str, RaceData] = {r.id: r for r in races}
        self._classes: dict[str, ClassData] = {c.id: c for c in classes}
        self._backgrounds: dict[str, BackgroundData] = {b.id: b for b in backgrounds}

    def get_race_data(self, race_id: str) -> RaceData:
        try:
            return self._races[race_id]
        except KeyError:
            raise RuleDataNotFoundError("race", race_id) from None

    def get_class_data(self, class_id: str) -> ClassData:
        try:
            return self._classes[class_id]
        except KeyError:
            raise RuleDataNotFoundError("class", class_id) from None

    def get_background_data(self, background_id: str) -> BackgroundData:
        try:
            return self._backgrounds[background_id]
        except KeyError:
            raise RuleDataNotFoundError("background", background_id) from None


class CachedDraftProvider:
    """Serve a draft's hydrated rule records before asking the wrapped provider.

    Lives for a single engine call; it holds no state beyond the draft it was
    built for.
    """

    def __init__(self, provider: RuleDataProvider, draft: CharacterDraft) -> None:
        self.provider = provider
        self.draft = draft

    def get_race_data(self, race_id: str) -> RaceData:
        if self.draft.race is not None and self.draft.race.id == race_id:
            logger.debug(f"Using hydrated race '{race_id}' from draft {self.draft.id}")
            return self.draft.race
        return self.provider.get_race_data(race_id)

    def get_class_data(self, class_id: str) -> ClassData:
        if self.draft.class_data is not None and self.draft.class_data.id == class_id:
            logger.debug(f"Using hydrated class '{class_id}' from draft {self.draft.id}")
            return self.draft.class_data
        return self.provider.get_class_data(class_id)

    def get_background_data(self, background_id: str) -> BackgroundData:
        if self.draft.background is not None and self.draft.background.id == background_id:
            logger.debug(f"Using hydrated background '{background_id}' from draft {self.draft.id}")
            return self.draft.background
        return self.provider.get_background_data(background_id)
