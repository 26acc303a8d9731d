from __future__ import annotations

import logging
from typing import Protocol

from taskdesk.domain.entities import PresentationEntity
from taskdesk.domain.slides import SlideDeck

logger = logging.getLogger(__name__)

PRESENTATION_FIELDS = (
    "title",
    "subtitle",
    "author",
    "company",
    "project_id",
    "theme",
    "audience",
    "objective",
    "duration_min",
)


class PresentationStore(Protocol):
    def save_presentation(self, data: dict, slides: list[dict]) -> PresentationEntity: ...

    def get_presentation(self, presentation_id: int) -> PresentationEntity | None: ...


class PresentationService:
    def __init__(self, repo: PresentationStore) -> None:
        self._repo = repo

    def new_deck(self) -> SlideDeck:
        return SlideDeck.default()

    def save(self, data: dict, deck: SlideDeck) -> PresentationEntity:
        """Submit the editing session as one batch, slides in deck order."""
        fields = {key: value for key, value in data.items() if key in PRESENTATION_FIELDS}
        if not fields.get("project_id"):
            fields["project_id"] = None
        ignored = sorted(set(data) - set(PRESENTATION_FIELDS))
        if ignored:
            logger.debug("Ignoring presentation fields: %s", ", ".join(ignored))
        return self._repo.save_presentation(fields, deck.as_records())

    def open_deck(self, presentation_id: int) -> SlideDeck | None:
        presentation = self._repo.get_presentation(presentation_id)
        if presentation is None:
            return None
        return SlideDeck(presentation.slides)
