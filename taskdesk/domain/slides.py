"""In-memory slide editing session.

A :class:`SlideDeck` owns the slide sequence while a presentation is being
edited. Positions are the source of truth; the ``order`` field on each slide
is rewritten by :func:`reindex` after every structural change and is always
exactly ``1..N``.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from .entities import SlideEntity
from .enums import MoveDirection, SlideType

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"title", "content", "slide_type"})
_FIELD_ALIASES = {"slideType": "slide_type"}

STARTER_SLIDES = (
    ("Introduction", SlideType.TITLE),
    ("Content Slide", SlideType.CONTENT),
)


def reindex(slides: Iterable[SlideEntity]) -> list[SlideEntity]:
    return [
        slide if slide.order == position else replace(slide, order=position)
        for position, slide in enumerate(slides, start=1)
    ]


class SlideDeck:
    def __init__(self, slides: Iterable[SlideEntity] = ()) -> None:
        self._slides = reindex(sorted(slides, key=lambda slide: slide.order))
        # ids are never handed out twice, even after the holder is removed
        self._next_id = max((slide.id for slide in self._slides), default=0) + 1

    @classmethod
    def default(cls) -> SlideDeck:
        deck = cls()
        for title, slide_type in STARTER_SLIDES:
            deck.append(SlideEntity(id=0, title=title, content="", slide_type=slide_type, order=0))
        return deck

    @property
    def slides(self) -> list[SlideEntity]:
        return list(self._slides)

    def __len__(self) -> int:
        return len(self._slides)

    def __iter__(self) -> Iterator[SlideEntity]:
        return iter(list(self._slides))

    def append(self, slide: SlideEntity) -> list[SlideEntity]:
        """Add ``slide`` at the end; its ``id`` and ``order`` are reassigned."""
        self._slides.append(
            replace(slide, id=self._take_id(), order=len(self._slides) + 1)
        )
        return self.slides

    def append_blank(self) -> list[SlideEntity]:
        position = len(self._slides) + 1
        return self.append(
            SlideEntity(
                id=0,
                title=f"Slide {position}",
                content="",
                slide_type=SlideType.CONTENT,
                order=position,
            )
        )

    def remove(self, slide_id: int) -> list[SlideEntity]:
        index = self._index_of(slide_id)
        if index is None:
            logger.debug("remove ignored, slide %s not in deck", slide_id)
            return self.slides
        del self._slides[index]
        self._slides = reindex(self._slides)
        return self.slides

    def move(self, slide_id: int, direction: MoveDirection | str) -> list[SlideEntity]:
        """Swap a slide with its neighbour; nothing happens at either end."""
        try:
            step = -1 if MoveDirection(direction) is MoveDirection.UP else 1
        except ValueError:
            logger.debug("move ignored, unknown direction %r", direction)
            return self.slides

        index = self._index_of(slide_id)
        if index is None:
            return self.slides
        target = index + step
        if target < 0 or target >= len(self._slides):
            return self.slides

        slides = list(self._slides)
        slides[index], slides[target] = slides[target], slides[index]
        self._slides = reindex(slides)
        return self.slides

    def update(self, slide_id: int, field: str, value: object) -> list[SlideEntity]:
        field = _FIELD_ALIASES.get(field, field)
        if field not in EDITABLE_FIELDS:
            logger.debug("update ignored, %r is not editable", field)
            return self.slides
        if field == "slide_type":
            try:
                value = SlideType(value)
            except ValueError:
                logger.debug("update ignored, unknown slide type %r", value)
                return self.slides

        index = self._index_of(slide_id)
        if index is None:
            return self.slides
        self._slides[index] = replace(self._slides[index], **{field: value})
        return self.slides

    def as_records(self) -> list[dict]:
        return [
            {
                "id": slide.id,
                "title": slide.title,
                "content": slide.content,
                "slide_type": slide.slide_type.value,
                "order": position,
            }
            for position, slide in enumerate(self._slides, start=1)
        ]

    def _index_of(self, slide_id: int) -> int | None:
        return next(
            (index for index, slide in enumerate(self._slides) if slide.id == slide_id),
            None,
        )

    def _take_id(self) -> int:
        slide_id = self._next_id
        self._next_id += 1
        return slide_id
