"""Explorer engine: one loaded book and the queries run against it."""

from __future__ import annotations

import logging
from typing import Any

from morph_explorer import breakdown as bd
from morph_explorer.corpus import CorpusStore, NoDataError, iter_words, sorted_chapters
from morph_explorer.decoder import classify, decode_tag, describe, interpret, normalize_tag
from morph_explorer.grammar import (
    BREAKDOWN_ATTRIBUTES,
    BREAKDOWN_SHAPES,
    CATEGORIES,
    CONJUNCTION_TYPES,
    DEFAULT_ATTRIBUTE,
    FILTER_OPTIONS,
)
from morph_explorer.highlight import build_matcher, normalize_selection
from morph_explorer.models import (
    BookInfo,
    BreakdownResult,
    ChapterText,
    Selection,
    TagDescription,
)
from morph_explorer.text_display import chapter_text

logger = logging.getLogger(__name__)

PARAGRAPH_LOAD_ERROR = "Error loading paragraph data. Falling back to verse-by-verse mode."


class ExplorerEngine:
    """Loads book documents and answers overview/breakdown/text queries.

    Only one book is held at a time; loading another replaces it.
    """

    def __init__(self, store: CorpusStore | None = None) -> None:
        self.store = store or CorpusStore()
        self._book: str | None = None
        self._book_data: dict[str, Any] | None = None

    @property
    def current_book(self) -> str | None:
        return self._book

    def _ensure_loaded(self, book: str) -> dict[str, Any]:
        """Load ``book`` if it is not the current one, return its chapters."""
        if book != self._book or self._book_data is None:
            logger.info("Loading %s from %s ...", book, self.store.directory)
            data = self.store.load_book(book)
            self._book, self._book_data = book, data
            logger.info("Loaded %s (%d chapters)", book, len(data))
        return self._book_data

    def list_books(self) -> list[str]:
        return self.store.list_books()

    def load_book(self, book: str) -> BookInfo:
        data = self._ensure_loaded(book)
        return BookInfo(name=book, chapters=len(data))

    def chapters(self, book: str) -> list[str]:
        return sorted_chapters(self._ensure_loaded(book))

    def chapter_data(self, book: str, chapter: str | int) -> dict[str, Any]:
        data = self._ensure_loaded(book)
        chapter_data = data.get(str(chapter))
        if not chapter_data:
            raise NoDataError(f"No data available for {book} {chapter}.")
        return chapter_data

    def overview(self, book: str) -> BreakdownResult:
        return bd.overview(book, self._ensure_loaded(book))

    def breakdown(
        self, book: str, category: str, attribute: str | None = None
    ) -> BreakdownResult:
        return bd.breakdown(book, self._ensure_loaded(book), category, attribute)

    def chapter_text(
        self,
        book: str,
        chapter: str | int,
        selection: Selection | None = None,
        paragraphs: Any = None,
        notice: str = "",
    ) -> ChapterText:
        selection = normalize_selection(selection or Selection())
        return chapter_text(
            book,
            str(chapter),
            self.chapter_data(book, chapter),
            selection,
            paragraphs=paragraphs,
            notice=notice,
        )

    async def chapter_text_async(
        self,
        book: str,
        chapter: str | int,
        selection: Selection | None = None,
        paragraph_mode: bool = False,
    ) -> ChapterText:
        """Chapter text, fetching the paragraph document in paragraph mode."""
        self.chapter_data(book, chapter)
        if not paragraph_mode:
            return self.chapter_text(book, chapter, selection)
        paragraphs, notice = await self.fetch_paragraphs(book, chapter)
        return self.chapter_text(
            book, chapter, selection, paragraphs=paragraphs, notice=notice
        )

    async def fetch_paragraphs(self, book: str, chapter: str | int) -> tuple[Any, str]:
        """Paragraph document and notice; (None, notice) when it cannot be read.

        Only reads the paragraph store, never the loaded book.
        """
        try:
            paragraphs = await self.store.fetch_paragraphs(book, str(chapter))
        except (OSError, ValueError) as e:
            logger.error("Failed to fetch paragraphs for %s %s: %s", book, chapter, e)
            return None, PARAGRAPH_LOAD_ERROR
        return paragraphs, ""

    def matching_words(
        self, book: str, chapter: str | int, selection: Selection
    ) -> list[dict[str, Any]]:
        """Words of a chapter that the selection highlights, in text order."""
        selection = normalize_selection(selection)
        matches = build_matcher(selection.category, selection.attribute, selection.value)
        return [
            {"text": w.surface, "pos_tag": w.pos_tag, "reference": w.book_chapter_verse}
            for w in iter_words(self.chapter_data(book, chapter))
            if matches(w)
        ]

    def describe_tag(self, tag: str) -> TagDescription:
        category = classify(tag)
        attrs = decode_tag(tag)
        fields: dict[str, str] = {}
        if attrs is not None:
            fields = {
                k: v
                for k, v in attrs.model_dump(exclude={"category", "form"}).items()
                if v
            }
        return TagDescription(
            tag=normalize_tag(tag),
            category=category.value if category else None,
            description=describe(tag),
            interpretation=interpret(tag),
            attributes=fields,
        )

    def grammar(self) -> dict[str, Any]:
        """Grammar tables, for building selectors."""
        return {
            "categories": [c.value for c in CATEGORIES],
            "shapes": {c.value: s.value for c, s in BREAKDOWN_SHAPES.items()},
            "attributes": {c.value: a for c, a in BREAKDOWN_ATTRIBUTES.items()},
            "default_attributes": {c.value: a for c, a in DEFAULT_ATTRIBUTE.items()},
            "filter_options": {c.value: o for c, o in FILTER_OPTIONS.items() if o},
            "conjunction_types": CONJUNCTION_TYPES,
        }
