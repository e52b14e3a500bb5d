"""Explorer session: the current book/category/attribute/chapter selection.

All view changes go through one session object. Each chapter display takes
a new selection token; a paragraph fetch that completes after a newer
selection was made is discarded instead of overwriting the newer view.
"""

from __future__ import annotations

import itertools
import logging

from morph_explorer.breakdown import resolve_click
from morph_explorer.engine import ExplorerEngine
from morph_explorer.grammar import parse_category
from morph_explorer.models import BreakdownResult, ChapterText, Selection

logger = logging.getLogger(__name__)


class ExplorerSession:
    def __init__(self, engine: ExplorerEngine) -> None:
        self.engine = engine
        self.book: str | None = None
        self.category: str | None = None
        self.attribute: str | None = None
        self.view: BreakdownResult | None = None
        self.paragraph_mode = False
        self.chapter: str | None = None
        self.selection: Selection | None = None
        self.text: ChapterText | None = None
        self._tokens = itertools.count(1)
        self._token = 0

    def _next_token(self) -> int:
        self._token = next(self._tokens)
        return self._token

    def is_current(self, token: int) -> bool:
        return token == self._token

    def _require_book(self) -> str:
        if self.book is None:
            raise ValueError("No book selected")
        return self.book

    def select_book(self, book: str) -> BreakdownResult:
        """Load a book and show its overview; closes any open text."""
        self.engine.load_book(book)
        self.book = book
        self.close_text()
        return self.show_overview()

    def show_overview(self) -> BreakdownResult:
        self.category = None
        self.attribute = None
        self.view = self.engine.overview(self._require_book())
        return self.view

    def select_category(
        self, category: str, attribute: str | None = None
    ) -> BreakdownResult:
        cat = parse_category(category)
        if cat is None:
            raise ValueError(f"Unknown category '{category}'")
        result = self.engine.breakdown(self._require_book(), cat.value, attribute)
        self.category = cat.value
        self.attribute = attribute
        self.view = result
        return result

    def select_attribute(self, attribute: str) -> BreakdownResult:
        """Regroup the current breakdown (attribute, or conjunction type name)."""
        if self.category is None:
            raise ValueError("No category selected")
        return self.select_category(self.category, attribute)

    async def show_chapter(
        self, chapter: str | int, selection: Selection | None = None
    ) -> ChapterText | None:
        """Display a chapter; returns None if a newer selection superseded it."""
        book = self._require_book()
        token = self._next_token()
        self.engine.chapter_data(book, chapter)
        paragraphs, notice = None, ""
        if self.paragraph_mode:
            paragraphs, notice = await self.engine.fetch_paragraphs(book, chapter)
        # A newer selection may have loaded another book while we waited
        if not self.is_current(token):
            logger.debug("Discarding stale chapter text for %s %s", book, chapter)
            return None
        text = self.engine.chapter_text(
            book, chapter, selection, paragraphs=paragraphs, notice=notice
        )
        self.chapter = str(chapter)
        self.selection = selection or Selection()
        self.text = text
        return text

    async def click(self, chapter: str | int, row_label: str) -> ChapterText | None:
        """Handle a click on a cell of the current matrix."""
        if self.view is None:
            raise ValueError("No matrix displayed")
        selection = resolve_click(self.view, row_label)
        if selection is None:
            return None
        if self.view.category is None and selection.category:
            # Overview click opens the category breakdown too
            self.select_category(selection.category)
        return await self.show_chapter(chapter, selection)

    async def set_paragraph_mode(self, enabled: bool) -> ChapterText | None:
        self.paragraph_mode = enabled
        if self.chapter is None:
            return None
        return await self.show_chapter(self.chapter, self.selection)

    def close_text(self) -> None:
        self._next_token()
        self.chapter = None
        self.selection = None
        self.text = None
