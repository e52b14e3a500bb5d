"""Corpus access: book documents, chapter ordering and word traversal.

A book document maps chapter keys to verse mappings, and verse keys to
ordered lists of word entries::

    {"John": {"1": {"1": [{"pos_tag": "P", "word_forms": [...]}, ...]}}}

Verse keys may carry a variant letter ("3a", "3b"); these are merged into
their base verse for display.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import re
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from morph_explorer.models import Word

logger = logging.getLogger(__name__)

# Default corpus directory (override with CORPUS_DIR env var)
CORPUS_DIR = Path(
    os.environ.get("CORPUS_DIR", Path(__file__).parent.parent.parent / "sblgnt_json")
)

VERSE_KEY = re.compile(r"^(\d+)([a-z]?)$")


class NoDataError(LookupError):
    """Requested book or chapter has no data."""


def _numeric_key(key: str) -> tuple[int, float, str]:
    try:
        return (0, float(key), key)
    except ValueError:
        return (1, 0.0, key)


def sorted_chapters(book_data: Mapping[str, Any]) -> list[str]:
    """Chapter keys in numeric order ("10" after "9")."""
    return sorted((str(k) for k in book_data), key=_numeric_key)


def sorted_chapter_items(book_data: Mapping[Any, Any]) -> list[tuple[str, Any]]:
    """(chapter label, chapter data) pairs in numeric chapter order."""
    items = [(str(k), v) for k, v in book_data.items()]
    return sorted(items, key=lambda item: _numeric_key(item[0]))


def iter_words(chapter_data: Any) -> Iterator[Word]:
    """Yield every well-formed word of a chapter in stored order.

    Verses that are not lists and word entries without a tag are skipped
    with a warning.
    """
    if not isinstance(chapter_data, Mapping):
        logger.warning("Chapter data is not a mapping, skipping")
        return
    for verse, entries in chapter_data.items():
        if not isinstance(entries, list):
            logger.warning("Data for verse %s is not a list, skipping", verse)
            continue
        for entry in entries:
            if isinstance(entry, Word):
                yield entry
                continue
            try:
                yield Word.model_validate(entry)
            except ValidationError:
                logger.warning("Skipping malformed word in verse %s: %r", verse, entry)


def for_each_word(chapter_data: Any, visit: Callable[[Word], None]) -> None:
    for word in iter_words(chapter_data):
        visit(word)


def count_words(chapter_data: Any, predicate: Callable[[Word], bool]) -> int:
    return sum(1 for word in iter_words(chapter_data) if predicate(word))


def base_verse(key: str) -> str:
    """Verse key without its variant letter ("12a" -> "12")."""
    m = VERSE_KEY.match(str(key))
    return m.group(1) if m else str(key)


def merge_verse_variants(chapter_data: Mapping[str, Any]) -> dict[str, list[Any]]:
    """Group verse variants under their base verse, sorted numerically.

    Entries keep their original relative order. Non-list verse values are
    skipped; individual entries are passed through untouched.
    """
    merged: dict[str, list[Any]] = {}
    for key, entries in chapter_data.items():
        base = base_verse(key)
        bucket = merged.setdefault(base, [])
        if isinstance(entries, list):
            bucket.extend(entries)
        else:
            logger.warning("Data for verse %s is not a list, skipping", key)
    return {k: merged[k] for k in sorted(merged, key=_numeric_key)}


class CorpusStore:
    """JSON file-based corpus source.

    Layout::

        books.json                              ["Matthew", "Mark", ...]
        <Book>.json                             {"<Book>": {chapter: {verse: [...]}}}
        paragraphs/<Book>/<NNN>-paragraphs.json [[1, 2, 3], [4, 5], ...]
    """

    def __init__(self, directory: Path = CORPUS_DIR) -> None:
        self.directory = Path(directory)

    def _read(self, path: Path) -> Any:
        if not path.exists():
            raise FileNotFoundError(f"Corpus file not found: {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed corpus file {path}: {e}") from e

    def list_books(self) -> list[str]:
        books = self._read(self.directory / "books.json")
        if not isinstance(books, list):
            raise ValueError("books.json must hold a list of book names")
        return [str(b) for b in books]

    def load_book(self, book: str) -> dict[str, Any]:
        """Chapter mapping for ``book``; NoDataError when missing or empty."""
        try:
            data = self._read(self.directory / f"{book}.json")
        except FileNotFoundError as e:
            raise NoDataError(f"No data available for {book}") from e
        book_data = data.get(book) if isinstance(data, dict) else None
        if not isinstance(book_data, dict) or not book_data:
            raise NoDataError(f"No data available for {book}")
        return book_data

    def paragraph_path(self, book: str, chapter: str) -> Path:
        return (
            self.directory
            / "paragraphs"
            / book
            / f"{str(chapter).zfill(3)}-paragraphs.json"
        )

    async def fetch_paragraphs(self, book: str, chapter: str) -> Any:
        """Paragraph grouping document for one chapter (verse-number lists)."""
        path = self.paragraph_path(book, chapter)
        return await asyncio.to_thread(self._read, path)
