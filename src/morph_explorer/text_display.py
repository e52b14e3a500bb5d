"""Chapter text assembly with highlighted words, for the text panel."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from morph_explorer.corpus import base_verse, merge_verse_variants
from morph_explorer.decoder import interpret
from morph_explorer.grammar import Category, display_name, parse_category
from morph_explorer.highlight import PARTICIPLE_ONLY, build_matcher
from morph_explorer.models import (
    ChapterText,
    Selection,
    VerseView,
    Word,
    WordTooltip,
    WordView,
)

logger = logging.getLogger(__name__)

PARAGRAPH_FALLBACK = "Invalid paragraph data format. Falling back to verse-by-verse mode."


def filter_description(selection: Selection) -> str:
    """One-line summary of what is highlighted."""
    category = parse_category(selection.category)
    if category is None:
        return ""
    attribute, value = selection.attribute, selection.value
    if not attribute or not value:
        return f"Highlighting all {category.value}s"

    shown = display_name(category, attribute, value)
    if category == Category.Verb:
        if attribute in PARTICIPLE_ONLY:
            return f"Highlighting Participle verbs with {attribute}: {shown}"
        if attribute == "mood" and value == "P":
            return "Highlighting Participle verbs"
    return f"Highlighting {category.value}s with {attribute}: {shown}"


def tooltip(word: Word) -> WordTooltip:
    return WordTooltip(
        lemma=word.lemma or "N/A",
        gloss=word.gloss or "No gloss available",
        literal=word.literal or "No literal available",
        part_of_speech=interpret(word.pos_tag),
        louw=word.louw or "N/A",
        strong=word.strong or "N/A",
    )


def _verse_label(words: list[Word], key: str) -> str:
    """Verse number from the last two digits of the word reference."""
    ref = words[0].book_chapter_verse if words else None
    if ref and len(ref) >= 2 and ref[-2:].isdigit():
        return str(int(ref[-2:]))
    return key


def _verse_view(
    key: str, entries: list[Any], matches: Callable[[Word], bool]
) -> VerseView | None:
    words: list[Word] = []
    for entry in entries:
        try:
            word = entry if isinstance(entry, Word) else Word.model_validate(entry)
        except ValidationError:
            logger.warning("Skipping invalid word in verse %s: %r", key, entry)
            continue
        if not word.surface:
            logger.warning("Skipping word without surface form in verse %s", key)
            continue
        words.append(word)
    if not words:
        logger.warning("Verse %s has no displayable words", key)
        return None
    return VerseView(
        verse=key,
        label=_verse_label(words, key),
        words=[
            WordView(
                text=w.surface,
                pos_tag=w.pos_tag,
                highlighted=matches(w),
                tooltip=tooltip(w),
            )
            for w in words
        ],
    )


def verse_mode(
    chapter_data: Mapping[str, Any], matches: Callable[[Word], bool]
) -> list[VerseView]:
    """One entry per verse, variants merged, in numeric verse order."""
    verses = []
    for key, entries in merge_verse_variants(chapter_data).items():
        view = _verse_view(key, entries, matches)
        if view is not None:
            verses.append(view)
    return verses


def paragraph_mode(
    chapter_data: Mapping[str, Any],
    paragraphs: list[Any],
    matches: Callable[[Word], bool],
) -> list[list[VerseView]]:
    """Verses grouped by the paragraph document (lists of verse numbers).

    Variant verses ("3a") are shown with their base verse.
    """
    merged = merge_verse_variants(chapter_data)
    result = []
    for index, verse_numbers in enumerate(paragraphs):
        if not isinstance(verse_numbers, list):
            logger.warning("Paragraph %d is not a list, skipping", index + 1)
            continue
        group = []
        for num in verse_numbers:
            key = base_verse(str(num))
            entries = merged.get(key)
            if not isinstance(entries, list):
                logger.warning("Verse data for %s not found in chapter", key)
                continue
            view = _verse_view(key, entries, matches)
            if view is not None:
                group.append(view)
        result.append(group)
    return result


def chapter_text(
    book: str,
    chapter: str,
    chapter_data: Mapping[str, Any],
    selection: Selection | None = None,
    paragraphs: Any = None,
    notice: str = "",
) -> ChapterText:
    """Assemble a chapter for display.

    Paragraph mode is used when ``paragraphs`` is given; a malformed
    paragraph document falls back to verse-by-verse mode with a notice.
    """
    selection = selection or Selection()
    matches = build_matcher(selection.category, selection.attribute, selection.value)
    text = ChapterText(
        book=book,
        chapter=str(chapter),
        heading=f"{book} {chapter}",
        filter_description=filter_description(selection),
        notice=notice,
    )
    if paragraphs is not None and not isinstance(paragraphs, list):
        logger.error("Invalid paragraph data format for %s %s", book, chapter)
        text.notice = PARAGRAPH_FALLBACK
        paragraphs = None

    if paragraphs is None:
        text.verses = verse_mode(chapter_data, matches)
    else:
        text.mode = "paragraph"
        text.paragraphs = paragraph_mode(chapter_data, paragraphs, matches)
    return text
