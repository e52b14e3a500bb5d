"""Chapter-by-chapter count matrices for the overview and breakdown views.

Every matrix is recomputed from the book data on request. Each cell is
counted independently; a cell whose traversal fails is marked as failed and
the whole matrix is rejected with ``BreakdownError`` rather than returned
with holes in it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, NamedTuple

from morph_explorer.corpus import NoDataError, count_words, sorted_chapter_items
from morph_explorer.decoder import classify, decode
from morph_explorer.grammar import (
    BREAKDOWN_ATTRIBUTES,
    BREAKDOWN_SHAPES,
    CATEGORIES,
    CONJUNCTION_TYPES,
    DEFAULT_ATTRIBUTE,
    FILTER_OPTIONS,
    BreakdownShape,
    Category,
    conjunction_type_code,
    conjunction_type_names,
    parse_category,
)
from morph_explorer.models import BreakdownResult, Selection, Word
from morph_explorer.tag_models import field_value

logger = logging.getLogger(__name__)


class BreakdownError(RuntimeError):
    """A count matrix could not be computed in full."""

    def __init__(self, title: str, failed: list[tuple[str, str]]) -> None:
        self.title = title
        self.failed = failed
        cells = ", ".join(f"{row}/{chap}" for row, chap in failed[:5])
        super().__init__(f"Could not compute breakdown '{title}' (failed cells: {cells})")


class Row(NamedTuple):
    label: str
    code: str
    matches: Callable[[Word], bool]


def _in_category(category: Category) -> Callable[[Word], bool]:
    def matches(word: Word) -> bool:
        return classify(word.pos_tag) == category

    return matches


def _attribute_equals(
    category: Category, attribute: str, code: str
) -> Callable[[Word], bool]:
    def matches(word: Word) -> bool:
        if classify(word.pos_tag) != category:
            return False
        return field_value(decode(category, word.pos_tag), attribute) == code

    return matches


def _conjunction_subtype(type_code: str, sub_code: str) -> Callable[[Word], bool]:
    def matches(word: Word) -> bool:
        if classify(word.pos_tag) != Category.Conjunction:
            return False
        attrs = decode(Category.Conjunction, word.pos_tag)
        return attrs.type == type_code and attrs.subtype == type_code + sub_code

    return matches


def _count_cell(chapter_data: Any, matches: Callable[[Word], bool]) -> int | None:
    """Count one cell; None marks a failed traversal."""
    try:
        return count_words(chapter_data, matches)
    except Exception:
        logger.exception("Error counting chapter cell")
        return None


def build_matrix(
    book_data: Mapping[str, Any],
    rows: list[Row],
    *,
    title: str,
    shape: BreakdownShape,
    category: Category | None = None,
    attribute: str | None = None,
    y_axis: str = "Category",
) -> BreakdownResult:
    """Count ``rows`` x chapters over ``book_data``.

    A missing, empty or non-mapping chapter raises NoDataError; it is not
    counted as zero.
    """
    if not book_data:
        raise NoDataError("No chapters loaded")
    chapters = sorted_chapter_items(book_data)
    empty = [
        label for label, data in chapters if not isinstance(data, Mapping) or not data
    ]
    if empty:
        raise NoDataError(
            f"No data available for chapter(s) {', '.join(empty)} in {title}"
        )

    cells: list[list[int | None]] = []
    failed: list[tuple[str, str]] = []
    for row in rows:
        counts = []
        for chap, chapter_data in chapters:
            n = _count_cell(chapter_data, row.matches)
            if n is None:
                logger.error("Failed to count %s in chapter %s for %s", row.label, chap, title)
                failed.append((row.label, chap))
            counts.append(n)
        cells.append(counts)

    if failed:
        raise BreakdownError(title, failed)

    return BreakdownResult(
        title=title,
        shape=shape.value,
        category=category.value if category else None,
        attribute=attribute,
        y_axis=y_axis,
        row_labels=[r.label for r in rows],
        row_codes=[r.code for r in rows],
        column_labels=[label for label, _ in chapters],
        cells=cells,
    )


def overview(book: str, book_data: Mapping[str, Any]) -> BreakdownResult:
    """Word counts for every category by chapter."""
    rows = [Row(cat.value, cat.value, _in_category(cat)) for cat in CATEGORIES]
    return build_matrix(
        book_data,
        rows,
        title=f"{book} - Word Frequency by Category",
        shape=BreakdownShape.frequency,
        y_axis="Part of Speech",
    )


def simple_frequency(
    book: str, book_data: Mapping[str, Any], category: Category
) -> BreakdownResult:
    rows = [Row(category.value, category.value, _in_category(category))]
    return build_matrix(
        book_data,
        rows,
        title=f"{book} - {category.value} Frequency",
        shape=BreakdownShape.frequency,
        category=category,
    )


def single_attribute(
    book: str, book_data: Mapping[str, Any], category: Category
) -> BreakdownResult:
    """One row per code of the category's 'type' table, zero rows included."""
    options = FILTER_OPTIONS[category].get("type")
    if not options:
        raise ValueError(f"No type options available for {category.value}")
    rows = [
        Row(name, code, _attribute_equals(category, "type", code))
        for code, name in options.items()
    ]
    return build_matrix(
        book_data,
        rows,
        title=f"{book} - {category.value} Types",
        shape=BreakdownShape.single,
        category=category,
        attribute="type",
        y_axis="Type",
    )


def attribute_breakdown(
    book: str, book_data: Mapping[str, Any], category: Category, attribute: str
) -> BreakdownResult:
    """One row per code of ``attribute`` for a multi-attribute category."""
    attribute = attribute.lower()
    if attribute not in BREAKDOWN_ATTRIBUTES.get(category, []):
        raise ValueError(
            f"Unknown attribute '{attribute}' for {category.value}. "
            f"Available: {BREAKDOWN_ATTRIBUTES.get(category, [])}"
        )
    options = FILTER_OPTIONS[category][attribute]
    rows = [
        Row(name, code, _attribute_equals(category, attribute, code))
        for code, name in options.items()
    ]
    title_attr = attribute.capitalize()
    return build_matrix(
        book_data,
        rows,
        title=f"{book} - {category.value} Breakdown by {title_attr}",
        shape=BreakdownShape.multi,
        category=category,
        attribute=attribute,
        y_axis=title_attr,
    )


def conjunction_breakdown(
    book: str, book_data: Mapping[str, Any], type_name: str
) -> BreakdownResult:
    """One row per subtype of a conjunction type (Logical, Adverbial, ...).

    Row codes are the combined type+subtype codes used for highlighting.
    """
    type_code = conjunction_type_code(type_name)
    if type_code is None:
        raise ValueError(
            f"Unknown conjunction type '{type_name}'. "
            f"Available: {conjunction_type_names()}"
        )
    info = CONJUNCTION_TYPES[type_code]
    rows = [
        Row(name, type_code + sub_code, _conjunction_subtype(type_code, sub_code))
        for sub_code, name in info["subtypes"].items()
    ]
    return build_matrix(
        book_data,
        rows,
        title=f"{book} - {info['name']} Conjunctions",
        shape=BreakdownShape.conjunction,
        category=Category.Conjunction,
        attribute="subtype",
        y_axis="Subtype",
    )


def breakdown(
    book: str,
    book_data: Mapping[str, Any],
    category: str | Category,
    attribute: str | None = None,
) -> BreakdownResult:
    """Breakdown matrix for a category, in the shape that category uses.

    ``attribute`` is the grouping attribute for multi-attribute categories
    and the type name for conjunctions; it is ignored otherwise.
    """
    cat = parse_category(category)
    if cat is None:
        raise ValueError(f"Unknown category '{category}'")

    shape = BREAKDOWN_SHAPES[cat]
    if shape == BreakdownShape.frequency:
        return simple_frequency(book, book_data, cat)
    if shape == BreakdownShape.single:
        return single_attribute(book, book_data, cat)
    if shape == BreakdownShape.conjunction:
        return conjunction_breakdown(
            book, book_data, attribute or conjunction_type_names()[0]
        )
    return attribute_breakdown(book, book_data, cat, attribute or DEFAULT_ATTRIBUTE[cat])


def resolve_click(result: BreakdownResult, row_label: str) -> Selection | None:
    """Highlight selection for a clicked row of a matrix.

    Returns None (and logs) when the label is not a row of the matrix.
    """
    try:
        index = result.row_labels.index(row_label)
    except ValueError:
        logger.warning("Could not find code for label %r in %s", row_label, result.title)
        return None
    code = result.row_codes[index]
    if result.category is None:
        # Overview: rows are categories
        return Selection(category=code)
    if result.attribute is None:
        return Selection(category=result.category)
    return Selection(category=result.category, attribute=result.attribute, value=code)
