"""Deciding which words of a chapter to highlight for a selection."""

from __future__ import annotations

import logging
from collections.abc import Callable

from morph_explorer.decoder import classify, decode
from morph_explorer.grammar import (
    CONJUNCTION_TYPES,
    FILTER_OPTIONS,
    Category,
    code_for,
    conjunction_type_code,
    parse_category,
)
from morph_explorer.models import Selection, Word
from morph_explorer.tag_models import field_value

logger = logging.getLogger(__name__)

# Categories whose words carry no sub-attributes
UNATTRIBUTED = frozenset({Category.Interjection, Category.Preposition})

PARTICIPLE_ONLY = frozenset({"case", "gender", "number"})


def _conjunction_subtype_code(value: str) -> str | None:
    """Combined code for "LN", "Connective" or "Logical, Connective"."""
    value = value.strip()
    subtypes = FILTER_OPTIONS[Category.Conjunction]["subtype"]
    if value in subtypes:
        return value

    type_code = None
    if "," in value:
        type_part, value = (p.strip() for p in value.split(",", 1))
        type_code = conjunction_type_code(type_part)
        if type_code is None:
            return None

    wanted = value.lower()
    for code, info in CONJUNCTION_TYPES.items():
        if type_code is not None and code != type_code:
            continue
        for sub_code, name in info["subtypes"].items():
            if name.lower() == wanted or (type_code and sub_code == value):
                return code + sub_code
    return None


def resolve_value(category: Category, attribute: str, value: str) -> str | None:
    """Turn a filter value (code or display name) into the decoded code.

    Returns None when the value cannot be resolved.
    """
    if not value:
        return None
    if category == Category.Conjunction and attribute.lower() == "subtype":
        return _conjunction_subtype_code(value)
    return code_for(category, attribute, value)


def normalize_selection(selection: Selection) -> Selection:
    """Selection with its value resolved to a code where possible.

    The category is canonicalised; an unresolvable value is kept as-is,
    and will match nothing.
    """
    category = parse_category(selection.category)
    if category is None:
        return Selection()
    attribute = selection.attribute.lower() if selection.attribute else None
    value = selection.value
    if attribute and value and category not in UNATTRIBUTED:
        code = resolve_value(category, attribute, value)
        if code is None:
            logger.warning(
                "Could not resolve %s %s value %r", category.value, attribute, value
            )
        else:
            value = code
    return Selection(category=category.value, attribute=attribute, value=value)


def build_matcher(
    category: str | Category | None,
    attribute: str | None = None,
    value: str | None = None,
) -> Callable[[Word | str], bool]:
    """Predicate telling whether a word (or bare tag) should be highlighted."""
    target = parse_category(category)
    if target is None:
        return lambda word: False

    attr = attribute.lower() if attribute else None
    if not attr or not value or target in UNATTRIBUTED:
        # Category-only highlighting
        def match_category(word: Word | str) -> bool:
            return classify(_tag(word)) == target

        return match_category

    code = resolve_value(target, attr, value)
    if code is None:
        logger.warning("Could not resolve %s %s value %r", target.value, attr, value)
        return lambda word: False

    def match_attribute(word: Word | str) -> bool:
        tag = _tag(word)
        if classify(tag) != target:
            return False
        attrs = decode(target, tag)
        current = field_value(attrs, attr)
        if not current:
            return False
        if target == Category.Verb and attr in PARTICIPLE_ONLY:
            if not attrs.is_participle:
                return False
        return current == code

    return match_attribute


def should_highlight(
    word: Word | str,
    category: str | Category | None,
    attribute: str | None = None,
    value: str | None = None,
) -> bool:
    return build_matcher(category, attribute, value)(word)


def _tag(word: Word | str) -> str:
    return word if isinstance(word, str) else word.pos_tag
