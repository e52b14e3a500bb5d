"""Positional tag decoding.

A tag is a category letter followed by positional field codes, e.g.
``VAAI1P`` (verb: aorist active indicative, 1st person plural) or ``CLN``
(conjunction: logical, connective). None of the functions here raise:
unknown letters and short tags decode to empty fields.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from morph_explorer.grammar import (
    CASE,
    CATEGORY_LETTERS,
    CONJUNCTION_TYPES,
    EMPTY_CODE,
    FILTER_OPTIONS,
    FINITE_MOODS,
    GENDER,
    INFINITIVE,
    NUMBER,
    PARTICIPLE,
    Category,
)
from morph_explorer.tag_models import (
    ConjunctionAttributes,
    VerbAttributes,
    VerbForm,
    empty_attributes,
)

logger = logging.getLogger(__name__)

# Fixed field layouts, read positionally from the payload
LAYOUTS: dict[Category, list[str]] = {
    Category.Noun: ["case", "number", "gender"],
    Category.Article: ["case", "number", "gender"],
    Category.Adjective: ["case", "number", "gender", "degree"],
    Category.Pronoun: ["type", "person", "case", "number", "gender", "subtype"],
    Category.Adverb: ["type"],
    Category.Particle: ["type"],
    Category.Indeclinable: ["type"],
}

# Categories without attributes decode to a fixed marker
MARKERS = {Category.Interjection: "I", Category.Preposition: "P"}

DESCRIPTION_LABELS = {Category.Article: "Definite Article"}

_CNG = [("case", CASE), ("number", NUMBER), ("gender", GENDER)]


def normalize_tag(tag: object) -> str:
    """Strip a tag down to its code part (before any comma suffix)."""
    if not tag or not isinstance(tag, str):
        return ""
    return tag.split(",")[0].strip()


def classify(tag: object) -> Category | None:
    """Category of a tag by its first letter, or None."""
    code = normalize_tag(tag)
    if not code:
        return None
    return CATEGORY_LETTERS.get(code[0])


def _char(payload: str, index: int) -> str:
    """Code at ``index``; missing positions and the '-' placeholder are empty."""
    if index >= len(payload):
        return ""
    ch = payload[index]
    return "" if ch == EMPTY_CODE else ch


def _recognized(options: dict[str, str], code: str) -> str:
    return code if code in options else ""


def _verb_fields(payload: str) -> list[tuple[str, str]]:
    """Raw (field, code) pairs of a verb payload, branching on the mood."""
    mood = _char(payload, 2)
    fields = [
        ("tense", _char(payload, 0)),
        ("voice", _char(payload, 1)),
        ("mood", mood),
    ]
    if mood == PARTICIPLE:
        rest = payload[3:]
        # Participles tagged with the finite layout keep case/gender at 5-6
        if len(rest) > 3:
            fields += [
                ("person", _char(payload, 3)),
                ("number", _char(payload, 4)),
                ("case", _char(payload, 5)),
                ("gender", _char(payload, 6)),
            ]
        else:
            # Compact participles ("VPAPNSM") carry case, number, gender right
            # after the mood, so number is read from the block, not position 4
            fields += [(name, _char(rest, i)) for i, (name, _) in enumerate(_CNG)]
    elif mood != INFINITIVE:
        fields += [("person", _char(payload, 3)), ("number", _char(payload, 4))]
    return fields


def _verb_form(mood: str) -> VerbForm:
    if mood == PARTICIPLE:
        return VerbForm.participle
    if mood == INFINITIVE:
        return VerbForm.infinitive
    if mood in FINITE_MOODS:
        return VerbForm.finite
    return VerbForm.unknown


def _decode_conjunction(payload: str) -> ConjunctionAttributes:
    type_code = _char(payload, 0)
    info = CONJUNCTION_TYPES.get(type_code)
    if info is None:
        if type_code:
            logger.debug("Unrecognised conjunction type %r", type_code)
        return ConjunctionAttributes()
    sub_code = _char(payload, 1)
    return ConjunctionAttributes(
        type=type_code,
        subtype=type_code + sub_code if sub_code else "",
        type_name=info["name"],
        subtype_name=info["subtypes"].get(sub_code, ""),
    )


def raw_fields(category: Category, tag: object) -> list[tuple[str, str]]:
    """Positional (field, code) pairs before any table lookup.

    Codes are returned as found, recognised or not; only absent positions
    and '-' placeholders come back empty.
    """
    code = normalize_tag(tag)
    if classify(code) != category:
        return []
    payload = code[1:]
    if category == Category.Verb:
        return _verb_fields(payload)
    if category == Category.Conjunction:
        return [("type", _char(payload, 0)), ("subtype", _char(payload, 1))]
    if category in MARKERS:
        return []
    return [(name, _char(payload, i)) for i, name in enumerate(LAYOUTS[category])]


def decode(category: Category, tag: object) -> BaseModel:
    """Decode ``tag`` into the attribute shape of ``category``.

    A tag of another category, an empty tag, or a short tag yields empty
    fields. Codes missing from the grammar tables are dropped to empty too.
    """
    attrs = empty_attributes(category)
    if classify(tag) != category:
        return attrs

    if category in MARKERS:
        return attrs.model_copy(update={"type": MARKERS[category]})
    if category == Category.Conjunction:
        return _decode_conjunction(normalize_tag(tag)[1:])

    options = FILTER_OPTIONS[category]
    values = {
        name: _recognized(options[name], code)
        for name, code in raw_fields(category, tag)
    }
    if category == Category.Verb:
        return VerbAttributes(form=_verb_form(values.get("mood", "")), **values)
    return attrs.model_copy(update=values)


def decode_tag(tag: object) -> BaseModel | None:
    """Classify and decode in one step; None for unknown categories."""
    category = classify(tag)
    if category is None:
        return None
    return decode(category, tag)


def _field_label(category: Category, name: str, code: str) -> str:
    options = FILTER_OPTIONS[category].get(name, {})
    if code in options:
        return options[code]
    logger.warning("Unrecognised %s %s code %r", category.value, name, code)
    return code


def describe(tag: object) -> str:
    """Readable, comma-joined field names for a tag.

    Empty fields are left out. A code that is present but not in the
    grammar is shown as-is so malformed source data stays visible.
    """
    category = classify(tag)
    if category is None or category in MARKERS:
        return ""
    fields = raw_fields(category, tag)
    if category == Category.Conjunction:
        attrs = _decode_conjunction(normalize_tag(tag)[1:])
        type_code, sub_code = fields[0][1], fields[1][1]
        if not attrs.type:
            return ", ".join(c for c in (type_code, sub_code) if c)
        return ", ".join(
            v for v in (attrs.type_name, attrs.subtype_name or sub_code) if v
        )
    return ", ".join(
        _field_label(category, name, code) for name, code in fields if code
    )


def interpret(tag: object) -> str:
    """Tooltip form of a tag, e.g. ``"Verb - Aorist, Active, Indicative, ..."``."""
    code = normalize_tag(tag)
    if not code:
        return "No POS data available"
    category = classify(code)
    if category is None:
        return f"Unknown POS Code: {code[0]}"
    label = DESCRIPTION_LABELS.get(category, category.value)
    details = describe(code)
    return f"{label} - {details}" if details else label
