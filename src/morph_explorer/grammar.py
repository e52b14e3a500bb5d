"""Tag grammar: category letters and code -> display name tables.

These tables are the single source of truth both for decoding tags into
readable labels and for turning a display name back into its code.
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Part-of-speech categories, in overview order."""

    Noun = "Noun"
    Verb = "Verb"
    Adjective = "Adjective"
    Pronoun = "Pronoun"
    Article = "Article"
    Preposition = "Preposition"
    Conjunction = "Conjunction"
    Adverb = "Adverb"
    Particle = "Particle"
    Interjection = "Interjection"
    Indeclinable = "Indeclinable"


class BreakdownShape(str, Enum):
    """How a category is broken down by chapter."""

    frequency = "frequency"  # one row, the category itself
    single = "single"  # rows = the 'type' table
    multi = "multi"  # rows = one selectable attribute table
    conjunction = "conjunction"  # rows = subtypes of one conjunction type


CATEGORIES: list[Category] = list(Category)

# First letter of a tag -> category
CATEGORY_LETTERS: dict[str, Category] = {
    "N": Category.Noun,
    "V": Category.Verb,
    "C": Category.Conjunction,
    "P": Category.Preposition,
    "J": Category.Adjective,
    "A": Category.Adjective,
    "R": Category.Pronoun,
    "D": Category.Article,
    "B": Category.Adverb,
    "T": Category.Particle,
    "I": Category.Interjection,
    "X": Category.Indeclinable,
}

# Placeholder used by the corpus for "not applicable"
EMPTY_CODE = "-"

CASE = {
    "N": "Nominative",
    "G": "Genitive",
    "D": "Dative",
    "A": "Accusative",
    "V": "Vocative",
}
NUMBER = {"S": "Singular", "P": "Plural", "D": "Dual"}
GENDER = {"M": "Masculine", "F": "Feminine", "N": "Neuter"}
PERSON = {"1": "1st Person", "2": "2nd Person", "3": "3rd Person"}

PARTICIPLE = "P"
INFINITIVE = "N"
FINITE_MOODS = frozenset("ISOM")

VERB_OPTIONS = {
    "tense": {
        "P": "Present",
        "I": "Imperfect",
        "F": "Future",
        "T": "Future-perfect",
        "A": "Aorist",
        "R": "Perfect",
        "L": "Pluperfect",
    },
    "voice": {"A": "Active", "M": "Middle", "P": "Passive", "U": "Middle-Passive"},
    "mood": {
        "I": "Indicative",
        "S": "Subjunctive",
        "O": "Optative",
        "M": "Imperative",
        "N": "Infinitive",
        "P": "Participle",
    },
    "person": PERSON,
    "number": NUMBER,
    "case": CASE,
    "gender": GENDER,
}

NOUN_OPTIONS = {"case": CASE, "number": NUMBER, "gender": GENDER}

ADJECTIVE_OPTIONS = {
    "case": CASE,
    "number": NUMBER,
    "gender": GENDER,
    "degree": {"C": "Comparative", "S": "Superlative", "O": "Other"},
}

PRONOUN_OPTIONS = {
    "type": {
        "R": "Relative",
        "C": "Reciprocal",
        "D": "Demonstrative",
        "K": "Correlative",
        "I": "Interrogative",
        "X": "Indefinite",
        "F": "Reflexive",
        "S": "Possessive",
        "P": "Personal",
    },
    "person": PERSON,
    "case": CASE,
    "number": NUMBER,
    "gender": GENDER,
    "subtype": {"A": "Intensive Attributive", "P": "Intensive Predicative"},
}

ARTICLE_OPTIONS = {"case": CASE, "number": NUMBER, "gender": GENDER}

# Adverbs and particles are tagged from the same type inventory.
ADVERB_OPTIONS = {
    "type": {
        "C": "Conditional",
        "K": "Correlative",
        "E": "Emphatic",
        "X": "Indefinite",
        "I": "Interrogative",
        "N": "Negative",
        "P": "Place",
        "S": "Superlative",
    }
}

PARTICLE_OPTIONS = {"type": dict(ADVERB_OPTIONS["type"])}

INDECLINABLE_OPTIONS = {
    "type": {
        "L": "Letter",
        "P": "Proper Noun",
        "N": "Numeral",
        "F": "Foreign Word",
        "O": "Other",
    }
}

# type code -> {name, subtypes}
CONJUNCTION_TYPES: dict[str, dict] = {
    "L": {
        "name": "Logical",
        "subtypes": {
            "A": "Ascensive",
            "N": "Connective",
            "C": "Contrastive",
            "K": "Correlative",
            "D": "Disjunctive",
            "M": "Emphatic",
            "X": "Explanatory",
            "I": "Inferential",
            "T": "Transitional",
        },
    },
    "A": {
        "name": "Adverbial",
        "subtypes": {
            "Z": "Causal",
            "M": "Comparative",
            "N": "Concessive",
            "C": "Conditional",
            "D": "Declarative",
            "L": "Local",
            "P": "Purpose",
            "R": "Result",
            "T": "Temporal",
        },
    },
    "S": {
        "name": "Substantival",
        "subtypes": {"C": "Content", "E": "Epexegetical"},
    },
}


def _conjunction_options() -> dict[str, dict[str, str]]:
    """Flat view of the conjunction table: type names and combined subtype codes."""
    subtypes = {}
    for type_code, info in CONJUNCTION_TYPES.items():
        for sub_code, name in info["subtypes"].items():
            subtypes[type_code + sub_code] = name
    return {
        "type": {code: info["name"] for code, info in CONJUNCTION_TYPES.items()},
        "subtype": subtypes,
    }


FILTER_OPTIONS: dict[Category, dict[str, dict[str, str]]] = {
    Category.Verb: VERB_OPTIONS,
    Category.Noun: NOUN_OPTIONS,
    Category.Adjective: ADJECTIVE_OPTIONS,
    Category.Pronoun: PRONOUN_OPTIONS,
    Category.Article: ARTICLE_OPTIONS,
    Category.Conjunction: _conjunction_options(),
    Category.Adverb: ADVERB_OPTIONS,
    Category.Particle: PARTICLE_OPTIONS,
    Category.Indeclinable: INDECLINABLE_OPTIONS,
    Category.Interjection: {},
    Category.Preposition: {},
}

# Attributes offered in the "group by" selector. Verb case/gender rows only
# ever count participles.
BREAKDOWN_ATTRIBUTES: dict[Category, list[str]] = {
    Category.Verb: list(VERB_OPTIONS),
    Category.Noun: list(NOUN_OPTIONS),
    Category.Adjective: list(ADJECTIVE_OPTIONS),
    Category.Pronoun: list(PRONOUN_OPTIONS),
    Category.Article: list(ARTICLE_OPTIONS),
}

DEFAULT_ATTRIBUTE: dict[Category, str] = {
    Category.Verb: "tense",
    Category.Noun: "case",
    Category.Adjective: "case",
    Category.Pronoun: "type",
    Category.Article: "case",
}

BREAKDOWN_SHAPES: dict[Category, BreakdownShape] = {
    Category.Interjection: BreakdownShape.frequency,
    Category.Preposition: BreakdownShape.frequency,
    Category.Adverb: BreakdownShape.single,
    Category.Particle: BreakdownShape.single,
    Category.Indeclinable: BreakdownShape.single,
    Category.Verb: BreakdownShape.multi,
    Category.Noun: BreakdownShape.multi,
    Category.Adjective: BreakdownShape.multi,
    Category.Pronoun: BreakdownShape.multi,
    Category.Article: BreakdownShape.multi,
    Category.Conjunction: BreakdownShape.conjunction,
}


def parse_category(name: str | Category | None) -> Category | None:
    """Return the category for a name (case-insensitive), or None."""
    if name is None or isinstance(name, Category):
        return name
    for cat in Category:
        if cat.value.lower() == str(name).strip().lower():
            return cat
    return None


def options_for(category: Category, attribute: str) -> dict[str, str] | None:
    """Code -> display name table for one attribute of a category."""
    return FILTER_OPTIONS.get(category, {}).get(attribute.lower())


def display_name(category: Category, attribute: str, code: str) -> str:
    """Display name for a code, or the code itself when it is not in the table."""
    if not code:
        return code
    options = options_for(category, attribute) or {}
    return options.get(code, code)


def code_for(category: Category, attribute: str, value: str) -> str | None:
    """Resolve a code or display name to a code.

    Codes are matched exactly, display names case-insensitively. Returns
    None when the value is in neither form.
    """
    options = options_for(category, attribute)
    if not options or not value:
        return None
    value = value.strip()
    if value in options:
        return value
    wanted = value.lower()
    for code, name in options.items():
        if name.lower() == wanted:
            return code
    return None


def conjunction_type_code(type_name: str) -> str | None:
    """Type code ('L', 'A', 'S') for a conjunction type name or code."""
    if not type_name:
        return None
    type_name = type_name.strip()
    if type_name in CONJUNCTION_TYPES:
        return type_name
    for code, info in CONJUNCTION_TYPES.items():
        if info["name"].lower() == type_name.lower():
            return code
    return None


def conjunction_type_names() -> list[str]:
    return [info["name"] for info in CONJUNCTION_TYPES.values()]
