"""Decoded tag models: one attribute shape per category."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from morph_explorer.grammar import Category


class VerbForm(str, Enum):
    """Which fields follow the mood letter in a verb tag."""

    finite = "finite"  # person, number
    participle = "participle"  # case, number, gender
    infinitive = "infinitive"  # nothing
    unknown = ""  # mood missing or unrecognised


class NounAttributes(BaseModel):
    category: Literal[Category.Noun] = Category.Noun
    case: str = ""
    number: str = ""
    gender: str = ""


class ArticleAttributes(BaseModel):
    category: Literal[Category.Article] = Category.Article
    case: str = ""
    number: str = ""
    gender: str = ""


class VerbAttributes(BaseModel):
    category: Literal[Category.Verb] = Category.Verb
    tense: str = ""
    voice: str = ""
    mood: str = ""
    person: str = ""
    number: str = ""
    case: str = ""  # participles only
    gender: str = ""  # participles only
    form: VerbForm = VerbForm.unknown

    @property
    def is_participle(self) -> bool:
        return self.form == VerbForm.participle


class AdjectiveAttributes(BaseModel):
    category: Literal[Category.Adjective] = Category.Adjective
    case: str = ""
    number: str = ""
    gender: str = ""
    degree: str = ""


class PronounAttributes(BaseModel):
    category: Literal[Category.Pronoun] = Category.Pronoun
    type: str = ""
    person: str = ""
    case: str = ""
    number: str = ""
    gender: str = ""
    subtype: str = ""


class ConjunctionAttributes(BaseModel):
    """Two-level conjunction classification.

    ``subtype`` holds the combined type+subtype code (e.g. "LN") so that a
    subtype never matches under the wrong type.
    """

    category: Literal[Category.Conjunction] = Category.Conjunction
    type: str = ""
    subtype: str = ""
    type_name: str = ""
    subtype_name: str = ""


class AdverbAttributes(BaseModel):
    category: Literal[Category.Adverb] = Category.Adverb
    type: str = ""


class ParticleAttributes(BaseModel):
    category: Literal[Category.Particle] = Category.Particle
    type: str = ""


class IndeclinableAttributes(BaseModel):
    category: Literal[Category.Indeclinable] = Category.Indeclinable
    type: str = ""


class InterjectionAttributes(BaseModel):
    category: Literal[Category.Interjection] = Category.Interjection
    type: str = ""  # "I" when the tag is an interjection


class PrepositionAttributes(BaseModel):
    category: Literal[Category.Preposition] = Category.Preposition
    type: str = ""  # "P" when the tag is a preposition


AttributeSet = Annotated[
    Union[
        NounAttributes,
        VerbAttributes,
        AdjectiveAttributes,
        PronounAttributes,
        ArticleAttributes,
        PrepositionAttributes,
        ConjunctionAttributes,
        AdverbAttributes,
        ParticleAttributes,
        InterjectionAttributes,
        IndeclinableAttributes,
    ],
    Field(discriminator="category"),
]

ATTRIBUTE_MODELS: dict[Category, type[BaseModel]] = {
    Category.Noun: NounAttributes,
    Category.Verb: VerbAttributes,
    Category.Adjective: AdjectiveAttributes,
    Category.Pronoun: PronounAttributes,
    Category.Article: ArticleAttributes,
    Category.Preposition: PrepositionAttributes,
    Category.Conjunction: ConjunctionAttributes,
    Category.Adverb: AdverbAttributes,
    Category.Particle: ParticleAttributes,
    Category.Interjection: InterjectionAttributes,
    Category.Indeclinable: IndeclinableAttributes,
}


def empty_attributes(category: Category) -> BaseModel:
    """All-empty attribute set of the shape used by ``category``."""
    return ATTRIBUTE_MODELS[category]()


def field_value(attrs: BaseModel, attribute: str) -> str | None:
    """Decoded code for ``attribute``, or None if the shape has no such field."""
    key = attribute.lower()
    if key == "category" or key not in type(attrs).model_fields:
        return None
    return getattr(attrs, key)
