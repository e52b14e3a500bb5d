from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Word(BaseModel):
    model_config = ConfigDict(extra="allow")

    pos_tag: str = Field(min_length=1)
    word_forms: list[str] = Field(default_factory=list)
    gloss: str | None = None
    literal: str | None = None
    louw: str | None = None
    strong: str | None = None
    book_chapter_verse: str | None = None

    @field_validator("gloss", "literal", "louw", "strong", "book_chapter_verse", mode="before")
    @classmethod
    def _as_text(cls, v: Any) -> Any:
        # Reference fields arrive as numbers or lists in some books
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (list, tuple)):
            return ", ".join(str(x) for x in v)
        return str(v)

    @field_validator("word_forms", mode="before")
    @classmethod
    def _forms_as_text(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return ["" if x is None else str(x) for x in v]
        return v

    @property
    def surface(self) -> str:
        return self.word_forms[0] if self.word_forms else ""

    @property
    def lemma(self) -> str:
        return self.word_forms[3] if len(self.word_forms) > 3 else ""


class BookInfo(BaseModel):
    name: str
    chapters: int


class Selection(BaseModel):
    """A highlight filter: category, optionally narrowed to attribute=value."""

    category: str | None = None
    attribute: str | None = None
    value: str | None = None


class BreakdownResult(BaseModel):
    title: str
    shape: str
    category: str | None = None
    attribute: str | None = None
    y_axis: str = "Category"
    row_labels: list[str]
    row_codes: list[str]
    column_labels: list[str]
    cells: list[list[int]]

    def total(self) -> int:
        return sum(sum(row) for row in self.cells)


class WordTooltip(BaseModel):
    lemma: str = "N/A"
    gloss: str = "No gloss available"
    literal: str = "No literal available"
    part_of_speech: str = ""
    louw: str = "N/A"
    strong: str = "N/A"


class WordView(BaseModel):
    text: str
    pos_tag: str
    highlighted: bool = False
    tooltip: WordTooltip


class VerseView(BaseModel):
    verse: str
    label: str
    words: list[WordView]


class ChapterText(BaseModel):
    book: str
    chapter: str
    heading: str
    filter_description: str = ""
    mode: str = "verse"  # "verse" or "paragraph"
    notice: str = ""
    verses: list[VerseView] = Field(default_factory=list)
    paragraphs: list[list[VerseView]] = Field(default_factory=list)

    def highlighted_words(self) -> list[WordView]:
        groups = self.paragraphs if self.mode == "paragraph" else [self.verses]
        return [w for group in groups for v in group for w in v.words if w.highlighted]


class TagDescription(BaseModel):
    tag: str
    category: str | None = None
    description: str = ""
    interpretation: str
    attributes: dict[str, str] = Field(default_factory=dict)
