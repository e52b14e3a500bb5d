"""Tests for ExplorerEngine against a corpus directory on disk."""

import asyncio

import pytest

from morph_explorer.corpus import NoDataError
from morph_explorer.engine import PARAGRAPH_LOAD_ERROR
from morph_explorer.models import Selection
from morph_explorer.text_display import PARAGRAPH_FALLBACK


class TestLoading:
    def test_list_books(self, engine):
        assert engine.list_books() == ["John", "Jude"]

    def test_load_book(self, engine):
        info = engine.load_book("John")
        assert info.name == "John"
        assert info.chapters == 4
        assert engine.current_book == "John"

    def test_failed_load_keeps_current_book(self, engine):
        engine.load_book("John")
        with pytest.raises(NoDataError):
            engine.load_book("Jude")
        assert engine.current_book == "John"

    def test_load_replaces_book(self, engine, corpus_dir):
        (corpus_dir / "Mark.json").write_text(
            '{"Mark": {"1": {"1": [{"pos_tag": "P", "word_forms": ["ἐν"]}]}}}',
            encoding="utf-8",
        )
        engine.load_book("John")
        engine.load_book("Mark")
        assert engine.current_book == "Mark"
        assert engine.chapters("Mark") == ["1"]

    def test_chapters_numeric(self, engine):
        assert engine.chapters("John") == ["1", "2", "3", "10"]

    def test_missing_chapter(self, engine):
        with pytest.raises(NoDataError, match="No data available for John 7"):
            engine.chapter_data("John", 7)


class TestQueries:
    def test_overview(self, engine):
        assert engine.overview("John").total() == 24

    def test_breakdown_default_attribute(self, engine):
        result = engine.breakdown("John", "Noun")
        assert result.attribute == "case"
        assert result.title == "John - Noun Breakdown by Case"

    def test_matching_words(self, engine):
        selection = Selection(category="Verb", attribute="tense", value="Imperfect")
        words = engine.matching_words("John", 1, selection)
        assert [w["text"] for w in words] == ["ἦν", "ἦν"]
        assert words[0]["reference"] == "0400101"

    def test_chapter_text_normalizes_selection(self, engine):
        text = engine.chapter_text(
            "John", 1, Selection(category="noun", attribute="Case", value="Nominative")
        )
        assert [w.text for w in text.highlighted_words()] == ["λόγος"]


class TestParagraphs:
    def test_paragraph_mode(self, engine):
        text = asyncio.run(engine.chapter_text_async("John", 1, paragraph_mode=True))
        assert text.mode == "paragraph"
        assert len(text.paragraphs) == 2

    def test_missing_document_falls_back(self, engine):
        text = asyncio.run(engine.chapter_text_async("John", 10, paragraph_mode=True))
        assert text.mode == "verse"
        assert text.notice == PARAGRAPH_LOAD_ERROR
        assert len(text.verses) == 1

    def test_malformed_document_falls_back(self, engine):
        text = asyncio.run(engine.chapter_text_async("John", 2, paragraph_mode=True))
        assert text.mode == "verse"
        assert text.notice == PARAGRAPH_FALLBACK

    def test_verse_mode(self, engine):
        text = asyncio.run(engine.chapter_text_async("John", 1))
        assert text.mode == "verse"
        assert text.notice == ""


class TestDescribeTag:
    def test_conjunction(self, engine):
        info = engine.describe_tag("CLN")
        assert info.category == "Conjunction"
        assert info.description == "Logical, Connective"
        assert info.attributes == {
            "type": "L",
            "subtype": "LN",
            "type_name": "Logical",
            "subtype_name": "Connective",
        }

    def test_participle(self, engine):
        info = engine.describe_tag("VPAPNSM")
        assert info.interpretation.startswith("Verb - Present, Active, Participle")
        assert "person" not in info.attributes
        assert info.attributes["case"] == "N"

    def test_unknown(self, engine):
        info = engine.describe_tag("Q12")
        assert info.category is None
        assert info.attributes == {}
        assert info.interpretation == "Unknown POS Code: Q"


class TestGrammar:
    def test_tables(self, engine):
        grammar = engine.grammar()
        assert len(grammar["categories"]) == 11
        assert grammar["default_attributes"]["Verb"] == "tense"
        assert "Preposition" not in grammar["filter_options"]
        assert grammar["shapes"]["Conjunction"] == "conjunction"
