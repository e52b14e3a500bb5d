"""Shared fixtures: a small synthetic book written the way the corpus ships."""

import json

import pytest

from morph_explorer.corpus import CorpusStore
from morph_explorer.engine import ExplorerEngine


def w(tag, form="λόγος", lemma="λόγος", ref=None, **extra):
    """A word entry as stored in the book documents."""
    entry = {
        "pos_tag": tag,
        "word_forms": [form, form, form, lemma],
        "gloss": extra.pop("gloss", "word"),
    }
    if ref:
        entry["book_chapter_verse"] = ref
    entry.update(extra)
    return entry


@pytest.fixture
def book_data():
    return {
        "1": {
            "1": [
                w("P", "Ἐν", "ἐν", ref="0400101"),
                w("NDSF", "ἀρχῇ", "ἀρχή", ref="0400101"),
                w("VIAI3S", "ἦν", "εἰμί", ref="0400101"),
                w("DNSM", "ὁ", "ὁ", ref="0400101"),
                w("NNSM", "λόγος", "λόγος", ref="0400101"),
            ],
            "2": [
                w("RD-NSM", "οὗτος", "οὗτος", ref="0400102"),
                w("VIAI3S", "ἦν", "εἰμί", ref="0400102"),
                w("P", "ἐν", "ἐν", ref="0400102"),
                w("DDSF", "τῇ", "ὁ", ref="0400102"),
            ],
            "3": [
                w("CLN", "καὶ", "καί", ref="0400103"),
                w("BN", "οὐδὲ", "οὐδέ", ref="0400103"),
                w("VAMI3S", "ἐγένετο", "γίνομαι", ref="0400103"),
            ],
            "3a": [
                w("VPAPNSM", "λέγων", "λέγω", ref="0400103"),
            ],
        },
        "2": {
            "1": [
                w("P", "ἐν", "ἐν", ref="0400201"),
                w("P", "εἰς", "εἰς", ref="0400201"),
                w("CAT", "ὅτε", "ὅτε", ref="0400201"),
                w("VAAI1P", "εἴδομεν", "ὁράω", ref="0400201"),
                w("TN", "μὴ", "μή", ref="0400201"),
            ],
        },
        "3": {
            "1": [
                w("I", "ἰδοὺ", "ἰδού", ref="0400301"),
                w("XP", "Ἰησοῦς", "Ἰησοῦς", ref="0400301"),
                w("CSC", "ὅτι", "ὅτι", ref="0400301"),
                {"word_forms": ["ἀγνώστος"]},
                "not a word",
            ],
        },
        "10": {
            "1": [
                w("P", "ἐκ", "ἐκ", ref="0401001"),
                w("VPAPGPM", "λεγόντων", "λέγω", ref="0401001"),
                w("NGPM", "ἀνθρώπων", "ἄνθρωπος", ref="0401001"),
            ],
        },
    }


@pytest.fixture
def corpus_dir(tmp_path, book_data):
    (tmp_path / "books.json").write_text(json.dumps(["John", "Jude"]))
    (tmp_path / "John.json").write_text(
        json.dumps({"John": book_data}, ensure_ascii=False), encoding="utf-8"
    )
    (tmp_path / "Jude.json").write_text(json.dumps({"Jude": {}}))
    para_dir = tmp_path / "paragraphs" / "John"
    para_dir.mkdir(parents=True)
    (para_dir / "001-paragraphs.json").write_text(json.dumps([[1, 2], [3]]))
    (para_dir / "002-paragraphs.json").write_text(json.dumps({"not": "a list"}))
    return tmp_path


@pytest.fixture
def engine(corpus_dir):
    return ExplorerEngine(CorpusStore(corpus_dir))
