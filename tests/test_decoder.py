"""Tests for tag classification, decoding and description."""

import pytest

from morph_explorer.decoder import classify, decode, decode_tag, describe, interpret
from morph_explorer.grammar import Category
from morph_explorer.tag_models import VerbForm, field_value


class TestClassify:
    @pytest.mark.parametrize(
        "tag, category",
        [
            ("NNSM", Category.Noun),
            ("VAAI1P", Category.Verb),
            ("JNSM", Category.Adjective),
            ("ANSM", Category.Adjective),
            ("RP1NSM", Category.Pronoun),
            ("DGSF", Category.Article),
            ("P", Category.Preposition),
            ("CLN", Category.Conjunction),
            ("BN", Category.Adverb),
            ("TN", Category.Particle),
            ("I", Category.Interjection),
            ("XP", Category.Indeclinable),
        ],
    )
    def test_letters(self, tag, category):
        assert classify(tag) == category

    @pytest.mark.parametrize("tag", [None, "", "   ", "Z123", "9", 42, ["N"]])
    def test_no_category(self, tag):
        assert classify(tag) is None

    def test_comma_suffix_ignored(self):
        assert classify(" VAAI3S, extra") == Category.Verb


class TestVerb:
    def test_finite(self):
        attrs = decode(Category.Verb, "VAAI1P")
        assert attrs.tense == "A"
        assert attrs.voice == "A"
        assert attrs.mood == "I"
        assert attrs.person == "1"
        assert attrs.number == "P"
        assert attrs.case == ""
        assert attrs.gender == ""
        assert attrs.form == VerbForm.finite

    def test_describe_finite(self):
        assert describe("VAAI1P") == "Aorist, Active, Indicative, 1st Person, Plural"

    def test_participle_compact(self):
        attrs = decode(Category.Verb, "VPAPNSM")
        assert (attrs.tense, attrs.voice, attrs.mood) == ("P", "A", "P")
        assert attrs.person == ""
        assert attrs.case == "N"
        assert attrs.number == "S"
        assert attrs.gender == "M"
        assert attrs.is_participle

    def test_participle_positional(self):
        attrs = decode(Category.Verb, "VPAP-SNM")
        assert attrs.person == ""
        assert attrs.number == "S"
        assert attrs.case == "N"
        assert attrs.gender == "M"

    def test_participle_positional_reads_person_slot(self):
        attrs = decode(Category.Verb, "VPAP3SNM")
        assert attrs.person == "3"
        assert attrs.number == "S"
        assert attrs.case == "N"

    def test_describe_participle(self):
        assert describe("VPAPNSM") == "Present, Active, Participle, Nominative, Singular, Masculine"

    @pytest.mark.parametrize("tag", ["VAAI3SNM", "VPAS2PGF", "VAAM2SDN", "VAAO3SAM"])
    def test_non_participle_never_has_case_or_gender(self, tag):
        attrs = decode(Category.Verb, tag)
        assert attrs.case == ""
        assert attrs.gender == ""

    def test_infinitive(self):
        attrs = decode(Category.Verb, "VAAN")
        assert attrs.mood == "N"
        assert attrs.form == VerbForm.infinitive
        assert attrs.person == "" and attrs.number == ""
        assert describe("VAAN") == "Aorist, Active, Infinitive"

    def test_short_tag(self):
        attrs = decode(Category.Verb, "VA")
        assert attrs.tense == "A"
        assert attrs.voice == ""
        assert attrs.mood == ""
        assert attrs.form == VerbForm.unknown

    def test_unrecognized_code_decodes_empty(self):
        attrs = decode(Category.Verb, "VZAI1P")
        assert attrs.tense == ""
        assert attrs.voice == "A"

    def test_unrecognized_code_surfaces_in_description(self):
        assert describe("VZAI1P") == "Z, Active, Indicative, 1st Person, Plural"


class TestNominals:
    def test_noun(self):
        attrs = decode(Category.Noun, "NGSF")
        assert (attrs.case, attrs.number, attrs.gender) == ("G", "S", "F")
        assert describe("NGSF") == "Genitive, Singular, Feminine"

    def test_noun_short(self):
        attrs = decode(Category.Noun, "NG")
        assert (attrs.case, attrs.number, attrs.gender) == ("G", "", "")

    def test_article(self):
        attrs = decode(Category.Article, "DNPN")
        assert (attrs.case, attrs.number, attrs.gender) == ("N", "P", "N")

    def test_adjective_degree(self):
        attrs = decode(Category.Adjective, "JASNC")
        assert attrs.case == "A"
        assert attrs.degree == "C"
        assert describe("JASNC") == "Accusative, Singular, Neuter, Comparative"

    def test_adjective_a_letter(self):
        attrs = decode(Category.Adjective, "ANSM")
        assert attrs.case == "N"

    def test_pronoun_fixed_positions(self):
        attrs = decode(Category.Pronoun, "RP1NSM")
        assert attrs.type == "P"
        assert attrs.person == "1"
        assert attrs.case == "N"
        assert attrs.number == "S"
        assert attrs.gender == "M"
        assert attrs.subtype == ""

    def test_pronoun_subtype(self):
        attrs = decode(Category.Pronoun, "RD-NSMA")
        assert attrs.person == ""
        assert attrs.subtype == "A"
        assert describe("RD-NSMA") == (
            "Demonstrative, Nominative, Singular, Masculine, Intensive Attributive"
        )


class TestConjunction:
    def test_logical_connective(self):
        attrs = decode(Category.Conjunction, "CLN")
        assert attrs.type == "L"
        assert attrs.subtype == "LN"
        assert attrs.type_name == "Logical"
        assert attrs.subtype_name == "Connective"
        assert describe("CLN") == "Logical, Connective"

    def test_unknown_type_is_empty(self):
        attrs = decode(Category.Conjunction, "CQN")
        assert attrs.type == ""
        assert attrs.subtype == ""
        assert attrs.type_name == ""

    def test_unknown_type_description_keeps_both_codes(self):
        assert describe("CQN") == "Q, N"
        assert describe("CQ") == "Q"

    def test_type_only(self):
        attrs = decode(Category.Conjunction, "CS")
        assert attrs.type == "S"
        assert attrs.subtype == ""
        assert attrs.type_name == "Substantival"


class TestSimpleCategories:
    def test_type_fields(self):
        assert decode(Category.Adverb, "BN").type == "N"
        assert decode(Category.Particle, "TI").type == "I"
        assert decode(Category.Indeclinable, "XF").type == "F"

    def test_markers(self):
        assert decode(Category.Preposition, "P").type == "P"
        assert decode(Category.Interjection, "I").type == "I"
        assert describe("P") == ""


class TestMismatch:
    @pytest.mark.parametrize("category", list(Category))
    def test_other_category_tag_is_all_empty(self, category):
        tag = "NNSM" if category != Category.Noun else "VAAI1P"
        attrs = decode(category, tag)
        for name in type(attrs).model_fields:
            if name in ("category", "form"):
                continue
            assert getattr(attrs, name) == ""

    @pytest.mark.parametrize("category", list(Category))
    def test_empty_tag(self, category):
        attrs = decode(category, None)
        assert attrs.category == category

    def test_decode_tag_unknown(self):
        assert decode_tag("Z") is None

    def test_field_value_missing_field(self):
        assert field_value(decode(Category.Noun, "NNSM"), "tense") is None


class TestInterpret:
    def test_verb(self):
        assert interpret("VAAI1P") == "Verb - Aorist, Active, Indicative, 1st Person, Plural"

    def test_article_label(self):
        assert interpret("DNSM") == "Definite Article - Nominative, Singular, Masculine"

    def test_preposition(self):
        assert interpret("P") == "Preposition"

    def test_empty(self):
        assert interpret("") == "No POS data available"

    def test_unknown(self):
        assert interpret("Q12") == "Unknown POS Code: Q"
