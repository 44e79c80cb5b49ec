"""Tests for noun-specific extraction."""

import pytest

from pages import HUND, marker, term_page
from vocabase.errors import StructuralMismatch
from vocabase.model import Gender
from vocabase.noun import extract_gender, extract_noun_forms, extract_plural

MASC = marker("Genus maskulin", "der")
FEM = marker("Genus feminin", "die")
NEUT = marker("Genus neutral", "das")


def noun_page(genders=(MASC,), flexion="der Hund · Hunde · Hundes"):
    return term_page(
        headword="Hund",
        flexion=flexion,
        markers=[marker("Substantiv"), *genders],
    )


class TestGender:
    """Test gender resolution from marker presence."""

    @pytest.mark.parametrize(
        "genders,expected",
        [
            ((MASC,), Gender.DER),
            ((FEM,), Gender.DIE),
            ((NEUT,), Gender.DAS),
            ((MASC, FEM), Gender.DER_DIE),
            ((MASC, NEUT), Gender.DER_DAS),
            ((NEUT, FEM), Gender.DAS_DIE),
        ],
    )
    def test_combinations(self, lemma_of, genders, expected):
        assert extract_gender(lemma_of(noun_page(genders))) is expected

    def test_all_three_is_ambiguous(self, lemma_of):
        with pytest.raises(StructuralMismatch):
            extract_gender(lemma_of(noun_page((MASC, FEM, NEUT))))

    def test_none_is_missing(self, lemma_of):
        with pytest.raises(StructuralMismatch):
            extract_gender(lemma_of(noun_page(())))


class TestPlural:
    """Test plural extraction."""

    def test_strips_superscripts(self, lemma_of):
        assert extract_plural(lemma_of(HUND)) == "Hunde"

    def test_keeps_hyphen(self, lemma_of):
        lemma = lemma_of(noun_page(flexion="das E-Mail · E-Mails · E-Mail"))
        assert extract_plural(lemma) == "E-Mails"

    def test_takes_leading_word(self, lemma_of):
        lemma = lemma_of(noun_page(flexion="die Uhr · Uhren (Pl.) · Uhr"))
        assert extract_plural(lemma) == "Uhren"

    def test_dash_for_no_plural(self, lemma_of):
        lemma = lemma_of(noun_page(flexion="das Obst · - · Obstes"))
        assert extract_plural(lemma) == "-"

    def test_no_letters(self, lemma_of):
        lemma = lemma_of(noun_page(flexion="das Obst · ⁰ · Obstes"))
        with pytest.raises(StructuralMismatch):
            extract_plural(lemma)


def test_noun_forms(lemma_of):
    forms = extract_noun_forms(lemma_of(HUND))
    assert forms.gender is Gender.DER
    assert forms.plural == "Hunde"
