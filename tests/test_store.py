"""Tests for the CSV term store."""

from vocabase.model import (
    AdjectiveForms,
    AdverbForms,
    Category,
    Gender,
    Level,
    NounForms,
    Term,
    VerbForms,
    VerbTags,
)
from vocabase.store import CsvTermStore, term_to_row

GEHEN = Term(
    text="gehen",
    category=Category.VERB,
    forms=VerbForms(
        past_participle="ist gegangen",
        simple_past="ging",
        prepositions=("ZU", "NACH"),
        tags=VerbTags(participle_with_sein=True),
    ),
    level=Level.A1,
    definitions=("go", "go (on foot)"),
    examples=("Wir gehen, wenn es regnet.",),
    synonyms=("1. laufen", "2. wandern"),
)

HUND = Term(
    text="Hund",
    category=Category.NOUN,
    forms=NounForms(gender=Gender.DER, plural="Hunde"),
    level=Level.B1,
    definitions=("dog",),
)


class TestTermToRow:
    """Test row flattening."""

    def test_verb_row(self):
        row = term_to_row(GEHEN)
        assert row["definitions"] == '["go", "go (on foot)"]'
        assert row["tags"] == '["PPII Mit Sein"]'
        assert row["prepositions"] == '["ZU", "NACH"]'

    def test_adverb_row(self):
        term = Term(text="gern", category=Category.ADVERB, forms=AdverbForms())
        assert term_to_row(term) == {
            "term": "gern",
            "level": "",
            "definitions": "[]",
            "examples": "[]",
            "synonyms": "[]",
            "antonyms": "[]",
        }


class TestCsvTermStore:
    """Test inserting and reading back."""

    def test_table_path(self, tmp_path):
        store = CsvTermStore(tmp_path)
        assert store.table_path("B1", Category.NOUN) == (
            tmp_path / "B1" / "Nouns.csv"
        )

    def test_insert_and_fetch(self, tmp_path):
        store = CsvTermStore(tmp_path)
        assert store.insert(GEHEN, "A1")
        assert store.insert(HUND, "A1")
        records = store.fetch_all("A1")
        assert records[Category.VERB] == [GEHEN]
        assert records[Category.NOUN] == [HUND]
        assert records[Category.ADJECTIVE] == []
        assert records[Category.ADVERB] == []

    def test_appends_in_order(self, tmp_path):
        store = CsvTermStore(tmp_path)
        schoen = Term(
            text="schön",
            category=Category.ADJECTIVE,
            forms=AdjectiveForms("schöner", "am schönsten"),
        )
        laut = Term(
            text="laut",
            category=Category.ADJECTIVE,
            forms=AdjectiveForms("lauter", "am lautesten"),
        )
        store.insert(schoen, "B1")
        store.insert(laut, "B1")
        assert store.fetch_records("B1", Category.ADJECTIVE) == [schoen, laut]

    def test_unknown_destination(self, tmp_path):
        records = CsvTermStore(tmp_path).fetch_all("C2")
        assert all(terms == [] for terms in records.values())

    def test_unwritable_root(self, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        assert not CsvTermStore(blocker).insert(HUND, "A1")
        assert "[store] Warning" in capsys.readouterr().out

    def test_insert_into_empty_table(self, tmp_path):
        store = CsvTermStore(tmp_path)
        path = store.table_path("B1", Category.VERB)
        path.parent.mkdir(parents=True)
        path.write_text("")
        assert store.fetch_records("B1", Category.VERB) == []
        assert store.insert(GEHEN, "B1")
        assert store.fetch_records("B1", Category.VERB) == [GEHEN]

    def test_no_temporary_file_left(self, tmp_path):
        store = CsvTermStore(tmp_path)
        store.insert(HUND, "A1")
        assert sorted(p.name for p in (tmp_path / "A1").iterdir()) == [
            "Nouns.csv"
        ]

    def test_separators_inside_items(self, tmp_path):
        store = CsvTermStore(tmp_path)
        term = Term(
            text="oder",
            category=Category.ADVERB,
            forms=AdverbForms(),
            definitions=("or | else", 'say "no"'),
            examples=("Ja; nein, oder?",),
        )
        store.insert(term, "A1")
        assert store.fetch_records("A1", Category.ADVERB) == [term]
