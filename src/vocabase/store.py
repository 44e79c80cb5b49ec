# -*- coding: utf-8 -*-
"""
Local record store: one folder per destination, one CSV table per part
of speech (Verbs.csv, Nouns.csv, Adjectives.csv, Adverbs.csv).

List-valued fields are stored as JSON arrays so items may contain any
character; verb tags are stored as the array of labels that are set.
Tables are rewritten through a temporary file and swapped into place.
"""

import json
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from .model import (
    AdjectiveForms,
    AdverbForms,
    Category,
    Forms,
    Gender,
    Level,
    NounForms,
    Term,
    VerbForms,
    VerbTags,
)

TABLE_NAMES = {
    Category.VERB: "Verbs",
    Category.NOUN: "Nouns",
    Category.ADJECTIVE: "Adjectives",
    Category.ADVERB: "Adverbs",
}

COMMON_COLUMNS = [
    "term",
    "level",
    "definitions",
    "examples",
    "synonyms",
    "antonyms",
]
COLUMNS = {
    Category.VERB: COMMON_COLUMNS
    + ["past_participle", "simple_past", "prepositions", "tags"],
    Category.NOUN: COMMON_COLUMNS + ["gender", "plural"],
    Category.ADJECTIVE: COMMON_COLUMNS + ["comparative", "superlative"],
    Category.ADVERB: COMMON_COLUMNS,
}

TAG_LABELS = {
    "regular": "Regular",
    "separable": "Separable",
    "accusative": "Accusative",
    "dative": "Dative",
    "genitive": "Genitive",
    "reflexive": "Reflexive",
    "participle_with_sein": "PPII Mit Sein",
}


def _dump_list(items) -> str:
    return json.dumps(list(items), ensure_ascii=False)


def _load_list(raw: str) -> tuple:
    if not raw:
        return ()
    return tuple(json.loads(raw))


def term_to_row(term: Term) -> Dict[str, str]:
    """Flatten a Term into string columns."""
    row = {
        "term": term.text,
        "level": term.level.value if term.level else "",
        "definitions": _dump_list(term.definitions),
        "examples": _dump_list(term.examples),
        "synonyms": _dump_list(term.synonyms),
        "antonyms": _dump_list(term.antonyms),
    }
    forms = term.forms
    if isinstance(forms, VerbForms):
        row["past_participle"] = forms.past_participle
        row["simple_past"] = forms.simple_past
        row["prepositions"] = _dump_list(forms.prepositions)
        row["tags"] = _dump_list(
            label
            for name, label in TAG_LABELS.items()
            if getattr(forms.tags, name)
        )
    elif isinstance(forms, NounForms):
        row["gender"] = forms.gender.value
        row["plural"] = forms.plural
    elif isinstance(forms, AdjectiveForms):
        row["comparative"] = forms.comparative
        row["superlative"] = forms.superlative
    return row


def term_from_row(category: Category, row: Dict[str, str]) -> Term:
    """Rebuild a Term from a row written by :func:`term_to_row`."""
    forms: Forms
    if category is Category.VERB:
        labels = set(_load_list(row["tags"]))
        forms = VerbForms(
            past_participle=row["past_participle"],
            simple_past=row["simple_past"],
            prepositions=_load_list(row["prepositions"]),
            tags=VerbTags(
                **{
                    name: label in labels
                    for name, label in TAG_LABELS.items()
                }
            ),
        )
    elif category is Category.NOUN:
        forms = NounForms(gender=Gender(row["gender"]), plural=row["plural"])
    elif category is Category.ADJECTIVE:
        forms = AdjectiveForms(
            comparative=row["comparative"], superlative=row["superlative"]
        )
    else:
        forms = AdverbForms()
    return Term(
        text=row["term"],
        category=category,
        forms=forms,
        level=Level(row["level"]) if row["level"] else None,
        definitions=_load_list(row["definitions"]),
        examples=_load_list(row["examples"]),
        synonyms=_load_list(row["synonyms"]),
        antonyms=_load_list(row["antonyms"]),
    )


class CsvTermStore:
    """Stores Terms in per-category CSV tables under ``root/destination``."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def table_path(self, destination: str, category: Category) -> Path:
        return self.root / destination / f"{TABLE_NAMES[category]}.csv"

    def _read(self, path: Path, category: Category) -> pd.DataFrame:
        empty = pd.DataFrame(columns=COLUMNS[category], dtype=str)
        if not path.exists():
            return empty
        try:
            return pd.read_csv(path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            # Truncated table, e.g. left behind by an interrupted write
            return empty

    def insert(self, term: Term, destination: str) -> bool:
        """Append ``term`` to its table; False if it could not be written."""
        path = self.table_path(destination, term.category)
        columns = COLUMNS[term.category]
        try:
            table = pd.DataFrame([term_to_row(term)], columns=columns)
            existing = self._read(path, term.category)
            if not existing.empty:
                table = pd.concat([existing, table], ignore_index=True)
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = path.with_name(path.name + ".tmp")
            table.to_csv(tmp_path, index=False)
            tmp_path.replace(path)
        except (OSError, pd.errors.ParserError) as exc:
            print(f"[store] Warning: could not save {term.text!r}: {exc}")
            return False
        return True

    def fetch_records(
        self, destination: str, category: Category
    ) -> List[Term]:
        path = self.table_path(destination, category)
        table = self._read(path, category)
        return [
            term_from_row(category, row) for row in table.to_dict("records")
        ]

    def fetch_all(self, destination: str) -> Dict[Category, List[Term]]:
        return {
            category: self.fetch_records(destination, category)
            for category in Category
        }
