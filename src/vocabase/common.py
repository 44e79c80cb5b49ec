# -*- coding: utf-8 -*-
"""
Fields shared by all parts of speech: headword, category, CEFR level
and English definitions.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import SoftMiss, StructuralMismatch, recover
from .lemma import Lemma
from .model import Category, Level
from .text import strip_non_letters, unique

HEADWORD_SELECTOR = "#wStckKrz > *"
LEVEL_SELECTOR = "span.bZrt"
DEFINITIONS_SELECTOR = 'p.r1Zeile.rU6px.rO0px > span[lang="en"]'

# Checked in order, first hit wins
CATEGORY_MARKERS = (
    (Category.VERB, "Verb"),
    (Category.NOUN, "Substantiv"),
    (Category.ADJECTIVE, "Adjektiv"),
    (Category.ADVERB, "Adverb"),
)

LEVELS = {level.value: level for level in Level}

# Everything from the first comma on is a disambiguation clause
TRAILING_CLAUSE_RE = re.compile(r",[\s\S]*$")
NON_TERM_CHARS_RE = re.compile(r"[^a-zA-ZäöüÄÖÜßé\s\-]")


@dataclass(frozen=True)
class CommonFields:
    text: str
    category: Category
    level: Optional[Level]
    definitions: Tuple[str, ...]


def extract_text(lemma: Lemma) -> str:
    headword = lemma.container.select_one(HEADWORD_SELECTOR)
    if headword is None:
        raise StructuralMismatch("headword not found")
    text = TRAILING_CLAUSE_RE.sub("", headword.whole_text().strip())
    text = NON_TERM_CHARS_RE.sub("", text).strip()
    if not text:
        raise StructuralMismatch("headword is empty")
    return text


def extract_category(lemma: Lemma) -> Category:
    for category, title in CATEGORY_MARKERS:
        if lemma.marker.select_one(f'span[title="{title}"]') is not None:
            return category
    raise StructuralMismatch("no part-of-speech marker")


def _level(lemma: Lemma) -> Level:
    label = lemma.marker.select_one(LEVEL_SELECTOR)
    if label is None:
        raise SoftMiss("no level label")
    code = label.whole_text().strip().upper()
    if code not in LEVELS:
        raise SoftMiss(f"unknown level {code!r}")
    return LEVELS[code]


def extract_level(lemma: Lemma) -> Optional[Level]:
    """CEFR level, or None when the label is missing or unknown."""
    return recover(None, _level, lemma)


def extract_definitions(lemma: Lemma) -> Tuple[str, ...]:
    """English translations, comma separated on the page."""
    source = lemma.container.select_one(DEFINITIONS_SELECTOR)
    if source is None:
        raise StructuralMismatch("definitions not found")
    pieces = (
        strip_non_letters(piece, ")(")
        for piece in source.own_text().strip().split(",")
    )
    return unique(piece for piece in pieces if piece.strip())


def extract_common_fields(lemma: Lemma) -> CommonFields:
    return CommonFields(
        text=extract_text(lemma),
        category=extract_category(lemma),
        level=extract_level(lemma),
        definitions=extract_definitions(lemma),
    )
