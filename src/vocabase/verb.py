# -*- coding: utf-8 -*-
"""
Verb-specific fields: simple past, past participle with auxiliary,
governed prepositions and grammar tags.

Flexion summary layout: ``gehen · ging · ist gegangen``.
"""

import re
from typing import Tuple

from .errors import StructuralMismatch
from .lemma import Lemma, flexion_form
from .model import VerbForms, VerbTags
from .text import FORM_LETTERS, LETTERS, strip_non_letters, unique

SIMPLE_PAST_RE = re.compile(rf"^[{FORM_LETTERS}]+ *[{FORM_LETTERS}]+")
PARTICIPLE_STEM_RE = re.compile(rf"([{FORM_LETTERS}]+)([^{FORM_LETTERS}]*)$")

HABEN_RE = re.compile(r"\bhaben\b")
SEIN_RE = re.compile(r"\bsein\b")

# Marker titles like "'an' mit Akkusativ"
PREPOSITION_TITLE_RE = re.compile(rf"^'[{LETTERS}]+'.*$")

IRREGULAR_TITLE = "unregelmäßiges Verb"
TAG_TITLES = {
    "separable": "trennbares Verb",
    "accusative": "mit Akkusativobjekt",
    "dative": "mit Dativobjekt",
    "genitive": "mit Genitivobjekt",
    "reflexive": "mit Reflexivpronomen (sich)",
    "participle_with_sein": "Hilfsverb 'sein'",
}


def extract_simple_past(lemma: Lemma) -> str:
    return flexion_form(lemma, 1, SIMPLE_PAST_RE, what="simple past").group()


def extract_auxiliary(lemma: Lemma) -> str:
    """Auxiliary prefix for the past participle: "hat ", "ist " or both."""
    marker_text = lemma.marker.whole_text()
    has_haben = HABEN_RE.search(marker_text) is not None
    has_sein = SEIN_RE.search(marker_text) is not None
    if has_haben and has_sein:
        return "hat/ist "
    if has_haben:
        return "hat "
    if has_sein:
        return "ist "
    raise StructuralMismatch("could not determine auxiliary verb")


def extract_past_participle(lemma: Lemma) -> str:
    auxiliary = extract_auxiliary(lemma)
    stem = flexion_form(
        lemma, 2, PARTICIPLE_STEM_RE, what="past participle"
    ).group(1)
    return auxiliary + stem


def extract_prepositions(lemma: Lemma) -> Tuple[str, ...]:
    info = lemma.container.select_one("#wStckInf")
    if info is None:
        return ()
    prepositions = []
    for node in info.select("[title]"):
        if not PREPOSITION_TITLE_RE.match(node.attr("title") or ""):
            continue
        word = strip_non_letters(node.whole_text()).upper()
        if word:
            prepositions.append(word)
    return unique(prepositions)


def _has_marker(lemma: Lemma, title: str) -> bool:
    return lemma.container.select_one(f'span[title="{title}"]') is not None


def extract_tags(lemma: Lemma) -> VerbTags:
    # No irregularity marker means regular, even if the page says nothing
    flags = {
        name: _has_marker(lemma, title) for name, title in TAG_TITLES.items()
    }
    return VerbTags(regular=not _has_marker(lemma, IRREGULAR_TITLE), **flags)


def extract_verb_forms(lemma: Lemma) -> VerbForms:
    return VerbForms(
        past_participle=extract_past_participle(lemma),
        simple_past=extract_simple_past(lemma),
        prepositions=extract_prepositions(lemma),
        tags=extract_tags(lemma),
    )
