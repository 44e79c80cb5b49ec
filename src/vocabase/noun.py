# -*- coding: utf-8 -*-
"""
Noun-specific fields: gender and plural.
"""

import re

from .errors import StructuralMismatch
from .lemma import Lemma, flexion_form
from .model import Gender, NounForms
from .text import FORM_LETTERS

PLURAL_RE = re.compile(rf"^[{FORM_LETTERS}]+")

MASCULINE_TITLE = "Genus maskulin"
FEMININE_TITLE = "Genus feminin"
NEUTER_TITLE = "Genus neutral"

# (masculine, feminine, neuter) -> gender
GENDERS = {
    (True, False, False): Gender.DER,
    (False, True, False): Gender.DIE,
    (False, False, True): Gender.DAS,
    (True, True, False): Gender.DER_DIE,
    (True, False, True): Gender.DER_DAS,
    (False, True, True): Gender.DAS_DIE,
}


def extract_gender(lemma: Lemma) -> Gender:
    key = tuple(
        lemma.marker.select_one(f'span[title="{title}"]') is not None
        for title in (MASCULINE_TITLE, FEMININE_TITLE, NEUTER_TITLE)
    )
    gender = GENDERS.get(key)
    if gender is None:
        raise StructuralMismatch(f"ambiguous gender markers {key}")
    return gender


def extract_plural(lemma: Lemma) -> str:
    return flexion_form(lemma, 1, PLURAL_RE, keep="-", what="plural").group()


def extract_noun_forms(lemma: Lemma) -> NounForms:
    return NounForms(
        gender=extract_gender(lemma), plural=extract_plural(lemma)
    )
