# -*- coding: utf-8 -*-
"""
Adjective-specific fields: comparative and superlative.

Flexion summary layout: ``schön · schöner · am schönsten``.
"""

import re

from .lemma import Lemma, flexion_form
from .model import AdjectiveForms
from .text import FORM_LETTERS

COMPARATIVE_RE = re.compile(rf"^[{FORM_LETTERS}]+")
SUPERLATIVE_RE = re.compile(rf"^(am )?[{FORM_LETTERS}]+")


def extract_comparative(lemma: Lemma) -> str:
    return flexion_form(
        lemma, 1, COMPARATIVE_RE, keep="-", what="comparative"
    ).group()


def extract_superlative(lemma: Lemma) -> str:
    return flexion_form(
        lemma, 2, SUPERLATIVE_RE, keep="-", what="superlative"
    ).group()


def extract_adjective_forms(lemma: Lemma) -> AdjectiveForms:
    return AdjectiveForms(
        comparative=extract_comparative(lemma),
        superlative=extract_superlative(lemma),
    )
