# -*- coding: utf-8 -*-
"""
Vocabase: typed German vocabulary records scraped from verben.de.

    >>> from vocabase import scrape
    >>> term = scrape("gehen")
    >>> term.forms.past_participle
    'ist gegangen'
"""

from .errors import RetrievalFailure, ScrapeError, SoftMiss, StructuralMismatch
from .fetch import DocumentFetcher
from .model import (
    AdjectiveForms,
    AdverbForms,
    Category,
    Gender,
    Level,
    NounForms,
    Term,
    VerbForms,
    VerbTags,
    term_from_dict,
    term_to_dict,
)
from .scraper import scrape, scrape_term

__version__ = "1.0.0"

__all__ = [
    "AdjectiveForms",
    "AdverbForms",
    "Category",
    "DocumentFetcher",
    "Gender",
    "Level",
    "NounForms",
    "RetrievalFailure",
    "ScrapeError",
    "SoftMiss",
    "StructuralMismatch",
    "Term",
    "VerbForms",
    "VerbTags",
    "scrape",
    "scrape_term",
    "term_from_dict",
    "term_to_dict",
]
