# -*- coding: utf-8 -*-
"""
Term scraping pipeline.

    search page -> lemma container -> common fields
                -> examples
                -> category fields (dispatched on the category)
                -> synonym page -> synonyms/antonyms
                -> Term

``scrape`` is the boundary: it returns a Term or None ("not found").
``scrape_term`` raises the underlying ScrapeError instead, for callers
that want to tell a network failure from a missing entry.
"""

from typing import Callable, Dict, Optional

from .adjective import extract_adjective_forms
from .common import extract_common_fields
from .errors import ScrapeError, StructuralMismatch
from .examples import extract_examples
from .fetch import DocumentFetcher
from .lemma import Lemma, locate_lemma
from .model import AdverbForms, Category, Forms, Term
from .noun import extract_noun_forms
from .relations import extract_relations
from .verb import extract_verb_forms


def extract_adverb_forms(lemma: Lemma) -> AdverbForms:
    return AdverbForms()


FORM_EXTRACTORS: Dict[Category, Callable[[Lemma], Forms]] = {
    Category.VERB: extract_verb_forms,
    Category.NOUN: extract_noun_forms,
    Category.ADJECTIVE: extract_adjective_forms,
    Category.ADVERB: extract_adverb_forms,
}


def scrape_term(query: str, fetcher=None) -> Term:
    """Look up ``query`` and build its Term.

    Raises:
        StructuralMismatch: the page does not look like a term page.
        RetrievalFailure: the search page could not be fetched.
    """
    if not query or not query.strip():
        raise StructuralMismatch("empty query")
    if fetcher is None:
        with DocumentFetcher() as own_fetcher:
            return _scrape(query.strip(), own_fetcher)
    return _scrape(query.strip(), fetcher)


def _scrape(query: str, fetcher) -> Term:
    document = fetcher.search(query)
    lemma = locate_lemma(document)
    common = extract_common_fields(lemma)
    examples = extract_examples(document)
    forms = FORM_EXTRACTORS[common.category](lemma)
    synonyms, antonyms = extract_relations(
        fetcher, common.text, common.category
    )
    return Term(
        text=common.text,
        category=common.category,
        forms=forms,
        level=common.level,
        definitions=common.definitions,
        examples=examples,
        synonyms=synonyms,
        antonyms=antonyms,
    )


def scrape(query: str, fetcher=None) -> Optional[Term]:
    """Look up ``query``; None when nothing usable was found."""
    try:
        return scrape_term(query, fetcher)
    except ScrapeError:
        return None
