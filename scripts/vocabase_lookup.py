#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Vocabase - single term lookup

Scrapes one term from verben.de and prints it, optionally saving it to
the local store.

Usage:
    python vocabase_lookup.py gehen
    python vocabase_lookup.py Hund --json
    python vocabase_lookup.py schön --save B1 --store data/store
"""

import argparse
import json
import sys
from pathlib import Path

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# pylint: disable=wrong-import-position
from vocabase import (  # noqa: E402
    AdjectiveForms,
    NounForms,
    RetrievalFailure,
    ScrapeError,
    Term,
    VerbForms,
    scrape_term,
    term_to_dict,
)
from vocabase.store import CsvTermStore  # noqa: E402

# pylint: enable=wrong-import-position

DEFAULT_STORE = Path(__file__).parent.parent / "data" / "store"


def lookup(query: str, retries: int = 3) -> Term:
    """Scrape ``query``, retrying while the search page is unreachable."""

    @retry(
        reraise=True,
        stop=stop_after_attempt(max(1, retries)),
        wait=wait_exponential(multiplier=0.75, min=0.5, max=12),
        retry=retry_if_exception_type(RetrievalFailure),
    )
    def _attempt() -> Term:
        return scrape_term(query)

    return _attempt()


def print_term(term: Term) -> None:
    level = term.level.value if term.level else "-"
    print("=" * 60)
    print(f"{term.text}  [{term.category.value}, {level}]")
    print("=" * 60)
    forms = term.forms
    if isinstance(forms, VerbForms):
        print(f"Preterite:     {forms.simple_past}")
        print(f"PPII:          {forms.past_participle}")
        if forms.prepositions:
            print(f"Prepositions:  {', '.join(forms.prepositions)}")
    elif isinstance(forms, NounForms):
        print(f"Gender:        {forms.gender.value}")
        print(f"Plural:        {forms.plural}")
    elif isinstance(forms, AdjectiveForms):
        print(f"Comparative:   {forms.comparative}")
        print(f"Superlative:   {forms.superlative}")
    print(f"Definitions:   {', '.join(term.definitions)}")
    for title, items in (
        ("Synonyms", term.synonyms),
        ("Antonyms", term.antonyms),
        ("Examples", term.examples),
    ):
        if items:
            print(f"\n{title}:")
            for item in items:
                print(f"  {item}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Look up a German term")
    parser.add_argument("query", help="Term to look up")
    parser.add_argument(
        "--json", action="store_true", help="Print the term as JSON"
    )
    parser.add_argument(
        "--save", metavar="DEST", help="Save the term under this destination"
    )
    parser.add_argument(
        "--store",
        default=str(DEFAULT_STORE),
        help=f"Store directory (default: {DEFAULT_STORE})",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=3,
        help="Attempts for the search page (default: 3)",
    )
    args = parser.parse_args()

    try:
        term = lookup(args.query, retries=args.retries)
    except ScrapeError as exc:
        print(f"Not found: {args.query} ({exc})")
        return 1

    if args.json:
        print(json.dumps(term_to_dict(term), ensure_ascii=False, indent=2))
    else:
        print_term(term)

    if args.save:
        store = CsvTermStore(args.store)
        if not store.insert(term, args.save):
            return 1
        print(f"\nSaved to {store.table_path(args.save, term.category)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
