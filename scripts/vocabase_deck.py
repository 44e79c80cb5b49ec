#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Vocabase - Anki deck builder

Optionally scrapes a word list into the local store, then exports every
stored term of a destination as an Anki text import.

Usage:
    python vocabase_deck.py B1
    python vocabase_deck.py B1 --words words.txt --output anki.txt

Input:
    words.txt (optional, one query per line, # for comments)

Output:
    anki.txt
"""

import argparse
import random
import sys
import time
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# pylint: disable=wrong-import-position
from vocabase import scrape  # noqa: E402
from vocabase.anki import format_deck  # noqa: E402
from vocabase.store import CsvTermStore  # noqa: E402

# pylint: enable=wrong-import-position

DEFAULT_STORE = Path(__file__).parent.parent / "data" / "store"
THROTTLE = (0.5, 1.5)  # jittered sleep between lookups (min, max)


def read_words(path: Path) -> List[str]:
    words = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        words.append(line)
    return words


def collect(words: List[str], store: CsvTermStore, destination: str) -> None:
    """Scrape each word and insert it into the store."""
    saved = 0
    missing: List[str] = []
    for i, word in enumerate(words, 1):
        term = scrape(word)
        if term is None:
            missing.append(word)
            print(f"  [{i}/{len(words)}] {word}: not found")
        elif store.insert(term, destination):
            saved += 1
            print(f"  [{i}/{len(words)}] {word}: {term.category.value}")
        if i < len(words):
            time.sleep(random.uniform(*THROTTLE))
    print(f"\nSaved {saved}/{len(words)} terms")
    if missing:
        print(f"Not found: {', '.join(missing)}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Build an Anki deck")
    parser.add_argument("destination", help="Store destination to export")
    parser.add_argument(
        "--store",
        default=str(DEFAULT_STORE),
        help=f"Store directory (default: {DEFAULT_STORE})",
    )
    parser.add_argument(
        "--words", type=Path, help="Word list to scrape into the store first"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("anki.txt"),
        help="Deck file to write (default: anki.txt)",
    )
    args = parser.parse_args()

    store = CsvTermStore(args.store)
    print("=" * 60)
    print(f"Vocabase deck: {args.destination}")
    print("=" * 60)

    if args.words:
        words = read_words(args.words)
        print(f"Scraping {len(words)} words...")
        collect(words, store, args.destination)

    records = store.fetch_all(args.destination)
    for category, terms in records.items():
        print(f"{category.value.title():<12}{len(terms)}")

    args.output.write_text(format_deck(records), encoding="utf-8")
    print(f"\nWrote {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
