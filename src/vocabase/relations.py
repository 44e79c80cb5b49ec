# -*- coding: utf-8 -*-
"""
Synonyms and antonyms from the separate synonym page of a term.

Best effort: a failed fetch or an unexpected page shape yields empty
lists and never aborts the scrape.
"""

import re
from typing import List, Tuple

from .dom import Node, find_labelled
from .errors import SoftMiss, recover
from .model import Category
from .text import strip_non_letters, unique

HEADING_SELECTOR = "section.rBox.rBoxWht > div.rAufZu > h2"
SYNONYMS_LABEL = "Synonyme"
ANTONYMS_LABEL = "Antonyme (Gegenteil)"

INDEX_SELECTOR = "span.wIdx"
# Several words packed into one entry: "schnell ≡ rasch"
ENTRY_SEPARATOR = "≡\u00a0"
CONTINUATION_RE = re.compile(r",?\s*(?:\.\.\.|…)")


def _relation_list(page: Node, label: str) -> Tuple[str, ...]:
    heading = find_labelled(page, HEADING_SELECTOR, label)
    if heading is None:
        raise SoftMiss(f"{label!r} section not found")
    entries = heading.next_sibling()
    if entries is None or entries.name != "dl":
        return ()
    words: List[str] = []
    for entry in entries.select("dd"):
        index = entry.select_one(INDEX_SELECTOR)
        if index is not None:
            index.remove()
        content = entry.select_one("span") or entry
        raw = CONTINUATION_RE.sub("", content.whole_text())
        for part in raw.split(ENTRY_SEPARATOR):
            word = strip_non_letters(part)
            if word:
                words.append(word)
    return tuple(f"{n}. {word}" for n, word in enumerate(unique(words), 1))


def extract_relation_list(page: Node, label: str) -> Tuple[str, ...]:
    """Numbered entries under the heading ``label``; empty when absent."""
    return recover((), _relation_list, page, label)


def extract_relations(
    fetcher, text: str, category: Category
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Fetch the synonym page and return ``(synonyms, antonyms)``.

    Any failure here, fetch or parse, yields two empty lists.
    """
    try:
        page = fetcher.relation_page(category, text)
        return (
            extract_relation_list(page, SYNONYMS_LABEL),
            extract_relation_list(page, ANTONYMS_LABEL),
        )
    except Exception:  # pylint: disable=broad-exception-caught
        return (), ()
