# -*- coding: utf-8 -*-
"""
String helpers shared by the extractors.
"""

import re
from typing import Dict, Iterable, Tuple

# German letters; inflected forms may also contain "é" and "-"
LETTERS = "a-zA-ZäöüÄÖÜß"
FORM_LETTERS = LETTERS + "é-"

FLEXION_SEPARATOR = "·"
# Unicode \s covers the no-break spaces
WHITESPACE_RE = re.compile(r"\s+")


def norm_ws(s: str) -> str:
    """Flatten an example sentence onto one line with single spaces.

    Line breaks from ``<br>`` and the no-break spaces verben.de puts
    before punctuation count as ordinary spaces.
    """
    return WHITESPACE_RE.sub(" ", s)


_STRIP_CACHE: Dict[str, "re.Pattern[str]"] = {}


def strip_non_letters(s: str, keep: str = "") -> str:
    """Trim leading/trailing characters that are not letters.

    ``keep`` lists extra characters (regex class syntax) that are
    treated like letters, e.g. ``"-"`` or ``")("``.
    """
    pattern = _STRIP_CACHE.get(keep)
    if pattern is None:
        allowed = LETTERS + keep
        pattern = re.compile(rf"^[^{allowed}]+|[^{allowed}]+$")
        _STRIP_CACHE[keep] = pattern
    return pattern.sub("", s)


def unique(items: Iterable[str]) -> Tuple[str, ...]:
    """Drop exact duplicates, keeping first-seen order."""
    return tuple(dict.fromkeys(items))
