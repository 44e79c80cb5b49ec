# -*- coding: utf-8 -*-
"""
Lemma locator and flexion-summary access.

Every term page has a metadata block whose parent (the "lemma
container") holds the headword, the flexion summary and the marker span
(``span.rInf``) whose children carry part-of-speech, level and grammar
hints as ``title`` attributes.
"""

import re
from dataclasses import dataclass

from .dom import Node
from .errors import StructuralMismatch
from .text import FLEXION_SEPARATOR, strip_non_letters

INFO_SELECTOR = "#wStckInf"
MARKER_SELECTOR = "span.rInf"
FLEXION_SELECTOR = "div#wStckInf > div#wStckKrz > div + p"


@dataclass(frozen=True)
class Lemma:
    container: Node
    marker: Node


def locate_lemma(document: Node) -> Lemma:
    """Find the lemma container and its marker span."""
    info = document.select_one(INFO_SELECTOR)
    container = info.parent() if info is not None else None
    if container is None:
        raise StructuralMismatch("lemma container not found")
    marker = container.select_one(MARKER_SELECTOR)
    if marker is None:
        raise StructuralMismatch("marker span not found")
    return Lemma(container=container, marker=marker)


def flexion_segment(lemma: Lemma, index: int) -> str:
    """Return one ``·``-separated segment of the flexion summary."""
    summary = lemma.container.select_one(FLEXION_SELECTOR)
    if summary is None:
        raise StructuralMismatch("flexion summary not found")
    segments = summary.whole_text().split(FLEXION_SEPARATOR)
    if index >= len(segments):
        raise StructuralMismatch(
            f"flexion summary has {len(segments)} segments, "
            f"need index {index}"
        )
    return segments[index]


def flexion_form(
    lemma: Lemma,
    index: int,
    pattern: "re.Pattern[str]",
    keep: str = "",
    what: str = "form",
) -> "re.Match[str]":
    """Clean a flexion segment and match ``pattern`` against it."""
    segment = strip_non_letters(flexion_segment(lemma, index), keep)
    match = pattern.search(segment)
    if match is None:
        raise StructuralMismatch(f"unable to extract {what}")
    return match
