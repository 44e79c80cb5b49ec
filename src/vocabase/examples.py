# -*- coding: utf-8 -*-
"""
Example sentences from the "Beispielsätze" section of a term page.

The section is optional: when it is missing or shaped differently the
term simply has no examples.
"""

import re
from typing import Tuple

from .dom import Node, find_labelled
from .errors import SoftMiss, recover
from .text import norm_ws, unique

EXAMPLES_LABEL = "Beispielsätze"
LIST_SELECTOR = "div.rAufZu > ul.rLst.rLstGt"
# Source/index reference after a line break inside an item
REFERENCE_SELECTOR = "li > br + span"

SPACED_END_RE = re.compile(r" ([.?!])$")


def normalize_example(raw: str) -> str:
    """Collapse whitespace and reattach detached punctuation.

    >>> normalize_example("Er   geht \\u00a0nach Hause .")
    'Er geht nach Hause.'
    """
    text = norm_ws(raw).strip()
    text = SPACED_END_RE.sub(r"\1", text)
    return text.replace(" ,", ",")


def _examples(document: Node) -> Tuple[str, ...]:
    heading = find_labelled(document, "h2", EXAMPLES_LABEL)
    parent = heading.parent() if heading is not None else None
    section = parent.parent() if parent is not None else None
    if section is None:
        raise SoftMiss("examples heading not found")
    examples_list = section.select_one(LIST_SELECTOR)
    if examples_list is None:
        raise SoftMiss("examples list not found")
    for reference in examples_list.select(REFERENCE_SELECTOR):
        reference.remove()
    examples = (
        normalize_example(item.whole_text())
        for item in examples_list.select("li")
    )
    return unique(example for example in examples if example)


def extract_examples(document: Node) -> Tuple[str, ...]:
    return recover((), _examples, document)
