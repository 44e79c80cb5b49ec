# -*- coding: utf-8 -*-
"""
Minimal DOM interface used by the extractors.

The extractors only need a handful of operations (CSS selection, text
access, attributes and neighbour navigation), so they depend on the
``Node`` protocol rather than on BeautifulSoup directly. ``SoupNode`` is
the BeautifulSoup-backed implementation.
"""

from typing import List, Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag


class Node(Protocol):
    @property
    def name(self) -> str: ...

    def select_one(self, selector: str) -> Optional["Node"]: ...

    def select(self, selector: str) -> List["Node"]: ...

    def own_text(self) -> str: ...

    def whole_text(self) -> str: ...

    def attr(self, name: str) -> Optional[str]: ...

    def next_sibling(self) -> Optional["Node"]: ...

    def parent(self) -> Optional["Node"]: ...

    def remove(self) -> None: ...


def _is_text(child: object) -> bool:
    # Comments, CDATA, doctypes etc. are PreformattedString subclasses
    return isinstance(child, NavigableString) and not isinstance(
        child, PreformattedString
    )


class SoupNode:
    """``Node`` backed by a BeautifulSoup tag."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def __repr__(self) -> str:
        return f"SoupNode(<{self._tag.name}>)"

    @property
    def name(self) -> str:
        return self._tag.name

    def select_one(self, selector: str) -> Optional["SoupNode"]:
        found = self._tag.select_one(selector)
        return SoupNode(found) if found is not None else None

    def select(self, selector: str) -> List["SoupNode"]:
        return [SoupNode(tag) for tag in self._tag.select(selector)]

    def own_text(self) -> str:
        """Text of the direct text children only."""
        return "".join(str(c) for c in self._tag.children if _is_text(c))

    def whole_text(self) -> str:
        """All descendant text, unnormalized; ``<br>`` becomes a newline."""
        parts: List[str] = []
        for child in self._tag.descendants:
            if isinstance(child, Tag):
                if child.name == "br":
                    parts.append("\n")
            elif _is_text(child):
                parts.append(str(child))
        return "".join(parts)

    def attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def next_sibling(self) -> Optional["SoupNode"]:
        sibling = self._tag.find_next_sibling()
        return SoupNode(sibling) if sibling is not None else None

    def parent(self) -> Optional["SoupNode"]:
        parent = self._tag.parent
        return SoupNode(parent) if parent is not None else None

    def remove(self) -> None:
        self._tag.decompose()


def parse_document(html: str) -> SoupNode:
    """Parse an HTML page into its root node."""
    return SoupNode(BeautifulSoup(html, "html.parser"))


def find_labelled(scope: Node, selector: str, label: str) -> Optional[Node]:
    """First match of ``selector`` whose own text contains ``label``."""
    for node in scope.select(selector):
        if label in node.own_text():
            return node
    return None
