# -*- coding: utf-8 -*-
"""
Page retrieval for verben.de.

One GET per call: no retries, no caching. Network errors, timeouts,
non-success statuses and markup the parser rejects all surface as
``RetrievalFailure``.
"""

from typing import Optional
from urllib.parse import quote

import requests
from bs4.exceptions import ParserRejectedMarkup

from .dom import Node, parse_document
from .errors import RetrievalFailure
from .model import Category

# ------------------------------------------------------------
# Config
# ------------------------------------------------------------
BASE = "https://www.verben.de"
UA = "Vocabase/1.0 (personal vocabulary builder)"
HEADERS = {"User-Agent": UA}
TIMEOUT = 10

# Path segment of the synonym pages per part of speech
RELATION_PATHS = {
    Category.VERB: "verben",
    Category.NOUN: "substantive",
    Category.ADJECTIVE: "adjektive",
    Category.ADVERB: "adverbien",
}


def search_url(query: str) -> str:
    """Build the search URL for a free-text query."""
    return f"{BASE}/?w={quote(query.strip())}"


def relation_url(category: Category, text: str) -> str:
    """Build the synonym/antonym page URL for a resolved term."""
    return f"{BASE}/{RELATION_PATHS[category]}/synonyme/{quote(text)}.htm"


class DocumentFetcher:
    """Fetches and parses pages from the dictionary host.

    Usable as a context manager; ``close`` only closes a session the
    fetcher created itself.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = TIMEOUT,
    ) -> None:
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers.update(HEADERS)
        self.session = session
        self.timeout = timeout

    def __enter__(self) -> "DocumentFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def fetch(self, url: str) -> Node:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = None
            if exc.response is not None:
                status = exc.response.status_code
            raise RetrievalFailure(url, str(exc), status) from exc
        except requests.RequestException as exc:
            raise RetrievalFailure(url, str(exc)) from exc
        try:
            return parse_document(response.text)
        except ParserRejectedMarkup as exc:
            raise RetrievalFailure(url, f"unparsable page: {exc}") from exc

    def search(self, query: str) -> Node:
        return self.fetch(search_url(query))

    def relation_page(self, category: Category, text: str) -> Node:
        return self.fetch(relation_url(category, text))
