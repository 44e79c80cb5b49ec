"""Shared pytest fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

# pylint: disable=wrong-import-position
from pages import (  # noqa: E402
    ANFANGEN,
    GEHEN,
    GEHEN_RELATIONS,
    GERN,
    HUND,
    SCHOEN,
    FakeFetcher,
)
from vocabase.dom import parse_document  # noqa: E402
from vocabase.fetch import relation_url  # noqa: E402
from vocabase.lemma import locate_lemma  # noqa: E402
from vocabase.model import Category  # noqa: E402


@pytest.fixture
def fetcher():
    """Fetcher serving all sample pages; only "gehen" has a synonym page."""
    return FakeFetcher(
        pages={
            "gehen": GEHEN,
            "anfangen": ANFANGEN,
            "Hund": HUND,
            "schön": SCHOEN,
            "gern": GERN,
        },
        relations={relation_url(Category.VERB, "gehen"): GEHEN_RELATIONS},
    )


@pytest.fixture
def lemma_of():
    """Parse a page and return its Lemma."""

    def _lemma_of(html):
        return locate_lemma(parse_document(html))

    return _lemma_of
