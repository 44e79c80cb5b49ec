# -*- coding: utf-8 -*-
"""
Error kinds raised by the extraction pipeline.

StructuralMismatch: a required anchor is missing or unparsable; the
    whole scrape is "not found".
SoftMiss: an optional field could not be read; the field falls back
    to its empty value.
RetrievalFailure: a page could not be fetched. Fatal for the search
    page, absorbed for the relation page.
"""

from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


class ScrapeError(Exception):
    """Base class for all pipeline errors."""

    recoverable = False


class StructuralMismatch(ScrapeError):
    """A required element is absent or does not have the expected shape."""

    recoverable = False


class SoftMiss(ScrapeError):
    """An optional element is absent; callers substitute a default."""

    recoverable = True


class RetrievalFailure(ScrapeError):
    """Network error, timeout or non-success HTTP status."""

    recoverable = False

    def __init__(
        self, url: str, reason: str, status_code: Optional[int] = None
    ) -> None:
        super().__init__(f"could not retrieve {url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code


def recover(default: T, func: Callable[..., T], *args: Any) -> T:
    """Run ``func(*args)``, returning ``default`` on a recoverable error.

    Unrecoverable errors propagate unchanged.
    """
    try:
        return func(*args)
    except ScrapeError as exc:
        if not exc.recoverable:
            raise
        return default
