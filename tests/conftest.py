"""
Pytest configuration and fixtures.
"""

import pytest

from bible_drafter.books import get_book_by_name
from bible_drafter.models import BookInfo, TranslationSpec


@pytest.fixture
def james():
    """James: 5 chapters."""
    return get_book_by_name("James")


@pytest.fixture
def tiny_book():
    """A made-up book without a localized name."""
    return BookInfo(code="TST", name="Testament", verses_per_chapter=(3, 2))


@pytest.fixture
def translations():
    """A short translation table."""
    return (
        TranslationSpec("AAA", 1, "Alpha"),
        TranslationSpec("BBB", 2, "Beta<br>B"),
    )


@pytest.fixture
def fake_lookup():
    """Lookup that answers every verse with '<id>:<book> <chapter>:<verse>' and records calls."""
    calls = []

    def lookup(book_code, chapter, verse, translation_id, timeout=None):
        calls.append((book_code, chapter, verse, translation_id))
        return {"citation": f"{book_code} {chapter}:{verse}",
                "passage": f"{translation_id}:{book_code} {chapter}:{verse}"}

    lookup.calls = calls
    return lookup
