"""Book catalog: codes, names and verse counts for the 66 books."""

import json
from functools import lru_cache
from pathlib import Path

from .models import BookInfo, UnknownBookError


BOOKS_FILE = Path(__file__).parent / "data" / "books.json"


def _normalize(name: str) -> str:
    """Lowercase a book name and drop spaces/underscores ('1_peter' == '1 Peter')."""
    return name.lower().replace("_", "").replace(" ", "")


@lru_cache(maxsize=None)
def load_books(path: str = str(BOOKS_FILE)) -> tuple[BookInfo, ...]:
    """Load the book catalog (canonical order)."""
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    return tuple(
        BookInfo(
            code=entry["code"],
            name=entry["name"],
            verses_per_chapter=tuple(entry["verses"]),
            localized_name=entry.get("localized_name"),
            aliases=tuple(entry.get("aliases", [])),
        )
        for entry in raw
    )


def get_book_by_code(code: str) -> BookInfo:
    """Find a book by its USFM code or a 3-letter alias, e.g. 'JAS' or 'Jam'."""
    wanted = code.upper()
    for book in load_books():
        if book.code == wanted or wanted in (a.upper() for a in book.aliases):
            return book
    raise UnknownBookError(f"Unknown book code: {code}")


def get_book_by_name(name: str) -> BookInfo:
    """Find a book by its English name, e.g. 'James', '1 Peter' or '1_peter'."""
    wanted = _normalize(name)
    for book in load_books():
        if _normalize(book.name) == wanted:
            return book
        if any(_normalize(alias) == wanted for alias in book.aliases):
            return book
    raise UnknownBookError(f"Unknown book name: {name}")


def find_book(text: str) -> BookInfo:
    """
    Resolve the --book argument.

    Three characters are read as a code first ('Jam', 'JHN'), anything else as
    a name first. The other lookup is tried before giving up, so 'Job' and
    'Acts' work either way.
    """
    text = text.strip()
    lookups = (get_book_by_code, get_book_by_name)
    if len(text) != 3:
        lookups = (get_book_by_name, get_book_by_code)

    for lookup in lookups:
        try:
            return lookup(text)
        except UnknownBookError:
            continue
    raise UnknownBookError(f"Unknown book: {text}")
