"""
Bible Drafter - Builds HTML tables comparing Bible translations verse by verse.
"""

from .models import (
    BookInfo,
    DraftError,
    ErrorLog,
    InvalidRangeError,
    Range,
    TranslationSpec,
    UnknownBookError,
    VerseRecord,
)
from .books import find_book, get_book_by_code, get_book_by_name
from .config import TRANSLATIONS
from .drafts import aggregate
from .fetcher import VerseFetcher, classify_result
from .ranges import chapter_windows, parse_range, verse_range
from .render import DraftDocument, render_document, render_verse_block

__all__ = [
    "BookInfo",
    "DraftError",
    "ErrorLog",
    "InvalidRangeError",
    "Range",
    "TranslationSpec",
    "UnknownBookError",
    "VerseRecord",
    "find_book",
    "get_book_by_code",
    "get_book_by_name",
    "TRANSLATIONS",
    "aggregate",
    "VerseFetcher",
    "classify_result",
    "chapter_windows",
    "parse_range",
    "verse_range",
    "DraftDocument",
    "render_document",
    "render_verse_block",
]

__version__ = "0.1.0"
