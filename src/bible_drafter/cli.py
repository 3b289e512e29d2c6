#!/usr/bin/env python3
"""
CLI for Bible Drafter - Builds translation comparison tables from bible.com.

Usage:
    python -m bible_drafter -b James                # Whole book, 5 chapters per file
    python -m bible_drafter -b Jam -c 1-2           # Chapters 1 to 2
    python -m bible_drafter -b James -c 1 -v 1-3    # James 1:1-3
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from .books import find_book
from .config import CHAPTERS_PER_WINDOW, DEFAULT_TIMEOUT, OUTPUT_DIR, TRANSLATIONS
from .drafts import aggregate
from .fetcher import VerseFetcher
from .models import BookInfo, DraftError, ErrorLog, Range
from .ranges import chapter_windows, parse_range, validate_arguments, verse_range
from .render import DraftDocument
from .writer import write_document, write_error_log


logger = logging.getLogger(__name__)


# =============================================================================
# Drafting Logic
# =============================================================================

def draft_window(
    book: BookInfo,
    chapters: Range,
    verses: Optional[Range],
    fetcher: VerseFetcher,
    error_log: ErrorLog,
    output_dir: str = OUTPUT_DIR,
) -> Path:
    """
    Fetch and render every verse of a chapter window, then write it out.

    Verses are processed one at a time; the translations of each verse are
    fetched together. errors.json is rewritten at the end of the window.
    Without verses every chapter is processed in full.
    """
    document = DraftDocument(book, chapters, verses, fetcher.translations)

    for chapter in chapters:
        for verse in verses or verse_range(book, chapter):
            results = fetcher.fetch(book.code, chapter, verse)
            record = aggregate(book.name, chapter, verse, results, error_log, fetcher.translations)
            document.add_table(chapter, verse, record)
            print(f"\r📖 {book.name} {chapter}:{verse:<10}", end="", flush=True)

    print()
    path = write_document(document, output_dir)
    write_error_log(error_log, output_dir)
    print(f"✅ Done processing {document.title}")
    return path


def draft_book(
    book: BookInfo,
    chapters: Optional[str] = None,
    verses: Optional[str] = None,
    output_dir: str = OUTPUT_DIR,
    fetcher: Optional[VerseFetcher] = None,
    window_size: int = CHAPTERS_PER_WINDOW,
) -> list[Path]:
    """
    Draft the requested chapters of a book.

    Args:
        book: Catalog entry of the book
        chapters: Chapter expression ('3' or '1-3'), None = whole book
        verses: Verse expression ('5' or '1-7'), None = whole chapter
        output_dir: Directory for the HTML documents and errors.json
        fetcher: VerseFetcher to use (a default one is created and closed)
        window_size: Chapters per document in whole-book mode

    Returns:
        Paths of the written documents, one per window
    """
    validate_arguments(chapters, verses)
    windows = list(chapter_windows(book, chapters, window_size))
    verse_span = parse_range(verses) if verses else None

    owns_fetcher = fetcher is None
    if owns_fetcher:
        fetcher = VerseFetcher(TRANSLATIONS)

    error_log = ErrorLog()
    written = []
    try:
        for window in windows:
            written.append(draft_window(book, window, verse_span, fetcher, error_log, output_dir))
    finally:
        if owns_fetcher:
            fetcher.close()

    if error_log:
        print(f"⚠️  {len(error_log)} problem(s) recorded in errors.json")
    return written


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Drafting utilities to pull multiple Bible translations."
    )
    parser.add_argument(
        "--book", "-b",
        type=str,
        required=True,
        help="Name of book to retrieve (e.g., 'James', '1 Peter') or 3-letter code "
             "(e.g., 'Jam'). With no chapters the whole book is processed, "
             f"{CHAPTERS_PER_WINDOW} chapters per file"
    )
    parser.add_argument(
        "--chapters", "-c",
        type=str,
        help="Chapter number or range split by hyphen (e.g., '3', '1-3')"
    )
    parser.add_argument(
        "--verses", "-v",
        type=str,
        help="Verse number or range split by hyphen (e.g., '5', '1-7')"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=OUTPUT_DIR,
        help=f"Output directory (default: {OUTPUT_DIR})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Seconds to wait for each lookup (default: {DEFAULT_TIMEOUT})"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every request"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits with 2 on bad usage
        return 0 if e.code == 0 else 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        book = find_book(args.book)
        validate_arguments(args.chapters, args.verses)
        list(chapter_windows(book, args.chapters))
        if args.verses:
            parse_range(args.verses)
    except DraftError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print("📖 Bible Drafter")
    print("=" * 60)
    print(f"Book: {book.name} ({book.code})")
    print(f"Chapters: {args.chapters or 'all'}")
    print(f"Verses: {args.verses or 'all'}")
    print(f"Translations: {', '.join(spec.key for spec in TRANSLATIONS)}")
    print(f"Output: {args.output}/")
    print("=" * 60)

    start_time = time.time()
    try:
        with VerseFetcher(TRANSLATIONS, timeout=args.timeout) as fetcher:
            written = draft_book(
                book,
                chapters=args.chapters,
                verses=args.verses,
                output_dir=args.output,
                fetcher=fetcher,
            )
    except DraftError as e:
        print(f"\n❌ {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"\n❌ Could not write output: {e}", file=sys.stderr)
        return 1

    elapsed = time.time() - start_time
    print("=" * 60)
    print(f"✅ Wrote {len(written)} document(s) in {time.strftime('%H:%M:%S', time.gmtime(elapsed))}")
    for path in written:
        print(f"   {path}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
