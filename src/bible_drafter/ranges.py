"""Turn --chapters/--verses expressions into concrete ranges."""

from typing import Iterator, Optional

from .config import CHAPTERS_PER_WINDOW
from .models import BookInfo, InvalidRangeError, Range


def is_multi_value(expr: Optional[str]) -> bool:
    """True for hyphenated expressions like '1-3'."""
    return bool(expr) and "-" in expr


def parse_range(expr: str) -> Range:
    """
    Parse 'n' or 'a-b' into an inclusive Range.

    Args:
        expr: A single number or two numbers joined by a hyphen

    Returns:
        Range(n, n) for a single number, Range(a, b) for 'a-b'
    """
    parts = [part.strip() for part in expr.strip().split("-")]
    if len(parts) > 2 or not all(part.isdecimal() for part in parts):
        raise InvalidRangeError(f"Invalid range: {expr!r}")

    try:
        start = int(parts[0])
        end = int(parts[-1])
    except ValueError:
        raise InvalidRangeError(f"Invalid range: {expr!r}") from None
    return Range(start, end)


def validate_arguments(chapters: Optional[str], verses: Optional[str]):
    """Reject option combinations that cannot be resolved, before any lookup."""
    if is_multi_value(chapters) and is_multi_value(verses):
        raise InvalidRangeError(
            f"Cannot have chapter: {chapters} and verses: {verses} at the same time"
        )
    if not chapters and verses:
        raise InvalidRangeError(f"Cannot get verses {verses} without a chapter parameter")


def chapter_windows(
    book: BookInfo,
    chapters: Optional[str] = None,
    size: int = CHAPTERS_PER_WINDOW,
) -> Iterator[Range]:
    """
    Yield the chapter ranges to process, one per output document.

    Without a chapter expression the whole book is split into windows of
    `size` chapters; the last window may be shorter.
    """
    if chapters:
        window = parse_range(chapters)
        if window.end > book.chapters:
            raise InvalidRangeError(
                f"{book.name} has {book.chapters} chapters, got {chapters}"
            )
        yield window
        return

    start = 1
    while start <= book.chapters:
        end = min(start + size - 1, book.chapters)
        yield Range(start, end)
        start = end + 1


def verse_range(book: BookInfo, chapter: int, verses: Optional[str] = None) -> Range:
    """Verses to process in one chapter; the whole chapter when verses is omitted."""
    if verses:
        return parse_range(verses)

    count = book.verses_in_chapter(chapter)
    if not count:
        raise InvalidRangeError(
            f"Unable to determine verses for {book.name} chapter {chapter}"
        )
    return Range(1, count)
