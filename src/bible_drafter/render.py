"""HTML rendering of verse comparison tables."""

import html
from typing import Iterable, Optional, Sequence

from .config import ANNOTATION_ROWS, TRANSLATIONS
from .models import BookInfo, Range, TranslationSpec, VerseRecord


PAGE_BREAK = '<p style="page-break-after: always;"></p>'

STYLE = """\
table { border-collapse: collapse; width: 100%; }
td { border: 1px solid #000; padding: 4px; vertical-align: top; }
td.version { width: 20%; }
td.text { width: 80%; }"""


def book_heading(book: BookInfo) -> str:
    """'ยากอบ — James', or just 'James' without a localized name."""
    if book.localized_name:
        return f"{book.localized_name} — {book.name}"
    return book.name


def _row(label: str, text: str) -> str:
    return f'<tr><td class="version">{label}</td><td class="text">{text}</td></tr>'


def render_verse_block(
    book: BookInfo,
    chapter: int,
    verse: int,
    record: VerseRecord,
    translations: Sequence[TranslationSpec] = TRANSLATIONS,
    annotation_rows: Sequence[str] = ANNOTATION_ROWS,
) -> str:
    """
    Render one verse as a heading and a two-column table.

    Rows follow the translation table order, then the blank annotation rows,
    then a page break. Passage text is escaped; display names are trusted
    markup from the configuration.
    """
    lines = [
        f"<h2>{book_heading(book)} {chapter}:{verse}</h2>",
        "<table>",
    ]
    for spec in translations:
        lines.append(_row(spec.display_name, html.escape(record[spec.key])))
    for label in annotation_rows:
        lines.append(_row(label, ""))
    lines.append("</table>")
    lines.append(PAGE_BREAK)
    return "\n".join(lines) + "\n"


def render_document(title: str, blocks: Iterable[str]) -> str:
    """Wrap rendered verse blocks in a complete HTML document."""
    escaped = html.escape(title)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escaped}</title>\n"
        f"<style>\n{STYLE}\n</style>\n"
        "</head>\n"
        "<body>\n"
        f"<h1>{escaped}</h1>\n"
        + "".join(blocks)
        + "</body>\n"
        "</html>\n"
    )


class DraftDocument:
    """One output document: the verse tables of a chapter window."""

    def __init__(
        self,
        book: BookInfo,
        chapters: Range,
        verses: Optional[Range] = None,
        translations: Sequence[TranslationSpec] = TRANSLATIONS,
    ):
        self.book = book
        self.chapters = chapters
        self.verses = verses
        self.translations = tuple(translations)
        self.blocks: list[str] = []

    @property
    def title(self) -> str:
        """e.g. 'ยากอบ James 1-5' or 'ยากอบ James 1:1-3'."""
        parts = [self.book.localized_name, self.book.name] if self.book.localized_name else [self.book.name]
        title = f"{' '.join(parts)} {self.chapters}"
        if self.verses is not None:
            title += f":{self.verses}"
        return title

    @property
    def filename(self) -> str:
        """File name for the document, safe on every platform (':' becomes '_')."""
        return self.title.replace(":", "_").replace(" ", "_") + ".html"

    def add_table(self, chapter: int, verse: int, record: VerseRecord):
        self.blocks.append(
            render_verse_block(self.book, chapter, verse, record, self.translations)
        )

    def render(self) -> str:
        return render_document(self.title, self.blocks)
