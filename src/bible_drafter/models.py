"""Data models for Bible drafting."""

import json
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union


# =============================================================================
# Errors
# =============================================================================

class DraftError(Exception):
    """Base class for input problems that stop a drafting run."""


class InvalidRangeError(DraftError, ValueError):
    """A chapter or verse expression could not be resolved."""


class UnknownBookError(DraftError, KeyError):
    """No book in the catalog matches the given name or code."""

    def __str__(self) -> str:
        return self.args[0] if self.args else "Unknown book"


# =============================================================================
# Reference Data
# =============================================================================

@dataclass(frozen=True)
class TranslationSpec:
    """A Bible translation queried for every verse."""

    key: str  # e.g., "ESV", "THSV11"
    external_id: int  # bible.com version id
    display_name: str  # Label for the table, may contain <br>


@dataclass(frozen=True)
class BookInfo:
    """Catalog entry for one Bible book."""

    code: str  # USFM code, e.g., "JAS"
    name: str  # e.g., "James"
    verses_per_chapter: tuple[int, ...]
    localized_name: Optional[str] = None  # e.g., "ยากอบ"
    aliases: tuple[str, ...] = ()

    @property
    def chapters(self) -> int:
        return len(self.verses_per_chapter)

    def verses_in_chapter(self, chapter: int) -> Optional[int]:
        """Number of verses in a chapter, or None if the chapter is unknown."""
        if 1 <= chapter <= self.chapters:
            return self.verses_per_chapter[chapter - 1]
        return None


@dataclass(frozen=True)
class Range:
    """Inclusive range of chapter or verse numbers."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 1:
            raise InvalidRangeError(f"Range must start at 1 or later, got {self.start}")
        if self.start > self.end:
            raise InvalidRangeError(f"Range start {self.start} is after end {self.end}")

    def __iter__(self):
        return iter(range(self.start, self.end + 1))

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"


# =============================================================================
# Fetch Results
# =============================================================================

@dataclass(frozen=True)
class Passage:
    """A verse text returned by the lookup."""

    text: str


@dataclass(frozen=True)
class NotFound:
    """The lookup succeeded but returned no verse text (e.g., footnote-only verses)."""


@dataclass(frozen=True)
class LookupFailure:
    """The lookup returned an error code."""

    code: int
    message: str


VerseResult = Union[Passage, NotFound, LookupFailure]


# =============================================================================
# Per-Run Data
# =============================================================================

@dataclass
class VerseRecord:
    """Passages of one verse, keyed by translation key in table order."""

    passages: dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls, translations: Iterable[TranslationSpec]) -> "VerseRecord":
        """Build a new record with a blank passage for every translation."""
        return cls(passages={spec.key: "" for spec in translations})

    def __getitem__(self, key: str) -> str:
        return self.passages[key]

    def __setitem__(self, key: str, text: str):
        self.passages[key] = text

    def keys(self):
        return self.passages.keys()


@dataclass
class ErrorLog:
    """Diagnostics collected during a run, written out as errors.json."""

    entries: list[str] = field(default_factory=list)

    def append(self, message: str):
        self.entries.append(message)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.entries, indent=indent, ensure_ascii=False)
