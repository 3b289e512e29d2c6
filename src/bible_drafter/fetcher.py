"""Fetch every configured translation of a verse in parallel."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Sequence

from . import client
from .config import DEFAULT_TIMEOUT, TRANSLATIONS
from .models import LookupFailure, NotFound, Passage, TranslationSpec, VerseResult


logger = logging.getLogger(__name__)


def classify_result(response: Optional[dict]) -> VerseResult:
    """Map a raw lookup response to Passage, NotFound or LookupFailure."""
    if not response:
        return NotFound()

    code = response.get("code")
    if code is not None:
        return LookupFailure(code=code, message=response.get("message") or "Unknown error")

    passage = response.get("passage")
    if not passage:
        return NotFound()
    return Passage(text=passage)


class VerseFetcher:
    """
    Issues one lookup per translation for a verse and waits for all of them.

    Only the translations of a single verse are in flight at once; callers
    advance to the next verse after fetch() returns.
    """

    def __init__(
        self,
        translations: Sequence[TranslationSpec] = TRANSLATIONS,
        lookup: Optional[Callable[..., dict]] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.translations = tuple(translations)
        self.lookup = lookup or client.get_verse
        self.timeout = timeout
        self.executor = ThreadPoolExecutor(max_workers=max(len(self.translations), 1))

    def _fetch_one(self, book_code: str, chapter: int, verse: int, spec: TranslationSpec) -> VerseResult:
        try:
            response = self.lookup(book_code, chapter, verse, spec.external_id, timeout=self.timeout)
        except Exception as e:
            logger.exception("Lookup crashed for %s %s:%s (%s)", book_code, chapter, verse, spec.key)
            return LookupFailure(code=0, message=str(e))
        return classify_result(response)

    def fetch(self, book_code: str, chapter: int, verse: int) -> dict[str, VerseResult]:
        """Fetch all translations of one verse, keyed by translation key in table order."""
        futures = {
            spec.key: self.executor.submit(self._fetch_one, book_code, chapter, verse, spec)
            for spec in self.translations
        }
        return {key: future.result() for key, future in futures.items()}

    def close(self):
        self.executor.shutdown(wait=True)

    def __enter__(self) -> "VerseFetcher":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
