"""Merge the per-translation results of a verse into one record."""

import logging
from typing import Mapping, Sequence

from .config import TRANSLATIONS
from .models import ErrorLog, LookupFailure, Passage, TranslationSpec, VerseRecord, VerseResult


logger = logging.getLogger(__name__)


def aggregate(
    book_name: str,
    chapter: int,
    verse: int,
    results: Mapping[str, VerseResult],
    error_log: ErrorLog,
    translations: Sequence[TranslationSpec] = TRANSLATIONS,
) -> VerseRecord:
    """
    Build the VerseRecord for one verse.

    Every translation gets an entry. Failed or empty lookups stay blank and are
    noted in error_log instead of raising.
    """
    record = VerseRecord.empty(translations)

    for spec in translations:
        result = results.get(spec.key)
        reference = f"{book_name} Ch {chapter}:{verse} ({spec.key})"

        if isinstance(result, Passage):
            record[spec.key] = result.text
        elif isinstance(result, LookupFailure):
            msg = f"ERROR: {result.message} for {reference}"
            logger.error(msg)
            error_log.append(msg)
        else:
            msg = f"WARN: Verse undefined for {reference}"
            logger.warning(msg)
            error_log.append(msg)

    return record
