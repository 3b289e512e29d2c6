"""
Settings for the drafting tool.

The translation table is the single list every component reads: it decides
which versions are fetched, the keys of each VerseRecord and the row order of
the rendered tables.
"""

from .models import TranslationSpec


# =============================================================================
# Remote Lookup
# =============================================================================

BASE_URL = "https://www.bible.com/bible"
REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Accept-Encoding": "gzip, deflate",
}
DEFAULT_TIMEOUT = 10  # seconds per request


# =============================================================================
# Translations
# =============================================================================

# Ids must match the bible.com version ids
TRANSLATIONS: tuple[TranslationSpec, ...] = (
    # Thai
    TranslationSpec("THSV11", 174, "มาตรฐาน<br>THSV 2011"),
    TranslationSpec("TNCV", 179, "อมตธรรมร่วมสมัย<br>TNCV"),
    TranslationSpec("THAERV", 203, "อ่านเข้าใจง่าย<br>Easy to read"),
    # Lanna
    TranslationSpec("NODTHNT", 1907, "คำเมือง<br>(Lanna)"),
    # Thai
    TranslationSpec("NTV", 2744, "แปลใหม่<br>(NTV)"),
    # English
    TranslationSpec("ESV", 59, "ESV"),
    # Greek
    TranslationSpec("SBLG", 156, "Greek"),
)


# =============================================================================
# Output
# =============================================================================

CHAPTERS_PER_WINDOW = 5  # Whole-book runs write one document per window
OUTPUT_DIR = "."
ERROR_LOG_FILE = "errors.json"

# Blank rows appended under every verse table for the translator's notes
ANNOTATION_ROWS: tuple[str, ...] = (
    "ร่าง<br>Draft",
    "ตรวจสอบ<br>Check",
    "หมายเหตุ<br>Notes",
    "คำถาม<br>Questions",
)
