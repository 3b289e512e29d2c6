"""Persist drafted documents and the error log."""

from pathlib import Path

from .config import ERROR_LOG_FILE, OUTPUT_DIR
from .models import ErrorLog
from .render import DraftDocument


def write_document(document: DraftDocument, output_dir: str = OUTPUT_DIR) -> Path:
    """Write the document's HTML and return its path."""
    path = Path(output_dir) / document.filename
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(document.render())
    return path


def write_error_log(error_log: ErrorLog, output_dir: str = OUTPUT_DIR) -> Path:
    """Overwrite errors.json with every diagnostic collected so far."""
    path = Path(output_dir) / ERROR_LOG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(error_log.to_json())
    return path
