"""Verse lookup against bible.com."""

import json
import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter

from .config import BASE_URL, DEFAULT_TIMEOUT, REQUEST_HEADERS


logger = logging.getLogger(__name__)

session = requests.Session()
session.headers.update(REQUEST_HEADERS)
# Keep-alive across the per-verse lookups
adapter = HTTPAdapter(pool_connections=10, pool_maxsize=10)
session.mount("http://", adapter)
session.mount("https://", adapter)


def verse_url(book_code: str, chapter: int, verse: int, translation_id: int) -> str:
    """e.g. https://www.bible.com/bible/59/JAS.1.1"""
    return f"{BASE_URL}/{translation_id}/{book_code.upper()}.{chapter}.{verse}"


def extract_verse(html: str) -> tuple[Optional[str], Optional[str]]:
    """
    Extract (citation, passage) from a bible.com verse page.

    The page embeds its data as JSON in script#__NEXT_DATA__. Either value is
    None when the page has no verse content.
    """
    soup = BeautifulSoup(html, "html.parser")
    script = soup.find("script", id="__NEXT_DATA__")
    if not script or not script.string:
        return None, None

    try:
        data = json.loads(script.string)
    except json.JSONDecodeError:
        logger.debug("Unreadable __NEXT_DATA__ payload")
        return None, None

    verses = data.get("props", {}).get("pageProps", {}).get("verses") or []
    if not verses:
        return None, None

    first = verses[0]
    citation = (first.get("reference") or {}).get("human")
    passage = first.get("content")
    if passage:
        passage = " ".join(passage.split())
    return citation, passage or None


def get_verse(
    book_code: str,
    chapter: int,
    verse: int,
    translation_id: int,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict:
    """
    Look up one verse in one translation.

    Args:
        book_code: USFM book code (e.g., 'JAS')
        chapter: Chapter number
        verse: Verse number
        translation_id: bible.com version id
        timeout: Request timeout in seconds

    Returns:
        {"citation": ..., "passage": ...} on success (passage may be None), or
        {"code": ..., "message": ...} when the lookup failed. Remote failures
        never raise.
    """
    url = verse_url(book_code, chapter, verse, translation_id)
    logger.debug("GET %s", url)
    try:
        response = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        return {"code": 0, "message": str(e)}

    if response.status_code != 200:
        return {
            "code": response.status_code,
            "message": response.reason or f"HTTP {response.status_code}",
        }

    citation, passage = extract_verse(response.text)
    return {"citation": citation, "passage": passage}
