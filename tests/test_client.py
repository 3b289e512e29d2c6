"""
Tests for the bible.com lookup client.
"""

import json

import requests

from bible_drafter import client


def verse_page(verses):
    data = {"props": {"pageProps": {"verses": verses}}}
    return (
        "<html><head></head><body>"
        f'<script id="__NEXT_DATA__" type="application/json">{json.dumps(data)}</script>'
        "</body></html>"
    )


class FakeResponse:
    def __init__(self, text="", status_code=200, reason="OK"):
        self.text = text
        self.status_code = status_code
        self.reason = reason


class TestExtractVerse:
    """Tests for extract_verse."""

    def test_reads_next_data(self):
        html = verse_page([{
            "reference": {"human": "James 1:1"},
            "content": "James, a servant of God\n  and of the Lord Jesus Christ,",
        }])

        citation, passage = client.extract_verse(html)

        assert citation == "James 1:1"
        assert passage == "James, a servant of God and of the Lord Jesus Christ,"

    def test_empty_content(self):
        html = verse_page([{"reference": {"human": "Mark 7:16"}, "content": ""}])
        assert client.extract_verse(html) == ("Mark 7:16", None)

    def test_no_verses(self):
        assert client.extract_verse(verse_page([])) == (None, None)

    def test_no_script(self):
        assert client.extract_verse("<html><body><p>Not here</p></body></html>") == (None, None)

    def test_broken_json(self):
        html = '<script id="__NEXT_DATA__">{not json</script>'
        assert client.extract_verse(html) == (None, None)


class TestGetVerse:
    """Tests for get_verse with a patched session."""

    def test_url(self):
        assert client.verse_url("jas", 1, 2, 59) == "https://www.bible.com/bible/59/JAS.1.2"

    def test_success(self, monkeypatch):
        seen = {}

        def fake_get(url, timeout=None):
            seen["url"] = url
            seen["timeout"] = timeout
            return FakeResponse(verse_page([{"reference": {"human": "James 1:1"}, "content": "Text"}]))

        monkeypatch.setattr(client.session, "get", fake_get)

        result = client.get_verse("JAS", 1, 1, 59, timeout=3)

        assert result == {"citation": "James 1:1", "passage": "Text"}
        assert seen == {"url": "https://www.bible.com/bible/59/JAS.1.1", "timeout": 3}

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(
            client.session, "get",
            lambda url, timeout=None: FakeResponse(status_code=404, reason="Not Found"),
        )

        assert client.get_verse("JAS", 9, 1, 59) == {"code": 404, "message": "Not Found"}

    def test_transport_error(self, monkeypatch):
        def boom(url, timeout=None):
            raise requests.ConnectionError("connection refused")

        monkeypatch.setattr(client.session, "get", boom)

        result = client.get_verse("JAS", 1, 1, 59)

        assert result["code"] == 0
        assert "connection refused" in result["message"]
