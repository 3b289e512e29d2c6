"""
Tests for the draft aggregator.
"""

from bible_drafter.config import TRANSLATIONS
from bible_drafter.drafts import aggregate
from bible_drafter.models import ErrorLog, LookupFailure, NotFound, Passage


class TestAggregate:
    """Tests for aggregate."""

    def test_copies_passages(self, translations):
        log = ErrorLog()
        results = {"AAA": Passage("alpha text"), "BBB": Passage("beta text")}

        record = aggregate("James", 1, 1, results, log, translations)

        assert record.passages == {"AAA": "alpha text", "BBB": "beta text"}
        assert len(log) == 0

    def test_lookup_failure_is_logged_and_blank(self, translations):
        log = ErrorLog()
        results = {"AAA": Passage("alpha"), "BBB": LookupFailure(400, "bad request")}

        record = aggregate("James", 1, 1, results, log, translations)

        assert record["BBB"] == ""
        assert log.entries == ["ERROR: bad request for James Ch 1:1 (BBB)"]

    def test_not_found_is_a_warning(self, translations):
        log = ErrorLog()
        results = {"AAA": NotFound(), "BBB": Passage("beta")}

        record = aggregate("Mark", 7, 16, results, log, translations)

        assert record["AAA"] == ""
        assert log.entries == ["WARN: Verse undefined for Mark Ch 7:16 (AAA)"]

    def test_every_key_present_when_all_fail(self):
        log = ErrorLog()
        results = {spec.key: LookupFailure(0, "offline") for spec in TRANSLATIONS}

        record = aggregate("James", 1, 1, results, log)

        assert list(record.keys()) == [spec.key for spec in TRANSLATIONS]
        assert all(record[spec.key] == "" for spec in TRANSLATIONS)
        assert len(log) == len(TRANSLATIONS)

    def test_missing_result_counts_as_not_found(self, translations):
        log = ErrorLog()

        record = aggregate("James", 2, 3, {}, log, translations)

        assert record.passages == {"AAA": "", "BBB": ""}
        assert len(log) == 2

    def test_records_are_not_shared(self, translations):
        log = ErrorLog()
        first = aggregate("James", 1, 1, {"AAA": Passage("one")}, log, translations)
        second = aggregate("James", 1, 2, {"BBB": Passage("two")}, log, translations)

        assert first is not second
        assert first.passages == {"AAA": "one", "BBB": ""}
        assert second.passages == {"AAA": "", "BBB": "two"}
