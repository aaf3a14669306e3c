"""Tests for shared filtering utilities."""

from datetime import datetime, timedelta, timezone

import pytest

from ocean_digest.adapters.sources.filters import (
    is_recent,
    is_relevant,
    resolve_item_date,
    strip_html,
    struct_to_datetime,
)
from ocean_digest.config import FeedsConfig
from ocean_digest.core import RawFeedItem

KEYWORDS = FeedsConfig().keywords
NOW = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)


def test_is_relevant_match_in_title():
    assert is_relevant("Ocean heatwave hits Pacific", "", KEYWORDS)


def test_is_relevant_match_in_snippet():
    assert is_relevant("New report", "Plastic waste doubled since 2000", KEYWORDS)


def test_is_relevant_case_insensitive():
    assert is_relevant("CORAL REEFS IN DANGER", "", KEYWORDS)
    assert is_relevant("reef", "", ["REEF"])


def test_is_relevant_substring_not_word_boundary():
    """Test that "seahorse" matches the keyword "sea"."""
    assert is_relevant("Seahorse population recovers", "", ["sea"])


def test_is_relevant_no_match():
    assert not is_relevant("Stock markets rally", "Tech shares lead gains", KEYWORDS)


def test_strip_html_removes_tags():
    assert strip_html("<p>Hello <b>reef</b></p>") == "Hello reef"


def test_strip_html_caps_length():
    text = strip_html("<div>" + "x" * 5000 + "</div>", limit=1000)

    assert len(text) == 1000
    assert "<" not in text


def test_strip_html_handles_empty():
    assert strip_html("") == ""


def test_is_recent_window():
    assert is_recent(NOW - timedelta(days=6, hours=23), NOW)
    assert is_recent(NOW - timedelta(days=7), NOW)
    assert not is_recent(NOW - timedelta(days=7, seconds=1), NOW)
    assert is_recent(NOW + timedelta(hours=1), NOW)


def _struct(value: datetime):
    return value.astimezone(timezone.utc).utctimetuple()


def test_struct_to_datetime_is_utc():
    parsed = struct_to_datetime(_struct(datetime(2024, 6, 10, 8, 0, tzinfo=timezone.utc)))

    assert parsed == datetime(2024, 6, 10, 8, 0, tzinfo=timezone.utc)
    assert parsed.tzinfo == timezone.utc


def test_struct_to_datetime_none():
    assert struct_to_datetime(None) is None


def test_resolve_item_date_prefers_published():
    item = RawFeedItem(
        title="t", link="l", snippet="",
        published="Sun, 09 Jun 2024 00:00:00 GMT",
        published_parsed=_struct(datetime(2024, 6, 9, tzinfo=timezone.utc)),
        updated="2024-06-01T00:00:00Z",
        updated_parsed=_struct(datetime(2024, 6, 1, tzinfo=timezone.utc)),
    )

    parsed, text = resolve_item_date(item, NOW)

    assert parsed == datetime(2024, 6, 9, tzinfo=timezone.utc)
    assert text == "Sun, 09 Jun 2024 00:00:00 GMT"


def test_resolve_item_date_falls_back_to_updated():
    item = RawFeedItem(
        title="t", link="l", snippet="",
        published="garbage",
        updated="2024-06-01T00:00:00Z",
        updated_parsed=_struct(datetime(2024, 6, 1, tzinfo=timezone.utc)),
    )

    parsed, text = resolve_item_date(item, NOW)

    assert parsed == datetime(2024, 6, 1, tzinfo=timezone.utc)
    assert text == "2024-06-01T00:00:00Z"


def test_resolve_item_date_keeps_iso_when_raw_missing():
    item = RawFeedItem(
        title="t", link="l", snippet="",
        published_parsed=_struct(datetime(2024, 6, 9, tzinfo=timezone.utc)),
    )

    _, text = resolve_item_date(item, NOW)

    assert text == "2024-06-09T00:00:00+00:00"


@pytest.mark.parametrize("published", [None, "garbage"])
def test_resolve_item_date_falls_back_to_now(published):
    """Test items feedparser could not date rank as newest."""
    item = RawFeedItem(title="t", link="l", snippet="", published=published)

    parsed, text = resolve_item_date(item, NOW)

    assert parsed == NOW
    assert text == NOW.isoformat()
