"""Shared filtering utilities for sources."""

import calendar
import re
import time
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from typing import Optional

from ocean_digest.core import RawFeedItem

TAG_PATTERN = re.compile(r"<[^>]*>")


def is_relevant(title: str, snippet: str, keywords: Iterable[str]) -> bool:
    """
    Check if an item matches the topical keyword set.

    Matching is a case-insensitive substring test on title and snippet, so
    "seahorse" matches "sea". Callers pass the snippet with markup removed.
    """
    text = f"{title} {snippet}".lower()
    return any(keyword.lower() in text for keyword in keywords)


def strip_html(text: str, limit: Optional[int] = None) -> str:
    """Remove ``<...>`` sequences, optionally capping the result at ``limit`` characters."""
    stripped = TAG_PATTERN.sub("", text or "")
    return stripped if limit is None else stripped[:limit]


def struct_to_datetime(value: Optional[time.struct_time]) -> Optional[datetime]:
    """Convert a feedparser ``*_parsed`` value (UTC struct_time) to an aware datetime."""
    if value is None:
        return None
    return datetime.fromtimestamp(calendar.timegm(value), tz=timezone.utc)


def resolve_item_date(item: RawFeedItem, now: datetime) -> tuple[datetime, str]:
    """Pick the published date, then the updated date, else ``now``.

    Returns the timestamp used for ranking and the string kept on the
    article. Items feedparser could not date rank as the newest.
    """
    candidates = (
        (item.published_parsed, item.published),
        (item.updated_parsed, item.updated),
    )
    for parsed, raw in candidates:
        published_at = struct_to_datetime(parsed)
        if published_at is not None:
            return published_at, (raw or "").strip() or published_at.isoformat()
    return now, now.isoformat()


def is_recent(published_at: datetime, now: datetime, max_age_days: int = 7) -> bool:
    """Check if timestamp is within ``max_age_days`` before ``now``."""
    return published_at >= now - timedelta(days=max_age_days)
