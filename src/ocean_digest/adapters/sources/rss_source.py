"""RSS/Atom feed fetcher."""

import logging
from typing import Any

import feedparser  # type: ignore
import httpx

from ocean_digest.core import FeedFetcher, FeedSource, RawFeedItem, SourceFetchError

logger = logging.getLogger(__name__)


class RSSFeedFetcher(FeedFetcher):
    """Fetch feed documents over HTTP and parse them with feedparser."""

    name = "RSS"

    def __init__(self, timeout: float = 15.0, user_agent: str = "OceanDigestBot/1.0") -> None:
        self.timeout = timeout
        self.user_agent = user_agent

    async def fetch_items(self, source: FeedSource) -> list[RawFeedItem]:
        """Fetch raw items from one feed source."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                response = await client.get(source.url, headers={"User-Agent": self.user_agent})
        except httpx.HTTPError as e:
            raise SourceFetchError(f"Network error fetching {source.url}: {e}") from e

        if response.status_code != 200:
            raise SourceFetchError(
                f"HTTP {response.status_code} from {source.url}",
                details={"status_code": response.status_code},
            )

        return self._parse_feed(response.content, source)

    def _parse_feed(self, content: bytes | str, source: FeedSource) -> list[RawFeedItem]:
        """Parse an RSS 2.0 or Atom document into raw items."""
        feed = feedparser.parse(content)

        if feed.bozo and not feed.entries:
            raise SourceFetchError(
                f"Could not parse feed {source.url}: {feed.get('bozo_exception')}"
            )

        items = [self._to_raw_item(entry) for entry in feed.entries[: source.max_items]]
        logger.debug("Parsed %d items from %s", len(items), source.url)
        return items

    @staticmethod
    def _to_raw_item(entry: Any) -> RawFeedItem:
        snippet = entry.get("summary") or ""
        if not snippet and entry.get("content"):
            snippet = entry["content"][0].get("value", "")

        return RawFeedItem(
            title=entry.get("title", ""),
            link=entry.get("link", ""),
            snippet=snippet,
            published=entry.get("published"),
            updated=entry.get("updated"),
            published_parsed=entry.get("published_parsed"),
            updated_parsed=entry.get("updated_parsed"),
        )
