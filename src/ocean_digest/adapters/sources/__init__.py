"""Source adapters for fetching feed items."""

from ocean_digest.adapters.sources.rss_source import RSSFeedFetcher

__all__ = ["RSSFeedFetcher"]
