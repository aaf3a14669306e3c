"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from ocean_digest.core.entities import FeedSource, RawFeedItem


class FeedFetcher(ABC):
    """Interface for retrieving raw items from a feed source."""

    @abstractmethod
    async def fetch_items(self, source: FeedSource) -> list[RawFeedItem]:
        """Fetch up to ``source.max_items`` raw items.

        Raises:
            SourceFetchError: if the source cannot be retrieved or parsed.
        """
        pass


class CompletionClient(ABC):
    """Interface for the text-completion service."""

    @abstractmethod
    async def complete(self, prompt: str, max_tokens: int, temperature: float) -> str:
        """Return the raw text of the first completion choice."""
        pass
