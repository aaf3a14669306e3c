"""Business logic use cases."""

import asyncio
import logging
import uuid
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone
from typing import Optional

from ocean_digest.adapters.llm.interpreter import (
    interpret_answer,
    interpret_digest,
    interpret_quiz,
)
from ocean_digest.adapters.llm.prompts import (
    build_digest_prompt,
    build_question_prompt,
    build_quiz_prompt,
)
from ocean_digest.adapters.quiz import generate_fallback_quiz
from ocean_digest.adapters.sources.filters import (
    is_recent,
    is_relevant,
    resolve_item_date,
    strip_html,
)
from ocean_digest.config import CompletionConfig, Settings
from ocean_digest.core import (
    AnswerResult,
    Article,
    CompletionClient,
    ConfigurationError,
    FeedFetcher,
    FeedSource,
    QuizResult,
    RawFeedItem,
    RemoteServiceError,
    SummaryResult,
    TransientServiceError,
)

logger = logging.getLogger(__name__)


class FeedAggregator:
    """Collect, filter and rank articles from a fixed set of feed sources."""

    def __init__(
        self,
        sources: Sequence[FeedSource],
        fetcher: FeedFetcher,
        keywords: Iterable[str],
        max_age_days: int = 7,
        max_articles: int = 7,
        content_limit: int = 1000,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.sources = tuple(sources)
        self.fetcher = fetcher
        self.keywords = frozenset(keyword.lower() for keyword in keywords)
        self.max_age_days = max_age_days
        self.max_articles = max_articles
        self.content_limit = content_limit
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, fetcher: FeedFetcher) -> "FeedAggregator":
        return cls(
            sources=settings.feed_sources,
            fetcher=fetcher,
            keywords=settings.keywords,
            max_age_days=settings.feeds.max_age_days,
            max_articles=settings.feeds.max_articles,
            content_limit=settings.feeds.content_limit,
        )

    async def aggregate(self) -> list[Article]:
        """Return at most ``max_articles`` articles, most recent first."""
        now = self.clock()

        # One result-or-error per source
        results = await asyncio.gather(
            *(self.fetcher.fetch_items(source) for source in self.sources),
            return_exceptions=True,
        )

        dated: list[tuple[datetime, Article]] = []
        for source, result in zip(self.sources, results):
            if isinstance(result, BaseException):
                logger.warning("Skipping feed %s: %s", source.url, result)
                continue

            kept = self._select(result[: source.max_items], now)
            logger.info("Feed %s: %d of %d items kept", source.url, len(kept), len(result))
            dated.extend(kept)

        # sorted() is stable with reverse=True, so ties keep source order
        dated = sorted(dated, key=lambda pair: pair[0], reverse=True)
        return [article for _, article in dated[: self.max_articles]]

    def _select(self, items: Sequence[RawFeedItem], now: datetime) -> list[tuple[datetime, Article]]:
        selected = []
        for item in items:
            text = strip_html(item.snippet)
            if not is_relevant(item.title, text, self.keywords):
                continue

            published_at, date_text = resolve_item_date(item, now)
            if not is_recent(published_at, now, self.max_age_days):
                continue

            selected.append((published_at, Article(
                title=item.title,
                url=item.link,
                content=text[: self.content_limit],
                date=date_text,
            )))
        return selected


class SummaryService:
    """Digest and question answering over a list of articles."""

    FALLBACK_DIGEST = "Unable to generate summary at this time."

    def __init__(self, completion_client: CompletionClient, settings: Settings) -> None:
        self.completion_client = completion_client
        self.settings = settings

    @property
    def config(self) -> CompletionConfig:
        return self.settings.completion

    def _require_credentials(self) -> None:
        if not self.settings.has_api_key:
            raise ConfigurationError(
                "Cerebras API key not configured. Please add CEREBRAS_API_KEY to your .env file."
            )

    async def summarize(self, articles: Sequence[Article]) -> SummaryResult:
        """Three-sentence digest plus a tip of the day."""
        self._require_credentials()
        text = await self.completion_client.complete(
            build_digest_prompt(articles),
            max_tokens=self.config.digest_max_tokens,
            temperature=self.config.temperature,
        )
        return interpret_digest(text)

    async def answer(self, articles: Sequence[Article], question: str) -> AnswerResult:
        """Answer a user question, citing articles where possible."""
        self._require_credentials()
        text = await self.completion_client.complete(
            build_question_prompt(articles, question),
            max_tokens=self.config.answer_max_tokens,
            temperature=self.config.temperature,
        )
        return interpret_answer(text)


class QuizService:
    """Quiz generation with a local fallback."""

    def __init__(
        self,
        completion_client: CompletionClient,
        settings: Settings,
        fallback: Callable[[str], QuizResult] = generate_fallback_quiz,
    ) -> None:
        self.completion_client = completion_client
        self.settings = settings
        self.fallback = fallback

    async def generate(self, request_id: Optional[str] = None) -> QuizResult:
        """Generate a quiz; any unavailability of the model yields the local quiz."""
        request_id = request_id or uuid.uuid4().hex

        if not self.settings.has_api_key:
            logger.info("No completion credentials, serving local quiz %s", request_id)
            return self.fallback(request_id)

        try:
            text = await self.completion_client.complete(
                build_quiz_prompt(request_id),
                max_tokens=self.settings.completion.quiz_max_tokens,
                temperature=self.settings.completion.quiz_temperature,
            )
        except (ConfigurationError, RemoteServiceError, TransientServiceError) as e:
            logger.warning("Quiz generation failed (%s), serving local quiz %s", e, request_id)
            return self.fallback(request_id)

        return interpret_quiz(text, request_id, self.fallback)
