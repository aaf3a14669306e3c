"""Core domain layer."""

from ocean_digest.core.entities import (
    AnswerResult,
    Article,
    FeedSource,
    QuizQuestion,
    QuizResult,
    RawFeedItem,
    SummaryResult,
)
from ocean_digest.core.errors import (
    ConfigurationError,
    OceanDigestError,
    RemoteServiceError,
    SourceFetchError,
    TransientServiceError,
)
from ocean_digest.core.interfaces import CompletionClient, FeedFetcher

__all__ = [
    "Article",
    "AnswerResult",
    "FeedSource",
    "QuizQuestion",
    "QuizResult",
    "RawFeedItem",
    "SummaryResult",
    "OceanDigestError",
    "ConfigurationError",
    "SourceFetchError",
    "RemoteServiceError",
    "TransientServiceError",
    "CompletionClient",
    "FeedFetcher",
]
