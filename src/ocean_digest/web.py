"""HTTP API consumed by the digest UI."""

import logging
from typing import Any, Optional

from flask import Flask, Response, jsonify, request

from ocean_digest.adapters.llm import CerebrasClient
from ocean_digest.adapters.llm.interpreter import DEFAULT_TIP
from ocean_digest.adapters.sources import RSSFeedFetcher
from ocean_digest.config import Settings, get_settings
from ocean_digest.core import (
    Article,
    CompletionClient,
    ConfigurationError,
    RemoteServiceError,
    TransientServiceError,
)
from ocean_digest.use_cases import FeedAggregator, QuizService, SummaryService

logger = logging.getLogger(__name__)


def _parse_articles(payload: Any) -> Optional[list[Article]]:
    """Articles from a request body; None when the shape is wrong."""
    raw = payload.get("articles", [])
    if raw is None:
        return []
    if not isinstance(raw, list):
        return None
    return [Article.from_dict(entry) for entry in raw if isinstance(entry, dict)]


def create_app(
    settings: Optional[Settings] = None,
    aggregator: Optional[FeedAggregator] = None,
    completion_client: Optional[CompletionClient] = None,
) -> Flask:
    """Build the Flask application with its collaborators wired in."""
    settings = settings or get_settings()
    completion_client = completion_client or CerebrasClient(settings)
    aggregator = aggregator or FeedAggregator.from_settings(
        settings, RSSFeedFetcher(timeout=settings.feeds.timeout)
    )
    summary_service = SummaryService(completion_client, settings)
    quiz_service = QuizService(completion_client, settings)

    app = Flask(__name__)

    @app.after_request
    def allow_cross_origin(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        return response

    @app.get("/api/fetch-feeds")
    async def fetch_feeds():
        try:
            articles = await aggregator.aggregate()
        except Exception:
            logger.exception("Error fetching feeds")
            return jsonify(error="Failed to fetch feeds", articles=[]), 500

        return jsonify(articles=[article.to_dict() for article in articles])

    @app.post("/api/summarize")
    async def summarize():
        payload = request.get_json(silent=True) or {}
        question = payload.get("question") if isinstance(payload, dict) else None
        articles = _parse_articles(payload) if isinstance(payload, dict) else None

        if isinstance(question, str) and not question.strip():
            question = None

        if question:
            return await _answer(articles, question)
        return await _digest(articles)

    async def _answer(articles: Optional[list[Article]], question: Any):
        if articles is None or not isinstance(question, str):
            return jsonify(error="Expected 'articles' list and 'question' string"), 400

        try:
            result = await summary_service.answer(articles, question.strip())
        except ConfigurationError as e:
            return jsonify(error=e.message), 400
        except (RemoteServiceError, TransientServiceError) as e:
            logger.error("Question answering failed: %s", e)
            return jsonify(error="Failed to get an answer from the model"), 502
        except Exception:
            logger.exception("Unexpected error answering question")
            return jsonify(error="Failed to answer question"), 500

        return jsonify(result.to_dict())

    async def _digest(articles: Optional[list[Article]]):
        fallback = {
            "digest": SummaryService.FALLBACK_DIGEST,
            "tipOfTheDay": DEFAULT_TIP,
        }
        if articles is None:
            return jsonify(error="Expected 'articles' list", **fallback), 400

        try:
            result = await summary_service.summarize(articles)
        except ConfigurationError as e:
            return jsonify(error=e.message, **fallback), 400
        except (RemoteServiceError, TransientServiceError) as e:
            logger.error("Digest generation failed: %s", e)
            return jsonify(error="Failed to generate summary", **fallback), 500
        except Exception:
            logger.exception("Unexpected error generating digest")
            return jsonify(error="Failed to generate summary", **fallback), 500

        return jsonify(result.to_dict())

    @app.get("/api/generate-quiz")
    async def generate_quiz():
        try:
            quiz = await quiz_service.generate()
        except Exception:
            logger.exception("Error generating quiz")
            return jsonify(error="Failed to generate quiz", questions=[]), 500

        response = jsonify(quiz.to_dict())
        response.headers["Cache-Control"] = "no-store"
        return response

    return app
