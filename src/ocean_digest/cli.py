"""CLI entry point for ocean digest."""

import asyncio
from typing import Optional

import typer

from ocean_digest.adapters.llm import CerebrasClient
from ocean_digest.adapters.sources import RSSFeedFetcher
from ocean_digest.config import Settings, get_settings
from ocean_digest.core import ConfigurationError, OceanDigestError
from ocean_digest.logging import configure_logging
from ocean_digest.use_cases import FeedAggregator, QuizService, SummaryService

app = typer.Typer(help="Ocean pollution news digest.")


def _bootstrap() -> Settings:
    settings = get_settings()
    configure_logging(settings.log_level)
    return settings


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind"),
    port: Optional[int] = typer.Option(None, help="Port to listen on (default: PORT or 3001)"),
    debug: bool = False,
) -> None:
    """Run the HTTP API."""
    from ocean_digest.web import create_app

    settings = _bootstrap()
    host = host or settings.server.host
    port = port or settings.server.port

    if not settings.has_api_key:
        print("⚠️  CEREBRAS_API_KEY not found: digest and Q&A will return errors, quiz uses the local bank")

    print(f"🌊 Backend server running on http://localhost:{port}")
    create_app(settings).run(host=host, port=port, debug=debug)


@app.command()
def digest(
    question: Optional[str] = typer.Option(None, "--question", "-q", help="Ask a question instead"),
) -> None:
    """Fetch feeds and print the digest (or an answer) to the terminal."""
    settings = _bootstrap()
    try:
        asyncio.run(_run_digest(settings, question))
    except ConfigurationError as e:
        print(f"❌ {e.message}")
        raise typer.Exit(code=2)
    except OceanDigestError as e:
        print(f"❌ {e.message}")
        raise typer.Exit(code=1)


async def _run_digest(settings: Settings, question: Optional[str]) -> None:
    aggregator = FeedAggregator.from_settings(settings, RSSFeedFetcher(timeout=settings.feeds.timeout))
    service = SummaryService(CerebrasClient(settings), settings)

    print("📥 Fetching feeds...")
    articles = await aggregator.aggregate()
    print(f"✓ {len(articles)} articles")
    for i, article in enumerate(articles, 1):
        print(f"  {i}. {article.title}")
        print(f"     └─ {article.url}")

    if question:
        result = await service.answer(articles, question)
        print(f"\n💬 {result.answer}")
        return

    summary = await service.summarize(articles)
    print(f"\n📝 {summary.digest}")
    print(f"\n💡 Tip of the day: {summary.tip_of_the_day}")


@app.command()
def quiz() -> None:
    """Print a 5-question quiz with answers."""
    settings = _bootstrap()
    result = asyncio.run(QuizService(CerebrasClient(settings), settings).generate())

    source = "local bank" if result.is_fallback else settings.completion.model
    print(f"🧠 Quiz {result.request_id} ({source})")
    for question in result.questions:
        print(f"\n{question.id}. {question.question}")
        for idx, choice in enumerate(question.choices):
            marker = "✓" if idx == question.correct_index else " "
            print(f"  {marker} {chr(65 + idx)}. {choice}")
        if question.explanation:
            print(f"     └─ {question.explanation}")


if __name__ == "__main__":
    app()
