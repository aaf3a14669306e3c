"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from ocean_digest.core.entities import FeedSource

PLACEHOLDER_API_KEY = "your_cerebras_api_key_here"


@dataclass
class CompletionConfig:
    """Completion service settings."""
    base_url: str = "https://api.cerebras.ai/v1"
    model: str = "llama-3.3-70b"
    timeout: float = 30.0
    digest_max_tokens: int = 500
    answer_max_tokens: int = 300
    quiz_max_tokens: int = 900
    temperature: float = 0.7
    quiz_temperature: float = 0.3


@dataclass
class FeedsConfig:
    """Feed aggregation settings."""
    sources: list[str] = field(default_factory=lambda: [
        "https://www.unep.org/news-and-stories/rss.xml",
        "https://www.noaa.gov/news-and-features/feeds/ocean-coasts.xml",
        "https://www.theguardian.com/environment/rss",
    ])
    keywords: list[str] = field(default_factory=lambda: [
        "ocean", "marine", "sea", "pollution", "plastic",
        "coastal", "water", "climate", "fish", "coral",
    ])
    max_items_per_source: int = 20
    max_age_days: int = 7
    max_articles: int = 7
    content_limit: int = 1000
    timeout: float = 15.0


@dataclass
class ServerConfig:
    """HTTP server settings."""
    host: str = "0.0.0.0"
    port: int = 3001


@dataclass
class Settings:
    """Application settings."""

    # API key (from environment only)
    cerebras_api_key: str = ""
    log_level: str = "INFO"

    completion: CompletionConfig = field(default_factory=CompletionConfig)
    feeds: FeedsConfig = field(default_factory=FeedsConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @property
    def has_api_key(self) -> bool:
        key = self.cerebras_api_key.strip()
        return bool(key) and key != PLACEHOLDER_API_KEY

    @property
    def feed_sources(self) -> tuple[FeedSource, ...]:
        return tuple(
            FeedSource(url=url, max_items=self.feeds.max_items_per_source)
            for url in self.feeds.sources
        )

    @property
    def keywords(self) -> frozenset[str]:
        return frozenset(keyword.lower() for keyword in self.feeds.keywords)


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    load_dotenv()
    config = load_config(config_path)

    settings = Settings(
        cerebras_api_key=os.getenv("CEREBRAS_API_KEY", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )

    if "completion" in config:
        for key, value in config["completion"].items():
            setattr(settings.completion, key, value)

    if "feeds" in config:
        for key, value in config["feeds"].items():
            setattr(settings.feeds, key, value)

    if "server" in config:
        for key, value in config["server"].items():
            setattr(settings.server, key, value)

    # Environment wins over YAML
    model = os.getenv("CEREBRAS_MODEL")
    if model:
        settings.completion.model = model

    port = os.getenv("PORT")
    if port:
        settings.server.port = int(port)

    return settings
