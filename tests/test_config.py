"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from ocean_digest.config import PLACEHOLDER_API_KEY, Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("CEREBRAS_API_KEY", "CEREBRAS_MODEL", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    with patch("ocean_digest.config.load_dotenv"):
        yield monkeypatch


def test_defaults(clean_env, tmp_path: Path) -> None:
    settings = get_settings(tmp_path / "missing.yaml")

    assert settings.cerebras_api_key == ""
    assert not settings.has_api_key
    assert settings.completion.model == "llama-3.3-70b"
    assert settings.server.port == 3001
    assert len(settings.feed_sources) == 3
    assert settings.keywords == frozenset({
        "ocean", "marine", "sea", "pollution", "plastic",
        "coastal", "water", "climate", "fish", "coral",
    })


def test_environment_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("CEREBRAS_API_KEY", "secret")
    clean_env.setenv("CEREBRAS_MODEL", "llama3.1-8b")
    clean_env.setenv("PORT", "8080")

    settings = get_settings(tmp_path / "missing.yaml")

    assert settings.has_api_key
    assert settings.completion.model == "llama3.1-8b"
    assert settings.server.port == 8080


def test_yaml_overrides(clean_env, tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "feeds:\n"
        "  sources:\n"
        "    - https://example.org/rss\n"
        "  max_items_per_source: 30\n"
        "completion:\n"
        "  timeout: 5\n",
        encoding="utf-8",
    )

    settings = get_settings(config_path)

    assert [source.url for source in settings.feed_sources] == ["https://example.org/rss"]
    assert settings.feed_sources[0].max_items == 30
    assert settings.completion.timeout == 5


def test_placeholder_key_is_not_configured() -> None:
    assert not Settings(cerebras_api_key=PLACEHOLDER_API_KEY).has_api_key
    assert Settings(cerebras_api_key="real").has_api_key
