"""Shared fixtures."""

import pytest

from ocean_digest.config import Settings
from ocean_digest.core import Article


@pytest.fixture
def settings() -> Settings:
    """Settings with a usable API key."""
    return Settings(cerebras_api_key="test-key")


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without an API key."""
    return Settings(cerebras_api_key="")


@pytest.fixture
def articles() -> list[Article]:
    return [
        Article(
            title="Microplastics found in deep-sea sediment",
            url="https://example.org/microplastics",
            content="Researchers found microplastics at record depths.",
            date="Mon, 10 Jun 2024 08:00:00 GMT",
        ),
        Article(
            title="Coral bleaching spreads across the reef",
            url="https://example.org/coral",
            content="Marine heatwaves drive a fourth global bleaching event.",
            date="Sun, 09 Jun 2024 08:00:00 GMT",
        ),
    ]
