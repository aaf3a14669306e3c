"""Cerebras chat-completions client."""

import logging

import httpx

from ocean_digest.config import Settings
from ocean_digest.core import (
    CompletionClient,
    ConfigurationError,
    RemoteServiceError,
    TransientServiceError,
)

logger = logging.getLogger(__name__)


class CerebrasClient(CompletionClient):
    """Completion client for OpenAI-compatible chat-completions endpoints.

    Issues exactly one request per call; retry policy belongs to the caller.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.api_key = settings.cerebras_api_key
        self.model = settings.completion.model
        self.base_url = settings.completion.base_url.rstrip("/")
        self.timeout = settings.completion.timeout

    async def complete(self, prompt: str, max_tokens: int, temperature: float) -> str:
        """Send prompt and return the text of the first choice."""
        if not self.settings.has_api_key:
            raise ConfigurationError(
                "Cerebras API key not configured. Please add CEREBRAS_API_KEY to your .env file."
            )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    json={
                        "model": self.model,
                        "messages": [
                            {"role": "user", "content": prompt}
                        ],
                        "temperature": temperature,
                        "max_tokens": max_tokens,
                    },
                )
        except httpx.TimeoutException as e:
            raise TransientServiceError(f"Completion request timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            raise TransientServiceError(f"Network error calling completion service: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error("Completion service error %s: %s", response.status_code, response.text)
            raise RemoteServiceError(
                f"Completion service error: {response.status_code}",
                details={"status_code": response.status_code, "body": response.text},
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected completion payload: %s", response.text[:500])
            raise RemoteServiceError(
                "Malformed completion response",
                details={"body": response.text},
            ) from e

        return content or ""
