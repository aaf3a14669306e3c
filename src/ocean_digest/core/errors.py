"""Error taxonomy."""


class OceanDigestError(Exception):
    """Base exception for ocean_digest."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(OceanDigestError):
    """Missing or placeholder credentials."""


class SourceFetchError(OceanDigestError):
    """A single feed source could not be retrieved or parsed."""


class RemoteServiceError(OceanDigestError):
    """Completion service answered with an error or an unreadable body."""


class TransientServiceError(OceanDigestError):
    """Network failure or timeout while talking to the completion service."""
