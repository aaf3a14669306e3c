"""Completion service adapters."""

from ocean_digest.adapters.llm.cerebras_client import CerebrasClient

__all__ = ["CerebrasClient"]
