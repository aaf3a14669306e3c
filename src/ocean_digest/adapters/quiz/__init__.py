"""Quiz adapters."""

from ocean_digest.adapters.quiz.fallback import QUESTION_BANK, generate_fallback_quiz

__all__ = ["QUESTION_BANK", "generate_fallback_quiz"]
