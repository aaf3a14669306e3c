"""Turn raw completion text into typed results."""

import json
import logging
from collections.abc import Callable
from typing import Any, Optional

from ocean_digest.core import AnswerResult, QuizQuestion, QuizResult, SummaryResult

logger = logging.getLogger(__name__)

DEFAULT_TIP = "Reduce single-use plastics by carrying a reusable water bottle and shopping bag."
NO_ANSWER = "No answer available."
MAX_QUIZ_QUESTIONS = 5

QUESTION_KEYS = ("question", "prompt")
CHOICE_KEYS = ("choices", "options")


def extract_json_object(text: str) -> Optional[str]:
    """Return the substring from the first ``{`` to the last ``}``.

    Not grammar aware: unrelated braces around the payload make the
    result unparseable, which callers handle through their fallbacks.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start:end + 1]


def _load_json_object(text: str) -> Optional[dict[str, Any]]:
    candidate = extract_json_object(text)
    if candidate is None:
        return None

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.warning("Completion JSON did not parse: %s", e)
        return None

    return parsed if isinstance(parsed, dict) else None


def interpret_answer(text: str) -> AnswerResult:
    """Free-text answer, verbatim."""
    return AnswerResult(answer=text if text and text.strip() else NO_ANSWER)


def interpret_digest(text: str) -> SummaryResult:
    """Digest + tip from completion text. Never raises."""
    text = text or ""
    parsed = _load_json_object(text)

    if parsed is None:
        logger.info("Falling back to raw completion text for digest")
        return SummaryResult(digest=text, tip_of_the_day=DEFAULT_TIP)

    digest = parsed.get("digest")
    tip = parsed.get("tipOfTheDay")
    return SummaryResult(
        digest=str(digest) if digest else text,
        tip_of_the_day=str(tip) if tip else DEFAULT_TIP,
    )


def _first_present(entry: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if entry.get(key) is not None:
            return entry[key]
    return None


def _coerce_index(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        index = int(value)
    except (TypeError, ValueError):
        return 0
    return index if 0 <= index <= 3 else 0


def _normalize_question(entry: Any, question_id: int) -> Optional[QuizQuestion]:
    if not isinstance(entry, dict):
        return None

    text = _first_present(entry, QUESTION_KEYS)
    choices = _first_present(entry, CHOICE_KEYS)
    if not text or not isinstance(choices, list) or len(choices) != 4:
        return None

    explanation = entry.get("explanation")
    return QuizQuestion(
        id=question_id,
        question=str(text),
        choices=[str(choice) for choice in choices],
        correct_index=_coerce_index(entry.get("correctIndex")),
        explanation=str(explanation) if explanation is not None else "",
    )


def interpret_quiz(
    text: str,
    request_id: str,
    fallback: Callable[[str], QuizResult],
) -> QuizResult:
    """Quiz from completion text; hands off to ``fallback`` when unusable."""
    parsed = _load_json_object(text or "")
    raw_questions = parsed.get("questions") if parsed is not None else None

    if not isinstance(raw_questions, list) or not raw_questions:
        logger.warning("Quiz response has no questions array, using local quiz")
        return fallback(request_id)

    questions = []
    for question_id, entry in enumerate(raw_questions[:MAX_QUIZ_QUESTIONS], 1):
        question = _normalize_question(entry, question_id)
        if question is None:
            logger.warning("Quiz entry %d is malformed, using local quiz", question_id)
            return fallback(request_id)
        questions.append(question)

    return QuizResult(request_id=request_id, questions=questions)
