"""Core domain entities."""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class FeedSource:
    """Configured RSS/Atom endpoint."""

    url: str
    max_items: int = 20


@dataclass(frozen=True)
class RawFeedItem:
    """Feed entry as delivered by the feed parser, before filtering."""

    title: str
    link: str
    snippet: str
    published: Optional[str] = None
    updated: Optional[str] = None
    published_parsed: Optional[time.struct_time] = None
    updated_parsed: Optional[time.struct_time] = None


@dataclass(frozen=True)
class Article:
    """Filtered news article."""

    title: str
    url: str
    content: str
    date: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Article":
        """Build an article from an API payload, tolerating missing fields."""
        return cls(
            title=str(data.get("title") or ""),
            url=str(data.get("url") or ""),
            content=str(data.get("content") or ""),
            date=str(data.get("date") or ""),
        )


@dataclass
class SummaryResult:
    """Digest and tip produced from a set of articles."""

    digest: str
    tip_of_the_day: str

    def to_dict(self) -> dict[str, str]:
        return {"digest": self.digest, "tipOfTheDay": self.tip_of_the_day}


@dataclass
class AnswerResult:
    """Free-text answer to a user question."""

    answer: str

    def to_dict(self) -> dict[str, str]:
        return {"answer": self.answer}


@dataclass
class QuizQuestion:
    """Multiple-choice question with exactly four choices."""

    id: int
    question: str
    choices: list[str]
    correct_index: int
    explanation: str = ""

    def __post_init__(self) -> None:
        if len(self.choices) != 4:
            raise ValueError("Quiz question must have exactly 4 choices")
        if not 0 <= self.correct_index <= 3:
            raise ValueError("correct_index must be between 0 and 3")

    @property
    def correct_choice(self) -> str:
        return self.choices[self.correct_index]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "question": self.question,
            "choices": list(self.choices),
            "correctIndex": self.correct_index,
            "explanation": self.explanation,
        }


@dataclass
class QuizResult:
    """Quiz response with its correlation identifier."""

    request_id: str
    questions: list[QuizQuestion] = field(default_factory=list)
    is_fallback: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "requestId": self.request_id,
            "questions": [question.to_dict() for question in self.questions],
        }
