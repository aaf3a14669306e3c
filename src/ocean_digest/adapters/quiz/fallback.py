"""Locally authored quiz used when the completion service is unavailable."""

import random
from dataclasses import dataclass
from typing import Optional

from ocean_digest.core import QuizQuestion, QuizResult


@dataclass(frozen=True)
class BankQuestion:
    question: str
    correct: str
    distractors: tuple[str, str, str]
    explanation: str


QUESTION_BANK: tuple[BankQuestion, ...] = (
    BankQuestion(
        question="Roughly how much plastic is estimated to enter the ocean each year?",
        correct="About 8-11 million tonnes",
        distractors=("About 10,000 tonnes", "About 500,000 tonnes", "About 1 billion tonnes"),
        explanation="Studies estimate 8-11 million tonnes of plastic reach the ocean every year.",
    ),
    BankQuestion(
        question="What are microplastics?",
        correct="Plastic pieces smaller than 5 millimetres",
        distractors=(
            "Plastic that dissolves completely in seawater",
            "Biodegradable plastic made from algae",
            "Plastic fragments larger than 5 centimetres",
        ),
        explanation="Microplastics are particles under 5 mm, from broken-down debris or manufactured beads.",
    ),
    BankQuestion(
        question="What causes most ocean 'dead zones'?",
        correct="Nutrient runoff from fertilizers and sewage",
        distractors=("Oil spills", "Underwater volcanoes", "Overfishing of sharks"),
        explanation="Excess nutrients fuel algal blooms whose decay depletes oxygen in the water.",
    ),
    BankQuestion(
        question="Why does ocean acidification threaten coral reefs?",
        correct="It makes it harder for corals to build calcium carbonate skeletons",
        distractors=(
            "It raises the salinity of seawater",
            "It blocks sunlight from reaching the reef",
            "It increases the number of coral predators",
        ),
        explanation="Absorbed CO2 lowers pH and carbonate availability, weakening coral skeletons.",
    ),
    BankQuestion(
        question="Which everyday action most directly reduces marine plastic pollution?",
        correct="Using reusable bottles and bags instead of single-use plastics",
        distractors=(
            "Leaving lights off during the day",
            "Washing clothes in hot water",
            "Buying bottled water in bulk",
        ),
        explanation="Single-use plastics are among the most common items found in beach and ocean litter.",
    ),
)


def generate_fallback_quiz(request_id: str, rng: Optional[random.Random] = None) -> QuizResult:
    """Build a 5-question quiz from the local bank.

    Question order and choice order are shuffled on every call; correct_index
    follows the correct choice to its new position.
    """
    rng = rng or random.SystemRandom()

    bank = list(QUESTION_BANK)
    rng.shuffle(bank)

    questions = []
    for question_id, entry in enumerate(bank, 1):
        choices = [entry.correct, *entry.distractors]
        rng.shuffle(choices)
        questions.append(QuizQuestion(
            id=question_id,
            question=entry.question,
            choices=choices,
            correct_index=choices.index(entry.correct),
            explanation=entry.explanation,
        ))

    return QuizResult(request_id=request_id, questions=questions, is_fallback=True)
