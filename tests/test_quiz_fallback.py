"""Tests for the local quiz fallback."""

import random

from ocean_digest.adapters.quiz import QUESTION_BANK, generate_fallback_quiz

CORRECT_BY_QUESTION = {entry.question: entry.correct for entry in QUESTION_BANK}


def test_fallback_quiz_shape() -> None:
    """Test 5 questions, 4 choices each, sequential ids."""
    result = generate_fallback_quiz("req")

    assert result.request_id == "req"
    assert result.is_fallback
    assert len(result.questions) == 5
    assert [q.id for q in result.questions] == [1, 2, 3, 4, 5]
    assert all(len(q.choices) == 4 for q in result.questions)


def test_fallback_correct_index_tracks_shuffle() -> None:
    """Test choice at correct_index is always the known answer."""
    for seed in range(50):
        result = generate_fallback_quiz("req", rng=random.Random(seed))

        for question in result.questions:
            assert question.choices[question.correct_index] == CORRECT_BY_QUESTION[question.question]
            assert question.explanation


def test_fallback_covers_whole_bank() -> None:
    result = generate_fallback_quiz("req")

    assert {q.question for q in result.questions} == set(CORRECT_BY_QUESTION)


def test_fallback_is_shuffled_between_calls() -> None:
    """Test repeated calls produce different orderings."""
    orderings = {
        tuple(tuple(q.choices) for q in generate_fallback_quiz("req").questions)
        for _ in range(20)
    }

    assert len(orderings) > 1


def test_fallback_correct_position_is_not_biased() -> None:
    """Test the correct answer lands in every position over many draws."""
    rng = random.Random(1234)
    counts = [0, 0, 0, 0]

    for _ in range(400):
        for question in generate_fallback_quiz("req", rng=rng).questions:
            counts[question.correct_index] += 1

    # 2000 draws, 500 expected per slot
    assert all(400 < count < 600 for count in counts)


def test_fallback_question_order_varies() -> None:
    rng = random.Random(99)
    first_questions = {generate_fallback_quiz("req", rng=rng).questions[0].question for _ in range(50)}

    assert len(first_questions) > 1
