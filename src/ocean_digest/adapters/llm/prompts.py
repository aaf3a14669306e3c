"""Prompt templates for the completion service."""

from collections.abc import Sequence

from ocean_digest.core import Article

DIGEST_TEMPLATE = """You are an expert ocean-environment analyst. Based on these recent ocean pollution articles:

{articles}

Provide a response in this exact JSON format:
{{
  "digest": "Exactly 3 sentences summarizing the key ocean pollution issues covered in these articles",
  "tipOfTheDay": "One practical, actionable tip individuals can do today to help reduce marine pollution"
}}

Return ONLY valid JSON, no other text."""

QUESTION_TEMPLATE = """You are a knowledgeable ocean-environment assistant.

{context}

Question: {question}

Answer factually and concisely. {grounding}"""

QUESTION_CONTEXT = "Use these recent ocean pollution articles as context:\n\n{articles}"
QUESTION_GROUNDING = (
    'When a statement is supported by the articles, cite it as "Article N". '
    "Do not invent sources or citations."
)
NO_ARTICLES_CONTEXT = "No articles are available for this question."
NO_ARTICLES_GROUNDING = (
    "Answer from general knowledge of ocean and marine pollution. "
    "Do not ask for articles and do not invent sources or citations."
)

QUIZ_TEMPLATE = """Request ID: {request_id}

You are a marine science educator. Write a quiz of exactly 5 multiple-choice questions about marine pollution
(plastics, oil spills, nutrient runoff, ocean acidification, coral reefs, fisheries).

Rules:
- Each question has exactly 4 choices.
- Exactly one choice is correct; give its position as "correctIndex" (0-3).
- Add a short "explanation" of the correct answer.
- Only use well-established facts.

Return ONLY valid JSON in this exact format:
{{
  "questions": [
    {{"question": "...", "choices": ["...", "...", "...", "..."], "correctIndex": 0, "explanation": "..."}}
  ]
}}"""


def format_digest_articles(articles: Sequence[Article]) -> str:
    return "\n\n".join(
        f"{i}. {article.title}\n{article.content}" for i, article in enumerate(articles, 1)
    )


def format_question_articles(articles: Sequence[Article]) -> str:
    return "\n\n".join(
        f"Article {i}: {article.title}\n{article.content}" for i, article in enumerate(articles, 1)
    )


def build_digest_prompt(articles: Sequence[Article]) -> str:
    """Prompt asking for a strict JSON digest + tip of the day."""
    return DIGEST_TEMPLATE.format(articles=format_digest_articles(articles))


def build_question_prompt(articles: Sequence[Article], question: str) -> str:
    """Prompt asking for a factual answer, citing articles when available."""
    if articles:
        context = QUESTION_CONTEXT.format(articles=format_question_articles(articles))
        grounding = QUESTION_GROUNDING
    else:
        context = NO_ARTICLES_CONTEXT
        grounding = NO_ARTICLES_GROUNDING

    return QUESTION_TEMPLATE.format(context=context, question=question, grounding=grounding)


def build_quiz_prompt(request_id: str) -> str:
    """Prompt asking for a 5-question quiz.

    The request id only makes each prompt unique so the remote service
    cannot serve a cached completion.
    """
    return QUIZ_TEMPLATE.format(request_id=request_id)
