"""Prompt templates the front end sends through the relay."""

from __future__ import annotations

from string import Template

# --- Structured solve mode (answer fields come from the response schema) ---

SOLVE_QUESTION = Template(
    "You are a patient tutor. Solve the question below step by step.\n"
    "Fill the fields as follows:\n"
    "- simplified_question: restate the question in one or two plain sentences\n"
    "- solution_steps: numbered steps showing the full working\n"
    "- final_answer: only the final result\n"
    "- recommendations: short study tips for this kind of question\n"
    "Answer in $language.\n\n"
    "Question: $question"
)

SOLVE_FROM_IMAGE = Template(
    "You are a patient tutor. The attached photo contains a question. "
    "Read it carefully and solve it step by step.\n"
    "Fill the fields as follows:\n"
    "- simplified_question: restate the question in one or two plain sentences\n"
    "- solution_steps: numbered steps showing the full working\n"
    "- final_answer: only the final result\n"
    "- recommendations: short study tips for this kind of question\n"
    "Answer in $language.\n\n"
    "Extra notes from the student: $question"
)

# --- Free-form chat mode ---

CHAT_FOLLOW_UP = Template(
    "You are a patient tutor helping a student with a question you already solved.\n"
    "Question: $simplified_question\n"
    "Final answer: $final_answer\n\n"
    "Reply briefly in $language to the student's message: $message"
)

CHAT_STANDALONE = Template(
    "You are a patient tutor. Reply briefly in $language to the student's message: $message"
)

LANGUAGES: dict[str, str] = {
    "tr": "Turkish",
    "en": "English",
}


def solve_prompt(question: str, has_image: bool, language: str = "tr") -> str:
    template = SOLVE_FROM_IMAGE if has_image else SOLVE_QUESTION
    return template.safe_substitute(
        question=question.strip() or "(none)",
        language=LANGUAGES.get(language, language),
    )


def chat_prompt(message: str, context: dict[str, str] | None = None, language: str = "tr") -> str:
    lang = LANGUAGES.get(language, language)
    if context and context.get("simplified_question"):
        return CHAT_FOLLOW_UP.safe_substitute(
            simplified_question=context["simplified_question"],
            final_answer=context.get("final_answer", ""),
            language=lang,
            message=message,
        )
    return CHAT_STANDALONE.safe_substitute(language=lang, message=message)
