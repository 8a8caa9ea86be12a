"""Helpers for reading Gemini responses returned through the relay."""

from __future__ import annotations

import json
import logging
from typing import Any

from core.models import SolutionAnswer

logger = logging.getLogger(__name__)


def extract_text(response: dict[str, Any]) -> str:
    """Return the text of the first candidate, joining all of its parts."""
    candidates = response.get("candidates") or []
    if not candidates:
        reason = (response.get("promptFeedback") or {}).get("blockReason")
        if reason:
            raise ValueError(f"Gemini returned no candidates (blocked: {reason})")
        raise ValueError("Gemini returned no candidates")

    content = candidates[0].get("content") or {}
    texts = [p.get("text", "") for p in content.get("parts") or [] if "text" in p]
    if not texts:
        finish = candidates[0].get("finishReason", "unknown")
        raise ValueError(f"Gemini returned an empty answer (finish reason: {finish})")
    return "".join(texts)


def parse_answer(response: dict[str, Any]) -> SolutionAnswer:
    """Decode a structured-mode response into its four answer fields."""
    text = extract_text(response)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Structured answer was not valid JSON: %s", e)
        raise ValueError(f"Answer was not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Answer JSON was not an object")
    return SolutionAnswer.from_dict(data)


def error_message(body: Any) -> str:
    """Human-readable text from a relay error envelope."""
    if not isinstance(body, dict):
        return str(body)
    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    return str(body.get("message") or "Unknown error")
