"""Builds the Gemini generateContent payload from an inbound relay request."""

from __future__ import annotations

from typing import Any

from core.models import ANSWER_FIELDS, IMAGE_MIME_TYPE

# Marks a prompt field missing from the request body, as opposed to an explicit null
ABSENT = object()

ANSWER_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {name: {"type": "STRING"} for name in ANSWER_FIELDS},
    "required": list(ANSWER_FIELDS),
}


def build_parts(prompt: Any, image_base64_data: Any = None) -> list[dict[str, Any]]:
    """Text part first, then the image as inline JPEG data when present."""
    text_part = {} if prompt is ABSENT else {"text": prompt}
    parts: list[dict[str, Any]] = [text_part]
    if image_base64_data:
        parts.append({"inlineData": {"mimeType": IMAGE_MIME_TYPE, "data": image_base64_data}})
    return parts


def structured_output_config() -> dict[str, Any]:
    return {
        "responseMimeType": "application/json",
        "responseSchema": {
            "type": ANSWER_SCHEMA["type"],
            "properties": {k: dict(v) for k, v in ANSWER_SCHEMA["properties"].items()},
            "required": list(ANSWER_SCHEMA["required"]),
        },
    }


def build_payload(
    prompt: Any,
    image_base64_data: Any = None,
    is_chat: Any = False,
) -> dict[str, Any]:
    """Build the upstream payload.

    Chat requests expect free-form text, so only non-chat requests carry the
    structured-output configuration.
    """
    payload: dict[str, Any] = {
        "contents": [{"role": "user", "parts": build_parts(prompt, image_base64_data)}],
    }
    if not is_chat:
        payload["generationConfig"] = structured_output_config()
    return payload


def payload_from_body(body: Any) -> dict[str, Any]:
    """Extract the inbound fields and build the payload without validating them."""
    if body is None:
        raise TypeError("Request body must not be null")
    fields = body if isinstance(body, dict) else {}
    return build_payload(
        fields.get("prompt", ABSENT),
        fields.get("imageBase64Data"),
        fields.get("isChat", False),
    )
