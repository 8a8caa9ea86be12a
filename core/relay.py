"""Relay handler: forwards a prompt to Gemini with the server-side API key."""

from __future__ import annotations

import logging

import httpx

from core.config import gemini_api_base, gemini_api_key
from core.models import (
    MISSING_KEY_MESSAGE,
    METHOD_NOT_ALLOWED,
    MODEL_NAME,
    SERVER_ERROR_MESSAGE,
    UPSTREAM_ERROR_MESSAGE,
    RelayRequest,
    RelayResponse,
)
from core.payload import payload_from_body

logger = logging.getLogger(__name__)

# httpx logs full request URLs at INFO, and the upstream URL carries the key
logging.getLogger("httpx").setLevel(logging.WARNING)


def generate_content_url(api_base: str | None = None, model: str = MODEL_NAME) -> str:
    """Upstream endpoint without the key query parameter."""
    base = api_base or gemini_api_base()
    return f"{base}/v1beta/models/{model}:generateContent"


def handle(
    request: RelayRequest,
    api_key: str | None = None,
    client: httpx.Client | None = None,
) -> RelayResponse:
    """Handle one relay request and always return a response."""
    if request.method != "POST":
        return RelayResponse.text(METHOD_NOT_ALLOWED, status_code=405)

    try:
        key = gemini_api_key(api_key)
        if not key:
            raise RuntimeError(MISSING_KEY_MESSAGE)

        payload = payload_from_body(request.json())
        url = generate_content_url()

        logger.info("Forwarding request to %s", url)
        if client is None:
            with httpx.Client(timeout=None) as http:
                upstream = _post(http, url, key, payload)
        else:
            upstream = _post(client, url, key, payload)

        if not upstream.is_success:
            error_body = upstream.json()
            logger.error("Gemini API Error: %s", error_body)
            envelope = {"message": UPSTREAM_ERROR_MESSAGE}
            if error_body is None:
                raise TypeError("Gemini error body was null")
            if isinstance(error_body, dict) and "error" in error_body:
                envelope["error"] = error_body["error"]
            return RelayResponse.from_json(envelope, status_code=upstream.status_code)

        return RelayResponse.from_json(upstream.json(), status_code=200)

    except Exception as e:
        logger.exception("Relay function error")
        return RelayResponse.from_json(
            {"message": SERVER_ERROR_MESSAGE, "error": str(e)},
            status_code=500,
        )


def _post(http: httpx.Client, url: str, key: str, payload: dict) -> httpx.Response:
    return http.post(
        url,
        params={"key": key},
        headers={"Content-Type": "application/json"},
        json=payload,
    )
