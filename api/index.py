"""Vercel serverless entrypoint for the Gemini relay.

Route the front end's POST requests here. The Gemini API key is read from the
deployment's environment variables and never leaves the server.
"""

from __future__ import annotations

import base64
import logging
import sys
from pathlib import Path
from typing import Any

# Serverless bundles run this file directly, so make the project root importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.models import RelayRequest
from core.relay import handle

logging.basicConfig(level=logging.INFO)
logging.getLogger("httpx").setLevel(logging.WARNING)


def to_relay_request(request: Any) -> RelayRequest:
    """Build a RelayRequest from a serverless event dict or a request-like object."""
    if isinstance(request, dict):
        method = request.get("httpMethod") or request.get("method") or "GET"
        body = request.get("body") or ""
        is_base64 = request.get("isBase64Encoded", False)
    else:
        method = getattr(request, "method", None) or "GET"
        body = getattr(request, "body", None) or ""
        is_base64 = False

    if is_base64:
        body = base64.b64decode(body)
    return RelayRequest(method=method, body=body)


def handler(request):
    """Vercel Python serverless function handler."""
    return handle(to_relay_request(request)).to_event()
