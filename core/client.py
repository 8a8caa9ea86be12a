"""HTTP client the front end uses to talk to the relay."""

from __future__ import annotations

import base64
import io
import logging
from typing import Any

import httpx
from PIL import Image

from core.answers import error_message
from core.config import relay_url

logger = logging.getLogger(__name__)

MAX_IMAGE_SIDE = 1600
JPEG_QUALITY = 90


class RelayError(RuntimeError):
    """Raised when the relay answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def encode_image(image: Image.Image | bytes) -> str:
    """Convert an image to RGB JPEG and return it base64-encoded."""
    if isinstance(image, (bytes, bytearray)):
        image = Image.open(io.BytesIO(image))

    img = image.convert("RGB")
    if max(img.size) > MAX_IMAGE_SIDE:
        img.thumbnail((MAX_IMAGE_SIDE, MAX_IMAGE_SIDE), Image.LANCZOS)

    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=JPEG_QUALITY)
    return base64.b64encode(buf.getvalue()).decode("ascii")


class RelayClient:
    """Calls the relay endpoint; the Gemini key stays on the server."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float = 120,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = relay_url(url)
        self.timeout = timeout
        self.transport = transport
        if not self.url:
            raise ValueError("Relay URL is required. Set RELAY_URL or pass url.")

    def solve(self, prompt: str, image: Image.Image | bytes | None = None) -> dict[str, Any]:
        body: dict[str, Any] = {"prompt": prompt}
        if image is not None:
            body["imageBase64Data"] = encode_image(image)
        return self._send(body)

    def chat(self, prompt: str) -> dict[str, Any]:
        return self._send({"prompt": prompt, "isChat": True})

    def _send(self, body: dict[str, Any]) -> dict[str, Any]:
        logger.info("Calling relay chat=%s image=%s", body.get("isChat", False), "imageBase64Data" in body)
        with httpx.Client(timeout=self.timeout, transport=self.transport) as http:
            resp = http.post(self.url, json=body)

        if not resp.is_success:
            try:
                message = error_message(resp.json())
            except ValueError:
                message = resp.text
            raise RelayError(resp.status_code, message)

        return resp.json()
