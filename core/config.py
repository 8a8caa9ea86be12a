"""Environment-backed configuration for the relay and its front end."""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com"


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, otherwise the first non-empty env var."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


def gemini_api_key(explicit: str | None = None) -> str:
    return resolve_api_key(explicit, "GEMINI_API_KEY", "GOOGLE_API_KEY")


def gemini_api_base() -> str:
    return (os.environ.get("GEMINI_API_BASE") or DEFAULT_API_BASE).rstrip("/")


def relay_url(explicit: str | None = None) -> str:
    return resolve_api_key(explicit, "RELAY_URL")
