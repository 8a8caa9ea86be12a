from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.client import RelayClient
from core.config import gemini_api_base, gemini_api_key, resolve_api_key


def test_resolve_api_key_prefers_explicit(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-value")
    assert resolve_api_key(" explicit ", "GEMINI_API_KEY") == "explicit"


def test_resolve_api_key_falls_back_to_first_non_empty_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "  ")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    assert resolve_api_key(None, "GEMINI_API_KEY", "GOOGLE_API_KEY") == "google-value"


def test_resolve_api_key_returns_empty_when_nothing_set(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    assert gemini_api_key() == ""


def test_gemini_api_base_strips_trailing_slash(monkeypatch):
    monkeypatch.setenv("GEMINI_API_BASE", "http://localhost:9000/")
    assert gemini_api_base() == "http://localhost:9000"


def test_gemini_api_base_default(monkeypatch):
    monkeypatch.delenv("GEMINI_API_BASE", raising=False)
    assert gemini_api_base() == "https://generativelanguage.googleapis.com"


def test_relay_client_supports_relay_url_env(monkeypatch):
    monkeypatch.setenv("RELAY_URL", "https://relay.example/api")
    client = RelayClient(url=None)
    assert client.url == "https://relay.example/api"
