from pathlib import Path
import base64
import json
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from api import index
from core.models import RelayResponse


def test_event_dict_is_translated(monkeypatch):
    seen = {}

    def fake_handle(request):
        seen["request"] = request
        return RelayResponse.from_json({"ok": True})

    monkeypatch.setattr(index, "handle", fake_handle)
    result = index.handler({"httpMethod": "POST", "body": '{"prompt": "x"}'})

    assert seen["request"].method == "POST"
    assert seen["request"].json() == {"prompt": "x"}
    assert result == {
        "statusCode": 200,
        "headers": {"content-type": "application/json"},
        "body": json.dumps({"ok": True}),
    }


def test_base64_body_is_decoded():
    raw = json.dumps({"prompt": "ç"}).encode("utf-8")
    request = index.to_relay_request(
        {"method": "POST", "body": base64.b64encode(raw).decode(), "isBase64Encoded": True}
    )
    assert request.json() == {"prompt": "ç"}


def test_request_object_is_translated():
    class FakeRequest:
        method = "GET"
        body = None

    request = index.to_relay_request(FakeRequest())
    assert request.method == "GET"
    assert request.body == ""


def test_get_request_is_rejected_end_to_end():
    result = index.handler({"httpMethod": "GET"})
    assert result["statusCode"] == 405
    assert result["body"] == "Method Not Allowed"
    assert result["headers"]["content-type"].startswith("text/plain")


def test_missing_key_end_to_end(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    result = index.handler({"httpMethod": "POST", "body": '{"prompt": "x"}'})
    assert result["statusCode"] == 500
    body = json.loads(result["body"])
    assert body["message"] and body["error"]
