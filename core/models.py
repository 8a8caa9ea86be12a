"""Data models for the Gemini relay."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any

MODEL_NAME = "gemini-2.5-flash"
IMAGE_MIME_TYPE = "image/jpeg"

ANSWER_FIELDS: tuple[str, ...] = (
    "simplified_question",
    "solution_steps",
    "final_answer",
    "recommendations",
)

METHOD_NOT_ALLOWED = "Method Not Allowed"
MISSING_KEY_MESSAGE = "API anahtarı bulunamadı. Lütfen sunucu ortam değişkenlerini kontrol edin."
UPSTREAM_ERROR_MESSAGE = "Gemini API tarafından bir hata döndürüldü."
SERVER_ERROR_MESSAGE = "Sunucu fonksiyonunda kritik bir hata oluştu."


@dataclass
class RelayRequest:
    method: str
    body: bytes | str = b""

    def json(self) -> Any:
        raw = self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body
        return json.loads(raw)


@dataclass
class RelayResponse:
    status_code: int
    body: str
    content_type: str = "application/json"

    @classmethod
    def from_json(cls, data: Any, status_code: int = 200) -> RelayResponse:
        return cls(status_code=status_code, body=json.dumps(data, ensure_ascii=False))

    @classmethod
    def text(cls, body: str, status_code: int) -> RelayResponse:
        return cls(status_code=status_code, body=body, content_type="text/plain;charset=UTF-8")

    def json(self) -> Any:
        return json.loads(self.body)

    def to_event(self) -> dict[str, Any]:
        """Shape expected by the serverless runtime."""
        return {
            "statusCode": self.status_code,
            "headers": {"content-type": self.content_type},
            "body": self.body,
        }


@dataclass
class SolutionAnswer:
    simplified_question: str = ""
    solution_steps: str = ""
    final_answer: str = ""
    recommendations: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolutionAnswer:
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            values[f.name] = "" if value is None else str(value)
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
