"""Async HTTP client for the Gemini generateContent endpoint."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash"


@dataclass
class Completion:
    """Text of the first candidate, plus why the model stopped."""
    text: str
    finish_reason: str | None = None


class BlockedPromptError(Exception):
    """The service refused the prompt outright (promptFeedback.blockReason)."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class GeminiClient:
    """Wraps httpx.AsyncClient to request structured JSON output from a Gemini model."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model

        headers = {"x-goog-api-key": api_key, "Content-Type": "application/json"}
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=120.0, headers=headers, transport=transport
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def generate_json(self, prompt: str, schema: dict[str, Any]) -> Completion:
        """POST to /models/{model}:generateContent asking for JSON that follows ``schema``.

        Raises httpx errors for transport and status failures, BlockedPromptError
        when the prompt is refused, and ValueError when the envelope is malformed or carries no text.
        """
        payload: dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema,
            },
        }

        log.debug("POST %s/models/%s:generateContent", self.base_url, self.model)
        resp = await self._client.post(f"/models/{self.model}:generateContent", json=payload)
        resp.raise_for_status()
        body = resp.json()
        if not isinstance(body, dict):
            raise ValueError("malformed response")

        feedback = body.get("promptFeedback") or {}
        if isinstance(feedback, dict) and feedback.get("blockReason"):
            raise BlockedPromptError(feedback["blockReason"])

        candidates = body.get("candidates") or []
        if not isinstance(candidates, list):
            raise ValueError("malformed response")
        if not candidates:
            raise ValueError("response contained no candidates")
        candidate = candidates[0]
        if not isinstance(candidate, dict):
            raise ValueError("malformed response")
        content = candidate.get("content") or {}
        if not isinstance(content, dict):
            raise ValueError("malformed response")
        parts = content.get("parts") or []
        if not isinstance(parts, list):
            raise ValueError("malformed response")
        text = "".join(
            part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
        if not text.strip():
            raise ValueError("response contained no text")

        return Completion(text=text, finish_reason=candidate.get("finishReason"))
