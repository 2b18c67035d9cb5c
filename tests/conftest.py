"""Shared pytest fixtures for cytheme tests."""

import json

import httpx
import pytest

from cytheme.model import ThemeConfig, add_user_style, default_theme
from cytheme.themes import set_palette


@pytest.fixture
def theme() -> ThemeConfig:
    """Return a fresh default theme."""
    return default_theme()


@pytest.fixture
def bob_theme(theme: ThemeConfig) -> ThemeConfig:
    """Return a theme with Bob's name replaced by 'B.'."""
    add_user_style(theme, username="Bob", custom_name="B.", hide_original=True)
    return theme


@pytest.fixture(autouse=True)
def default_palette():
    yield
    set_palette("default")


@pytest.fixture
def no_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("API_KEY", "GEMINI_API_KEY", "CYTHEME_TEST_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch, no_api_key) -> str:
    monkeypatch.setenv("API_KEY", "test-key")
    return "test-key"


def gemini_body(text: str, finish_reason: str = "STOP") -> dict:
    """A generateContent response carrying ``text`` as its only candidate."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": finish_reason,
            }
        ]
    }


class FakeGemini:
    """Records requests and answers with a canned response."""

    def __init__(self, body: dict | list | str | None = None, status_code: int = 200):
        self.body = body if body is not None else gemini_body("{}")
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def payload(self, index: int = 0) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()
