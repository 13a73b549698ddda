from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from frontend_builder.config import Settings


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records POST calls and replays a canned response or exception."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", api_url="https://llm.example.test/v1/chat/completions")


@pytest.fixture
def navbar_reply() -> str:
    return (
        "Here is your navbar:\n\n"
        "```html\n"
        '<nav aria-label="Main">\n'
        '  <ul class="menu"><li><a href="/">Home</a></li></ul>\n'
        "</nav>\n"
        "<style>\n"
        "  @media (max-width: 600px) { .menu { display: block; } }\n"
        "</style>\n"
        "```\n\n"
        "The markup uses a landmark label."
    )


@pytest.fixture
def completion_payload(navbar_reply: str) -> dict[str, Any]:
    return {
        "id": "cmpl-1",
        "model": "gpt-4-0613",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": navbar_reply}}],
        "usage": {"prompt_tokens": 120, "completion_tokens": 80, "total_tokens": 200},
    }
