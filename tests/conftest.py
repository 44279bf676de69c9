"""Root pytest fixtures for openai-responses tests."""

from __future__ import annotations

import json
from typing import Any

import pytest


def sse(payload: dict[str, Any] | str) -> bytes:
    """Encode one payload as a single SSE frame."""
    data = payload if isinstance(payload, str) else json.dumps(payload)
    return f"data: {data}\n\n".encode()


def text_delta(delta: str, sequence_number: int = 0) -> dict[str, Any]:
    return {
        "type": "response.output_text.delta",
        "sequence_number": sequence_number,
        "item_id": "msg_1",
        "output_index": 0,
        "content_index": 0,
        "delta": delta,
    }


def response_body(
    response_id: str = "resp_123",
    text: str = "Hello!",
    status: str = "completed",
) -> dict[str, Any]:
    return {
        "id": response_id,
        "object": "response",
        "created_at": 1741476542,
        "model": "gpt-4o-2024-08-06",
        "status": status,
        "output": [
            {
                "type": "message",
                "id": "msg_1",
                "role": "assistant",
                "status": "completed",
                "content": [{"type": "output_text", "text": text, "annotations": []}],
            }
        ],
        "parallel_tool_calls": True,
        "tool_choice": "auto",
        "tools": [],
        "usage": {
            "input_tokens": 36,
            "input_tokens_details": {"cached_tokens": 0},
            "output_tokens": 87,
            "output_tokens_details": {"reasoning_tokens": 0},
            "total_tokens": 123,
        },
    }


async def byte_source(chunks: list[bytes]):
    for chunk in chunks:
        yield chunk


@pytest.fixture
def make_frame():
    """Frame encoder for stream tests."""
    return sse


@pytest.fixture
def make_delta():
    """Text delta event payload builder."""
    return text_delta


@pytest.fixture
def make_response():
    """Response body builder."""
    return response_body


@pytest.fixture
def make_source():
    """Async byte source over a fixed list of chunks."""
    return byte_source


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials and endpoints out of tests."""
    for name in (
        "OPENAI_API_KEY",
        "OPENAI_BASE_URL",
        "OPENAI_TIMEOUT_SECS",
        "OPENAI_PROXY_URL",
        "OPENAI_HTTP_TRUST_ENV",
    ):
        monkeypatch.delenv(name, raising=False)
