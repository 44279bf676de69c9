"""
Integration test helper utilities.

Shared fixtures and utilities for integration tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest
from pytest_httpx import IteratorStream

from openai_responses import ClientConfig, ResponsesClient

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    import pytest_httpx


BASE_URL = "https://api.test/v1"


class FailingStream(httpx.AsyncByteStream):
    """Byte stream that drops the connection after some chunks."""

    def __init__(self, chunks: list[bytes]) -> None:
        self._chunks = chunks

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk
        raise httpx.ReadError("connection reset by peer")


def setup_mock_stream(
    httpx_mock: pytest_httpx.HTTPXMock,
    chunks: list[bytes],
    *,
    url: str = f"{BASE_URL}/responses",
    method: str = "POST",
) -> None:
    """Register an SSE response delivered in the given chunks."""
    httpx_mock.add_response(
        url=url,
        method=method,
        headers={"Content-Type": "text/event-stream"},
        stream=IteratorStream(chunks),
    )


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(api_key="sk-test", base_url=BASE_URL)


@pytest.fixture
def make_client(client_config: ClientConfig):
    """Client factory bound to the mocked base URL."""

    def factory() -> ResponsesClient:
        return ResponsesClient(client_config)

    return factory


@pytest.fixture
def mock_stream():
    return setup_mock_stream


@pytest.fixture
def failing_stream():
    return FailingStream
