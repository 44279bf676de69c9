"""
HTTP transport using httpx for async requests.

Provides:
- Buffered and streaming responses from a single send path
- Configurable timeouts
- Proxy support
- Automatic header management
"""

from __future__ import annotations

import importlib.util
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Any

import httpx

from openai_responses.config import ClientConfig, trust_env_enabled
from openai_responses.errors import TransportError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


_UA_VERSION: str | None = None


def _http2_enabled() -> bool:
    """Enable HTTP/2 only when optional dependency is present."""
    return importlib.util.find_spec("h2") is not None


def _get_ua_version() -> str:
    """Get package version for User-Agent (cached)."""
    global _UA_VERSION
    if _UA_VERSION is None:
        try:
            _UA_VERSION = version("openai-responses")
        except PackageNotFoundError:
            _UA_VERSION = "0.1.0"
    return _UA_VERSION


def _wrap_http_error(e: httpx.HTTPError, url: str) -> TransportError:
    if isinstance(e, httpx.ConnectError):
        message = f"Connection failed: {e}"
    elif isinstance(e, httpx.TimeoutException):
        message = f"Request timed out: {e}"
    else:
        message = f"HTTP error: {e}"
    return TransportError(message, url=url, cause=e)


class HttpTransport:
    """HTTP transport for API communication.

    Example:
        >>> transport = HttpTransport(ClientConfig.from_env())
        >>> response = await transport.send("POST", "/responses", json=payload, stream=True)
        >>> async for chunk in transport.iter_bytes(response):
        ...     process(chunk)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize HTTP transport.

        Args:
            config: Connection settings (default: resolved from environment)
            client: Pre-built httpx client; the transport does not close it
        """
        self._config = config or ClientConfig.from_env()
        self._client = client
        self._owns_client = client is None

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            timeout = httpx.Timeout(
                self._config.timeout,
                connect=self._config.connect_timeout,
            )

            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=timeout,
                proxy=self._config.proxy,
                http2=_http2_enabled(),
                trust_env=trust_env_enabled(),
            )

        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Build request headers.

        Args:
            extra_headers: Additional headers to include

        Returns:
            Complete headers dictionary
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"openai-responses/{_get_ua_version()}",
        }

        if self._config.api_key:
            headers["Authorization"] = f"Bearer {self._config.api_key}"

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    async def send(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        stream: bool = False,
    ) -> httpx.Response:
        """Send a request and return the response once headers arrive.

        Status codes are not checked here.

        Args:
            method: HTTP method
            path: Request path (relative to base URL)
            json: JSON body
            params: Query parameters
            headers: Additional headers
            stream: Leave the body unread; the caller must close the response

        Returns:
            HTTP response

        Raises:
            TransportError: On network/connection errors
        """
        client = self._get_client()
        request = client.build_request(
            method,
            self._url(path),
            json=json,
            params=params,
            headers=self._build_headers(headers),
        )

        try:
            return await client.send(request, stream=stream)
        except httpx.HTTPError as e:
            raise _wrap_http_error(e, str(request.url)) from e

    async def iter_bytes(self, response: httpx.Response) -> AsyncIterator[bytes]:
        """Yield raw body chunks of a streamed response.

        Raises:
            TransportError: The connection failed while reading
        """
        try:
            async for chunk in response.aiter_bytes():
                yield chunk
        except httpx.HTTPError as e:
            raise _wrap_http_error(e, str(response.request.url)) from e

    async def __aenter__(self) -> HttpTransport:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
