"""
Client configuration.

Resolution order for each setting:
1. Explicit value
2. Environment variable
3. Built-in default

Environment variables:
- OPENAI_API_KEY: Bearer token sent in the Authorization header
- OPENAI_BASE_URL: API root (default: https://api.openai.com/v1)
- OPENAI_TIMEOUT_SECS: Request timeout in seconds; invalid values are ignored
- OPENAI_PROXY_URL: Proxy URL, read only when OPENAI_HTTP_TRUST_ENV=1
"""

from __future__ import annotations

import os
from contextlib import suppress
from dataclasses import dataclass, replace

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT = 60.0
DEFAULT_CONNECT_TIMEOUT = 10.0


def trust_env_enabled() -> bool:
    """Use env proxy settings only when explicitly enabled."""
    return os.getenv("OPENAI_HTTP_TRUST_ENV", "0") == "1"


@dataclass
class ClientConfig:
    """Connection settings for ResponsesClient.

    Attributes:
        api_key: API key; no Authorization header is sent when None
        base_url: API root every request path is joined to
        timeout: Read/write/pool timeout in seconds
        connect_timeout: Connect timeout in seconds
        proxy: Proxy URL, or None for a direct connection
    """

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    proxy: str | None = None

    def __repr__(self) -> str:
        key = "***" if self.api_key else None
        return (
            f"ClientConfig(api_key={key!r}, base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, connect_timeout={self.connect_timeout!r}, "
            f"proxy={self.proxy!r})"
        )

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
    ) -> ClientConfig:
        """Build a config from explicit values, falling back to the environment.

        Args:
            api_key: Explicit API key (overrides OPENAI_API_KEY)
            base_url: Explicit base URL (overrides OPENAI_BASE_URL)
            timeout: Explicit timeout (overrides OPENAI_TIMEOUT_SECS)
            proxy: Explicit proxy URL (overrides OPENAI_PROXY_URL)

        Returns:
            Resolved configuration
        """
        if api_key is None:
            api_key = os.getenv("OPENAI_API_KEY") or None

        if base_url is None:
            base_url = os.getenv("OPENAI_BASE_URL") or DEFAULT_BASE_URL

        if timeout is None:
            env_timeout = os.getenv("OPENAI_TIMEOUT_SECS")
            if env_timeout:
                with suppress(ValueError):
                    timeout = float(env_timeout)
        if timeout is None:
            timeout = DEFAULT_TIMEOUT

        # Default to a direct connection unless trust_env is enabled
        if proxy is None and trust_env_enabled():
            proxy = os.getenv("OPENAI_PROXY_URL") or None

        return cls(api_key=api_key, base_url=base_url, timeout=timeout, proxy=proxy)

    def with_overrides(self, **changes: object) -> ClientConfig:
        """Return a copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
