"""Tests for client configuration."""

import pytest

from openai_responses.config import (
    DEFAULT_BASE_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
    ClientConfig,
)


class TestClientConfig:
    """Tests for ClientConfig resolution."""

    def test_defaults(self) -> None:
        """Test defaults without environment."""
        config = ClientConfig.from_env()

        assert config.api_key is None
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.connect_timeout == DEFAULT_CONNECT_TIMEOUT
        assert config.proxy is None

    def test_env_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values read from the environment."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("OPENAI_BASE_URL", "https://proxy.example.com/v1")
        monkeypatch.setenv("OPENAI_TIMEOUT_SECS", "12.5")

        config = ClientConfig.from_env()

        assert config.api_key == "sk-env"
        assert config.base_url == "https://proxy.example.com/v1"
        assert config.timeout == 12.5

    def test_explicit_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test explicit arguments take precedence."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

        config = ClientConfig.from_env(api_key="sk-explicit", timeout=5)

        assert config.api_key == "sk-explicit"
        assert config.timeout == 5

    def test_invalid_timeout_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an unparsable timeout falls back to the default."""
        monkeypatch.setenv("OPENAI_TIMEOUT_SECS", "soon")

        assert ClientConfig.from_env().timeout == DEFAULT_TIMEOUT

    def test_proxy_requires_trust_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the proxy variable is only honored when trust_env is enabled."""
        monkeypatch.setenv("OPENAI_PROXY_URL", "http://proxy.local:8080")
        assert ClientConfig.from_env().proxy is None

        monkeypatch.setenv("OPENAI_HTTP_TRUST_ENV", "1")
        assert ClientConfig.from_env().proxy == "http://proxy.local:8080"

    def test_repr_hides_key(self) -> None:
        """Test the API key never appears in repr."""
        config = ClientConfig(api_key="sk-1234567890abcdefghijkl")

        assert "sk-1234567890" not in repr(config)

    def test_with_overrides(self) -> None:
        """Test overriding only the given fields."""
        config = ClientConfig(api_key="sk-a", timeout=30)

        updated = config.with_overrides(api_key=None, timeout=3)

        assert updated.api_key == "sk-a"
        assert updated.timeout == 3
        assert config.timeout == 30
