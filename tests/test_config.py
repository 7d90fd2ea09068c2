"""Tests for environment-driven client settings."""

from __future__ import annotations

import pytest

from idena.config import (
    DEFAULT_HOST_URL,
    DEFAULT_TIMEOUT,
    ClientSettings,
    get_api_key,
    get_host_url,
    get_timeout,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("IDENA_RPC_URL", "IDENA_API_KEY", "IDENA_RPC_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_defaults_without_environment(self) -> None:
        assert get_host_url() == DEFAULT_HOST_URL
        assert get_api_key() == ""
        assert get_timeout() == DEFAULT_TIMEOUT


class TestEnvironment:
    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IDENA_RPC_URL", "http://192.168.1.10:9009/")
        monkeypatch.setenv("IDENA_API_KEY", "node-key")
        monkeypatch.setenv("IDENA_RPC_TIMEOUT", "7.5")

        settings = ClientSettings.from_env()

        assert settings == ClientSettings(
            api_key="node-key", host_url="http://192.168.1.10:9009/", timeout=7.5
        )

    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IDENA_RPC_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="IDENA_RPC_TIMEOUT"):
            get_timeout()
