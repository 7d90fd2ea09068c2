"""
Connection settings for an Idena node.

The clients never read the environment on their own; these helpers are
for applications that want the usual IDENA_* variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Default RPC endpoint (node bundled with idena-desktop)
DEFAULT_HOST_URL = "http://localhost:9119/"
DEFAULT_TIMEOUT = 30.0


def get_host_url() -> str:
    """Get the node URL from environment or default."""
    return os.environ.get("IDENA_RPC_URL", DEFAULT_HOST_URL)


def get_api_key() -> str:
    """Get the node API key from environment (empty if unset)."""
    return os.environ.get("IDENA_API_KEY", "")


def get_timeout() -> float:
    """Get the request timeout in seconds from environment or default."""
    raw = os.environ.get("IDENA_RPC_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"IDENA_RPC_TIMEOUT must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class ClientSettings:
    api_key: str
    host_url: str = DEFAULT_HOST_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(api_key=get_api_key(), host_url=get_host_url(), timeout=get_timeout())
