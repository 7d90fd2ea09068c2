from __future__ import annotations

from typing import Any

import pytest

from idena.rpc.errors import TransportError


class RecordingTransport:
    """Transport that returns canned replies and remembers what it sent."""

    def __init__(self, *replies: Any):
        self.replies = list(replies)
        self.sent: list[tuple[str, dict[str, Any]]] = []

    def send(self, url: str, body: dict[str, Any]) -> Any:
        self.sent.append((url, body))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class AsyncRecordingTransport(RecordingTransport):
    async def send(self, url: str, body: dict[str, Any]) -> Any:  # type: ignore[override]
        return RecordingTransport.send(self, url, body)


@pytest.fixture()
def host_url() -> str:
    return "http://node.test:9119/"


@pytest.fixture()
def refused() -> TransportError:
    return TransportError("Request to http://node.test:9119/ failed: [Errno 111] Connection refused")


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def async_transport() -> AsyncRecordingTransport:
    return AsyncRecordingTransport()
