"""Exceptions raised by the Idena RPC client."""

from __future__ import annotations

from typing import Any, Optional


class IdenaError(RuntimeError):
    """Base class for every failure surfaced by the client."""


class TransportError(IdenaError):
    """The request could not be delivered or the reply could not be decoded."""


class HTTPStatusError(TransportError):
    """The node answered with a non-success HTTP status."""

    def __init__(self, status: int, body: str):
        super().__init__(f"RPC HTTP error {status}: {body}")
        self.status = status
        self.body = body


class ProtocolViolation(TransportError):
    """The decoded body is neither a ``result`` nor an ``error`` reply."""

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response


class RemoteError(IdenaError):
    """The node replied with an ``error`` member.

    ``payload`` is the error value exactly as decoded. ``code`` and
    ``message`` are only filled in when the payload is a JSON-RPC style
    object; they are read from it, never rewritten.
    """

    def __init__(self, payload: Any):
        super().__init__(f"RPC error: {payload}")
        self.payload = payload

    @property
    def code(self) -> Optional[int]:
        if isinstance(self.payload, dict):
            return self.payload.get("code")
        return None

    @property
    def message(self) -> Optional[str]:
        if isinstance(self.payload, dict):
            return self.payload.get("message")
        return None
