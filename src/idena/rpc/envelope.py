"""
Request envelopes and response classification.

An Idena node speaks a JSON-RPC dialect: instead of a ``jsonrpc`` version
member every request carries the node's API key under ``key``.

    {"key": "...", "id": 1, "method": "dna_getBalance", "params": ["0x..."]}

Replies carry exactly one of ``result`` or ``error``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger

from .errors import ProtocolViolation, RemoteError

JsonValue = Union[None, bool, int, float, str, List["JsonValue"], Dict[str, "JsonValue"]]

# The node does not correlate replies, so every request uses the same id.
REQUEST_ID = 1


@dataclass(frozen=True)
class RequestEnvelope:
    key: str
    method: str
    params: tuple = ()
    id: int = REQUEST_ID

    @classmethod
    def build(
        cls,
        key: str,
        method: str,
        params: Optional[Sequence[JsonValue]] = None,
    ) -> "RequestEnvelope":
        # A bare string or mapping would be split into characters or keys.
        if isinstance(params, (str, bytes, bytearray, Mapping)):
            raise TypeError(
                f"params must be a list or tuple of values, got {type(params).__name__}"
            )
        return cls(key=key, method=method, params=tuple(params or ()))

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "key": self.key,
            "id": self.id,
            "method": self.method,
        }
        if self.params:
            body["params"] = list(self.params)
        return body


def classify_response(body: Any) -> JsonValue:
    """
    Turn a decoded reply into a result value or an exception.

    Args:
        body: Decoded JSON body returned by the transport

    Returns:
        The ``result`` member, which may legitimately be None

    Raises:
        RemoteError: If the reply carries a non-null ``error``
        ProtocolViolation: If the reply is not an object, carries neither
            member, or carries both a result and an error
    """
    if not isinstance(body, dict):
        logger.debug("Reply is not a JSON object: {!r}", body)
        raise ProtocolViolation(
            f"Expected a JSON object, got {type(body).__name__}", response=body
        )

    error = body.get("error")
    if error is not None:
        if body.get("result") is not None:
            logger.debug("Reply carries both result and error")
            raise ProtocolViolation(
                "Reply carries both 'result' and 'error'", response=body
            )
        logger.debug("Node returned error: {}", error)
        raise RemoteError(error)

    if "result" not in body:
        logger.debug("Reply carries neither result nor error: {!r}", body)
        raise ProtocolViolation(
            "Reply carries neither 'result' nor 'error'", response=body
        )

    return body["result"]
