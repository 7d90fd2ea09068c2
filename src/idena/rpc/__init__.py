"""
RPC - Request dispatch for an Idena node.

Builds key-authenticated request envelopes, delivers them over httpx and
sorts replies into results or errors.
"""

from .client import AsyncIdenaAPI, IdenaAPI
from .envelope import REQUEST_ID, JsonValue, RequestEnvelope, classify_response
from .errors import HTTPStatusError, IdenaError, ProtocolViolation, RemoteError, TransportError
from .transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport

__all__ = [
    "AsyncHttpxTransport",
    "AsyncIdenaAPI",
    "AsyncTransport",
    "HTTPStatusError",
    "HttpxTransport",
    "IdenaAPI",
    "IdenaError",
    "JsonValue",
    "ProtocolViolation",
    "REQUEST_ID",
    "RemoteError",
    "RequestEnvelope",
    "Transport",
    "TransportError",
    "classify_response",
]
