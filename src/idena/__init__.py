__all__ = [
    # Clients
    "IdenaAPI",
    "AsyncIdenaAPI",
    # Settings
    "ClientSettings",
    # Transports
    "Transport",
    "AsyncTransport",
    "HttpxTransport",
    "AsyncHttpxTransport",
    # Envelope
    "JsonValue",
    "RequestEnvelope",
    "classify_response",
    # Errors
    "IdenaError",
    "TransportError",
    "HTTPStatusError",
    "ProtocolViolation",
    "RemoteError",
]

from loguru import logger

from .config import ClientSettings
from .rpc.client import AsyncIdenaAPI, IdenaAPI
from .rpc.envelope import JsonValue, RequestEnvelope, classify_response
from .rpc.errors import HTTPStatusError, IdenaError, ProtocolViolation, RemoteError, TransportError
from .rpc.transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport

# Silent unless the application calls logger.enable("idena").
logger.disable("idena")
