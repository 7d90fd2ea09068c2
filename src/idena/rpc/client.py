"""
Idena node API clients.

IdenaAPI and AsyncIdenaAPI share the same surface: a generic ``invoke``
plus named helpers for the node's procedures. Every helper is a single
call to ``invoke``, so on AsyncIdenaAPI they return awaitables.

The API key is copied into the request envelope before the transport is
touched. ``set_api_key`` therefore only affects calls started after it
returns; requests already in flight keep the key they were built with.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from loguru import logger

from ..config import ClientSettings
from . import methods
from .envelope import JsonValue, RequestEnvelope, classify_response
from .transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport


class _NodeProcedures(ABC):
    """Named helpers shared by both clients."""

    @abstractmethod
    def invoke(self, method: str, params: Optional[Sequence[JsonValue]] = None) -> Any:
        ...

    def identities(self) -> Any:
        """List all identities (not only validated ones)."""
        return self.invoke(methods.IDENTITIES)

    def identity(self, address: str) -> Any:
        """Show info about the identity at ``address``."""
        return self.invoke(methods.IDENTITY, [address])

    def balance(self, address: str) -> Any:
        """Get the balance of an address."""
        return self.invoke(methods.BALANCE, [address])

    def send(self, from_address: str, to_address: str, amount: float) -> Any:
        """Send DNA from one address to another."""
        return self.invoke(
            methods.SEND_TRANSACTION,
            [{"from": from_address, "to": to_address, "amount": amount}],
        )

    # Parameters below are forwarded to the node untouched.

    def epoch(self, *params: JsonValue) -> Any:
        """Current epoch and next validation time."""
        return self.invoke(methods.EPOCH, params)

    def ceremony_intervals(self, *params: JsonValue) -> Any:
        """Durations of the validation ceremony phases."""
        return self.invoke(methods.CEREMONY_INTERVALS, params)

    def coinbase_address(self, *params: JsonValue) -> Any:
        """Address of the node's own identity."""
        return self.invoke(methods.COINBASE_ADDRESS, params)

    def transaction(self, *params: JsonValue) -> Any:
        """Look up a single transaction."""
        return self.invoke(methods.TRANSACTION, params)

    def transactions(self, *params: JsonValue) -> Any:
        """List transactions of an address."""
        return self.invoke(methods.TRANSACTIONS, params)

    def pending_transactions(self, *params: JsonValue) -> Any:
        """List transactions still in the mempool."""
        return self.invoke(methods.PENDING_TRANSACTIONS, params)

    def kill_identity(self, *params: JsonValue) -> Any:
        """Terminate the node's identity."""
        return self.invoke(methods.KILL_IDENTITY, params)

    def go_online(self, *params: JsonValue) -> Any:
        """Start mining with the node's identity."""
        return self.invoke(methods.GO_ONLINE, params)

    def go_offline(self, *params: JsonValue) -> Any:
        """Stop mining with the node's identity."""
        return self.invoke(methods.GO_OFFLINE, params)

    def send_invite(self, *params: JsonValue) -> Any:
        """Issue an invitation."""
        return self.invoke(methods.SEND_INVITE, params)

    def activate_invite(self, *params: JsonValue) -> Any:
        """Activate a received invitation."""
        return self.invoke(methods.ACTIVATE_INVITE, params)

    def fetch_flip_short_hashes(self, *params: JsonValue) -> Any:
        """Flip hashes for the short session."""
        return self.invoke(methods.FLIP_SHORT_HASHES, params)

    def fetch_flip_long_hashes(self, *params: JsonValue) -> Any:
        """Flip hashes for the long session."""
        return self.invoke(methods.FLIP_LONG_HASHES, params)

    def get_flip(self, *params: JsonValue) -> Any:
        """Fetch a flip by hash."""
        return self.invoke(methods.FLIP_GET, params)

    def submit_short_answers(self, *params: JsonValue) -> Any:
        """Submit answers for the short session."""
        return self.invoke(methods.FLIP_SUBMIT_SHORT_ANSWERS, params)

    def submit_long_answers(self, *params: JsonValue) -> Any:
        """Submit answers for the long session."""
        return self.invoke(methods.FLIP_SUBMIT_LONG_ANSWERS, params)

    def submit_flip(self, *params: JsonValue) -> Any:
        """Publish a new flip."""
        return self.invoke(methods.FLIP_SUBMIT, params)

    def sync_status(self, *params: JsonValue) -> Any:
        """Blockchain synchronisation progress."""
        return self.invoke(methods.SYNC_STATUS, params)

    def node_version(self, *params: JsonValue) -> Any:
        """Version string of the node."""
        return self.invoke(methods.NODE_VERSION, params)

    def import_key(self, *params: JsonValue) -> Any:
        """Import an encrypted private key into the node."""
        return self.invoke(methods.IMPORT_KEY, params)

    def export_key(self, *params: JsonValue) -> Any:
        """Export the node's private key, encrypted."""
        return self.invoke(methods.EXPORT_KEY, params)

    def enode(self, *params: JsonValue) -> Any:
        """Peer-to-peer address of the node."""
        return self.invoke(methods.ENODE, params)


class _ClientState:
    def __init__(self, api_key: str, host_url: str):
        self._api_key = api_key
        self._host_url = host_url

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def host_url(self) -> str:
        return self._host_url

    def set_api_key(self, new_key: str) -> None:
        """Change the API key used by subsequent calls."""
        self._api_key = new_key

    def _envelope(self, method: str, params: Optional[Sequence[JsonValue]]) -> RequestEnvelope:
        logger.debug("RPC {} -> {}", method, self._host_url)
        return RequestEnvelope.build(self._api_key, method, params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host_url={self._host_url!r})"


class IdenaAPI(_ClientState, _NodeProcedures):
    """
    Blocking client for an Idena node.

    Args:
        api_key: The API key for your node
        host_url: The node's RPC URL. Usually http://localhost:9119/ when
            running the node bundled with idena-desktop.
        transport: Delivery mechanism (default: HttpxTransport)
    """

    def __init__(self, api_key: str, host_url: str, transport: Optional[Transport] = None):
        super().__init__(api_key, host_url)
        self.transport = transport if transport is not None else HttpxTransport()

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "IdenaAPI":
        return cls(
            settings.api_key,
            settings.host_url,
            transport=HttpxTransport(timeout=settings.timeout),
        )

    def invoke(self, method: str, params: Optional[Sequence[JsonValue]] = None) -> Any:
        """
        Call a remote procedure.

        Args:
            method: Procedure name (e.g., "dna_getBalance")
            params: Positional parameters, possibly empty

        Returns:
            The reply's ``result`` member (None is a valid result)

        Raises:
            TransportError: If the request could not be completed
            RemoteError: If the node replied with an error
            TypeError: If params is a bare string, bytes or mapping
        """
        envelope = self._envelope(method, params)
        return classify_response(self.transport.send(self._host_url, envelope.to_dict()))


class AsyncIdenaAPI(_ClientState, _NodeProcedures):
    """Asynchronous counterpart of IdenaAPI; ``invoke`` and helpers are awaitable."""

    def __init__(self, api_key: str, host_url: str, transport: Optional[AsyncTransport] = None):
        super().__init__(api_key, host_url)
        self.transport = transport if transport is not None else AsyncHttpxTransport()

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "AsyncIdenaAPI":
        return cls(
            settings.api_key,
            settings.host_url,
            transport=AsyncHttpxTransport(timeout=settings.timeout),
        )

    async def invoke(self, method: str, params: Optional[Sequence[JsonValue]] = None) -> Any:
        envelope = self._envelope(method, params)
        body = await self.transport.send(self._host_url, envelope.to_dict())
        return classify_response(body)

