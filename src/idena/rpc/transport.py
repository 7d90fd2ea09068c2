"""
HTTP transports for the Idena RPC client.

A transport delivers one JSON body to the node and hands back the decoded
reply. Anything that goes wrong on the way (connection failures, non-2xx
statuses, bodies that are not JSON) is raised as a TransportError; reading
the reply's ``result``/``error`` members is left to the client.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

import httpx
from loguru import logger

from .errors import HTTPStatusError, TransportError

DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    def send(self, url: str, body: dict[str, Any]) -> Any:
        ...


class AsyncTransport(Protocol):
    async def send(self, url: str, body: dict[str, Any]) -> Any:
        ...


def _decode(response: httpx.Response) -> Any:
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning("Node answered HTTP {} for {}", response.status_code, response.url)
        raise HTTPStatusError(response.status_code, response.text) from exc
    try:
        return response.json()
    except ValueError as exc:
        logger.warning("Node reply from {} is not valid JSON", response.url)
        raise TransportError(f"Invalid JSON in reply: {exc}") from exc


class HttpxTransport:
    """
    Blocking transport built on ``httpx.Client``.

    Without an injected client a short-lived one is opened per request;
    an injected client is reused and stays owned by the caller.
    """

    def __init__(self, client: Optional[httpx.Client] = None, timeout: float = DEFAULT_TIMEOUT):
        self.client = client
        self.timeout = timeout

    def _post(self, client: httpx.Client, url: str, body: dict[str, Any]) -> httpx.Response:
        try:
            return client.post(url, json=body)
        except httpx.HTTPError as exc:
            logger.warning("Request to {} failed: {}", url, exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc

    def send(self, url: str, body: dict[str, Any]) -> Any:
        if self.client is not None:
            return _decode(self._post(self.client, url, body))
        with httpx.Client(timeout=self.timeout) as client:
            return _decode(self._post(client, url, body))


class AsyncHttpxTransport:
    """Same contract as HttpxTransport, on ``httpx.AsyncClient``."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = DEFAULT_TIMEOUT):
        self.client = client
        self.timeout = timeout

    async def _post(self, client: httpx.AsyncClient, url: str, body: dict[str, Any]) -> httpx.Response:
        try:
            return await client.post(url, json=body)
        except httpx.HTTPError as exc:
            logger.warning("Request to {} failed: {}", url, exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc

    async def send(self, url: str, body: dict[str, Any]) -> Any:
        if self.client is not None:
            return _decode(await self._post(self.client, url, body))
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return _decode(await self._post(client, url, body))
