"""Asynchronous HTTP fetcher using httpx."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx

from ..core.config import ANU_API_URL, DEFAULT_TIMEOUT
from ..core.model import DecodeError, Kind, TransportError
from .base import build_params, decode_payload

logger = logging.getLogger(__name__)


class AsyncHTTPFetcher:
    """Asynchronous twin of HTTPFetcher."""

    def __init__(self, url: str = ANU_API_URL, *, timeout: Optional[float] = DEFAULT_TIMEOUT,
                 client: Optional[httpx.AsyncClient] = None):
        self.url = url
        self.timeout = timeout
        self._client = client

    @asynccontextmanager
    async def _get_client(self):
        """Yield the injected client, or a fresh one closed after the request."""
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client

    async def _get(self, kind: Kind, length: int, block_size: int = 0) -> list:
        params = build_params(kind, length, block_size)
        logger.debug(f"GET {self.url} {params}")
        async with self._get_client() as client:
            try:
                response = await client.get(self.url, params=params, timeout=self.timeout)
            except httpx.HTTPError as e:
                logger.warning(f"Request for {length} {kind.value} values failed: {e}")
                raise TransportError(e) from e

        if response.status_code >= 400:
            logger.warning(f"Request for {length} {kind.value} values failed with status {response.status_code}")
            raise TransportError(f"status {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            logger.warning(f"Response for {length} {kind.value} values is not JSON: {e}")
            raise DecodeError(e) from e

        try:
            return decode_payload(kind, length, body)
        except DecodeError as e:
            logger.warning(str(e))
            raise

    async def uint8(self, length: int) -> list[int]:
        return await self._get(Kind.UINT8, length)

    async def uint16(self, length: int) -> list[int]:
        return await self._get(Kind.UINT16, length)

    async def hex16(self, length: int, block_size: int) -> list[str]:
        return await self._get(Kind.HEX16, length, block_size)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        # injected clients belong to the caller, don't close them here
        pass


async def open_http_fetcher_async(url: str = ANU_API_URL, **kwargs) -> AsyncHTTPFetcher:
    """Create an asynchronous HTTP fetcher."""
    return AsyncHTTPFetcher(url, **kwargs)
