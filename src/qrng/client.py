"""Typed accessors: validate, then delegate one bounded call to a fetcher."""

from __future__ import annotations
import logging

from .core.config import ClientConfig
from .core.model import DecodeError, Kind
from .core.validate import check_request
from .io.base import valid_item
from .io.http_async import AsyncHTTPFetcher
from .io.http_sync import HTTPFetcher
from .stream import AsyncStreamReader, StreamReader

logger = logging.getLogger(__name__)


def _check_values(kind: Kind, length: int, values: list) -> list:
    if len(values) != length:
        raise DecodeError(f"expected {length} {kind.value} values, got {len(values)}")
    for pos, item in enumerate(values):
        if not valid_item(kind, item):
            raise DecodeError(f"invalid {kind.value} value at index {pos}: {item!r}")
    return values


class QRNGClient:
    """Synchronous client. Holds only immutable collaborators, safe to share."""

    def __init__(self, fetcher=None, *, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self.fetcher = fetcher if fetcher is not None else HTTPFetcher(self.config.base_url,
                                                                      timeout=self.config.timeout)

    @property
    def max_length(self) -> int:
        return self.config.max_length

    def fetch(self, kind: Kind | str, length: int, block_size: int = 0) -> list:
        """Fetch `length` values of `kind`; nothing is sent if validation fails."""
        kind = Kind(kind)
        check_request(kind, length, block_size, self.max_length)
        logger.debug(f"Fetching {length} {kind.value} values")
        if kind is Kind.UINT8:
            values = self.fetcher.uint8(length)
        elif kind is Kind.UINT16:
            values = self.fetcher.uint16(length)
        else:
            values = self.fetcher.hex16(length, block_size)
        return _check_values(kind, length, values)

    def uint8(self, length: int) -> list[int]:
        """Return `length` byte-sized random numbers."""
        return self.fetch(Kind.UINT8, length)

    def uint16(self, length: int) -> list[int]:
        """Return `length` word-sized random numbers."""
        return self.fetch(Kind.UINT16, length)

    def hex16(self, length: int, block_size: int) -> list[str]:
        """Return `length` hexadecimal blocks of `block_size` bytes each."""
        return self.fetch(Kind.HEX16, length, block_size)

    def reader(self):
        return StreamReader(self)


class AsyncQRNGClient:
    """Asynchronous twin of QRNGClient."""

    def __init__(self, fetcher=None, *, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self.fetcher = fetcher if fetcher is not None else AsyncHTTPFetcher(self.config.base_url,
                                                                           timeout=self.config.timeout)

    @property
    def max_length(self) -> int:
        return self.config.max_length

    async def fetch(self, kind: Kind | str, length: int, block_size: int = 0) -> list:
        kind = Kind(kind)
        check_request(kind, length, block_size, self.max_length)
        logger.debug(f"Fetching {length} {kind.value} values")
        if kind is Kind.UINT8:
            values = await self.fetcher.uint8(length)
        elif kind is Kind.UINT16:
            values = await self.fetcher.uint16(length)
        else:
            values = await self.fetcher.hex16(length, block_size)
        return _check_values(kind, length, values)

    async def uint8(self, length: int) -> list[int]:
        return await self.fetch(Kind.UINT8, length)

    async def uint16(self, length: int) -> list[int]:
        return await self.fetch(Kind.UINT16, length)

    async def hex16(self, length: int, block_size: int) -> list[str]:
        return await self.fetch(Kind.HEX16, length, block_size)

    def reader(self):
        return AsyncStreamReader(self)
