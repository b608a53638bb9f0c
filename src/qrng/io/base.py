"""Base protocols and shared decoding for the fetcher layer."""

from __future__ import annotations
import string
from typing import Any, Protocol, runtime_checkable

from ..core.model import DecodeError, Kind

# inclusive upper bounds for integer kinds
_INT_LIMITS = {Kind.UINT8: 0xFF, Kind.UINT16: 0xFFFF}
_HEX_DIGITS = frozenset(string.hexdigits)


@runtime_checkable
class Fetcher(Protocol):
    """Protocol for synchronous backends. One call, one bounded request."""

    def uint8(self, length: int) -> list[int]:
        """Return exactly `length` values in 0..255 or raise FetchError."""
        ...

    def uint16(self, length: int) -> list[int]:
        """Return exactly `length` values in 0..65535 or raise FetchError."""
        ...

    def hex16(self, length: int, block_size: int) -> list[str]:
        """Return exactly `length` hex strings of `block_size` bytes each or raise FetchError."""
        ...


@runtime_checkable
class AsyncFetcher(Protocol):
    """Protocol for asynchronous backends."""

    async def uint8(self, length: int) -> list[int]:
        ...

    async def uint16(self, length: int) -> list[int]:
        ...

    async def hex16(self, length: int, block_size: int) -> list[str]:
        ...


def build_params(kind: Kind, length: int, block_size: int = 0) -> dict[str, Any]:
    """Query parameters for one request; size is 0 unless hex blocks are wanted."""
    return {
        "type": kind.value,
        "length": length,
        "size": block_size if kind is Kind.HEX16 else 0,
    }


def valid_item(kind: Kind, item: Any) -> bool:
    if kind is Kind.HEX16:
        return isinstance(item, str) and item != "" and all(c in _HEX_DIGITS for c in item)
    return (isinstance(item, int) and not isinstance(item, bool)
            and 0 <= item <= _INT_LIMITS[kind])


def decode_payload(kind: Kind, length: int, body: Any) -> list:
    """Validate a decoded JSON body and return its ``data`` array.

    The element count must equal `length`; a mismatch is treated as a decode
    failure rather than truncated or padded.
    """
    if not isinstance(body, dict):
        raise DecodeError(f"expected a JSON object, got {type(body).__name__}")
    if body.get("success") is False:
        raise DecodeError("service reported an unsuccessful request")
    data = body.get("data")
    if not isinstance(data, list):
        raise DecodeError("missing 'data' array")
    if len(data) != length:
        raise DecodeError(f"expected {length} values, got {len(data)}")
    for pos, item in enumerate(data):
        if not valid_item(kind, item):
            raise DecodeError(f"invalid {kind.value} value at index {pos}: {item!r}")
    return data
