"""Streaming reads: fill caller buffers of any size with random bytes.

The backend caps every call at ``client.max_length`` values, so a buffer larger
than that is filled chunk by chunk. Chunks land at their logical offset, in
order; the first failing chunk stops the read and the bytes accumulated before
it are reported alongside the error.

Readers keep no state between calls. The running offset lives on the stack of
each invocation, so a single reader can serve concurrent callers.
"""

from __future__ import annotations
import logging

from .core.model import QRNGError, ReadResult, ShortReadError

logger = logging.getLogger(__name__)


def _writable_view(buf) -> memoryview:
    view = memoryview(buf)
    if view.readonly:
        raise TypeError("buffer must be writable")
    return view.cast("B") if view.format != "B" or view.ndim != 1 else view


def _short_read(requested: int, filled: int, cause: Exception | None) -> ShortReadError:
    err = ShortReadError(requested, filled)
    err.__cause__ = cause
    return err


class StreamReader:
    """Fills buffers from a QRNGClient's uint8 accessor."""

    def __init__(self, client):
        self.client = client

    def read_into(self, buf) -> ReadResult:
        """Fill `buf` with random bytes, possibly short on error.

        Returns ``ReadResult(n, error)``. Without an error ``n == len(buf)``.
        With one, ``n`` counts the bytes of the chunks that completed before
        the failing chunk and ``buf[n:]`` is left untouched.
        """
        view = _writable_view(buf)
        size = len(view)
        if size == 0:
            return ReadResult(0)

        chunk_max = self.client.max_length
        n = 0
        # a buffer that fits in one chunk takes a single pass through the loop
        while n < size:
            want = min(chunk_max, size - n)
            try:
                chunk = self.client.uint8(want)
            except QRNGError as e:
                if n:
                    logger.warning(f"Partial read: {n} of {size} bytes before failure: {e}")
                return ReadResult(n, e)
            view[n:n + want] = bytes(chunk)
            n += want
            logger.debug(f"Read {n}/{size} bytes")
        return ReadResult(n)

    def read_full(self, buf) -> ReadResult:
        """Fill `buf` completely or fail with a ShortReadError.

        A short count is never returned without an error. On failure the
        contents of `buf` are unspecified.
        """
        view = _writable_view(buf)
        size = len(view)
        n = 0
        while n < size:
            result = self.read_into(view[n:])
            n += result.n
            if result.error is not None:
                return ReadResult(n, _short_read(size, n, result.error))
            if result.n == 0:
                return ReadResult(n, _short_read(size, n, None))
        return ReadResult(n)

    def read(self, size: int) -> bytes:
        """Return exactly `size` random bytes or raise."""
        if size < 0:
            raise ValueError(f"size cannot be negative: {size}")
        buf = bytearray(size)
        self.read_full(buf).raise_for_error()
        return bytes(buf)


class AsyncStreamReader:
    """Asynchronous twin of StreamReader. Chunks are awaited one after another."""

    def __init__(self, client):
        self.client = client

    async def read_into(self, buf) -> ReadResult:
        view = _writable_view(buf)
        size = len(view)
        if size == 0:
            return ReadResult(0)

        chunk_max = self.client.max_length
        n = 0
        while n < size:
            want = min(chunk_max, size - n)
            try:
                chunk = await self.client.uint8(want)
            except QRNGError as e:
                if n:
                    logger.warning(f"Partial read: {n} of {size} bytes before failure: {e}")
                return ReadResult(n, e)
            view[n:n + want] = bytes(chunk)
            n += want
            logger.debug(f"Read {n}/{size} bytes")
        return ReadResult(n)

    async def read_full(self, buf) -> ReadResult:
        view = _writable_view(buf)
        size = len(view)
        n = 0
        while n < size:
            result = await self.read_into(view[n:])
            n += result.n
            if result.error is not None:
                return ReadResult(n, _short_read(size, n, result.error))
            if result.n == 0:
                return ReadResult(n, _short_read(size, n, None))
        return ReadResult(n)

    async def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"size cannot be negative: {size}")
        buf = bytearray(size)
        (await self.read_full(buf)).raise_for_error()
        return bytes(buf)
