"""Tests for the typed accessors."""

import pytest

from qrng import AsyncQRNGClient, ClientConfig, QRNGClient
from qrng.core.config import MAX_LENGTH
from qrng.core.model import DecodeError, Kind, TransportError, ValidationError
from qrng.io.http_sync import HTTPFetcher
from qrng.stream import AsyncStreamReader, StreamReader


class RecordingFetcher:
    """Fetcher double that records every call."""

    def __init__(self, extra: int = 0):
        self.calls = []
        self.extra = extra      # values added to (or, if negative, removed from) each answer

    def uint8(self, length):
        self.calls.append(("uint8", length))
        return [7] * (length + self.extra)

    def uint16(self, length):
        self.calls.append(("uint16", length))
        return [700] * (length + self.extra)

    def hex16(self, length, block_size):
        self.calls.append(("hex16", length, block_size))
        return ["ab" * block_size] * (length + self.extra)


class FailingFetcher:
    def uint8(self, length):
        raise TransportError("connection refused")


class AsyncRecordingFetcher(RecordingFetcher):

    async def uint8(self, length):
        return RecordingFetcher.uint8(self, length)

    async def uint16(self, length):
        return RecordingFetcher.uint16(self, length)

    async def hex16(self, length, block_size):
        return RecordingFetcher.hex16(self, length, block_size)


class TestQRNGClient:

    def setup_method(self):
        self.fetcher = RecordingFetcher()
        self.client = QRNGClient(self.fetcher)

    @pytest.mark.parametrize("length", [1, 2, 100, MAX_LENGTH])
    def test_uint8_exact_length(self, length):
        assert len(self.client.uint8(length)) == length
        assert self.fetcher.calls == [("uint8", length)]

    @pytest.mark.parametrize("length", [1, MAX_LENGTH])
    def test_uint16_exact_length(self, length):
        assert len(self.client.uint16(length)) == length

    def test_hex16(self):
        assert self.client.hex16(2, 3) == ["ababab", "ababab"]
        assert self.fetcher.calls == [("hex16", 2, 3)]

    @pytest.mark.parametrize("length", [-1, 0, MAX_LENGTH + 1])
    def test_invalid_length_never_fetches(self, length):
        for accessor in (self.client.uint8, self.client.uint16):
            with pytest.raises(ValidationError):
                accessor(length)
        with pytest.raises(ValidationError):
            self.client.hex16(length, 1)
        assert self.fetcher.calls == []

    @pytest.mark.parametrize("block_size", [-1, 0, MAX_LENGTH + 1])
    def test_invalid_block_size_never_fetches(self, block_size):
        with pytest.raises(ValidationError, match="block size"):
            self.client.hex16(1, block_size)
        assert self.fetcher.calls == []

    def test_generic_fetch_accepts_wire_names(self):
        assert self.client.fetch("uint16", 2) == [700, 700]
        assert self.client.fetch(Kind.UINT8, 1) == [7]

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            self.client.fetch("float", 1)

    @pytest.mark.parametrize("extra", [-1, 1])
    def test_count_mismatch_is_decode_error(self, extra):
        client = QRNGClient(RecordingFetcher(extra=extra))
        with pytest.raises(DecodeError):
            client.uint8(4)

    @pytest.mark.parametrize("values", [[300, 7], [-1, 7], ["7", 7]])
    def test_out_of_range_values_are_decode_errors(self, values):
        class BadFetcher:
            def uint8(self, length):
                return values

        with pytest.raises(DecodeError, match="invalid uint8 value at index 0"):
            QRNGClient(BadFetcher()).uint8(2)

    def test_fetch_error_propagates(self):
        with pytest.raises(TransportError):
            QRNGClient(FailingFetcher()).uint8(1)

    def test_configured_maximum(self):
        client = QRNGClient(self.fetcher, config=ClientConfig(max_length=4))
        client.uint8(4)
        with pytest.raises(ValidationError):
            client.uint8(5)

    def test_default_fetcher_is_http(self):
        client = QRNGClient(config=ClientConfig(base_url="http://localhost/q", timeout=1.0))
        assert isinstance(client.fetcher, HTTPFetcher)
        assert client.fetcher.url == "http://localhost/q"
        assert client.fetcher.timeout == 1.0

    def test_reader(self):
        reader = self.client.reader()
        assert isinstance(reader, StreamReader)
        assert reader.client is self.client


class TestAsyncQRNGClient:

    def setup_method(self):
        self.fetcher = AsyncRecordingFetcher()
        self.client = AsyncQRNGClient(self.fetcher)

    @pytest.mark.asyncio
    async def test_accessors(self):
        assert await self.client.uint8(3) == [7, 7, 7]
        assert await self.client.uint16(1) == [700]
        assert await self.client.hex16(1, 1) == ["ab"]
        assert self.fetcher.calls == [("uint8", 3), ("uint16", 1), ("hex16", 1, 1)]

    @pytest.mark.asyncio
    async def test_validation(self):
        with pytest.raises(ValidationError):
            await self.client.uint8(MAX_LENGTH + 1)
        with pytest.raises(ValidationError):
            await self.client.hex16(1, 0)
        assert self.fetcher.calls == []

    @pytest.mark.asyncio
    async def test_count_mismatch(self):
        client = AsyncQRNGClient(AsyncRecordingFetcher(extra=-1))
        with pytest.raises(DecodeError):
            await client.uint16(2)

    def test_reader(self):
        assert isinstance(self.client.reader(), AsyncStreamReader)
