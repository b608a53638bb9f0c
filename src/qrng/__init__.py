"""qrng - a client for the ANU quantum random number generator."""

from .core.config import ClientConfig, ANU_API_URL, MAX_LENGTH
from .core.model import (                                               # re-export
    Kind, ReadResult,
    QRNGError, ValidationError, ValueTooSmallError, ValueTooLargeError,
    FetchError, TransportError, DecodeError, ShortReadError,
)
from .client import QRNGClient, AsyncQRNGClient
from .stream import StreamReader, AsyncStreamReader
from .io import open_fetcher, open_fetcher_async


def _apply_config(source, config: ClientConfig, fetcher_options: dict) -> None:
    """Default the fetcher url and timeout from `config` for HTTP sources."""
    if source is None or source == "anu":
        fetcher_options.setdefault("url", config.base_url)
    elif source == "pseudo":
        return
    fetcher_options.setdefault("timeout", config.timeout)


def open_client(source=None, *, config: ClientConfig | None = None, **fetcher_options) -> QRNGClient:
    """Create a QRNGClient for a source (None/"anu", an http(s) URL, or "pseudo")."""
    config = config or ClientConfig.from_env()
    _apply_config(source, config, fetcher_options)
    return QRNGClient(open_fetcher(source, **fetcher_options), config=config)


async def open_client_async(source=None, *, config: ClientConfig | None = None,
                            **fetcher_options) -> AsyncQRNGClient:
    """Create an AsyncQRNGClient for a source."""
    config = config or ClientConfig.from_env()
    _apply_config(source, config, fetcher_options)
    return AsyncQRNGClient(await open_fetcher_async(source, **fetcher_options), config=config)


__all__ = [
    "open_client", "open_client_async",
    "QRNGClient", "AsyncQRNGClient", "StreamReader", "AsyncStreamReader",
    "ClientConfig", "ANU_API_URL", "MAX_LENGTH",
    "Kind", "ReadResult",
    "QRNGError", "ValidationError", "ValueTooSmallError", "ValueTooLargeError",
    "FetchError", "TransportError", "DecodeError", "ShortReadError",
    "open_fetcher", "open_fetcher_async",
]
