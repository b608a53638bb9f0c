"""Fetcher layer for qrng - one bounded backend request per call."""

import os

from ..core.config import ANU_API_URL

# Re-export these for import convenience
from .base import Fetcher, AsyncFetcher
from .pseudo import open_pseudo_fetcher, open_pseudo_fetcher_async
from .http_sync import open_http_fetcher
from .http_async import open_http_fetcher_async


def _split_source(source, kwargs):
    """Return 'http' or 'pseudo'; fills in the url for HTTP sources."""
    if source is None or source == "anu":
        if "url" not in kwargs:
            kwargs["url"] = os.getenv("QRNG_API_URL", ANU_API_URL)
        return "http"
    if source == "pseudo":
        return "pseudo"
    source_str = str(source)
    if source_str.startswith(('http://', 'https://')):
        kwargs["url"] = source_str
        return "http"
    raise ValueError(f"Unknown fetcher source: {source!r}")


def open_fetcher(source=None, **kwargs):
    """Factory function to create the appropriate Fetcher for a source.

    `source` is None or "anu" for the ANU service, an http(s) URL for another
    endpoint speaking the same protocol, or "pseudo" for the offline backend.
    """
    if _split_source(source, kwargs) == "pseudo":
        return open_pseudo_fetcher(**kwargs)
    return open_http_fetcher(**kwargs)


async def open_fetcher_async(source=None, **kwargs):
    """Factory function to create the appropriate AsyncFetcher for a source."""
    if _split_source(source, kwargs) == "pseudo":
        return await open_pseudo_fetcher_async(**kwargs)
    return await open_http_fetcher_async(**kwargs)
