"""Synchronous HTTP fetcher using requests."""

import logging
from typing import Optional

import requests

from ..core.config import ANU_API_URL, DEFAULT_TIMEOUT
from ..core.model import DecodeError, Kind, TransportError
from .base import build_params, decode_payload

logger = logging.getLogger(__name__)


class HTTPFetcher:
    """Fetches random values from a JSON endpoint, one GET per call."""

    def __init__(self, url: str = ANU_API_URL, *, timeout: Optional[float] = DEFAULT_TIMEOUT, session=None):
        self.url = url
        self.timeout = timeout
        # module-level requests API unless a session is injected; no pooling of our own
        self._http = session if session is not None else requests

    def _get(self, kind: Kind, length: int, block_size: int = 0) -> list:
        params = build_params(kind, length, block_size)
        logger.debug(f"GET {self.url} {params}")
        try:
            response = self._http.get(self.url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
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

    def uint8(self, length: int) -> list[int]:
        return self._get(Kind.UINT8, length)

    def uint16(self, length: int) -> list[int]:
        return self._get(Kind.UINT16, length)

    def hex16(self, length: int, block_size: int) -> list[str]:
        return self._get(Kind.HEX16, length, block_size)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # injected sessions belong to the caller, don't close them here
        pass


def open_http_fetcher(url: str = ANU_API_URL, **kwargs) -> HTTPFetcher:
    """Create a synchronous HTTP fetcher."""
    return HTTPFetcher(url, **kwargs)
