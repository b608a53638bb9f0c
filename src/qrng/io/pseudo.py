"""Offline fetchers backed by a local pseudo-random generator."""

import random
import secrets
from typing import Optional


class PseudoFetcher:
    """Serves the Fetcher contract without network access.

    With a `seed` the output is reproducible; without one values come from
    ``secrets.SystemRandom``. Either way this is not quantum randomness.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed) if seed is not None else secrets.SystemRandom()

    def uint8(self, length: int) -> list[int]:
        return [self._rng.getrandbits(8) for _ in range(length)]

    def uint16(self, length: int) -> list[int]:
        return [self._rng.getrandbits(16) for _ in range(length)]

    def hex16(self, length: int, block_size: int) -> list[str]:
        return [self._rng.getrandbits(8 * block_size).to_bytes(block_size, "big").hex()
                for _ in range(length)]

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass


class AsyncPseudoFetcher:
    """Asynchronous wrapper around PseudoFetcher."""

    def __init__(self, seed: Optional[int] = None):
        self._sync_fetcher = PseudoFetcher(seed)

    async def uint8(self, length: int) -> list[int]:
        return self._sync_fetcher.uint8(length)

    async def uint16(self, length: int) -> list[int]:
        return self._sync_fetcher.uint16(length)

    async def hex16(self, length: int, block_size: int) -> list[str]:
        return self._sync_fetcher.hex16(length, block_size)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


def open_pseudo_fetcher(seed: Optional[int] = None) -> PseudoFetcher:
    """Create a synchronous pseudo-random fetcher."""
    return PseudoFetcher(seed)


async def open_pseudo_fetcher_async(seed: Optional[int] = None) -> AsyncPseudoFetcher:
    """Create an asynchronous pseudo-random fetcher."""
    return AsyncPseudoFetcher(seed)
