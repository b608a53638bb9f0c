"""Service constants and client configuration."""

from __future__ import annotations
import os
from dataclasses import dataclass

ANU_API_URL = "https://qrng.anu.edu.au/API/jsonI.php"
MAX_LENGTH = 1024          # per-call cap on both length and block size
DEFAULT_TIMEOUT = None     # seconds; None blocks until the service answers


@dataclass(frozen=True, slots=True)
class ClientConfig:
    base_url: str = ANU_API_URL
    max_length: int = MAX_LENGTH
    timeout: float | None = DEFAULT_TIMEOUT

    def __post_init__(self):
        if self.max_length < 1:
            raise ValueError(f"max_length must be positive, got {self.max_length}")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from QRNG_API_URL, QRNG_MAX_LENGTH and QRNG_TIMEOUT."""
        timeout = os.getenv("QRNG_TIMEOUT")
        return cls(
            base_url=os.getenv("QRNG_API_URL", ANU_API_URL),
            max_length=int(os.getenv("QRNG_MAX_LENGTH", MAX_LENGTH)),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )
