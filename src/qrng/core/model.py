from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Kind(str, Enum):
    """Value kinds served by the backend; the value is the wire name."""
    UINT8 = "uint8"
    UINT16 = "uint16"
    HEX16 = "hex16"


@dataclass(slots=True)
class ReadResult:
    n: int                          # bytes written into the caller's buffer
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error


class QRNGError(RuntimeError):
    """Base class for every error raised by this package."""
    pass


class ValidationError(QRNGError, ValueError):
    """Raised when a request parameter is outside the permitted range."""

    def __init__(self, param: str, value: int, bound: int, message: str):
        super().__init__(message)
        self.param = param
        self.value = value
        self.bound = bound


class ValueTooSmallError(ValidationError):
    def __init__(self, param: str, value: int, bound: int = 1):
        super().__init__(param, value, bound, f"{param} is too small: {value}")


class ValueTooLargeError(ValidationError):
    def __init__(self, param: str, value: int, bound: int):
        super().__init__(param, value, bound, f"{param} is too large: {value}")


class FetchError(QRNGError):
    """Raised when a single backend call fails."""
    pass


class TransportError(FetchError, IOError):
    """Raised when the service cannot be reached or read from."""

    def __init__(self, detail):
        super().__init__(f"cannot load random numbers: {detail}")


class DecodeError(FetchError):
    """Raised when the response body does not match the expected schema."""

    def __init__(self, detail):
        super().__init__(f"cannot parse response: {detail}")


class ShortReadError(QRNGError):
    """Raised when a buffer could not be filled completely."""

    def __init__(self, requested: int, filled: int):
        super().__init__(f"short read: filled {filled} of {requested} bytes")
        self.requested = requested
        self.filled = filled
