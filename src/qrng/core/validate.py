from __future__ import annotations

from .config import MAX_LENGTH
from .model import Kind, ValueTooLargeError, ValueTooSmallError


def check_range(name: str, value: int, maximum: int = MAX_LENGTH) -> None:
    """Raise unless ``1 <= value <= maximum``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 1:
        raise ValueTooSmallError(name, value)
    if value > maximum:
        raise ValueTooLargeError(name, value, maximum)


def check_request(kind: Kind, length: int, block_size: int = 0, maximum: int = MAX_LENGTH) -> None:
    check_range("length", length, maximum)
    # block size only travels with hex blocks
    if kind is Kind.HEX16:
        check_range("block size", block_size, maximum)
