"""Error types shared by the primitives and a canonical byte serializer."""

from __future__ import annotations

from collections.abc import Sequence


class CryptoError(Exception):
    """Base class for every error raised by the primitives."""


class IncorrectInputLength(CryptoError):
    """An input had a length the primitive cannot accept."""

    def __init__(self, length: int) -> None:
        super().__init__(f"incorrect input length: {length}")
        self.length = length


class NotPrimeOrder(CryptoError):
    """A group element is not in the prime-order subgroup."""

    def __init__(self, message: str = "element is not prime order") -> None:
        super().__init__(message)


class SerializationError(CryptoError):
    """A value could not be serialized."""


def _length_prefix(length: int) -> bytes:
    return length.to_bytes(8, "little")


def to_uncompressed_bytes(value: object) -> bytes:
    """Serialize a value to its canonical uncompressed byte form.

    Objects providing ``to_uncompressed_bytes()`` serialize themselves. Byte
    strings and sequences are written as a little-endian 64-bit length
    followed by their items; booleans take a single byte.
    """
    method = getattr(value, "to_uncompressed_bytes", None)
    if callable(method):
        result = method()
        if not isinstance(result, (bytes, bytearray)):
            raise SerializationError(
                f"{type(value).__name__}.to_uncompressed_bytes returned {type(result).__name__}"
            )
        return bytes(result)
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        return _length_prefix(len(raw)) + raw
    if isinstance(value, bool):
        return b"\x01" if value else b"\x00"
    if isinstance(value, Sequence) and not isinstance(value, str):
        parts = [to_uncompressed_bytes(item) for item in value]
        return _length_prefix(len(parts)) + b"".join(parts)
    raise SerializationError(f"cannot serialize value of type {type(value).__name__}")