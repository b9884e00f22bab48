"""Padding repair for base64 input."""
from __future__ import annotations

_PAD = "="
_PAD_BYTE = b"="


def padding_for(length: int) -> int:
    """Return how many ``=`` characters make ``length`` a multiple of four."""
    return -length % 4


def pad_bytes(src: bytes | bytearray | memoryview) -> bytes | bytearray | memoryview:
    """Return ``src`` padded to a multiple of four bytes.

    Input that needs no padding is returned as is. Otherwise a new ``bytes``
    object is built, so the caller's buffer is never extended in place.
    """

    missing = padding_for(len(src))
    if not missing:
        return src
    return bytes(src) + _PAD_BYTE * missing


def pad_string(value: str) -> str:
    missing = padding_for(len(value))
    if not missing:
        return value
    return value + _PAD * missing


__all__ = ["padding_for", "pad_bytes", "pad_string"]
