"""Padding-tolerant base64 decoding."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .codec import STD_CODEC, URL_CODEC, Codec
from .errors import ShortBufferError, UnknownAlphabetError
from .padding import pad_bytes, pad_string, padding_for


@dataclass(frozen=True, slots=True)
class Encoding:
    """Wrap a strict codec so that input missing its trailing ``=`` decodes.

    Padding is repaired on a copy of the input before it reaches the codec.
    Whatever the codec raises on the padded input is passed to the caller
    unchanged.
    """

    codec: Codec = field(default=STD_CODEC)

    def decode(self, dst: bytearray | memoryview, src: bytes | bytearray | memoryview) -> int:
        """Decode ``src`` into the front of ``dst`` and return the byte count.

        ``dst`` is sized by the caller (see :meth:`decoded_len`) and is left
        untouched when decoding fails.
        """

        if isinstance(src, str):
            raise TypeError("decode() takes a bytes-like src, use decode_string() for str")
        decoded = self.codec.decode(pad_bytes(src))
        count = len(decoded)
        if count > len(dst):
            raise ShortBufferError(count, len(dst))
        dst[:count] = decoded
        return count

    def decode_string(self, value: str) -> bytes:
        return self.codec.decode_string(pad_string(value))

    def decoded_len(self, length: int) -> int:
        """Upper bound on the bytes :meth:`decode` writes for ``length`` input bytes."""
        return (length + padding_for(length)) // 4 * 3


StdEncoding = Encoding(STD_CODEC)
URLEncoding = Encoding(URL_CODEC)

_ENCODINGS: Dict[str, Encoding] = {
    STD_CODEC.name: StdEncoding,
    URL_CODEC.name: URLEncoding,
}

ALPHABETS = tuple(_ENCODINGS)


def encoding_for(name: str) -> Encoding:
    try:
        return _ENCODINGS[name.lower()]
    except KeyError as exc:
        raise UnknownAlphabetError(f"Unknown alphabet: {name}") from exc


__all__ = ["Encoding", "StdEncoding", "URLEncoding", "ALPHABETS", "encoding_for"]
