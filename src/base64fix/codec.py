"""Conformant base64 codecs wrapped by the tolerant decoder."""
from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

_STANDARD_ALTCHARS = "+/"


class Codec:
    """Protocol-like base class for strict base64 codecs."""

    name: str

    def decode(self, src: bytes | bytearray | memoryview) -> bytes:  # pragma: no cover - protocol
        raise NotImplementedError

    def decode_string(self, value: str) -> bytes:  # pragma: no cover - protocol
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class StdlibCodec(Codec):
    """Codec backed by :func:`base64.b64decode` in strict mode.

    Input must already be correctly padded. Characters outside the alphabet,
    misplaced padding and impossible lengths raise :class:`binascii.Error`;
    strings holding non-ASCII characters raise :class:`ValueError`. With
    ``altchars`` set, ``+`` and ``/`` are outside the alphabet.
    """

    name: str
    altchars: bytes | None = None

    def decode(self, src: bytes | bytearray | memoryview) -> bytes:
        if self.altchars is not None:
            self._reject_standard_altchars(bytes(src).decode("latin-1"))
        return base64.b64decode(src, altchars=self.altchars, validate=True)

    def decode_string(self, value: str) -> bytes:
        if self.altchars is not None:
            self._reject_standard_altchars(value)
        return base64.b64decode(value, altchars=self.altchars, validate=True)

    def _reject_standard_altchars(self, text: str) -> None:
        # b64decode maps altchars onto "+/" and would accept both pairs
        foreign = [c for c in _STANDARD_ALTCHARS if c.encode("ascii") not in self.altchars]
        if any(c in text for c in foreign):
            raise binascii.Error("Non-base64 digit found")


STD_CODEC = StdlibCodec(name="std")
URL_CODEC = StdlibCodec(name="url", altchars=b"-_")


__all__ = ["Codec", "StdlibCodec", "STD_CODEC", "URL_CODEC"]
