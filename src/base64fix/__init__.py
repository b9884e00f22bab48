"""Padding-tolerant base64 decoding."""
from .codec import STD_CODEC, URL_CODEC, Codec, StdlibCodec
from .encoding import ALPHABETS, Encoding, StdEncoding, URLEncoding, encoding_for
from .errors import Base64FixError, ConfigError, ShortBufferError, UnknownAlphabetError
from .padding import pad_bytes, pad_string, padding_for
from .version import __version__

__all__ = [
    "ALPHABETS",
    "Base64FixError",
    "Codec",
    "ConfigError",
    "Encoding",
    "STD_CODEC",
    "ShortBufferError",
    "StdEncoding",
    "StdlibCodec",
    "URLEncoding",
    "URL_CODEC",
    "UnknownAlphabetError",
    "__version__",
    "encoding_for",
    "pad_bytes",
    "pad_string",
    "padding_for",
]
