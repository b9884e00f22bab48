"""Exception hierarchy for base64fix."""
from __future__ import annotations


class Base64FixError(Exception):
    """Base exception for errors raised by base64fix itself"""


class ShortBufferError(Base64FixError, ValueError):
    """Raised when a destination buffer cannot hold the decoded output"""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(
            f"destination buffer too small: need {needed} bytes, have {available}"
        )
        self.needed = needed
        self.available = available


class UnknownAlphabetError(Base64FixError, KeyError):
    """Raised when an alphabet name does not match a known variant"""


class ConfigError(Base64FixError, ValueError):
    """Raised when a configuration file cannot be validated"""


__all__ = [
    "Base64FixError",
    "ShortBufferError",
    "UnknownAlphabetError",
    "ConfigError",
]
