"""Exception types raised by binary_prefix."""
from __future__ import annotations


class BinaryPrefixError(Exception):
    """Base class for all errors raised by this package."""


class InvalidRangeError(BinaryPrefixError):
    """Raised when a pair of range keys cannot be covered without reading out of bounds."""


class ConfigurationError(BinaryPrefixError):
    """Raised when a RangePolicy is misconfigured."""


class BitCodecError(BinaryPrefixError, ValueError):
    """Raised when converting between keys and bit sequences fails."""
