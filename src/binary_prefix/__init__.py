"""binary-prefix: range queries as prefix queries over binary keys."""
from .protocol.prefix_math import RangePrefix, pad, range_prefix, shared_prefix
from .protocol.views import BitView
from .api.policy import RangePlanner, RangePolicy
from .exceptions import (
    BinaryPrefixError,
    BitCodecError,
    ConfigurationError,
    InvalidRangeError,
)

__version__ = "0.1.0"

__all__ = [
    "pad",
    "shared_prefix",
    "range_prefix",
    "RangePrefix",
    "BitView",
    "RangePolicy",
    "RangePlanner",
    "BinaryPrefixError",
    "BitCodecError",
    "ConfigurationError",
    "InvalidRangeError",
]
