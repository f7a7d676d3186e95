"""Prefix computations over bit sequences."""

from .prefix_math import RangePrefix, pad, range_prefix, shared_prefix
from .views import BitView

__all__ = [
    "BitView",
    "RangePrefix",
    "pad",
    "range_prefix",
    "shared_prefix",
]
