from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from ..codec.bits import bits_from_bytes
from ..exceptions import ConfigurationError, InvalidRangeError
from ..protocol.prefix_math import RangePrefix, pad, range_prefix

logger = logging.getLogger(__name__)

MISMATCH_RAISE = "raise"
MISMATCH_PAD = "pad"
_MISMATCH_MODES = (MISMATCH_RAISE, MISMATCH_PAD)


@dataclass(frozen=True)
class RangePolicy:
    """How range_prefix treats keys of different lengths."""

    length_mismatch: str = MISMATCH_RAISE
    max_key_bits: Optional[int] = None

    @classmethod
    def strict(cls) -> "RangePolicy":
        """Reject a start key shorter than the end key."""
        return cls(length_mismatch=MISMATCH_RAISE)

    @classmethod
    def padded(cls) -> "RangePolicy":
        """Left-pad both keys with zero bits to a common length."""
        return cls(length_mismatch=MISMATCH_PAD)

    def validate(self) -> None:
        if self.length_mismatch not in _MISMATCH_MODES:
            raise ConfigurationError(
                f"length_mismatch must be one of {_MISMATCH_MODES}, got {self.length_mismatch!r}"
            )
        if self.max_key_bits is not None and self.max_key_bits <= 0:
            raise ConfigurationError(f"max_key_bits must be positive, got {self.max_key_bits}")

    def prepare(
        self, start: Sequence[bool], end: Sequence[bool]
    ) -> tuple[Sequence[bool], Sequence[bool]]:
        """Check a key pair against the policy and return the keys to compute on."""
        self.validate()
        if self.max_key_bits is not None:
            longest = max(len(start), len(end))
            if longest > self.max_key_bits:
                raise InvalidRangeError(
                    f"key of {longest} bits exceeds max_key_bits={self.max_key_bits}"
                )
        if len(start) == len(end):
            return start, end
        if self.length_mismatch == MISMATCH_RAISE:
            if len(start) < len(end):
                raise InvalidRangeError(
                    f"start key has {len(start)} bits, shorter than end key ({len(end)} bits)"
                )
            return start, end
        size = max(len(start), len(end))
        logger.debug("padding range keys from (%d, %d) to %d bits", len(start), len(end), size)
        if len(start) < size:
            start = pad(size, start)
        if len(end) < size:
            end = pad(size, end)
        return start, end


class RangePlanner:
    """Computes range prefixes under a fixed RangePolicy."""

    def __init__(self, policy: Optional[RangePolicy] = None):
        self._policy = policy or RangePolicy()
        self._policy.validate()

    @property
    def policy(self) -> RangePolicy:
        return self._policy

    def plan(self, start: Sequence[bool], end: Sequence[bool]) -> RangePrefix:
        return range_prefix(start, end, policy=self._policy)

    def plan_bytes(self, start: bytes, end: bytes) -> RangePrefix:
        """Same as plan, for byte-string keys (8 bits per byte, MSB first)."""
        return self.plan(bits_from_bytes(start), bits_from_bytes(end))
