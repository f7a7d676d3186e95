"""Prefix math over bit sequences.

Bit sequences are any ``Sequence`` of booleans, most-significant bit first.
Results are ``BitView`` objects that borrow from the inputs instead of
copying them.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple, Optional

from ..exceptions import InvalidRangeError
from .views import BitView

if TYPE_CHECKING:
    from ..api.policy import RangePolicy

logger = logging.getLogger(__name__)


class RangePrefix(NamedTuple):
    """Pair of boundary prefixes covering a binary range."""

    start: BitView
    end: BitView


def pad(size: int, bits: Sequence[bool]) -> list[bool]:
    """Left-pad ``bits`` with zero bits up to ``size``.

    Always returns a new list. Inputs already ``size`` bits or longer are
    copied unchanged; nothing is ever truncated.
    """
    fill = max(size - len(bits), 0)
    return [False] * fill + list(bits)


def shared_prefix(a: Sequence[bool], b: Sequence[bool]) -> BitView:
    """Longest prefix shared by ``a`` and ``b``, as a view into ``a``."""
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return BitView(a, n)


def _find_seq(initial: bool, bits: Sequence[bool], begin: int, stop: int) -> int:
    """Length of the boundary run in ``bits[begin:stop]``.

    The run is one bit equal to ``initial`` followed by bits equal to
    ``not initial``: 0,1,1,... for a start key and 1,0,0,... for an end key.
    """
    if begin > stop or stop > len(bits):
        raise InvalidRangeError(
            f"window [{begin}, {stop}) out of bounds for {len(bits)}-bit key"
        )
    count = 0
    expected = initial
    for i in range(begin, stop):
        if bits[i] != expected:
            break
        count += 1
        expected = not initial
    return count


def range_prefix(
    start: Sequence[bool],
    end: Sequence[bool],
    *,
    policy: Optional["RangePolicy"] = None,
) -> RangePrefix:
    """Find the two prefixes covering the binary range [start, end].

    With the default (strict) policy, a ``start`` shorter than ``end`` raises
    InvalidRangeError. ``RangePolicy.padded()`` left-pads both keys to the same
    length first; the views then borrow from the padded copies.
    """
    if policy is not None:
        start, end = policy.prepare(start, end)
    elif len(start) < len(end):
        raise InvalidRangeError(
            f"start key has {len(start)} bits, shorter than end key ({len(end)} bits)"
        )

    segment_len = len(end)
    base_len = len(shared_prefix(start, end))

    start_special = _find_seq(False, start, base_len, segment_len)
    end_special = _find_seq(True, end, base_len, segment_len)

    logger.debug(
        "range_prefix: shared=%d start_run=%d end_run=%d",
        base_len,
        start_special,
        end_special,
    )
    return RangePrefix(
        BitView(start, base_len + start_special),
        BitView(end, base_len + end_special),
    )
