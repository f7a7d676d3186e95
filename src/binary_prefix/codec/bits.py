"""Conversions between application keys and bit sequences.

Callers translate their keys into bit sequences before computing range
prefixes, and translate the resulting prefixes back into whatever prefix
syntax their store accepts.

Conventions
- Bits are most-significant first; each byte expands to 8 bits.
- "bits_from_*" functions return a new list of booleans.
- "bits_to_*" functions accept any sequence of booleans (or 0/1 ints),
  including the BitView objects returned by the prefix functions.
- Malformed input raises BitCodecError.
"""
from __future__ import annotations

from collections.abc import Sequence

from ..exceptions import BitCodecError

_SEPARATORS = frozenset("_ \t\n")


def bits_from_bytes(data: bytes) -> list[bool]:
    """Expand bytes into bits, 8 per byte, MSB first."""
    out: list[bool] = []
    for byte in data:
        for shift in range(7, -1, -1):
            out.append(bool((byte >> shift) & 0x01))
    return out


def bits_to_bytes(bits: Sequence[bool]) -> bytes:
    """Pack bits into bytes.

    Raises
    - BitCodecError: If len(bits) is not a multiple of 8.
    """
    if len(bits) % 8:
        raise BitCodecError(f"bit length {len(bits)} is not a multiple of 8")
    out = bytearray(len(bits) // 8)
    for i, bit in enumerate(bits):
        if bit:
            out[i // 8] |= 0x80 >> (i % 8)
    return bytes(out)


def bits_from_int(value: int, width: int) -> list[bool]:
    """Encode a non-negative integer as exactly ``width`` big-endian bits.

    Raises
    - BitCodecError: If value is negative or needs more than width bits.
    """
    if value < 0:
        raise BitCodecError(f"cannot encode negative value {value}")
    if value.bit_length() > width:
        raise BitCodecError(f"value {value} does not fit in {width} bits")
    return [bool((value >> shift) & 0x01) for shift in range(width - 1, -1, -1)]


def bits_to_int(bits: Sequence[bool]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | (1 if bit else 0)
    return value


def bits_from_str(text: str) -> list[bool]:
    """Parse a string such as "1010_0011"; underscores and whitespace are ignored."""
    out: list[bool] = []
    for ch in text:
        if ch == "1":
            out.append(True)
        elif ch == "0":
            out.append(False)
        elif ch not in _SEPARATORS:
            raise BitCodecError(f"invalid bit character {ch!r}")
    return out


def bits_to_str(bits: Sequence[bool]) -> str:
    return "".join("1" if bit else "0" for bit in bits)


def byte_aligned_prefix(bits: Sequence[bool]) -> bytes:
    """Whole bytes of a bit prefix; a trailing partial byte is dropped.

    Useful for stores whose prefix queries work on bytes: the result is a
    (possibly shorter, hence wider) byte prefix of every key matching ``bits``.
    """
    whole = len(bits) - len(bits) % 8
    return bits_to_bytes([bits[i] for i in range(whole)])
