"""Zero-copy prefix views over caller-owned bit sequences."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Iterator, overload


class BitView(Sequence[bool]):
    """Leading sub-range of a bit sequence.

    The view keeps a reference to ``source`` and a length; no bits are copied.
    Offset is always 0, so ``BitView(bits, n)`` reads like ``bits[:n]``.
    It compares equal to any sequence holding the same bits.
    """

    __slots__ = ("_source", "_length")

    def __init__(self, source: Sequence[bool], length: int):
        if length < 0 or length > len(source):
            raise ValueError(f"view length {length} not in [0, {len(source)}]")
        self._source = source
        self._length = length

    @property
    def source(self) -> Sequence[bool]:
        return self._source

    def __len__(self) -> int:
        return self._length

    @overload
    def __getitem__(self, index: int) -> bool: ...
    @overload
    def __getitem__(self, index: slice) -> list[bool]: ...

    def __getitem__(self, index: int | slice) -> bool | list[bool]:
        if isinstance(index, slice):
            return [bool(self._source[i]) for i in range(*index.indices(self._length))]
        if index < 0:
            index += self._length
        if index < 0 or index >= self._length:
            raise IndexError("BitView index out of range")
        return bool(self._source[index])

    def __iter__(self) -> Iterator[bool]:
        source = self._source
        for i in range(self._length):
            yield bool(source[i])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        if len(other) != self._length:
            return False
        return all(a == bool(b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        bits = "".join("1" if b else "0" for b in self)
        return f"BitView({bits!r}, len={self._length})"

    def to_list(self) -> list[bool]:
        """Copy the viewed bits into a new list."""
        return list(self)

    def startswith(self, prefix: Sequence[bool]) -> bool:
        if len(prefix) > self._length:
            return False
        return all(self._source[i] == prefix[i] for i in range(len(prefix)))
