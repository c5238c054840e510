"""The SSZ bitlist: a bounded, variable number of boolean values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .bitvector import _coerce_bits, _format_bits, _pack_bits, _unpack_bits
from .core import SszType, SszTypeClass
from .errors import (
    AdditionalInput,
    BoundExceededError,
    ExpectedFurtherInput,
    InvalidByte,
)
from .merkle import merkleize, mix_in_length, pack_bytes

_BITS_PER_CHUNK = 256


def _byte_length(bound: int) -> int:
    # one extra bit for the length marker
    return (bound + 7 + 1) // 8


@dataclass(frozen=True)
class Bitlist(SszType):
    """Up to ``limit`` booleans; values are tuples of ``bool``."""

    limit: int

    type_class = SszTypeClass.BITLIST

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"bitlist limit must not be negative, got {self.limit}")

    def is_variable_size(self) -> bool:
        return True

    def size_hint(self) -> int:
        return 0

    def default(self) -> tuple[bool, ...]:
        return ()

    def from_bits(self, bits: Iterable[bool]) -> tuple[bool, ...]:
        """Build a value from at most the first ``limit`` bits."""
        return tuple(bool(bit) for bit, _ in zip(bits, range(self.limit)))

    def format(self, value: Iterable[bool]) -> str:
        """A readable rendering such as ``Bitlist<len=5, cap=8>[1011_0]``."""
        bits = tuple(value)
        return f"Bitlist<len={len(bits)}, cap={self.limit}>[{_format_bits(bits)}]"

    def _checked_bits(self, value: Iterable[bool]) -> tuple[bool, ...]:
        bits = _coerce_bits(value)
        if len(bits) > self.limit:
            raise BoundExceededError(bound=self.limit, provided=len(bits))
        return bits

    def serialize(self, value: Iterable[bool]) -> bytes:
        bits = self._checked_bits(value)
        return _pack_bits(bits + (True,))

    def deserialize(self, data: bytes) -> tuple[bool, ...]:
        data = bytes(data)
        max_len = _byte_length(self.limit)
        if not data:
            raise ExpectedFurtherInput(provided=0, expected=max_len)
        if len(data) > max_len:
            raise AdditionalInput(provided=len(data), expected=max_len)
        last = data[-1]
        if last == 0:
            raise InvalidByte(last)
        count = (len(data) - 1) * 8 + last.bit_length() - 1
        if count > self.limit:
            raise BoundExceededError(bound=self.limit, provided=count)
        return _unpack_bits(data, count)

    def hash_tree_root(self, value: Iterable[bool]) -> bytes:
        bits = self._checked_bits(value)
        chunks = pack_bytes(_pack_bits(bits))
        limit = (self.limit + _BITS_PER_CHUNK - 1) // _BITS_PER_CHUNK
        return mix_in_length(merkleize(chunks, limit), len(bits))