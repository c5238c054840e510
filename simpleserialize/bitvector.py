"""The SSZ bitvector: a fixed number of boolean values packed into bytes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .core import SszType, SszTypeClass
from .errors import (
    AdditionalInput,
    ExactLengthError,
    ExpectedFurtherInput,
    InvalidBoundError,
    InvalidByte,
    SerializeError,
)
from .merkle import merkleize, pack_bytes

_BITS_PER_CHUNK = 256


def _pack_bits(bits: tuple[bool, ...]) -> bytes:
    """Pack bits into bytes, least significant bit first."""
    out = bytearray((len(bits) + 7) // 8)
    for index, bit in enumerate(bits):
        if bit:
            out[index // 8] |= 1 << (index % 8)
    return bytes(out)


def _unpack_bits(data: bytes, count: int) -> tuple[bool, ...]:
    """Read the first ``count`` bits of ``data``, least significant bit first."""
    return tuple(bool((data[i // 8] >> (i % 8)) & 1) for i in range(count))


def _coerce_bits(value: Iterable[bool]) -> tuple[bool, ...]:
    bits = tuple(value)
    for bit in bits:
        if not isinstance(bit, bool):
            raise SerializeError(f"expected a bool, got {type(bit).__name__}")
    return bits


def _format_bits(bits: tuple[bool, ...]) -> str:
    groups = (
        "".join(str(int(bit)) for bit in bits[start:start + 4])
        for start in range(0, len(bits), 4)
    )
    return "_".join(groups)


@dataclass(frozen=True)
class Bitvector(SszType):
    """A fixed number of booleans; values are tuples of ``bool``.

    A bitvector of length zero is an illegal type: it can be described but
    not used.
    """

    length: int

    type_class = SszTypeClass.BITVECTOR

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"bitvector length must not be negative, got {self.length}")

    def _check_bound(self) -> None:
        if self.length == 0:
            raise InvalidBoundError(self.length)

    def is_variable_size(self) -> bool:
        return False

    def size_hint(self) -> int:
        return (self.length + 7) // 8

    def default(self) -> tuple[bool, ...]:
        self._check_bound()
        return (False,) * self.length

    def from_bits(self, bits: Iterable[bool]) -> tuple[bool, ...]:
        """Build a value from the first ``length`` bits, padding with ``False``."""
        self._check_bound()
        taken = tuple(bool(bit) for bit, _ in zip(bits, range(self.length)))
        return taken + (False,) * (self.length - len(taken))

    def format(self, value: Iterable[bool]) -> str:
        """A readable rendering such as ``Bitvector<8>[0011_0100]``."""
        return f"Bitvector<{self.length}>[{_format_bits(tuple(value))}]"

    def serialize(self, value: Iterable[bool]) -> bytes:
        self._check_bound()
        bits = _coerce_bits(value)
        if len(bits) != self.length:
            raise ExactLengthError(required=self.length, provided=len(bits))
        return _pack_bits(bits)

    def deserialize(self, data: bytes) -> tuple[bool, ...]:
        self._check_bound()
        data = bytes(data)
        expected = self.size_hint()
        if len(data) < expected:
            raise ExpectedFurtherInput(provided=len(data), expected=expected)
        if len(data) > expected:
            raise AdditionalInput(provided=len(data), expected=expected)
        remainder = self.length % 8
        if remainder and data[-1] >> remainder:
            raise InvalidByte(data[-1])
        return _unpack_bits(data, self.length)

    def hash_tree_root(self, value: Iterable[bool]) -> bytes:
        chunks = pack_bytes(self.serialize(value))
        limit = (self.length + _BITS_PER_CHUNK - 1) // _BITS_PER_CHUNK
        return merkleize(chunks, limit)