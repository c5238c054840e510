"""Basic SSZ types: booleans and unsigned integers."""

from __future__ import annotations

from dataclasses import dataclass

from .core import SszType, SszTypeClass
from .errors import AdditionalInput, ExpectedFurtherInput, InvalidByte, SerializeError
from .merkle import BYTES_PER_CHUNK

_UINT_BITS = (8, 16, 32, 64, 128, 256)


@dataclass(frozen=True)
class Boolean(SszType):
    """A single boolean encoded as one byte."""

    type_class = SszTypeClass.BASIC

    def is_variable_size(self) -> bool:
        return False

    def size_hint(self) -> int:
        return 1

    def is_composite(self) -> bool:
        return False

    def default(self) -> bool:
        return False

    def serialize(self, value: bool) -> bytes:
        if not isinstance(value, bool):
            raise SerializeError(f"expected a bool, got {type(value).__name__}")
        return bytes([int(value)])

    def deserialize(self, data: bytes) -> bool:
        match len(data):
            case 0:
                raise ExpectedFurtherInput(provided=0, expected=1)
            case 1:
                byte = data[0]
                if byte == 0:
                    return False
                if byte == 1:
                    return True
                raise InvalidByte(byte)
            case n:
                raise AdditionalInput(provided=n, expected=1)

    def hash_tree_root(self, value: bool) -> bytes:
        return self.serialize(value).ljust(BYTES_PER_CHUNK, b"\x00")


@dataclass(frozen=True)
class UInt(SszType):
    """An unsigned little-endian integer of a fixed bit width."""

    bits: int

    type_class = SszTypeClass.BASIC

    def __post_init__(self) -> None:
        if self.bits not in _UINT_BITS:
            raise ValueError(f"unsupported integer width {self.bits}")

    @property
    def byte_length(self) -> int:
        return self.bits // 8

    def is_variable_size(self) -> bool:
        return False

    def size_hint(self) -> int:
        return self.byte_length

    def is_composite(self) -> bool:
        return False

    def default(self) -> int:
        return 0

    def serialize(self, value: int) -> bytes:
        if not isinstance(value, int):
            raise SerializeError(f"expected an int, got {type(value).__name__}")
        if not 0 <= value < 1 << self.bits:
            raise SerializeError(f"{value} does not fit in uint{self.bits}")
        return value.to_bytes(self.byte_length, "little")

    def deserialize(self, data: bytes) -> int:
        expected = self.byte_length
        if len(data) < expected:
            raise ExpectedFurtherInput(provided=len(data), expected=expected)
        if len(data) > expected:
            raise AdditionalInput(provided=len(data), expected=expected)
        return int.from_bytes(data, "little")

    def hash_tree_root(self, value: int) -> bytes:
        return self.serialize(value).ljust(BYTES_PER_CHUNK, b"\x00")


boolean = Boolean()
uint8 = UInt(8)
uint16 = UInt(16)
uint32 = UInt(32)
uint64 = UInt(64)
uint128 = UInt(128)
uint256 = UInt(256)