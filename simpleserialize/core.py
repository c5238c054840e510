"""The SSZ type interface and helpers shared by composite types."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from itertools import pairwise
from typing import Any, ClassVar

from .errors import DeserializeError, ExpectedFurtherInput, AdditionalInput, SerializeError

BYTES_PER_LENGTH_OFFSET = 4
MAX_OFFSET = 2**32 - 1


class ElementsType(Enum):
    """Whether a collection has a fixed or a bounded number of elements."""

    VECTOR = "vector"
    LIST = "list"


class SszTypeClass(Enum):
    """The broad kind of an SSZ type."""

    BASIC = "basic"
    BITVECTOR = "bitvector"
    BITLIST = "bitlist"
    VECTOR = "vector"
    LIST = "list"
    CONTAINER = "container"
    UNION = "union"

    @property
    def is_bits(self) -> bool:
        return self in (SszTypeClass.BITVECTOR, SszTypeClass.BITLIST)

    @property
    def elements_type(self) -> ElementsType | None:
        """The collection kind, or ``None`` for non-collection types."""
        return _ELEMENTS_TYPES.get(self)


_ELEMENTS_TYPES = {
    SszTypeClass.BITVECTOR: ElementsType.VECTOR,
    SszTypeClass.VECTOR: ElementsType.VECTOR,
    SszTypeClass.BITLIST: ElementsType.LIST,
    SszTypeClass.LIST: ElementsType.LIST,
}


class SszType(ABC):
    """Describes how values of one SSZ type are encoded and merkleized."""

    type_class: ClassVar[SszTypeClass]

    @abstractmethod
    def is_variable_size(self) -> bool:
        """Whether encodings of this type differ in length."""

    @abstractmethod
    def size_hint(self) -> int:
        """The encoded length of a fixed-size type, or 0 for variable size."""

    def is_composite(self) -> bool:
        """Whether the type is composite rather than basic."""
        return True

    @abstractmethod
    def default(self) -> Any:
        """The default value of this type."""

    @abstractmethod
    def serialize(self, value: Any) -> bytes:
        """Encode ``value``."""

    @abstractmethod
    def deserialize(self, data: bytes) -> Any:
        """Decode ``data`` into a value."""

    @abstractmethod
    def hash_tree_root(self, value: Any) -> bytes:
        """The 32-byte hash tree root of ``value``."""


def serialize(ssz_type: SszType, value: Any) -> bytes:
    """Encode ``value`` as ``ssz_type``."""
    return ssz_type.serialize(value)


def deserialize(ssz_type: SszType, data: bytes) -> Any:
    """Decode ``data`` as ``ssz_type``."""
    return ssz_type.deserialize(bytes(data))


def hash_tree_root(ssz_type: SszType, value: Any) -> bytes:
    """Return the hash tree root of ``value`` as ``ssz_type``."""
    return ssz_type.hash_tree_root(value)


def serialize_composite_from_components(parts: Iterable[tuple[bool, bytes]]) -> bytes:
    """Join encoded parts, given as ``(is_variable, encoding)`` pairs.

    Fixed-size parts are placed inline; variable-size parts are replaced by
    an offset and appended after the fixed section.
    """
    parts = list(parts)
    fixed_size = sum(
        BYTES_PER_LENGTH_OFFSET if is_variable else len(encoding)
        for is_variable, encoding in parts
    )
    fixed = bytearray()
    tail = bytearray()
    for is_variable, encoding in parts:
        if is_variable:
            offset = fixed_size + len(tail)
            if offset > MAX_OFFSET:
                raise SerializeError(f"offset {offset} does not fit in 4 bytes")
            fixed += offset.to_bytes(BYTES_PER_LENGTH_OFFSET, "little")
            tail += encoding
        else:
            fixed += encoding
    return bytes(fixed + tail)


def serialize_composite(element_type: SszType, values: Iterable[Any]) -> bytes:
    """Encode a homogeneous sequence of values of ``element_type``."""
    is_variable = element_type.is_variable_size()
    return serialize_composite_from_components(
        (is_variable, element_type.serialize(value)) for value in values
    )


def _deserialize_fixed(element_type: SszType, data: bytes) -> list[Any]:
    size = element_type.size_hint()
    remainder = len(data) % size
    if remainder:
        raise AdditionalInput(provided=len(data), expected=len(data) - remainder)
    return [
        element_type.deserialize(data[start:start + size])
        for start in range(0, len(data), size)
    ]


def _deserialize_variable(element_type: SszType, data: bytes) -> list[Any]:
    if not data:
        return []
    if len(data) < BYTES_PER_LENGTH_OFFSET:
        raise ExpectedFurtherInput(provided=len(data), expected=BYTES_PER_LENGTH_OFFSET)
    data_pointer = int.from_bytes(data[:BYTES_PER_LENGTH_OFFSET], "little")
    if len(data) < data_pointer:
        raise ExpectedFurtherInput(provided=len(data), expected=data_pointer)

    offset_bytes = data[:data_pointer - data_pointer % BYTES_PER_LENGTH_OFFSET]
    offsets = [offset for (offset,) in struct.iter_unpack("<I", offset_bytes)]
    offsets.append(len(data))

    elements = []
    for start, end in pairwise(offsets):
        if start > end:
            raise DeserializeError(
                f"offset {start} is beyond the following offset {end}"
            )
        elements.append(element_type.deserialize(data[start:end]))
    return elements


def deserialize_homogeneous_composite(element_type: SszType, data: bytes) -> list[Any]:
    """Decode a homogeneous sequence of values of ``element_type``."""
    data = bytes(data)
    if element_type.is_variable_size():
        return _deserialize_variable(element_type, data)
    return _deserialize_fixed(element_type, data)