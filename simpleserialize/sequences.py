"""Homogeneous SSZ collections: bounded lists and fixed-length vectors."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .core import (
    SszType,
    SszTypeClass,
    deserialize_homogeneous_composite,
    serialize_composite,
)
from .errors import (
    AdditionalInput,
    BoundExceededError,
    ExactLengthError,
    ExpectedFurtherInput,
    InvalidBoundError,
)
from .merkle import BYTES_PER_CHUNK, merkleize, mix_in_length, pack_bytes


def _pack(element_type: SszType, values: list[Any]) -> bytes:
    """Serialize basic values back to back and pad them to whole chunks."""
    return pack_bytes(b"".join(element_type.serialize(value) for value in values))


def _element_roots(element_type: SszType, values: list[Any]) -> bytes:
    """Concatenate the hash tree roots of composite values."""
    return b"".join(element_type.hash_tree_root(value) for value in values)


def _check_element_type(element_type: Any) -> None:
    if not isinstance(element_type, SszType):
        raise TypeError(
            f"element type must be an SszType, got {type(element_type).__name__}"
        )


@dataclass(frozen=True)
class List(SszType):
    """Up to ``limit`` values of ``element_type``; values are Python lists."""

    element_type: SszType
    limit: int

    type_class = SszTypeClass.LIST

    def __post_init__(self) -> None:
        _check_element_type(self.element_type)
        if self.limit < 0:
            raise ValueError(f"list limit must not be negative, got {self.limit}")

    def is_variable_size(self) -> bool:
        return True

    def size_hint(self) -> int:
        return 0

    def default(self) -> list[Any]:
        return []

    def validate(self, values: Iterable[Any]) -> list[Any]:
        """Return ``values`` as a list, raising if it exceeds the bound."""
        items = list(values)
        if len(items) > self.limit:
            raise BoundExceededError(bound=self.limit, provided=len(items))
        return items

    def serialize(self, value: Iterable[Any]) -> bytes:
        items = self.validate(value)
        return serialize_composite(self.element_type, items)

    def deserialize(self, data: bytes) -> list[Any]:
        items = deserialize_homogeneous_composite(self.element_type, data)
        return self.validate(items)

    def _chunk_limit(self) -> int:
        if self.element_type.is_composite():
            return self.limit
        encoded = self.limit * self.element_type.size_hint()
        return (encoded + BYTES_PER_CHUNK - 1) // BYTES_PER_CHUNK

    def hash_tree_root(self, value: Iterable[Any]) -> bytes:
        items = self.validate(value)
        if self.element_type.is_composite():
            chunks = _element_roots(self.element_type, items)
        else:
            chunks = _pack(self.element_type, items)
        data_root = merkleize(chunks, self._chunk_limit())
        return mix_in_length(data_root, len(items))


@dataclass(frozen=True)
class Vector(SszType):
    """Exactly ``length`` values of ``element_type``; values are Python lists.

    A vector of length zero is an illegal type: it can be described but not
    used.
    """

    element_type: SszType
    length: int

    type_class = SszTypeClass.VECTOR

    def __post_init__(self) -> None:
        _check_element_type(self.element_type)
        if self.length < 0:
            raise ValueError(f"vector length must not be negative, got {self.length}")

    def _check_bound(self) -> None:
        if self.length == 0:
            raise InvalidBoundError(self.length)

    def is_variable_size(self) -> bool:
        return self.element_type.is_variable_size()

    def size_hint(self) -> int:
        return self.element_type.size_hint() * self.length

    def default(self) -> list[Any]:
        self._check_bound()
        return [self.element_type.default() for _ in range(self.length)]

    def validate(self, values: Iterable[Any]) -> list[Any]:
        """Return ``values`` as a list, raising unless it has exactly ``length`` items."""
        self._check_bound()
        items = list(values)
        if len(items) != self.length:
            raise ExactLengthError(required=self.length, provided=len(items))
        return items

    def serialize(self, value: Iterable[Any]) -> bytes:
        items = self.validate(value)
        return serialize_composite(self.element_type, items)

    def deserialize(self, data: bytes) -> list[Any]:
        self._check_bound()
        data = bytes(data)
        if not self.element_type.is_variable_size():
            expected = self.size_hint()
            if len(data) < expected:
                raise ExpectedFurtherInput(provided=len(data), expected=expected)
            if len(data) > expected:
                raise AdditionalInput(provided=len(data), expected=expected)
        items = deserialize_homogeneous_composite(self.element_type, data)
        return self.validate(items)

    def hash_tree_root(self, value: Iterable[Any]) -> bytes:
        items = self.validate(value)
        if self.element_type.is_composite():
            chunks = _element_roots(self.element_type, items)
        else:
            chunks = _pack(self.element_type, items)
        return merkleize(chunks, None)