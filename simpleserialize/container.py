"""SSZ containers: ordered, named collections of fields of mixed types."""

from __future__ import annotations

import keyword
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, make_dataclass
from typing import Any

from .core import (
    BYTES_PER_LENGTH_OFFSET,
    SszType,
    SszTypeClass,
    serialize_composite_from_components,
)
from .errors import (
    AdditionalInput,
    DeserializeError,
    ExpectedFurtherInput,
    SerializeError,
)
from .merkle import merkleize


def _normalize_fields(
    fields: Mapping[str, SszType] | Iterable[tuple[str, SszType]],
) -> tuple[tuple[str, SszType], ...]:
    pairs = tuple(fields.items() if isinstance(fields, Mapping) else fields)
    if not pairs:
        raise ValueError("containers with no fields are illegal")
    seen: set[str] = set()
    for name, ssz_type in pairs:
        if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
            raise ValueError(f"invalid field name {name!r}")
        if name in seen:
            raise ValueError(f"duplicate field name {name!r}")
        if not isinstance(ssz_type, SszType):
            raise TypeError(
                f"field {name!r} must have an SszType, got {type(ssz_type).__name__}"
            )
        seen.add(name)
    return pairs


@dataclass(frozen=True)
class Container(SszType):
    """A named, ordered set of typed fields.

    Values are instances of ``value_class``, a dataclass generated from the
    field list; ``make`` builds them with defaults for omitted fields.
    """

    name: str
    fields: tuple[tuple[str, SszType], ...]
    value_class: type = field(init=False, repr=False, compare=False)

    type_class = SszTypeClass.CONTAINER

    def __post_init__(self) -> None:
        pairs = _normalize_fields(self.fields)
        object.__setattr__(self, "fields", pairs)
        value_class = make_dataclass(
            self.name,
            [
                (name, Any, field(default_factory=ssz_type.default))
                for name, ssz_type in pairs
            ],
        )
        object.__setattr__(self, "value_class", value_class)

    def field_names(self) -> tuple[str, ...]:
        """The names of the fields, in encoding order."""
        return tuple(name for name, _ in self.fields)

    def make(self, **kwargs: Any) -> Any:
        """Build a value, filling omitted fields with their defaults."""
        return self.value_class(**kwargs)

    def is_variable_size(self) -> bool:
        return any(ssz_type.is_variable_size() for _, ssz_type in self.fields)

    def size_hint(self) -> int:
        if self.is_variable_size():
            return 0
        return sum(ssz_type.size_hint() for _, ssz_type in self.fields)

    def default(self) -> Any:
        return self.value_class()

    def _field_values(self, value: Any) -> list[tuple[str, SszType, Any]]:
        result = []
        for name, ssz_type in self.fields:
            try:
                item = value[name] if isinstance(value, Mapping) else getattr(value, name)
            except (KeyError, AttributeError):
                raise SerializeError(
                    f"value for container {self.name} has no field {name!r}"
                ) from None
            result.append((name, ssz_type, item))
        return result

    def serialize(self, value: Any) -> bytes:
        return serialize_composite_from_components(
            (ssz_type.is_variable_size(), ssz_type.serialize(item))
            for _, ssz_type, item in self._field_values(value)
        )

    def deserialize(self, data: bytes) -> Any:
        data = bytes(data)
        total = len(data)
        start = 0
        values: dict[str, Any] = {}
        offsets: list[tuple[str, SszType, int]] = []
        for name, ssz_type in self.fields:
            if ssz_type.is_variable_size():
                end = start + BYTES_PER_LENGTH_OFFSET
                if end > total:
                    raise ExpectedFurtherInput(provided=total, expected=end)
                offsets.append((name, ssz_type, int.from_bytes(data[start:end], "little")))
            else:
                end = start + ssz_type.size_hint()
                if end > total:
                    raise ExpectedFurtherInput(provided=total, expected=end)
                values[name] = ssz_type.deserialize(data[start:end])
            start = end

        bytes_read = start
        ends = [offset for _, _, offset in offsets[1:]] + [total]
        for (name, ssz_type, begin), end in zip(offsets, ends):
            if begin > total:
                raise ExpectedFurtherInput(provided=total, expected=begin)
            if begin > end:
                raise DeserializeError(
                    f"offset {begin} of field {name!r} is beyond the following offset {end}"
                )
            values[name] = ssz_type.deserialize(data[begin:end])
            bytes_read += end - begin

        if bytes_read > total:
            raise ExpectedFurtherInput(provided=total, expected=bytes_read)
        if bytes_read < total:
            raise AdditionalInput(provided=total, expected=bytes_read)
        return self.value_class(**values)

    def hash_tree_root(self, value: Any) -> bytes:
        chunks = b"".join(
            ssz_type.hash_tree_root(item)
            for _, ssz_type, item in self._field_values(value)
        )
        return merkleize(chunks, None)