"""SSZ unions: a selector byte followed by the value of the selected type."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .core import SszType, SszTypeClass
from .errors import (
    AdditionalInput,
    ExpectedFurtherInput,
    InvalidByte,
    SerializeError,
)
from .merkle import BYTES_PER_CHUNK, mix_in_selector

MAX_UNION_OPTIONS = 127


def _validate_options(options: Sequence[SszType | None]) -> tuple[SszType | None, ...]:
    options = tuple(options)
    if not options:
        raise ValueError("SSZ unions must have at least 1 option; this one has none")
    if len(options) > MAX_UNION_OPTIONS:
        raise ValueError(
            f"SSZ unions cannot have more than {MAX_UNION_OPTIONS} options; "
            f"this one has {len(options)}"
        )
    for index, option in enumerate(options):
        if option is None:
            if index != 0:
                raise ValueError("only the first option can be None")
            if len(options) < 2:
                raise ValueError(
                    "SSZ unions must have more than 1 option if the first is None"
                )
        elif not isinstance(option, SszType):
            raise TypeError(
                f"union option {index} must be an SszType or None, "
                f"got {type(option).__name__}"
            )
    return options


@dataclass(frozen=True)
class Union(SszType):
    """One of several types, chosen by a selector.

    Values are ``(selector, value)`` pairs. The first option may be ``None``,
    in which case the value paired with selector 0 is ``None``.
    """

    options: tuple[SszType | None, ...]

    type_class = SszTypeClass.UNION

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", _validate_options(self.options))

    def is_variable_size(self) -> bool:
        return True

    def size_hint(self) -> int:
        return 0

    def default(self) -> tuple[int, Any]:
        first = self.options[0]
        return (0, None if first is None else first.default())

    def _split(self, value: Any) -> tuple[int, SszType | None, Any]:
        try:
            selector, inner = value
        except (TypeError, ValueError):
            raise SerializeError(
                "union values must be (selector, value) pairs"
            ) from None
        if isinstance(selector, bool) or not isinstance(selector, int):
            raise SerializeError(f"selector must be an int, got {type(selector).__name__}")
        if not 0 <= selector < len(self.options):
            raise SerializeError(
                f"selector {selector} is outside of 0..{len(self.options) - 1}"
            )
        option = self.options[selector]
        if option is None and inner is not None:
            raise SerializeError("the None option of a union carries no value")
        return selector, option, inner

    def serialize(self, value: Any) -> bytes:
        selector, option, inner = self._split(value)
        if option is None:
            return bytes([selector])
        return bytes([selector]) + option.serialize(inner)

    def deserialize(self, data: bytes) -> tuple[int, Any]:
        data = bytes(data)
        if not data:
            raise ExpectedFurtherInput(provided=0, expected=1)
        selector = data[0]
        if selector >= len(self.options):
            raise InvalidByte(selector)
        option = self.options[selector]
        if option is None:
            if len(data) > 1:
                raise AdditionalInput(provided=len(data), expected=1)
            return (selector, None)
        return (selector, option.deserialize(data[1:]))

    def hash_tree_root(self, value: Any) -> bytes:
        selector, option, inner = self._split(value)
        if option is None:
            return mix_in_selector(bytes(BYTES_PER_CHUNK), selector)
        return mix_in_selector(option.hash_tree_root(inner), selector)