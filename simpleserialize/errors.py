"""Exceptions raised while encoding, decoding and merkleizing SSZ values."""

from __future__ import annotations


class SszError(ValueError):
    """Base class for every error raised by this package."""


class SerializeError(SszError):
    """A value could not be serialized."""


class DeserializeError(SszError):
    """An encoding could not be deserialized."""


class ExpectedFurtherInput(DeserializeError):
    """The encoding is shorter than the type requires."""

    def __init__(self, provided: int, expected: int) -> None:
        self.provided = provided
        self.expected = expected
        super().__init__(
            f"expected at least {expected} bytes when decoding "
            f"but provided only {provided} bytes"
        )


class AdditionalInput(DeserializeError):
    """The encoding is longer than the type allows."""

    def __init__(self, provided: int, expected: int) -> None:
        self.provided = provided
        self.expected = expected
        super().__init__(f"{provided} bytes given but only expected {expected} bytes")


class InvalidByte(DeserializeError):
    """A byte in the encoding is not legal for the expected type."""

    def __init__(self, byte: int) -> None:
        self.byte = byte
        super().__init__(
            f"invalid byte {byte:x} when decoding data of the expected type"
        )


class InstanceError(SerializeError, DeserializeError):
    """A value has the wrong number of elements for its type."""


class ExactLengthError(InstanceError):
    """A fixed-length collection was given the wrong number of elements."""

    def __init__(self, required: int, provided: int) -> None:
        self.required = required
        self.provided = provided
        super().__init__(
            f"required {required} elements for this type "
            f"but {provided} elements given"
        )


class BoundExceededError(InstanceError):
    """A bounded collection was given more elements than its bound."""

    def __init__(self, bound: int, provided: int) -> None:
        self.bound = bound
        self.provided = provided
        super().__init__(
            f"{provided} elements given for a type with (inclusive) upper bound {bound}"
        )


class InvalidBoundError(SerializeError, DeserializeError):
    """The type itself is illegal with the given bound."""

    def __init__(self, bound: int) -> None:
        self.bound = bound
        super().__init__(f"the type for this value is invalid with bound {bound}")


class MerkleizationError(SszError):
    """A hash tree root could not be computed."""