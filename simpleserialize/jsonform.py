"""Conversion of SSZ values to and from JSON-compatible data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .basic import Boolean, UInt
from .bitlist import Bitlist
from .bitvector import Bitvector
from .container import Container
from .core import SszType
from .errors import DeserializeError, ExpectedFurtherInput, SerializeError
from .sequences import List, Vector
from .union import Union

# Integers wider than this are written as decimal strings.
_MAX_NUMERIC_BITS = 64


def _bits_to_json(ssz_type: SszType, value: Any) -> str:
    return "0x" + ssz_type.serialize(value).hex()


def _bits_from_json(ssz_type: SszType, data: Any) -> tuple[bool, ...]:
    if not isinstance(data, str):
        raise DeserializeError(f"expected a hex string, got {type(data).__name__}")
    if len(data) < 2:
        raise ExpectedFurtherInput(provided=len(data), expected=2)
    try:
        encoding = bytes.fromhex(data[2:])
    except ValueError as err:
        raise DeserializeError(f"invalid hex string {data!r}: {err}") from None
    return ssz_type.deserialize(encoding)


def _field(value: Any, name: str) -> Any:
    try:
        return value[name] if isinstance(value, Mapping) else getattr(value, name)
    except (KeyError, AttributeError):
        raise SerializeError(f"value has no field {name!r}") from None


def to_json(ssz_type: SszType, value: Any) -> Any:
    """Return JSON-compatible data for ``value`` of ``ssz_type``.

    Bit collections become ``0x``-prefixed hex of their encoding, lists and
    vectors become arrays, containers become objects and unions become
    ``{"selector": ..., "value": ...}``.
    """
    match ssz_type:
        case Boolean():
            if not isinstance(value, bool):
                raise SerializeError(f"expected a bool, got {type(value).__name__}")
            return value
        case UInt():
            ssz_type.serialize(value)
            return value if ssz_type.bits <= _MAX_NUMERIC_BITS else str(value)
        case Bitvector() | Bitlist():
            return _bits_to_json(ssz_type, value)
        case List() | Vector():
            items = ssz_type.validate(value)
            return [to_json(ssz_type.element_type, item) for item in items]
        case Container():
            return {
                name: to_json(field_type, _field(value, name))
                for name, field_type in ssz_type.fields
            }
        case Union():
            ssz_type.serialize(value)
            selector, inner = value
            option = ssz_type.options[selector]
            return {
                "selector": selector,
                "value": None if option is None else to_json(option, inner),
            }
    raise TypeError(f"unsupported SSZ type {type(ssz_type).__name__}")


def _uint_from_json(ssz_type: UInt, data: Any) -> int:
    if isinstance(data, str):
        try:
            number = int(data, 10)
        except ValueError:
            raise DeserializeError(f"invalid integer string {data!r}") from None
    elif isinstance(data, int) and not isinstance(data, bool):
        number = data
    else:
        raise DeserializeError(f"expected an integer, got {type(data).__name__}")
    if not 0 <= number < 1 << ssz_type.bits:
        raise DeserializeError(f"{number} does not fit in uint{ssz_type.bits}")
    return number


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DeserializeError(f"expected an object, got {type(data).__name__}")
    return data


def from_json(ssz_type: SszType, data: Any) -> Any:
    """Build a value of ``ssz_type`` from data produced by ``to_json``."""
    match ssz_type:
        case Boolean():
            if not isinstance(data, bool):
                raise DeserializeError(f"expected a bool, got {type(data).__name__}")
            return data
        case UInt():
            return _uint_from_json(ssz_type, data)
        case Bitvector() | Bitlist():
            return _bits_from_json(ssz_type, data)
        case List() | Vector():
            if not isinstance(data, list):
                raise DeserializeError(f"expected an array, got {type(data).__name__}")
            items = [from_json(ssz_type.element_type, item) for item in data]
            return ssz_type.validate(items)
        case Container():
            obj = _mapping(data)
            values = {}
            for name, field_type in ssz_type.fields:
                if name not in obj:
                    raise DeserializeError(
                        f"missing field {name!r} for container {ssz_type.name}"
                    )
                values[name] = from_json(field_type, obj[name])
            return ssz_type.make(**values)
        case Union():
            obj = _mapping(data)
            if "selector" not in obj or "value" not in obj:
                raise DeserializeError("union objects need 'selector' and 'value'")
            selector = obj["selector"]
            if isinstance(selector, bool) or not isinstance(selector, int):
                raise DeserializeError("union selector must be an integer")
            if not 0 <= selector < len(ssz_type.options):
                raise DeserializeError(f"unknown union selector {selector}")
            option = ssz_type.options[selector]
            if option is None:
                if obj["value"] is not None:
                    raise DeserializeError("the None option of a union carries no value")
                return (selector, None)
            return (selector, from_json(option, obj["value"]))
    raise TypeError(f"unsupported SSZ type {type(ssz_type).__name__}")