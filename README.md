# simpleserialize

Simple Serialize (SSZ) for Python: describe a value's type, then encode it,
decode it and compute its 32-byte Merkle hash tree root. Pure Python, no
dependencies beyond the standard library.

## Installation

```
pip install simpleserialize
```

## Types

Every type is an immutable object (a subclass of
`simpleserialize.core.SszType`) with the methods `serialize(value)`,
`deserialize(data)`, `hash_tree_root(value)`, `default()`,
`is_variable_size()`, `size_hint()` and `is_composite()`.

| Type | Module | Python values |
| --- | --- | --- |
| `Boolean()` | `simpleserialize.basic` | `bool` |
| `UInt(bits)` for 8, 16, 32, 64, 128 or 256 bits | `simpleserialize.basic` | `int` |
| `Bitvector(length)` | `simpleserialize.bitvector` | tuple of `bool`, exactly `length` long |
| `Bitlist(limit)` | `simpleserialize.bitlist` | tuple of `bool`, at most `limit` long |
| `Vector(element_type, length)` | `simpleserialize.sequences` | list of exactly `length` items |
| `List(element_type, limit)` | `simpleserialize.sequences` | list of at most `limit` items |
| `Container(name, fields)` | `simpleserialize.container` | instances of a generated dataclass |
| `Union(options)` | `simpleserialize.union` | `(selector, value)` pairs |

`simpleserialize.basic` also provides ready-made instances: `boolean`,
`uint8`, `uint16`, `uint32`, `uint64`, `uint128` and `uint256`.

A few helpers on the types:

- `Bitvector.from_bits(bits)` takes the first `length` bits and pads with
  `False`; `Bitlist.from_bits(bits)` takes at most `limit` bits.
- `Bitvector.format(value)` and `Bitlist.format(value)` give readable
  renderings such as `Bitvector<8>[0011_0100]` and
  `Bitlist<len=5, cap=8>[1011_0]`.
- `List.validate(values)` and `Vector.validate(values)` return the values as
  a list, raising if the count is out of bounds.
- `Container.make(**kwargs)` builds a value, filling omitted fields with
  their defaults; `Container.field_names()` lists fields in encoding order.
  `serialize` and `hash_tree_root` also accept a mapping of field names.
- A `Union`'s first option may be `None`; the value paired with selector 0
  is then `None`. A union has between 1 and 127 options.

A `Bitvector` or `Vector` of length zero can be described, but using it
raises `InvalidBoundError`.

## Example

```python
from simpleserialize.basic import Boolean, UInt
from simpleserialize.sequences import List
from simpleserialize.container import Container
from simpleserialize.core import serialize, deserialize, hash_tree_root

SomeContainer = Container(
    "SomeContainer",
    [("a", UInt(32)), ("b", Boolean()), ("c", List(Boolean(), 32))],
)

value = SomeContainer.make(a=5, b=True, c=[True, False])
encoding = serialize(SomeContainer, value)
assert encoding == bytes([5, 0, 0, 0, 1, 9, 0, 0, 0, 1, 0])

assert deserialize(SomeContainer, encoding) == value
root = hash_tree_root(SomeContainer, value)  # 32 bytes
```

## Lower-level helpers

`simpleserialize.core` has `serialize_composite`,
`serialize_composite_from_components` and
`deserialize_homogeneous_composite` for building composite encodings, and
the enums `SszTypeClass` and `ElementsType` that classify types.

`simpleserialize.merkle` has `hash_nodes`, `zero_hash(depth)`,
`pack_bytes`, `merkleize(chunks, limit)`, `mix_in_length` and
`mix_in_selector`.

## Errors

Failures raise subclasses of `simpleserialize.errors.SszError` (itself a
`ValueError`): `SerializeError`, `DeserializeError` (with
`ExpectedFurtherInput`, `AdditionalInput` and `InvalidByte`),
`InstanceError` (with `ExactLengthError` and `BoundExceededError`),
`InvalidBoundError` and `MerkleizationError`.

## JSON

`simpleserialize.jsonform.to_json(ssz_type, value)` and
`from_json(ssz_type, data)` convert values to and from JSON-compatible data.
Bit types become `0x`-prefixed hex strings of their encoding, integers wider
than 64 bits become decimal strings, lists and vectors become arrays,
containers become objects and unions become
`{"selector": ..., "value": ...}`.

## What it does not do

The package is a library only: it has no command-line tool. It computes hash
tree roots but does not generate or verify Merkle proofs or generalized
indices, and it does not cache intermediate tree nodes between calls.