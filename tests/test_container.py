import pytest

from simpleserialize.basic import boolean, uint8, uint16, uint32, uint64
from simpleserialize.bitlist import Bitlist
from simpleserialize.bitvector import Bitvector
from simpleserialize.container import Container
from simpleserialize.errors import (
    AdditionalInput,
    BoundExceededError,
    DeserializeError,
    ExpectedFurtherInput,
    SerializeError,
)
from simpleserialize.sequences import List, Vector

Foo = Container("Foo", [("a", uint32)])
Bar = Container("Bar", [("a", List(uint32, 128))])
BasicContainer = Container("BasicContainer", [("a", uint32), ("d", boolean)])
SomeContainer = Container(
    "SomeContainer", [("a", uint32), ("b", boolean), ("c", List(boolean, 32))]
)
AnotherContainer = Container(
    "AnotherContainer",
    [
        ("a", uint32),
        ("b", boolean),
        ("c", List(boolean, 32)),
        ("d", Vector(boolean, 4)),
        ("e", uint8),
    ],
)
YetAnotherContainer = Container(
    "YetAnotherContainer",
    [
        ("a", uint32),
        ("b", boolean),
        ("c", List(boolean, 32)),
        ("d", Vector(boolean, 4)),
        ("e", uint8),
        ("f", List(uint32, 32)),
    ],
)
VarTestStruct = Container(
    "VarTestStruct", [("a", uint16), ("b", List(uint16, 1024)), ("c", uint8)]
)
FixedTestStruct = Container(
    "FixedTestStruct", [("a", uint8), ("b", uint64), ("c", uint32)]
)
ComplexTestStruct = Container(
    "ComplexTestStruct",
    [
        ("a", uint16),
        ("b", List(uint16, 128)),
        ("c", uint8),
        ("d", List(uint8, 256)),
        ("e", VarTestStruct),
        ("f", Vector(FixedTestStruct, 4)),
        ("g", Vector(VarTestStruct, 2)),
    ],
)


def test_encode_container():
    assert Foo.serialize(Foo.make(a=5)) == bytes([5, 0, 0, 0])
    assert Bar.serialize(Bar.make()) == bytes([4, 0, 0, 0])
    assert BasicContainer.serialize(BasicContainer.make(a=5, d=True)) == bytes(
        [5, 0, 0, 0, 1]
    )


def test_encode_container2():
    value = SomeContainer.make(a=5, b=True, c=[True, False])
    encoding = SomeContainer.serialize(value)
    assert len(encoding) == 11
    assert encoding == bytes([5, 0, 0, 0, 1, 9, 0, 0, 0, 1, 0])


def test_encode_container3():
    value = AnotherContainer.make(a=5, b=True, c=[True, False], e=12)
    encoding = AnotherContainer.serialize(value)
    assert len(encoding) == 16
    assert encoding == bytes([5, 0, 0, 0, 1, 14, 0, 0, 0, 0, 0, 0, 0, 12, 1, 0])


def test_decode_container():
    data = bytes([5, 0, 0, 0, 1, 9, 0, 0, 0, 1, 0])
    result = SomeContainer.deserialize(data)
    assert result == SomeContainer.make(a=5, b=True, c=[True, False])
    assert result.c == [True, False]


def test_roundtrip_container():
    value = AnotherContainer.make(
        a=5,
        b=True,
        c=[True, False, False, False, True, True],
        d=[True, False, False, True],
        e=24,
    )
    assert AnotherContainer.deserialize(AnotherContainer.serialize(value)) == value

    value = YetAnotherContainer.make(
        a=5,
        b=True,
        c=[True, False, False, False, True, True],
        d=[True, False, False, True],
        e=24,
        f=[234, 567],
    )
    assert YetAnotherContainer.deserialize(YetAnotherContainer.serialize(value)) == value


def test_decode_container_with_extra_input():
    data = bytes([5, 0, 7, 0, 0, 0, 5, 255])
    with pytest.raises(DeserializeError):
        VarTestStruct.deserialize(data)


def test_container_with_generic_bound():
    generic = Container(
        "VarWithGenericTestStruct",
        [("a", uint16), ("b", List(uint16, 2)), ("c", uint8)],
    )
    value = generic.make(a=2, b=[1], c=16)
    assert generic.deserialize(generic.serialize(value)) == value
    with pytest.raises(BoundExceededError):
        generic.serialize(generic.make(a=2, b=[1, 2, 3], c=16))


def _complex_value():
    return ComplexTestStruct.make(
        a=51972,
        b=[48645],
        c=46,
        d=[105],
        e=VarTestStruct.make(a=1558, b=[39947], c=65),
        f=[
            FixedTestStruct.make(a=70, b=905948488145107787, c=2675781419),
            FixedTestStruct.make(a=3, b=12539792087931462647, c=4719259),
            FixedTestStruct.make(a=73, b=13544872847030609257, c=2819826618),
            FixedTestStruct.make(a=159, b=16328658841145598323, c=2375225558),
        ],
        g=[
            VarTestStruct.make(a=30336, b=[30909], c=240),
            VarTestStruct.make(a=64263, b=[38121], c=100),
        ],
    )


COMPLEX_ENCODING = bytes([
    4, 203, 71, 0, 0, 0, 46, 73, 0, 0, 0, 74, 0, 0, 0, 70, 75, 251, 176, 156, 89, 147, 146, 12,
    43, 47, 125, 159, 3, 247, 163, 104, 30, 119, 74, 6, 174, 155, 2, 72, 0, 73, 105, 229, 23,
    47, 23, 14, 249, 187, 186, 35, 19, 168, 159, 115, 97, 6, 253, 179, 12, 155, 226, 214, 16,
    147, 141, 83, 0, 0, 0, 5, 190, 105, 22, 6, 7, 0, 0, 0, 65, 11, 156, 8, 0, 0, 0, 17, 0, 0,
    0, 128, 118, 7, 0, 0, 0, 240, 189, 120, 7, 251, 7, 0, 0, 0, 100, 233, 148,
])


def test_complex_container_encoding():
    assert ComplexTestStruct.serialize(_complex_value()) == COMPLEX_ENCODING


def test_complex_container_decoding():
    assert ComplexTestStruct.deserialize(COMPLEX_ENCODING) == _complex_value()


def test_complex_container_root():
    root = ComplexTestStruct.hash_tree_root(_complex_value())
    assert root.hex() == "69b0ce69dfbc8abb8ae4fba564dcb813f5cc5b93c76d2b3d0689687c35821036"


def test_container_with_bit_types_roundtrip_after_mutation():
    foo = Container(
        "Foo",
        [
            ("a", uint32),
            ("b", Vector(uint32, 4)),
            ("c", boolean),
            ("d", Bitlist(27)),
            ("f", Bitvector(4)),
        ],
    )
    example = foo.make(
        a=16,
        b=[3, 2, 1, 10],
        c=True,
        d=Bitlist(27).from_bits([
            True, False, False, True, True, False, True, False, True, True, False, False,
            True, True, False, True, False, True, True, False, False, True, True, False,
            True, False, True,
        ]),
        f=Bitvector(4).from_bits([False, True, False, True]),
    )
    root_before = foo.hash_tree_root(example)
    example.b[2] = 44
    example.d = example.d[:-1]
    restored = foo.deserialize(foo.serialize(example))
    assert restored == example
    assert restored.b == [3, 2, 44, 10]
    assert len(restored.d) == 26
    assert foo.hash_tree_root(restored) == foo.hash_tree_root(example)
    assert foo.hash_tree_root(restored) != root_before


def test_single_field_root_is_field_root():
    value = Bar.make(a=[1, 2, 3])
    assert Bar.hash_tree_root(value) == List(uint32, 128).hash_tree_root([1, 2, 3])


def test_sizes():
    assert not BasicContainer.is_variable_size()
    assert BasicContainer.size_hint() == 5
    assert FixedTestStruct.size_hint() == 13
    assert VarTestStruct.is_variable_size()
    assert VarTestStruct.size_hint() == 0


def test_field_names_and_defaults():
    assert AnotherContainer.field_names() == ("a", "b", "c", "d", "e")
    value = AnotherContainer.default()
    assert value.c == []
    assert value.d == [False, False, False, False]
    assert value == AnotherContainer.make()


def test_serialize_accepts_mapping():
    assert BasicContainer.serialize({"a": 5, "d": True}) == bytes([5, 0, 0, 0, 1])


def test_serialize_missing_field():
    with pytest.raises(SerializeError):
        BasicContainer.serialize({"a": 5})


def test_make_rejects_unknown_field():
    with pytest.raises(TypeError):
        Foo.make(z=1)


def test_empty_container_is_illegal():
    with pytest.raises(ValueError):
        Container("Empty", [])


def test_duplicate_field_is_illegal():
    with pytest.raises(ValueError):
        Container("Dup", [("a", uint8), ("a", uint8)])


def test_short_input():
    with pytest.raises(ExpectedFurtherInput):
        BasicContainer.deserialize(bytes([5, 0, 0]))


def test_trailing_input():
    with pytest.raises(AdditionalInput):
        BasicContainer.deserialize(bytes([5, 0, 0, 0, 1, 0]))


def test_offset_beyond_input():
    with pytest.raises(ExpectedFurtherInput):
        SomeContainer.deserialize(bytes([5, 0, 0, 0, 1, 50, 0, 0, 0]))