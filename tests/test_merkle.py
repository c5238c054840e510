import pytest

from simpleserialize.errors import MerkleizationError
from simpleserialize.merkle import (
    BYTES_PER_CHUNK,
    MAX_MERKLE_TREE_DEPTH,
    hash_nodes,
    merkleize,
    mix_in_length,
    mix_in_selector,
    pack_bytes,
    zero_hash,
)

A = bytes([1]) * 32
B = bytes([2]) * 32
C = bytes([3]) * 32


def test_zero_hash_base_is_zero_chunk():
    assert zero_hash(0) == bytes(BYTES_PER_CHUNK)


def test_zero_hash_known_values():
    assert zero_hash(1).hex() == (
        "f5a5fd42d16a20302798ef6ed309979b43003d2320d9f0e8ea9831a92759fb4b"
    )
    assert zero_hash(2).hex() == (
        "db56114e00fdd4c1f85c892bf35ac9a89289aaecb1ebd0a96cde606a748b5d71"
    )


def test_zero_hashes_chain():
    for depth in range(MAX_MERKLE_TREE_DEPTH - 1):
        assert zero_hash(depth + 1) == hash_nodes(zero_hash(depth), zero_hash(depth))


@pytest.mark.parametrize("depth", [-1, MAX_MERKLE_TREE_DEPTH])
def test_zero_hash_out_of_range(depth):
    with pytest.raises(ValueError):
        zero_hash(depth)


def test_pack_bytes_pads_to_chunk():
    assert pack_bytes(b"\x01") == b"\x01" + bytes(31)
    assert pack_bytes(b"") == b""
    assert pack_bytes(A + b"\x07") == A + b"\x07" + bytes(31)
    assert pack_bytes(A) == A


def test_merkleize_single_chunk_is_itself():
    assert merkleize(A) == A
    assert merkleize(A, 1) == A


def test_merkleize_two_and_three_chunks():
    assert merkleize(A + B) == hash_nodes(A, B)
    assert merkleize(A + B + C) == hash_nodes(hash_nodes(A, B), hash_nodes(C, zero_hash(0)))


def test_merkleize_with_limit_pads_with_zero_subtrees():
    assert merkleize(A, 4) == hash_nodes(hash_nodes(A, zero_hash(0)), zero_hash(1))


def test_merkleize_empty():
    assert merkleize(b"", 4) == zero_hash(2)
    assert merkleize(b"") == zero_hash(0)


def test_merkleize_packed_bits():
    root = merkleize(pack_bytes(b"\x1f"), 1)
    assert root.hex() == "1f" + "00" * 31


def test_merkleize_rejects_excess_chunks():
    with pytest.raises(MerkleizationError):
        merkleize(A + B + C, 2)


def test_merkleize_rejects_partial_chunk():
    with pytest.raises(MerkleizationError):
        merkleize(b"\x00" * 33)


def test_mix_in_length_zero_is_hash_with_zero_chunk():
    assert mix_in_length(A, 0) == hash_nodes(A, zero_hash(0))


def test_mix_in_selector_matches_length_mixing():
    assert mix_in_selector(A, 5) == mix_in_length(A, 5)
    assert mix_in_length(A, 1) != mix_in_length(A, 2)
    assert len(mix_in_length(A, 1)) == BYTES_PER_CHUNK