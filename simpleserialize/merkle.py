"""Merkle tree helpers: chunk packing, merkleization and mixing in."""

from __future__ import annotations

import hashlib

from .errors import MerkleizationError

BYTES_PER_CHUNK = 32
MAX_MERKLE_TREE_DEPTH = 64


def hash_nodes(left: bytes, right: bytes) -> bytes:
    """Return the SHA-256 digest of two concatenated nodes."""
    return hashlib.sha256(bytes(left) + bytes(right)).digest()


def _compute_zero_hashes() -> tuple[bytes, ...]:
    hashes = [bytes(BYTES_PER_CHUNK)]
    for _ in range(MAX_MERKLE_TREE_DEPTH - 1):
        hashes.append(hash_nodes(hashes[-1], hashes[-1]))
    return tuple(hashes)


_ZERO_HASHES = _compute_zero_hashes()


def zero_hash(depth: int) -> bytes:
    """Return the root of a tree of zero chunks of the given depth."""
    if not 0 <= depth < MAX_MERKLE_TREE_DEPTH:
        raise ValueError(
            f"depth {depth} outside of 0..{MAX_MERKLE_TREE_DEPTH - 1}"
        )
    return _ZERO_HASHES[depth]


def pack_bytes(data: bytes) -> bytes:
    """Right-pad ``data`` with zero bytes to a whole number of chunks."""
    data = bytes(data)
    remainder = len(data) % BYTES_PER_CHUNK
    if remainder:
        data += bytes(BYTES_PER_CHUNK - remainder)
    return data


def merkleize(chunks: bytes, limit: int | None = None) -> bytes:
    """Return the Merkle root of ``chunks``, padded to ``limit`` leaves if given."""
    chunks = bytes(chunks)
    if len(chunks) % BYTES_PER_CHUNK:
        raise MerkleizationError(
            f"input of {len(chunks)} bytes is not a whole number of chunks"
        )
    chunk_count = len(chunks) // BYTES_PER_CHUNK
    if limit is None:
        leaf_count = chunk_count
    else:
        if chunk_count > limit:
            raise MerkleizationError(
                f"{chunk_count} chunks exceed the limit of {limit} chunks"
            )
        leaf_count = limit
    depth = (leaf_count - 1).bit_length() if leaf_count > 0 else 0
    if depth >= MAX_MERKLE_TREE_DEPTH:
        raise MerkleizationError(f"tree depth {depth} is too large")
    if chunk_count == 0:
        return zero_hash(depth)

    layer = [
        chunks[start:start + BYTES_PER_CHUNK]
        for start in range(0, len(chunks), BYTES_PER_CHUNK)
    ]
    for level in range(depth):
        if len(layer) % 2:
            layer.append(zero_hash(level))
        pairs = iter(layer)
        layer = [hash_nodes(left, right) for left, right in zip(pairs, pairs)]
    return layer[0]


def mix_in_length(root: bytes, length: int) -> bytes:
    """Mix a collection length into its data root."""
    return hash_nodes(root, length.to_bytes(BYTES_PER_CHUNK, "little"))


def mix_in_selector(root: bytes, selector: int) -> bytes:
    """Mix a union selector into the root of its value."""
    return hash_nodes(root, selector.to_bytes(BYTES_PER_CHUNK, "little"))