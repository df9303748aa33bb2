"""
Module 02 - Merkle Tree Implementation
Block Merkle root recombination from a leaf and its sibling path,
plus full-tree construction for producing coinbase branches.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- recombine(): Merkle root from a leaf hash and an ordered sibling list
- build_merkle_root(): root of a full block tree
- build_coinbase_branch(): sibling path of the first leaf (the coinbase)

Canonical Rules (Hard Contracts):
1. Parent hashing: parent = sha256d(left + right), internal byte order
2. Padding rule: duplicate the last node if a level has an odd count
3. Single leaf: root = leaf
4. Recombination always places the accumulated hash on the left. The
   coinbase is leaf 0, so it is the left child at every level.

Determinism Notes:
- Pure functions, no I/O
- Sibling order is taken as given: never sorted or deduplicated
"""
from __future__ import annotations

from typing import Sequence

from core.crypto.hashing import ensure_digest, hash_concat


def merkle_parent(left: bytes, right: bytes) -> bytes:
    """
    Compute the parent hash of two child nodes.

    Args:
        left: Left child hash (internal byte order)
        right: Right child hash (internal byte order)

    Returns:
        Parent hash (32 bytes)
    """
    return hash_concat(left, right)


def recombine(leaf_hash: bytes, siblings: Sequence[bytes]) -> bytes:
    """
    Recompute a Merkle root from a leaf hash and its sibling path.

    For each sibling in order the accumulated hash becomes
    sha256d(accumulated + sibling). Index 0 of ``siblings`` is the sibling
    at the deepest level.

    Args:
        leaf_hash: 32-byte leaf hash, internal byte order
        siblings: Ordered 32-byte sibling hashes, internal byte order

    Returns:
        32-byte Merkle root in internal byte order. With no siblings this
        is ``leaf_hash`` itself.

    Raises:
        InvalidInputException: If the leaf or any sibling is not 32 bytes

    Example:
        >>> leaf = bytes(32)
        >>> recombine(leaf, []) == leaf
        True
    """
    current = ensure_digest(leaf_hash, "leaf_hash")
    for i, sibling in enumerate(siblings):
        current = merkle_parent(current, ensure_digest(sibling, f"siblings[{i}]"))
    return current


def build_merkle_root(leaves: Sequence[bytes]) -> bytes:
    """
    Build the Merkle root of a block from its transaction hashes.

    Padding Rule: Duplicate last node at each level if odd.
    Example: [a, b, c] -> [a, b, c, c] -> [parent(a,b), parent(c,c)]

    Args:
        leaves: Transaction hashes in block order, internal byte order

    Returns:
        32-byte Merkle root

    Raises:
        ValueError: If leaves is empty (a block always has a coinbase)
    """
    if len(leaves) == 0:
        raise ValueError("Cannot build a Merkle root from an empty leaf list")

    current_level: list[bytes] = [
        ensure_digest(leaf, f"leaves[{i}]") for i, leaf in enumerate(leaves)
    ]

    while len(current_level) > 1:
        if len(current_level) % 2 == 1:
            current_level.append(current_level[-1])

        current_level = [
            merkle_parent(current_level[i], current_level[i + 1])
            for i in range(0, len(current_level), 2)
        ]

    return current_level[0]


def build_coinbase_branch(leaves: Sequence[bytes]) -> list[bytes]:
    """
    Collect the sibling path of the first leaf, bottom-up.

    This is the proof a node hands out with a block template: the coinbase
    placeholder occupies leaf 0 and the miner recombines its own coinbase
    hash with these siblings.

    Args:
        leaves: Transaction hashes in block order; leaves[0] is the coinbase

    Returns:
        Sibling hashes, deepest first. Empty for a single-leaf block.

    Raises:
        ValueError: If leaves is empty
    """
    if len(leaves) == 0:
        raise ValueError("Cannot build a coinbase branch from an empty leaf list")

    siblings: list[bytes] = []
    current_level: list[bytes] = [
        ensure_digest(leaf, f"leaves[{i}]") for i, leaf in enumerate(leaves)
    ]

    while len(current_level) > 1:
        if len(current_level) % 2 == 1:
            current_level.append(current_level[-1])

        # Leaf 0 stays at index 0 on every level, so its sibling is index 1
        siblings.append(current_level[1])

        current_level = [
            merkle_parent(current_level[i], current_level[i + 1])
            for i in range(0, len(current_level), 2)
        ]

    return siblings


__all__ = [
    "merkle_parent",
    "recombine",
    "build_merkle_root",
    "build_coinbase_branch",
]
