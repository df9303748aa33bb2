"""
Module 02 - Merkle Recombination
Block Merkle root recombination and coinbase branch construction.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- recombine: Root from a leaf hash and its sibling path
- build_merkle_root: Root of a full block tree
- build_coinbase_branch: Sibling path of the coinbase (leaf 0)
- MerkleRecombiner: Display-order hex interface over the above

Canonical Rules:
1. Parent hashing: sha256d(left + right) in internal byte order
2. Padding: Duplicate last node if odd number at any level
3. Single leaf: root = leaf

Usage:
    from core.merkle import MerkleRecombiner

    root_hex = MerkleRecombiner.recombine_hex(coinbase_txid, merkle_proof)
"""
from .merkle_tree import (
    merkle_parent,
    recombine,
    build_merkle_root,
    build_coinbase_branch,
)
from .merkle_proofs import MerkleRecombiner

__all__ = [
    "merkle_parent",
    "recombine",
    "build_merkle_root",
    "build_coinbase_branch",
    "MerkleRecombiner",
]
