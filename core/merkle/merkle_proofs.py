"""
Module 02 - Merkle Recombination Convenience Wrappers
Hex-facing wrappers around the core Merkle functions.

Owner: Protocol/Crypto Engineer
Module ID: M02

Block templates carry digests as display-order hex. MerkleRecombiner
converts them to internal-order bytes on the way in and back on the
way out, so callers never handle byte order themselves.
"""
from __future__ import annotations

from typing import Sequence

from core.crypto.hashing import digest_from_hex, digest_to_hex
from core.merkle.merkle_tree import build_coinbase_branch, recombine


class MerkleRecombiner:
    """
    Recompute a block Merkle root from a leaf and its proof.

    Example:
        >>> MerkleRecombiner.recombine_hex("ab" * 32, [])
        'abababababababababababababababababababababababababababababababab'
    """

    @staticmethod
    def recombine(leaf_hash: bytes, siblings: Sequence[bytes]) -> bytes:
        """Recombine internal-order digests. See merkle_tree.recombine()."""
        return recombine(leaf_hash, siblings)

    @staticmethod
    def recombine_hex(leaf_hex: str, siblings_hex: Sequence[str]) -> str:
        """
        Recombine display-order hex digests.

        Args:
            leaf_hex: Leaf hash (the coinbase txid) as display-order hex
            siblings_hex: Merkle proof as display-order hex, deepest first

        Returns:
            Merkle root as display-order hex

        Raises:
            InvalidInputException: On malformed hex or wrong digest length
        """
        leaf = digest_from_hex(leaf_hex, "coinbase_hash")
        siblings = [
            digest_from_hex(s, f"merkleProof[{i}]")
            for i, s in enumerate(siblings_hex)
        ]
        return digest_to_hex(recombine(leaf, siblings), "merkle_root")

    @staticmethod
    def coinbase_branch_hex(txids_hex: Sequence[str]) -> list[str]:
        """
        Build the display-order coinbase proof for a list of txids.

        txids_hex[0] is the coinbase slot; its value does not affect
        the branch.
        """
        leaves = [digest_from_hex(t, f"txids[{i}]") for i, t in enumerate(txids_hex)]
        return [digest_to_hex(s) for s in build_coinbase_branch(leaves)]
