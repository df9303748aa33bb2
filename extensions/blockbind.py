"""
BlockBind extension.

Binds a miner ID document to one block template by recomputing the
template's Merkle root with the miner's own coinbase transaction as the
first leaf:

    leaf = sha256d(coinbase transaction bytes)
    root = recombine(leaf, merkle proof)

The root (display-order hex) is published as modifiedMerkleRoot together
with the template's previous block hash.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

from core.crypto.hashing import (
    decode_hex,
    digest_from_hex,
    digest_to_hex,
    sha256d,
)
from core.merkle.merkle_proofs import MerkleRecombiner
from core.schemas.errors import ErrorCodes, InvalidInputException
from core.schemas.extensions import BlockBindRecord, ExtensionKind
from core.schemas.job import BlockTemplate, JobData

from .base import ExtensionBuilder, validate_section


logger = logging.getLogger(__name__)

_PREV_HASH_KEYS = ("prevhash", "prevBlockHash", "prev_block_hash")
_PROOF_KEYS = ("merkleProof", "merkle_proof")


def hash_coinbase(coinbase_hex: str) -> bytes:
    """
    Hash a coinbase transaction.

    Args:
        coinbase_hex: The assembled coinbase transaction as hex

    Returns:
        sha256d of the transaction bytes, internal byte order

    Raises:
        InvalidInputException: If the hex is empty, odd-length or invalid
    """
    raw = decode_hex(coinbase_hex, "coinbase")
    if not raw:
        raise InvalidInputException(
            "coinbase must not be empty",
            code=ErrorCodes.INVALID_HEX,
            field_path="coinbase",
        )
    return sha256d(raw)


def coinbase_txid(coinbase_hex: str) -> str:
    """The coinbase transaction id as display-order hex."""
    return digest_to_hex(hash_coinbase(coinbase_hex), "coinbase_hash")


class BlockBindBuilder(ExtensionBuilder[BlockBindRecord]):
    """
    Builds the blockbind record.

    Needs both a coinbase transaction and a block template carrying a
    previous block hash and a Merkle proof.
    """

    kind = ExtensionKind.BLOCKBIND

    def is_applicable(self, job: JobData) -> bool:
        template = job.block_template
        if job.coinbase is None:
            return False
        if isinstance(template, BlockTemplate):
            return template.has_blockbind_inputs
        if not isinstance(template, dict):
            return False
        has_prev = any(template.get(k) is not None for k in _PREV_HASH_KEYS)
        has_proof = any(template.get(k) is not None for k in _PROOF_KEYS)
        return has_prev and has_proof

    def from_job(self, job: JobData) -> BlockBindRecord:
        template = validate_section(BlockTemplate, job.block_template, "blockTemplate")
        return self.build(
            job.coinbase,
            template.prev_block_hash,
            template.merkle_proof,
        )

    def build(
        self,
        coinbase_hex: str,
        prev_block_hash: str,
        merkle_proof: Sequence[str],
    ) -> BlockBindRecord:
        """
        Build a blockbind record from coinbase transaction bytes.

        Args:
            coinbase_hex: Assembled coinbase transaction as hex
            prev_block_hash: Previous block hash (display-order hex), copied through
            merkle_proof: Coinbase Merkle branch (display-order hex), deepest first

        Returns:
            A new BlockBindRecord

        Raises:
            InvalidInputException: On malformed hex or digests
        """
        return self.build_from_coinbase_hash(
            hash_coinbase(coinbase_hex), prev_block_hash, merkle_proof
        )

    def build_from_coinbase_hash(
        self,
        coinbase_hash: Union[str, bytes],
        prev_block_hash: str,
        merkle_proof: Sequence[str],
    ) -> BlockBindRecord:
        """
        Build a blockbind record from an already computed coinbase hash.

        Args:
            coinbase_hash: Coinbase txid as display-order hex, or its raw
                internal-order digest bytes
            prev_block_hash: Previous block hash (display-order hex), copied through
            merkle_proof: Coinbase Merkle branch (display-order hex), deepest first

        Raises:
            InvalidInputException: On malformed hex or digests
        """
        if isinstance(coinbase_hash, (bytes, bytearray)):
            coinbase_hash = digest_to_hex(coinbase_hash, "coinbase_hash")

        # Validated for shape only; published exactly as received
        digest_from_hex(prev_block_hash, "prevBlockHash")

        root = MerkleRecombiner.recombine_hex(coinbase_hash, merkle_proof)

        logger.debug(f"blockbind root {root} over {len(merkle_proof)} proof hashes (prev {prev_block_hash})")

        return BlockBindRecord(
            modified_merkle_root=root,
            prev_block_hash=prev_block_hash,
        )
