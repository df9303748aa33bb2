"""
Module 01 - Schemas
File: extensions.py

Purpose: Extension record models and the ExtensionsDocument that groups
them. Records serialize with their wire names (camelCase) via aliases.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


# 32-byte digest as 64 hex characters (display order, no prefix)
HEX_DIGEST_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")


def validate_hex_digest(value: str, field_name: str) -> str:
    """Validate that a value is a 32-byte hex digest without prefix."""
    if not HEX_DIGEST_PATTERN.match(value):
        shown = f"{value[:20]}..." if len(value) > 20 else value
        raise ValueError(
            f"{field_name} must be a 32-byte hex digest (64 hex chars), got: {shown}"
        )
    return value


class ExtensionKind(str, Enum):
    """The fixed set of extension records, by wire name."""

    FEESPEC = "feeSpec"
    MINERPARAMS = "minerparams"
    BLOCKINFO = "blockinfo"
    BLOCKBIND = "blockbind"


# =============================================================================
# BlockBind
# =============================================================================

class BlockBindRecord(BaseModel):
    """
    Binds a miner ID document to one block template.

    modifiedMerkleRoot is the Merkle root recomputed from the miner's own
    coinbase and the template's proof; prevBlockHash is copied verbatim.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    modified_merkle_root: str = Field(..., alias="modifiedMerkleRoot")
    prev_block_hash: str = Field(..., alias="prevBlockHash")

    @field_validator("modified_merkle_root")
    @classmethod
    def validate_modified_merkle_root(cls, v: str) -> str:
        return validate_hex_digest(v, "modifiedMerkleRoot")

    @field_validator("prev_block_hash")
    @classmethod
    def validate_prev_block_hash(cls, v: str) -> str:
        return validate_hex_digest(v, "prevBlockHash")


# =============================================================================
# BlockInfo
# =============================================================================

class BlockInfoRecord(BaseModel):
    """Size summary of the block template."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    tx_count: int = Field(..., ge=0, alias="txCount")
    size_without_coinbase: int = Field(..., ge=0, alias="sizeWithoutCoinbase")


# =============================================================================
# MinerParams
# =============================================================================

class MinerPolicyParams(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    blockmaxsize: int
    maxstackmemoryusagepolicy: int


class MinerConsensusParams(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    excessiveblocksize: int
    maxstackmemoryusageconsensus: int


class MinerParamsRecord(BaseModel):
    """Policy and consensus limits the miner's node is configured with."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    policy: MinerPolicyParams
    consensus: MinerConsensusParams


# =============================================================================
# FeeSpec
# =============================================================================

class FeeSpecRecord(RootModel[Union[dict[str, Any], list[Any]]]):
    """
    The miner's fee schedule, echoed verbatim.

    Either an object (usually {"fees": [...]}) or a bare array of fee tiers.
    Only the container is checked; tier contents are not interpreted, so
    fractional rates, missing keys and float values survive unchanged.
    """

    model_config = ConfigDict(frozen=True)


# =============================================================================
# ExtensionsDocument
# =============================================================================

class ExtensionsDocument(BaseModel):
    """
    Mapping of extension name to record.

    Only records whose inputs were supplied are set. An empty document is
    never attached to a miner ID document.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    fee_spec: Optional[FeeSpecRecord] = Field(default=None, alias="feeSpec")
    minerparams: Optional[MinerParamsRecord] = None
    blockinfo: Optional[BlockInfoRecord] = None
    blockbind: Optional[BlockBindRecord] = None

    def names(self) -> list[str]:
        """Wire names of the records present, in document order."""
        return list(self.to_dict().keys())

    def is_empty(self) -> bool:
        return not self.names()

    def to_dict(self) -> dict[str, Any]:
        """Serialize with wire names, omitting absent records."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_records(cls, records: Mapping[ExtensionKind, BaseModel]) -> "ExtensionsDocument":
        """Build a document from records keyed by kind."""
        return cls.model_validate({kind.value: record for kind, record in records.items()})

    def get(self, kind: ExtensionKind) -> Optional[BaseModel]:
        """Return the record of the given kind, or None if absent."""
        if kind is ExtensionKind.FEESPEC:
            return self.fee_spec
        return getattr(self, kind.value)
