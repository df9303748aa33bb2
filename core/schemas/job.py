"""
Module 01 - Schemas
File: job.py

Purpose: Input models for extension building.

JobData bundles the optional inputs of one signing event. Each section is
kept as received and validated only by the builder that consumes it,
so a malformed section can suppress its own record but never another one.

Field names accept both the descriptive names (blockTemplate, policyInfo,
feeSchedule) and the node RPC names (miningCandidate, getInfo, feeSpec).
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ErrorCodes, InvalidInputException


class BlockTemplate(BaseModel):
    """
    Block template as returned by getminingcandidate.

    Every field is optional here; builders check for the fields they need.
    Digests are left as received (display-order hex) and validated by the
    hashing layer when used.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    prev_block_hash: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("prevhash", "prevBlockHash", "prev_block_hash"),
        description="Previous block hash (display-order hex)",
    )
    merkle_proof: Optional[list[str]] = Field(
        default=None,
        validation_alias=AliasChoices("merkleProof", "merkle_proof"),
        description="Coinbase Merkle branch, deepest sibling first (display-order hex)",
    )
    num_tx: Optional[int] = Field(
        default=None,
        ge=0,
        description="Number of transactions in the template, coinbase included",
    )
    size_without_coinbase: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("sizeWithoutCoinbase", "size_without_coinbase"),
    )

    # Auxiliary fields, not consumed by any builder
    id: Optional[str] = None
    height: Optional[int] = None
    version: Optional[int] = None
    time: Optional[int] = None
    coinbase_value: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("coinbaseValue", "coinbase_value"),
    )
    n_bits: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("nBits", "n_bits"),
    )

    @property
    def has_blockbind_inputs(self) -> bool:
        """True when both the previous block hash and the proof are present."""
        return self.prev_block_hash is not None and self.merkle_proof is not None


class PolicyInfo(BaseModel):
    """
    Node policy snapshot (the getinfo RPC result).

    Only the four block/stack limits are consumed; all other getinfo fields
    are kept as extras. Values are Python ints, so limits at 2^63 - 1 are
    held exactly.
    """

    model_config = ConfigDict(extra="allow")

    maxblocksize: int = Field(..., ge=0)
    maxminedblocksize: int = Field(..., ge=0)
    maxstackmemoryusagepolicy: int = Field(..., ge=0)
    maxstackmemoryusageconsensus: int = Field(..., ge=0)


class JobData(BaseModel):
    """
    The optional inputs for one extensions assembly.

    Sections are kept as received, without type checks, so that a section
    of the wrong shape fails only the builder that consumes it.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    block_template: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("blockTemplate", "miningCandidate", "block_template"),
    )
    policy_info: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("policyInfo", "getInfo", "policy_info"),
    )
    fee_schedule: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("feeSchedule", "feeSpec", "fee_schedule"),
    )
    coinbase: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("coinbase", "coinbase2"),
        description="Coinbase transaction hex, if the job file carries it (checked by blockbind)",
    )

    @field_validator("coinbase")
    @classmethod
    def empty_coinbase_is_absent(cls, v: Any) -> Any:
        return None if isinstance(v, str) and v == "" else v

    @classmethod
    def from_any(cls, data: "JobData | dict[str, Any] | None") -> "JobData":
        """Accept a JobData, a plain mapping, or None."""
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidInputException(
                f"Invalid job data: {e.errors()[0]['msg'] if e.errors() else e}",
                code=ErrorCodes.SCHEMA_VALIDATION_ERROR,
                field_path="jobData",
            ) from e

    def is_empty(self) -> bool:
        return (
            self.block_template is None
            and self.policy_info is None
            and self.fee_schedule is None
            and self.coinbase is None
        )
