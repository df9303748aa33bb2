"""
Module 01 - Schemas
File: identity.py

Purpose: The miner ID document that extensions are attached to.

Only the fields needed to carry extensions are modelled; any other keys
in the document are preserved as extras. Signing the document is not
handled here.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .extensions import ExtensionsDocument
from .versioning import DOCUMENT_VERSION, assert_supported_document_version


class ValidityCheckTx(BaseModel):
    """Outpoint of the validity check transaction (vctx)."""

    model_config = ConfigDict(extra="forbid")

    txid: str = Field(..., min_length=64, max_length=64)
    vout: int = Field(..., ge=0)


class MinerIdDocument(BaseModel):
    """
    A miner ID coinbase document.

    The `extensions` field is either absent or non-empty. Serializing
    with to_dict() drops it when unset, so a document built from no
    qualifying inputs carries no extensions key at all.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    version: str = Field(default=DOCUMENT_VERSION)
    height: int = Field(..., ge=0)
    prev_miner_id: str = Field(..., alias="prevMinerId")
    prev_miner_id_sig: str = Field(..., alias="prevMinerIdSig")
    miner_id: str = Field(..., alias="minerId")
    vctx: Optional[ValidityCheckTx] = None
    extensions: Optional[ExtensionsDocument] = None

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        assert_supported_document_version(v)
        return v

    @field_validator("extensions")
    @classmethod
    def empty_extensions_are_absent(
        cls, v: Optional[ExtensionsDocument]
    ) -> Optional[ExtensionsDocument]:
        if v is not None and v.is_empty():
            return None
        return v

    def to_dict(self) -> dict[str, Any]:
        """Serialize with wire names, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
