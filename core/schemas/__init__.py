"""
Module 01 - Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
This is the main entry point for other modules to import schema definitions.
"""

# Version constants
from .versioning import (
    DOCUMENT_VERSION,
    SUPPORTED_DOCUMENT_VERSIONS,
    DocumentVersion,
    UnsupportedDocumentVersionError,
    assert_supported_document_version,
    is_compatible_document_version,
)

# Error models and exceptions
from .errors import (
    ErrorCodes,
    ExtensionBuildError,
    ExtensionBuildException,
    InvalidInputException,
    MinerIdError,
    MinerIdException,
)

# Input schemas
from .job import (
    BlockTemplate,
    JobData,
    PolicyInfo,
)

# Extension records
from .extensions import (
    BlockBindRecord,
    BlockInfoRecord,
    ExtensionKind,
    ExtensionsDocument,
    FeeSpecRecord,
    MinerConsensusParams,
    MinerParamsRecord,
    MinerPolicyParams,
)

# Miner ID document
from .identity import (
    MinerIdDocument,
    ValidityCheckTx,
)


__all__ = [
    # Versioning
    "DOCUMENT_VERSION",
    "SUPPORTED_DOCUMENT_VERSIONS",
    "DocumentVersion",
    "UnsupportedDocumentVersionError",
    "assert_supported_document_version",
    "is_compatible_document_version",
    # Errors
    "ErrorCodes",
    "MinerIdError",
    "ExtensionBuildError",
    "MinerIdException",
    "InvalidInputException",
    "ExtensionBuildException",
    # Inputs
    "JobData",
    "BlockTemplate",
    "PolicyInfo",
    # Extensions
    "ExtensionKind",
    "ExtensionsDocument",
    "BlockBindRecord",
    "BlockInfoRecord",
    "MinerParamsRecord",
    "MinerPolicyParams",
    "MinerConsensusParams",
    "FeeSpecRecord",
    # Identity document
    "MinerIdDocument",
    "ValidityCheckTx",
]
