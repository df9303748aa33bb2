"""
Module 01 - Schemas
File: versioning.py

Purpose: Centralize miner ID document version constants.
This file must remain tiny and have no imports from other schema files
to avoid circular dependencies.
"""

from typing import Literal

# Current miner ID document version
DOCUMENT_VERSION: str = "0.1"

# Type alias for document version
DocumentVersion = Literal["0.1", "0.2"]

# Versions whose documents may carry an extensions field
SUPPORTED_DOCUMENT_VERSIONS: frozenset[str] = frozenset({"0.1", "0.2"})


class UnsupportedDocumentVersionError(ValueError):
    """Raised when an unsupported document version is encountered."""

    def __init__(self, version: str, supported: frozenset[str] | None = None) -> None:
        self.version = version
        self.supported = supported or SUPPORTED_DOCUMENT_VERSIONS
        super().__init__(
            f"Unsupported document version: '{version}'. "
            f"Supported versions: {sorted(self.supported)}"
        )


def assert_supported_document_version(version: str) -> None:
    """
    Validate that the given document version is supported.

    Raises:
        UnsupportedDocumentVersionError: If the version is not supported.
    """
    if version not in SUPPORTED_DOCUMENT_VERSIONS:
        raise UnsupportedDocumentVersionError(version)


def is_compatible_document_version(version: str) -> bool:
    """Check if a document version is compatible without raising."""
    return version in SUPPORTED_DOCUMENT_VERSIONS
