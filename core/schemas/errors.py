"""
Module 01 - Schemas
File: errors.py

Purpose: Error taxonomy for extension building.
Defines both Pydantic models for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input Errors
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_HEX = "INVALID_HEX"
    INVALID_DIGEST_LENGTH = "INVALID_DIGEST_LENGTH"

    # Schema Errors
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"

    # Assembly Errors
    EXTENSION_BUILD_FAILED = "EXTENSION_BUILD_FAILED"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MinerIdError(BaseModel):
    """
    Base error model for structured error reporting.

    Used by the assembler to report per-record failures without raising,
    so that one failing record never blocks the others.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "MinerIdException":
        """Convert this error model to a raised exception."""
        return MinerIdException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


class ExtensionBuildError(MinerIdError):
    """Error model for a single extension record that could not be built."""

    code: str = Field(default=ErrorCodes.EXTENSION_BUILD_FAILED)
    extension: str = Field(
        ...,
        description="Name of the extension record that failed (e.g. 'blockbind')",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MinerIdException(Exception):
    """
    Base exception for all extension building errors.

    Carries structured error information and can be converted
    to a MinerIdError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "MINERID_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MinerIdError:
        """Convert this exception to a MinerIdError model."""
        return MinerIdError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidInputException(MinerIdException):
    """
    Raised for malformed inputs: bad hex, odd-length byte strings,
    digests of the wrong length, or input sections failing validation.

    Inputs describe a fixed block template, so these are never retryable.
    """

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.INVALID_INPUT,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=code,
            details=full_details,
            retryable=False,
        )


class ExtensionBuildException(MinerIdException):
    """Exception wrapping a failure while building one extension record."""

    def __init__(
        self,
        message: str,
        extension: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["extension"] = extension
        super().__init__(
            message=message,
            code=ErrorCodes.EXTENSION_BUILD_FAILED,
            details=full_details,
            retryable=False,
        )
        self.extension = extension

    def to_error_model(self) -> ExtensionBuildError:
        return ExtensionBuildError(
            message=self.message,
            extension=self.extension,
            details=self.details,
        )
