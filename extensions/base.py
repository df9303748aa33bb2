"""
Base extension builder.

Every extension record is produced by a builder with two responsibilities:
deciding whether its inputs are present, and turning those inputs into a
record. The assembler only talks to builders through this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.config import ExtensionsConfig
from core.schemas.errors import ErrorCodes, InvalidInputException
from core.schemas.extensions import ExtensionKind
from core.schemas.job import JobData

RecordT = TypeVar("RecordT", bound=BaseModel)
ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_section(model: type[ModelT], raw: Any, section: str) -> ModelT:
    """
    Validate one raw input section into its model.

    Raises:
        InvalidInputException: With the path of the first failing field
    """
    if isinstance(raw, model):
        return raw
    try:
        return model.model_validate(raw)
    except PydanticValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        loc = ".".join(str(p) for p in first.get("loc", ()))
        field_path = f"{section}.{loc}" if loc else section
        raise InvalidInputException(
            f"Invalid {section}: {first.get('msg', str(e))}",
            code=ErrorCodes.SCHEMA_VALIDATION_ERROR,
            field_path=field_path,
            details={"error_count": e.error_count()},
        ) from e


class ExtensionBuilder(ABC, Generic[RecordT]):
    """
    Abstract base class for extension record builders.

    Subclasses set `kind` and implement is_applicable() and from_job().
    """

    kind: ExtensionKind

    def __init__(self, config: Optional[ExtensionsConfig] = None):
        self.config = config or ExtensionsConfig()

    @abstractmethod
    def is_applicable(self, job: JobData) -> bool:
        """True when every input this record needs is present."""

    @abstractmethod
    def from_job(self, job: JobData) -> RecordT:
        """
        Build the record from the job inputs.

        Only called when is_applicable() returned True.

        Raises:
            InvalidInputException: If a present input is malformed
        """

    def get_builder_info(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "builder": type(self).__name__,
        }
