"""
Extension Assembler

Decides which extension records a miner ID document carries and builds them.

Each record kind has one builder. A record is built only when its inputs are
present (missing inputs are a normal outcome, not an error), and records are
built independently: a builder that fails is logged and reported, and the
remaining records are still produced. The merged ExtensionsDocument is
attached to a document only when it holds at least one record.

Usage:
    from extensions import ExtensionAssembler

    assembler = ExtensionAssembler()
    doc = assembler.add_extensions(doc, coinbase_hex, {"miningCandidate": candidate})
"""

from __future__ import annotations

import concurrent.futures
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Union

from pydantic import BaseModel

from core.config import ExtensionsConfig, RuntimeConfig, get_default_config
from core.schemas.errors import ExtensionBuildError, ExtensionBuildException, MinerIdException
from core.schemas.extensions import ExtensionKind, ExtensionsDocument
from core.schemas.identity import MinerIdDocument
from core.schemas.job import JobData

from .base import ExtensionBuilder
from .blockbind import BlockBindBuilder
from .blockinfo import BlockInfoBuilder
from .feespec import FeeSpecBuilder
from .minerparams import MinerParamsBuilder


logger = logging.getLogger(__name__)

JobInput = Union[JobData, dict[str, Any], None]


@dataclass
class AssemblyResult:
    """Outcome of one assembly: the extensions plus any per-record failures."""
    extensions: ExtensionsDocument = field(default_factory=ExtensionsDocument)
    errors: list[ExtensionBuildError] = field(default_factory=list)
    skipped: list[ExtensionKind] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "ok": self.ok,
            "extensions": self.extensions.to_dict(),
            "skipped": [k.value for k in self.skipped],
        }
        if self.errors:
            d["errors"] = [e.model_dump(mode="json") for e in self.errors]
        return d


class ExtensionAssembler:
    """
    Builds the ExtensionsDocument for a signing event.

    The set of record kinds is fixed; configuration can only narrow it.
    """

    def __init__(self, config: Optional[Union[RuntimeConfig, ExtensionsConfig]] = None):
        if config is None:
            config = get_default_config()
        if isinstance(config, RuntimeConfig):
            config = config.extensions
        self.config: ExtensionsConfig = config

        self.builders: tuple[ExtensionBuilder, ...] = (
            FeeSpecBuilder(config),
            MinerParamsBuilder(config),
            BlockInfoBuilder(config),
            BlockBindBuilder(config),
        )

    @staticmethod
    def _resolve_job(coinbase_hex: Optional[str], job_data: JobInput) -> JobData:
        job = JobData.from_any(job_data)
        if coinbase_hex:
            job = job.model_copy(update={"coinbase": coinbase_hex})
        return job

    def assemble_with_report(
        self,
        coinbase_hex: Optional[str] = None,
        job_data: JobInput = None,
    ) -> AssemblyResult:
        """
        Build every applicable record, isolating failures per record.

        Args:
            coinbase_hex: Assembled coinbase transaction hex. Empty or None
                means absent; falls back to the coinbase carried in job_data.
            job_data: JobData or a mapping with blockTemplate/miningCandidate,
                policyInfo/getInfo and feeSchedule/feeSpec sections

        Returns:
            AssemblyResult with the records built, the kinds skipped for
            missing inputs and the errors of records that failed
        """
        job = self._resolve_job(coinbase_hex, job_data)
        result = AssemblyResult()
        records: dict[ExtensionKind, BaseModel] = {}

        for builder in self.builders:
            kind = builder.kind
            if not self.config.is_enabled(kind):
                logger.debug(f"Extension {kind.value} disabled by configuration")
                continue
            if not builder.is_applicable(job):
                logger.debug(f"Extension {kind.value} skipped: inputs not present")
                result.skipped.append(kind)
                continue

            try:
                records[kind] = builder.from_job(job)
            except MinerIdException as e:
                logger.warning(f"Extension {kind.value} not built: {e.message}")
                result.errors.append(
                    ExtensionBuildError(
                        extension=kind.value,
                        message=e.message,
                        details={"code": e.code, **e.details},
                    )
                )
            except Exception as e:
                logger.exception(f"Extension {kind.value} failed unexpectedly")
                result.errors.append(
                    ExtensionBuildException(str(e), extension=kind.value).to_error_model()
                )

        result.extensions = ExtensionsDocument.from_records(records)
        return result

    def assemble(
        self,
        coinbase_hex: Optional[str] = None,
        job_data: JobInput = None,
    ) -> ExtensionsDocument:
        """Build the ExtensionsDocument; failed records are left out."""
        return self.assemble_with_report(coinbase_hex, job_data).extensions

    def add_extensions(
        self,
        document: dict[str, Any],
        coinbase_hex: Optional[str] = None,
        job_data: JobInput = None,
    ) -> dict[str, Any]:
        """
        Merge extensions into a plain-dict miner ID document, in place.

        The document is left untouched when no record applies.

        Returns:
            The same document object
        """
        extensions = self.assemble(coinbase_hex, job_data)
        if not extensions.is_empty():
            document["extensions"] = extensions.to_dict()
        return document

    def attach_extensions(
        self,
        document: MinerIdDocument,
        coinbase_hex: Optional[str] = None,
        job_data: JobInput = None,
    ) -> MinerIdDocument:
        """Return a copy of the document carrying the applicable extensions."""
        extensions = self.assemble(coinbase_hex, job_data)
        return document.model_copy(
            update={"extensions": None if extensions.is_empty() else extensions}
        )

    def assemble_batch(
        self,
        jobs: Sequence[JobInput],
        max_workers: Optional[int] = None,
    ) -> list[AssemblyResult]:
        """
        Assemble many independent jobs on a thread pool.

        Each job carries its own coinbase (JobData.coinbase). Results are
        returned in input order.
        """
        if not jobs:
            return []
        workers = max_workers or self.config.batch_workers
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lambda job: self.assemble_with_report(None, job), jobs))


def assemble(
    coinbase_hex: Optional[str] = None,
    job_data: JobInput = None,
    config: Optional[Union[RuntimeConfig, ExtensionsConfig]] = None,
) -> ExtensionsDocument:
    """Build the ExtensionsDocument with a one-off assembler."""
    return ExtensionAssembler(config).assemble(coinbase_hex, job_data)


def add_extensions(
    document: dict[str, Any],
    coinbase_hex: Optional[str] = None,
    job_data: JobInput = None,
    config: Optional[Union[RuntimeConfig, ExtensionsConfig]] = None,
) -> dict[str, Any]:
    """Merge extensions into a plain-dict miner ID document, in place."""
    return ExtensionAssembler(config).add_extensions(document, coinbase_hex, job_data)
