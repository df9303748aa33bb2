"""
FeeSpec extension: echoes the miner's fee schedule.
"""

from __future__ import annotations

from typing import Any

from core.schemas.extensions import ExtensionKind, FeeSpecRecord
from core.schemas.job import JobData

from .base import ExtensionBuilder, validate_section


class FeeSpecBuilder(ExtensionBuilder[FeeSpecRecord]):
    """
    Passes the fee schedule through unchanged.

    The schedule is published in the shape it was given, either
    {"fees": [...]} or the bare list of fee tiers.
    """

    kind = ExtensionKind.FEESPEC

    def is_applicable(self, job: JobData) -> bool:
        return job.fee_schedule is not None

    def from_job(self, job: JobData) -> FeeSpecRecord:
        return self.build(job.fee_schedule)

    def build(self, schedule: Any) -> FeeSpecRecord:
        return validate_section(FeeSpecRecord, schedule, "feeSchedule")
