"""
MinerParams extension: the node's block size and stack memory limits,
split into policy and consensus settings.

Mapping from getinfo:

    policy.blockmaxsize                     <- maxblocksize
    policy.maxstackmemoryusagepolicy        <- maxstackmemoryusagepolicy
    consensus.excessiveblocksize            <- maxminedblocksize
    consensus.maxstackmemoryusageconsensus  <- maxstackmemoryusageconsensus

Limits are published as exact integers. With legacy_float_widening set,
each value is rounded to the nearest IEEE-754 double first, matching
consumers that parse these fields as doubles (2^63 - 1 becomes 2^63).
"""

from __future__ import annotations

from core.schemas.extensions import (
    ExtensionKind,
    MinerConsensusParams,
    MinerParamsRecord,
    MinerPolicyParams,
)
from core.schemas.job import JobData, PolicyInfo

from .base import ExtensionBuilder, validate_section


def widen(value: int, legacy_float: bool = False) -> int:
    """Widen a policy limit, optionally rounding through a double."""
    if legacy_float:
        return int(float(value))
    return int(value)


class MinerParamsBuilder(ExtensionBuilder[MinerParamsRecord]):
    """Remaps the getinfo policy snapshot into policy/consensus groups."""

    kind = ExtensionKind.MINERPARAMS

    def is_applicable(self, job: JobData) -> bool:
        return job.policy_info is not None

    def from_job(self, job: JobData) -> MinerParamsRecord:
        info = validate_section(PolicyInfo, job.policy_info, "policyInfo")
        return self.build(info)

    def build(self, info: PolicyInfo) -> MinerParamsRecord:
        lossy = self.config.legacy_float_widening
        return MinerParamsRecord(
            policy=MinerPolicyParams(
                blockmaxsize=widen(info.maxblocksize, lossy),
                maxstackmemoryusagepolicy=widen(info.maxstackmemoryusagepolicy, lossy),
            ),
            consensus=MinerConsensusParams(
                excessiveblocksize=widen(info.maxminedblocksize, lossy),
                maxstackmemoryusageconsensus=widen(info.maxstackmemoryusageconsensus, lossy),
            ),
        )
