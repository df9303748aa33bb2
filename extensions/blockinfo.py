"""
BlockInfo extension: transaction count and size of the block template.
"""

from __future__ import annotations

from core.schemas.errors import InvalidInputException
from core.schemas.extensions import BlockInfoRecord, ExtensionKind
from core.schemas.job import BlockTemplate, JobData

from .base import ExtensionBuilder, validate_section


class BlockInfoBuilder(ExtensionBuilder[BlockInfoRecord]):
    """Copies num_tx and sizeWithoutCoinbase from the block template."""

    kind = ExtensionKind.BLOCKINFO

    def is_applicable(self, job: JobData) -> bool:
        return job.block_template is not None

    def from_job(self, job: JobData) -> BlockInfoRecord:
        template = validate_section(BlockTemplate, job.block_template, "blockTemplate")
        return self.build(template)

    def build(self, template: BlockTemplate) -> BlockInfoRecord:
        if template.num_tx is None or template.size_without_coinbase is None:
            missing = "num_tx" if template.num_tx is None else "sizeWithoutCoinbase"
            raise InvalidInputException(
                f"blockTemplate is missing {missing}",
                field_path=f"blockTemplate.{missing}",
            )
        return BlockInfoRecord(
            tx_count=template.num_tx,
            size_without_coinbase=template.size_without_coinbase,
        )
