"""
Extensions Module

Builders for the miner ID document extension records and the assembler
that decides which of them a document carries.
"""

from .assembler import (
    AssemblyResult,
    ExtensionAssembler,
    add_extensions,
    assemble,
)
from .base import ExtensionBuilder, validate_section
from .blockbind import BlockBindBuilder, coinbase_txid, hash_coinbase
from .blockinfo import BlockInfoBuilder
from .coinbase import join_coinbase
from .feespec import FeeSpecBuilder
from .minerparams import MinerParamsBuilder, widen

__all__ = [
    # Assembler
    "ExtensionAssembler",
    "AssemblyResult",
    "assemble",
    "add_extensions",
    # Builders
    "ExtensionBuilder",
    "validate_section",
    "BlockBindBuilder",
    "BlockInfoBuilder",
    "FeeSpecBuilder",
    "MinerParamsBuilder",
    # Helpers
    "hash_coinbase",
    "coinbase_txid",
    "join_coinbase",
    "widen",
]
