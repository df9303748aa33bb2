"""
Test fixtures package for miner ID extension tests.

This package provides factory functions for creating test inputs:
- job_fixtures.py: miner ID document, mining candidate, getinfo, fee schedule

Usage:
    from fixtures import make_job_data, make_miner_id_doc

    def test_something():
        doc = make_miner_id_doc()
        job = make_job_data(fee_spec=False)
"""

from .job_fixtures import (
    EXAMPLE_COINBASE,
    EXAMPLE_COINBASE_TXID,
    INT64_MAX,
    MINING_CANDIDATE_BLOCKBIND_ROOT,
    MINING_CANDIDATE_PREVHASH,
    MINING_CANDIDATE_PROOF,
    expected_blockbind,
    expected_blockinfo,
    expected_minerparams,
    make_fee_spec,
    make_getinfo,
    make_job_data,
    make_miner_id_doc,
    make_mining_candidate,
)

__all__ = [
    # Constants
    "EXAMPLE_COINBASE",
    "EXAMPLE_COINBASE_TXID",
    "INT64_MAX",
    "MINING_CANDIDATE_BLOCKBIND_ROOT",
    "MINING_CANDIDATE_PREVHASH",
    "MINING_CANDIDATE_PROOF",
    # Factories
    "make_miner_id_doc",
    "make_mining_candidate",
    "make_getinfo",
    "make_fee_spec",
    "make_job_data",
    # Expected records
    "expected_minerparams",
    "expected_blockinfo",
    "expected_blockbind",
]
