"""
CLI BlockBind Command

Compute the blockbind record for one block template.

Usage:
    minerid blockbind --coinbase <hex> --prevhash <hex> --proof <hex> --proof <hex>
    minerid blockbind --coinbase-hash <txid> --prevhash <hex> --proof <hex>
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from core.config import RuntimeConfig
from core.schemas.errors import InvalidInputException
from extensions.blockbind import BlockBindBuilder


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_INVALID_INPUT = 2


def blockbind_cmd(args: Namespace) -> int:
    """Handle blockbind command."""
    if bool(args.coinbase) == bool(args.coinbase_hash):
        print("Error: give exactly one of --coinbase or --coinbase-hash", file=sys.stderr)
        return EXIT_INVALID_INPUT

    cli_config = getattr(args, "cli_config", None)
    runtime = cli_config.runtime_config() if cli_config else RuntimeConfig.from_env()
    builder = BlockBindBuilder(runtime.extensions)
    proof = args.proof or []

    try:
        if args.coinbase:
            record = builder.build(args.coinbase, args.prevhash, proof)
        else:
            record = builder.build_from_coinbase_hash(args.coinbase_hash, args.prevhash, proof)
    except InvalidInputException as e:
        logger.debug(f"blockbind rejected input: {e.details}")
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    data = record.model_dump(mode="json", by_alias=True)
    if args.json:
        print(json.dumps(data, indent=2))
    else:
        print(f"modifiedMerkleRoot: {data['modifiedMerkleRoot']}")
        print(f"prevBlockHash: {data['prevBlockHash']}")
    return EXIT_SUCCESS
