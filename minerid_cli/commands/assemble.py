"""
CLI Assemble Command

Build the extensions for one job, or for a list of jobs.

The job file holds either one job object or a list of them. A job object
carries any of blockTemplate/miningCandidate, policyInfo/getInfo,
feeSchedule/feeSpec and coinbase. With --doc, the extensions are merged
into the given miner ID document instead of printed on their own.

Usage:
    minerid assemble --job job.json --coinbase <hex> [--doc doc.json] [--report]
    minerid assemble --job job.json --coinbase1 <hex> --extranonce1 <hex> \\
        --extranonce2 <hex> --coinbase2 <hex>
    minerid assemble --job jobs.json --workers 8
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from core.config import RuntimeConfig
from core.schemas.errors import InvalidInputException
from extensions.assembler import AssemblyResult, ExtensionAssembler
from extensions.coinbase import join_coinbase


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_INVALID_INPUT = 2

_SPLIT_PARTS = ("coinbase1", "extranonce1", "extranonce2", "coinbase2")


def load_json(path: str, what: str) -> Any:
    """Read a JSON file, raising InvalidInputException on unreadable input."""
    file_path = Path(path)
    if not file_path.exists():
        raise InvalidInputException(f"{what} file not found: {path}", field_path=what)
    try:
        with open(file_path, "r") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidInputException(
            f"{what} file is not valid JSON: {e}", field_path=what
        ) from e


def resolve_coinbase(args: Namespace) -> str | None:
    """The coinbase hex from --coinbase or from the four split parts."""
    parts = {name: getattr(args, name, None) for name in _SPLIT_PARTS}
    given = [name for name, value in parts.items() if value is not None]

    if args.coinbase and given:
        raise InvalidInputException(
            "--coinbase cannot be combined with the split coinbase arguments"
        )
    if args.coinbase:
        return args.coinbase
    if not given:
        return None
    if len(given) != len(_SPLIT_PARTS):
        missing = [name for name in _SPLIT_PARTS if name not in given]
        raise InvalidInputException(
            f"Split coinbase is missing: {', '.join('--' + m for m in missing)}"
        )
    return join_coinbase(**parts)


def print_result_human(result: AssemblyResult) -> None:
    """Print an assembly result in human-readable format."""
    names = result.extensions.names()
    print(f"extensions: {', '.join(names) if names else '(none)'}")
    if result.skipped:
        print(f"skipped: {', '.join(k.value for k in result.skipped)}")
    if result.errors:
        print(f"\nerrors ({len(result.errors)}):")
        for err in result.errors:
            print(f"  ✗ {err.extension}: {err.message}")


def assemble_cmd(args: Namespace) -> int:
    """Handle assemble command."""
    cli_config = getattr(args, "cli_config", None)
    runtime = cli_config.runtime_config() if cli_config else RuntimeConfig.from_env()
    assembler = ExtensionAssembler(runtime)

    output_format = "json" if args.json else (
        cli_config.default_output_format if cli_config else "json"
    )

    try:
        job_data = load_json(args.job, "job")
        coinbase_hex = resolve_coinbase(args)
        document = load_json(args.doc, "doc") if args.doc else None
    except InvalidInputException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if isinstance(job_data, list):
        if coinbase_hex or document is not None:
            print(
                "Error: a job list carries its own coinbases; "
                "--coinbase and --doc apply to a single job only",
                file=sys.stderr,
            )
            return EXIT_INVALID_INPUT
        logger.info(f"Assembling {len(job_data)} jobs")
        results = assembler.assemble_batch(job_data, max_workers=args.workers)
        if output_format == "json":
            print(json.dumps([r.to_dict() for r in results], indent=2))
        else:
            for i, result in enumerate(results):
                print(f"--- job {i} ---")
                print_result_human(result)
        return EXIT_SUCCESS if all(r.ok for r in results) else EXIT_INVALID_INPUT

    if not isinstance(job_data, dict):
        print("Error: job file must hold a job object or a list of jobs", file=sys.stderr)
        return EXIT_INVALID_INPUT

    result = assembler.assemble_with_report(coinbase_hex, job_data)

    if document is not None:
        if not result.extensions.is_empty():
            document["extensions"] = result.extensions.to_dict()
        print(json.dumps(document, indent=2))
    elif args.report:
        print(json.dumps(result.to_dict(), indent=2))
    elif output_format == "json":
        print(json.dumps(result.extensions.to_dict(), indent=2))
    else:
        print_result_human(result)

    return EXIT_SUCCESS if result.ok else EXIT_INVALID_INPUT
