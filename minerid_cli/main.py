"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m minerid_cli blockbind --coinbase HEX --prevhash HEX [--proof HEX ...] [--json]
    python -m minerid_cli blockbind --coinbase-hash HEX --prevhash HEX [--proof HEX ...]
    python -m minerid_cli assemble --job job.json [--coinbase HEX] [--doc doc.json] [--report]
    python -m minerid_cli assemble --job jobs.json [--workers N]
    python -m minerid_cli config --init

Environment Variables:
    MINERID_EXTENSIONS              Comma separated extensions to build (default: all)
    MINERID_LEGACY_FLOAT_WIDENING   Round policy limits through a double (default: false)
    MINERID_BATCH_WORKERS           Thread pool size for job lists (default: 4)
    MINERID_LOG_LEVEL               Log level (default: INFO)
    MINERID_LOG_FILE                Also log to this file
    MINERID_OUTPUT_FORMAT           human or json (default: json)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from minerid_cli import __version__
from minerid_cli.commands import assemble, blockbind
from minerid_cli.config import load_config, get_default_config_template


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_INVALID_INPUT = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="minerid",
        description="Miner ID extensions CLI - Build blockbind and the other document extensions.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./minerid.json or ~/.config/minerid/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- blockbind command ---
    blockbind_parser = subparsers.add_parser(
        "blockbind",
        help="Compute the blockbind record",
        description="Recompute the Merkle root from a coinbase and the template's proof.",
    )
    blockbind_parser.add_argument(
        "--coinbase",
        type=str,
        default=None,
        help="Assembled coinbase transaction hex",
    )
    blockbind_parser.add_argument(
        "--coinbase-hash",
        type=str,
        default=None,
        help="Coinbase txid (display-order hex), instead of --coinbase",
    )
    blockbind_parser.add_argument(
        "--prevhash",
        type=str,
        required=True,
        help="Previous block hash (display-order hex)",
    )
    blockbind_parser.add_argument(
        "--proof",
        type=str,
        action="append",
        default=None,
        help="Merkle proof hash, deepest first; repeat for each level",
    )
    blockbind_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output the record as JSON",
    )
    blockbind_parser.set_defaults(func=blockbind.blockbind_cmd)

    # --- assemble command ---
    assemble_parser = subparsers.add_parser(
        "assemble",
        help="Build the extensions for a job",
        description="Build every extension whose inputs the job supplies.",
    )
    assemble_parser.add_argument(
        "--job", "-j",
        type=str,
        required=True,
        help="JSON file holding one job object or a list of jobs",
    )
    assemble_parser.add_argument(
        "--coinbase",
        type=str,
        default=None,
        help="Assembled coinbase transaction hex (overrides the job's coinbase)",
    )
    for part in ("coinbase1", "extranonce1", "extranonce2", "coinbase2"):
        assemble_parser.add_argument(
            f"--{part}",
            type=str,
            default=None,
            help=f"Split coinbase: {part} hex",
        )
    assemble_parser.add_argument(
        "--doc",
        type=str,
        default=None,
        help="Miner ID document JSON to merge the extensions into",
    )
    assemble_parser.add_argument(
        "--report",
        action="store_true",
        default=False,
        help="Print skipped records and per-record errors along with the extensions",
    )
    assemble_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Thread pool size for a list of jobs (default: from config)",
    )
    assemble_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Force JSON output",
    )
    assemble_parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on unexpected errors",
    )
    assemble_parser.set_defaults(func=assemble.assemble_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="minerid.json",
        help="Path for config file (default: minerid.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (MINERID_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        if args.config is not None:
            config = args.cli_config
        else:
            config_path = Path(args.path)
            config = load_config(config_path if config_path.exists() else None)
        config_dict = {
            "log_level": config.log_level,
            "log_file": config.log_file,
            "default_output_format": config.default_output_format,
            **config.runtime_config().to_dict(),
        }
        print(json.dumps(config_dict, indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: minerid config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=invalid input)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
