"""
Miner ID Extensions CLI

Command-line interface for building miner ID document extensions.

Usage:
    python -m minerid_cli blockbind --coinbase <hex> --prevhash <hex> --proof <hex> ...
    python -m minerid_cli assemble --job job.json --coinbase <hex>
    python -m minerid_cli config --init
"""

__version__ = "0.1.0"
