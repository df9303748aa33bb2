"""
CLI command modules.
"""

from minerid_cli.commands import assemble, blockbind

__all__ = ["assemble", "blockbind"]
