"""
Runtime Configuration Module

Provides configuration loading and management for extension assembly.
"""

from .runtime import (
    ExtensionsConfig,
    RuntimeConfig,
    get_default_config,
    parse_extension_kinds,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "ExtensionsConfig",
    "get_default_config",
    "set_default_config",
    "parse_extension_kinds",
]
