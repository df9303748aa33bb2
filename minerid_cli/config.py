"""
CLI Configuration

Configuration management for the minerid CLI.
Supports environment variables and configuration files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from core.config import RuntimeConfig


# Environment variable prefix
ENV_PREFIX = "MINERID_"

OUTPUT_FORMATS = ("human", "json")


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Extension assembly settings, in RuntimeConfig.from_dict() shape
    extensions: dict[str, Any] = field(default_factory=dict)

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Output
    default_output_format: str = "json"  # "human" or "json"

    def runtime_config(self) -> RuntimeConfig:
        """RuntimeConfig from the file settings, with MINERID_* env overrides."""
        return RuntimeConfig.from_dict({"extensions": self.extensions}).with_env_overrides()


def load_config_from_env() -> CLIConfig:
    """Load configuration from environment variables."""
    config = CLIConfig()

    config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO")
    config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "json")

    return config


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    config = CLIConfig()

    config.extensions = data.get("extensions", {}) or {}

    # Logging
    config.log_level = data.get("log_level", config.log_level)
    config.log_file = data.get("log_file", config.log_file)

    config.default_output_format = data.get(
        "default_output_format", config.default_output_format
    )

    return config


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        default_paths = [
            Path.cwd() / "minerid.json",
            Path.cwd() / ".minerid.json",
            Path.home() / ".config" / "minerid" / "config.json",
        ]
        for default_path in default_paths:
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    env_config = load_config_from_env()

    # Merge env into config (env takes precedence)
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = env_config.log_level
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = env_config.log_file
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = env_config.default_output_format

    if config.default_output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format '{config.default_output_format}', "
            f"expected one of {list(OUTPUT_FORMATS)}"
        )

    return config


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """{
  "extensions": {
    "enabled": ["feeSpec", "minerparams", "blockinfo", "blockbind"],
    "legacy_float_widening": false,
    "batch_workers": 4
  },
  "log_level": "INFO",
  "log_file": null,
  "default_output_format": "json"
}
"""
