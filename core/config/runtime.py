"""
Runtime Configuration

Central configuration for extension assembly.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from core.schemas.extensions import ExtensionKind

load_dotenv()


def _all_kinds() -> list[ExtensionKind]:
    return list(ExtensionKind)


def parse_extension_kinds(value: str | list[str]) -> list[ExtensionKind]:
    """
    Parse extension kinds from a comma separated string or a list of names.

    Raises:
        ValueError: On an unknown extension name
    """
    names = value.split(",") if isinstance(value, str) else list(value)
    kinds: list[ExtensionKind] = []
    for name in names:
        name = name.strip()
        if not name:
            continue
        try:
            kinds.append(ExtensionKind(name))
        except ValueError:
            raise ValueError(
                f"Unknown extension '{name}'. "
                f"Known extensions: {[k.value for k in ExtensionKind]}"
            ) from None
    return kinds


@dataclass
class ExtensionsConfig:
    """Configuration for extension assembly."""
    enabled: list[ExtensionKind] = field(default_factory=_all_kinds)
    # Round 64-bit policy limits through a double, as older consumers expect
    legacy_float_widening: bool = False
    batch_workers: int = 4

    def is_enabled(self, kind: ExtensionKind) -> bool:
        return kind in self.enabled


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    extensions: ExtensionsConfig = field(default_factory=ExtensionsConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MINERID_EXTENSIONS: Comma separated extension names to build
        - MINERID_LEGACY_FLOAT_WIDENING: Round policy limits through a double (true/false)
        - MINERID_BATCH_WORKERS: Thread pool size for batch assembly
        """
        overrides: dict[str, Any] = {}

        if os.getenv("MINERID_EXTENSIONS"):
            overrides.setdefault("extensions", {})["enabled"] = os.getenv("MINERID_EXTENSIONS")
        if os.getenv("MINERID_LEGACY_FLOAT_WIDENING"):
            overrides.setdefault("extensions", {})["legacy_float_widening"] = (
                os.getenv("MINERID_LEGACY_FLOAT_WIDENING", "false").lower() == "true"
            )
        if os.getenv("MINERID_BATCH_WORKERS"):
            overrides.setdefault("extensions", {})["batch_workers"] = int(
                os.getenv("MINERID_BATCH_WORKERS", "4")
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        ext_data = dict(data.get("extensions", {}) or {})
        if "enabled" in ext_data:
            ext_data["enabled"] = parse_extension_kinds(ext_data["enabled"])

        extensions = ExtensionsConfig(**ext_data) if ext_data else ExtensionsConfig()

        return cls(
            extensions=extensions,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.get("extensions", {}).items():
            if key == "enabled":
                value = parse_extension_kinds(value)
            setattr(new_config.extensions, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "extensions": {
                "enabled": [k.value for k in self.extensions.enabled],
                "legacy_float_widening": self.extensions.legacy_float_widening,
                "batch_workers": self.extensions.batch_workers,
            },
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env defaults)."""
    global _default_config
    _default_config = config
