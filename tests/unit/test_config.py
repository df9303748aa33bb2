"""
Runtime and CLI Configuration Unit Tests
Tests for core/config/runtime.py and minerid_cli/config.py
"""

import json

import pytest

from core.config import (
    ExtensionsConfig,
    RuntimeConfig,
    get_default_config,
    parse_extension_kinds,
    set_default_config,
)
from core.schemas.extensions import ExtensionKind
from minerid_cli.config import (
    CLIConfig,
    get_default_config_template,
    load_config,
    load_config_from_file,
)


class TestParseExtensionKinds:
    def test_comma_separated(self):
        assert parse_extension_kinds("feeSpec, blockbind") == [
            ExtensionKind.FEESPEC,
            ExtensionKind.BLOCKBIND,
        ]
    
    def test_list(self):
        assert parse_extension_kinds(["minerparams"]) == [ExtensionKind.MINERPARAMS]
    
    def test_empty_entries_skipped(self):
        assert parse_extension_kinds("blockinfo,,") == [ExtensionKind.BLOCKINFO]
    
    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown extension 'coinbaseDocument'"):
            parse_extension_kinds("coinbaseDocument")


class TestRuntimeConfig:
    """Tests for RuntimeConfig loading."""
    
    def test_defaults(self):
        config = RuntimeConfig()
        
        assert config.extensions.enabled == list(ExtensionKind)
        assert config.extensions.legacy_float_widening is False
        assert config.extensions.batch_workers == 4
    
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MINERID_EXTENSIONS", "blockbind")
        monkeypatch.setenv("MINERID_LEGACY_FLOAT_WIDENING", "true")
        monkeypatch.setenv("MINERID_BATCH_WORKERS", "8")
        
        config = RuntimeConfig.from_env()
        
        assert config.extensions.enabled == [ExtensionKind.BLOCKBIND]
        assert config.extensions.legacy_float_widening is True
        assert config.extensions.batch_workers == 8
    
    def test_from_env_without_vars(self):
        assert RuntimeConfig.from_env().to_dict() == RuntimeConfig().to_dict()
    
    def test_from_dict_partial(self):
        config = RuntimeConfig.from_dict({"extensions": {"batch_workers": 2}})
        
        assert config.extensions.batch_workers == 2
        assert config.extensions.enabled == list(ExtensionKind)
    
    def test_from_yaml(self, tmp_path):
        path = tmp_path / "minerid.yaml"
        path.write_text(
            "extensions:\n"
            "  enabled: [feeSpec, minerparams]\n"
            "  legacy_float_widening: true\n"
        )
        
        config = RuntimeConfig.from_yaml(path)
        
        assert config.extensions.enabled == [ExtensionKind.FEESPEC, ExtensionKind.MINERPARAMS]
        assert config.extensions.legacy_float_widening is True
    
    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")
    
    def test_env_overrides_file(self, monkeypatch):
        base = RuntimeConfig.from_dict({"extensions": {"enabled": "feeSpec", "batch_workers": 2}})
        monkeypatch.setenv("MINERID_EXTENSIONS", "blockinfo")
        
        config = base.with_env_overrides()
        
        assert config.extensions.enabled == [ExtensionKind.BLOCKINFO]
        assert config.extensions.batch_workers == 2
        assert base.extensions.enabled == [ExtensionKind.FEESPEC]
    
    def test_to_dict(self):
        config = RuntimeConfig(extensions=ExtensionsConfig(enabled=[ExtensionKind.BLOCKINFO]))
        
        assert config.to_dict()["extensions"]["enabled"] == ["blockinfo"]
    
    def test_default_config_cached_and_settable(self):
        first = get_default_config()
        
        assert get_default_config() is first
        
        custom = RuntimeConfig(extensions=ExtensionsConfig(batch_workers=1))
        set_default_config(custom)
        
        assert get_default_config() is custom


class TestCLIConfig:
    """Tests for minerid_cli.config."""
    
    def test_template_is_valid_json(self, tmp_path):
        path = tmp_path / "minerid.json"
        path.write_text(get_default_config_template())
        
        config = load_config_from_file(path)
        
        assert config.log_level == "INFO"
        assert config.default_output_format == "json"
        assert config.runtime_config().extensions.enabled == list(ExtensionKind)
    
    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "minerid.json"
        path.write_text(json.dumps({"log_level": "WARNING", "default_output_format": "human"}))
        monkeypatch.setenv("MINERID_LOG_LEVEL", "DEBUG")
        
        config = load_config(path)
        
        assert config.log_level == "DEBUG"
        assert config.default_output_format == "human"
    
    def test_unknown_output_format_raises(self, tmp_path):
        path = tmp_path / "minerid.json"
        path.write_text(json.dumps({"default_output_format": "xml"}))
        
        with pytest.raises(ValueError, match="output format"):
            load_config(path)
    
    def test_missing_explicit_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")
    
    def test_default_search_in_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "minerid.json").write_text(json.dumps({"log_level": "ERROR"}))
        
        assert load_config().log_level == "ERROR"
    
    def test_runtime_config_from_file_section(self):
        config = CLIConfig(extensions={"enabled": ["blockbind"], "legacy_float_widening": True})
        runtime = config.runtime_config()
        
        assert runtime.extensions.enabled == [ExtensionKind.BLOCKBIND]
        assert runtime.extensions.legacy_float_widening is True
