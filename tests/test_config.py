"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from wtstatus.config.defaults import DEFAULT_TOML
from wtstatus.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.status.untracked_files == "all"
        assert cfg.status.renames is True
        assert cfg.conflicts.binary_sniff_bytes == 8000
        assert cfg.git.timeout == 30
        assert cfg.output.format == "terminal"

    def test_custom_toml(self, tmp_path: Path):
        toml_path = tmp_path / ".wtstatus.toml"
        toml_path.write_text(
            'version = "1.0"\n'
            '[status]\n'
            'untracked_files = "no"\n'
            'renames = false\n'
            '[git]\n'
            'timeout = 5\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.status.untracked_files == "no"
        assert cfg.status.renames is False
        assert cfg.git.timeout == 5

    def test_default_template_loads(self, tmp_path: Path):
        (tmp_path / ".wtstatus.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.output.show_summary is True

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".wtstatus.toml").write_text('[output]\nformat = "json"\ncolour = "red"\n')
        cfg = load_config(tmp_path)
        assert cfg.output.format == "json"

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[output]\nformat = "json"\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.output.format == "json"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        bad_toml = tmp_path / ".wtstatus.toml"
        bad_toml.write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_value_raises(self, tmp_path: Path):
        (tmp_path / ".wtstatus.toml").write_text('[status]\nuntracked_files = "some"\n')
        with pytest.raises(ConfigError, match="untracked_files"):
            load_config(tmp_path)

    def test_section_must_be_table(self, tmp_path: Path):
        (tmp_path / ".wtstatus.toml").write_text('git = 3\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("WTSTATUS_FORMAT", "json")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "json"

    def test_untracked_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("WTSTATUS_UNTRACKED_FILES", "normal")
        cfg = load_config(tmp_path)
        assert cfg.status.untracked_files == "normal"

    def test_timeout_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("WTSTATUS_GIT_TIMEOUT", "90")
        cfg = load_config(tmp_path)
        assert cfg.git.timeout == 90

    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("WTSTATUS_FORMAT", "sarif")
        monkeypatch.setenv("WTSTATUS_GIT_TIMEOUT", "soon")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "terminal"  # default unchanged
        assert cfg.git.timeout == 30
