"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from issuebridge.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.convert.include_ignores is False
        assert cfg.output.format == "json"
        assert cfg.logging.level == "warning"

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".issuebridge.toml").write_text(
            'version = "1.0"\n'
            '[convert]\n'
            'include_ignores = true\n'
            'base_path = "/srv/app"\n'
            '[output]\n'
            'format = "terminal"\n'
            'min_severity = "high"\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.convert.include_ignores is True
        assert cfg.convert.base_path == "/srv/app"
        assert cfg.output.format == "terminal"
        assert cfg.output.min_severity == "high"

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".issuebridge.toml").write_text('[output]\ncolour = "blue"\n')
        cfg = load_config(tmp_path)
        assert cfg.output.format == "json"

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[logging]\nlevel = "debug"\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.logging.level == "debug"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".issuebridge.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_format_raises(self, tmp_path: Path):
        (tmp_path / ".issuebridge.toml").write_text('[output]\nformat = "sarif"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_section_not_a_table(self, tmp_path: Path):
        (tmp_path / ".issuebridge.toml").write_text('convert = "yes"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_include_ignores(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("ISSUEBRIDGE_INCLUDE_IGNORES", "true")
        assert load_config(tmp_path).convert.include_ignores is True

    def test_include_ignores_false(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".issuebridge.toml").write_text("[convert]\ninclude_ignores = true\n")
        monkeypatch.setenv("ISSUEBRIDGE_INCLUDE_IGNORES", "0")
        assert load_config(tmp_path).convert.include_ignores is False

    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("ISSUEBRIDGE_FORMAT", "terminal")
        assert load_config(tmp_path).output.format == "terminal"

    def test_log_level_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("ISSUEBRIDGE_LOG_LEVEL", "INFO")
        assert load_config(tmp_path).logging.level == "info"

    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("ISSUEBRIDGE_FORMAT", "xml")
        assert load_config(tmp_path).output.format == "json"
