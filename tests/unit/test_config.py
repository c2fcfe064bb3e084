"""
Unit tests for filecorr.config module.
"""

from pathlib import Path

import pytest

from filecorr.config import (
    DEFAULT_CONFIG,
    Config,
    create_default_config_file,
    find_config_file,
    get_default_config,
    load_config,
    load_toml,
    save_toml,
)


class TestConfig:
    """Tests for Config class."""

    def test_default_config(self):
        """Test getting default configuration."""
        config = get_default_config()

        assert isinstance(config, Config)
        assert config.filesystem.get("encoding") == "utf-8"
        assert config.logging.get("trace") is False

    def test_config_get(self):
        """Test Config.get method."""
        config = get_default_config()

        assert config.get("logging", "level") == "INFO"
        assert config.get("logging", "nonexistent", "default") == "default"
        assert config.get("nosection", "key", 1) == 1

    def test_config_set(self):
        """Test Config.set method."""
        config = get_default_config()

        config.set("filesystem", "encoding", "latin-1")
        assert config.get("filesystem", "encoding") == "latin-1"

    def test_default_config_is_a_copy(self):
        """Test that changing one config does not leak into defaults."""
        get_default_config().set("logging", "level", "DEBUG")

        assert DEFAULT_CONFIG["logging"]["level"] == "INFO"

    def test_config_from_dict(self):
        """Test Config.from_dict method."""
        config = Config.from_dict({"logging": {"trace": True}})

        assert config.logging["trace"] is True
        assert config.filesystem == {}


class TestTOMLOperations:
    """Tests for TOML load/save operations."""

    def test_load_toml(self, tmp_path):
        """Test loading TOML file."""
        filepath = tmp_path / "test.toml"
        filepath.write_text('[filesystem]\nencoding = "latin-1"\n\n[logging]\ntrace = true\n')

        config = load_toml(str(filepath))

        assert config["filesystem"]["encoding"] == "latin-1"
        assert config["logging"]["trace"] is True

    def test_load_toml_missing_file(self):
        """Test loading non-existent TOML file."""
        with pytest.raises(FileNotFoundError):
            load_toml("/nonexistent/file.toml")

    def test_save_load_roundtrip(self, tmp_path):
        """Test that save then load preserves data."""
        filepath = tmp_path / "roundtrip.toml"
        save_toml(DEFAULT_CONFIG, str(filepath))

        assert load_toml(str(filepath)) == DEFAULT_CONFIG


class TestConfigLoading:
    """Tests for config loading functions."""

    def test_load_config_from_file(self, tmp_path):
        """Test that file values override defaults and the rest are kept."""
        filepath = tmp_path / "custom.toml"
        filepath.write_text('[logging]\nlevel = "WARNING"\n')

        config = load_config(str(filepath))

        assert config.get("logging", "level") == "WARNING"
        assert config.get("logging", "trace_level") == "DEBUG"
        assert config._source == str(filepath)

    def test_broken_file_falls_back_to_defaults(self, tmp_path):
        """Test that an unparsable file yields the defaults."""
        filepath = tmp_path / "broken.toml"
        filepath.write_text("[logging\nlevel = ")

        config = load_config(str(filepath))

        assert config.to_dict() == DEFAULT_CONFIG
        assert config._source is None

    def test_unknown_level_falls_back(self, tmp_path):
        """Test that a bad level name is replaced by the default."""
        filepath = tmp_path / "levels.toml"
        filepath.write_text('[logging]\nlevel = "LOUD"\ntrace_level = "WARNING"\n')

        config = load_config(str(filepath))

        assert config.get("logging", "level") == "INFO"
        assert config.get("logging", "trace_level") == "WARNING"

    def test_find_config_file_explicit(self, tmp_path):
        """Test finding config file with explicit path."""
        filepath = tmp_path / "explicit.toml"
        filepath.write_text("[logging]\ntrace = false\n")

        assert find_config_file(str(filepath)) == filepath

    def test_find_config_file_not_found(self):
        """Test find_config_file returns None when not found."""
        assert find_config_file("/nonexistent/path.toml") is None

    def test_create_default_config_file(self, tmp_path):
        """Test creating default config file."""
        result = create_default_config_file(str(tmp_path / "filecorr.toml"))

        assert Path(result).exists()
        assert "logging" in load_toml(result)
