# githug Config Tests
# Tests for configuration loading and validation

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from githug.config.defaults import DEFAULT_CONFIG, generate_default_config
from githug.config.loader import (
    ConfigError,
    ensure_config_exists,
    get_config_path,
    get_settings,
    load_config,
    validate_config_file,
)
from githug.config.schema import CommitConfig, GithugConfig, InteractiveMode


class TestGithugConfig:
    """Tests for GithugConfig schema."""

    def test_defaults(self):
        config = GithugConfig()
        assert config.interactive == InteractiveMode.AUTO
        assert config.output.colored is True
        assert config.commit.short_sha_length == 7
        assert config.commit.date_format == "%Y-%m-%d"

    def test_interactive_enum(self):
        assert InteractiveMode("never") == InteractiveMode.NEVER
        with pytest.raises(ValidationError):
            GithugConfig.model_validate({"interactive": "sometimes"})

    def test_sha_length_bounds(self):
        with pytest.raises(ValidationError):
            CommitConfig(short_sha_length=2)
        assert CommitConfig(short_sha_length=40).short_sha_length == 40


class TestConfigPath:
    """Tests for config file location."""

    def test_default_under_home(self, temp_home: Path):
        assert get_config_path() == temp_home / ".config" / "githug" / "config.yaml"

    def test_env_override(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        target = temp_dir / "custom.yaml"
        monkeypatch.setenv("GITHUG_CONFIG", str(target))
        assert get_config_path() == target


class TestLoadConfig:
    """Tests for loading and saving configuration."""

    def test_missing_file_raises(self, temp_dir: Path):
        with pytest.raises(FileNotFoundError, match="settings init"):
            load_config(temp_dir / "absent.yaml")

    def test_get_settings_falls_back_to_defaults(self, temp_dir: Path):
        settings = get_settings(temp_dir / "absent.yaml")
        assert settings == GithugConfig()

    def test_partial_file_merged_with_defaults(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("interactive: never\ncommit:\n  short_sha_length: 9\n", encoding="utf-8")

        config = load_config(path)

        assert config.interactive == InteractiveMode.NEVER
        assert config.commit.short_sha_length == 9
        assert config.commit.date_format == "%Y-%m-%d"
        assert config.output.verbose is False

    def test_empty_file(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == GithugConfig()

    def test_bad_yaml_raises_config_error(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("interactive: [auto\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML syntax") as exc_info:
            load_config(path)
        assert exc_info.value.config_path == path

    def test_section_not_a_mapping(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("output: 5\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="'output' must be a mapping"):
            load_config(path)

    def test_top_level_not_a_mapping(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be a mapping"):
            get_settings(path)

    def test_empty_section_uses_defaults(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("output:\ncommit:\n", encoding="utf-8")
        assert load_config(path) == GithugConfig()

    def test_defaults_not_mutated(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("output:\n  verbose: true\n", encoding="utf-8")
        load_config(path)
        assert DEFAULT_CONFIG["output"]["verbose"] is False


class TestEnsureConfig:
    """Tests for ensure_config_exists and the default file."""

    def test_creates_once(self, temp_home: Path):
        path, created = ensure_config_exists()
        assert created is True
        assert path.exists()

        path, created = ensure_config_exists()
        assert created is False

    def test_generated_default_parses(self):
        assert yaml.safe_load(generate_default_config()) == DEFAULT_CONFIG


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_valid(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(generate_default_config(), encoding="utf-8")
        assert validate_config_file(path) == (True, [])

    def test_missing(self, temp_dir: Path):
        valid, errors = validate_config_file(temp_dir / "absent.yaml")
        assert valid is False
        assert "not found" in errors[0]

    def test_bad_yaml(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("interactive: [unclosed\n", encoding="utf-8")
        valid, errors = validate_config_file(path)
        assert valid is False
        assert "Invalid YAML" in errors[0]

    def test_bad_value(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("commit:\n  short_sha_length: 99\n", encoding="utf-8")
        valid, errors = validate_config_file(path)
        assert valid is False
        assert errors[0].startswith("commit -> short_sha_length")

    def test_not_a_mapping(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        assert validate_config_file(path) == (False, ["Configuration must be a mapping"])
