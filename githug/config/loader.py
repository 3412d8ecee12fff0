# githug Configuration Loader
# Load, save, and validate YAML configuration files

import copy
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from githug.config.defaults import DEFAULT_CONFIG, generate_default_config
from githug.config.schema import GithugConfig


class ConfigError(Exception):
    """Exception raised for configuration files that cannot be read as settings."""

    def __init__(self, message: str, config_path: Optional[Path] = None):
        super().__init__(message)
        self.config_path = config_path


def get_config_dir() -> Path:
    """Get the githug configuration directory."""
    return Path.home() / ".config" / "githug"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    # Allow override via environment variable
    env_path = os.environ.get("GITHUG_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> GithugConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        GithugConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigError: If config file is not valid YAML or not a mapping.
        ValidationError: If config file is invalid.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\nRun 'githug settings init' to create one."
        )

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in {config_path}: {e}", config_path) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping: {config_path}", config_path)

    for section in ("output", "commit"):
        if data.get(section) is not None and not isinstance(data[section], dict):
            raise ConfigError(f"Section '{section}' must be a mapping: {config_path}", config_path)

    return GithugConfig.model_validate(_merge_with_defaults(data))


def get_settings(config_path: Optional[Path] = None) -> GithugConfig:
    """
    Load configuration, falling back to defaults when no file exists.

    Args:
        config_path: Optional path to config file.

    Returns:
        GithugConfig: Validated configuration object.
    """
    try:
        return load_config(config_path)
    except FileNotFoundError:
        return GithugConfig.model_validate(copy.deepcopy(DEFAULT_CONFIG))


def ensure_config_exists(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """
    Ensure configuration file exists, creating default if needed.

    Returns:
        Tuple of (config_path, was_created).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path, True


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Validate a configuration file without loading it into the system.

    Args:
        config_path: Path to config file to validate.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return False, [f"Configuration file not found: {config_path}"]

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML syntax: {e}"]

    if data is None:
        return False, ["Configuration file is empty"]

    if not isinstance(data, dict):
        return False, ["Configuration must be a mapping"]

    errors: list[str] = []
    try:
        GithugConfig.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

    return len(errors) == 0, errors


def _merge_with_defaults(data: dict) -> dict:
    """Merge loaded data with default values for missing keys."""
    result = copy.deepcopy(DEFAULT_CONFIG)

    if "interactive" in data:
        result["interactive"] = data["interactive"]

    for section in ("output", "commit"):
        if section in data and data[section]:
            result[section] = {**result[section], **data[section]}

    return result
