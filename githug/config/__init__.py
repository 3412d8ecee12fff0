# githug Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from githug.config.defaults import DEFAULT_CONFIG, generate_default_config
from githug.config.loader import (
    ensure_config_exists,
    get_config_path,
    get_settings,
    load_config,
    ConfigError,
    validate_config_file,
)
from githug.config.schema import CommitConfig, GithugConfig, InteractiveMode, OutputConfig

__all__ = [
    # Schema
    "GithugConfig",
    "CommitConfig",
    "OutputConfig",
    "InteractiveMode",
    # Loader
    "load_config",
    "get_settings",
    "ConfigError",
    "get_config_path",
    "ensure_config_exists",
    "validate_config_file",
    # Defaults
    "DEFAULT_CONFIG",
    "generate_default_config",
]
