"""
Configuration management package for ProjectEnv.

This package provides a unified configuration system that supports:
- Multiple configuration sources (environment variables, settings files, runtime overrides)
- Type-safe configuration validation using Pydantic
- YAML, TOML and JSON settings files
"""

from .settings_sources import (
    JsonConfigSettingsSource,
    TomlConfigSettingsSource,
    YamlConfigSettingsSource,
    create_config_source,
    create_config_sources,
    find_config_files,
)
from .unified_config import ProjectEnvConfig, get_config, reset_config, set_config

__all__ = [
    "ProjectEnvConfig",
    "get_config",
    "set_config",
    "reset_config",
    "YamlConfigSettingsSource",
    "TomlConfigSettingsSource",
    "JsonConfigSettingsSource",
    "create_config_source",
    "create_config_sources",
    "find_config_files",
]
