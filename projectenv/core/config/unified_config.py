"""
Unified configuration system for ProjectEnv.

This module provides a single, type-safe settings model for the environment
resolver and its command line front end, with hierarchical loading from
settings files, environment variables and runtime overrides.
"""

import codecs
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, EnvSettingsSource, SettingsConfigDict

from core.types import DEFAULT_EXTENSION, DEFAULT_EXTENSION_NAME

from .settings_sources import CONFIG_SUFFIXES, create_config_source, create_config_sources, find_config_files


class ProjectEnvConfig(BaseSettings):
    """
    Unified configuration for ProjectEnv.

    Configuration Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Environment variables (PROJECTENV_*)
    3. Explicit settings file (--config)
    4. Project settings file (<project>/.projectenv.{yaml,yml,toml,json})
    5. User settings file (~/.projectenv/config.{yaml,yml,toml,json})
    6. Default values (lowest priority)

    Environment Variable Examples:
        PROJECTENV_EXTENSIONS='["env", "properties"]'
        PROJECTENV_RECURSIVE=true
        PROJECTENV_ENCODING=iso-8859-1
        PROJECTENV_DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_prefix='PROJECTENV_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,  # .env files are data here, never settings
    )

    extensions: list[str] = Field(
        default_factory=lambda: [DEFAULT_EXTENSION],
        description="File extensions (without dot) that qualify a property file"
    )

    recursive: bool = Field(
        default=False,
        description="Scan subdirectories of each project level"
    )

    case_sensitive_extensions: bool = Field(
        default=True,
        description="Match file extensions case sensitively"
    )

    encoding: str = Field(
        default='utf-8',
        description="Primary encoding of property files"
    )

    extension_name: str = Field(
        default=DEFAULT_EXTENSION_NAME,
        min_length=1,
        description="Name the resolved store is registered under"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @field_validator('extensions')
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Strip leading dots and reject an empty extension list."""
        cleaned = []
        for extension in v:
            extension = extension.strip().lstrip('.')
            if extension and extension not in cleaned:
                cleaned.append(extension)
        if not cleaned:
            raise ValueError("at least one file extension is required")
        return cleaned

    @field_validator('encoding')
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings the codec registry does not know."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}")
        return v

    @classmethod
    def load_hierarchical(cls,
                          project_dir: Path | None = None,
                          config_file: Path | None = None,
                          **override_values: Any) -> 'ProjectEnvConfig':
        """
        Load configuration from hierarchical sources.

        Args:
            project_dir: Project directory to search for .projectenv.* files
            config_file: Explicit settings file; must exist and parse
            **override_values: Runtime parameter overrides

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If ``config_file`` is missing, unreadable or of unknown format
        """
        config_data: dict[str, Any] = {}

        # 1. User settings (~/.projectenv/config.*)
        user_files = find_config_files(
            [Path.home() / '.projectenv'],
            [f'config{suffix}' for suffix in CONFIG_SUFFIXES],
        )

        # 2. Project settings (<project>/.projectenv.*)
        project_files = find_config_files([project_dir or Path.cwd()])

        for source in create_config_sources(cls, user_files + project_files):
            config_data.update(source())

        # 3. Explicit settings file
        if config_file is not None:
            config_data.update(create_config_source(cls, config_file, required=True)())

        # 4. Environment variables beat every settings file
        config_data.update(EnvSettingsSource(cls)())

        # 5. Runtime overrides
        config_data.update(override_values)

        logger.debug(f"Settings keys resolved: {sorted(config_data)}")
        return cls(**config_data)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert configuration to dictionary format.

        Returns:
            Configuration as dictionary
        """
        return self.model_dump(mode='json')

    def __repr__(self) -> str:
        return (
            f"ProjectEnvConfig("
            f"extensions={self.extensions}, "
            f"recursive={self.recursive}, "
            f"encoding={self.encoding}, "
            f"extension_name={self.extension_name})"
        )


# Global configuration instance
_config_instance: ProjectEnvConfig | None = None


def get_config() -> ProjectEnvConfig:
    """
    Get the global configuration instance.

    Returns:
        Global ProjectEnvConfig instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = ProjectEnvConfig.load_hierarchical()
    return _config_instance


def set_config(config: ProjectEnvConfig) -> None:
    """
    Set the global configuration instance.

    Args:
        config: Configuration instance to set as global
    """
    global _config_instance
    _config_instance = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config_instance
    _config_instance = None
