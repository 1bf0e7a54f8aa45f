"""
Custom settings sources for ProjectEnv configuration management.

This module provides Pydantic settings sources that load resolver settings
from YAML, TOML and JSON files, plus helpers to locate those files.
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

import yaml
from loguru import logger
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from core.exceptions import ConfigurationError

CONFIG_SUFFIXES = ('.yaml', '.yml', '.toml', '.json')


class BaseFileConfigSettingsSource(PydanticBaseSettingsSource, ABC):
    """
    Abstract base class for file-based configuration sources.

    This class provides the common framework for loading configuration
    from various file formats (YAML, TOML, JSON) with consistent behavior.
    """

    def __init__(
        self,
        settings_cls: Type[BaseSettings],
        config_file: Union[str, Path, List[Union[str, Path]]],
        required: bool = False,
    ):
        """
        Initialize file-based configuration source.

        Args:
            settings_cls: The settings class
            config_file: Path(s) to configuration file(s)
            required: Raise ConfigurationError instead of skipping a missing or broken file
        """
        super().__init__(settings_cls)

        if isinstance(config_file, (str, Path)):
            self.config_files = [Path(config_file)]
        else:
            self.config_files = [Path(f) for f in config_file]
        self.required = required

        self._data = self._load_files()

    def _load_files(self) -> Dict[str, Any]:
        """Load and merge data from all configuration files."""
        merged_data = {}

        for config_file in self.config_files:
            if not config_file.exists():
                if self.required:
                    raise ConfigurationError(
                        "config_file", str(config_file), "Settings file not found"
                    )
                logger.debug(f"Settings file {config_file} not found")
                continue

            try:
                file_data = self.load_file(config_file)
            except (OSError, ValueError, yaml.YAMLError) as e:
                if self.required:
                    raise ConfigurationError(
                        "config_file", str(config_file), f"Failed to load settings file: {e}"
                    ) from e
                logger.warning(f"Failed to load settings file {config_file}: {e}")
                continue

            if file_data:
                # Later files override earlier ones
                merged_data.update(file_data)

        return merged_data

    @abstractmethod
    def load_file(self, path: Path) -> Dict[str, Any]:
        """
        Load configuration data from a specific file.

        Args:
            path: Path to the configuration file

        Returns:
            Dictionary containing configuration data
        """
        pass

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        """Get field value from configuration data."""
        if field_name in self._data:
            return self._data[field_name], field_name, True
        return None, field_name, False

    def __call__(self) -> Dict[str, Any]:
        """Return the loaded configuration data."""
        return self._data

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(config_files={[str(f) for f in self.config_files]})'


class YamlConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for YAML files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        """Load YAML configuration file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}


class TomlConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for TOML files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file."""
        with open(path, 'rb') as f:
            return tomllib.load(f)


class JsonConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for JSON files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        """Load JSON configuration file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            return data if isinstance(data, dict) else {}


def create_config_source(
    settings_cls: Type[BaseSettings],
    config_file: Union[str, Path],
    required: bool = False,
) -> BaseFileConfigSettingsSource:
    """
    Create the settings source matching a file's suffix.

    Raises:
        ConfigurationError: If the suffix is not one of .yaml, .yml, .toml, .json
    """
    config_path = Path(config_file)
    suffix = config_path.suffix.lower()

    if suffix in ('.yaml', '.yml'):
        return YamlConfigSettingsSource(settings_cls, config_path, required)
    if suffix == '.toml':
        return TomlConfigSettingsSource(settings_cls, config_path, required)
    if suffix == '.json':
        return JsonConfigSettingsSource(settings_cls, config_path, required)

    raise ConfigurationError(
        "config_file", str(config_path), f"Unknown settings file format: {suffix or '(none)'}"
    )


def create_config_sources(
    settings_cls: Type[BaseSettings],
    config_files: Optional[List[Union[str, Path]]] = None,
) -> List[PydanticBaseSettingsSource]:
    """
    Create one settings source per file, skipping unknown formats.

    Args:
        settings_cls: Settings class
        config_files: Configuration files, lowest priority first

    Returns:
        List of configured settings sources
    """
    sources: List[PydanticBaseSettingsSource] = []

    for config_file in config_files or []:
        try:
            sources.append(create_config_source(settings_cls, config_file))
        except ConfigurationError as e:
            logger.warning(str(e))

    return sources


def find_config_files(
    base_dirs: Optional[List[Union[str, Path]]] = None,
    config_names: Optional[List[str]] = None,
) -> List[Path]:
    """
    Find configuration files in common locations.

    Args:
        base_dirs: Directories to search (defaults to the current directory)
        config_names: Config file names to look for

    Returns:
        List of found configuration files, lowest priority first
    """
    if base_dirs is None:
        base_dirs = [Path.cwd()]
    else:
        base_dirs = [Path(d) for d in base_dirs]

    if config_names is None:
        config_names = [f'.projectenv{suffix}' for suffix in CONFIG_SUFFIXES]

    found_files = []

    for base_dir in base_dirs:
        if not base_dir.exists():
            continue

        for config_name in config_names:
            config_path = base_dir / config_name
            if config_path.exists() and config_path.is_file():
                found_files.append(config_path)

    return found_files
