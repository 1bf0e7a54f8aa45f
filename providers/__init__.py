"""Providers package for ProjectEnv - concrete implementations of abstract interfaces."""

from .discovery import FileSystemDiscovery
from .parsing import PropertiesParser

__all__ = [
    # Discovery providers
    "FileSystemDiscovery",

    # Parsing providers
    "PropertiesParser",
]
