"""Discovery providers package for ProjectEnv - filesystem lookup of property files."""

from .filesystem_discovery import FileSystemDiscovery, extension_of, normalize_extensions

__all__ = [
    "FileSystemDiscovery",
    "extension_of",
    "normalize_extensions",
]
