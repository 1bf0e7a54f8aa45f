"""Interfaces package for ProjectEnv - abstract protocols for provider implementations."""

from .file_discovery import FileDiscovery
from .project_tree import ProjectTreeNode
from .property_parser import PropertyParser

__all__ = [
    "FileDiscovery",
    "ProjectTreeNode",
    "PropertyParser",
]
