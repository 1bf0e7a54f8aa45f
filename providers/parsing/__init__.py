"""Parsing providers package for ProjectEnv - concrete property file parser implementations."""

from .properties_parser import PropertiesParser

__all__ = [
    "PropertiesParser",
]
