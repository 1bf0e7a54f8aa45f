"""ProjectEnv Entry Domain Model - A single configuration key/value pair.

This module contains the ConfigEntry model produced by the property file
parser and consumed by the environment store, plus the failure record kept
when a discovered file has to be skipped.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple

from ..types import FailureKind
from ..exceptions import ValidationError


@dataclass(frozen=True)
class ConfigEntry:
    """Immutable configuration entry.

    Attributes:
        key: Non-empty entry name
        value: Entry value, possibly the empty string
        source: File the entry was read from (None for host environment entries)
        line_number: 1-based line where the entry's logical line starts
    """

    key: str
    value: str
    source: Optional[Path] = None
    line_number: Optional[int] = None

    def __post_init__(self):
        """Validate entry after initialization."""
        if not isinstance(self.key, str) or not self.key:
            raise ValidationError("key", self.key, "Key must be a non-empty string")
        if not isinstance(self.value, str):
            raise ValidationError("value", self.value, "Value must be a string")

    @classmethod
    def from_pair(cls, pair: Any) -> "ConfigEntry":
        """Create an entry from a ConfigEntry or a ``(key, value)`` pair."""
        if isinstance(pair, ConfigEntry):
            return pair
        try:
            key, value = pair
        except (TypeError, ValueError):
            raise ValidationError("entry", pair, "Expected a (key, value) pair")
        return cls(key=key, value=value)

    def as_tuple(self) -> Tuple[str, str]:
        """Return the entry as a ``(key, value)`` tuple."""
        return (self.key, self.value)

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass(frozen=True)
class FileLoadFailure:
    """Record of a property file that was skipped during a load."""

    path: Path
    error: Exception
    kind: FailureKind

    @property
    def reason(self) -> str:
        """Human-readable cause of the failure."""
        return str(self.error)
