"""Environment store module for ProjectEnv - thread-safe key/value mapping of resolved configuration."""

from threading import RLock
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set

from loguru import logger

from core.exceptions import ValidationError
from core.models import ConfigEntry
from core.types import EntryAction, EntryPair


class EnvironmentStore:
    """Mutable string-to-string mapping guarded by a single re-entrant lock.

    Every read and write takes the lock, so concurrent callers never observe a
    partially applied update. Enumeration methods return snapshots taken under
    the lock; callbacks passed to ``for_each`` run on a snapshot and may call
    ``set`` without deadlocking or invalidating the iteration.
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        """Initialize environment store.

        Args:
            initial: Optional mapping copied into the store
        """
        self._data: Dict[str, str] = {}
        self._lock = RLock()

        if initial:
            self.update(initial)

        logger.debug(f"EnvironmentStore initialized: size={len(self._data)}")

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str):
            raise ValidationError("key", key, "Key must be a string")
        if not key:
            raise ValidationError("key", key, "Key cannot be empty")

    @staticmethod
    def _check_value(value: Any) -> None:
        if not isinstance(value, str):
            raise ValidationError("value", value, "Value must be a string")

    # Queries

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get the current value for a key.

        Args:
            key: Entry name
            default: Value returned when the key is not set

        Returns:
            The stored value, or ``default`` if the key is absent
        """
        with self._lock:
            return self._data.get(key, default)

    def contains_key(self, key: str) -> bool:
        """Check whether a key is set."""
        with self._lock:
            return key in self._data

    def contains_value(self, value: str) -> bool:
        """Check whether any key currently maps to ``value``."""
        with self._lock:
            return value in self._data.values()

    def size(self) -> int:
        """Number of entries in the store."""
        with self._lock:
            return len(self._data)

    # Mutation

    def set(self, key: str, value: str) -> Optional[str]:
        """Insert or overwrite an entry.

        Args:
            key: Non-empty entry name
            value: Entry value (may be empty)

        Returns:
            The previous value, or None if the key was not set

        Raises:
            ValidationError: If the key or value is not a string, or the key is empty
        """
        self._check_key(key)
        self._check_value(value)

        with self._lock:
            previous = self._data.get(key)
            self._data[key] = value
            return previous

    def set_entry(self, entry: Any) -> Optional[str]:
        """Insert or overwrite from a ConfigEntry or a ``(key, value)`` pair.

        Returns:
            The previous value, or None if the key was not set
        """
        entry = ConfigEntry.from_pair(entry)
        return self.set(entry.key, entry.value)

    def update(self, mapping: Mapping[str, str]) -> int:
        """Apply every item of ``mapping`` as a ``set`` under one lock acquisition.

        Items are validated before any of them is applied.

        Returns:
            Number of entries applied
        """
        items = list(mapping.items())
        for key, value in items:
            self._check_key(key)
            self._check_value(value)

        with self._lock:
            for key, value in items:
                self._data[key] = value
        return len(items)

    # Enumeration

    def keys(self) -> List[str]:
        """Snapshot of the current keys."""
        with self._lock:
            return list(self._data.keys())

    def values(self) -> List[str]:
        """Snapshot of the current values."""
        with self._lock:
            return list(self._data.values())

    def entries(self) -> Set[EntryPair]:
        """Snapshot of the current ``(key, value)`` pairs."""
        with self._lock:
            return set(self._data.items())

    def for_each(self, action: EntryAction) -> None:
        """Invoke ``action(key, value)`` for every entry.

        The action sees the entries present when iteration started.
        """
        with self._lock:
            snapshot = list(self._data.items())

        for key, value in snapshot:
            action(key, value)

    def to_dict(self) -> Dict[str, str]:
        """Snapshot copy of the mapping."""
        with self._lock:
            return dict(self._data)

    # Container protocol

    def __getitem__(self, key: str) -> str:
        with self._lock:
            return self._data[key]

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EnvironmentStore):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"EnvironmentStore(size={self.size()})"
