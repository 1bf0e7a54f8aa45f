"""Base service class for ProjectEnv services."""

from abc import ABC
from typing import Optional

from projectenv.store import EnvironmentStore


class BaseService(ABC):
    """Base service class providing common functionality and dependency management."""

    def __init__(self, store: Optional[EnvironmentStore] = None):
        """Initialize service with its environment store dependency.

        Args:
            store: Store the service reads and writes; a new empty store when None
        """
        self._store = store if store is not None else EnvironmentStore()

    @property
    def store(self) -> EnvironmentStore:
        """Get environment store instance."""
        return self._store
