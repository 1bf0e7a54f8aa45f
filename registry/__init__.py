"""Extension registry for ProjectEnv - exposes resolved stores under named extension points."""

from threading import RLock
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from core.exceptions import ConfigurationError
from core.types import DEFAULT_EXTENSION_NAME
from interfaces.project_tree import ProjectTreeNode
from projectenv.core.config import ProjectEnvConfig
from projectenv.store import EnvironmentStore
from services.environment_resolver import EnvironmentResolver


class ExtensionRegistry:
    """Registry of environment stores keyed by extension name.

    This is the host-facing adapter: a host creates the extension for its
    project node once and downstream code looks the store up by name.
    """

    def __init__(self, config: Optional[ProjectEnvConfig] = None):
        """Initialize the extension registry.

        Args:
            config: Settings handed to resolvers the registry creates
        """
        self._config = config
        self._extensions: Dict[str, EnvironmentStore] = {}
        self._resolvers: Dict[str, EnvironmentResolver] = {}
        self._lock = RLock()

    def register(self, name: str, store: EnvironmentStore) -> EnvironmentStore:
        """Register an already populated store.

        Args:
            name: Extension name
            store: Store to expose

        Returns:
            The registered store

        Raises:
            ConfigurationError: If the name is empty or already registered
        """
        if not name:
            raise ConfigurationError("extension_name", name, "Extension name cannot be empty")

        with self._lock:
            if name in self._extensions:
                raise ConfigurationError(
                    "extension_name", name, "An extension with this name is already registered"
                )
            self._extensions[name] = store

        logger.debug(f"Registered environment store as {name} (size={store.size()})")
        return store

    def create(
        self,
        project_node: ProjectTreeNode,
        name: Optional[str] = None,
        resolver: Optional[EnvironmentResolver] = None,
        host_environment: Optional[Mapping[str, str]] = None,
    ) -> EnvironmentStore:
        """Resolve ``project_node`` and register the resulting store.

        Args:
            project_node: Project level the store is created for
            name: Extension name; the configured ``extension_name`` when None
            resolver: Resolver to use; a new one built from the registry settings when None
            host_environment: Base layer for a newly built resolver

        Returns:
            The loaded and registered store
        """
        if resolver is None:
            resolver = EnvironmentResolver(host_environment=host_environment, config=self._config)
        if name is None:
            name = resolver.config.extension_name or DEFAULT_EXTENSION_NAME

        store = resolver.load(project_node)
        self.register(name, store)

        with self._lock:
            self._resolvers[name] = resolver
        return store

    def get(self, name: str = DEFAULT_EXTENSION_NAME) -> EnvironmentStore:
        """Get a registered store.

        Raises:
            ConfigurationError: If nothing is registered under ``name``
        """
        with self._lock:
            if name not in self._extensions:
                raise ConfigurationError("extension_name", name, "No extension registered")
            return self._extensions[name]

    def get_resolver(self, name: str = DEFAULT_EXTENSION_NAME) -> Optional[EnvironmentResolver]:
        """Resolver that produced a store registered through ``create``, if any."""
        with self._lock:
            return self._resolvers.get(name)

    def unregister(self, name: str) -> bool:
        """Remove a registered store.

        Returns:
            True if something was removed
        """
        with self._lock:
            self._resolvers.pop(name, None)
            return self._extensions.pop(name, None) is not None

    def names(self) -> List[str]:
        """Registered extension names, sorted."""
        with self._lock:
            return sorted(self._extensions)

    def __contains__(self, name: Any) -> bool:
        with self._lock:
            return name in self._extensions


# Global registry instance (lazy initialization)
_registry: Optional[ExtensionRegistry] = None


def get_registry() -> ExtensionRegistry:
    """Get the global registry instance.

    Returns:
        Global ExtensionRegistry instance
    """
    global _registry
    if _registry is None:
        _registry = ExtensionRegistry()
    return _registry


def reset_registry() -> None:
    """Drop the global registry instance."""
    global _registry
    _registry = None


def apply(project_node: ProjectTreeNode, name: Optional[str] = None) -> EnvironmentStore:
    """Create and load the environment extension for a project in the global registry.

    Args:
        project_node: Project level the store is created for
        name: Extension name; the configured default when None

    Returns:
        The loaded and registered store
    """
    return get_registry().create(project_node, name=name)


__all__ = [
    'ExtensionRegistry',
    'get_registry',
    'reset_registry',
    'apply',
]
