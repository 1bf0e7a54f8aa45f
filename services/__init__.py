"""Service layer for ProjectEnv - business logic coordination and dependency injection."""

from .base_service import BaseService
from .environment_resolver import EnvironmentResolver, LoadReport, snapshot_host_environment
from .hierarchy_walker import HierarchyWalker

__all__ = [
    'BaseService',
    'EnvironmentResolver',
    'HierarchyWalker',
    'LoadReport',
    'snapshot_host_environment',
]
