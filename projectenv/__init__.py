"""ProjectEnv - Hierarchical project environment resolution from layered .env files."""

__version__ = "0.3.0"
__description__ = "Hierarchical project environment resolution from layered .env files"

# Import modules only when needed to avoid import cycles with the service layer
__all__ = [
    "EnvironmentStore",
    "EnvironmentResolver",
    "ProjectNode",
    "ProjectEnvConfig",
]

def __getattr__(name: str):
    """Lazy import to avoid dependency issues during setup."""
    if name == "EnvironmentStore":
        from .store import EnvironmentStore
        return EnvironmentStore
    elif name == "EnvironmentResolver":
        from services.environment_resolver import EnvironmentResolver
        return EnvironmentResolver
    elif name == "ProjectNode":
        from core.models import ProjectNode
        return ProjectNode
    elif name == "ProjectEnvConfig":
        from .core.config import ProjectEnvConfig
        return ProjectEnvConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
