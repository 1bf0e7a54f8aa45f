"""
Configuration helper utilities for CLI commands.

This module bridges CLI arguments with the unified configuration system and
the environment resolver.
"""

import argparse
from pathlib import Path
from typing import List, Tuple

from core.models import ProjectNode
from projectenv.core.config.unified_config import ProjectEnvConfig
from projectenv.store import EnvironmentStore
from services.environment_resolver import EnvironmentResolver, LoadReport

from ..main import setup_logging


def args_to_config(args: argparse.Namespace, project_dir: Path | None = None) -> ProjectEnvConfig:
    """
    Convert CLI arguments to unified configuration.

    Args:
        args: Parsed CLI arguments
        project_dir: Project directory for settings file loading

    Returns:
        ProjectEnvConfig instance
    """
    config_overrides = {}

    if getattr(args, 'verbose', False):
        config_overrides['debug'] = True

    return ProjectEnvConfig.load_hierarchical(
        project_dir=project_dir,
        config_file=getattr(args, 'config', None),
        **config_overrides
    )


def resolve_project(args: argparse.Namespace) -> Tuple[EnvironmentStore, LoadReport]:
    """
    Resolve the environment of ``args.path`` with ``args.root`` as the top level.

    Enables debug logging when the loaded settings ask for it.

    Args:
        args: Parsed CLI arguments carrying ``path``, ``root`` and ``config``

    Returns:
        The populated store and the load report
    """
    leaf = Path(args.path).resolve()
    root = Path(args.root).resolve() if args.root is not None else leaf

    config = args_to_config(args, project_dir=root)
    if config.debug:
        setup_logging(verbose=True)

    # The list keeps every node alive while the resolver walks parents
    nodes: List[ProjectNode] = ProjectNode.chain(root, leaf)

    resolver = EnvironmentResolver(config=config)
    store = resolver.load(nodes[-1])
    return store, resolver.last_report
