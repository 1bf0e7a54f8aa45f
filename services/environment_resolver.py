"""Environment resolver service for ProjectEnv - layers host environment and property files."""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Set

from loguru import logger

from core.exceptions import ParseError, ValidationError
from core.models import FileLoadFailure
from core.types import FailureKind
from interfaces.file_discovery import FileDiscovery
from interfaces.project_tree import ProjectTreeNode
from interfaces.property_parser import PropertyParser
from projectenv.core.config import ProjectEnvConfig
from projectenv.store import EnvironmentStore
from providers.discovery import FileSystemDiscovery
from providers.parsing import PropertiesParser
from .base_service import BaseService
from .hierarchy_walker import HierarchyWalker


@dataclass
class LoadReport:
    """Result from a load pass."""
    nodes: List[Path] = field(default_factory=list)
    files_loaded: List[Path] = field(default_factory=list)
    failures: List[FileLoadFailure] = field(default_factory=list)
    file_keys: Set[str] = field(default_factory=set)
    host_entries: int = 0
    entries_applied: int = 0
    load_time: float = 0.0

    @property
    def ok(self) -> bool:
        """True when no discovered file had to be skipped."""
        return not self.failures

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [str(p) for p in self.nodes],
            "files_loaded": [str(p) for p in self.files_loaded],
            "failures": [
                {"path": str(f.path), "kind": f.kind.value, "reason": f.reason}
                for f in self.failures
            ],
            "file_keys": sorted(self.file_keys),
            "host_entries": self.host_entries,
            "entries_applied": self.entries_applied,
            "load_time": self.load_time,
        }


def snapshot_host_environment(environment: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Copy a host environment mapping, checking that it maps strings to strings.

    Args:
        environment: Mapping to copy; the process environment when None

    Raises:
        ValidationError: If the mapping is not a mapping of strings to strings
    """
    if environment is None:
        environment = os.environ

    if not isinstance(environment, Mapping):
        raise ValidationError(
            "host_environment", type(environment).__name__, "Host environment must be a mapping"
        )

    snapshot = dict(environment)
    for key, value in snapshot.items():
        if not isinstance(key, str) or not key:
            raise ValidationError("host_environment", key, "Variable names must be non-empty strings")
        if not isinstance(value, str):
            raise ValidationError(
                "host_environment", value, f"Value of {key} must be a string"
            )
    return snapshot


class EnvironmentResolver(BaseService):
    """Builds a project's environment from the host environment and ``.env`` files.

    The host environment is the base layer. Each project level, from the
    root down to the requested node, then contributes the entries of its
    property files, deeper levels overriding shallower ones.
    """

    def __init__(
        self,
        host_environment: Optional[Mapping[str, str]] = None,
        config: Optional[ProjectEnvConfig] = None,
        store: Optional[EnvironmentStore] = None,
        discovery: Optional[FileDiscovery] = None,
        parser: Optional[PropertyParser] = None,
        walker: Optional[HierarchyWalker] = None,
    ):
        """Initialize environment resolver.

        Args:
            host_environment: Base layer; a snapshot of the process environment when None
            config: Resolver settings; defaults when None
            store: Store to populate; a new empty store when None
            discovery: File discovery implementation
            parser: Property file parser implementation
            walker: Hierarchy walker implementation

        Raises:
            ValidationError: If the host environment is not a mapping of strings
        """
        super().__init__(store)
        self._config = config or ProjectEnvConfig()
        self._host_environment = snapshot_host_environment(host_environment)
        self._discovery = discovery or FileSystemDiscovery(
            self._config.extensions, self._config.case_sensitive_extensions
        )
        self._parser = parser or PropertiesParser(self._config.encoding)
        self._walker = walker or HierarchyWalker()
        self._last_report: Optional[LoadReport] = None

    @property
    def config(self) -> ProjectEnvConfig:
        return self._config

    @property
    def host_environment(self) -> Dict[str, str]:
        """Copy of the base layer captured at construction."""
        return dict(self._host_environment)

    @property
    def last_report(self) -> Optional[LoadReport]:
        """Report of the most recent ``load``, or None before the first one."""
        return self._last_report

    def load(self, node: ProjectTreeNode) -> EnvironmentStore:
        """Populate the store for ``node`` and return it.

        Args:
            node: Deepest project level to resolve

        Returns:
            The populated store

        Raises:
            CycleError: If the node's parent chain loops
            ValidationError: If a node's parent has been released
        """
        start_time = time.time()
        report = LoadReport()

        report.host_entries = self._store.update(self._host_environment)
        report.entries_applied = report.host_entries

        for level in self._walker.ancestry_path(node):
            report.nodes.append(level.directory)
            self._load_level(level, report)

        report.load_time = time.time() - start_time
        self._last_report = report

        logger.info(
            f"Loaded environment for {node.directory}: {len(report.nodes)} levels, "
            f"{len(report.files_loaded)} files, {report.entries_applied} entries applied, "
            f"{len(report.failures)} files skipped"
        )
        return self._store

    def _load_level(self, level: ProjectTreeNode, report: LoadReport) -> None:
        files = self._discovery.discover(
            level.directory,
            self._config.extensions,
            recursive=self._config.recursive,
        )

        for file_path in sorted(files):
            try:
                entries = self._parser.parse_file(file_path)
            except (OSError, ParseError) as e:
                if isinstance(e, ParseError):
                    kind = FailureKind.PARSE
                    e.add_context("node", str(level.directory))
                else:
                    kind = FailureKind.IO
                report.failures.append(FileLoadFailure(file_path, e, kind))
                logger.warning(f"Failed to load {file_path} ({kind.value} error): {e}")
                continue

            for entry in entries:
                self._store.set(entry.key, entry.value)
                report.file_keys.add(entry.key)
            report.entries_applied += len(entries)
            report.files_loaded.append(file_path)

        logger.debug(f"Level {level.directory}: {len(files)} files discovered")
