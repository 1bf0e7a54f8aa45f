"""Tests for EnvironmentResolver layering and load reports."""

import gc
from pathlib import Path
from unittest.mock import patch

import pytest

from core.exceptions import CycleError, ValidationError
from core.models import ProjectNode
from core.types import FailureKind
from projectenv.core.config import ProjectEnvConfig
from projectenv.store import EnvironmentStore
from providers.parsing import PropertiesParser
from services import EnvironmentResolver, snapshot_host_environment
from tests import create_test_file


def resolve(root, child, host=None, config=None):
    nodes = ProjectNode.chain(root, child)
    resolver = EnvironmentResolver(host_environment=host or {}, config=config)
    return resolver, resolver.load(nodes[-1])


class TestLayering:
    """Test how layers combine."""

    def test_scenario_child_overrides_root(self, project_tree):
        root, child = project_tree
        create_test_file(root, "app.env", "MODE=prod\n")
        create_test_file(child, "app.env", "MODE=dev\nDEBUG=true\n")
        host = {"PATH": "/usr/bin", "HOME": "/home/dev"}

        _, store = resolve(root, child, host)

        assert store.get("MODE") == "dev"
        assert store.get("DEBUG") == "true"
        assert store.size() == len(host) + 2

    def test_disjoint_layers_union(self, project_tree):
        root, child = project_tree
        create_test_file(root, ".env", "B1=root\nB2=root\n")
        create_test_file(child, ".env", "C1=leaf\n")

        _, store = resolve(root, child, {"A1": "host"})

        assert store.to_dict() == {"A1": "host", "B1": "root", "B2": "root", "C1": "leaf"}

    @pytest.mark.parametrize("level", ["root", "child"])
    def test_file_layer_beats_host(self, project_tree, level):
        root, child = project_tree
        directory = root if level == "root" else child
        create_test_file(directory, ".env", "Y=file\n")

        _, store = resolve(root, child, {"Y": "host"})

        assert store.get("Y") == "file"

    def test_host_value_survives_when_not_overridden(self, project_tree):
        root, child = project_tree
        create_test_file(root, ".env", "OTHER=1\n")

        _, store = resolve(root, child, {"Y": "host"})

        assert store.get("Y") == "host"

    def test_files_within_a_level_apply_in_sorted_order(self, project_tree):
        root, child = project_tree
        create_test_file(child, "b.env", "KEY=from-b\n")
        create_test_file(child, "a.env", "KEY=from-a\n")
        create_test_file(child, ".env", "KEY=from-dotenv\n")

        resolver, store = resolve(root, child)

        assert store.get("KEY") == "from-b"
        assert resolver.last_report.files_loaded == [
            child / ".env", child / "a.env", child / "b.env",
        ]

    def test_only_configured_extensions_are_loaded(self, project_tree):
        root, child = project_tree
        create_test_file(root, ".env", "A=1\n")
        create_test_file(root, "app.properties", "B=2\n")
        create_test_file(root, "notes.txt", "C=3\n")

        _, store = resolve(root, child, config=ProjectEnvConfig(extensions=["properties"]))

        assert store.to_dict() == {"B": "2"}

    def test_recursive_setting_reaches_nested_directories(self, project_tree):
        root, child = project_tree
        create_test_file(child, "conf/extra.env", "NESTED=yes\n")

        _, flat = resolve(root, child)
        _, deep = resolve(root, child, config=ProjectEnvConfig(recursive=True))

        assert "NESTED" not in flat
        assert deep.get("NESTED") == "yes"


class TestEdgeCases:
    """Test degenerate trees and inputs."""

    def test_empty_tree_yields_empty_store(self, tmp_path):
        resolver = EnvironmentResolver(host_environment={})

        store = resolver.load(ProjectNode(tmp_path))

        assert store.size() == 0
        assert resolver.last_report.ok
        assert resolver.last_report.nodes == [tmp_path]

    def test_missing_directory_is_skipped(self, tmp_path):
        root = ProjectNode(tmp_path)
        create_test_file(tmp_path, ".env", "A=1\n")
        missing = root.add_child("not-created")

        store = EnvironmentResolver(host_environment={}).load(missing)

        assert store.to_dict() == {"A": "1"}

    def test_host_environment_only(self, tmp_path):
        store = EnvironmentResolver(host_environment={"ONLY": "host"}).load(ProjectNode(tmp_path))

        assert store.to_dict() == {"ONLY": "host"}

    def test_cycle_is_reported(self):
        class LoopNode:
            directory = Path("/loop")

            @property
            def parent(self):
                return self

        with pytest.raises(CycleError):
            EnvironmentResolver(host_environment={}).load(LoopNode())

    def test_released_ancestor_is_an_error(self, project_tree):
        root, child = project_tree
        create_test_file(root, ".env", "ROOT_KEY=root\n")
        create_test_file(child, ".env", "LEAF_KEY=leaf\n")
        leaf = ProjectNode(root).add_child("child")
        gc.collect()

        resolver = EnvironmentResolver(host_environment={})

        with pytest.raises(ValidationError):
            resolver.load(leaf)
        assert "LEAF_KEY" not in resolver.store

    def test_process_environment_is_default_host(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PROJECTENV_TEST_MARKER", "present")

        store = EnvironmentResolver().load(ProjectNode(tmp_path))

        assert store.get("PROJECTENV_TEST_MARKER") == "present"

    def test_host_environment_is_captured_once(self, tmp_path):
        host = {"A": "1"}
        resolver = EnvironmentResolver(host_environment=host)
        host["A"] = "changed"

        assert resolver.load(ProjectNode(tmp_path)).get("A") == "1"
        assert resolver.host_environment == {"A": "1"}


class TestFailureIsolation:
    """Test that bad files are skipped without aborting the load."""

    def test_malformed_root_file_is_dropped_whole(self, project_tree):
        root, child = project_tree
        create_test_file(root, ".env", "GOOD=1\nbad=\\uZZZZ\n")
        create_test_file(child, ".env", "LEAF=yes\n")

        resolver, store = resolve(root, child)

        assert store.to_dict() == {"LEAF": "yes"}
        report = resolver.last_report
        assert not report.ok
        assert len(report.failures) == 1
        failure = report.failures[0]
        assert failure.path == root / ".env"
        assert failure.kind == FailureKind.PARSE
        assert "Malformed" in failure.reason
        assert failure.error.context["node"] == str(root)

    def test_empty_key_file_is_dropped(self, project_tree):
        root, child = project_tree
        create_test_file(child, ".env", "=value\n")
        create_test_file(child, "other.env", "KEPT=1\n")

        _, store = resolve(root, child)

        assert store.to_dict() == {"KEPT": "1"}

    def test_unreadable_file_is_skipped(self, project_tree):
        root, child = project_tree
        create_test_file(root, ".env", "ROOT=1\n")
        broken = create_test_file(child, ".env", "LEAF=1\n")
        original = PropertiesParser.parse_file

        def failing_parse_file(self, file_path):
            if Path(file_path) == broken:
                raise PermissionError(13, "Permission denied", str(file_path))
            return original(self, file_path)

        with patch.object(PropertiesParser, "parse_file", failing_parse_file):
            resolver, store = resolve(root, child)

        assert store.to_dict() == {"ROOT": "1"}
        assert resolver.last_report.failures[0].kind == FailureKind.IO


class TestRepeatedLoads:
    """Test loading more than once."""

    def test_load_is_idempotent(self, project_tree):
        root, child = project_tree
        create_test_file(root, ".env", "A=1\nB=2\n")
        create_test_file(child, ".env", "B=3\n")
        nodes = ProjectNode.chain(root, child)
        resolver = EnvironmentResolver(host_environment={"H": "h"})

        first = resolver.load(nodes[-1]).to_dict()
        second = resolver.load(nodes[-1]).to_dict()

        assert first == second == {"H": "h", "A": "1", "B": "3"}

    def test_injected_store_is_populated(self, tmp_path):
        create_test_file(tmp_path, ".env", "A=1\n")
        store = EnvironmentStore({"EXISTING": "kept"})

        resolver = EnvironmentResolver(host_environment={}, store=store)

        assert resolver.load(ProjectNode(tmp_path)) is store
        assert store.to_dict() == {"EXISTING": "kept", "A": "1"}


class TestLoadReport:
    """Test the report of a load pass."""

    def test_report_contents(self, project_tree):
        root, child = project_tree
        create_test_file(root, ".env", "A=1\nB=2\n")
        create_test_file(child, ".env", "B=3\n")

        resolver, _ = resolve(root, child, {"H": "h"})
        report = resolver.last_report

        assert report.nodes == [root, child]
        assert report.files_loaded == [root / ".env", child / ".env"]
        assert report.file_keys == {"A", "B"}
        assert report.host_entries == 1
        assert report.entries_applied == 4
        assert report.load_time >= 0

        data = report.to_dict()
        assert data["file_keys"] == ["A", "B"]
        assert data["failures"] == []

    def test_no_report_before_first_load(self):
        assert EnvironmentResolver(host_environment={}).last_report is None


class TestHostSnapshot:
    """Test host environment validation."""

    def test_snapshot_copies_mapping(self):
        host = {"A": "1"}
        snapshot = snapshot_host_environment(host)

        assert snapshot == host
        assert snapshot is not host

    @pytest.mark.parametrize("host", [
        ["A=1"],
        {"": "value"},
        {1: "value"},
        {"A": None},
    ])
    def test_invalid_host_environment(self, host):
        with pytest.raises(ValidationError):
            EnvironmentResolver(host_environment=host)
