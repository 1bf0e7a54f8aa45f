"""Tests for the projectenv command line interface."""

import json
import sys

import pytest
from loguru import logger

from projectenv.api.cli.main import run
from tests import create_test_file


@pytest.fixture(autouse=True)
def restore_logger():
    """Put loguru back to its default sink after the CLI reconfigures it."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def layered_project(project_tree):
    root, child = project_tree
    create_test_file(root, ".env", "MODE=prod\nSHARED=root\n")
    create_test_file(child, ".env", "MODE=dev\nDEBUG=true\n")
    return root, child


class TestShowCommand:
    """Test the show command."""

    def test_show_only_files_text(self, layered_project, capsys):
        root, child = layered_project

        status = run(["show", str(child), "--root", str(root), "--only-files"])

        assert status == 0
        assert capsys.readouterr().out.splitlines() == [
            "DEBUG=true", "MODE=dev", "SHARED=root",
        ]

    def test_show_json_includes_host_environment(self, layered_project, capsys, monkeypatch):
        root, child = layered_project
        monkeypatch.setenv("CLI_TEST_HOST", "from-host")

        status = run(["show", str(child), "--root", str(root), "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert status == 0
        assert data["CLI_TEST_HOST"] == "from-host"
        assert data["MODE"] == "dev"

    def test_show_without_root_uses_path_only(self, layered_project, capsys):
        _, child = layered_project

        run(["show", str(child), "--only-files"])

        assert capsys.readouterr().out.splitlines() == ["DEBUG=true", "MODE=dev"]

    def test_show_reports_skipped_files(self, layered_project, capsys):
        root, child = layered_project
        create_test_file(root, "broken.env", "=no key\n")

        status = run(["show", str(child), "--root", str(root), "--only-files"])

        captured = capsys.readouterr()
        assert status == 0
        assert "broken.env" in captured.err
        assert "MODE=dev" in captured.out

    def test_show_uses_project_settings_file(self, layered_project, capsys):
        root, child = layered_project
        (root / ".projectenv.yaml").write_text("extensions: [props]\n")
        create_test_file(child, "app.props", "ONLY=props\n")

        run(["show", str(child), "--root", str(root), "--only-files"])

        assert capsys.readouterr().out.splitlines() == ["ONLY=props"]

    def test_path_outside_root_fails(self, layered_project, tmp_path):
        root, _ = layered_project
        outside = tmp_path / "outside"
        outside.mkdir()

        with pytest.raises(SystemExit) as exc_info:
            run(["show", str(outside), "--root", str(root)])

        assert exc_info.value.code == 1


class TestGetCommand:
    """Test the get command."""

    def test_get_existing_key(self, layered_project, capsys):
        root, child = layered_project

        assert run(["get", "MODE", str(child), "--root", str(root)]) == 0
        assert capsys.readouterr().out == "dev\n"

    def test_get_missing_key(self, layered_project, capsys):
        root, child = layered_project

        assert run(["get", "NOT_SET_ANYWHERE", str(child), "--root", str(root)]) == 1
        assert "NOT_SET_ANYWHERE is not set" in capsys.readouterr().err

    def test_get_missing_key_with_default(self, layered_project, capsys):
        _, child = layered_project

        assert run(["get", "NOT_SET_ANYWHERE", str(child), "--default", "fallback"]) == 0
        assert capsys.readouterr().out == "fallback\n"


class TestDebugSetting:
    """Test that the debug setting turns on verbose logging."""

    def test_debug_environment_variable(self, layered_project, capsys, monkeypatch):
        _, child = layered_project
        monkeypatch.setenv("PROJECTENV_DEBUG", "true")

        assert run(["show", str(child)]) == 0
        assert "Parsed 2 entries from" in capsys.readouterr().err

    def test_debug_in_project_settings_file(self, layered_project, capsys):
        _, child = layered_project
        (child / ".projectenv.yaml").write_text("debug: true\n")

        run(["show", str(child)])

        assert "Parsed 2 entries from" in capsys.readouterr().err

    def test_quiet_by_default(self, layered_project, capsys):
        _, child = layered_project

        run(["show", str(child)])

        assert "Parsed" not in capsys.readouterr().err


class TestMain:
    """Test top level behavior."""

    def test_no_command_prints_help(self, capsys):
        assert run([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_missing_settings_file_fails(self, layered_project, tmp_path):
        _, child = layered_project

        status = run(["show", str(child), "--config", str(tmp_path / "missing.yaml")])

        assert status == 1
