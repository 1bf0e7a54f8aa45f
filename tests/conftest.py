"""Shared fixtures for ProjectEnv tests."""

import os

import pytest

from projectenv.core.config import reset_config
from registry import reset_registry


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path_factory):
    """Keep user settings and PROJECTENV_* variables of the host out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("PROJECTENV_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("HOME", str(tmp_path_factory.mktemp("home")))

    reset_config()
    reset_registry()
    yield
    reset_config()
    reset_registry()


@pytest.fixture
def project_tree(tmp_path):
    """Root directory with one child directory, both empty."""
    root = tmp_path / "root"
    child = root / "child"
    child.mkdir(parents=True)
    return root, child
