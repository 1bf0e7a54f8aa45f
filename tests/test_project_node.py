"""Tests for the ProjectNode tree model."""

import gc
from pathlib import Path

import pytest

from core.exceptions import ValidationError
from core.models import ProjectNode
from interfaces import ProjectTreeNode


class TestProjectNode:
    """Test node construction and ownership."""

    def test_root_node(self):
        node = ProjectNode("/work")

        assert node.directory == Path("/work")
        assert node.parent is None
        assert node.is_root
        assert node.children == []

    def test_empty_directory_rejected(self):
        with pytest.raises(ValidationError):
            ProjectNode("")

    def test_add_child_relative_and_absolute(self):
        root = ProjectNode("/work")

        relative = root.add_child("app")
        absolute = root.add_child("/elsewhere/lib")

        assert relative.directory == Path("/work/app")
        assert absolute.directory == Path("/elsewhere/lib")
        assert relative.parent is root
        assert not relative.is_root
        assert root.children == [relative, absolute]

    def test_children_list_is_a_copy(self):
        root = ProjectNode("/work")
        root.add_child("app")

        root.children.clear()

        assert len(root.children) == 1

    def test_walk_is_depth_first(self):
        root = ProjectNode("/work")
        a = root.add_child("a")
        a1 = a.add_child("a1")
        b = root.add_child("b")

        assert list(root.walk()) == [root, a, a1, b]

    def test_parent_is_held_weakly(self):
        root = ProjectNode("/work")
        child = root.add_child("app")

        del root
        gc.collect()

        with pytest.raises(ValidationError):
            child.parent
        assert not child.is_root

    def test_released_parent_of_chained_child(self):
        """A child built off a temporary root cannot pass itself off as a root."""
        child = ProjectNode("/work").add_child("app")
        gc.collect()

        with pytest.raises(ValidationError):
            child.parent

    def test_constructor_parent_registers_child(self):
        root = ProjectNode("/work")

        child = ProjectNode("/work/lib", parent=root)

        assert child.parent is root
        assert root.children == [child]
        assert list(root.walk()) == [root, child]

    def test_satisfies_tree_node_protocol(self):
        assert isinstance(ProjectNode("/work"), ProjectTreeNode)


class TestChain:
    """Test building a linear chain between two directories."""

    def test_chain_from_root_to_leaf(self, tmp_path):
        leaf = tmp_path / "a" / "b"

        nodes = ProjectNode.chain(tmp_path, leaf)

        assert [n.directory for n in nodes] == [tmp_path, tmp_path / "a", leaf]
        assert nodes[-1].parent is nodes[1]
        assert nodes[1].parent is nodes[0]

    def test_chain_of_same_directory(self, tmp_path):
        nodes = ProjectNode.chain(tmp_path, tmp_path)

        assert len(nodes) == 1
        assert nodes[0].is_root

    def test_chain_rejects_leaf_outside_root(self, tmp_path):
        with pytest.raises(ValidationError):
            ProjectNode.chain(tmp_path / "a", tmp_path / "b")
