"""Unit tests for the tree node classes."""

import pytest

from dir2csv.exceptions import TreeStructureError
from dir2csv.selection_tree.tree_node import DirectoryNode, FileNode


def test_directory_node_initialization():
    root = DirectoryNode(("R",))
    assert root.name == "R"
    assert root.full_path == ("R",)
    assert root.relative_path == ()
    assert root.expanded is False
    assert root.children == ()


def test_file_node_initialization():
    root = DirectoryNode(("R",))
    leaf = FileNode(("R", "a.txt"), parent=root)

    assert leaf.name == "a.txt"
    assert leaf.enabled is True
    assert leaf.parent is root
    assert leaf.relative_path == ("a.txt",)
    assert root.children == (leaf,)


def test_full_path_depth_invariant():
    root = DirectoryNode(("R",))
    sub = DirectoryNode(("R", "sub"), parent=root)
    leaf = FileNode(("R", "sub", "a.txt"), parent=sub)

    for node in (root, sub, leaf):
        assert len(node.full_path) == node.depth + 1
        assert node.full_path[-1] == node.name


def test_full_path_is_read_only():
    node = FileNode(("R", "a.txt"))
    with pytest.raises(AttributeError):
        node.full_path = ("R", "b.txt")


def test_full_path_from_list_is_stored_as_tuple():
    assert FileNode(["R", "a.txt"]).full_path == ("R", "a.txt")


def test_empty_full_path_rejected():
    with pytest.raises(ValueError):
        DirectoryNode(())


def test_children_in_constructor_keep_order():
    b = FileNode(("R", "b"))
    a = FileNode(("R", "a"))
    root = DirectoryNode(("R",), children=[b, a], expanded=True)

    assert root.children == (b, a)
    assert root.expanded is True


def test_file_node_refuses_children():
    leaf = FileNode(("R", "a.txt"))
    with pytest.raises(TreeStructureError):
        FileNode(("R", "a.txt", "b"), parent=leaf)
    with pytest.raises(TreeStructureError):
        DirectoryNode(("R", "a.txt", "sub"), parent=leaf)
    assert leaf.children == ()


def test_empty_directory_is_still_a_directory():
    empty = DirectoryNode(("R", "empty"), children=[])
    assert isinstance(empty, DirectoryNode)
    assert empty.children == ()


@pytest.mark.parametrize(
    "full_path",
    [
        ("R", "other", "a.txt"),
        ("Q", "a.txt"),
        ("a.txt",),
    ],
)
def test_attach_requires_path_extending_parent(full_path):
    root = DirectoryNode(("R",))
    with pytest.raises(TreeStructureError):
        FileNode(full_path, parent=root)
    assert root.children == ()


def test_reparenting_checks_path():
    root = DirectoryNode(("R",))
    sub = DirectoryNode(("R", "sub"), parent=root)
    leaf = FileNode(("R", "a.txt"), parent=root)

    with pytest.raises(TreeStructureError):
        leaf.parent = sub
    assert sub.children == ()
    with pytest.raises(TreeStructureError):
        DirectoryNode(("S",), children=[FileNode(("R", "b.txt"))])
