"""Unit tests for row-unit sizing."""

import pytest

from dir2csv.selection_tree.layout import ROW_HEIGHT, child_row_heights, node_size
from dir2csv.selection_tree.tree_node import DirectoryNode, FileNode


@pytest.fixture
def tree():
    """R(expanded): big/ with 3 files and sub/ with 2 files, empty/, top.txt."""
    root = DirectoryNode(("R",), expanded=True)
    big = DirectoryNode(("R", "big"), parent=root)
    for index in range(3):
        FileNode(("R", "big", f"f{index}"), parent=big)
    sub = DirectoryNode(("R", "big", "sub"), parent=big)
    FileNode(("R", "big", "sub", "s1"), parent=sub)
    FileNode(("R", "big", "sub", "s2"), parent=sub)
    DirectoryNode(("R", "empty"), parent=root)
    FileNode(("R", "top.txt"), parent=root)
    return root


def child(node, name):
    return next(c for c in node.children if c.name == name)


def test_file_size_follows_visibility():
    leaf = FileNode(("R", "a"))
    assert node_size(leaf) == 1
    assert node_size(leaf, visible=False) == 0


def test_collapsed_directory_is_one_regardless_of_descendants(tree):
    big = child(tree, "big")
    assert not big.expanded
    assert node_size(big) == 1


def test_invisible_expanded_directory_is_one(tree):
    big = child(tree, "big")
    big.expanded = True
    assert node_size(big, visible=False) == 1


def test_expanded_directory_sums_children(tree):
    big = child(tree, "big")
    # big, empty, top.txt each take one row
    assert node_size(tree) == 3

    big.expanded = True
    # f0, f1, f2 and collapsed sub
    assert node_size(big) == 4
    assert node_size(tree) == 6

    child(big, "sub").expanded = True
    assert node_size(tree) == 7


def test_expanded_empty_directory_floor(tree):
    empty = child(tree, "empty")
    empty.expanded = True
    assert node_size(empty) == 1


def test_nested_empty_directories_floor():
    root = DirectoryNode(("R",), expanded=True)
    only = DirectoryNode(("R", "only"), parent=root, expanded=True)
    inner = DirectoryNode(("R", "only", "inner"), parent=only, expanded=True)
    assert node_size(inner) == 1
    assert node_size(root) == 1


def test_collapsed_ancestor_hides_expanded_descendant(tree):
    big = child(tree, "big")
    child(big, "sub").expanded = True
    assert node_size(tree) == 3


def test_node_size_is_idempotent(tree):
    child(tree, "big").expanded = True
    assert node_size(tree) == node_size(tree) == node_size(tree)


def test_child_row_heights(tree):
    assert child_row_heights(tree) == [ROW_HEIGHT, ROW_HEIGHT, ROW_HEIGHT]

    big = child(tree, "big")
    big.expanded = True
    assert child_row_heights(tree, row_height=10) == [40, 10, 10]
    assert sum(child_row_heights(tree, row_height=1)) == node_size(tree)


def test_child_row_heights_of_collapsed_directory(tree):
    big = child(tree, "big")
    # Children of a collapsed directory are not visible; directories still take a row
    assert child_row_heights(big, row_height=1) == [0, 0, 0, 1]


def test_child_row_heights_rejects_non_positive_row_height(tree):
    with pytest.raises(ValueError):
        child_row_heights(tree, row_height=0)
