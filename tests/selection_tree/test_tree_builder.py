"""Unit tests for building selection trees."""

import asyncio
import logging
import random

import pytest

from dir2csv.directory_source import InMemoryDirectorySource, LocalDirectorySource
from dir2csv.exceptions import DirectoryReadError
from dir2csv.selection_tree.tree_builder import build_tree, order_siblings
from dir2csv.selection_tree.tree_node import DirectoryNode, FileNode
from dir2csv.types import EntryKind


def build(layout, root_name="R", **kwargs):
    return asyncio.run(build_tree(InMemoryDirectorySource(root_name, **kwargs), layout))


def names(node):
    return [child.name for child in node.children]


def test_scenario_directories_first_then_natural_order(sample_layout):
    root = build(sample_layout)
    assert names(root) == ["A2", "A10", "B", "z.txt"]


def test_files_in_natural_order():
    root = build({"file10": None, "file2": None, "file1": None})
    assert names(root) == ["file1", "file2", "file10"]


def test_names_without_number_sort_by_character():
    root = build({"a1.txt": None, "a.txt": None, "a 2.txt": None, "image1.png": None, "image.png": None})
    assert names(root) == ["a 2.txt", "a.txt", "a1.txt", "image.png", "image1.png"]


def test_nested_sibling_groups_are_ordered(sample_layout):
    root = build(sample_layout)
    a10 = root.children[1]
    assert names(a10) == ["inner", "x.txt"]
    assert names(root.children[2]) == ["b1.txt", "b2.txt"]


def test_ordering_is_independent_of_host_order():
    entries = [("d10", {}), ("d9", {}), ("f1.txt", None), ("f01.txt", None), ("F.txt", None), ("d", {})]
    expected = None
    for seed in range(5):
        shuffled = list(entries)
        random.Random(seed).shuffle(shuffled)
        result = names(build(dict(shuffled)))
        # Equal natural keys (f1/f01) keep host order; compare everything else
        stable = [name for name in result if name not in ("f1.txt", "f01.txt")]
        if expected is None:
            expected = stable
        assert stable == expected
    assert expected == ["d", "d9", "d10", "F.txt"]


def test_directories_always_precede_files():
    root = build({"a.txt": None, "z": {"y.txt": None, "m": {}}, "b": {}})
    for node in [root] + [child for child in root.descendants if isinstance(child, DirectoryNode)]:
        kinds = [isinstance(child, DirectoryNode) for child in node.children]
        assert kinds == sorted(kinds, reverse=True)


def test_initial_flags(sample_layout):
    root = build(sample_layout)
    assert root.expanded is True
    for node in root.descendants:
        if isinstance(node, DirectoryNode):
            assert node.expanded is False
        else:
            assert node.enabled is True


def test_paths_extend_parent_path(sample_layout):
    root = build(sample_layout)
    assert root.full_path == ("R",)
    for node in root.descendants:
        assert node.full_path == node.parent.full_path + (node.name,)
    deep = root.children[1].children[0].children[0]
    assert deep.full_path == ("R", "A10", "inner", "deep.txt")


def test_empty_directory_has_empty_children(sample_layout):
    a2 = build(sample_layout).children[0]
    assert isinstance(a2, DirectoryNode)
    assert a2.children == ()


def test_empty_root():
    root = build({})
    assert isinstance(root, DirectoryNode)
    assert root.children == ()


def test_other_entries_are_skipped(caplog):
    with caplog.at_level(logging.DEBUG, logger="dir2csv.selection_tree.tree_builder"):
        root = build({"link": EntryKind.OTHER, "a.txt": None})
    assert names(root) == ["a.txt"]
    assert "R/link" in caplog.text


def test_enumeration_failure_raises_directory_read_error(sample_layout):
    with pytest.raises(DirectoryReadError) as exc_info:
        build(sample_layout, failures={"A10/inner": PermissionError("denied")})

    assert exc_info.value.path == ("R", "A10", "inner")
    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_root_failure_raises_directory_read_error():
    with pytest.raises(DirectoryReadError) as exc_info:
        build({}, failures={"": OSError("revoked")})
    assert exc_info.value.path == ("R",)


def test_build_from_local_directory(sample_directory):
    root = asyncio.run(build_tree(LocalDirectorySource(), sample_directory))
    assert root.name == "R"
    assert names(root) == ["A2", "A10", "B", "z.txt"]
    assert names(root.children[2]) == ["b1.txt", "b2.txt"]


def test_build_from_missing_local_directory(tmp_path):
    with pytest.raises(DirectoryReadError):
        asyncio.run(build_tree(LocalDirectorySource(), tmp_path / "missing"))


def test_order_siblings_directly():
    children = [FileNode(("R", "b10")), DirectoryNode(("R", "z")), FileNode(("R", "b9")), DirectoryNode(("R", "a"))]
    assert [child.name for child in order_siblings(children)] == ["a", "z", "b9", "b10"]


def test_repeated_builds_with_one_source_keep_the_root_name():
    source = InMemoryDirectorySource("R")
    for _ in range(20):
        asyncio.run(build_tree(source, {"sub": {"a.txt": None}}))
        assert asyncio.run(build_tree(source, {})).full_path == ("R",)
