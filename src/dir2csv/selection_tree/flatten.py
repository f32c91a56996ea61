"""Flattening of a selection tree into the ordered list of exported paths."""

from typing import Iterator, List

from anytree import PreOrderIter

from dir2csv.selection_tree.tree_node import FileNode, TreeNode
from dir2csv.types import SegmentPath


def iterate_enabled_paths(node: TreeNode) -> Iterator[SegmentPath]:
    """Yield the root-relative path of every enabled file below ``node``.

    Traversal is depth-first in stored sibling order. Expansion state is ignored, so
    enabled files inside collapsed directories are included.
    """
    for leaf in PreOrderIter(node, filter_=lambda n: isinstance(n, FileNode) and n.enabled):
        yield leaf.relative_path


def collect_enabled_paths(node: TreeNode) -> List[SegmentPath]:
    """Return the root-relative paths of all enabled files, in tree order.

    Example:
        >>> from dir2csv.selection_tree.tree_node import DirectoryNode
        >>> root = DirectoryNode(("R",), expanded=True)
        >>> sub = DirectoryNode(("R", "sub"), parent=root)
        >>> a = FileNode(("R", "sub", "a.txt"), parent=sub)
        >>> b = FileNode(("R", "b.txt"), parent=root, enabled=False)
        >>> collect_enabled_paths(root)
        [('sub', 'a.txt')]
    """
    return list(iterate_enabled_paths(node))
