"""Selection tree ownership, flag toggling, and change notification.

This module provides the SelectionTree class which owns a built tree of directory and
file nodes, addresses every node by its segment path, and is the single place where
the user-facing flags change.
"""

from typing import Callable, Dict, Iterator, List

from anytree import PreOrderIter

from dir2csv.exceptions import TreeStructureError
from dir2csv.selection_tree.flatten import collect_enabled_paths, iterate_enabled_paths
from dir2csv.selection_tree.tree_node import DirectoryNode, FileNode, TreeNode
from dir2csv.types import SegmentPath

Listener = Callable[["SelectionTree"], None]


class SelectionTree:
    """The live tree behind one picked directory.

    Nodes are addressed by their ``full_path``, which is stable for the lifetime of the
    tree. Every toggle bumps ``version`` and then calls each subscribed listener with the
    tree, so a view can redraw without comparing node identities.

    Attributes:
        root (DirectoryNode): The root node of the picked directory.
        version (int): Counter incremented by every flag change.

    Example:
        >>> root = DirectoryNode(("R",), expanded=True)
        >>> _ = FileNode(("R", "a.txt"), parent=root)
        >>> tree = SelectionTree(root)
        >>> tree.toggle_enabled(("R", "a.txt"))
        False
        >>> tree.version, tree.enabled_count
        (1, 0)
    """

    def __init__(self, root: DirectoryNode) -> None:
        """Initialize a SelectionTree.

        Args:
            root: Root of an already built tree.

        Raises:
            TreeStructureError: If ``root`` is not a directory node.
        """
        if not isinstance(root, DirectoryNode):
            raise TreeStructureError(f"The root of a selection tree must be a directory, got {root!r}")
        self.root = root
        self.version = 0
        self._listeners: List[Listener] = []
        self._index: Dict[SegmentPath, TreeNode] = {node.full_path: node for node in PreOrderIter(root)}
        self._file_count = sum(1 for node in self._index.values() if isinstance(node, FileNode))
        self._directory_count = len(self._index) - self._file_count - 1

    @property
    def name(self) -> str:
        return self.root.name

    @property
    def file_count(self) -> int:
        """Number of files in the tree."""
        return self._file_count

    @property
    def directory_count(self) -> int:
        """Number of directories in the tree, excluding the root."""
        return self._directory_count

    @property
    def enabled_count(self) -> int:
        """Number of files currently included in the export."""
        return sum(1 for node in self._index.values() if isinstance(node, FileNode) and node.enabled)

    def node(self, full_path: SegmentPath) -> TreeNode:
        """Look up a node by its segment path.

        Raises:
            KeyError: If no node has this path.
        """
        try:
            return self._index[tuple(full_path)]
        except KeyError:
            raise KeyError(f"No node at {'/'.join(full_path)}") from None

    def __contains__(self, full_path: object) -> bool:
        return isinstance(full_path, tuple) and full_path in self._index

    def toggle_enabled(self, full_path: SegmentPath) -> bool:
        """Flip whether a file is included in the export.

        Args:
            full_path: Segment path of a file node.

        Returns:
            The new value of the file's ``enabled`` flag.

        Raises:
            KeyError: If no node has this path.
            TreeStructureError: If the node is a directory.
        """
        node = self.node(full_path)
        if not isinstance(node, FileNode):
            raise TreeStructureError(f"Only files can be enabled or disabled: {'/'.join(full_path)}")
        node.enabled = not node.enabled
        self._changed()
        return node.enabled

    def toggle_expanded(self, full_path: SegmentPath) -> bool:
        """Flip whether a directory shows its children.

        Args:
            full_path: Segment path of a directory node.

        Returns:
            The new value of the directory's ``expanded`` flag.

        Raises:
            KeyError: If no node has this path.
            TreeStructureError: If the node is a file.
        """
        node = self.node(full_path)
        if not isinstance(node, DirectoryNode):
            raise TreeStructureError(f"Only directories can be expanded or collapsed: {'/'.join(full_path)}")
        node.expanded = not node.expanded
        self._changed()
        return node.expanded

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every flag change.

        Returns:
            A callable that removes the listener again. Calling it twice is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        self.version += 1
        for listener in list(self._listeners):
            listener(self)

    def iterate_enabled_paths(self) -> Iterator[SegmentPath]:
        """Iterate over the root-relative paths of enabled files, in tree order."""
        yield from iterate_enabled_paths(self.root)

    def collect_enabled_paths(self) -> List[SegmentPath]:
        return collect_enabled_paths(self.root)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the currently visible rows of the tree one line at a time.

        Children of collapsed directories are not shown. Directories are marked with
        ``▼`` (expanded) or ``▶`` (collapsed), files with ``[x]`` (enabled) or ``[ ]``.

        Example:
            >>> root = DirectoryNode(("R",), expanded=True)
            >>> docs = DirectoryNode(("R", "docs"), parent=root)
            >>> _ = FileNode(("R", "docs", "guide.md"), parent=docs)
            >>> _ = FileNode(("R", "a.txt"), parent=root, enabled=False)
            >>> print(SelectionTree(root).get_tree_representation())
            R/ ▼
            ├── docs/ ▶
            └── [ ] a.txt
        """

        def label(node: TreeNode) -> str:
            if isinstance(node, DirectoryNode):
                return f"{node.name}/ {'▼' if node.expanded else '▶'}"
            return f"[{'x' if node.enabled else ' '}] {node.name}"

        def write_node(node: TreeNode, prefix: str, is_last: bool, is_root: bool) -> Iterator[str]:
            if is_root:
                yield label(node)
            else:
                connector = "└── " if is_last else "├── "
                yield f"{prefix}{connector}{label(node)}"

            if isinstance(node, DirectoryNode) and node.expanded:
                # Direct children of the root get no indentation
                child_prefix = "" if is_root else prefix + ("    " if is_last else "│   ")
                for i, child in enumerate(node.children):
                    yield from write_node(child, child_prefix, i == len(node.children) - 1, False)

        yield from write_node(self.root, "", True, True)

    def get_tree_representation(self) -> str:
        return "\n".join(self.stream_tree_representation())
