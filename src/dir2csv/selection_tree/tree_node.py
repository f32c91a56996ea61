"""Node representation for directories and files in a selection tree."""

from typing import Any, Iterable, Optional, Sequence

from anytree import Node

from dir2csv.exceptions import TreeStructureError
from dir2csv.types import SegmentPath


class TreeNode(Node):  # type: ignore
    """Common base for the two node kinds of a selection tree.

    Extends anytree.Node with the node's segment path from the picked root. Note that
    anytree already defines ``path`` as the tuple of nodes from the root, so the name
    segments live in ``full_path``. Use ``DirectoryNode`` or ``FileNode``; the node kind
    is the class and never changes.

    Attributes:
        name (str): The entry's own name, always the last segment of ``full_path``.
        full_path (tuple[str, ...]): Name segments from the picked root (inclusive) to this node.
    """

    def __init__(self, full_path: Sequence[str], parent: Optional["DirectoryNode"] = None, **kwargs: Any) -> None:
        segments = tuple(full_path)
        if not segments:
            raise ValueError("full_path must contain at least the node's own name")
        # _pre_attach reads it while the parent is being set
        self._full_path: SegmentPath = segments
        super().__init__(segments[-1], parent, **kwargs)

    @property
    def full_path(self) -> SegmentPath:
        return self._full_path

    @property
    def relative_path(self) -> SegmentPath:
        """Segment path below the picked root (the root's own name stripped)."""
        return self._full_path[1:]

    def _pre_attach(self, parent: "TreeNode") -> None:
        if not isinstance(parent, DirectoryNode):
            raise TreeStructureError(f"Cannot attach {self.name!r} under file {parent.name!r}")
        if self._full_path[:-1] != parent.full_path:
            raise TreeStructureError(
                f"Cannot attach {'/'.join(self._full_path)} under {'/'.join(parent.full_path)}: "
                "the path must extend the parent's path by one segment"
            )


class DirectoryNode(TreeNode):
    """A directory of the picked subtree.

    Attributes:
        expanded (bool): Whether the children are shown (and counted by the layout sizer).
            Only a direct user toggle changes it.

    Example:
        >>> root = DirectoryNode(("R",), expanded=True)
        >>> docs = DirectoryNode(("R", "docs"), parent=root)
        >>> readme = FileNode(("R", "docs", "README.md"), parent=docs)
        >>> readme.relative_path
        ('docs', 'README.md')
        >>> docs.expanded, readme.enabled
        (False, True)
    """

    def __init__(
        self,
        full_path: Sequence[str],
        parent: Optional["DirectoryNode"] = None,
        children: Optional[Iterable[TreeNode]] = None,
        expanded: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(full_path, parent, **kwargs)
        self.expanded = expanded
        if children is not None:
            self.children = list(children)


class FileNode(TreeNode):
    """A file (leaf) of the picked subtree.

    Attributes:
        enabled (bool): Whether the file is included in the export. Only a direct user
            toggle changes it.
    """

    def __init__(
        self,
        full_path: Sequence[str],
        parent: Optional[DirectoryNode] = None,
        enabled: bool = True,
        **kwargs: Any,
    ) -> None:
        super().__init__(full_path, parent, **kwargs)
        self.enabled = enabled
