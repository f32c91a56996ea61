"""Asynchronous construction of selection trees from a directory source."""

import logging
from typing import Any, List

from dir2csv.directory_source import DirectorySource
from dir2csv.exceptions import DirectoryReadError
from dir2csv.natural_order import natural_order
from dir2csv.selection_tree.tree_node import DirectoryNode, FileNode, TreeNode
from dir2csv.types import EntryKind, SegmentPath

logger = logging.getLogger(__name__)


async def build_tree(source: DirectorySource, handle: Any) -> DirectoryNode:
    """Walk a directory and return the fully materialized selection tree.

    The whole subtree is read eagerly. The root starts expanded, every other directory
    collapsed, and every file enabled. Siblings are ordered directories first, each group
    in natural order of names.

    Entries that are neither files nor directories (for example symlinks the source does
    not resolve) are skipped.

    Args:
        source: The directory source that understands ``handle``.
        handle: Handle of the directory to walk.

    Returns:
        The root node, whose ``full_path`` is the directory's own name.

    Raises:
        DirectoryReadError: If any directory cannot be enumerated. No partial tree is returned.

    Example:
        >>> import asyncio
        >>> from dir2csv.directory_source import InMemoryDirectorySource
        >>> source = InMemoryDirectorySource("R")
        >>> root = asyncio.run(build_tree(source, {"z.txt": None, "B": {}, "A10": {}, "A2": {}}))
        >>> [child.name for child in root.children]
        ['A2', 'A10', 'B', 'z.txt']
    """
    root = await _build_directory(source, handle, (source.name_of(handle),))
    root.expanded = True
    logger.info("Built tree for %s", root.name)
    return root


async def _build_directory(source: DirectorySource, handle: Any, full_path: SegmentPath) -> DirectoryNode:
    """Recursively create the node for one directory and everything below it."""
    children: List[TreeNode] = []
    try:
        async for entry in source.entries(handle):
            child_path = full_path + (entry.name,)
            if entry.kind is EntryKind.FILE:
                children.append(FileNode(child_path))
            elif entry.kind is EntryKind.DIRECTORY:
                children.append(await _build_directory(source, entry.handle, child_path))
            else:
                logger.debug("Skipping %s: neither a file nor a directory", "/".join(child_path))
    except OSError as e:
        raise DirectoryReadError(full_path, str(e)) from e

    return DirectoryNode(full_path, children=order_siblings(children))


def order_siblings(children: List[TreeNode]) -> List[TreeNode]:
    """Order siblings: directories before files, natural order of names within each group.

    The natural ordering is applied to all names first; the directories-first step is a
    stable sort, so it keeps the natural order inside each group.
    """
    ordered = [children[index] for index in natural_order([child.name for child in children])]
    ordered.sort(key=lambda child: not isinstance(child, DirectoryNode))
    return ordered
