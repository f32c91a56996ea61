"""Row-unit sizing of tree nodes for proportional layout.

Each visible row of the tree view is one unit; a unit maps to ``ROW_HEIGHT`` pixels.
A collapsed or hidden directory always takes one unit, an expanded one takes the sum
of its children but never less than one.
"""

from typing import List

from dir2csv.selection_tree.tree_node import DirectoryNode, TreeNode

ROW_HEIGHT = 40


def node_size(node: TreeNode, visible: bool = True) -> int:
    """Return the number of row units ``node`` occupies.

    Args:
        node: The node to size.
        visible: Whether the node is currently rendered, i.e. all of its ancestors are
            expanded and visible.

    Returns:
        For a file, 1 when visible and 0 otherwise. For a directory, 1 when collapsed or
        hidden, otherwise the sum of its children's sizes with a floor of 1.

    Example:
        >>> from dir2csv.selection_tree.tree_node import FileNode
        >>> root = DirectoryNode(("R",), expanded=True)
        >>> sub = DirectoryNode(("R", "sub"), parent=root)
        >>> _ = FileNode(("R", "sub", "a.txt"), parent=sub)
        >>> _ = FileNode(("R", "b.txt"), parent=root)
        >>> node_size(root)
        2
        >>> sub.expanded = True
        >>> node_size(root)
        2
    """
    if not isinstance(node, DirectoryNode):
        return 1 if visible else 0
    if not (node.expanded and visible):
        return 1
    return max(1, sum(node_size(child, True) for child in node.children))


def child_row_heights(directory: DirectoryNode, visible: bool = True, row_height: int = ROW_HEIGHT) -> List[int]:
    """Return the pixel height of each child's slot in the directory's grid.

    Args:
        directory: The directory whose children are laid out.
        visible: Whether the directory itself is rendered.
        row_height: Pixel height of one row unit.

    Returns:
        One height per child, in stored child order.

    Raises:
        ValueError: If ``row_height`` is not positive.
    """
    if row_height <= 0:
        raise ValueError(f"row_height must be positive, got {row_height}")
    children_visible = visible and directory.expanded
    return [node_size(child, children_visible) * row_height for child in directory.children]
