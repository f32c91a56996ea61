from enum import Enum
from os import PathLike
from typing import List, Sequence, Tuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Name segments of a node, from the picked root (inclusive) down to the node
SegmentPath = Tuple[str, ...]

# Rows of cells produced by a path classifier
Table = Sequence[Sequence[str]]
Row = List[str]


class EntryKind(Enum):
    """Enumeration of entry kinds reported by a directory source.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        OTHER: Anything else (unresolved symlinks, sockets, devices); skipped when building trees
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
