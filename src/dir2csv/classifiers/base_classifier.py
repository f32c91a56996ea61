"""Path classifier base class defining the interface for turning paths into table rows.

The export pipeline treats a classifier as an opaque function: it hands over the
ordered list of selected paths together with the user's pattern string and serializes
whatever table comes back. Any exception a classifier raises fails the export.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from dir2csv.types import Row, SegmentPath


class PathClassifier(ABC):
    """Abstract base class for path classifiers.

    Example:
        >>> class JoinedPathClassifier(PathClassifier):
        ...     def classify(self, paths, pattern):
        ...         return [["/".join(path), pattern] for path in paths]
        ...
        >>> JoinedPathClassifier().classify([("a", "b.txt")], "cat")
        [['a/b.txt', 'cat']]
    """

    @abstractmethod
    def classify(self, paths: Sequence[SegmentPath], pattern: str) -> List[Row]:
        """Produce the table rows for the selected paths.

        Args:
            paths: Root-relative segment paths of the selected files, in tree order.
            pattern: The user's category pattern string. Its grammar belongs to the
                concrete classifier.

        Returns:
            Rows of cells, each cell a string.

        Raises:
            ClassificationError: If the classifier rejects the pattern or the input.
        """
        pass
