"""The current picked tree and pattern, with pick and export orchestration.

A workspace holds at most one selection tree. Picking a directory builds a new tree and
replaces the current one outright. Builds run on the asyncio event loop; a build that
finishes after a newer pick has started is discarded, never applied.
"""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional

from dir2csv.classifiers.base_classifier import PathClassifier
from dir2csv.classifiers.category_classifier import DIR_PLACEHOLDER, CategoryPatternClassifier
from dir2csv.directory_source import DirectorySource, LocalDirectorySource
from dir2csv.exceptions import DirectoryReadError
from dir2csv.export import generate
from dir2csv.selection_tree.selection_tree import SelectionTree
from dir2csv.selection_tree.tree_builder import build_tree
from dir2csv.types import PathType

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "_" + DIR_PLACEHOLDER


class Workspace:
    """Coordinates directory picks and exports for one user.

    Attributes:
        source (DirectorySource): Where picked directories are read from.
        classifier (PathClassifier): Classifier used for exports.
        tree (Optional[SelectionTree]): The current tree, or None before the first pick.
        default_pattern (str): Pattern before the first pick and suffix after the root name
            once a directory is picked.
        pattern (str): The current category pattern.

    Note:
        There is no timeout on directory enumeration. If the source hangs, the pick that
        is waiting on it hangs too; a later pick still replaces it.

    Example:
        >>> import asyncio
        >>> from dir2csv.directory_source import InMemoryDirectorySource
        >>> workspace = Workspace(source=InMemoryDirectorySource("photos"))
        >>> tree = asyncio.run(workspace.pick({"img2.jpg": None, "img10.jpg": None}))
        >>> tree.collect_enabled_paths()
        [('img2.jpg',), ('img10.jpg',)]
        >>> workspace.pattern
        'photos_${DIR}'
    """

    def __init__(
        self,
        source: Optional[DirectorySource] = None,
        classifier: Optional[PathClassifier] = None,
        default_pattern: str = DEFAULT_PATTERN,
    ) -> None:
        """Initialize a Workspace.

        Args:
            source: Directory source for picks. Defaults to the local filesystem.
            classifier: Classifier for exports. Defaults to CategoryPatternClassifier.
            default_pattern: Pattern used before the first pick. After each pick the pattern
                is reset to the root name followed by ``default_pattern``.

        Raises:
            ValueError: If ``default_pattern`` is not a string.
        """
        if not isinstance(default_pattern, str):
            raise ValueError(f"default_pattern must be a string, got {type(default_pattern).__name__}")
        self.source = source if source is not None else LocalDirectorySource()
        self.classifier = classifier if classifier is not None else CategoryPatternClassifier()
        self.default_pattern = default_pattern
        self.pattern = default_pattern
        self.tree: Optional[SelectionTree] = None
        self._generation = 0
        self._listeners: List[Callable[[SelectionTree], None]] = []

    @property
    def has_tree(self) -> bool:
        """Whether an export is possible at all."""
        return self.tree is not None

    def on_tree_replaced(self, listener: Callable[[SelectionTree], None]) -> None:
        """Register a listener called with the new tree after every applied pick."""
        self._listeners.append(listener)

    async def pick(self, handle: Any) -> Optional[SelectionTree]:
        """Build the tree for ``handle`` and make it current.

        Args:
            handle: Directory handle understood by ``source`` (a path for the local source).

        Returns:
            The new tree, or None if a newer pick started while this one was building.

        Raises:
            DirectoryReadError: If the directory cannot be read and no newer pick has
                started. The current tree is left unchanged.
        """
        self._generation += 1
        generation = self._generation
        try:
            root = await build_tree(self.source, handle)
        except DirectoryReadError:
            if generation != self._generation:
                logger.debug("Discarding failed build of superseded pick %d", generation, exc_info=True)
                return None
            raise

        if generation != self._generation:
            logger.debug("Discarding tree %s from superseded pick %d", root.name, generation)
            return None

        self.tree = SelectionTree(root)
        self.pattern = root.name + self.default_pattern
        for listener in list(self._listeners):
            listener(self.tree)
        return self.tree

    def generate(self, destination: PathType) -> Path:
        """Export the current tree as ``<root name>.csv`` into ``destination``.

        Returns:
            Path of the written file.

        Raises:
            ExportError: If there is no tree or the export fails for any reason.
        """
        root = self.tree.root if self.tree is not None else None
        return generate(root, self.pattern, self.classifier, destination)
