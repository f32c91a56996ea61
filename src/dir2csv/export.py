"""CSV export of the enabled files of a selection tree.

The pipeline flattens the tree into the ordered list of enabled paths, hands it to a
path classifier together with the user's pattern, serializes the returned table as CSV
and writes it as ``<root name>.csv``. All failures are logged with their details and
reported to the caller as one ``ExportError``.
"""

import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dir2csv.classifiers.base_classifier import PathClassifier
from dir2csv.exceptions import ExportError, PreconditionError
from dir2csv.selection_tree.flatten import collect_enabled_paths
from dir2csv.selection_tree.tree_node import DirectoryNode
from dir2csv.types import PathType, Table

logger = logging.getLogger(__name__)

CSV_EXTENSION = ".csv"


@dataclass(frozen=True)
class CsvDocument:
    """A rendered export, ready to be saved."""

    filename: str
    content: str


def serialize_table(table: Table) -> str:
    """Serialize rows as CSV with every cell quoted.

    Embedded quotes are doubled as in standard CSV. Rows are separated by ``\\n``; there
    is no trailing newline.

    Example:
        >>> print(serialize_table([["a", 'say "hi" now'], ["b,c", ""]]))
        "a","say ""hi"" now"
        "b,c",""
    """
    buffer = io.StringIO()
    csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n").writerows(table)
    return buffer.getvalue().removesuffix("\n")


def export_filename(root: DirectoryNode) -> str:
    return f"{root.name}{CSV_EXTENSION}"


def render_csv(root: Optional[DirectoryNode], pattern: str, classifier: PathClassifier) -> CsvDocument:
    """Flatten, classify and serialize a tree without touching the filesystem.

    Raises:
        PreconditionError: If there is no tree.
        Exception: Whatever the classifier raises, unchanged.
    """
    if root is None:
        raise PreconditionError()
    paths = collect_enabled_paths(root)
    logger.debug("Classifying %d paths with pattern %r", len(paths), pattern)
    table = classifier.classify(paths, pattern)
    return CsvDocument(export_filename(root), serialize_table(table))


def generate(
    root: Optional[DirectoryNode], pattern: str, classifier: PathClassifier, destination: PathType
) -> Path:
    """Export the enabled files of a tree as a CSV file in ``destination``.

    Args:
        root: Root of the selection tree, or None when nothing has been picked.
        pattern: The user's category pattern.
        classifier: Classifier producing the table rows.
        destination: Directory the CSV file is written to.

    Returns:
        Path of the written file.

    Raises:
        ExportError: On any failure. The cause is logged and chained, not shown.
    """
    try:
        document = render_csv(root, pattern, classifier)
        target = Path(destination) / document.filename
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(document.content)
    except Exception as e:
        logger.exception("CSV export failed")
        raise ExportError() from e

    logger.info("Wrote %s", target)
    return target
