"""Directory selection to CSV export utilities.

This package provides the state engine behind picking a directory, choosing
which of its files to include, and exporting the selected paths as CSV rows
labeled by a category pattern.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

# Expose the version for programmatic use
try:
    __version__ = version("dir2csv")
except PackageNotFoundError:
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())
