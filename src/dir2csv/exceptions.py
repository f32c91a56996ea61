from typing import Sequence


class Dir2CsvError(Exception):
    """Base class for all errors raised by dir2csv."""

    pass


class DirectoryReadError(Dir2CsvError):
    """
    Exception raised when a directory cannot be enumerated while building a tree.

    This covers access being denied, a handle being revoked, or any I/O failure in the
    middle of a walk. The partially built tree is discarded; nothing is retried.

    Attributes:
        path (tuple[str, ...]): Segment path of the directory that failed, from the picked root.

    Example:
        >>> error = DirectoryReadError(("root", "sub"), "Permission denied")
        >>> str(error)
        'Cannot read directory root/sub: Permission denied'
    """

    def __init__(self, path: Sequence[str], message: str) -> None:
        """
        Initialize the exception with the failing directory and a reason.

        Args:
            path (Sequence[str]): Segment path of the directory that could not be read.
            message (str): Description of the underlying failure.
        """
        self.path = tuple(path)
        super().__init__(f"Cannot read directory {'/'.join(self.path)}: {message}")


class ClassificationError(Dir2CsvError):
    """
    Exception raised when a path classifier rejects its input or pattern.

    Example:
        >>> error = ClassificationError("No files selected")
        >>> str(error)
        'No files selected'
    """

    pass


class PreconditionError(Dir2CsvError):
    """
    Exception raised when an export is attempted without a tree.

    Example:
        >>> str(PreconditionError())
        'No directory has been picked'
    """

    def __init__(self, message: str = "No directory has been picked") -> None:
        super().__init__(message)


class TreeStructureError(Dir2CsvError):
    """
    Exception raised for operations that do not fit a node's kind.

    Examples are attaching children to a file node, or toggling the expansion of a file.
    """

    pass


class ExportError(Dir2CsvError):
    """
    The single user-visible failure of the export pipeline.

    Whatever went wrong (no tree, classifier failure, write failure) is logged in detail
    and chained as ``__cause__``; the message shown to the user does not distinguish causes.

    Example:
        >>> str(ExportError())
        'An error occurred while generating the CSV file'
    """

    def __init__(self, message: str = "An error occurred while generating the CSV file") -> None:
        super().__init__(message)
