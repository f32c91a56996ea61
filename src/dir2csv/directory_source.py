"""Directory sources: the host primitives that enumerate directory entries.

A directory source turns an opaque directory handle into an unordered stream of
``DirectoryEntry`` values. Directory entries carry their own handle, which the same
source can enumerate in turn. Enumeration may fail with ``OSError`` at any point; the
tree builder is responsible for turning that into a ``DirectoryReadError``.
"""

import asyncio
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, AsyncIterator, List, Mapping, Optional, Union

from dir2csv.types import EntryKind, PathType


@dataclass(frozen=True)
class DirectoryEntry:
    """One raw entry of a directory as reported by a source."""

    name: str
    kind: EntryKind
    handle: Any


class DirectorySource(ABC):
    """Abstract base class for directory enumeration backends.

    Example:
        >>> class SingleFileSource(DirectorySource):
        ...     def name_of(self, handle):
        ...         return "root"
        ...
        ...     async def entries(self, handle):
        ...         yield DirectoryEntry("only.txt", EntryKind.FILE, None)
    """

    @abstractmethod
    def name_of(self, handle: Any) -> str:
        """Return the display name of the directory behind ``handle``."""
        pass

    @abstractmethod
    def entries(self, handle: Any) -> AsyncIterator[DirectoryEntry]:
        """Enumerate the immediate entries of a directory.

        Args:
            handle: A directory handle understood by this source.

        Yields:
            The directory's entries in no particular order.

        Raises:
            OSError: If the directory cannot be read.
        """
        pass


class LocalDirectorySource(DirectorySource):
    """Directory source backed by the local filesystem.

    Handles are path-like objects. Reads happen in a worker thread so that the event
    loop stays responsive while large directories are listed. Symbolic links are never
    followed; they are reported as ``EntryKind.OTHER``.

    Example:
        >>> source = LocalDirectorySource()
        >>> source.name_of("/tmp")  # doctest: +SKIP
        'tmp'
    """

    def name_of(self, handle: PathType) -> str:
        """Return the real name of the directory, resolving ``.`` and ``..``.

        Args:
            handle: Path to the directory.

        Returns:
            The last component of the resolved path, or the anchor for a filesystem root.
        """
        resolved = Path(handle).resolve()
        return resolved.name or resolved.anchor

    async def entries(self, handle: PathType) -> AsyncIterator[DirectoryEntry]:
        for entry in await asyncio.to_thread(self._scan, Path(handle)):
            yield entry

    def _scan(self, directory: Path) -> List[DirectoryEntry]:
        """Read one directory synchronously."""
        result = []
        with os.scandir(directory) as entries:
            for child in entries:
                result.append(DirectoryEntry(child.name, self._classify(child), Path(child.path)))
        return result

    @staticmethod
    def _classify(entry: "os.DirEntry[str]") -> EntryKind:
        if entry.is_symlink():
            return EntryKind.OTHER
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
        return EntryKind.OTHER


@dataclass(frozen=True)
class InMemoryHandle:
    """Handle of a subdirectory yielded by ``InMemoryDirectorySource``.

    Attributes:
        name (str): The subdirectory's name.
        location (str): ``/``-joined segment path below the root.
        mapping (Mapping[str, Any]): The subdirectory's entries.
    """

    name: str
    location: str
    mapping: Mapping[str, Any] = field(compare=False)


class InMemoryDirectorySource(DirectorySource):
    """Directory source over nested mappings.

    The root handle is a mapping from entry names to values. A mapping value is a
    subdirectory, ``EntryKind.OTHER`` marks an entry of unsupported kind, and any other
    value is a file. Subdirectories are yielded with an ``InMemoryHandle`` that carries
    their location. Entries are yielded in mapping order.

    Attributes:
        root_name (str): Name reported for the top-level handle.
        failures (Mapping[str, OSError]): Errors to raise when enumerating a directory,
            keyed by the ``/``-joined segment path below the root (``""`` for the root).

    Example:
        >>> source = InMemoryDirectorySource("R", failures={"locked": PermissionError("denied")})
        >>> source.name_of({"a.txt": None, "locked": {}})
        'R'
    """

    def __init__(self, root_name: str, failures: Optional[Mapping[str, OSError]] = None) -> None:
        if not root_name:
            raise ValueError("root_name must not be empty")
        self.root_name = root_name
        self.failures = dict(failures or {})

    def _resolve(self, handle: Union[InMemoryHandle, Mapping[str, Any]]) -> InMemoryHandle:
        if isinstance(handle, InMemoryHandle):
            return handle
        return InMemoryHandle(self.root_name, "", handle)

    def name_of(self, handle: Union[InMemoryHandle, Mapping[str, Any]]) -> str:
        return self._resolve(handle).name

    async def entries(self, handle: Union[InMemoryHandle, Mapping[str, Any]]) -> AsyncIterator[DirectoryEntry]:
        directory = self._resolve(handle)
        if directory.location in self.failures:
            raise self.failures[directory.location]
        for name, value in directory.mapping.items():
            if isinstance(value, Mapping):
                location = f"{directory.location}/{name}" if directory.location else name
                yield DirectoryEntry(name, EntryKind.DIRECTORY, InMemoryHandle(name, location, value))
            elif value is EntryKind.OTHER:
                yield DirectoryEntry(name, EntryKind.OTHER, None)
            else:
                yield DirectoryEntry(name, EntryKind.FILE, value)
            # Give other tasks a turn between entries, as a real host read would
            await asyncio.sleep(0)
