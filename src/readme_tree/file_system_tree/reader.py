"""Synchronous filesystem access used by the tree builder."""

import os
from typing import List

from readme_tree.file_system_tree.dir_entry import DirEntry
from readme_tree.types import PathType


class FileSystemReader:
    """Reads directory listings from the local filesystem.

    The tree builder only talks to the filesystem through this class, so tests (or
    callers with a virtual filesystem) can substitute any object exposing the same
    three methods.

    Attributes:
        follow_symlinks (bool): Whether a symbolic link to a directory is reported as a
            directory. When False, links are reported as plain entries.

    Example:
        >>> reader = FileSystemReader()
        >>> entries = reader.list_directory(".")  # doctest: +SKIP
        >>> [entry.name for entry in entries]  # doctest: +SKIP
        ['README.md', 'src']
    """

    def __init__(self, follow_symlinks: bool = False) -> None:
        self.follow_symlinks = follow_symlinks

    def list_directory(self, path: PathType) -> List[DirEntry]:
        """List a directory in the order the operating system enumerates it.

        Args:
            path: Directory to list.

        Returns:
            One DirEntry per item in the directory.

        Raises:
            OSError: If the directory cannot be read (missing, not a directory,
                permission denied, ...).
        """
        with os.scandir(path) as it:
            return [DirEntry(entry.name, entry.is_dir(follow_symlinks=self.follow_symlinks)) for entry in it]

    def is_directory(self, path: PathType) -> bool:
        return os.path.isdir(path)

    def exists(self, path: PathType) -> bool:
        return os.path.exists(path)
