"""File system tree representation with configurable exclusion rules.

This module provides the FileSystemTree class, which walks a directory once,
applies exclusion rules, the files/directories filter and the depth limit, and
keeps the result as an ordered node tree ready to be rendered.
"""

from pathlib import Path
from typing import Iterator, Optional

from readme_tree.config import default_root_label
from readme_tree.exceptions import TraversalError
from readme_tree.exclusion_rules.base_rules import BaseExclusionRules
from readme_tree.file_system_tree.file_system_node import FileSystemNode
from readme_tree.file_system_tree.ordering import order_siblings
from readme_tree.file_system_tree.reader import FileSystemReader
from readme_tree.output_strategies.base_strategy import TreeFormatStrategy
from readme_tree.types import UNLIMITED_DEPTH, PathType


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access. The whole walk completes before any
    line is produced, so a failing directory read never leaves a half-rendered
    tree behind.

    Depth Handling:
        The root is depth 0 and is always present. A directory at depth ``d`` is only
        listed when ``max_depth`` is UNLIMITED_DEPTH or ``d < max_depth``; with
        ``max_depth=0`` the tree is the root alone.

    Symbolic Link Behavior:
        Whether a link to a directory is descended is decided by the reader
        (``FileSystemReader.follow_symlinks``). There is no loop detection: callers
        following symlinks should pass a finite ``max_depth``.

    Attributes:
        root_path (Path): The directory being represented.
        root_label (str): Name shown for the root node.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding entries.
        max_depth (int): Depth limit, or UNLIMITED_DEPTH.
        include_files (bool): Whether non-directory entries are listed.
        reader (FileSystemReader): Source of directory listings.

    Example:
        >>> tree = FileSystemTree("proj")  # doctest: +SKIP
        >>> from readme_tree.output_strategies.ascii_strategy import AsciiTreeStrategy
        >>> print(tree.get_tree_representation(AsciiTreeStrategy()), end="")  # doctest: +SKIP
        proj/
        ├── src/
        │   └── a.ts
        └── README.md
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        *,
        root_label: Optional[str] = None,
        max_depth: int = UNLIMITED_DEPTH,
        include_files: bool = True,
        reader: Optional[FileSystemReader] = None,
    ) -> None:
        self.root_path = Path(root_path)
        self.root_label = root_label if root_label is not None else default_root_label(self.root_path)
        self.exclusion_rules = exclusion_rules
        self.max_depth = max_depth
        self.include_files = include_files
        self.reader = reader if reader is not None else FileSystemReader()
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it if needed.

        Raises:
            TraversalError: If the root is missing or not a directory, or if any
                visited directory cannot be read.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> FileSystemNode:
        if not self.reader.exists(self.root_path):
            raise TraversalError(self.root_path, "Root path does not exist")
        if not self.reader.is_directory(self.root_path):
            raise TraversalError(self.root_path, "Root path is not a directory")

        root = FileSystemNode(self.root_label, is_dir=True)
        self._file_count = 0
        self._directory_count = 0
        self._add_children(root, self.root_path)
        return root

    def _depth_exhausted(self, depth: int) -> bool:
        return self.max_depth != UNLIMITED_DEPTH and depth >= self.max_depth

    def _add_children(self, node: FileSystemNode, path: Path) -> None:
        """Recursively list ``path`` and attach its surviving entries to ``node``."""
        if self._depth_exhausted(node.depth):
            return

        try:
            entries = self.reader.list_directory(path)
        except OSError as e:
            reason = f"Cannot read directory ({e.strerror})" if e.strerror else "Cannot read directory"
            raise TraversalError(path, reason) from e

        if self.exclusion_rules is not None:
            entries = [entry for entry in entries if not self.exclusion_rules.exclude(entry.name)]
        if not self.include_files:
            entries = [entry for entry in entries if entry.is_dir]

        for entry in order_siblings(entries):
            child = FileSystemNode(entry.name, parent=node, is_dir=entry.is_dir)
            if entry.is_dir:
                self._directory_count += 1
                self._add_children(child, path / entry.name)
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Number of non-directory entries in the tree."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Number of directories in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count

    def stream_tree_representation(self, strategy: TreeFormatStrategy) -> Iterator[str]:
        """Generate the rendered tree one line at a time.

        Each yielded line ends with a single newline. The root line comes first,
        followed by a depth-first, display-ordered walk of the node tree.

        Args:
            strategy: Output format to render with.

        Raises:
            TraversalError: If the tree has not been built yet and building it fails.
        """
        root = self.get_tree()

        def write_children(node: FileSystemNode, prefix: str) -> Iterator[str]:
            children = node.children
            for i, child in enumerate(children):
                is_last = i == len(children) - 1
                yield strategy.format_entry(prefix, child.display_name, is_last) + "\n"
                if child.is_dir:
                    yield from write_children(child, strategy.child_prefix(prefix, is_last))

        yield strategy.format_root(root.display_name) + "\n"
        yield from write_children(root, strategy.initial_prefix)

    def get_tree_representation(self, strategy: TreeFormatStrategy) -> str:
        """Get the complete rendered tree as a single string."""
        return "".join(self.stream_tree_representation(strategy))

    def refresh(self) -> None:
        """Discard the cached tree so the next access rebuilds it from disk."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
