"""Output strategy base class defining the interface for tree line formatting.

The traversal, filtering and ordering of entries is shared by every format; a
strategy only decides how the root line and each entry line look, and how the
prefix carried down to a directory's children grows.
"""

from abc import ABC, abstractmethod


class TreeFormatStrategy(ABC):
    """Abstract base class defining the interface for tree formatting strategies.

    This class implements the Strategy pattern for rendering a display-ordered node
    tree in different textual formats. Rendering proceeds as follows:

    1. Root - ``format_root`` renders the root label once.
    2. Entries - each child is rendered with ``format_entry`` using the prefix
       accumulated so far, starting from ``initial_prefix``.
    3. Descent - before recursing into a directory, ``child_prefix`` computes the
       prefix for its children.

    Returned lines never include the trailing newline; the caller appends it.

    Example:
        >>> class DashStrategy(TreeFormatStrategy):
        ...     @property
        ...     def initial_prefix(self) -> str:
        ...         return "-"
        ...
        ...     def format_root(self, display_name: str) -> str:
        ...         return display_name
        ...
        ...     def format_entry(self, prefix: str, display_name: str, is_last: bool) -> str:
        ...         return prefix + " " + display_name
        ...
        ...     def child_prefix(self, prefix: str, is_last: bool) -> str:
        ...         return prefix + "-"
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".txt"
        >>> DashStrategy().format_entry("--", "a.ts", True)
        '-- a.ts'
    """

    @property
    @abstractmethod
    def initial_prefix(self) -> str:
        """Prefix used for the root's direct children."""
        pass

    @abstractmethod
    def format_root(self, display_name: str) -> str:
        """Render the root line.

        Args:
            display_name: The root label including its trailing ``/``.

        Returns:
            str: The root line without a trailing newline.
        """
        pass

    @abstractmethod
    def format_entry(self, prefix: str, display_name: str, is_last: bool) -> str:
        """Render one entry line.

        Args:
            prefix: Prefix accumulated from the entry's ancestors.
            display_name: Entry name, with a trailing ``/`` for directories.
            is_last: Whether this entry is the final surviving sibling.

        Returns:
            str: The entry line without a trailing newline.
        """
        pass

    @abstractmethod
    def child_prefix(self, prefix: str, is_last: bool) -> str:
        """Compute the prefix passed down to a directory's children.

        Args:
            prefix: Prefix the directory itself was rendered with.
            is_last: Whether the directory is the final surviving sibling.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Return the file extension for saved output in this format.

        Returns:
            str: The extension including the leading dot (e.g., ".md").
        """
        pass
