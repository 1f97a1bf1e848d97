"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with a flag indicating whether the node represents a
    directory. Children are attached in display order, so iterating
    ``node.children`` yields siblings exactly as they are rendered.

    Attributes:
        name (str): The name of the file or directory (just the basename), or the
            root label for the root node.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("proj", is_dir=True)
        >>> child = FileSystemNode("README.md", parent=root)
        >>> child.is_dir
        False
        >>> child.display_name
        'README.md'
        >>> root.display_name
        'proj/'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir

    @property
    def display_name(self) -> str:
        """Name as shown in a rendered tree: directories carry a trailing ``/``."""
        return f"{self.name}/" if self.is_dir else self.name
