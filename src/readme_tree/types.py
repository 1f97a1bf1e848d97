from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Sentinel for TraversalConfig.max_depth meaning "descend without limit"
UNLIMITED_DEPTH = -1


class TreeFormat(str, Enum):
    """Enumeration of the textual encodings a tree can be rendered in.

    Attributes:
        ASCII: Box-drawing tree (``├──``/``└──`` connectors).
        MARKDOWN: Nested Markdown bullet list indented by two spaces per level.
    """

    ASCII = "ascii"
    MARKDOWN = "markdown"
