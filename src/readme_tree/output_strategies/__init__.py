"""Line rendering strategies for the supported tree formats."""

from .ascii_strategy import AsciiTreeStrategy
from .base_strategy import TreeFormatStrategy
from .markdown_strategy import MarkdownTreeStrategy

__all__ = [
    "AsciiTreeStrategy",
    "MarkdownTreeStrategy",
    "TreeFormatStrategy",
]
