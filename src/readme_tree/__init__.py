"""Directory tree rendering for READMEs and documentation.

This package walks a directory and renders its structure either as an
ASCII box-drawing tree or as a nested Markdown bullet list, with support
for name-based exclusions, depth limiting and directory-only output.
"""

from importlib.metadata import PackageNotFoundError, version

from readme_tree.config import TraversalConfig
from readme_tree.exceptions import TraversalError
from readme_tree.renderer import render, render_ascii, render_markdown
from readme_tree.types import UNLIMITED_DEPTH, TreeFormat

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("readme-tree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "TraversalConfig",
    "TraversalError",
    "TreeFormat",
    "UNLIMITED_DEPTH",
    "render",
    "render_ascii",
    "render_markdown",
]
