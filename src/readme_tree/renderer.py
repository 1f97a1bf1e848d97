"""Render a directory tree as ASCII or Markdown text.

This module is the entry point of the library: a TraversalConfig goes in, a
complete string comes out. Every call owns its own walk and output buffer;
nothing is cached between calls.
"""

from dataclasses import replace
from typing import Dict, Optional, Type

from readme_tree.config import TraversalConfig
from readme_tree.exclusion_rules.name_rules import NamePatternExclusionRules
from readme_tree.file_system_tree.file_system_tree import FileSystemTree
from readme_tree.file_system_tree.reader import FileSystemReader
from readme_tree.output_strategies.ascii_strategy import AsciiTreeStrategy
from readme_tree.output_strategies.base_strategy import TreeFormatStrategy
from readme_tree.output_strategies.markdown_strategy import MarkdownTreeStrategy
from readme_tree.types import TreeFormat

CODE_FENCE = "```"

_STRATEGIES: Dict[TreeFormat, Type[TreeFormatStrategy]] = {
    TreeFormat.ASCII: AsciiTreeStrategy,
    TreeFormat.MARKDOWN: MarkdownTreeStrategy,
}


def get_strategy(tree_format: TreeFormat) -> TreeFormatStrategy:
    """Return a fresh strategy instance for ``tree_format``."""
    return _STRATEGIES[TreeFormat(tree_format)]()


def build_tree(config: TraversalConfig, reader: Optional[FileSystemReader] = None) -> FileSystemTree:
    """Create the (not yet walked) FileSystemTree described by ``config``.

    Args:
        config: Traversal settings.
        reader: Filesystem access to use. Defaults to a FileSystemReader honouring
            ``config.follow_symlinks``.
    """
    if reader is None:
        reader = FileSystemReader(follow_symlinks=config.follow_symlinks)
    return FileSystemTree(
        config.root_path,
        NamePatternExclusionRules(config.exclude_patterns),
        root_label=config.root_label,
        max_depth=config.max_depth,
        include_files=config.include_files,
        reader=reader,
    )


def render(config: TraversalConfig, reader: Optional[FileSystemReader] = None) -> str:
    """Render the directory described by ``config`` in ``config.format``.

    The output has one line per rendered entry, each terminated by a single
    newline, starting with the root line.

    Args:
        config: Traversal settings.
        reader: Optional filesystem access override.

    Returns:
        The complete tree text.

    Raises:
        TraversalError: If the root is missing or not a directory, or any directory
            read during the walk fails. No partial output is produced.

    Example:
        >>> print(render(TraversalConfig("proj")), end="")  # doctest: +SKIP
        proj/
        ├── src/
        │   └── a.ts
        └── README.md
    """
    tree = build_tree(config, reader)
    return tree.get_tree_representation(get_strategy(config.format))


def render_ascii(config: TraversalConfig, reader: Optional[FileSystemReader] = None) -> str:
    """Render ``config`` as a box-drawing tree, whatever its ``format`` field says."""
    return render(replace(config, format=TreeFormat.ASCII), reader)


def render_markdown(config: TraversalConfig, reader: Optional[FileSystemReader] = None) -> str:
    """Render ``config`` as a nested Markdown list, whatever its ``format`` field says."""
    return render(replace(config, format=TreeFormat.MARKDOWN), reader)


def wrap_in_code_fence(text: str) -> str:
    """Wrap rendered text in a Markdown code block ending with a newline.

    Example:
        >>> wrap_in_code_fence("proj/\\n└── a.ts\\n")
        '```\\nproj/\\n└── a.ts\\n```\\n'
    """
    if not text.endswith("\n"):
        text += "\n"
    return f"{CODE_FENCE}\n{text}{CODE_FENCE}\n"
