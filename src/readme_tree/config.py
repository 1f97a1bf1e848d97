"""Immutable input for a single tree rendering request."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple

from readme_tree.types import UNLIMITED_DEPTH, PathType, TreeFormat


def default_root_label(root_path: PathType) -> str:
    """Display name for a root directory: its resolved basename.

    A filesystem root has no basename, so its path is used with trailing
    separators removed ('/' becomes '' and renders as a bare '/').

    Example:
        >>> default_root_label("/tmp/proj")
        'proj'
    """
    resolved = Path(root_path).resolve()
    if resolved.name:
        return resolved.name
    separators = os.sep + (os.altsep or "")
    return str(resolved).rstrip(separators)


def _dedupe(patterns: Iterable[str]) -> Tuple[str, ...]:
    seen = set()
    ordered = []
    for pattern in patterns:
        if pattern not in seen:
            seen.add(pattern)
            ordered.append(pattern)
    return tuple(ordered)


@dataclass(frozen=True)
class TraversalConfig:
    """Fully resolved configuration for one traversal.

    The configuration is created once per request and never mutated. Exclusion
    patterns are stored as an ordered, duplicate-free tuple.

    Attributes:
        root_path: Directory to render. Stored as an absolute Path.
        root_label: Display name for the root line. Defaults to the basename of
            the resolved root path.
        exclude_patterns: Exact names or trailing-wildcard prefixes to drop.
        max_depth: Levels below the root to show, or UNLIMITED_DEPTH. 0 shows the
            root line only.
        include_files: When False only directories are listed.
        format: Output encoding.
        follow_symlinks: Treat symbolic links to directories as directories.

    Example:
        >>> config = TraversalConfig("/tmp/proj", exclude_patterns=["node_modules", ".git", "node_modules"])
        >>> config.exclude_patterns
        ('node_modules', '.git')
        >>> config.root_label
        'proj'
    """

    root_path: PathType
    root_label: Optional[str] = None
    exclude_patterns: Iterable[str] = field(default_factory=tuple)
    max_depth: int = UNLIMITED_DEPTH
    include_files: bool = True
    format: TreeFormat = TreeFormat.ASCII
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise fields through object.__setattr__
        root = Path(self.root_path).absolute()
        object.__setattr__(self, "root_path", root)
        if self.root_label is None:
            object.__setattr__(self, "root_label", default_root_label(root))
        object.__setattr__(self, "exclude_patterns", _dedupe(self.exclude_patterns))

        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < UNLIMITED_DEPTH:
            raise ValueError(f"max_depth must be {UNLIMITED_DEPTH} (unlimited) or a non-negative integer")

        if isinstance(self.format, str):
            try:
                object.__setattr__(self, "format", TreeFormat(self.format.lower()))
            except ValueError:
                raise ValueError(f"Unsupported tree format: {self.format}. Must be one of: 'ascii', 'markdown'")
