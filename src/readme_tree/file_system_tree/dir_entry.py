"""A single item returned by a directory listing."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirEntry:
    """Name and kind of one directory listing item.

    No other metadata (size, timestamps, permissions) is consulted when rendering.

    Attributes:
        name: Bare entry name.
        is_dir: True if the entry is treated as a directory.
    """

    name: str
    is_dir: bool
