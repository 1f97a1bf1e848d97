"""Default traversal settings and loading them from a JSON file.

Settings are the configuration source the command-line interface starts from
before applying its own flags. The file format accepts the same keys as the
editor extension this tool grew out of, either bare (``"maxDepth": 2``) or
namespaced (``"readmeTreeGenerator.maxDepth": 2``), so an existing editor
``settings.json`` can be pointed at directly.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping

from readme_tree.exceptions import SettingsError
from readme_tree.types import UNLIMITED_DEPTH, PathType

SETTINGS_NAMESPACE = "readmeTreeGenerator."

DEFAULT_EXCLUDE_PATTERNS = ["node_modules", ".git", ".vscode"]

DEFAULT_OUTPUT_STEM = "folder-structure"


@dataclass
class TreeSettings:
    """User-configurable defaults for a tree rendering request.

    Attributes:
        exclude_patterns: Patterns excluded unless the user opts out of defaults.
        max_depth: Default depth limit, UNLIMITED_DEPTH for none.
        use_markdown_format: Default to the Markdown bullet-list format instead of the
            ASCII tree when no format is requested explicitly.
    """

    exclude_patterns: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))
    max_depth: int = UNLIMITED_DEPTH
    use_markdown_format: bool = False


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    if SETTINGS_NAMESPACE + key in data:
        return data[SETTINGS_NAMESPACE + key]
    return data.get(key)


def settings_from_mapping(data: Mapping[str, Any]) -> TreeSettings:
    """Build TreeSettings from parsed JSON, keeping defaults for absent keys.

    Raises:
        SettingsError: If a present key has a value of the wrong type.

    Example:
        >>> settings_from_mapping({"readmeTreeGenerator.maxDepth": 2}).max_depth
        2
        >>> settings_from_mapping({}).exclude_patterns
        ['node_modules', '.git', '.vscode']
    """
    settings = TreeSettings()

    patterns = _lookup(data, "excludePatterns")
    if patterns is not None:
        if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
            raise SettingsError("excludePatterns must be a list of strings")
        settings.exclude_patterns = list(patterns)

    max_depth = _lookup(data, "maxDepth")
    if max_depth is not None:
        if isinstance(max_depth, bool) or not isinstance(max_depth, int):
            raise SettingsError("maxDepth must be an integer")
        if max_depth < UNLIMITED_DEPTH:
            raise SettingsError(f"maxDepth must be {UNLIMITED_DEPTH} (unlimited) or a non-negative integer")
        settings.max_depth = max_depth

    use_markdown = _lookup(data, "useMarkdownFormat")
    if use_markdown is not None:
        if not isinstance(use_markdown, bool):
            raise SettingsError("useMarkdownFormat must be true or false")
        settings.use_markdown_format = use_markdown

    return settings


def load_settings(path: PathType) -> TreeSettings:
    """Load settings from a JSON file.

    Args:
        path: JSON file containing a single object.

    Raises:
        SettingsError: If the file is missing or unreadable, is not valid JSON, is
            not a JSON object, or holds values of the wrong type.
    """
    settings_path = Path(path)
    try:
        with settings_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SettingsError(f"Cannot read settings file {settings_path}: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise SettingsError(f"Invalid JSON in settings file {settings_path}: {e.msg} (line {e.lineno})") from e

    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {settings_path} must contain a JSON object")
    return settings_from_mapping(data)


def default_output_name(extension: str) -> str:
    """File name used when saving without an explicit name.

    Example:
        >>> default_output_name(".md")
        'folder-structure.md'
    """
    return DEFAULT_OUTPUT_STEM + extension
