"""Exclusion rules matching entry names exactly or by trailing-wildcard prefix."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from readme_tree.types import PathType

from .base_rules import BaseExclusionRules

WILDCARD = "*"


def should_exclude(name: str, patterns: Iterable[str]) -> bool:
    """Check a name against exact and trailing-wildcard patterns.

    A pattern excludes ``name`` when it is equal to it, or when the pattern ends in
    ``*`` and ``name`` starts with everything before that final ``*``. No other
    wildcard positions are recognised: ``*.log`` only matches an entry literally
    named ``*.log``.

    Args:
        name: Bare entry name.
        patterns: Patterns checked in order.

    Returns:
        True if any pattern matches.

    Example:
        >>> should_exclude("node_modules", ["node_modules", ".git"])
        True
        >>> should_exclude(".github", [".git"])
        False
        >>> should_exclude(".github", [".git*"])
        True
    """
    for pattern in patterns:
        if pattern == name:
            return True
        if pattern.endswith(WILDCARD) and name.startswith(pattern[: -len(WILDCARD)]):
            return True
    return False


class NamePatternExclusionRules(BaseExclusionRules):
    """Exclusion rules built from exact names and trailing-wildcard prefixes.

    Patterns are kept in insertion order with duplicates dropped. Rule files hold one
    pattern per line; blank lines and lines starting with ``#`` are skipped and
    surrounding whitespace is stripped.

    Attributes:
        patterns (Tuple[str, ...]): The active patterns, in the order they were added.

    Example:
        >>> rules = NamePatternExclusionRules(["dist", "*.egg-info"])
        >>> rules.exclude("dist")
        True
        >>> rules.exclude("pkg.egg-info")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        self._patterns: List[str] = []
        if patterns is not None:
            for pattern in patterns:
                self.add_rule(pattern)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(self._patterns)

    def exclude(self, name: str) -> bool:
        return should_exclude(name, self._patterns)

    def add_rule(self, rule: str) -> None:
        """Append a pattern unless it is empty or already present.

        An empty pattern can never equal an entry name, so it is dropped.
        """
        if rule and rule not in self._patterns:
            self._patterns.append(rule)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load patterns from one or more files, one pattern per line.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")
            with path.open("r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#"):
                        self.add_rule(line)
