from abc import ABC, abstractmethod
from typing import Sequence, Union

from readme_tree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Exclusion rules decide, entry by entry, whether a directory listing item is dropped
    before sorting and rendering. Rules are consulted with the bare entry name (not a
    path), so a rule matching ``build`` drops every entry called ``build`` at any level.
    File loading and individual rule addition are optional capabilities that depend on
    the rule type.

    Example:
        >>> from readme_tree.exclusion_rules.name_rules import NamePatternExclusionRules
        >>> rules = NamePatternExclusionRules(["node_modules"])
        >>> rules.add_rule("tmp*")
        >>> rules.exclude("tmp-cache")
        True
        >>> rules.exclude("src")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry with the given name should be excluded.

        Args:
            name (str): The bare name of a file or directory (no path separators).

        Returns:
            bool: True if the entry should be excluded, False if it should be listed.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
