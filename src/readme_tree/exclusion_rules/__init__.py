"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .name_rules import NamePatternExclusionRules, should_exclude

__all__ = [
    "BaseExclusionRules",
    "NamePatternExclusionRules",
    "should_exclude",
]
