"""Exclusion rules for filtering directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .glob_rules import GlobExclusionRules, glob_to_regex, matches, read_ignore_file, should_ignore

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "GlobExclusionRules",
    "glob_to_regex",
    "matches",
    "read_ignore_file",
    "should_ignore",
]
