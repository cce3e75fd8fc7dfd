"""Exclusion rules using simple glob patterns matched against bare directory names."""

import re
import sys
from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from repo2dirs.types import PathType

from .base_rules import BaseExclusionRules, directory_name


def glob_to_regex(pattern: str) -> str:
    """Translate a glob pattern into an anchored regular expression.

    Only ``*`` and ``?`` are translated. Every other character is handed to the
    regex engine unchanged, so ``.`` in a pattern matches any character and a
    pattern such as ``[abc`` produces an invalid expression.

    >>> glob_to_regex("build*")
    '^build.*$'
    >>> glob_to_regex("v?.x")
    '^v..x$'
    """
    regex = pattern.replace("*", ".*")
    regex = regex.replace("?", ".")
    return "^" + regex + "$"


def _compile(pattern: str) -> Optional[re.Pattern[str]]:
    try:
        return re.compile(glob_to_regex(pattern))
    except (re.error, OverflowError, RecursionError) as e:
        # Oversized repeat counts and very deep nesting fail outside re.error
        print(f"Warning: Invalid regex pattern '{pattern}': {e}", file=sys.stderr)
        return None


def matches(name: str, pattern: str) -> bool:
    """Check whether a bare directory name matches a glob pattern.

    Matching is case-sensitive and covers the whole name. A pattern that is not a
    valid expression after translation prints a warning and never matches.

    >>> matches("build-output", "build*")
    True
    >>> matches("Build", "build*")
    False
    """
    regex = _compile(pattern)
    return regex is not None and regex.fullmatch(name) is not None


def should_ignore(name: str, patterns: Iterable[str]) -> bool:
    """Return True if any pattern matches the directory name.

    Stops at the first matching pattern.

    >>> should_ignore("node_modules", ["*.egg-info", "node_modules"])
    True
    """
    return any(matches(name, pattern) for pattern in patterns)


def read_ignore_file(path: PathType) -> List[str]:
    """Read glob patterns from an ignore file.

    The file holds one pattern per line. Surrounding whitespace is stripped, and
    blank lines and lines starting with ``#`` are skipped.

    Args:
        path: Path to the ignore file.

    Returns:
        The patterns in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    rules_path = Path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found: {rules_path}")

    patterns = []
    with open(rules_path, "r") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                patterns.append(line)
    return patterns


class GlobExclusionRules(BaseExclusionRules):
    """Exclusion rules built from ``*``/``?`` glob patterns.

    Each pattern is compared with the bare name of a directory, never its path, so
    ``node_modules`` excludes every directory of that name wherever it appears in
    the tree. Patterns are compiled once when added; a malformed pattern is
    reported a single time and then ignored.

    Attributes:
        patterns (List[str]): The patterns in the order they were added.

    Example:
        >>> rules = GlobExclusionRules(["node_modules", "*.egg-info"])
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.exclude("repo2dirs.egg-info/")
        True
        >>> rules.exclude("src/")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        self.patterns: List[str] = []
        self._compiled: List[re.Pattern[str]] = []
        for pattern in patterns or ():
            self.add_rule(pattern)

    def exclude(self, path: str) -> bool:
        name = directory_name(path)
        return any(regex.fullmatch(name) is not None for regex in self._compiled)

    def has_rules(self) -> bool:
        return bool(self._compiled)

    def add_rule(self, rule: str) -> None:
        """Add a single glob pattern.

        Args:
            rule: Pattern such as ``build*`` or ``tmp?``.
        """
        self.patterns.append(rule)
        regex = _compile(rule)
        if regex is not None:
            self._compiled.append(regex)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Add the patterns from one or more ignore files.

        Raises:
            FileNotFoundError: If any file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            for pattern in read_ignore_file(rules_file):
                self.add_rule(pattern)
