"""Path-scoped exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from repo2dirs.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules matched against a directory's path relative to the repository root.

    Glob rules only ever see a bare directory name. These rules see the whole
    relative path (``"packages/web/dist/"``), which makes it possible to exclude
    one directory without excluding every directory with the same name. Matching
    follows Git's own semantics through the pathspec library, including anchored
    patterns (``/docs/``), ``**`` and negation (``!``).

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("packages/*/dist/")
        >>> rules.exclude("packages/web/dist/")
        True
        >>> rules.exclude("dist/")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading one or more rule files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Later patterns take precedence over earlier ones, so a negation in a
        second file can re-include a directory excluded by the first.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern, e.g. ``"/build/"`` or ``"!keep/"``."""
        self._extend([rule])

    def _extend(self, lines: List[str]) -> None:
        self._lines.extend(lines)
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
