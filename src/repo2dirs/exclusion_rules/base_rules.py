from abc import ABC, abstractmethod
from typing import Sequence, Union

from repo2dirs.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for directory exclusion rules.

    Concrete rules decide whether a directory met during the walk is skipped
    together with everything beneath it. The walker always passes the directory's
    path relative to the repository root, using forward slashes and a trailing
    slash (``"src/build/"``). Rules that only care about the bare directory name
    (glob rules) take the last segment; path-aware rules (gitignore rules) use the
    whole string.

    File loading and individual rule addition are optional capabilities that
    depend on the rule type.

    Example:
        >>> from repo2dirs.exclusion_rules.glob_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules(["build*"])
        >>> rules.exclude("tools/build-output/")
        True
        >>> rules.exclude("tools/Build/")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a directory should be excluded.

        Args:
            path (str): Relative POSIX path of the directory, with a trailing slash.

        Returns:
            bool: True if the directory (and its subtree) should be skipped.
        """
        pass

    def has_rules(self) -> bool:
        """Return True if at least one rule is configured."""
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The rule to add. The format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")


def directory_name(path: str) -> str:
    """Return the last segment of a slash-separated relative path.

    >>> directory_name("src/node_modules/")
    'node_modules'
    >>> directory_name("docs")
    'docs'
    """
    return path.rstrip("/").rsplit("/", 1)[-1]
