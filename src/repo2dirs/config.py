"""Run configuration for repo2dirs."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Tuple

from repo2dirs.exclusion_rules.base_rules import BaseExclusionRules
from repo2dirs.exclusion_rules.composite_rules import CompositeExclusionRules
from repo2dirs.exclusion_rules.git_rules import GitIgnoreExclusionRules
from repo2dirs.exclusion_rules.glob_rules import GlobExclusionRules, read_ignore_file
from repo2dirs.types import AcquisitionMethod, PathType

UNLIMITED_DEPTH = -1


@dataclass(frozen=True)
class MirrorConfig:
    """Immutable settings for one run.

    Attributes:
        repo_url: Location of the repository to copy.
        ignore_patterns: Glob patterns matched against bare directory names.
        max_depth: Deepest level to create, where 0 means the root's immediate
            children. Any negative value means no limit.
        output_dir: Root of the directory tree to create.
        gitignore_files: Files of .gitignore-style rules matched against paths
            relative to the repository root.
        method: How to obtain the repository tree.

    Example:
        >>> config = MirrorConfig("https://github.com/user/repo", max_depth=1)
        >>> config.depth_exceeded(1)
        False
        >>> config.depth_exceeded(2)
        True
        >>> MirrorConfig("https://github.com/user/repo").depth_exceeded(1000)
        False
    """

    repo_url: str
    ignore_patterns: Tuple[str, ...] = ()
    max_depth: int = UNLIMITED_DEPTH
    output_dir: Path = field(default_factory=lambda: Path("."))
    gitignore_files: Tuple[Path, ...] = ()
    method: AcquisitionMethod = AcquisitionMethod.AUTO

    @classmethod
    def from_options(
        cls,
        repo_url: str,
        ignore_file: Optional[PathType] = None,
        patterns: Sequence[str] = (),
        max_depth: int = UNLIMITED_DEPTH,
        output_dir: PathType = ".",
        gitignore_files: Sequence[PathType] = (),
        method: AcquisitionMethod = AcquisitionMethod.AUTO,
    ) -> "MirrorConfig":
        """Build a config, reading the ignore file if one is given.

        Patterns from the ignore file come first, followed by ``patterns``.

        Raises:
            FileNotFoundError: If the ignore file does not exist.
        """
        ignore_patterns = list(read_ignore_file(ignore_file)) if ignore_file is not None else []
        ignore_patterns.extend(patterns)
        return cls(
            repo_url=repo_url,
            ignore_patterns=tuple(ignore_patterns),
            max_depth=max_depth,
            output_dir=Path(output_dir),
            gitignore_files=tuple(Path(p) for p in gitignore_files),
            method=AcquisitionMethod(method),
        )

    @property
    def unlimited_depth(self) -> bool:
        return self.max_depth < 0

    def depth_exceeded(self, current_depth: int) -> bool:
        """Return True if nothing should be created at ``current_depth``."""
        return not self.unlimited_depth and current_depth > self.max_depth

    def build_exclusion_rules(self) -> BaseExclusionRules:
        """Create the exclusion rules for this run.

        Glob patterns are always present; gitignore-style rules are added when
        rule files were configured.

        Raises:
            FileNotFoundError: If a gitignore rules file does not exist.
        """
        glob_rules = GlobExclusionRules(self.ignore_patterns)
        if not self.gitignore_files:
            return glob_rules
        return CompositeExclusionRules([glob_rules, GitIgnoreExclusionRules(self.gitignore_files)])
