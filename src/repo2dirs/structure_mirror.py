"""Directory-only mirroring of a source tree with exclusion rules and a depth limit.

This module provides the StructureMirror class, which walks a checked-out
repository depth-first and recreates its directories (never its files) under a
destination root.
"""

import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from repo2dirs.config import MirrorConfig
from repo2dirs.exceptions import MirrorError
from repo2dirs.exclusion_rules.base_rules import BaseExclusionRules
from repo2dirs.types import PathType

# Git's metadata directory is never copied, whatever the ignore rules say.
VCS_METADATA_DIR = ".git"


class StructureMirror:
    """Recreates the directory hierarchy of a source tree under a destination.

    Only directories are copied. Each directory met during the walk is skipped,
    along with everything beneath it, when it is the ``.git`` metadata directory
    or when the exclusion rules reject it. Symbolic links are never followed.

    The walk is not transactional: if a directory cannot be listed or created,
    a MirrorError is raised and whatever was already created stays on disk.
    Creating a directory that already exists is not an error, so running the
    same mirror twice leaves the destination unchanged.

    Attributes:
        config (MirrorConfig): Settings for the run; only ``max_depth`` is used here.
        exclusion_rules (Optional[BaseExclusionRules]): Rules deciding which directories to skip.
        quiet (bool): Whether to suppress the per-directory notices.
        created_count (int): Directories created by the last walk.
        ignored_count (int): Directories skipped by exclusion rules during the last walk.

    Example:
        >>> import tempfile
        >>> from repo2dirs.exclusion_rules.glob_rules import GlobExclusionRules
        >>> with tempfile.TemporaryDirectory() as src, tempfile.TemporaryDirectory() as dst:
        ...     os.makedirs(os.path.join(src, "lib", "node_modules"))
        ...     mirror = StructureMirror(MirrorConfig(src), GlobExclusionRules(["node_modules"]), quiet=True)
        ...     mirror.mirror(src, dst)
        ...     sorted(os.listdir(dst)), os.listdir(os.path.join(dst, "lib"))
        (['lib'], [])
    """

    def __init__(
        self,
        config: MirrorConfig,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        quiet: bool = False,
        out: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.exclusion_rules = exclusion_rules
        self.quiet = quiet
        self.out = out if out is not None else sys.stdout
        self.created_count = 0
        self.ignored_count = 0

    def mirror(self, source_dir: PathType, dest_dir: PathType) -> None:
        """Create ``dest_dir`` and copy the directory structure of ``source_dir`` into it.

        Raises:
            MirrorError: If a directory cannot be listed or created.
        """
        self.created_count = 0
        self.ignored_count = 0
        self._make_directory(Path(dest_dir))
        self.walk(source_dir, dest_dir)

    def walk(self, source_dir: PathType, dest_dir: PathType, current_depth: int = 0, relative_path: str = "") -> None:
        """Copy the directories below ``source_dir`` into ``dest_dir``.

        Args:
            source_dir: Directory whose children are examined.
            dest_dir: Existing directory that receives the copies.
            current_depth: Depth of the children of ``source_dir``, where 0 is the
                repository root's immediate children.
            relative_path: Path of ``source_dir`` relative to the repository root,
                with a trailing slash ("" for the root itself).

        Raises:
            MirrorError: If a directory cannot be listed or created.
        """
        if self.config.depth_exceeded(current_depth):
            return

        rules = self.exclusion_rules
        if rules is not None and not rules.has_rules():
            rules = None

        # Stack of (source, dest, depth, relative path, names not yet visited)
        source = Path(source_dir)
        pending = [(source, Path(dest_dir), current_depth, relative_path, iter(self._list_directories(source)))]

        while pending:
            source, dest, depth, parent_relative, names = pending[-1]
            name = next(names, None)
            if name is None:
                pending.pop()
                continue

            if name == VCS_METADATA_DIR:
                continue

            child_relative = f"{parent_relative}{name}/"
            if rules is not None and rules.exclude(child_relative):
                self.ignored_count += 1
                self._notify(f"Ignoring directory: {name}")
                continue

            dest_path = dest / name
            self._make_directory(dest_path)
            self.created_count += 1
            self._notify(f"Created directory: {dest_path}")

            if not self.config.depth_exceeded(depth + 1):
                child_source = source / name
                pending.append(
                    (child_source, dest_path, depth + 1, child_relative, iter(self._list_directories(child_source)))
                )

    def _list_directories(self, path: Path) -> List[str]:
        try:
            with os.scandir(path) as entries:
                names = [entry.name for entry in entries if entry.is_dir(follow_symlinks=False)]
        except OSError as e:
            raise MirrorError(str(path), "list", e.strerror or str(e)) from e
        return sorted(names)

    def _make_directory(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MirrorError(str(path), "create", e.strerror or str(e)) from e

    def _notify(self, message: str) -> None:
        if not self.quiet:
            print(message, file=self.out)


def copy_folder_structure(
    source_dir: PathType,
    dest_dir: PathType,
    config: MirrorConfig,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    quiet: bool = False,
) -> StructureMirror:
    """Mirror the directories of ``source_dir`` into ``dest_dir``.

    When no exclusion rules are given they are built from ``config``.

    Returns:
        The StructureMirror used, for access to its counts.

    Raises:
        MirrorError: If a directory cannot be listed or created.
    """
    if exclusion_rules is None:
        exclusion_rules = config.build_exclusion_rules()
    mirror = StructureMirror(config, exclusion_rules, quiet=quiet)
    mirror.mirror(source_dir, dest_dir)
    return mirror
