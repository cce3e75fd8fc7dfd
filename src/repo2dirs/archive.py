"""Directory-only extraction of repository zip archives.

Hosting services wrap the contents of a "download as zip" archive in a single
top-level folder (``repo-main/``). extract_directories() strips that folder and
recreates every directory entry below it, skipping all files, which gives the
same shape a checkout would have for the structure mirror to walk.
"""

import posixpath
import sys
import zipfile
from pathlib import Path
from typing import List

from repo2dirs.exceptions import ArchiveError
from repo2dirs.types import PathType


def find_archive_root(names: List[str]) -> str:
    """Return the archive's top-level folder entry, or "" if it has none.

    The root is the first directory entry nested exactly one level deep, that
    is, whose name contains a single ``/`` (as its trailing character).

    >>> find_archive_root(["repo-main/", "repo-main/src/", "repo-main/README.md"])
    'repo-main/'
    >>> find_archive_root(["README.md", "src/app.py"])
    ''
    """
    for name in names:
        if name.endswith("/") and name.count("/") == 1:
            return name
    return ""


def _safe_relative(relative_path: str) -> str:
    normalized = posixpath.normpath(relative_path)
    if normalized.startswith("/") or normalized == ".." or normalized.startswith("../"):
        raise ArchiveError(f"archive entry escapes the destination directory: {relative_path}")
    return normalized


def _make_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArchiveError(f"failed to create directory {path}: {e.strerror or e}") from e


def extract_directories(archive_path: PathType, dest_dir: PathType) -> int:
    """Recreate the directory entries of a zip archive under ``dest_dir``.

    No file is ever extracted. Entries outside the archive's top-level folder are
    skipped, as is the folder itself. An archive without a single top-level folder
    is extracted as-is, with a warning, because no other layout is recognised.

    Args:
        archive_path: Path to the zip file.
        dest_dir: Directory that receives the structure; created if missing.

    Returns:
        The number of directory entries created.

    Raises:
        ArchiveError: If the archive cannot be opened, holds an entry that would
            land outside ``dest_dir``, or a directory cannot be created.
    """
    dest = Path(dest_dir)

    try:
        archive = zipfile.ZipFile(archive_path)
    except (OSError, zipfile.BadZipFile) as e:
        raise ArchiveError(f"failed to open ZIP file: {e}") from e

    created = 0
    with archive:
        _make_directory(dest)

        infos = archive.infolist()
        root = find_archive_root([info.filename for info in infos])
        if not root:
            print(
                f"Warning: no top-level folder found in {archive_path}; extracting directories as-is",
                file=sys.stderr,
            )

        for info in infos:
            if not info.filename.startswith(root):
                continue

            relative_path = info.filename[len(root) :]
            if not relative_path:
                continue

            if not info.is_dir():
                continue

            _make_directory(dest / _safe_relative(relative_path))
            created += 1

    return created
