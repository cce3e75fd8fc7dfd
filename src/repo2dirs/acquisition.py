"""Obtaining a local directory tree for a remote repository.

Two strategies are supported: a shallow ``git clone`` when git is installed, and
otherwise a download of the default branch as a zip archive, from which only the
directories are extracted.
"""

import shutil
import subprocess
import tempfile
from pathlib import Path

import requests

from repo2dirs.archive import extract_directories
from repo2dirs.exceptions import AcquisitionError
from repo2dirs.types import AcquisitionMethod, PathType

DEFAULT_BRANCH = "main"
DOWNLOAD_TIMEOUT = 60
CHUNK_SIZE = 64 * 1024


def is_git_installed() -> bool:
    """Return True if a ``git`` executable is on the PATH."""
    return shutil.which("git") is not None


def clone_repository(repo_url: str, dest_dir: PathType) -> None:
    """Shallow-clone ``repo_url`` into ``dest_dir``.

    git's own progress output is passed through to the terminal.

    Raises:
        AcquisitionError: If git cannot be started or exits with an error.
    """
    print("Using git clone...")
    try:
        subprocess.run(["git", "clone", "--depth", "1", repo_url, str(dest_dir)], check=True)
    except FileNotFoundError as e:
        raise AcquisitionError("git executable not found") from e
    except subprocess.CalledProcessError as e:
        raise AcquisitionError(f"git clone exited with status {e.returncode}") from e


def archive_url(repo_url: str) -> str:
    """Derive the default-branch zip archive URL for a repository.

    >>> archive_url("https://github.com/user/repo.git")
    'https://github.com/user/repo/archive/refs/heads/main.zip'
    >>> archive_url("https://gitlab.com/group/repo")
    'https://gitlab.com/group/repo/-/archive/main/archive.zip'
    >>> archive_url("https://bitbucket.org/team/repo")
    'https://bitbucket.org/team/repo/get/main.zip'
    >>> archive_url("https://git.example.com/user/repo")
    'https://git.example.com/user/repo/archive/refs/heads/main.zip'
    """
    clean_url = repo_url[: -len(".git")] if repo_url.endswith(".git") else repo_url

    if "github.com" in clean_url:
        return f"{clean_url}/archive/refs/heads/{DEFAULT_BRANCH}.zip"
    elif "gitlab.com" in clean_url:
        return f"{clean_url}/-/archive/{DEFAULT_BRANCH}/archive.zip"
    elif "bitbucket.org" in clean_url:
        return f"{clean_url}/get/{DEFAULT_BRANCH}.zip"

    # Gitea, Forgejo and most self-hosted forges use the GitHub layout
    return f"{clean_url}/archive/refs/heads/{DEFAULT_BRANCH}.zip"


def download_archive(url: str, dest_file: PathType) -> None:
    """Download ``url`` to ``dest_file``.

    Raises:
        AcquisitionError: On a transport error or any status other than 200.
    """
    print(f"Downloading ZIP from: {url}")
    try:
        with requests.get(url, stream=True, timeout=DOWNLOAD_TIMEOUT) as response:
            if response.status_code != 200:
                raise AcquisitionError(f"HTTP {response.status_code}")
            with open(dest_file, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
    except requests.RequestException as e:
        raise AcquisitionError(f"request failed: {e}") from e
    except OSError as e:
        raise AcquisitionError(f"failed to save ZIP file: {e}") from e


def download_repository_archive(repo_url: str, dest_dir: PathType) -> None:
    """Download the repository archive and extract its directories into ``dest_dir``.

    The archive is written to a scratch directory that is removed on every exit path.

    Raises:
        AcquisitionError: If the download fails.
        ArchiveError: If the archive cannot be extracted.
    """
    with tempfile.TemporaryDirectory(prefix="repo2dirs-zip-") as scratch:
        archive_path = Path(scratch) / "repo.zip"
        download_archive(archive_url(repo_url), archive_path)
        extract_directories(archive_path, dest_dir)


def download_repository(
    repo_url: str,
    dest_dir: PathType,
    method: AcquisitionMethod = AcquisitionMethod.AUTO,
) -> None:
    """Populate ``dest_dir`` with the repository's directory tree.

    With AUTO, git is used if installed; otherwise the archive is downloaded.

    Raises:
        AcquisitionError: If the repository cannot be obtained.
    """
    if method == AcquisitionMethod.GIT or (method == AcquisitionMethod.AUTO and is_git_installed()):
        clone_repository(repo_url, dest_dir)
        return

    if method == AcquisitionMethod.AUTO:
        print("Git not found, using HTTP download...")
    download_repository_archive(repo_url, dest_dir)


def repository_name(repo_url: str) -> str:
    """Return the repository's name as given by the last segment of its URL.

    >>> repository_name("https://github.com/user/project.git")
    'project'
    >>> repository_name("")
    'repo'
    """
    name = repo_url.rstrip("/").split("/")[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name or "repo"
