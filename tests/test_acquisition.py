import io
import subprocess
import zipfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from repo2dirs.acquisition import (
    archive_url,
    clone_repository,
    download_archive,
    download_repository,
    is_git_installed,
    repository_name,
)
from repo2dirs.exceptions import AcquisitionError, ArchiveError
from repo2dirs.types import AcquisitionMethod


def zip_bytes(entries):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name in entries:
            zf.writestr(name, "" if name.endswith("/") else "data")
    return buffer.getvalue()


def mock_response(status_code=200, content=b""):
    """Create a mock for the object returned by requests.get used as a context manager."""
    response = MagicMock()
    response.status_code = status_code
    response.iter_content.return_value = [content[i : i + 10] for i in range(0, len(content), 10)]
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


@pytest.mark.parametrize(
    "repo_url,expected",
    [
        ("https://github.com/user/repo", "https://github.com/user/repo/archive/refs/heads/main.zip"),
        ("https://github.com/user/repo.git", "https://github.com/user/repo/archive/refs/heads/main.zip"),
        ("https://gitlab.com/group/repo.git", "https://gitlab.com/group/repo/-/archive/main/archive.zip"),
        ("https://bitbucket.org/team/repo", "https://bitbucket.org/team/repo/get/main.zip"),
        ("https://codeberg.org/user/repo", "https://codeberg.org/user/repo/archive/refs/heads/main.zip"),
    ],
)
def test_archive_url(repo_url, expected):
    assert archive_url(repo_url) == expected


@pytest.mark.parametrize(
    "repo_url,expected",
    [
        ("https://github.com/user/project.git", "project"),
        ("https://github.com/user/project", "project"),
        ("https://github.com/user/project/", "project"),
        ("git@github.com:user/project.git", "project"),
        ("", "repo"),
    ],
)
def test_repository_name(repo_url, expected):
    assert repository_name(repo_url) == expected


def test_is_git_installed():
    with patch("repo2dirs.acquisition.shutil.which", return_value="/usr/bin/git"):
        assert is_git_installed() is True
    with patch("repo2dirs.acquisition.shutil.which", return_value=None):
        assert is_git_installed() is False


def test_clone_repository_runs_shallow_clone(tmp_path):
    with patch("repo2dirs.acquisition.subprocess.run") as mock_run:
        clone_repository("https://github.com/user/repo", tmp_path / "repo")
    mock_run.assert_called_once_with(
        ["git", "clone", "--depth", "1", "https://github.com/user/repo", str(tmp_path / "repo")], check=True
    )


def test_clone_repository_failure(tmp_path):
    error = subprocess.CalledProcessError(128, ["git", "clone"])
    with patch("repo2dirs.acquisition.subprocess.run", side_effect=error):
        with pytest.raises(AcquisitionError, match="status 128"):
            clone_repository("https://github.com/user/missing", tmp_path / "repo")


def test_clone_repository_without_git(tmp_path):
    with patch("repo2dirs.acquisition.subprocess.run", side_effect=FileNotFoundError("git")):
        with pytest.raises(AcquisitionError, match="git executable not found"):
            clone_repository("https://github.com/user/repo", tmp_path / "repo")


def test_download_archive_writes_file(tmp_path):
    content = b"0123456789abcdefghijklmnopqrstuvwxyz"
    dest = tmp_path / "repo.zip"
    with patch("repo2dirs.acquisition.requests.get", return_value=mock_response(content=content)) as mock_get:
        download_archive("https://example.com/repo.zip", dest)
    assert dest.read_bytes() == content
    mock_get.assert_called_once()
    assert mock_get.call_args.args == ("https://example.com/repo.zip",)
    assert mock_get.call_args.kwargs["stream"] is True


def test_download_archive_http_error(tmp_path):
    with patch("repo2dirs.acquisition.requests.get", return_value=mock_response(status_code=404)):
        with pytest.raises(AcquisitionError, match="HTTP 404"):
            download_archive("https://example.com/repo.zip", tmp_path / "repo.zip")
    assert not (tmp_path / "repo.zip").exists()


def test_download_archive_transport_error(tmp_path):
    with patch(
        "repo2dirs.acquisition.requests.get", side_effect=requests.ConnectionError("connection refused")
    ):
        with pytest.raises(AcquisitionError, match="connection refused"):
            download_archive("https://example.com/repo.zip", tmp_path / "repo.zip")


def test_download_repository_prefers_git(tmp_path):
    with (
        patch("repo2dirs.acquisition.is_git_installed", return_value=True),
        patch("repo2dirs.acquisition.clone_repository") as mock_clone,
        patch("repo2dirs.acquisition.download_repository_archive") as mock_download,
    ):
        download_repository("https://github.com/user/repo", tmp_path / "repo")
    mock_clone.assert_called_once_with("https://github.com/user/repo", tmp_path / "repo")
    mock_download.assert_not_called()


def test_download_repository_falls_back_to_http(tmp_path, capsys):
    content = zip_bytes(["repo-main/", "repo-main/src/", "repo-main/src/app.py", "repo-main/docs/"])
    dest = tmp_path / "repo"
    with (
        patch("repo2dirs.acquisition.is_git_installed", return_value=False),
        patch("repo2dirs.acquisition.requests.get", return_value=mock_response(content=content)) as mock_get,
    ):
        download_repository("https://github.com/user/repo.git", dest)
    assert mock_get.call_args.args == ("https://github.com/user/repo/archive/refs/heads/main.zip",)
    assert sorted(p.name for p in dest.iterdir()) == ["docs", "src"]
    assert not (dest / "src" / "app.py").exists()
    assert "Git not found, using HTTP download..." in capsys.readouterr().out


def test_download_repository_forced_http_removes_archive(tmp_path):
    content = zip_bytes(["repo-main/", "repo-main/lib/"])
    seen = []

    def fake_download(url, dest_file):
        seen.append(Path(dest_file))
        Path(dest_file).write_bytes(content)

    with (
        patch("repo2dirs.acquisition.is_git_installed", return_value=True),
        patch("repo2dirs.acquisition.download_archive", side_effect=fake_download),
    ):
        download_repository("https://github.com/user/repo", tmp_path / "repo", AcquisitionMethod.HTTP)
    assert (tmp_path / "repo" / "lib").is_dir()
    assert seen and not seen[0].exists()


def test_download_repository_removes_archive_on_failure(tmp_path):
    seen = []

    def fake_download(url, dest_file):
        seen.append(Path(dest_file))
        Path(dest_file).write_bytes(b"corrupt")

    with patch("repo2dirs.acquisition.download_archive", side_effect=fake_download):
        with pytest.raises(ArchiveError):
            download_repository("https://github.com/user/repo", tmp_path / "repo", AcquisitionMethod.HTTP)
    assert seen and not seen[0].exists()


def test_download_repository_forced_git(tmp_path):
    with (
        patch("repo2dirs.acquisition.is_git_installed", return_value=False),
        patch("repo2dirs.acquisition.clone_repository") as mock_clone,
    ):
        download_repository("https://github.com/user/repo", tmp_path / "repo", AcquisitionMethod.GIT)
    mock_clone.assert_called_once()
