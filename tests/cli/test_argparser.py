"""Unit tests for the argument parser module in repo2dirs CLI."""

from pathlib import Path

import pytest

from repo2dirs.cli.argparser import config_from_args, create_parser
from repo2dirs.config import UNLIMITED_DEPTH
from repo2dirs.types import AcquisitionMethod

REPO_URL = "https://github.com/user/repo"


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args(["-g", REPO_URL])
    assert args.git_url == REPO_URL
    assert args.ignore_file is None
    assert args.exclude == []
    assert args.gitignore == []
    assert args.max_depth == UNLIMITED_DEPTH
    assert args.output == Path(".")
    assert args.method == "auto"
    assert args.quiet is False


def test_all_options(parser, tmp_path):
    args = parser.parse_args(
        [
            "--git-url",
            REPO_URL,
            "--ignore-file",
            "ignore.txt",
            "-x",
            "node_modules",
            "--exclude",
            "build*",
            "-e",
            "a.gitignore",
            "-e",
            "b.gitignore",
            "--max-depth",
            "3",
            "--output",
            str(tmp_path),
            "--method",
            "http",
            "--quiet",
        ]
    )
    assert args.ignore_file == Path("ignore.txt")
    assert args.exclude == ["node_modules", "build*"]
    assert args.gitignore == [Path("a.gitignore"), Path("b.gitignore")]
    assert args.max_depth == 3
    assert args.output == tmp_path
    assert args.method == "http"
    assert args.quiet is True


def test_negative_depth(parser):
    assert parser.parse_args(["-g", REPO_URL, "-d", "-5"]).max_depth == -5


def test_missing_git_url_exits_with_usage(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args([])
    assert excinfo.value.code != 0
    err = capsys.readouterr().err
    assert "usage:" in err
    assert "-g/--git-url" in err


def test_invalid_depth(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["-g", REPO_URL, "-d", "deep"])


def test_invalid_method(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["-g", REPO_URL, "-m", "svn"])


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("repo2dirs ")


def test_config_from_args(parser, tmp_path):
    ignore_file = tmp_path / "ignore.txt"
    ignore_file.write_text("node_modules\n# comment\n")
    args = parser.parse_args(
        ["-g", REPO_URL, "-i", str(ignore_file), "-x", "dist", "-d", "2", "-o", str(tmp_path / "out"), "-m", "git"]
    )
    config = config_from_args(args)
    assert config.repo_url == REPO_URL
    assert config.ignore_patterns == ("node_modules", "dist")
    assert config.max_depth == 2
    assert config.output_dir == tmp_path / "out"
    assert config.method == AcquisitionMethod.GIT


def test_config_from_args_missing_ignore_file(parser, tmp_path):
    args = parser.parse_args(["-g", REPO_URL, "-i", str(tmp_path / "missing.txt")])
    with pytest.raises(FileNotFoundError):
        config_from_args(args)
