"""Command-line argument parsing for repo2dirs.

This module defines the command-line interface for repo2dirs,
handling argument parsing and conversion to a MirrorConfig.
"""

import argparse
from pathlib import Path

from repo2dirs import __version__
from repo2dirs.config import UNLIMITED_DEPTH, MirrorConfig
from repo2dirs.types import AcquisitionMethod


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with repo2dirs' options.
    """
    description = """
    repo2dirs: Copy the folder structure of a Git repository, without any files.

    The repository is shallow-cloned with git when git is installed, or downloaded
    as a zip archive of its default branch otherwise. Its directories are then
    recreated under the output directory. The .git directory is never copied.

    Ignore patterns are matched against bare directory names and support two
    wildcards: * (any run of characters) and ? (exactly one character). Matching
    is case-sensitive. An ignored directory is skipped together with everything
    beneath it.
    """

    epilog = """
    Ignore file format:
      One pattern per line. Blank lines and lines starting with # are skipped.

    Examples:
      # Copy the whole structure into ./output
      repo2dirs -g https://github.com/user/repo -o ./output

      # Skip directories listed in ignore.txt and stop three levels down
      repo2dirs -g https://github.com/user/repo -i ignore.txt -d 3 -o ./output

      # Skip individual patterns given on the command line
      repo2dirs -g https://github.com/user/repo -x node_modules -x "build*"

      # Skip one specific path using .gitignore syntax
      repo2dirs -g https://github.com/user/repo -e skeleton.gitignore

      # Download the archive even if git is installed
      repo2dirs -g https://gitlab.com/group/repo -m http

    Note: This tool only copies directory structures, no files are copied.
    """

    parser = argparse.ArgumentParser(
        prog="repo2dirs",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"repo2dirs {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-g",
        "--git-url",
        required=True,
        metavar="URL",
        help="Git repository URL.",
    )
    parser.add_argument(
        "-i",
        "--ignore-file",
        type=Path,
        metavar="FILE",
        help="File with ignore patterns (one pattern per line).",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Individual ignore pattern, e.g. 'build*'. Can be specified multiple times.",
    )
    parser.add_argument(
        "-e",
        "--gitignore",
        type=Path,
        action="append",
        default=[],
        metavar="FILE",
        help=(
            "File of .gitignore-style rules matched against each directory's path relative to the "
            "repository root, for excluding one path without excluding same-named directories "
            "elsewhere. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=int,
        default=UNLIMITED_DEPTH,
        metavar="N",
        help="Maximum depth of folders to copy, 0 being the top-level folders (-1 for unlimited, the default).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("."),
        metavar="DIR",
        help="Output directory (default: current directory).",
    )
    parser.add_argument(
        "-m",
        "--method",
        choices=[method.value for method in AcquisitionMethod],
        default=AcquisitionMethod.AUTO.value,
        help="How to fetch the repository: git, http, or auto to use git when it is installed (default: auto).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print a line for every created or ignored directory.",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> MirrorConfig:
    """Build the run configuration from parsed arguments.

    Raises:
        FileNotFoundError: If the ignore file does not exist.
    """
    return MirrorConfig.from_options(
        repo_url=args.git_url,
        ignore_file=args.ignore_file,
        patterns=args.exclude,
        max_depth=args.max_depth,
        output_dir=args.output,
        gitignore_files=args.gitignore,
        method=AcquisitionMethod(args.method),
    )
