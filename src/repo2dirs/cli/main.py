"""Command-line interface for repo2dirs.

This module provides the command-line entry point, which fetches a repository
into a scratch directory and copies its folder structure to the output directory.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error (including a missing -g/--git-url)
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Copy a repository's folder structure into ./output
    $ repo2dirs -g https://github.com/user/repo -o ./output

    # Display version information
    $ repo2dirs --version
"""

import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from repo2dirs.acquisition import download_repository, repository_name
from repo2dirs.cli.argparser import config_from_args, create_parser
from repo2dirs.config import MirrorConfig
from repo2dirs.exceptions import AcquisitionError
from repo2dirs.structure_mirror import StructureMirror


def run(config: MirrorConfig, quiet: bool = False) -> StructureMirror:
    """Fetch the repository and copy its folder structure.

    The repository is fetched into a temporary directory that is removed when
    this function returns, whether or not it succeeds.

    Returns:
        The StructureMirror used, for access to its counts.

    Raises:
        FileNotFoundError: If a gitignore rules file does not exist.
        AcquisitionError: If the repository cannot be obtained.
        MirrorError: If the structure cannot be copied.
    """
    exclusion_rules = config.build_exclusion_rules()

    with tempfile.TemporaryDirectory(prefix="repo2dirs-") as temp_dir:
        print(f"Downloading repository: {config.repo_url}")
        repo_dir = Path(temp_dir) / "repo"
        try:
            download_repository(config.repo_url, repo_dir, config.method)
        except AcquisitionError as e:
            raise AcquisitionError(f"failed to download repository: {e}") from e

        print(f"Copying folder structure to: {config.output_dir}")
        mirror = StructureMirror(config, exclusion_rules, quiet=quiet)
        mirror.mirror(repo_dir, config.output_dir)

    print(
        f"Successfully copied folder structure from {repository_name(config.repo_url)} to: {config.output_dir} "
        f"({mirror.created_count} created, {mirror.ignored_count} ignored)"
    )
    return mirror


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the repo2dirs command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    # argparse exits with status 2 and prints usage when -g/--git-url is missing
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
        run(config, quiet=args.quiet)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
