"""Repository directory-skeleton utilities.

This package copies the directory structure of a remote Git repository into a
local path, leaving out every file and any directory matched by ignore rules.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("repo2dirs")
except PackageNotFoundError:
    __version__ = "unknown"
