from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class AcquisitionMethod(str, Enum):
    """How the repository tree is obtained before mirroring.

    Values:
        AUTO: Use git when it is installed, otherwise download an archive (default behavior)
        GIT: Always run a shallow ``git clone``
        HTTP: Always download the default-branch zip archive
    """

    AUTO = "auto"
    GIT = "git"
    HTTP = "http"
