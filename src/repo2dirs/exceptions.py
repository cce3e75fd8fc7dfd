class AcquisitionError(Exception):
    """
    Exception raised when the repository tree cannot be obtained.

    This covers a failed ``git clone``, a transport error while downloading the
    repository archive, and a non-success HTTP status from the archive endpoint.

    Example:
        >>> error = AcquisitionError("failed to download repository: HTTP 404")
        >>> str(error)
        'failed to download repository: HTTP 404'
    """

    pass


class ArchiveError(AcquisitionError):
    """
    Exception raised when a downloaded repository archive cannot be read or extracted.

    Example:
        >>> error = ArchiveError("failed to open ZIP file: File is not a zip file")
        >>> isinstance(error, AcquisitionError)
        True
    """

    pass


class MirrorError(Exception):
    """
    Exception raised when the directory structure cannot be copied.

    Raised when a source directory cannot be listed or a destination directory
    cannot be created. Directories created before the failure are left in place.

    Attributes:
        path (str): The directory that could not be processed.
        action (str): What was being attempted ("list" or "create").
        reason (str): Description of the underlying error.

    Example:
        >>> error = MirrorError("/out/src", "create", "Permission denied")
        >>> str(error)
        'Failed to create directory /out/src: Permission denied'
    """

    def __init__(self, path: str, action: str, reason: str) -> None:
        """
        Initialize the exception with the failing path and the cause.

        Args:
            path (str): The directory that could not be processed.
            action (str): What was being attempted ("list" or "create").
            reason (str): Description of the underlying error.
        """
        self.path = path
        self.action = action
        self.reason = reason
        super().__init__(f"Failed to {action} directory {path}: {reason}")
