from readme_tree.types import PathType


class TraversalError(Exception):
    """
    Exception raised when a directory tree cannot be walked.

    This exception is raised when the root path does not exist or is not a directory,
    and when listing any directory visited during the walk fails (permission denied,
    the directory vanished between being listed by its parent and being read, etc.).
    The underlying OSError, if any, is chained as ``__cause__``.

    Attributes:
        path (str): The path that could not be read.
        reason (str): Short description of what went wrong.

    Example:
        >>> error = TraversalError("/missing/dir", "Root path does not exist")
        >>> str(error)
        'Root path does not exist: /missing/dir'
        >>> error.path
        '/missing/dir'
    """

    def __init__(self, path: PathType, reason: str) -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path (PathType): Path of the directory that could not be read.
            reason (str): Short description of the failure.
        """
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


class SettingsError(Exception):
    """
    Exception raised when a settings file cannot be loaded.

    This covers unreadable files, malformed JSON and values of the wrong type.

    Example:
        >>> error = SettingsError("maxDepth must be an integer")
        >>> str(error)
        'maxDepth must be an integer'
    """

    pass
