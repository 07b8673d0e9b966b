"""Directory exceptions module."""


class DirectoryError(Exception):
    """Base exception for all directory exceptions."""


class DirectoryInvalidBackendError(DirectoryError):
    """Exception raised when the backend is invalid."""


class DirectoryUnavailable(DirectoryError):
    """Exception raised when a call to the directory fails."""
