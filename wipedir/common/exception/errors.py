"""
Error taxonomy for wipedir.

Argument and search errors are fatal and abort the run before anything is
deleted. Deletion errors are scoped to a single target and never leave the
remover.
"""

from typing import Optional

from wipedir.common.constants import (
    DELETE_FAILED_MESSAGE,
    SEARCH_FAILED_MESSAGE,
)


class WipedirError(Exception):
    """Base class for all wipedir errors."""

    pass


class InvalidArgumentError(WipedirError):
    """Raised when command line input fails validation."""

    pass


class StartDirectoryError(InvalidArgumentError):
    """Raised when the start directory is blank or not a directory."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class SearchError(WipedirError):
    """Raised when enumerating the start directory fails.

    Attributes:
        path: Directory whose enumeration failed.
        error: Underlying OS error.
    """

    def __init__(self, path: str, error: OSError):
        super().__init__(SEARCH_FAILED_MESSAGE.format(error=error))
        self.path = path
        self.error = error


class DeletionError(WipedirError):
    """Failure to delete a single target directory."""

    def __init__(self, path: str, error: OSError):
        super().__init__(DELETE_FAILED_MESSAGE.format(path=path, error=error))
        self.path = path
        self.error = error
