from .errors import (
    DeletionError,
    InvalidArgumentError,
    SearchError,
    StartDirectoryError,
    WipedirError,
)

__all__ = [
    "WipedirError",
    "InvalidArgumentError",
    "StartDirectoryError",
    "SearchError",
    "DeletionError",
]
