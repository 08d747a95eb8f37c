"""Start directory validation, run before any search or deletion."""

import logging
from pathlib import Path
from typing import Optional

from wipedir.common.constants import EMPTY_START_MESSAGE, NOT_A_DIRECTORY_MESSAGE
from wipedir.common.exception import StartDirectoryError

logger = logging.getLogger(__name__)


def validate_start_directory(value: Optional[str]) -> Path:
    """Check that the --start value names an existing directory.

    Args:
        value: Raw --start argument.

    Returns:
        The start directory as a Path.

    Raises:
        StartDirectoryError: If the value is empty, whitespace only, or does
            not reference an existing directory.
    """
    if value is None or not value.strip():
        raise StartDirectoryError(EMPTY_START_MESSAGE, value)

    path = Path(value)
    if not path.is_dir():
        raise StartDirectoryError(NOT_A_DIRECTORY_MESSAGE.format(value=value), value)

    logger.debug(f"Validated start directory: {path}")
    return path
