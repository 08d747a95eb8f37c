"""
Runtime configuration for wipedir.

Values are read once from the environment (and an optional .env file in the
working directory) when the module is imported.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def get_bool_env(key: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment ("1", "true", "yes", "on")."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Logging
LOG_LEVEL = os.getenv("WIPEDIR_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("WIPEDIR_LOG_FILE")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console output
# NO_COLOR is the cross-tool convention, see https://no-color.org
NO_COLOR = get_bool_env("WIPEDIR_NO_COLOR") or bool(os.getenv("NO_COLOR"))

# Print parsed arguments before running
DEBUG = get_bool_env("WIPEDIR_DEBUG")

# Wait at the confirmation gate even when nothing matched
CONFIRM_EMPTY_BATCH = get_bool_env("WIPEDIR_CONFIRM_EMPTY_BATCH")
