"""Constants shared across wipedir."""

APP_NAME = "Wipedir"

# Pattern count limits for --dir
MIN_PATTERNS = 1
MAX_PATTERNS = 10

# Process exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# User-facing messages
CONFIRMATION_PROMPT = "Press any key to continue..."
NO_MATCHES_MESSAGE = "No matching directories found."
EMPTY_START_MESSAGE = "The argument '-s' can't be null or empty or only containing whitespaces."
NOT_A_DIRECTORY_MESSAGE = "The argument -s with the value '{value}' is not a directory."
SEARCH_FAILED_MESSAGE = "Couldn't access all folders due to permission issues. {error}"
DELETE_FAILED_MESSAGE = "Couldn't delete folder '{path}'. Exception: {error}"
FORCE_NOT_IMPLEMENTED_MESSAGE = "Force deletion is not implemented, deleting normally."
