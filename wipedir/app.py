"""
Entry point for the wipedir command.

Usage:
    wipedir -s <start> -d <pattern> [-d <pattern> ...] [-r] [-f]

Environment variables:
    WIPEDIR_LOG_LEVEL: Logging level (default: WARNING)
    WIPEDIR_LOG_FILE: Also append logs to this file
    WIPEDIR_NO_COLOR: Disable console colors
    WIPEDIR_DEBUG: Print parsed arguments before running
    WIPEDIR_CONFIRM_EMPTY_BATCH: Wait for confirmation even when nothing matched
"""

import logging
import sys
from typing import List, Optional, Sequence

from wipedir.cli import execute
from wipedir.common.config import config
from wipedir.common.constants import APP_NAME, EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from wipedir.common.exception import InvalidArgumentError, SearchError
from wipedir.common.utils.output_sink import OutputSink, get_output_sink
from wipedir.services.wipe_service import WipeService

logger = logging.getLogger(__name__)


def configure_logging() -> Optional[str]:
    """Configure root logging to stderr and, optionally, a log file.

    Returns:
        A warning message when the log file cannot be opened, in which case
        logging goes to stderr only. None otherwise.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    warning = None
    if config.LOG_FILE:
        try:
            handlers.append(logging.FileHandler(config.LOG_FILE, mode="a"))
        except OSError as e:
            warning = f"Couldn't open log file '{config.LOG_FILE}', logging to stderr only. {e}"

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
        format=config.LOG_FORMAT,
        handlers=handlers,
    )
    return warning


def main(
    argv: Optional[Sequence[str]] = None,
    sink: Optional[OutputSink] = None,
    service: Optional[WipeService] = None,
) -> int:
    """Run wipedir and return the process exit code.

    Per-directory deletion failures are reported but still exit with 0.
    """
    log_warning = configure_logging()
    sink = sink or get_output_sink()
    sink.set_title(APP_NAME)
    if log_warning:
        logger.warning(log_warning)
        sink.warning(log_warning)

    try:
        outcomes = execute(argv, sink, service)
    except InvalidArgumentError as e:
        logger.error(f"Invalid arguments: {e}")
        sink.error(str(e))
        return EXIT_FAILURE
    except SearchError as e:
        logger.error(f"Search failed at {e.path}: {e.error}")
        sink.error(str(e))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sink.error("Aborted.")
        return EXIT_INTERRUPTED

    failed = [outcome for outcome in outcomes if not outcome.succeeded]
    if failed:
        logger.warning(f"{len(failed)} of {len(outcomes)} directories could not be deleted")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
