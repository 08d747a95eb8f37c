"""
Command line interface for wipedir.

Parses arguments, validates the start directory and hands a SearchRequest to
the WipeService.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from pydantic import ValidationError

from wipedir import __version__
from wipedir.common.config import config
from wipedir.common.constants import APP_NAME, EXIT_FAILURE, MAX_PATTERNS, MIN_PATTERNS
from wipedir.common.exception import InvalidArgumentError
from wipedir.common.utils.output_sink import OutputSink
from wipedir.models.request_models import SearchRequest
from wipedir.models.types import DeletionOutcome, ForceMode
from wipedir.services.validation import validate_start_directory
from wipedir.services.wipe_service import WipeService

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="wipedir", description=APP_NAME)
    parser.add_argument(
        "-s", "--start", required=True, help="The starting directory"
    )
    parser.add_argument(
        "-d",
        "--dir",
        dest="dirs",
        action="append",
        required=True,
        metavar="DIR",
        help=(
            "Directory to delete. For multiple directories provide the '-d' "
            f"argument up to {MAX_PATTERNS} times."
        ),
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        default=False,
        help="Force deletion (currently not implemented)",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        default=False,
        help="Recursive search",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_args(sink: OutputSink, args: argparse.Namespace) -> None:
    sink.emit(f"StartDir: {args.start}")
    sink.emit(f"Directory: {','.join(args.dirs)}")
    sink.emit(f"Force: {args.force}")
    sink.emit(f"Recursive: {args.recursive}")


def build_request(args: argparse.Namespace) -> SearchRequest:
    """Validate parsed arguments and build the SearchRequest.

    Raises:
        InvalidArgumentError: If the start directory or the pattern count is
            invalid.
    """
    root_path = validate_start_directory(args.start)
    try:
        return SearchRequest(
            root_path=root_path,
            patterns=args.dirs,
            recursive=args.recursive,
            force=ForceMode.from_flag(args.force),
        )
    except ValidationError as e:
        logger.debug(f"Request validation failed: {e}")
        raise InvalidArgumentError(
            f"The argument '-d' must be given between {MIN_PATTERNS} and "
            f"{MAX_PATTERNS} times, got {len(args.dirs)}."
        ) from e


def execute(
    argv: Optional[Sequence[str]],
    sink: OutputSink,
    service: Optional[WipeService] = None,
) -> List[DeletionOutcome]:
    """Parse argv and run the wipe pipeline.

    Raises:
        InvalidArgumentError: On invalid arguments, before any search.
        SearchError: If the search fails, before any deletion.
    """
    args = build_parser().parse_args(argv)
    logger.debug(
        f"Arguments: start={args.start!r} dirs={args.dirs} "
        f"force={args.force} recursive={args.recursive}"
    )
    if config.DEBUG:
        print_args(sink, args)

    request = build_request(args)
    service = service or WipeService(sink=sink)
    return service.run(request)
