"""Manual acknowledgement step before anything is deleted."""

import logging
import sys
from typing import Callable, Optional, Sequence

from wipedir.common.constants import CONFIRMATION_PROMPT
from wipedir.common.utils.output_sink import OutputSink, get_output_sink

logger = logging.getLogger(__name__)

KeyReader = Callable[[], str]


def read_key() -> str:
    """Block until a single key is pressed.

    Reads one character in cbreak mode when stdin is a terminal, so Ctrl+C
    still interrupts. Falls back to reading a line when stdin is not a
    terminal; end of input counts as a key press.
    """
    if not sys.stdin.isatty():
        return sys.stdin.readline()

    try:
        import msvcrt
    except ImportError:
        msvcrt = None

    if msvcrt is not None:
        key = msvcrt.getwch()
        if key == "\x03":
            raise KeyboardInterrupt
        return key

    import termios
    import tty

    fd = sys.stdin.fileno()
    previous = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, previous)


class ConfirmationGate:
    """Shows the batch and waits for the user before deletion proceeds.

    There is no timeout and no way to answer "no": stopping the process is
    the only way out.
    """

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        key_reader: Optional[KeyReader] = None,
    ):
        self.sink = sink or get_output_sink()
        self.key_reader = key_reader or read_key

    def confirm(self, paths: Sequence[str]) -> None:
        for path in paths:
            self.sink.emit(path)

        self.sink.prompt(CONFIRMATION_PROMPT)
        logger.debug(f"Waiting for confirmation of {len(paths)} directories")
        self.key_reader()
        logger.info(f"Deletion of {len(paths)} directories confirmed")
