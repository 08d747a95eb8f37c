"""
User-facing console output.

Every message carries a MessageStyle; the sink maps styles to terminal colors
so callers never touch console color state directly.
"""

import sys
from enum import Enum
from typing import IO, Optional

from rich.console import Console

from wipedir.common.config import config


class MessageStyle(str, Enum):
    PLAIN = "plain"
    PROMPT = "prompt"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


STYLE_MAP = {
    MessageStyle.PLAIN: None,
    MessageStyle.PROMPT: "green",
    MessageStyle.SUCCESS: "green",
    MessageStyle.WARNING: "yellow",
    MessageStyle.ERROR: "red",
}


def printable(message: str, encoding: str) -> str:
    """Make message writable to a stream with the given encoding.

    Undecodable bytes in file names (surrogate escapes from os.scandir) and
    characters the stream cannot encode become replacement characters.
    """
    try:
        message = message.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    except UnicodeEncodeError:
        message = message.encode("utf-8", "replace").decode("utf-8")
    try:
        return message.encode(encoding, "replace").decode(encoding)
    except LookupError:
        return message


class OutputSink:
    """Console output sink backed by rich.

    Args:
        file: Stream to write to, stdout by default.
        no_color: Disable colors. Defaults to the NO_COLOR configuration.
    """

    def __init__(self, file: Optional[IO[str]] = None, no_color: Optional[bool] = None):
        if no_color is None:
            no_color = config.NO_COLOR
        self.console = Console(
            file=file if file is not None else sys.stdout,
            no_color=no_color,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def emit(self, message: str, style: MessageStyle = MessageStyle.PLAIN) -> None:
        # Markup is off so paths containing brackets print verbatim
        self.console.print(
            printable(message, self.console.encoding),
            style=STYLE_MAP[style],
            markup=False,
        )

    def prompt(self, message: str) -> None:
        self.emit(message, MessageStyle.PROMPT)

    def success(self, message: str) -> None:
        self.emit(message, MessageStyle.SUCCESS)

    def warning(self, message: str) -> None:
        self.emit(message, MessageStyle.WARNING)

    def error(self, message: str) -> None:
        self.emit(message, MessageStyle.ERROR)

    def set_title(self, title: str) -> bool:
        """Set the terminal window title, returns False where unsupported."""
        return self.console.set_window_title(title)


_output_sink: Optional[OutputSink] = None


def get_output_sink() -> OutputSink:
    """Get the global OutputSink instance writing to stdout."""
    global _output_sink
    if _output_sink is None:
        _output_sink = OutputSink()
    return _output_sink
