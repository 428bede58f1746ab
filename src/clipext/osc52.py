"""OSC 52 clipboard provider.

OSC 52 lets terminal applications write directly to the system clipboard
through an escape sequence on stdout. Works over SSH and needs no
external binaries, but only in terminals that support it (iTerm2,
Alacritty, kitty, Windows Terminal, tmux with set-clipboard on, ...).

Reading the clipboard is not possible, and there is no way to tell
whether the terminal accepted the contents.
"""

import base64
import sys
from typing import Optional, TextIO

from .base import ClipboardProvider, ComposedProvider
from .errors import ClipboardIOError, UnsupportedOperationError
from .models import Environment

# OSC 52: ESC ] 52 ; c ; <base64> BEL
# c = clipboard, BEL (\x07) = string terminator
OSC52_PREFIX = "\x1b]52;c;"
OSC52_SUFFIX = "\x07"


def osc52_sequence(contents: str) -> str:
    """Build the escape sequence setting the clipboard to contents."""
    encoded = base64.b64encode(contents.encode("utf-8")).decode("ascii")
    return f"{OSC52_PREFIX}{encoded}{OSC52_SUFFIX}"


class EscapeSequenceProvider(ClipboardProvider):
    """Set the clipboard by writing an OSC 52 sequence to the terminal."""

    environment = Environment.TTY
    # Contents live as long as the terminal, not this process
    persists_after_exit = True

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def name(self) -> str:
        return "OSC 52"

    def get_contents(self) -> str:
        raise UnsupportedOperationError(
            "Getting clipboard contents is not supported through this context"
        )

    def set_contents(self, contents: str) -> None:
        stream = self._stream or sys.stdout
        try:
            stream.write(osc52_sequence(contents))
            stream.flush()
        except OSError as e:
            raise ClipboardIOError("stdout", e) from e

    def with_reader(self, reader: ClipboardProvider) -> ComposedProvider:
        """Combine with another provider to support reading as well."""
        return ComposedProvider(reader, self)
