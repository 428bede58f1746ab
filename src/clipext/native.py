"""Native clipboard passthrough provider."""

from typing import Optional, Protocol

import pyperclip

from .base import ClipboardProvider
from .errors import NativeClipboardError, ResourceUnavailableError
from .models import Environment


class NativeClipboard(Protocol):
    """Native clipboard binding."""

    def get_contents(self) -> str:
        ...

    def set_contents(self, contents: str) -> None:
        ...


class SystemClipboard:
    """Platform clipboard through pyperclip (pbcopy/pbpaste, Win32 API)."""

    def __init__(self):
        copy, paste = pyperclip.determine_clipboard()
        # pyperclip hands back falsy stubs when no mechanism is usable
        if not copy or not paste:
            raise ResourceUnavailableError("No native clipboard mechanism is available")
        self._copy = copy
        self._paste = paste

    def get_contents(self) -> str:
        return self._paste()

    def set_contents(self, contents: str) -> None:
        self._copy(contents)


class NativeProvider(ClipboardProvider):
    """Pass calls straight through to a native clipboard binding.

    Whether contents survive the process depends on the platform: the
    macOS and Windows clipboards keep them, an X11 selection does not.
    """

    def __init__(
        self,
        clipboard: Optional[NativeClipboard] = None,
        environment: Optional[Environment] = None,
        persists_after_exit: bool = True,
    ):
        self._clipboard = clipboard if clipboard is not None else SystemClipboard()
        self.environment = environment
        self.persists_after_exit = persists_after_exit

    @classmethod
    def for_x11(cls) -> "NativeProvider":
        """Provider backed by a direct X11 connection."""
        from .x11 import X11Connection
        return cls(X11Connection(), Environment.X11, persists_after_exit=False)

    def get_contents(self) -> str:
        try:
            return self._clipboard.get_contents()
        except pyperclip.PyperclipException as e:
            raise NativeClipboardError(str(e)) from e

    def set_contents(self, contents: str) -> None:
        try:
            self._clipboard.set_contents(contents)
        except pyperclip.PyperclipException as e:
            raise NativeClipboardError(str(e)) from e
