"""Clipboard provider interface and the composed provider."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import Environment


class ClipboardProvider(ABC):
    """Bidirectional clipboard capability.

    Concrete variants: NativeProvider, BinaryInvocationProvider, ForkProvider,
    EscapeSequenceProvider and ComposedProvider.
    """

    #: Environment this provider targets, None if it is not tied to one.
    environment: Optional[Environment] = None

    #: Whether contents set through this provider survive the process exiting.
    persists_after_exit: bool = False

    @property
    def name(self) -> str:
        """Human-readable name for status messages."""
        return type(self).__name__

    @abstractmethod
    def get_contents(self) -> str:
        """Return the current clipboard text."""

    @abstractmethod
    def set_contents(self, contents: str) -> None:
        """Replace the clipboard text."""

    def __repr__(self) -> str:
        return f"<{self.name}>"


class ComposedProvider(ClipboardProvider):
    """Use one provider for reading and another for writing.

    The two are not kept consistent: a read right after a write may still
    return the old contents until the writer's backend has committed them.
    """

    def __init__(self, reader: ClipboardProvider, writer: ClipboardProvider):
        self.reader = reader
        self.writer = writer

    @property
    def name(self) -> str:
        return f"{self.reader.name} + {self.writer.name}"

    @property
    def environment(self) -> Optional[Environment]:
        return self.writer.environment

    @property
    def persists_after_exit(self) -> bool:
        return self.writer.persists_after_exit

    def get_contents(self) -> str:
        return self.reader.get_contents()

    def set_contents(self, contents: str) -> None:
        self.writer.set_contents(contents)
