"""Data models for environments and helper binaries."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Environment(Enum):
    """Display or terminal environment the process runs in."""
    X11 = "x11"
    WAYLAND = "wayland"
    MACOS = "macos"
    WINDOWS = "windows"
    TTY = "tty"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """Create environment from string, case-insensitive."""
        normalized = value.lower().strip()
        for env in cls:
            if env.value == normalized:
                return env
        raise ValueError(f"Unknown environment: {value}")


class HelperKind(Enum):
    """Helper binary families used by the binary invocation backend."""
    XCLIP = "xclip"
    XSEL = "xsel"
    WL_CLIPBOARD = "wl-clipboard"


@dataclass(frozen=True)
class HelperCommand:
    """One helper invocation: a binary name, an optional fixed path and its arguments."""
    name: str
    args: tuple[str, ...] = ()
    path: Optional[str] = None

    @property
    def executable(self) -> str:
        """Path to run, falling back to a PATH lookup of the name."""
        return self.path or self.name

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]


@dataclass(frozen=True)
class HelperPair:
    """Resolved read and write commands for one helper family."""
    kind: HelperKind
    reader: HelperCommand
    writer: HelperCommand


def xclip_pair(path: Optional[str] = None) -> HelperPair:
    return HelperPair(
        kind=HelperKind.XCLIP,
        reader=HelperCommand("xclip", ("-sel", "clip", "-out"), path),
        writer=HelperCommand("xclip", ("-sel", "clip"), path),
    )


def xsel_pair(path: Optional[str] = None) -> HelperPair:
    return HelperPair(
        kind=HelperKind.XSEL,
        reader=HelperCommand("xsel", ("--clipboard", "--output"), path),
        writer=HelperCommand("xsel", ("--clipboard", "--input"), path),
    )


def wl_clipboard_pair(
    copy_path: Optional[str] = None,
    paste_path: Optional[str] = None,
) -> HelperPair:
    # wl-paste appends a newline unless told otherwise
    return HelperPair(
        kind=HelperKind.WL_CLIPBOARD,
        reader=HelperCommand("wl-paste", ("--no-newline",), paste_path),
        writer=HelperCommand("wl-copy", (), copy_path),
    )
