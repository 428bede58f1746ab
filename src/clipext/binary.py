"""Clipboard provider invoking helper binaries (xclip/xsel, wl-copy/wl-paste).

The helper keeps serving the clipboard after it has read the contents,
so they stay available after this process exits. Each call spawns and
reaps its own helper process, which is slower than a native binding and
means a value set may not be readable immediately.
"""

import logging
import shutil
from typing import Optional

from . import bridge
from .base import ClipboardProvider, ComposedProvider
from .config import ClipboardConfig
from .errors import HelperNotFoundError
from .models import (
    Environment,
    HelperPair,
    wl_clipboard_pair,
    xclip_pair,
    xsel_pair,
)

logger = logging.getLogger(__name__)


def resolve_x11_helpers(config: ClipboardConfig) -> HelperPair:
    """Pick xclip or xsel: configured paths first, then PATH, xclip preferred."""
    if config.xclip_path:
        return xclip_pair(config.xclip_path)
    if config.xsel_path:
        return xsel_pair(config.xsel_path)
    if shutil.which("xclip"):
        return xclip_pair()
    if shutil.which("xsel"):
        return xsel_pair()
    if config.lazy_helpers:
        logger.debug("Neither xclip nor xsel found, assuming xclip")
        return xclip_pair()
    raise HelperNotFoundError(("xclip", "xsel"))


def resolve_wayland_helpers(config: ClipboardConfig) -> HelperPair:
    """Pick wl-copy/wl-paste; each half may have its own configured path."""
    if config.wl_copy_path or config.wl_paste_path:
        return wl_clipboard_pair(config.wl_copy_path, config.wl_paste_path)
    if shutil.which("wl-copy") or shutil.which("wl-paste"):
        return wl_clipboard_pair()
    if config.lazy_helpers:
        logger.debug("wl-clipboard not found, assuming wl-copy/wl-paste")
        return wl_clipboard_pair()
    raise HelperNotFoundError(("wl-copy", "wl-paste"))


class BinaryInvocationProvider(ClipboardProvider):
    """Get and set the clipboard by running a helper binary per call."""

    persists_after_exit = True

    def __init__(self, helpers: HelperPair, environment: Optional[Environment] = None):
        self.helpers = helpers
        self.environment = environment

    @classmethod
    def for_x11(cls, config: Optional[ClipboardConfig] = None) -> "BinaryInvocationProvider":
        config = config or ClipboardConfig.from_env()
        return cls(resolve_x11_helpers(config), Environment.X11)

    @classmethod
    def for_wayland(cls, config: Optional[ClipboardConfig] = None) -> "BinaryInvocationProvider":
        config = config or ClipboardConfig.from_env()
        return cls(resolve_wayland_helpers(config), Environment.WAYLAND)

    @property
    def name(self) -> str:
        return f"Binary ({self.helpers.kind.value})"

    def get_contents(self) -> str:
        reader = self.helpers.reader
        return bridge.read_output(reader.name, reader.argv)

    def set_contents(self, contents: str) -> None:
        writer = self.helpers.writer
        bridge.write_input(writer.name, writer.argv, contents)

    def with_x11(self) -> ComposedProvider:
        """Read through a direct X11 connection, keep writing through the helper.

        Avoids spawning a process for every read while keeping the
        persistence of the helper for writes.
        """
        from .native import NativeProvider
        return ComposedProvider(NativeProvider.for_x11(), self)
