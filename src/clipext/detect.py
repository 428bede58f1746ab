"""Runtime detection of the display or terminal environment.

Best effort only: the result is a guess from environment variables and
callers must tolerate it being wrong.
"""

import os
import sys
from typing import Mapping, Optional

from .models import Environment

SESSION_TYPE_VAR = "XDG_SESSION_TYPE"
WAYLAND_DISPLAY_VAR = "WAYLAND_DISPLAY"
X11_DISPLAY_VAR = "DISPLAY"


def detect(
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> Environment:
    """Classify the current environment.

    An explicit session type always wins over the presence of display
    variables, which are only consulted when the session type is unset
    or unrecognized. Falls back to X11 when nothing matches.
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return Environment.MACOS
    if platform == "win32":
        return Environment.WINDOWS

    environ = os.environ if environ is None else environ
    session_type = environ.get(SESSION_TYPE_VAR, "").strip().lower()

    if session_type == "wayland":
        return Environment.WAYLAND
    if session_type == "x11":
        return Environment.X11
    if session_type == "tty":
        return Environment.TTY

    if environ.get(WAYLAND_DISPLAY_VAR):
        return Environment.WAYLAND
    if environ.get(X11_DISPLAY_VAR):
        return Environment.X11

    return Environment.X11
