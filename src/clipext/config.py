"""Configuration via environment variables."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _path_from(environ: Mapping[str, str], name: str) -> Optional[str]:
    """Read a helper path override, treating blank values as unset."""
    value = environ.get(name, "").strip()
    return value or None


def _flag_from(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


# Helper binary overrides, bypass PATH lookup when set
XCLIP_PATH = _path_from(os.environ, "XCLIP_PATH")
XSEL_PATH = _path_from(os.environ, "XSEL_PATH")
WL_COPY_PATH = _path_from(os.environ, "WL_COPY_PATH")
WL_PASTE_PATH = _path_from(os.environ, "WL_PASTE_PATH")

# Guess a helper name instead of failing when none is found on PATH
LAZY_HELPERS = _flag_from(os.environ, "CLIPEXT_LAZY_HELPERS")


@dataclass(frozen=True)
class ClipboardConfig:
    """Static configuration threaded into the selector and backends."""
    xclip_path: Optional[str] = None
    xsel_path: Optional[str] = None
    wl_copy_path: Optional[str] = None
    wl_paste_path: Optional[str] = None
    lazy_helpers: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClipboardConfig":
        """Create config from environment variables.

        Without an explicit mapping the values captured at import time are
        used, so the config stays fixed for the process lifetime.

        Env vars:
            XCLIP_PATH, XSEL_PATH: fixed paths for the X11 helpers
            WL_COPY_PATH, WL_PASTE_PATH: fixed paths for the Wayland helpers
            CLIPEXT_LAZY_HELPERS: defer missing helper errors to first use
        """
        if environ is None:
            return cls(
                xclip_path=XCLIP_PATH,
                xsel_path=XSEL_PATH,
                wl_copy_path=WL_COPY_PATH,
                wl_paste_path=WL_PASTE_PATH,
                lazy_helpers=LAZY_HELPERS,
            )
        return cls(
            xclip_path=_path_from(environ, "XCLIP_PATH"),
            xsel_path=_path_from(environ, "XSEL_PATH"),
            wl_copy_path=_path_from(environ, "WL_COPY_PATH"),
            wl_paste_path=_path_from(environ, "WL_PASTE_PATH"),
            lazy_helpers=_flag_from(environ, "CLIPEXT_LAZY_HELPERS"),
        )
