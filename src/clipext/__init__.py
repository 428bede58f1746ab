"""clipext - clipboard access that keeps working after the process exits."""

__version__ = "0.1.0"

from typing import Optional

from .base import ClipboardProvider, ComposedProvider
from .binary import BinaryInvocationProvider
from .config import ClipboardConfig
from .detect import detect
from .errors import (
    ClipboardError,
    ClipboardIOError,
    DecodingError,
    ExecutionError,
    ForkError,
    HelperNotFoundError,
    NativeClipboardError,
    ResourceUnavailableError,
    UnsupportedOperationError,
)
from .models import Environment, HelperKind
from .native import NativeProvider
from .osc52 import EscapeSequenceProvider
from .selector import select


def acquire(config: Optional[ClipboardConfig] = None) -> Optional[ClipboardProvider]:
    """Provider for the detected environment, or None if none is usable.

    Construction searches PATH and may open display connections, so call
    this once and keep the provider.
    """
    return select(detect(), config)


__all__ = [
    "__version__",
    "acquire",
    "detect",
    "select",
    "ClipboardConfig",
    "ClipboardProvider",
    "ComposedProvider",
    "BinaryInvocationProvider",
    "EscapeSequenceProvider",
    "NativeProvider",
    "Environment",
    "HelperKind",
    "ClipboardError",
    "ClipboardIOError",
    "DecodingError",
    "ExecutionError",
    "ForkError",
    "HelperNotFoundError",
    "NativeClipboardError",
    "ResourceUnavailableError",
    "UnsupportedOperationError",
]
