"""Pick and construct the best clipboard provider for an environment."""

import logging
from typing import Callable, Optional

from .base import ClipboardProvider
from .binary import BinaryInvocationProvider
from .config import ClipboardConfig
from .errors import ClipboardError
from .models import Environment
from .native import NativeProvider
from .osc52 import EscapeSequenceProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[ClipboardConfig], ClipboardProvider]


def _fork(config: ClipboardConfig) -> ClipboardProvider:
    from .fork import ForkProvider
    return ForkProvider()


def _x11_bin(config: ClipboardConfig) -> ClipboardProvider:
    return BinaryInvocationProvider.for_x11(config)


def _wayland_bin(config: ClipboardConfig) -> ClipboardProvider:
    return BinaryInvocationProvider.for_wayland(config)


def _osc52(config: ClipboardConfig) -> ClipboardProvider:
    return EscapeSequenceProvider()


def _macos_native(config: ClipboardConfig) -> ClipboardProvider:
    return NativeProvider(environment=Environment.MACOS)


def _windows_native(config: ClipboardConfig) -> ClipboardProvider:
    return NativeProvider(environment=Environment.WINDOWS)


# Providers that keep contents after exit come first
CANDIDATES: dict[Environment, list[ProviderFactory]] = {
    Environment.X11: [_fork, _x11_bin],
    Environment.WAYLAND: [_wayland_bin],
    Environment.TTY: [_osc52],
    Environment.MACOS: [_macos_native],
    Environment.WINDOWS: [_windows_native],
}


def select(
    env: Environment,
    config: Optional[ClipboardConfig] = None,
) -> Optional[ClipboardProvider]:
    """Construct the first working provider for env, or None.

    Never falls back to providers of another environment.
    """
    config = config or ClipboardConfig.from_env()

    for factory in CANDIDATES[env]:
        try:
            provider = factory(config)
        except ClipboardError as e:
            logger.debug("Skipping %s for %s: %s", factory.__name__.lstrip("_"), env.value, e)
            continue
        logger.debug("Selected %s for %s", provider.name, env.value)
        return provider

    logger.debug("No clipboard provider available for %s", env.value)
    return None
