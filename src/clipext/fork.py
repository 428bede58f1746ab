"""X11 clipboard provider that forks to set contents.

Setting the clipboard forks a detached process which takes ownership of
the selection and keeps serving it until another application replaces
the contents, so it may outlive the calling process.

The parent returns as soon as the fork succeeded. Errors inside the
detached process cannot reach the caller; they are logged from the
child instead, on stderr only when it is a terminal.
"""

import logging
import os
from typing import Callable, Optional

from .base import ClipboardProvider
from .errors import ForkError
from .models import Environment
from .x11 import X11Connection

logger = logging.getLogger(__name__)


def run_detached_job(job: Callable[[], None]) -> None:
    """Run job in the detached process, then exit without returning."""
    code = 0
    try:
        job()
    except Exception:
        logger.exception("Clipboard owner process failed")
        code = 1
    finally:
        # Skip atexit handlers and buffered output inherited from the parent
        os._exit(code)


def detach_stdio() -> None:
    """Point the standard streams at /dev/null.

    Otherwise a caller whose output is captured waits for EOF until the
    clipboard is taken over. Stderr stays attached when it is a terminal so owner
    errors remain visible there.
    """
    devnull = os.open(os.devnull, os.O_RDWR)
    try:
        os.dup2(devnull, 0)
        os.dup2(devnull, 1)
        if not os.isatty(2):
            os.dup2(devnull, 2)
    finally:
        if devnull > 2:
            os.close(devnull)


def spawn_detached(job: Callable[[], None]) -> None:
    """Run job in a process that is not a child of the caller.

    Double fork: the intermediate child starts a new session, forks the
    worker and exits at once, so the caller only waits for the
    intermediate and never for job.
    """
    try:
        pid = os.fork()
    except OSError as e:
        raise ForkError(f"Failed to fork process to set clipboard: {e}") from e

    if pid:
        try:
            _, status = os.waitpid(pid, 0)
        except ChildProcessError:
            # SIGCHLD is ignored, the intermediate was reaped automatically
            logger.debug("Intermediate process %d already reaped", pid)
            return
        if os.waitstatus_to_exitcode(status) != 0:
            raise ForkError("Failed to fork process to set clipboard")
        return

    code = 1
    try:
        os.setsid()
        detach_stdio()
        if os.fork() == 0:
            run_detached_job(job)
        code = 0
    except OSError:
        logger.exception("Failed to detach clipboard owner process")
    finally:
        os._exit(code)


class ForkProvider(ClipboardProvider):
    """Like the native X11 clipboard, but forks to set contents.

    get_contents reads through a live X11 connection.
    """

    environment = Environment.X11
    persists_after_exit = True

    def __init__(
        self,
        selection: str = "CLIPBOARD",
        connect: Optional[Callable[[str], X11Connection]] = None,
    ):
        self.selection = selection
        self._connect = connect or X11Connection
        self._connection = self._connect(selection)

    @property
    def name(self) -> str:
        return "X11 fork"

    def get_contents(self) -> str:
        return self._connection.get_contents()

    def set_contents(self, contents: str) -> None:
        spawn_detached(lambda: self._hold(contents))

    def _hold(self, contents: str) -> None:
        # The parent's connection must not be shared with the fork
        connection = self._connect(self.selection)
        try:
            connection.hold(contents)
        finally:
            connection.close()
