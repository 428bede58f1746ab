"""Run clipboard helper binaries, piping contents through stdin/stdout."""

import subprocess

from .errors import (
    ClipboardIOError,
    DecodingError,
    ExecutionError,
    HelperNotFoundError,
)


def _spawn_error(helper: str, error: OSError) -> Exception:
    """Map a failure to start a helper onto the clipboard error taxonomy."""
    if isinstance(error, FileNotFoundError):
        return HelperNotFoundError((helper,))
    return ExecutionError(helper, f"Failed to start {helper}: {error}")


def read_output(helper: str, argv: list[str]) -> str:
    """Run a helper and return its stdout decoded as UTF-8.

    A non-zero exit status is an error even when output was produced.
    No timeout is applied, a hanging helper blocks the caller.
    """
    try:
        proc = subprocess.Popen(argv, stdin=subprocess.DEVNULL, stdout=subprocess.PIPE)
    except OSError as e:
        raise _spawn_error(helper, e) from e

    try:
        output, _ = proc.communicate()
    except OSError as e:
        proc.kill()
        proc.wait()
        raise ClipboardIOError(helper, e) from e

    if proc.returncode != 0:
        raise ExecutionError.from_status(helper, proc.returncode)

    try:
        return output.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodingError(e) from e


def write_input(helper: str, argv: list[str], contents: str) -> None:
    """Run a helper, write contents to its stdin and wait for it to exit.

    Stdout is discarded so helpers that daemonize (xclip, wl-copy) do not
    keep a pipe open. Stderr is inherited for diagnostics. Stdin is
    unbuffered so a helper that exits early fails the write itself, with
    nothing left to flush afterwards.
    """
    try:
        proc = subprocess.Popen(
            argv,
            stdin=subprocess.PIPE,
            stdout=subprocess.DEVNULL,
            bufsize=0,
        )
    except OSError as e:
        raise _spawn_error(helper, e) from e

    try:
        proc.stdin.write(contents.encode("utf-8"))
        proc.stdin.close()
    except OSError as e:
        proc.kill()
        proc.wait()
        raise ClipboardIOError(helper, e) from e

    try:
        returncode = proc.wait()
    except OSError as e:
        raise ClipboardIOError(helper, e) from e

    if returncode != 0:
        raise ExecutionError.from_status(helper, returncode)
