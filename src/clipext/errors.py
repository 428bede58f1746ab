"""Error types raised by clipboard providers."""

from typing import Optional


class ClipboardError(Exception):
    """Base class for all clipboard errors."""
    pass


class ResourceUnavailableError(ClipboardError):
    """A resource required by a backend is not available."""
    pass


class HelperNotFoundError(ResourceUnavailableError):
    """None of the helper binaries for a backend could be found."""

    def __init__(self, helpers: tuple[str, ...]):
        self.helpers = helpers
        names = " or ".join(helpers)
        super().__init__(f"Could not find {names} binary for clipboard support")


class ExecutionError(ClipboardError):
    """A helper process could not be run or exited unsuccessfully."""

    def __init__(self, helper: str, message: str, returncode: Optional[int] = None):
        self.helper = helper
        self.returncode = returncode
        super().__init__(message)

    @classmethod
    def from_status(cls, helper: str, returncode: int) -> "ExecutionError":
        return cls(
            helper,
            f"Failed to use clipboard, {helper} exited with status code {returncode}",
            returncode=returncode,
        )


class ClipboardIOError(ClipboardError):
    """Piping contents to or from a helper process failed."""

    def __init__(self, helper: str, error: OSError):
        self.helper = helper
        super().__init__(f"Failed to access clipboard using {helper}: {error}")


class DecodingError(ClipboardError):
    """Clipboard contents are not valid UTF-8."""

    def __init__(self, error: UnicodeDecodeError):
        super().__init__(f"Failed to parse clipboard contents as valid UTF-8: {error}")


class UnsupportedOperationError(ClipboardError):
    """The operation is not supported by this provider."""
    pass


class ForkError(ClipboardError):
    """Failed to fork the process that keeps the clipboard alive."""
    pass


class NativeClipboardError(ClipboardError):
    """Error reported by a native clipboard binding."""
    pass
