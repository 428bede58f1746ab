"""Pytest fixtures for clipext tests."""

import os
import sys
from pathlib import Path

import pytest

from clipext.base import ClipboardProvider


# Fake xclip/xsel/wl-clipboard: reads when given a read flag, stores stdin otherwise
FAKE_HELPER_SCRIPT = """#!/bin/sh
store="{store}"
for arg in "$@"; do
    case "$arg" in
        -out|--output|--no-newline)
            cat "$store" 2>/dev/null
            exit 0
            ;;
    esac
done
cat > "$store"
"""


def write_script(path: Path, content: str) -> str:
    path.write_text(content)
    os.chmod(path, 0o755)
    return str(path)


class FakeProvider(ClipboardProvider):
    """In-memory provider that counts calls."""

    def __init__(self, contents: str = ""):
        self.contents = contents
        self.get_calls = 0
        self.set_calls = 0

    def get_contents(self) -> str:
        self.get_calls += 1
        return self.contents

    def set_contents(self, contents: str) -> None:
        self.set_calls += 1
        self.contents = contents


class FakeConnection:
    """Stand-in for X11Connection."""

    def __init__(self, selection: str = "CLIPBOARD", contents: str = ""):
        self.selection = selection
        self.contents = contents
        self.held = []
        self.closed = False

    def get_contents(self) -> str:
        return self.contents

    def set_contents(self, contents: str) -> None:
        self.contents = contents

    def hold(self, contents: str) -> None:
        self.held.append(contents)
        self.contents = contents

    def close(self) -> None:
        self.closed = True


posix_only = pytest.mark.skipif(
    sys.platform == "win32", reason="fake helpers are shell scripts"
)


@pytest.fixture
def fake_helper(tmp_path):
    """Create a fake clipboard helper backed by a file."""
    store = tmp_path / "clipboard.txt"
    return write_script(tmp_path / "fake-helper", FAKE_HELPER_SCRIPT.format(store=store))


@pytest.fixture
def failing_helper(tmp_path):
    """Create a helper that always exits with status 3."""
    return write_script(tmp_path / "failing-helper", "#!/bin/sh\ncat > /dev/null\nexit 3\n")


@pytest.fixture
def invalid_utf8_helper(tmp_path):
    """Create a helper that prints bytes that are not valid UTF-8."""
    return write_script(tmp_path / "binary-helper", "#!/bin/sh\nprintf '\\377\\376'\n")


@pytest.fixture
def empty_path(tmp_path, monkeypatch):
    """Point PATH at an empty directory so no helper can be found."""
    empty = tmp_path / "empty-bin"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    monkeypatch.setattr("clipext.binary.shutil.which", lambda name: None)
    return empty


@pytest.fixture
def fake_provider():
    return FakeProvider()
