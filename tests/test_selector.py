"""Tests for provider selection."""

import sys

import pytest

import clipext
from clipext import selector
from clipext.binary import BinaryInvocationProvider
from clipext.config import ClipboardConfig
from clipext.errors import ResourceUnavailableError
from clipext.fork import ForkProvider
from clipext.models import Environment
from clipext.native import NativeProvider
from clipext.osc52 import EscapeSequenceProvider
from clipext.selector import select

from conftest import FakeConnection


class NoDisplay:
    def __init__(self, selection="CLIPBOARD"):
        raise ResourceUnavailableError("Failed to connect to X11 display")


@pytest.fixture
def x11_available(monkeypatch):
    monkeypatch.setattr("clipext.fork.X11Connection", FakeConnection)


@pytest.fixture
def x11_unavailable(monkeypatch):
    monkeypatch.setattr("clipext.fork.X11Connection", NoDisplay)


@pytest.fixture
def no_helpers(monkeypatch):
    monkeypatch.setattr("clipext.binary.shutil.which", lambda name: None)


@pytest.fixture
def native_available(monkeypatch):
    monkeypatch.setattr(
        "clipext.native.pyperclip.determine_clipboard",
        lambda: (lambda text: None, lambda: ""),
    )


@pytest.fixture
def native_unavailable(monkeypatch):
    monkeypatch.setattr("clipext.native.pyperclip.determine_clipboard", lambda: (None, None))


class TestX11Selection:
    """Tests for X11 candidate ordering."""

    def test_prefers_fork_when_both_constructible(self, x11_available):
        config = ClipboardConfig(xclip_path="/usr/bin/xclip")
        provider = select(Environment.X11, config)
        assert isinstance(provider, ForkProvider)

    def test_falls_back_to_binary(self, x11_unavailable):
        config = ClipboardConfig(xclip_path="/usr/bin/xclip")
        provider = select(Environment.X11, config)
        assert isinstance(provider, BinaryInvocationProvider)
        assert provider.helpers.writer.path == "/usr/bin/xclip"

    def test_none_when_nothing_works(self, x11_unavailable, no_helpers):
        assert select(Environment.X11, ClipboardConfig()) is None

    def test_lazy_binary_is_last_resort(self, x11_unavailable, no_helpers):
        provider = select(Environment.X11, ClipboardConfig(lazy_helpers=True))
        assert isinstance(provider, BinaryInvocationProvider)


class TestOtherEnvironments:
    """Tests for Wayland, TTY and native environments."""

    def test_wayland_binary(self, no_helpers):
        config = ClipboardConfig(wl_copy_path="/usr/bin/wl-copy")
        provider = select(Environment.WAYLAND, config)
        assert isinstance(provider, BinaryInvocationProvider)
        assert provider.environment == Environment.WAYLAND

    def test_wayland_never_falls_back_to_x11(self, x11_available, no_helpers):
        config = ClipboardConfig(xclip_path="/usr/bin/xclip")
        assert select(Environment.WAYLAND, config) is None

    def test_tty_uses_escape_sequences(self):
        assert isinstance(select(Environment.TTY, ClipboardConfig()), EscapeSequenceProvider)

    @pytest.mark.parametrize("env", [Environment.MACOS, Environment.WINDOWS])
    def test_native_platforms(self, env, native_available):
        provider = select(env, ClipboardConfig())
        assert isinstance(provider, NativeProvider)
        assert provider.environment == env

    @pytest.mark.parametrize("env", [Environment.MACOS, Environment.WINDOWS])
    def test_native_unavailable(self, env, native_unavailable):
        assert select(env, ClipboardConfig()) is None


class TestSelectContract:
    """Tests that selection never raises."""

    @pytest.mark.parametrize("env", list(Environment))
    def test_returns_provider_or_none(self, env, x11_unavailable, no_helpers, native_unavailable):
        result = select(env, ClipboardConfig())
        assert result is None or hasattr(result, "get_contents")

    def test_every_environment_has_candidates(self):
        assert set(selector.CANDIDATES) == set(Environment)

    def test_stops_at_first_success(self, monkeypatch):
        calls = []

        def first(config):
            calls.append("first")
            raise ResourceUnavailableError("missing")

        def second(config):
            calls.append("second")
            return EscapeSequenceProvider()

        def third(config):
            calls.append("third")
            return EscapeSequenceProvider()

        monkeypatch.setitem(selector.CANDIDATES, Environment.X11, [first, second, third])

        assert isinstance(select(Environment.X11, ClipboardConfig()), EscapeSequenceProvider)
        assert calls == ["first", "second"]


@pytest.mark.skipif(sys.platform in ("darwin", "win32"), reason="session type is ignored there")
class TestAcquire:
    """Tests for the one-call entry point."""

    def test_acquire_uses_detected_environment(self, monkeypatch):
        monkeypatch.setenv("XDG_SESSION_TYPE", "tty")
        provider = clipext.acquire(ClipboardConfig())
        assert isinstance(provider, EscapeSequenceProvider)
