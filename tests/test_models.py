"""Tests for data models."""

import pytest

from clipext.models import (
    Environment,
    HelperCommand,
    HelperKind,
    wl_clipboard_pair,
    xclip_pair,
    xsel_pair,
)


class TestEnvironment:
    """Tests for Environment enum."""

    def test_from_string_wayland(self):
        assert Environment.from_string("wayland") == Environment.WAYLAND

    def test_from_string_case_insensitive(self):
        assert Environment.from_string("X11") == Environment.X11
        assert Environment.from_string("TTY") == Environment.TTY

    def test_from_string_with_whitespace(self):
        assert Environment.from_string("  macos  ") == Environment.MACOS

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="Unknown environment"):
            Environment.from_string("mir")


class TestHelperCommand:
    """Tests for HelperCommand."""

    def test_executable_defaults_to_name(self):
        cmd = HelperCommand("xclip", ("-sel", "clip"))
        assert cmd.executable == "xclip"
        assert cmd.argv == ["xclip", "-sel", "clip"]

    def test_path_overrides_name(self):
        cmd = HelperCommand("xclip", ("-sel", "clip"), "/opt/bin/xclip")
        assert cmd.argv == ["/opt/bin/xclip", "-sel", "clip"]


class TestHelperPairs:
    """Tests for the fixed helper argument lists."""

    def test_xclip_pair(self):
        pair = xclip_pair()
        assert pair.kind == HelperKind.XCLIP
        assert pair.reader.argv == ["xclip", "-sel", "clip", "-out"]
        assert pair.writer.argv == ["xclip", "-sel", "clip"]

    def test_xsel_pair(self):
        pair = xsel_pair("/usr/local/bin/xsel")
        assert pair.kind == HelperKind.XSEL
        assert pair.reader.argv == ["/usr/local/bin/xsel", "--clipboard", "--output"]
        assert pair.writer.argv == ["/usr/local/bin/xsel", "--clipboard", "--input"]

    def test_wl_clipboard_pair_tracks_paths_independently(self):
        pair = wl_clipboard_pair(copy_path="/custom/wl-copy")
        assert pair.writer.argv == ["/custom/wl-copy"]
        assert pair.reader.argv == ["wl-paste", "--no-newline"]
