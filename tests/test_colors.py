"""Tests for console color palettes."""

import io

from quadsolver_pkg.colors import (
    GREEN,
    RED,
    RESET,
    AnsiPalette,
    PlainPalette,
    make_palette,
)


class FakeTerminal(io.StringIO):
    def isatty(self):
        return True


class TestPalettes:
    def test_plain_palette_leaves_text(self):
        palette = PlainPalette()
        assert palette.ok("fine") == "fine"
        assert palette.error("bad") == "bad"
        assert palette.supports_color is False

    def test_ansi_palette_wraps_text(self):
        palette = AnsiPalette()
        assert palette.ok("fine") == f"{GREEN}fine{RESET}"
        assert palette.error("bad") == f"{RED}bad{RESET}"
        assert palette.supports_color is True


class TestMakePalette:
    def test_forced_modes(self):
        assert isinstance(make_palette("always", io.StringIO()), AnsiPalette)
        assert isinstance(make_palette("never", FakeTerminal()), PlainPalette)

    def test_auto_on_terminal(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert isinstance(make_palette("auto", FakeTerminal()), AnsiPalette)

    def test_auto_on_pipe(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert isinstance(make_palette("auto", io.StringIO()), PlainPalette)

    def test_auto_without_stream(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert isinstance(make_palette("auto"), PlainPalette)

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert isinstance(make_palette("auto", FakeTerminal()), PlainPalette)
