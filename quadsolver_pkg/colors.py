"""Console color palettes.

A palette decorates success and error messages. AnsiPalette wraps them in
ANSI escape codes (white on green / white on red), PlainPalette leaves them
untouched. Use make_palette() to pick one for an output stream.
"""

from __future__ import annotations

import os
from typing import TextIO

GREEN = "\033[37;42m"  # white on green
RED = "\033[37;41m"  # white on red
RESET = "\033[0m"


class Palette:
    """Plain-text palette and base class for colored ones."""

    supports_color = False

    def ok(self, text: str) -> str:
        return text

    def error(self, text: str) -> str:
        return text


class PlainPalette(Palette):
    """Palette for streams that cannot render escape codes."""


class AnsiPalette(Palette):
    supports_color = True

    def ok(self, text: str) -> str:
        return f"{GREEN}{text}{RESET}"

    def error(self, text: str) -> str:
        return f"{RED}{text}{RESET}"


def make_palette(mode: str = "auto", stream: TextIO | None = None) -> Palette:
    """Choose a palette for the given color mode.

    Args:
        mode: "always", "never" or "auto" (color only on a terminal
            and when NO_COLOR is not set)
        stream: Output stream inspected in auto mode

    Returns:
        AnsiPalette or PlainPalette instance
    """
    if mode == "always":
        return AnsiPalette()
    if mode == "never":
        return PlainPalette()
    if os.getenv("NO_COLOR"):
        return PlainPalette()
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        return AnsiPalette()
    return PlainPalette()
