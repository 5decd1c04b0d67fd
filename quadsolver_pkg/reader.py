"""Coefficient input reading.

Input is read the way scanf("%lf %lf %lf") reads it: blanks (newlines
included) are skipped, then the longest real-number prefix is taken, and
the next number starts right where the previous one stopped. A leading
exit letter asks the program to close instead.
"""

from __future__ import annotations

import io
import sys
from typing import TextIO

from .config import EXIT_CHARS, NUMBER_REGEX
from .logging_config import get_logger
from .types import InputStatus, ParseError, ReadResult

logger = get_logger("reader")


def _skip_blanks(stream: TextIO, line: str, pos: int) -> tuple[str | None, int]:
    """Advance to the next non-blank character, pulling lines as needed.

    Lines are read lazily so an interactive prompt is answered as soon as
    three numbers have been typed. Returns (None, 0) at end of input.
    """
    while True:
        while pos < len(line) and line[pos].isspace():
            pos += 1
        if pos < len(line):
            return line, pos
        line = stream.readline()
        pos = 0
        if not line:
            return None, 0


def read_coefficients(stream: TextIO | None = None) -> ReadResult:
    """Read coefficients a, b and c from a text stream.

    Args:
        stream: Input stream (defaults to sys.stdin)

    Returns:
        ReadResult with status END if the stream holds nothing but blanks,
        CLOSE if the first non-blank character is the exit letter, CORRECT
        with the three coefficients when three numbers were read and
        INCORRECT otherwise. Text after the third number is ignored.
    """
    if stream is None:
        stream = sys.stdin

    line, pos = _skip_blanks(stream, "", 0)
    if line is None:
        return ReadResult(InputStatus.END)
    if line[pos] in EXIT_CHARS:
        return ReadResult(InputStatus.CLOSE)

    values: list[float] = []
    while True:
        match = NUMBER_REGEX.match(line, pos)
        if match is None:
            logger.debug("No number at %r after %d coefficient(s)", line[pos:pos + 10], len(values))
            return ReadResult(InputStatus.INCORRECT)
        values.append(float(match.group()))
        if len(values) == 3:
            return ReadResult(InputStatus.CORRECT, (values[0], values[1], values[2]))
        line, pos = _skip_blanks(stream, line, match.end())
        if line is None:
            logger.debug("Input ended after %d coefficient(s)", len(values))
            return ReadResult(InputStatus.INCORRECT)


def parse_coefficients(text: str) -> tuple[float, float, float]:
    """Parse coefficients a, b and c from a string.

    Args:
        text: Whitespace-delimited coefficients (e.g., "1 -3 2")

    Returns:
        Tuple (a, b, c)

    Raises:
        ParseError: If the text does not start with three real numbers
    """
    result = read_coefficients(io.StringIO(text))
    if result.status is InputStatus.END:
        raise ParseError("Input is empty", code="EMPTY_INPUT")
    if result.status is InputStatus.CLOSE:
        raise ParseError("Input is an exit command", code="EXIT_COMMAND")
    if result.coefficients is None:
        raise ParseError(f"Expected three real numbers, got {text!r}", code="INCORRECT_INPUT")
    return result.coefficients
