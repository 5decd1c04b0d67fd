"""Centralized configuration for Quadsolver.

This module defines:
- The zero tolerance shared by every solver
- Output formatting options
- Console behavior (color, startup self-test)
- Prompt and banner text

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with QUADSOLVER_)
"""

import importlib.metadata
import os
import re

# Version is defined in pyproject.toml [project] section
try:
    VERSION = importlib.metadata.version("quadsolver")
except importlib.metadata.PackageNotFoundError:
    VERSION = "1.0.0"

# Absolute threshold below which a value is treated as zero
ACCURACY = 1e-9

# Output configuration
OUTPUT_PRECISION = int(os.getenv("QUADSOLVER_OUTPUT_PRECISION", "6"))
COLOR_MODE = os.getenv("QUADSOLVER_COLOR", "auto").lower()  # "auto", "always", "never"
RUN_SELF_TEST = os.getenv("QUADSOLVER_RUN_SELF_TEST", "true").lower() == "true"

# Console input
EXIT_CHARS = ("x", "X")

BANNER = (
    "Solving an equation ax^2+bx+c=0\n"
    "Version {version}\n"
    "To close the program, enter the letter 'x'\n"
)
PROMPT = "Enter a b c>>"

# Longest real-number prefix, as strtod/scanf("%lf") reads it
NUMBER_REGEX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
