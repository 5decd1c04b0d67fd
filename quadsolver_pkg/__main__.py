"""Main entry point for running quadsolver_pkg as a module.

This allows running Quadsolver with:
    python -m quadsolver_pkg
    python -m quadsolver_pkg --health-check
    python -m quadsolver_pkg --format json

This is equivalent to running:
    python -m quadsolver_pkg.cli
    python quadsolver.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
