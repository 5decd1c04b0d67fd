#!/usr/bin/env python3
"""
Quadsolver - Linear and Quadratic Equation Solver

Main entry point for the Quadsolver application.
This file serves as a thin wrapper that delegates all functionality
to the quadsolver_pkg package.

Usage:
    python quadsolver.py                    # Self-test, then prompt for a b c
    python quadsolver.py --no-self-test     # Prompt immediately
    python quadsolver.py --help             # Show help
"""

from __future__ import annotations

import sys

from quadsolver_pkg.logging_config import get_logger


def main() -> int:
    """
    Main entry point for Quadsolver.

    Delegates all functionality to the quadsolver_pkg.cli module,
    which handles argument parsing, input reading, and output formatting.

    Returns:
        Exit code: 0 for every input outcome and for Ctrl+C, 1 only when
        an unexpected exception escapes the CLI.
    """
    from quadsolver_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 0
    except Exception as e:
        get_logger("main").exception("Unhandled error")
        print(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
