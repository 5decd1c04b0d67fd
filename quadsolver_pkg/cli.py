from __future__ import annotations

import argparse
import json
import sys
from typing import TextIO

import quadsolver_pkg.config as _config

from .api import solve_linear, solve_quadratic
from .colors import Palette, make_palette
from .logging_config import get_logger, setup_logging
from .reader import read_coefficients
from .selftest import run_linear_self_test, run_self_test, run_square_self_test
from .solver import is_zero
from .types import InputStatus, RootCount, SolveResult

logger = get_logger("cli")

INPUT_ERRORS = {
    InputStatus.INCORRECT: ("INCORRECT_INPUT", "incorrect input"),
    InputStatus.END: ("EMPTY_INPUT", "the input is empty"),
}


def format_root(x: float, precision: int | None = None) -> str:
    """Format a root with fixed decimals, printing near-zero values as zero."""
    if precision is None:
        precision = _config.OUTPUT_PRECISION
    if is_zero(x):
        x = 0.0
    return f"{x:.{precision}f}"


def print_result_pretty(
    result: SolveResult,
    palette: Palette,
    output_format: str = "human",
    out: TextIO | None = None,
) -> None:
    """Print a solve result in the specified format.

    Args:
        result: Result of solving the equation
        palette: Palette used to color error lines
        output_format: "json" for JSON output, "human" for human-readable
        out: Output stream (defaults to sys.stdout)
    """
    if out is None:
        out = sys.stdout
    if output_format == "json":
        print(json.dumps(result.to_dict(), indent=2, allow_nan=False), file=out)
        return
    if not result.ok:
        print(palette.error(f"\nError: {result.error}"), file=out)
        return

    count = result.count
    if count == RootCount.TWO:
        x1, x2 = result.roots
        print(f"x1 = {format_root(x1)}", file=out)
        print(f"x2 = {format_root(x2)}", file=out)
    elif count == RootCount.ONE:
        print(f"x = {format_root(result.roots[0])}", file=out)
    elif count == RootCount.NONE:
        print("No roots", file=out)
    elif count == RootCount.INFINITE:
        print("Infinite roots", file=out)
    else:
        print(palette.error(f"Error code {int(count)}"), file=out)


def _print_input_error(status: InputStatus, palette: Palette, output_format: str) -> None:
    code, message = INPUT_ERRORS[status]
    if output_format == "json":
        print(json.dumps({"ok": False, "error": message, "code": code}, indent=2))
    else:
        print(palette.error(f"\nError: {message}"))


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Quadsolver health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    result = solve_linear(2, -4)
    if result.ok and result.count == RootCount.ONE and result.roots == (2.0,):
        print("[OK] Linear solver works")
        checks_passed += 1
    else:
        print(f"[FAIL] Linear solver check failed: {result!r}")
        checks_failed += 1

    result = solve_quadratic(1, -3, 2)
    if result.ok and result.count == RootCount.TWO and sorted(result.roots) == [1.0, 2.0]:
        print("[OK] Quadratic solver works")
        checks_passed += 1
    else:
        print(f"[FAIL] Quadratic solver check failed: {result!r}")
        checks_failed += 1

    for title, run in (("Linear", run_linear_self_test), ("Quadratic", run_square_self_test)):
        failures = run()
        if failures == 0:
            print(f"[OK] {title} self-test table passes")
            checks_passed += 1
        else:
            print(f"[FAIL] {title} self-test table: {failures} case(s) failed")
            checks_failed += 1

    try:
        from .verify import reference_real_roots, roots_satisfy

        reference = reference_real_roots(1, -3, 2)
        ours = sorted(solve_quadratic(1, -3, 2).roots)
        agree = len(reference) == len(ours) and all(
            is_zero(r - x) for r, x in zip(reference, ours)
        )
        if agree and roots_satisfy(1, -3, 2, ours):
            print("[OK] Roots agree with SymPy cross-check")
            checks_passed += 1
        else:
            print(f"[FAIL] SymPy cross-check failed: expected {reference}, got {ours}")
            checks_failed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy cross-check unavailable: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Solver results may be unreliable.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Quadsolver CLI.

    Runs the self-test, prompts for coefficients a b c on stdin and prints
    the roots of a*x^2 + b*x + c = 0.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for every input outcome)
    """
    parser = argparse.ArgumentParser(
        prog="quadsolver",
        description="Solve a*x^2 + b*x + c = 0 for coefficients read from stdin",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--color",
        type=str,
        choices=["auto", "always", "never"],
        help="Colorize output (default: auto)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set number of decimals printed for roots"
    )
    parser.add_argument(
        "--no-self-test",
        action="store_true",
        help="Skip the solver self-test run at startup",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.precision is not None and args.precision >= 0:
        _config.OUTPUT_PRECISION = int(args.precision)
    if args.color:
        _config.COLOR_MODE = args.color
    if args.no_self_test:
        _config.RUN_SELF_TEST = False

    if args.version:
        print(_config.VERSION)
        return 0
    if args.health_check:
        return _health_check()

    output_format = args.format
    palette = make_palette(_config.COLOR_MODE, sys.stdout)
    human = output_format == "human"

    if _config.RUN_SELF_TEST and human:
        failures = run_self_test(palette, sys.stdout)
        if failures:
            logger.warning("Self-test reported %d failure(s)", failures)

    if human:
        print(_config.BANNER.format(version=_config.VERSION))
        print(_config.PROMPT, end="", flush=True)

    read = read_coefficients(sys.stdin)
    logger.info("Input status: %s", read.status.value)

    if read.status is InputStatus.CLOSE:
        return 0
    if read.status in INPUT_ERRORS:
        _print_input_error(read.status, palette, output_format)
        return 0

    a, b, c = read.coefficients
    result = solve_quadratic(a, b, c)
    if not result.ok:
        logger.warning("Rejected coefficients %r, %r, %r: %s", a, b, c, result.error)
        if result.code == "NON_FINITE":
            result = SolveResult(
                ok=False, error="coefficients must be finite numbers", code=result.code
            )
        else:
            result = SolveResult(
                ok=False, error="the equation is out of double precision range", code=result.code
            )
    print_result_pretty(result, palette, output_format)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
