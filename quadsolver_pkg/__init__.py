"""Quadsolver package: equation solvers, input reader, self-test and CLI."""

__all__ = [
    "config",
    "solver",
    "reader",
    "selftest",
    "cli",
    "colors",
    "types",
    "api",
    "verify",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "solve_linear",
    "solve_quadratic",
    "solve_text",
]
