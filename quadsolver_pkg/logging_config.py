"""Logging setup for Quadsolver.

Everything logs under the "quadsolver" logger: solver branch decisions at
DEBUG, reader rejections at DEBUG, input status at INFO, self-test failures
and rejected coefficients at WARNING. Records go to stderr only; stdout is
reserved for the prompt, the roots and JSON documents.
"""

import logging
import sys
from datetime import datetime
from typing import Optional


class StructuredFormatter(logging.Formatter):
    """Render records as "<iso time> [LEVEL] quadsolver.<module>: message"."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        message = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Configure the "quadsolver" logger for one CLI run.

    Called once by main_entry with the --log-level and --log-file values.
    Calling it again replaces the previous handlers.

    Args:
        level: Name of the threshold level; unknown names fall back to WARNING
        log_file: Path of a file that receives a copy of every record

    Returns:
        The "quadsolver" logger
    """
    logger = logging.getLogger("quadsolver")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the child logger "quadsolver.<name>" for a package module."""
    return logging.getLogger(f"quadsolver.{name}")
