"""Logging setup for the loan solver.

Modules obtain their logger with ``get_logger(__name__)``. The command-line
interface calls ``configure_logging`` once at startup. Log records go to
standard error so they never mix with the report printed on standard output.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "loan_solver"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the ``loan_solver`` hierarchy."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def verbosity_to_level(verbose: int) -> str:
    """Map a repeat count of ``-v`` to a level name."""
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return DEFAULT_LOG_LEVEL


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the package logger.

    Existing handlers are replaced so repeated calls (for example from tests
    invoking the CLI several times) do not duplicate output.

    Parameters
    ----------
    level: Optional[str]
        Level name such as ``"DEBUG"`` or ``"INFO"``. Defaults to WARNING.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()

    log_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    logger.setLevel(log_level)
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)
