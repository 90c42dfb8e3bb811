"""Logging utilities for mmpolicy.

This module provides shared logging configuration and utilities
used across the package. The log level follows the same quiet/verbose
switch as `mmapplypolicy -L`, so `--mm-L 0` silences progress messages too.
"""

import logging
import sys
from typing import Optional

from .constants import QUIET_INFORMATION_LEVEL


def log_level_for(verbose: bool = False, information_level: Optional[str] = None) -> int:
    """Pick the log level for a run.

    Args:
        verbose: Requested DEBUG output
        information_level: Value forwarded to `mmapplypolicy -L`, if any

    Returns:
        DEBUG when verbose, WARNING for the quiet information level, else INFO
    """
    if verbose:
        return logging.DEBUG
    if information_level == QUIET_INFORMATION_LEVEL:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    verbose: bool = False,
    level: Optional[int] = None,
    information_level: Optional[str] = None,
) -> None:
    """Configure logging for mmpolicy.

    Records go to stderr; stdout is reserved for rendered policies and
    report paths. Safe to call more than once.

    Args:
        verbose: If True, log at DEBUG
        level: Optional explicit log level (overrides everything else)
        information_level: `mmapplypolicy -L` value, "0" lowers output to warnings
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if level is None:
        level = log_level_for(verbose, information_level)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
