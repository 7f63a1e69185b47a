"""Logging configuration for run diagnostics."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "microunit",
) -> logging.Logger:
    """
    Configure and return the logger used by the driver.

    Console report lines are printed separately and never go through here.

    Args:
        debug_file: If given, debug output is appended to this file.
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
