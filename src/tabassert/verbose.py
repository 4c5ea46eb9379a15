"""Debug logging configuration for the command line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def _handlers(debug_file: Path | None, verbose: bool) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(debug_file, mode="a"))
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    return handlers


def setup_logger(
    debug_file: Path | None = None, verbose: bool = False, logger_name: str = "tabassert"
) -> logging.Logger:
    """
    Route tabassert's debug records to a file and/or stderr.

    Assertion modules log through children of ``logger_name`` (for example
    ``tabassert.assertions.base`` reports each failed assertion), so one call
    here captures all of them. Calling it again replaces the previous
    handlers. With neither output selected the logger stays silent.

    Args:
        debug_file: Log file to append to; parent directories are created.
        verbose: Also echo records to stderr.
        logger_name: Root of the logger tree to configure.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers = _handlers(debug_file, verbose) or [logging.NullHandler()]
    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
