# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Console logging for the LUML command-line interface."""

import logging
import sys
from collections.abc import Callable

from yachalk import chalk

# ###############
# Public Interface
# ###############

LOGGER_NAME = "luml"


class ColorLevelFormatter(logging.Formatter):
    """Formats records as ``HH:MM:SS LEVEL message`` with a coloured level name."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s %(levelname)s %(message)s", datefmt="%H:%M:%S")

    def formatMessage(self, record: logging.LogRecord) -> str:
        style = _LEVEL_STYLES.get(record.levelno)
        level = style(record.levelname) if style else record.levelname
        return f"{record.asctime} {level} {record.message}"


def verbosity_level(quiet: bool, verbosity: int) -> int:
    """Map the ``-q`` flag and ``-v`` count to a logging level.

    Warnings and errors are shown by default; each ``-v`` adds a level of
    detail. ``-q`` silences everything, errors included.
    """
    if quiet:
        return logging.CRITICAL + 1
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(quiet: bool = False, verbosity: int = 0) -> logging.Logger:
    """Install a single stderr handler on the ``luml`` logger.

    Calling this again replaces the handler installed by the previous call.

    Returns:
        The configured ``luml`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColorLevelFormatter())
    logger.addHandler(handler)
    logger.setLevel(verbosity_level(quiet, verbosity))
    return logger


# ################
# Implementation
# ################

_LEVEL_STYLES: dict[int, Callable[[str], str]] = {
    logging.CRITICAL: chalk.red,
    logging.ERROR: chalk.red,
    logging.WARNING: chalk.yellow,
    logging.INFO: chalk.green,
    logging.DEBUG: chalk.blue,
}
