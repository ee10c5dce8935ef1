"""Logging setup for the command line."""

import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def setup_logging(verbose: bool = False) -> None:
    """Replace loguru's default sink with a stderr sink.

    Verbose mode shows per-line removal details at DEBUG level.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format=LOG_FORMAT,
        colorize=sys.stderr.isatty(),
    )
