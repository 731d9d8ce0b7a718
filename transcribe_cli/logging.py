"""
transcribe_cli.logging - Centralized logging configuration.

Only the package logger writes to stderr. Records from other libraries'
loggers are dropped, and the package logger stays at WARNING unless verbose
mode is requested, so a normal run writes nothing besides the result
envelope.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("transcribe_cli")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the transcribe_cli package.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level
    """
    level = logging.DEBUG if verbose else logging.WARNING

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    # without any root handler, logging's last-resort handler prints warnings to stderr
    root = logging.getLogger()
    if not root.handlers:
        root.addHandler(logging.NullHandler())
