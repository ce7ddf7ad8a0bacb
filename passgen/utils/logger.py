"""Logging utilities for the password generator."""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "passgen"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging with a compact formatter.

    Only the CLI calls this; it replaces any handlers already on the root
    logger. Output goes to stderr so the generated password on stdout stays
    machine-readable.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger without touching the root configuration.

    The package logger carries a ``NullHandler`` so library use stays quiet
    until the application configures logging.
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name or PACKAGE_LOGGER)
