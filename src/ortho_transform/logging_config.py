"""Logging setup for the ``ortho_transform`` package logger.

Library modules only create records through
``logging.getLogger(__name__)``; applications call
:func:`setup_logging` once to decide where they go.
"""

from __future__ import annotations

import logging
import sys

from ortho_transform.config.schema import LoggingConfig

PACKAGE_LOGGER = "ortho_transform"


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Existing handlers are cleared first so repeated calls do not
    duplicate output.

    Args:
        level: Logging level as an int or a name such as ``"DEBUG"``.
        log_file: Optional path to also write logs to.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name!r}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at level %s", level)
    return logger


def setup_logging_from_config(cfg: LoggingConfig) -> logging.Logger:
    """Apply a ``LoggingConfig`` via :func:`setup_logging`."""
    return setup_logging(cfg.level, cfg.log_file)
