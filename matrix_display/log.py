"""Logging setup: one named logger, rendered by Rich on stderr."""

import logging

from rich.logging import RichHandler

from .console import err_console

LOGGER_NAME = "matrix_display"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it for a module `__name__`."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just change the level.
    """
    logger = get_logger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
