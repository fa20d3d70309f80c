"""Logging configuration for lexifront.

Records go to stderr so that what commands print on stdout (token ids,
JSON arrays) can be piped. Per-query diagnostics of a ``debug=True``
lexicon are logged under ``lexifront.diagnostics``: they are printed
without a level prefix and stay visible when the package logger is
raised above INFO.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ..exceptions import ConfigError

LOGGER_NAME = "lexifront"
DIAGNOSTICS_LOGGER_NAME = f"{LOGGER_NAME}.diagnostics"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DIAGNOSTICS_FORMAT = "%(message)s"


class LexiFrontFormatter(logging.Formatter):
    """Use ``fmt`` for ordinary records and a bare format for diagnostics."""

    def __init__(self, fmt: str = CONSOLE_FORMAT):
        super().__init__(fmt)
        self._diagnostics = logging.Formatter(DIAGNOSTICS_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if record.name == DIAGNOSTICS_LOGGER_NAME:
            return self._diagnostics.format(record)
        return super().format(record)


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ConfigError(f"Unknown log level: {level}")
    return number


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    verbose: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the ``lexifront`` logger for command-line use.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Level name for the package logger
        log_file: Also append records to this file; parent directories
            are created
        verbose: Use a timestamped format that names the emitting module
        stream: Console stream, ``sys.stderr`` when omitted

    Raises:
        ConfigError: If ``level`` is not a logging level name
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_number(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Diagnostics are requested per lexicon, so they bypass the package level
    logging.getLogger(DIAGNOSTICS_LOGGER_NAME).setLevel(logging.INFO)

    formatter = LexiFrontFormatter(VERBOSE_FORMAT if verbose else CONSOLE_FORMAT)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(LexiFrontFormatter(VERBOSE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)


def get_diagnostics_logger() -> logging.Logger:
    """Logger for the per-query output of debug-mode lexicons."""
    return logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
