#!/usr/bin/env python3

"""Console logging for the imdsbox command line."""

from __future__ import annotations

import logging
import sys
from typing import Any

from loguru import logger


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
)

# stdout carries command output, logs go to stderr.
logger.remove()
logger.add(sys.stderr, colorize=True, level="WARNING", format=LOG_FORMAT)


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Re-emit a stdlib record through loguru.

        Args:
            record: Stdlib log record.
        """
        try:
            level: Any = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging internals so loguru reports the real caller.
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logger(verbose: bool = False, sink: Any = None) -> None:
    """Configure the loguru sink and route ``imdsbox`` stdlib loggers into it.

    Args:
        verbose: Show INFO key-step lines of every metadata request.
        sink: Loguru sink, defaults to ``sys.stderr``.
    """
    level = "INFO" if verbose else "WARNING"
    logger.remove()
    logger.add(sink or sys.stderr, colorize=sink is None, level=level, format=LOG_FORMAT)

    std_logger = logging.getLogger("imdsbox")
    std_logger.handlers = [InterceptHandler()]
    std_logger.setLevel(logging.INFO if verbose else logging.WARNING)
