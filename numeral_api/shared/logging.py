"""
Logging configuration for the application.

One pipe-delimited line per record, written to stdout by default.
Logging must not change program behavior.
Never logs request bodies or query strings.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Replaced by RequestLoggingMiddleware lines
QUIET_LOGGERS = ("uvicorn.access",)


def configure_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure logging for the API and the command line.

    Unknown level names fall back to INFO.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        stream: Destination stream. Defaults to the current sys.stdout.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=stream or sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
