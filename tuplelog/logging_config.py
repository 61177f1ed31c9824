"""
Logging configuration for tuplelog front-ends.

The core only creates module loggers; applications call setup_logging()
to attach a handler.

Environment Variables:
    TUPLELOG_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    TUPLELOG_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from tuplelog.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, space="default")
    logger.info("Loaded database")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure root logger.

    Arguments override the environment:
    - TUPLELOG_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)
    - TUPLELOG_LOG_FORMAT: json, text (default: text)

    Logs go to stderr so command output on stdout stays parseable.
    """
    log_level = (level or os.getenv("TUPLELOG_LOG_LEVEL", "WARNING")).upper()
    fmt = (log_format or os.getenv("TUPLELOG_LOG_FORMAT", "text")).lower()
    resolved = LEVEL_MAP.get(log_level, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.addFilter(SpaceFilter())

    if fmt == "json":
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(space)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [space=%(space)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, space: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger that tags records with a space name.

    Example:
        logger = get_logger(__name__, space="default")
        logger.info("Action accepted")
        # Output (json): {"timestamp": "...", "level": "INFO", "message": "Action accepted", "space": "default"}
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"space": space or "N/A"})


class SpaceFilter(logging.Filter):
    """Ensures every record has a space field, even without a LoggerAdapter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "space"):
            record.space = "N/A"  # type: ignore
        return True
