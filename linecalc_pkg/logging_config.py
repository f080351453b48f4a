"""Logging setup for Linecalc.

Modules log through ``get_logger("<module>")``, which hangs off the
``linecalc`` package logger. The package logger only carries a
NullHandler until ``setup_logging`` is called (the CLI does this), so
importing the library never prints anything.

Fields passed with ``extra={...}`` are appended to the line as
``key=value`` pairs, e.g.::

    2025-03-07T10:15:02.114 [DEBUG] linecalc.evaluator: Line failed code='UNDEFINED_SYMBOL' line='y == 3'
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from .config import LOG_LEVEL

ROOT_LOGGER_NAME = "linecalc"

# Attributes every LogRecord has; anything else arrived through ``extra``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord(ROOT_LOGGER_NAME, logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class StructuredFormatter(logging.Formatter):
    """``<timestamp> [LEVEL] <logger>: <message> key=value ...``"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat(
            timespec="milliseconds"
        )
        parts = [
            f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        ]
        parts.extend(
            f"{key}={value!r}"
            for key, value in sorted(vars(record).items())
            if key not in _RECORD_ATTRS
        )
        message = " ".join(parts)
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the package logger.

    Args:
        level: Level name; defaults to LINECALC_LOG_LEVEL (WARNING)
        log_file: Also append log lines to this file

    Returns:
        The ``linecalc`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level_name = (level or LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    # Calling this twice must not duplicate output
    logger.handlers.clear()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    formatter = StructuredFormatter()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for one module, e.g. ``get_logger("engine")``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
