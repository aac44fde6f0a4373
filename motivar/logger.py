"""Logger writing key=value lines with a readable timestamp and source file."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import TextIO

LOGGER_NAME = "motivar"

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_LEVEL_NAMES = {"WARNING": "WARN", "CRITICAL": "ERROR"}


def _quote(value: str) -> str:
    """Quote a value when it would otherwise be ambiguous in a key=value line."""
    if value and not any(
        char.isspace() or char in '="' or not char.isprintable() for char in value
    ):
        return value
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class _TextFormatter(logging.Formatter):
    """Formats records as time=... level=... source=file:line msg=..."""

    def format(self, record: logging.LogRecord) -> str:
        fields = [
            ("time", datetime.fromtimestamp(record.created).strftime(_TIME_FORMAT)),
            ("level", _LEVEL_NAMES.get(record.levelname, record.levelname)),
            ("source", f"{record.filename}:{record.lineno}"),
            ("msg", record.getMessage()),
        ]
        if record.exc_info:
            fields.append(("err", self.formatException(record.exc_info)))
        return " ".join(f"{key}={_quote(value)}" for key, value in fields)


def new_logger(stream: TextIO | None = None) -> logging.Logger:
    """Configure and return the application logger writing to ``stream``.

    The stream defaults to standard output. Calling this again replaces the
    previous handler, so records are never written twice.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setFormatter(_TextFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger