"""Log output for the s3hygiene command-line tool.

The library modules only log through ``logging.getLogger(__name__)``.
Handlers are installed here, by the CLI, never on import.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TextIO

# Attributes the package attaches to records via ``extra=``.
RECORD_EXTRAS = ("rule", "violation", "field")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def record_extras(record: logging.LogRecord) -> dict[str, object]:
    """Return the package extras present on ``record``, in a fixed order."""
    extras = {}
    for key in RECORD_EXTRAS:
        val = getattr(record, key, None)
        if val is not None:
            extras[key] = val
    return extras


class TextFormatter(logging.Formatter):
    """Human-readable lines, with any extras appended as ``[key=value ...]``."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        if extras:
            pairs = " ".join(f"{key}={val}" for key, val in extras.items())
            line = f"{line} [{pairs}]"
        return line


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects.

    Fields: timestamp, level, logger, message, plus any of ``RECORD_EXTRAS``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        entry.update(record_extras(record))
        return json.dumps(entry, default=str)


class CliHandler(logging.StreamHandler):
    """The stream handler ``configure_logging`` owns on the root logger."""


def configure_logging(
    level: str = "INFO", fmt: str = "text", stream: TextIO | None = None
) -> CliHandler:
    """Install the CLI's log handler on the root logger.

    Calling this again replaces the handler from the previous call.  Handlers
    installed by anyone else are left alone.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        fmt: 'text' for human-readable lines, 'json' for structured output.
        stream: Where to write; defaults to ``sys.stderr`` at call time.

    Returns:
        The installed handler.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for handler in root.handlers[:]:
        if isinstance(handler, CliHandler):
            root.removeHandler(handler)

    handler = CliHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    return handler
