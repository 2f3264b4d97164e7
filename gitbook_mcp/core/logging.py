"""
Logging for the GitBook MCP server.

stdout carries the MCP protocol stream, so every handler here writes to
stderr (or to a file).
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any


class GitBookFormatter(logging.Formatter):
    """
    Formatter with level markers and inline structured fields.
    """

    LEVEL_MARKERS = {
        "DEBUG": "🔍",
        "INFO": "ℹ️",
        "WARNING": "⚠️",
        "ERROR": "❌",
        "CRITICAL": "🚨",
    }

    COLORS = {
        "DEBUG": "\033[90m",  # Gray
        "INFO": "\033[36m",  # Cyan
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with marker, timestamp and structured data."""
        marker = self.LEVEL_MARKERS.get(record.levelname, "📝")
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        message = f"[{timestamp}] {marker}  {record.getMessage()}"

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            fields = ", ".join(f"{key}={value}" for key, value in extra_data.items())
            message += f" ({fields})"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        if hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname, "")
            message = f"{color}{message}{self.COLORS['RESET']}"

        return message


class StructuredLogger:
    """
    Thin wrapper over ``logging.Logger`` that accepts keyword fields.

    ``logger.info("Request sent", endpoint="GET /spaces/abc")`` attaches the
    keyword arguments to the record as ``extra_data`` for the formatter.
    Records propagate to the root logger configured by ``setup_logging``.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error together with the active exception's traceback."""
        self._log(logging.ERROR, message, kwargs, exc_info=sys.exc_info())

    def _log(
        self,
        level: int,
        message: str,
        extra_data: dict[str, Any],
        exc_info=None,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        record = self.logger.makeRecord(
            self.logger.name, level, __file__, 0, message, (), exc_info
        )
        record.extra_data = extra_data
        self.logger.handle(record)


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(GitBookFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)

    # httpx logs every request at INFO; keep it quiet unless debugging.
    if root_logger.level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
