"""Logging setup for list styles."""

import logging
import logging.handlers
import json
import sys
from pathlib import Path
from datetime import datetime, UTC

from ..config import LoggingConfig

# Attributes every LogRecord carries; anything else came in through ``extra=``
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(UTC),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update(
            (key, value) for key, value in vars(record).items() if key not in _STANDARD_ATTRS
        )
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(config: LoggingConfig) -> None:
    """Replace the root logger's handlers with ones built from ``config``."""
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter: logging.Formatter = (
        JSONFormatter() if config.format.lower() == "json" else TextFormatter()
    )

    # stderr keeps stdout free for the MCP stdio transport
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5)
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``list_styles`` namespace."""
    return logging.getLogger(f"list_styles.{name}")


class LoggerMixin:
    """Mixin class to add logging capabilities to other classes."""

    @property
    def logger(self) -> logging.Logger:
        return get_logger(self.__class__.__name__)


def log_parse_result(line_count: int, rules_count: int, errors_count: int) -> None:
    """Log the outcome of parsing a list styles text blob."""
    get_logger("parsing").info(
        "List styles parsed",
        extra={
            "line_count": line_count,
            "rules": rules_count,
            "errors": errors_count,
            "event": "parse_complete",
        },
    )
