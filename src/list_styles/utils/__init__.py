"""Utility modules for the list styles package."""

from .errors import (
    ListStylesError,
    ValidationError,
    ParsingError,
    StyleConfigurationError,
    ConfigurationError,
    ToolExecutionError,
    format_unparseable_lines,
)
from .logging_config import setup_logging, get_logger

__all__ = [
    "ListStylesError",
    "ValidationError",
    "ParsingError",
    "StyleConfigurationError",
    "ConfigurationError",
    "ToolExecutionError",
    "format_unparseable_lines",
    "setup_logging",
    "get_logger",
]
