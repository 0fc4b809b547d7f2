"""Custom error classes for the list styles package."""

from typing import Optional, Dict, Any, Mapping


class ListStylesError(Exception):
    """Base exception class for list styles."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(ListStylesError):
    """Exception raised when list style input fails validation."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        selector: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.line = line
        self.selector = selector


class ParsingError(ValidationError):
    """Exception raised when input cannot be parsed at all."""

    pass


class StyleConfigurationError(ValidationError):
    """Exception raised when submitted style lines cannot all be parsed."""

    def __init__(self, lines: Mapping[int, str], details: Optional[Dict[str, Any]] = None):
        super().__init__(
            format_unparseable_lines(lines),
            line=next(iter(lines), None),
            details=details,
        )
        self.lines = dict(lines)


class ConfigurationError(ListStylesError):
    """Exception raised when settings are invalid."""

    pass


class ToolExecutionError(ListStylesError):
    """Exception raised when MCP tool execution fails."""

    def __init__(self, tool_name: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.tool_name = tool_name


def format_unparseable_lines(lines: Mapping[int, str]) -> str:
    """Format unparseable line numbers into the message shown next to the form field."""
    if not lines:
        return "No errors"

    hint = (
        "Enter a valid list tag CSS selector containing one or more classes, "
        "followed by a pipe symbol and a label."
    )
    line_numbers = list(lines)
    if len(line_numbers) == 1:
        return f"Line {line_numbers[0]} does not contain a valid value. {hint}"

    joined = ", ".join(str(number) for number in line_numbers)
    return f"Lines {joined} do not contain a valid value. {hint}"
