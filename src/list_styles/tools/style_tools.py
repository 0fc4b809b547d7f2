"""MCP tools for parsing list styles and building their editor configuration."""

import time
from typing import Dict, Any, Callable, List

from ..styles.plugin import ListStylesPlugin
from ..styles.models import ListStylesConfig
from ..config import ListStylesSettings
from ..utils.logging_config import get_logger
from ..utils.errors import ToolExecutionError

logger = get_logger("tools")


def _run_tool(
    tool_name: str, parameters: Dict[str, Any], action: Callable[[], Dict[str, Any]]
) -> Dict[str, Any]:
    """Run ``action`` with start/completion logging; failures become ToolExecutionError."""
    logger.info(
        "Tool execution started",
        extra={"tool_name": tool_name, "parameters": parameters, "event": "tool_start"},
    )
    start_time = time.time()
    outcome = {"tool_name": tool_name, "event": "tool_complete"}

    try:
        response = action()
    except Exception as e:
        error_msg = f"{tool_name} failed: {e}"
        duration_ms = round((time.time() - start_time) * 1000, 2)
        logger.error(
            "Tool execution failed",
            extra={**outcome, "success": False, "duration_ms": duration_ms, "error": error_msg},
        )
        raise ToolExecutionError(tool_name, error_msg)

    duration_ms = round((time.time() - start_time) * 1000, 2)
    logger.info(
        "Tool execution completed",
        extra={**outcome, "success": True, "duration_ms": duration_ms},
    )
    return response


def register_style_tools(mcp: Any, config: ListStylesSettings) -> None:
    """Register all list style tools with the MCP server."""

    plugin = ListStylesPlugin(config)

    def parse(text: str) -> Dict[str, Any]:
        result = plugin.validate(text)
        return {
            "valid": result.valid,
            "styles": [entry.model_dump() for entry in result.styles],
            "unparseable_lines": [
                {"line": line_number, "content": line}
                for line_number, line in result.unparseable_lines.items()
            ],
            "message": result.message,
        }

    def editor_config(styles: List[Dict[str, str]]) -> Dict[str, Any]:
        style_config = ListStylesConfig(styles=styles)
        return {
            "allowed_elements": plugin.elements_subset(style_config),
            "plugin_config": plugin.apply(style_config),
        }

    def check(selector: str) -> Dict[str, Any]:
        result = plugin.parser.validator.validate_selector(selector)
        return {
            "valid": result.valid,
            "selector": selector,
            "error": result.error,
            "tag": result.tag,
            "classes": list(result.classes),
        }

    @mcp.tool()
    async def parse_list_styles(text: str) -> Dict[str, Any]:
        """
        Parse list styles text, one ``tag.classA.classB|Label`` per line.

        Args:
            text: The multi-line list styles text

        Returns:
            Dictionary with the parsed styles and any unparseable lines
        """
        return _run_tool("parse_list_styles", {"text_length": len(text)}, lambda: parse(text))

    @mcp.tool()
    async def serialize_list_styles(styles: List[Dict[str, str]]) -> Dict[str, Any]:
        """
        Render persisted list styles back into their text form.

        Args:
            styles: List of ``{"label": ..., "element": ...}`` entries
        """
        return _run_tool(
            "serialize_list_styles",
            {"style_count": len(styles)},
            lambda: {"text": plugin.form_value(ListStylesConfig(styles=styles))},
        )

    @mcp.tool()
    async def list_style_editor_config(styles: List[Dict[str, str]]) -> Dict[str, Any]:
        """
        Build the allowed elements and editor plugin config for persisted list styles.

        Args:
            styles: List of ``{"label": ..., "element": ...}`` entries
        """
        return _run_tool(
            "list_style_editor_config",
            {"style_count": len(styles)},
            lambda: editor_config(styles),
        )

    @mcp.tool()
    async def check_list_selector(selector: str) -> Dict[str, Any]:
        """Validate a single list style selector such as ``ul.btn.large``."""
        return _run_tool("check_list_selector", {"selector": selector}, lambda: check(selector))

    logger.info(
        "Registered style tools: parse_list_styles, serialize_list_styles, "
        "list_style_editor_config, check_list_selector"
    )
