"""MCP tool implementations for list styles."""

from .style_tools import register_style_tools

__all__ = ["register_style_tools"]
