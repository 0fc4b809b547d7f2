"""MCP server exposing the list style tools using FastMCP."""

import argparse
import os
import sys
from typing import Optional, Any

from fastmcp import FastMCP

from list_styles import __version__
from list_styles.config import load_config, ListStylesSettings
from list_styles.utils.logging_config import setup_logging, get_logger
from list_styles.utils.errors import ConfigurationError
from list_styles.tools.style_tools import register_style_tools


class ListStylesServer:
    """FastMCP app with the list style tools registered for one settings value."""

    def __init__(self, config: ListStylesSettings):
        self.config = config
        self.logger = get_logger("server")
        self.mcp: Any = FastMCP(name="ListStyles", version=__version__)

        try:
            register_style_tools(self.mcp, config)
        except Exception as e:
            raise ConfigurationError(f"Tool registration failed: {e}")

    def run(self) -> None:
        """Serve over stdio until the client disconnects."""
        self.logger.info("Starting list styles server")
        self.mcp.run()


def create_server(config_path: Optional[str] = None) -> ListStylesServer:
    """Load settings, configure logging and build the server; exits on bad settings."""
    try:
        config = load_config(config_path)
    except ValueError as e:
        print(f"Failed to create server: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.logging)
    return ListStylesServer(config)


def main() -> None:
    parser = argparse.ArgumentParser(description="List styles MCP server")
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    parser.add_argument("--version", action="version", version=__version__)
    args = parser.parse_args()

    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level

    create_server(args.config).run()


if __name__ == "__main__":
    main()
