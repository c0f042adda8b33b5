"""Main entry point for the Raindrop MCP Server."""

import locale
import logging
import sys
from typing import Any

from fastmcp import FastMCP  # type: ignore
from fastmcp.exceptions import ToolError  # type: ignore
from fastmcp.tools.tool import Tool, ToolResult  # type: ignore
from mcp.types import TextContent

from raindrop_mcp_server.config import Settings
from raindrop_mcp_server.errors import ConfigurationError, RaindropError
from raindrop_mcp_server.tools import TOOLS, call_tool

logger = logging.getLogger(__name__)


class RaindropTool(Tool):
    """A catalog tool whose input schema is published exactly as declared."""

    settings: Settings

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            text = await call_tool(self.name, arguments, self.settings)
        except RaindropError as e:
            logger.warning("Tool %s failed: %s", self.name, e)
            raise ToolError(str(e)) from e

        return ToolResult(content=[TextContent(type="text", text=text)])


def create_server(settings: Settings) -> FastMCP:
    """Build the MCP server with every catalog tool registered."""
    mcp = FastMCP("raindrop-mcp")

    for descriptor in TOOLS:
        mcp.add_tool(
            RaindropTool(
                name=descriptor["name"],
                description=descriptor["description"],
                parameters=descriptor["inputSchema"],
                settings=settings,
            )
        )

    return mcp


def main() -> None:
    """Main entry point."""
    try:
        settings = Settings.from_env()

        # stdout carries the stdio transport, so logs go to stderr
        logging.basicConfig(
            stream=sys.stderr,
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        # Timestamps in tool output follow the user's LC_TIME
        try:
            locale.setlocale(locale.LC_TIME, "")
        except locale.Error as e:
            logger.warning("Unsupported locale, timestamps use C formatting: %s", e)

        try:
            settings.require_token()
        except ConfigurationError:
            print("Error: RAINDROP_TOKEN environment variable is required", file=sys.stderr)
            sys.exit(1)

        mcp = create_server(settings)

        print("Raindrop MCP Server running on stdio", file=sys.stderr)
        mcp.run()
    except KeyboardInterrupt:
        print("\nServer stopped", file=sys.stderr)
    except Exception as e:
        print(f"Error starting server: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
