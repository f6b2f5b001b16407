"""
MCP Server for Liberty Gold Silver content
Exposes content generation, auditing, redesign and knowledge-base tools via Model Context Protocol
"""
import asyncio
import logging
from typing import Any, Sequence

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .config.settings import configure_logging, settings
from .tools import TOOL_DEFINITIONS, ToolRouter

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = Server(settings.app_name)
router = ToolRouter()


@mcp.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools for the MCP client."""
    return [Tool(**definition) for definition in TOOL_DEFINITIONS]


@mcp.call_tool()
async def call_tool(name: str, arguments: Any) -> Sequence[TextContent]:
    """Handle tool calls from MCP client."""
    text = await asyncio.to_thread(router.handle, name, arguments)
    return [TextContent(type="text", text=text)]


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("%s %s started", settings.app_name, settings.app_version)
        await mcp.run(
            read_stream,
            write_stream,
            mcp.create_initialization_options()
        )


def run():
    configure_logging()
    settings.ensure_directories()
    asyncio.run(main())


if __name__ == "__main__":
    run()
