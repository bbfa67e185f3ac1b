"""Atlassian MCP Server - Expose Jira and Confluence to AI assistants."""
import sys
import asyncio
import logging
import traceback
from typing import Any

import httpx
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    Tool,
    TextContent,
    ImageContent,
    EmbeddedResource,
)

from . import __version__
from . import config
from . import tools
from . import handlers


# Configure logging to stderr; stdout carries the MCP protocol
logging.basicConfig(
    level=config.get_log_level(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr,
    force=True
)
logger = logging.getLogger("atlassian-mcp")

# Per-invocation HTTP client timeout, in seconds
HTTP_TIMEOUT = 30.0

# Map tool names to handler functions
HANDLERS = {
    "get_jira_issues": handlers.handle_get_jira_issues,
    "fetch_confluence_docs": handlers.handle_fetch_confluence_docs,
}


# MCP Server instance
app = Server("atlassian-mcp", version=__version__)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available MCP tools for Jira and Confluence."""
    return tools.get_tools()


@app.call_tool()
async def call_tool(name: str, arguments: Any) -> list[TextContent | ImageContent | EmbeddedResource]:
    """Handle MCP tool calls by delegating to handlers."""
    logger.info(f"Tool call: {name} with arguments: {arguments}")

    handler = HANDLERS.get(name)
    if not handler:
        logger.warning(f"Unknown tool requested: {name}")
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
        try:
            return await handler(arguments or {}, client)
        except Exception as e:
            # Handlers render their own failures; this only catches bugs
            logger.error(f"Unexpected error during {name} call:")
            logger.error(f"  Error type: {type(e).__name__}")
            logger.error(f"  Error message: {str(e)}")
            logger.error(f"  Arguments: {arguments}")
            logger.error(f"  Traceback:\n{traceback.format_exc()}")
            return [TextContent(type="text", text=f"Error: {type(e).__name__}: {str(e)}")]


async def main():
    """Run the MCP server."""
    logger.info(f"MCP Server starting (atlassian-mcp {__version__})")
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


def run():
    """Console script entry point: load .env, then serve over stdio."""
    config.load_environment()
    logging.getLogger().setLevel(config.get_log_level())
    asyncio.run(main())


if __name__ == "__main__":
    run()
