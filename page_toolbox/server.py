"""
MCP server exposing the tool registry over stdio.

The registry is built once and handed to ``create_server``; the server keeps
no other state.
"""

from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from page_toolbox.tools import ToolExecutor, build_tool_descriptions
from page_toolbox.utils.logger import get_logger

logger = get_logger(__name__)

SERVER_NAME = "puppeteer-tools"
SERVER_DESCRIPTION = (
    "Use a headless browser to analyze and extract web elements, DOM trees, "
    "screenshots, or page metadata."
)


def create_server(executor: ToolExecutor) -> Server:
    """Build an MCP server whose tools are the executor's registry."""
    server = Server(
        SERVER_NAME,
        instructions=f"{SERVER_DESCRIPTION}\n\n{build_tool_descriptions(executor.registry)}",
    )

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=registered.name,
                description=registered.description,
                inputSchema=registered.input_json_schema(),
                outputSchema=registered.output_json_schema(),
            )
            for registered in executor.registry
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        # Raised errors become isError results in the MCP response
        return await executor.execute(name, arguments)

    return server


async def serve(executor: ToolExecutor) -> None:
    """Run the server on stdin/stdout until the client disconnects."""
    server = create_server(executor)
    logger.info(f"Serving {len(executor.registry)} tools over stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
