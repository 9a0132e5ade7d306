"""MCP server exposing the clasp operation catalog over stdio."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .dispatcher import invoke
from .executor import ClaspExecutor
from .operations import OperationRegistry, REGISTRY
from .schema import Failure
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

SERVER_NAME = "clasp-enhanced"
SERVER_VERSION = "1.0.0"


class ClaspMCPServer:
    """Discovery and invocation boundary for clasp operations."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        registry: OperationRegistry = REGISTRY,
        executor: ClaspExecutor | None = None,
    ):
        self.server_id = SERVER_NAME
        self.settings = settings or get_settings()
        self.registry = registry
        self.executor = executor or ClaspExecutor.from_settings(self.settings)

    def list_tools(self) -> list[types.Tool]:
        """Return the catalog as MCP tool definitions."""
        return [
            types.Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.input_schema(),
            )
            for descriptor in self.registry.descriptors()
        ]

    async def call_tool(
        self, name: str, arguments: Mapping[str, Any] | None
    ) -> types.CallToolResult:
        """Invoke an operation and wrap the outcome in a response envelope."""
        result = await invoke(
            name,
            arguments,
            executor=self.executor,
            settings=self.settings,
            registry=self.registry,
        )
        if isinstance(result, Failure):
            logger.info(
                "tool call failed tool=%s kind=%s",
                name,
                result.kind,
                extra={"operation": name},
            )
            return _text_result(f"Error: {result.message}", is_error=True)

        spec = self.registry.get(name)
        text = result.text or (spec.empty_output_message if spec else "")
        return _text_result(text)

    def build(self) -> Server:
        """Create an SDK server with the tools/list and tools/call handlers."""
        server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

        @server.list_tools()
        async def _list_tools() -> list[types.Tool]:
            return self.list_tools()

        async def _call_tool(request: types.CallToolRequest) -> types.ServerResult:
            response = await self.call_tool(request.params.name, request.params.arguments)
            return types.ServerResult(response)

        # registered directly: the decorator form validates input against the
        # schema, and missing arguments must reach clasp unchanged
        server.request_handlers[types.CallToolRequest] = _call_tool
        return server


def _text_result(text: str, *, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


async def run_stdio(server: ClaspMCPServer | None = None) -> None:
    """Serve the catalog over stdin/stdout until the client disconnects."""
    server = server or ClaspMCPServer()
    app = server.build()
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Clasp Enhanced MCP server running on stdio")
        await app.run(read_stream, write_stream, app.create_initialization_options())


__all__ = ["ClaspMCPServer", "SERVER_NAME", "SERVER_VERSION", "run_stdio"]
