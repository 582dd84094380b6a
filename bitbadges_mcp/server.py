"""MCP transports for a Gateway.

    python -m generated.server                      # stdio (default)
    python -m generated.server --transport sse      # HTTP + SSE on $PORT (3000)
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone
from typing import Any, Callable

import anyio
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import Response
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server

from .config import DEFAULT_SERVER_PORT, SERVER_NAME, SERVER_VERSION, get_host, get_port, setup_logging
from .errors import GatewayError
from .gateway import Gateway

logger = logging.getLogger(__name__)


class ToolCallFailed(GatewayError):
    """Carries an error result's text to the MCP SDK, which flags it isError."""


def build_server(gateway: Gateway) -> Server:
    """Bind a gateway to a low-level MCP server."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [types.Tool.model_validate(tool) for tool in gateway.list()]

    # The gateway reports argument problems itself.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        result = await gateway.call(name, arguments or {})
        text = "\n".join(block["text"] for block in result["content"])
        if result.get("isError"):
            raise ToolCallFailed(text)
        return [types.TextContent(type="text", text=text)]

    return server


async def serve_stdio(gateway: Gateway) -> None:
    server = build_server(gateway)
    logger.info("BitBadges MCP server running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def create_sse_app(gateway: Gateway) -> FastAPI:
    """HTTP app exposing the MCP server over Server-Sent Events."""
    server = build_server(gateway)
    sse = SseServerTransport("/messages/")
    app = FastAPI(title="BitBadges MCP")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    async def handle_sse(request: Request) -> Response:
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        return Response()

    app.add_route("/sse", handle_sse, methods=["GET"])
    app.mount("/messages/", app=sse.handle_post_message)
    return app


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="BitBadges MCP server")
    parser.add_argument("--transport", choices=("stdio", "sse"), default="stdio")
    parser.add_argument("--host", default=get_host())
    parser.add_argument("--port", type=int, default=get_port(DEFAULT_SERVER_PORT))
    return parser.parse_args(argv)


def main(create_gateway: Callable[..., Gateway], argv: list[str] | None = None) -> None:
    """Run a generated server module."""
    args = _parse_args(argv)
    setup_logging()
    gateway = create_gateway()

    if args.transport == "stdio":
        anyio.run(serve_stdio, gateway)
        return

    logger.info("BitBadges MCP server running on port %d", args.port)
    logger.info("Health check: http://localhost:%d/health", args.port)
    logger.info("SSE endpoint: http://localhost:%d/sse", args.port)
    uvicorn.run(create_sse_app(gateway), host=args.host, port=args.port)
