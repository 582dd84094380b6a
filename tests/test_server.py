"""Tests for the MCP binding, over in-memory and SSE client sessions."""

from __future__ import annotations

import json
import socket
from importlib.metadata import version
import threading
import time

import pytest
import uvicorn
from fastapi.testclient import TestClient
from mcp import ClientSession, types
from mcp.client.sse import sse_client
from mcp.shared.memory import create_connected_server_and_client_session

from bitbadges_mcp.config import SERVER_NAME
from bitbadges_mcp.server import build_server, create_sse_app


class TestListTools:
    async def test_catalog_exposed(self, gateway, tools):
        async with create_connected_server_and_client_session(build_server(gateway)) as client:
            result = await client.list_tools()
        assert [t.name for t in result.tools] == [t["name"] for t in tools]

    async def test_raw_input_schema(self, gateway, tool_by_name):
        async with create_connected_server_and_client_session(build_server(gateway)) as client:
            result = await client.list_tools()
        listed = next(t for t in result.tools if t.name == "bitbadges_searchClaims")
        assert listed.inputSchema == tool_by_name("bitbadges_searchClaims")["inputSchema"]
        assert listed.description == "Execute searchClaims"


class TestCallTool:
    async def test_configure_then_call(self, gateway, api):
        api.payload = {"status": "ok"}
        async with create_connected_server_and_client_session(build_server(gateway)) as client:
            configured = await client.call_tool("bitbadges_configure", {"apiKey": "k1"})
            result = await client.call_tool("bitbadges_getStatus", {})
        assert not configured.isError
        assert not result.isError
        assert isinstance(result.content[0], types.TextContent)
        assert json.loads(result.content[0].text) == {"status": "ok"}
        assert api.last.headers["x-api-key"] == "k1"

    async def test_unconfigured_is_error(self, gateway):
        async with create_connected_server_and_client_session(build_server(gateway)) as client:
            result = await client.call_tool("bitbadges_getStatus", {})
        assert result.isError
        assert "API key not configured" in result.content[0].text

    async def test_unknown_tool_is_error(self, gateway):
        async with create_connected_server_and_client_session(build_server(gateway)) as client:
            result = await client.call_tool("bitbadges_nope", {})
        assert result.isError
        assert "Unknown tool: bitbadges_nope" in result.content[0].text

    async def test_arguments_not_prevalidated(self, gateway):
        """Schema violations reach the gateway, which reports them itself."""
        async with create_connected_server_and_client_session(build_server(gateway)) as client:
            result = await client.call_tool("bitbadges_configure", {"baseUrl": "https://x.test"})
        assert result.isError
        assert "Invalid configuration" in result.content[0].text


class TestServerInfo:
    def test_name(self, gateway):
        assert build_server(gateway).name == SERVER_NAME

    def test_sdk_has_decorator_api(self):
        # build_server registers handlers through the 1.x decorators.
        assert int(version("mcp").split(".")[0]) == 1


class TestSseApp:
    def test_health(self, gateway):
        with TestClient(create_sse_app(gateway)) as client:
            response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "timestamp" in response.json()

    def test_post_without_session(self, gateway):
        with TestClient(create_sse_app(gateway)) as client:
            response = client.post("/messages/", json={"jsonrpc": "2.0", "method": "ping", "id": 1})
        assert response.status_code == 400

    def test_post_invalid_session(self, gateway):
        with TestClient(create_sse_app(gateway)) as client:
            response = client.post(
                "/messages/?session_id=not-hex", json={"jsonrpc": "2.0", "method": "ping", "id": 1}
            )
        assert response.status_code == 400

    def test_post_unknown_session(self, gateway):
        with TestClient(create_sse_app(gateway)) as client:
            response = client.post(
                "/messages/?session_id=" + "0" * 32, json={"jsonrpc": "2.0", "method": "ping", "id": 1}
            )
        assert response.status_code == 404


@pytest.fixture
def sse_url(gateway):
    """Serve the SSE app on a free local port in a background thread."""
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    config = uvicorn.Config(
        create_sse_app(gateway), host="127.0.0.1", port=port, log_level="warning", timeout_graceful_shutdown=1
    )
    server = uvicorn.Server(config)
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            pytest.fail("SSE server did not start")
        time.sleep(0.05)
    yield f"http://127.0.0.1:{port}"
    server.should_exit = True
    thread.join(timeout=5)


class TestSseSession:
    """A real MCP client over /sse and /messages/."""

    async def test_list_and_call(self, sse_url, api, tools):
        api.payload = {"status": "ok"}
        async with sse_client(f"{sse_url}/sse") as (read_stream, write_stream):
            async with ClientSession(read_stream, write_stream) as client:
                await client.initialize()
                listed = await client.list_tools()
                configured = await client.call_tool("bitbadges_configure", {"apiKey": "k1"})
                result = await client.call_tool("bitbadges_getStatus", {})
        assert [t.name for t in listed.tools] == [t["name"] for t in tools]
        assert not configured.isError
        assert json.loads(result.content[0].text) == {"status": "ok"}
        assert api.last.headers["x-api-key"] == "k1"
