"""Shared fixtures for the BitBadges MCP tests.

The generated server is rendered from tests/fixtures/openapi.yaml into a
temporary directory and imported from there; only the drift checks in
test_codegen.py read the committed generated/server.py, and nothing
overwrites it.
"""

from __future__ import annotations

import asyncio
import importlib.util
from pathlib import Path
from types import ModuleType
from typing import Any

import httpx
import pytest

from bitbadges_mcp.config import CONFIGURE_TOOL_NAME
from generator.codegen import render, write_server
from generator.loader import load_spec
from generator.synthesizer import synthesize

FIXTURE_SPEC = Path(__file__).parent / "fixtures" / "openapi.yaml"

TEST_API_KEY = "test-api-key"


# ---------------------------------------------------------------------------
# Spec and catalog
# ---------------------------------------------------------------------------

@pytest.fixture
def spec() -> dict[str, Any]:
    return load_spec(FIXTURE_SPEC)


@pytest.fixture
def tools(spec) -> list[dict[str, Any]]:
    return synthesize(spec)


@pytest.fixture
def tool_by_name(tools):
    """Look up a catalog entry by tool name."""
    def _get(name: str) -> dict[str, Any]:
        for tool in tools:
            if tool["name"] == name:
                return tool
        pytest.fail(f"Tool {name!r} not in catalog")
    return _get


# ---------------------------------------------------------------------------
# Generated server module
# ---------------------------------------------------------------------------

@pytest.fixture
def generated(tools, tmp_path) -> ModuleType:
    """Render the server for the fixture spec and import it."""
    path = write_server(render(tools, api_version="2.1.0"), tmp_path / "server.py")
    module_spec = importlib.util.spec_from_file_location("bitbadges_generated_server", path)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


# ---------------------------------------------------------------------------
# Stub BitBadges API
# ---------------------------------------------------------------------------

class FakeAPI:
    """Records outbound requests and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"success": True}
        self.error: type[httpx.TransportError] | None = None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("simulated failure", request=request)
        if isinstance(self.payload, str):
            return httpx.Response(self.status_code, text=self.payload)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def gateway(generated, api):
    """Unconfigured gateway over the generated catalog, wired to the stub API."""
    return generated.create_gateway(transport=api.transport)


@pytest.fixture
async def configured(gateway):
    await gateway.call("bitbadges_configure", {"apiKey": TEST_API_KEY, "baseUrl": "https://api.test"})
    return gateway


# ---------------------------------------------------------------------------
# Stub relay for the chat router and web app
# ---------------------------------------------------------------------------

class FakeRelay:
    """Stands in for McpProcessManager; records calls, never spawns anything."""

    def __init__(self):
        self.calls: list[tuple[str, dict[str, Any], str | None]] = []
        self.error: Exception | None = None
        self.configured: list[str] = []
        self.call_delay = 0.0
        self.started = False
        self.stopped = False

    async def start(self) -> None:
        self.started = True

    async def stop(self) -> None:
        self.stopped = True

    async def list_tools(self) -> dict[str, Any]:
        if self.error is not None:
            raise self.error
        return {"tools": [{"name": "bitbadges_getStatus", "inputSchema": {"type": "object"}}]}

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self.call_tool_with_api_key(name, arguments)

    async def configure(self, api_key: str, base_url: str | None = None) -> dict[str, Any]:
        self.configured.append(api_key)
        return await self.call_tool(CONFIGURE_TOOL_NAME, {"apiKey": api_key})

    async def call_tool_with_api_key(
        self,
        name: str,
        arguments: dict[str, Any] | None = None,
        api_key: str | None = None,
    ) -> dict[str, Any]:
        self.calls.append((name, arguments or {}, api_key))
        if self.call_delay:
            await asyncio.sleep(self.call_delay)
        if self.error is not None:
            raise self.error
        return {"content": [{"type": "text", "text": f"{name} ok"}]}


@pytest.fixture
def fake_relay() -> FakeRelay:
    return FakeRelay()
