"""Tests for the web relay front end, with the relay stubbed out."""

from __future__ import annotations

import time

import pytest
from fastapi.testclient import TestClient

from bitbadges_mcp.chat import API_KEY_PROMPT
from bitbadges_mcp.errors import RelayTimeoutError, RelayUnavailableError
from bitbadges_mcp.sessions import SessionStore
from bitbadges_mcp.web import create_app


@pytest.fixture
def sessions() -> SessionStore:
    return SessionStore()


@pytest.fixture
def client(fake_relay, sessions):
    with TestClient(create_app(fake_relay, sessions)) as test_client:
        yield test_client


def configure(ws, api_key="k1"):
    ws.send_json({"event": "configure_api_key", "data": {"apiKey": api_key}})
    assert ws.receive_json() == {"event": "api_key_configured", "data": {"success": True}}
    ws.receive_json()


class TestLifespan:
    def test_relay_started_and_stopped(self, fake_relay, sessions):
        with TestClient(create_app(fake_relay, sessions)):
            assert fake_relay.started
            assert not fake_relay.stopped
        assert fake_relay.stopped


class TestHttp:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_tools(self, client):
        response = client.get("/api/tools")
        assert response.status_code == 200
        assert response.json()["tools"][0]["name"] == "bitbadges_getStatus"

    def test_tools_error(self, client, fake_relay):
        fake_relay.error = RelayTimeoutError()
        response = client.get("/api/tools")
        assert response.status_code == 500
        assert response.json() == {"error": "Request timeout"}

    def test_call_tool(self, client, fake_relay):
        response = client.post("/api/tool/bitbadges_getStatus", json={"arguments": {"a": 1}})
        assert response.status_code == 200
        assert response.json()["content"][0]["text"] == "bitbadges_getStatus ok"
        assert fake_relay.calls == [("bitbadges_getStatus", {"a": 1}, None)]

    def test_call_tool_default_arguments(self, client, fake_relay):
        client.post("/api/tool/bitbadges_getStatus", json={})
        assert fake_relay.calls == [("bitbadges_getStatus", {}, None)]

    def test_call_tool_error(self, client, fake_relay):
        fake_relay.error = RelayUnavailableError()
        response = client.post("/api/tool/bitbadges_getStatus", json={"arguments": {}})
        assert response.status_code == 500
        assert response.json() == {"error": "MCP server not available"}


class TestWebSocket:
    def test_greeting(self, client, sessions):
        with client.websocket_connect("/ws") as ws:
            assert ws.receive_json() == {"event": "chat_history", "data": []}
            assert ws.receive_json() == {"event": "api_key_status", "data": {"configured": False}}
            assert len(sessions) == 1

    def test_session_closed_on_disconnect(self, client, sessions):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
        assert len(sessions) == 0

    def test_configure_api_key(self, client, sessions):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_json({"event": "configure_api_key", "data": {"apiKey": "k1"}})
            assert ws.receive_json() == {"event": "api_key_configured", "data": {"success": True}}
            message = ws.receive_json()
            assert message["event"] == "new_message"
            assert message["data"]["type"] == "system"
            assert "API key configured successfully" in message["data"]["content"]

    def test_configure_empty_key(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_json({"event": "configure_api_key", "data": {"apiKey": "  "}})
            assert ws.receive_json() == {
                "event": "api_key_configured",
                "data": {"success": False, "error": "Invalid API key"},
            }

    def test_chat_without_key(self, client, fake_relay):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_json({"event": "chat_message", "data": {"message": "status"}})
            user = ws.receive_json()["data"]
            reply = ws.receive_json()["data"]
        assert (user["type"], user["content"]) == ("user", "status")
        assert (reply["type"], reply["content"]) == ("assistant", API_KEY_PROMPT)
        assert fake_relay.calls == []

    def test_chat_routes_to_tool(self, client, fake_relay):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            configure(ws)
            ws.send_json({"event": "chat_message", "data": {"message": "collection 7"}})
            ws.receive_json()
            reply = ws.receive_json()["data"]
        assert fake_relay.calls == [("bitbadges_getCollection", {"collectionId": "7"}, "k1")]
        assert reply["toolCall"]["name"] == "bitbadges_getCollection"

    def test_chat_relay_error(self, client, fake_relay):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            configure(ws)
            fake_relay.error = RelayTimeoutError()
            ws.send_json({"event": "chat_message", "data": {"message": "status"}})
            ws.receive_json()
            reply = ws.receive_json()["data"]
        assert (reply["type"], reply["content"]) == ("system", "Error: Request timeout")

    def test_tool_call(self, client, fake_relay):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            configure(ws)
            ws.send_json({
                "event": "tool_call",
                "data": {"toolName": "bitbadges_getStatus", "arguments": {"x": 1}},
            })
            reply = ws.receive_json()["data"]
        assert reply["content"] == 'Tool "bitbadges_getStatus" executed successfully'
        assert reply["toolCall"]["result"]["content"][0]["text"] == "bitbadges_getStatus ok"
        assert fake_relay.calls == [("bitbadges_getStatus", {"x": 1}, "k1")]

    def test_tool_call_error(self, client, fake_relay):
        fake_relay.error = RelayUnavailableError()
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_json({"event": "tool_call", "data": {"toolName": "bitbadges_getStatus"}})
            reply = ws.receive_json()["data"]
        assert reply["type"] == "system"
        assert reply["content"] == "Tool error: MCP server not available"
        assert reply["toolCall"]["error"] == "MCP server not available"

    def test_get_tools(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_json({"event": "get_tools"})
            event = ws.receive_json()
        assert event["event"] == "tools_list"
        assert event["data"]["tools"][0]["name"] == "bitbadges_getStatus"

    def test_get_tools_error(self, client, fake_relay):
        fake_relay.error = RelayTimeoutError()
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_json({"event": "get_tools"})
            assert ws.receive_json() == {"event": "error", "data": {"message": "Request timeout"}}

    def test_invalid_json(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_text("not json")
            assert ws.receive_json() == {"event": "error", "data": {"message": "Invalid JSON"}}

    def test_unknown_event(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_json({"event": "dance"})
            assert ws.receive_json() == {"event": "error", "data": {"message": "Unknown event: dance"}}


class TestConcurrentEvents:
    def test_slow_tool_call_does_not_block(self, client, fake_relay):
        fake_relay.call_delay = 0.5
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_json({"event": "tool_call", "data": {"toolName": "bitbadges_getStatus"}})
            ws.send_json({"event": "get_tools"})
            first = ws.receive_json()
            second = ws.receive_json()
        assert first["event"] == "tools_list"
        assert second["event"] == "new_message"
        assert second["data"]["toolCall"]["name"] == "bitbadges_getStatus"

    def test_disconnect_cancels_pending_events(self, client, fake_relay, sessions):
        fake_relay.call_delay = 10.0
        started = time.monotonic()
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_json({"event": "tool_call", "data": {"toolName": "bitbadges_getStatus"}})
            ws.send_json({"event": "get_tools"})
            assert ws.receive_json()["event"] == "tools_list"
        assert time.monotonic() - started < 5.0
        assert len(sessions) == 0
