"""Web front end for the relay.

HTTP:
  GET  /api/health
  GET  /api/tools
  POST /api/tool/{tool_name}      body: {"arguments": {...}}

WebSocket /ws carries JSON envelopes ``{"event": ..., "data": ...}``.
Inbound events: chat_message, tool_call, get_tools, configure_api_key.
Outbound events: new_message, chat_history, tools_list, api_key_status,
api_key_configured, error.
"""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .chat import process_user_message
from .errors import RelayError
from .relay import McpProcessManager
from .sessions import ChatMessage, SessionStore, ToolCall

logger = logging.getLogger(__name__)

EventHandler = Callable[[WebSocket, str, dict[str, Any]], Awaitable[None]]


class ToolCallRequest(BaseModel):
    arguments: dict[str, Any] = Field(default_factory=dict)


async def emit(websocket: WebSocket, event: str, data: Any) -> None:
    await websocket.send_json({"event": event, "data": data})


def create_app(relay: McpProcessManager | None = None, sessions: SessionStore | None = None) -> FastAPI:
    """Build the web app around a relay and a session store."""
    if relay is None:
        relay = McpProcessManager()
    if sessions is None:
        sessions = SessionStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await relay.start()
        try:
            yield
        finally:
            logger.info("Shutting down gracefully...")
            await relay.stop()

    app = FastAPI(title="BitBadges MCP Web Interface", lifespan=lifespan)
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET", "POST"], allow_headers=["*"])
    app.state.relay = relay
    app.state.sessions = sessions

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/api/tools")
    async def list_tools() -> Any:
        try:
            return await relay.list_tools()
        except RelayError as e:
            return JSONResponse(status_code=500, content={"error": str(e)})

    @app.post("/api/tool/{tool_name}")
    async def call_tool(tool_name: str, request: ToolCallRequest) -> Any:
        try:
            return await relay.call_tool(tool_name, request.arguments)
        except RelayError as e:
            return JSONResponse(status_code=500, content={"error": str(e)})

    # ------------------------------------------------------------------
    # WebSocket events
    # ------------------------------------------------------------------

    async def post(websocket: WebSocket, connection_id: str, message: ChatMessage) -> None:
        sessions.append(connection_id, message)
        await emit(websocket, "new_message", message.to_event())

    async def on_chat_message(websocket: WebSocket, connection_id: str, data: dict[str, Any]) -> None:
        text = str(data.get("message", ""))
        await post(websocket, connection_id, ChatMessage(type="user", content=text))
        try:
            reply = await process_user_message(text, connection_id, relay, sessions)
        except RelayError as e:
            await post(websocket, connection_id, ChatMessage(type="system", content=f"Error: {e}"))
            return
        await post(
            websocket,
            connection_id,
            ChatMessage(type="assistant", content=reply.content, tool_call=reply.tool_call),
        )

    async def on_tool_call(websocket: WebSocket, connection_id: str, data: dict[str, Any]) -> None:
        name = str(data.get("toolName", ""))
        arguments = data.get("arguments")
        if not isinstance(arguments, dict):
            arguments = {}
        try:
            result = await relay.call_tool_with_api_key(name, arguments, sessions.api_key(connection_id))
        except RelayError as e:
            await post(websocket, connection_id, ChatMessage(
                type="system",
                content=f"Tool error: {e}",
                tool_call=ToolCall(name=name, arguments=arguments, error=str(e)),
            ))
            return
        await post(websocket, connection_id, ChatMessage(
            type="assistant",
            content=f'Tool "{name}" executed successfully',
            tool_call=ToolCall(name=name, arguments=arguments, result=result),
        ))

    async def on_get_tools(websocket: WebSocket, connection_id: str, data: dict[str, Any]) -> None:
        try:
            tools = await relay.list_tools()
        except RelayError as e:
            await emit(websocket, "error", {"message": str(e)})
            return
        await emit(websocket, "tools_list", tools)

    async def on_configure_api_key(websocket: WebSocket, connection_id: str, data: dict[str, Any]) -> None:
        api_key = str(data.get("apiKey") or "").strip()
        if not api_key:
            await emit(websocket, "api_key_configured", {"success": False, "error": "Invalid API key"})
            return
        sessions.set_api_key(connection_id, api_key)
        await emit(websocket, "api_key_configured", {"success": True})
        await post(websocket, connection_id, ChatMessage(
            type="system",
            content="🔑 API key configured successfully! You can now use BitBadges tools.",
        ))

    handlers: dict[str, EventHandler] = {
        "chat_message": on_chat_message,
        "tool_call": on_tool_call,
        "get_tools": on_get_tools,
        "configure_api_key": on_configure_api_key,
    }

    def _log_failure(task: asyncio.Task) -> None:
        if not task.cancelled() and task.exception() is not None:
            logger.error("WebSocket event handler failed", exc_info=task.exception())

    @app.websocket("/ws")
    async def socket(websocket: WebSocket) -> None:
        await websocket.accept()
        connection_id = uuid.uuid4().hex
        sessions.open(connection_id)
        logger.info("Client connected: %s", connection_id)
        # One task per event; a slow tool call must not delay later events.
        tasks: set[asyncio.Task] = set()
        try:
            await emit(websocket, "chat_history", [m.to_event() for m in sessions.history(connection_id)])
            await emit(websocket, "api_key_status", {"configured": sessions.has_api_key(connection_id)})
            while True:
                raw = await websocket.receive_text()
                try:
                    envelope = json.loads(raw)
                except json.JSONDecodeError:
                    await emit(websocket, "error", {"message": "Invalid JSON"})
                    continue
                if not isinstance(envelope, dict):
                    await emit(websocket, "error", {"message": "Invalid event envelope"})
                    continue
                event = envelope.get("event")
                handler = handlers.get(event) if isinstance(event, str) else None
                if handler is None:
                    await emit(websocket, "error", {"message": f"Unknown event: {event}"})
                    continue
                data = envelope.get("data")
                if not isinstance(data, dict):
                    data = {}
                task = asyncio.create_task(handler(websocket, connection_id, data))
                tasks.add(task)
                task.add_done_callback(tasks.discard)
                task.add_done_callback(_log_failure)
        except WebSocketDisconnect:
            logger.info("Client disconnected: %s", connection_id)
        finally:
            for task in list(tasks):
                task.cancel()
            if tasks:
                await asyncio.gather(*tasks, return_exceptions=True)
            sessions.close(connection_id)

    return app
