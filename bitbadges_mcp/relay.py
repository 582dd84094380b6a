"""Relay to a BitBadges MCP server subprocess.

Keeps one generated server alive over stdio and talks line-delimited
JSON-RPC to it. Responses are matched to requests by integer id only; the
server may interleave replies to concurrent requests.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Coroutine

from mcp.types import LATEST_PROTOCOL_VERSION

from .config import CONFIGURE_TOOL_NAME, PROJECT_ROOT, REQUEST_TIMEOUT, get_server_command
from .errors import RelayError, RelayRpcError, RelayTimeoutError, RelayUnavailableError

logger = logging.getLogger(__name__)

RESTART_DELAY = 2.0
STARTUP_TIMEOUT = 30.0

# tools/list replies carry the whole catalog on one line.
_STREAM_LIMIT = 16 * 1024 * 1024


class McpProcessManager:
    """Supervises the MCP server subprocess and correlates its replies."""

    def __init__(
        self,
        command: list[str] | None = None,
        cwd: Path | None = None,
        request_timeout: float = REQUEST_TIMEOUT,
        restart_delay: float = RESTART_DELAY,
        startup_timeout: float = STARTUP_TIMEOUT,
    ):
        self.command = list(command or get_server_command())
        self.cwd = cwd or PROJECT_ROOT
        self.request_timeout = request_timeout
        self.restart_delay = restart_delay
        self.startup_timeout = startup_timeout

        self._process: asyncio.subprocess.Process | None = None
        self._ready = False
        self._stopping = False
        self._request_id = 0
        self._pending: dict[int, asyncio.Future] = {}
        self._tasks: set[asyncio.Task] = set()
        self._key_lock = asyncio.Lock()

    @property
    def running(self) -> bool:
        """True once the subprocess is up and initialized."""
        return self._process is not None and self._ready

    @property
    def pending(self) -> frozenset[int]:
        """Ids of requests still waiting for a reply."""
        return frozenset(self._pending)

    async def start(self) -> None:
        self._stopping = False
        await self._spawn()

    async def stop(self) -> None:
        """Terminate the subprocess; no respawn follows."""
        self._stopping = True
        process, self._process = self._process, None
        self._ready = False
        if process is not None and process.returncode is None:
            process.terminate()
            try:
                await asyncio.wait_for(process.wait(), timeout=5.0)
            except asyncio.TimeoutError:
                process.kill()
                await process.wait()
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        logger.info("MCP server stopped")

    # ------------------------------------------------------------------
    # Process lifecycle
    # ------------------------------------------------------------------

    def _track(self, coro: Coroutine[Any, Any, Any]) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _spawn(self) -> None:
        logger.info("Starting MCP server: %s", " ".join(self.command))
        try:
            process = await asyncio.create_subprocess_exec(
                *self.command,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(self.cwd),
                limit=_STREAM_LIMIT,
            )
        except OSError as e:
            logger.error("Failed to start MCP server: %s", e)
            self._track(self._restart_later())
            return

        self._process = process
        self._ready = False
        self._track(self._read_output(process))
        self._track(self._read_errors(process))
        self._track(self._watch(process))

        try:
            await self._initialize()
        except RelayError as e:
            logger.error("MCP server handshake failed: %s", e)
            if process.returncode is None:
                process.terminate()
            return
        if self._process is process:
            self._ready = True
            logger.info("MCP server ready (pid %s)", process.pid)

    async def _initialize(self) -> None:
        await self._send(
            "initialize",
            {
                "protocolVersion": LATEST_PROTOCOL_VERSION,
                "capabilities": {},
                "clientInfo": {"name": "bitbadges-mcp-relay", "version": "1.0.0"},
            },
            timeout=self.startup_timeout,
        )
        await self._notify("notifications/initialized")

    async def _watch(self, process: asyncio.subprocess.Process) -> None:
        code = await process.wait()
        logger.warning("MCP server exited with code %s", code)
        if self._process is process:
            self._process = None
            self._ready = False
        self._fail_pending()
        await self._restart_later()

    def _fail_pending(self) -> None:
        """Fail every in-flight request; their replies died with the process."""
        pending, self._pending = self._pending, {}
        for future in pending.values():
            if not future.done():
                future.set_exception(RelayUnavailableError())

    async def _restart_later(self) -> None:
        if self._stopping:
            return
        await asyncio.sleep(self.restart_delay)
        if self._stopping or self._process is not None:
            return
        logger.info("Restarting MCP server...")
        await self._spawn()

    async def _read_output(self, process: asyncio.subprocess.Process) -> None:
        assert process.stdout is not None
        async for raw in process.stdout:
            line = raw.decode("utf-8", errors="replace").strip()
            if not line.startswith("{"):
                if line:
                    logger.debug("MCP output: %s", line)
                continue
            try:
                message = json.loads(line)
            except json.JSONDecodeError:
                logger.warning("Invalid JSON from MCP server: %s", line[:200])
                continue
            self._resolve(message)

    async def _read_errors(self, process: asyncio.subprocess.Process) -> None:
        assert process.stderr is not None
        async for raw in process.stderr:
            line = raw.decode("utf-8", errors="replace").rstrip()
            if line:
                logger.info("MCP server: %s", line)

    def _resolve(self, message: dict[str, Any]) -> None:
        request_id = message.get("id")
        if not isinstance(request_id, int) or request_id not in self._pending:
            # Late reply to a timed-out request, or a server notification.
            logger.debug("Ignoring MCP message without pending request: id=%r", request_id)
            return
        future = self._pending.pop(request_id)
        if not future.done():
            future.set_result(message)

    # ------------------------------------------------------------------
    # JSON-RPC
    # ------------------------------------------------------------------

    def _write(self, message: dict[str, Any]) -> asyncio.StreamWriter:
        process = self._process
        if process is None or process.stdin is None:
            raise RelayUnavailableError()
        process.stdin.write((json.dumps(message) + "\n").encode("utf-8"))
        return process.stdin

    async def _notify(self, method: str, params: dict[str, Any] | None = None) -> None:
        message: dict[str, Any] = {"jsonrpc": "2.0", "method": method}
        if params is not None:
            message["params"] = params
        try:
            await self._write(message).drain()
        except (BrokenPipeError, ConnectionResetError) as e:
            raise RelayUnavailableError() from e

    async def _send(self, method: str, params: dict[str, Any] | None = None, timeout: float | None = None) -> Any:
        self._request_id += 1
        request_id = self._request_id
        future = asyncio.get_running_loop().create_future()
        self._pending[request_id] = future

        logger.debug("Sending MCP request %d: %s", request_id, method)
        try:
            writer = self._write(
                {"jsonrpc": "2.0", "id": request_id, "method": method, "params": params or {}}
            )
            await writer.drain()
            response = await asyncio.wait_for(future, timeout or self.request_timeout)
        except asyncio.TimeoutError:
            raise RelayTimeoutError() from None
        except (BrokenPipeError, ConnectionResetError) as e:
            raise RelayUnavailableError() from e
        finally:
            self._pending.pop(request_id, None)

        if "error" in response:
            error = response["error"] or {}
            raise RelayRpcError(error.get("code"), error.get("message", "Unknown MCP error"))
        return response.get("result", {})

    async def send_request(self, method: str, params: dict[str, Any] | None = None) -> Any:
        """Send one request and wait for the matching reply."""
        if not self.running:
            raise RelayUnavailableError()
        return await self._send(method, params)

    async def list_tools(self) -> dict[str, Any]:
        return await self.send_request("tools/list")

    async def _call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self.send_request("tools/call", {"name": name, "arguments": arguments or {}})

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        if name == CONFIGURE_TOOL_NAME:
            async with self._key_lock:
                return await self._call_tool(name, arguments)
        return await self._call_tool(name, arguments)

    async def configure(self, api_key: str, base_url: str | None = None) -> dict[str, Any]:
        """Install a key in the subprocess, queued behind any keyed call in progress."""
        arguments = {"apiKey": api_key}
        if base_url:
            arguments["baseUrl"] = base_url
        return await self.call_tool(CONFIGURE_TOOL_NAME, arguments)

    async def call_tool_with_api_key(
        self,
        name: str,
        arguments: dict[str, Any] | None = None,
        api_key: str | None = None,
    ) -> dict[str, Any]:
        """Configure the subprocess with a session's key, then call the tool.

        The subprocess holds a single configuration, so the configure and
        the call run under the same lock as every other configure.
        """
        if not api_key or name == CONFIGURE_TOOL_NAME:
            return await self.call_tool(name, arguments)
        async with self._key_lock:
            await self._call_tool(CONFIGURE_TOOL_NAME, {"apiKey": api_key})
            return await self._call_tool(name, arguments)
