"""Tool gateway: dispatches MCP tool calls to the BitBadges REST API.

A Gateway owns a tool catalog, a handler per dispatchable tool, and its own
Configuration. Handlers are generated (see templates/server.py.j2); each
one builds an endpoint from its call arguments and calls
``Gateway.request``. Every failure is turned into an error result at
``Gateway.call``; nothing raises past it.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable, Iterable

import httpx
from pydantic import ValidationError

from .config import (
    API_KEY_HEADER,
    API_VERSION,
    CONFIGURE_TOOL_NAME,
    REQUEST_TIMEOUT,
    Configuration,
)
from .errors import (
    ConfigurationError,
    GatewayError,
    InvalidConfigurationError,
    NetworkError,
    RemoteError,
    RequestConstructionError,
    UnknownToolError,
)

logger = logging.getLogger(__name__)

Handler = Callable[["Gateway", dict[str, Any]], Awaitable[Any]]


def path_arg(args: dict[str, Any], name: str) -> str:
    """Value for a ``{name}`` path placeholder.

    A missing argument leaves the placeholder text in place; the API then
    rejects the path.
    """
    value = args.get(name)
    if value is None:
        return "{%s}" % name
    return str(value)


def query_args(args: dict[str, Any], names: Iterable[str]) -> dict[str, Any]:
    """Pick declared query parameters out of the call arguments, skipping absent ones."""
    return {name: args[name] for name in names if args.get(name) is not None}


def text_result(text: str, is_error: bool = False) -> dict[str, Any]:
    """Wrap text in an MCP tool result."""
    result: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if is_error:
        result["isError"] = True
    return result


def _format_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}"
        for error in exc.errors()
    )


def _upstream_message(response: httpx.Response) -> str:
    """Error text from an API error response, falling back to the reason phrase."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        for key in ("errorMessage", "message"):
            if data.get(key):
                return str(data[key])
    return response.reason_phrase or "Unknown error"


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class Gateway:
    """Dispatches tool calls for one catalog and one configuration."""

    def __init__(
        self,
        tools: list[dict[str, Any]],
        handlers: dict[str, Handler],
        config: Configuration | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._tools = tools
        self._handlers = handlers
        self.config = config
        self._transport = transport

    def list(self) -> list[dict[str, Any]]:
        """Return the full tool catalog."""
        return list(self._tools)

    def configure(self, args: dict[str, Any]) -> Configuration:
        """Validate and install a new configuration."""
        try:
            config = Configuration.model_validate(args)
        except ValidationError as exc:
            raise InvalidConfigurationError(
                f"Invalid configuration: {_format_validation_error(exc)}"
            ) from exc
        self.config = config
        logger.info("Configured BitBadges API at %s", config.base_url)
        return config

    def _require_config(self) -> Configuration:
        if self.config is None:
            raise ConfigurationError()
        return self.config

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        """Run one tool and return its MCP result."""
        args = arguments or {}
        try:
            if name == CONFIGURE_TOOL_NAME:
                config = self.configure(args)
                return text_result(
                    f"BitBadges API configured successfully with base URL: {config.base_url}"
                )

            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(name)
            self._require_config()

            data = await handler(self, args)
            return text_result(json.dumps(data, indent=2, ensure_ascii=False))
        except GatewayError as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            return text_result(f"Error: {exc}", is_error=True)
        except Exception as exc:
            logger.exception("Unexpected error in tool %s", name)
            return text_result(f"Error: {exc}", is_error=True)

    def build_url(self, endpoint: str) -> httpx.URL:
        """Absolute URL for an endpoint below /api/<version>."""
        config = self._require_config()
        try:
            return httpx.URL(config.base_url).join(f"/api/{API_VERSION}{endpoint}")
        except httpx.InvalidURL as exc:
            raise RequestConstructionError(str(exc)) from exc

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        query: dict[str, Any] | None = None,
    ) -> Any:
        """Make one API request and return the decoded response body."""
        config = self._require_config()
        url = self.build_url(endpoint)
        headers = {API_KEY_HEADER: config.api_key, "Content-Type": "application/json"}

        kwargs: dict[str, Any] = {}
        if query:
            kwargs["params"] = query
        if body is not None and method.upper() != "GET":
            kwargs["json"] = body

        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT, transport=self._transport) as client:
                response = await client.request(method.upper(), url, headers=headers, **kwargs)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RemoteError(exc.response.status_code, _upstream_message(exc.response)) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, httpx.LocalProtocolError) as exc:
            raise RequestConstructionError(str(exc)) from exc
        except httpx.TransportError as exc:
            logger.debug("Transport error for %s %s: %s", method, url, exc)
            raise NetworkError() from exc

        return _decode(response)
