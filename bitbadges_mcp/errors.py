"""Error types for the gateway and the web relay."""

from __future__ import annotations


class BitBadgesMCPError(Exception):
    """Base class for all errors raised by this package."""


# ---------------------------------------------------------------------------
# Gateway
# ---------------------------------------------------------------------------

class GatewayError(BitBadgesMCPError):
    """A tool call failed; the message is shown to the MCP client."""


class ConfigurationError(GatewayError):
    """A tool other than configure was called before configure."""

    def __init__(self, message: str = "API key not configured. Use bitbadges_configure tool first."):
        super().__init__(message)


class InvalidConfigurationError(GatewayError):
    """The configure tool was called with invalid arguments."""


class RemoteError(GatewayError):
    """The BitBadges API answered with a non-success status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API Error ({status_code}): {detail}")


class NetworkError(GatewayError):
    """The request was sent but no response came back."""

    def __init__(self, message: str = "Network Error: No response received from API"):
        super().__init__(message)


class RequestConstructionError(GatewayError):
    """The request could not be built or sent."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Request Error: {detail}")


class UnknownToolError(GatewayError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


# ---------------------------------------------------------------------------
# Relay
# ---------------------------------------------------------------------------

class RelayError(BitBadgesMCPError):
    """A call through the MCP subprocess failed."""


class RelayTimeoutError(RelayError):
    def __init__(self, message: str = "Request timeout"):
        super().__init__(message)


class RelayUnavailableError(RelayError):
    def __init__(self, message: str = "MCP server not available"):
        super().__init__(message)


class RelayRpcError(RelayError):
    """The subprocess answered with a JSON-RPC error object."""

    def __init__(self, code: int | None, message: str):
        self.code = code
        super().__init__(message)
