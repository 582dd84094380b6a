"""Runtime configuration.

Two kinds of settings live here:

- ``Configuration``: the API key / base URL pair a gateway needs before it
  can call BitBadges. It is supplied at runtime through the configure tool.
- Process settings read from the environment with fixed fallbacks
  (listener ports, log level, the relay's subprocess command).
"""

from __future__ import annotations

import logging
import os
import shlex
import sys
from pathlib import Path
from typing import Any

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.bitbadges.io"
API_VERSION = "v0"
API_KEY_HEADER = "x-api-key"
REQUEST_TIMEOUT = 30.0

CONFIGURE_TOOL_NAME = "bitbadges_configure"

SERVER_NAME = "bitbadges-mcp"
SERVER_VERSION = "1.0.0"

DEFAULT_SERVER_PORT = 3000
DEFAULT_RELAY_PORT = 3001

PROJECT_ROOT = Path(__file__).parent.parent

_HTTP_URL = TypeAdapter(AnyHttpUrl)


class Configuration(BaseModel):
    """API credentials for one gateway."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str = Field(alias="apiKey", min_length=1)
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="baseUrl")

    @field_validator("base_url", mode="before")
    @classmethod
    def _default_base_url(cls, value: Any) -> Any:
        if value is None or value == "":
            return DEFAULT_BASE_URL
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError:
            logger.warning("Invalid base URL %r, using %s", value, DEFAULT_BASE_URL)
            return DEFAULT_BASE_URL
        return value


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

def get_port(default: int) -> int:
    """Listener port from $PORT."""
    value = os.environ.get("PORT")
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-numeric PORT=%r, using %d", value, default)
        return default


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0")


def get_server_command() -> list[str]:
    """Command line the web relay uses to start the MCP server."""
    command = os.environ.get("BITBADGES_MCP_SERVER_COMMAND")
    if command:
        return shlex.split(command)
    return [sys.executable, "-m", "generated.server"]


def setup_logging(level: str | None = None) -> None:
    """Configure root logging on stderr.

    stdout carries the MCP stdio transport, so nothing else may write there.
    """
    level = (level or os.environ.get("BITBADGES_MCP_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s,p%(process)s,{%(filename)s:%(lineno)d},%(levelname)s,%(message)s",
        stream=sys.stderr,
    )
