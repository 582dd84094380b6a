"""Entry point: python -m bitbadges_mcp

Runs the web relay on $PORT (3001), with the generated MCP server as a
subprocess.
"""

from __future__ import annotations

import logging

import uvicorn

from .config import DEFAULT_RELAY_PORT, get_host, get_port, setup_logging
from .web import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    port = get_port(DEFAULT_RELAY_PORT)
    logger.info("BitBadges MCP web interface running on http://localhost:%d", port)
    uvicorn.run(create_app(), host=get_host(), port=port)


if __name__ == "__main__":
    main()
