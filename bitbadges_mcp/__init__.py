"""Runtime for the generated BitBadges MCP server and its web relay."""

__version__ = "1.0.0"
