"""Synthesize the MCP tool catalog from the parsed OpenAPI spec.

One descriptor per operation with an operation id, in document order,
behind the hand-written configure tool.
"""

from __future__ import annotations

import json
from typing import Any

from bitbadges_mcp.config import DEFAULT_BASE_URL

from .loader import get_paths
from .naming import CONFIGURE_TOOL_NAME, build_tool_name
from .schema_parser import build_input_schema, get_query_parameters

CONFIGURE_TOOL: dict[str, Any] = {
    "name": CONFIGURE_TOOL_NAME,
    "description": "Configure the BitBadges API key and base URL",
    "inputSchema": {
        "type": "object",
        "properties": {
            "apiKey": {
                "type": "string",
                "description": "Your BitBadges API key from the developer portal",
            },
            "baseUrl": {
                "type": "string",
                "description": (
                    "Base URL for the BitBadges API (optional, defaults to "
                    f"{DEFAULT_BASE_URL})"
                ),
            },
        },
        "required": ["apiKey"],
    },
}

# Auth flows need a browser session; they are not exposed as tools.
_EXCLUDED_PATH_SEGMENTS = ("/auth/", "/oauth/")


def _should_skip_path(path: str) -> bool:
    """Check if a path is excluded from the catalog."""
    return any(segment in path for segment in _EXCLUDED_PATH_SEGMENTS)


def _make_description(operation: dict[str, Any]) -> str:
    return str(
        operation.get("summary")
        or operation.get("description")
        or f"Execute {operation['operationId']}"
    )


def _jsonable(value: Any) -> Any:
    """Normalize YAML-only scalars (dates, timestamps) to JSON values."""
    return json.loads(json.dumps(value, default=str))


def synthesize(spec: dict[str, Any]) -> list[dict[str, Any]]:
    """Build the ordered tool catalog from the OpenAPI spec."""
    tools: list[dict[str, Any]] = [_jsonable(CONFIGURE_TOOL)]
    names = {CONFIGURE_TOOL_NAME}

    for path, path_item in get_paths(spec).items():
        if not isinstance(path_item, dict):
            continue

        for method, operation in path_item.items():
            if not isinstance(operation, dict) or not operation.get("operationId"):
                continue

            operation_id = str(operation["operationId"])
            name = build_tool_name(operation_id)
            if name in names or _should_skip_path(path):
                continue

            tool = {
                "name": name,
                "description": _make_description(operation),
                "inputSchema": build_input_schema(operation, path_item),
                "metadata": {
                    "path": path,
                    "method": method.upper(),
                    "operationId": operation_id,
                    "tags": operation.get("tags") or [],
                    "queryParameters": get_query_parameters(operation, path_item),
                },
            }
            tools.append(_jsonable(tool))
            names.add(name)

    return tools
