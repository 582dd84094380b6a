"""Build tool input schemas from OpenAPI operations.

Handles:
- Path and query parameters (operation-level overriding path-item level)
- Scalar type with a "string" default
- JSON request bodies, spliced when the schema carries its own properties
- Opaque bodies ($ref, unions, arrays) exposed as a single "body" property
"""

from __future__ import annotations

from typing import Any

# Parameter locations exposed as tool arguments
_ARGUMENT_LOCATIONS = ("path", "query")


def merge_parameters(
    operation: dict[str, Any],
    path_item: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Combine path-item and operation parameters, operation winning."""
    merged: dict[tuple[str, str], dict[str, Any]] = {}
    for source in ((path_item or {}).get("parameters"), operation.get("parameters")):
        for param in source or []:
            if not isinstance(param, dict) or "name" not in param:
                continue
            merged[(param["name"], param.get("in", "query"))] = param
    return list(merged.values())


def parse_parameters(
    operation: dict[str, Any],
    path_item: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Return the path and query parameters of an operation."""
    params = []
    for param in merge_parameters(operation, path_item):
        location = param.get("in", "query")
        if location not in _ARGUMENT_LOCATIONS:
            continue
        schema = param.get("schema") or {}
        params.append({
            "name": param["name"],
            "location": location,
            "type": schema.get("type") or "string",
            "description": param.get("description") or f"{param['name']} parameter",
            "required": bool(param.get("required", False)),
        })
    return params


def get_body_schema(operation: dict[str, Any]) -> dict[str, Any] | None:
    """Return the JSON request body schema, if the operation declares one."""
    request_body = operation.get("requestBody") or {}
    content = request_body.get("content") or {}
    json_content = content.get("application/json") or {}
    schema = json_content.get("schema")
    return schema if isinstance(schema, dict) and schema else None


def build_input_schema(
    operation: dict[str, Any],
    path_item: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Assemble the JSON-schema input shape for an operation."""
    properties: dict[str, Any] = {}
    required: list[str] = []

    for param in parse_parameters(operation, path_item):
        properties[param["name"]] = {
            "type": param["type"],
            "description": param["description"],
        }
        if param["required"]:
            required.append(param["name"])

    body_schema = get_body_schema(operation)
    if body_schema is not None:
        if isinstance(body_schema.get("properties"), dict):
            properties.update(body_schema["properties"])
            required.extend(body_schema.get("required") or [])
        else:
            properties["body"] = body_schema
            required.append("body")

    return {
        "type": "object",
        "properties": properties,
        "required": list(dict.fromkeys(required)),
    }


def get_query_parameters(
    operation: dict[str, Any],
    path_item: dict[str, Any] | None = None,
) -> list[str]:
    """Names of the declared query parameters, in declaration order."""
    return [
        p["name"]
        for p in parse_parameters(operation, path_item)
        if p["location"] == "query"
    ]
