"""Render the server template and write generated output.

render() turns a tool catalog into the source of generated/server.py;
write_server() persists it, replacing any previous version in full.
"""

from __future__ import annotations

import pprint
import re
from pathlib import Path
from typing import Any

import jinja2

from .naming import CONFIGURE_TOOL_NAME, build_handler_name, deduplicate

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
OUTPUT_DIR = Path(__file__).parent.parent / "generated"
OUTPUT_PATH = OUTPUT_DIR / "server.py"

# The runtime request builder adds its own /api/v0 prefix.
_VERSION_PREFIX = re.compile(r"^/api/v[0-9]+")
_PLACEHOLDER = re.compile(r"\{([^}]+)\}")


def _pyrepr(value: Any) -> str:
    """Render a JSON-compatible value as a Python literal."""
    return pprint.pformat(value, indent=1, width=100, sort_dicts=False)


def strip_version_prefix(path: str) -> str:
    """Remove one leading /api/v<digits> segment from a path template."""
    return _VERSION_PREFIX.sub("", path, count=1)


def _escape_literal(text: str) -> str:
    text = text.replace("\\", "\\\\").replace('"', '\\"')
    return text.replace("{", "{{").replace("}", "}}")


def render_endpoint(path: str) -> str:
    """Render a path template as an f-string expression over ``args``.

    "/collection/{collectionId}" becomes
    f"/collection/{path_arg(args, 'collectionId')}".
    """
    path = strip_version_prefix(path)
    parts = []
    position = 0
    for match in _PLACEHOLDER.finditer(path):
        parts.append(_escape_literal(path[position:match.start()]))
        parts.append("{path_arg(args, %r)}" % match.group(1))
        position = match.end()
    parts.append(_escape_literal(path[position:]))
    return 'f"' + "".join(parts) + '"'


def build_handlers(tools: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Build the per-tool handler context for the template."""
    dispatchable = [t for t in tools if t["name"] != CONFIGURE_TOOL_NAME]
    functions = deduplicate(
        [build_handler_name(t["metadata"]["operationId"]) for t in dispatchable]
    )
    handlers = []
    for tool, function in zip(dispatchable, functions):
        metadata = tool["metadata"]
        handlers.append({
            "tool": tool["name"],
            "function": function,
            "description": tool["description"],
            "endpoint": render_endpoint(metadata["path"]),
            "method": metadata["method"],
            "query": list(metadata.get("queryParameters") or []),
        })
    return handlers


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["pyrepr"] = _pyrepr
    return env


def render(tools: list[dict[str, Any]], api_version: str = "unknown") -> str:
    """Render the complete server module for a tool catalog."""
    template = _environment().get_template("server.py.j2")
    return template.render(
        tools=tools,
        handlers=build_handlers(tools),
        tool_count=len(tools),
        api_version=api_version,
    )


def write_server(source: str, path: Path | None = None) -> Path:
    """Write the rendered module, replacing any previous version."""
    output_path = path or OUTPUT_PATH
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(source, encoding="utf-8")
    return output_path
