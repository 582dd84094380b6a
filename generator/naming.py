"""Tool and handler names.

Tool names are the operation id behind a fixed prefix, kept verbatim so
they line up with the BitBadges SDK method names:

  getAccount         -> bitbadges_getAccount
  getBadgeMetadata   -> bitbadges_getBadgeMetadata

Handler functions in the generated module need Python identifiers:

  getBadgeMetadata   -> handle_get_badge_metadata
  GetBadgesViewForUser -> handle_get_badges_view_for_user
"""

from __future__ import annotations

import re

from bitbadges_mcp.config import CONFIGURE_TOOL_NAME

TOOL_PREFIX = "bitbadges_"


def build_tool_name(operation_id: str) -> str:
    """Return the MCP tool name for an operation id."""
    return f"{TOOL_PREFIX}{operation_id}"


def _camel_to_snake(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1).lower()


def _sanitize(name: str) -> str:
    """Reduce a string to lowercase identifier characters."""
    name = _camel_to_snake(name)
    name = re.sub(r"[^a-z0-9_]", "_", name)
    name = re.sub(r"_+", "_", name)
    return name.strip("_")


def build_handler_name(operation_id: str) -> str:
    """Return the generated handler function name for an operation id."""
    name = _sanitize(operation_id) or "operation"
    return f"handle_{name}"


def deduplicate(names: list[str]) -> list[str]:
    """Make names unique by appending _2, _3, ... to repeats."""
    seen: dict[str, int] = {}
    taken = set(names)
    result = []
    for name in names:
        if name not in seen:
            seen[name] = 1
            result.append(name)
            continue
        count = seen[name]
        candidate = f"{name}_{count + 1}"
        while candidate in taken:
            count += 1
            candidate = f"{name}_{count + 1}"
        seen[name] = count + 1
        taken.add(candidate)
        result.append(candidate)
    return result
