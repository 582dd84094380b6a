"""Keyword router for the web chat.

Turns a free-text chat line into at most one tool call. There is no
language model behind it: a handful of patterns map onto a handful of
BitBadges tools, and anything else gets the help text.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel

from .config import CONFIGURE_TOOL_NAME
from .relay import McpProcessManager
from .sessions import SessionStore, ToolCall

STATUS_TOOL = "bitbadges_getStatus"
SEARCH_TOOL = "bitbadges_searchClaims"
ACCOUNT_TOOL = "bitbadges_getAccount"
COLLECTION_TOOL = "bitbadges_getCollection"

API_KEY_PROMPT = (
    "🔑 Please configure your API key first using the setup form above or by typing: "
    '"configure api key YOUR_API_KEY"'
)

HELP_TEXT = """I can help you interact with BitBadges! Try these commands:

📊 **Status & Search:**
- "status" - Check API health
- "search QUERY" - Search claims

👤 **Accounts:**
- "account bb1..." - Look up by address
- "account username USERNAME" - Look up by username

🏆 **Collections:**
- "collection 1" - Get collection info

Or use the tool interface below to make direct API calls!"""

_API_KEY = re.compile(r"api[_\s]?key[:\s]+([a-zA-Z0-9\-_]+)", re.IGNORECASE)
_SEARCH = re.compile(r"search[:\s]+(.+)", re.IGNORECASE)
_ADDRESS = re.compile(r"bb1[a-z0-9]+", re.IGNORECASE)
_USERNAME = re.compile(r"username[:\s]+([a-zA-Z0-9_]+)", re.IGNORECASE)
_COLLECTION = re.compile(r"collection[:\s]+(\d+)", re.IGNORECASE)


class ChatReply(BaseModel):
    content: str
    tool_call: Optional[ToolCall] = None


async def _call(
    relay: McpProcessManager,
    api_key: str | None,
    name: str,
    arguments: dict[str, Any],
    content: str,
) -> ChatReply:
    result = await relay.call_tool_with_api_key(name, arguments, api_key)
    return ChatReply(content=content, tool_call=ToolCall(name=name, arguments=arguments, result=result))


async def process_user_message(
    message: str,
    connection_id: str,
    relay: McpProcessManager,
    sessions: SessionStore,
) -> ChatReply:
    """Route one chat line; relay errors propagate to the caller."""
    api_key = sessions.api_key(connection_id)
    lower = message.lower()

    if "configure" in lower and "api key" in lower:
        match = _API_KEY.search(message)
        if not match:
            return ChatReply(content='Please provide your API key in the format: "configure api key YOUR_API_KEY"')
        api_key = match.group(1)
        sessions.set_api_key(connection_id, api_key)
        result = await relay.configure(api_key)
        return ChatReply(
            content="API key configured successfully! You can now use BitBadges tools.",
            # The key itself never goes back into the transcript.
            tool_call=ToolCall(name=CONFIGURE_TOOL_NAME, arguments={"apiKey": "***"}, result=result),
        )

    if not api_key:
        return ChatReply(content=API_KEY_PROMPT)

    if "status" in lower or "health" in lower:
        return await _call(relay, api_key, STATUS_TOOL, {}, "Fetched BitBadges API status.")

    if "search" in lower:
        match = _SEARCH.search(message)
        if not match:
            return ChatReply(content='Please specify what to search for: "search YOUR_QUERY"')
        search_value = match.group(1).strip()
        return await _call(
            relay, api_key, SEARCH_TOOL, {"searchValue": search_value}, f'Searched for "{search_value}"'
        )

    if "account" in lower or "user" in lower:
        address = _ADDRESS.search(message)
        if address:
            return await _call(
                relay, api_key, ACCOUNT_TOOL, {"address": address.group(0)},
                f"Fetched account information for {address.group(0)}",
            )
        username = _USERNAME.search(message)
        if username:
            return await _call(
                relay, api_key, ACCOUNT_TOOL, {"username": username.group(1)},
                f"Fetched account information for username: {username.group(1)}",
            )
        return ChatReply(content="Please provide an address (bb1...) or username to look up an account.")

    if "collection" in lower:
        match = _COLLECTION.search(message)
        if not match:
            return ChatReply(content='Please specify a collection ID: "collection 1"')
        collection_id = match.group(1)
        return await _call(
            relay, api_key, COLLECTION_TOOL, {"collectionId": collection_id},
            f"Fetched information for collection {collection_id}",
        )

    return ChatReply(content=HELP_TEXT)
