"""Per-connection chat transcripts and API keys, held in memory."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolCall(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)
    result: Optional[Any] = None
    error: Optional[str] = None


class ChatMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    type: Literal["user", "assistant", "system"]
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    tool_call: Optional[ToolCall] = Field(default=None, alias="toolCall")

    def to_event(self) -> dict[str, Any]:
        """JSON payload sent to the browser."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SessionStore:
    """Chat history and API key per connection id."""

    def __init__(self) -> None:
        self._chats: dict[str, list[ChatMessage]] = {}
        self._api_keys: dict[str, str] = {}

    def open(self, connection_id: str) -> None:
        self._chats[connection_id] = []

    def close(self, connection_id: str) -> None:
        self._chats.pop(connection_id, None)
        self._api_keys.pop(connection_id, None)

    def __contains__(self, connection_id: str) -> bool:
        return connection_id in self._chats

    def __len__(self) -> int:
        return len(self._chats)

    def history(self, connection_id: str) -> list[ChatMessage]:
        return list(self._chats.get(connection_id, []))

    def append(self, connection_id: str, message: ChatMessage) -> ChatMessage:
        self._chats.setdefault(connection_id, []).append(message)
        return message

    def api_key(self, connection_id: str) -> str | None:
        return self._api_keys.get(connection_id)

    def set_api_key(self, connection_id: str, api_key: str) -> None:
        self._api_keys[connection_id] = api_key

    def has_api_key(self, connection_id: str) -> bool:
        return connection_id in self._api_keys
