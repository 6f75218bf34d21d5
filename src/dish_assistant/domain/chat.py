"""Domain models for the AI chat."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import UUID

ChatRole = Literal["user", "assistant"]


@dataclass(frozen=True)
class ChatSession:
    """A persisted chat session owned by a user."""

    id: UUID
    user_id: UUID
    title: str
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class ChatMessage:
    """A single message within a chat session."""

    id: UUID
    session_id: UUID
    role: ChatRole
    content: str
    metadata: dict[str, object] = field(default_factory=dict)
    created_at: datetime | None = None


@dataclass(frozen=True)
class ChatReply:
    """Outcome of generating an assistant reply."""

    success: bool
    user_message: ChatMessage | None = None
    ai_message: ChatMessage | None = None
    error: str | None = None


@dataclass(frozen=True)
class ChatStats:
    """Aggregate chat usage numbers for admins."""

    total_sessions: int
    total_messages: int
    active_users: int
    recent_sessions: int
    generated_at: datetime
