"""Supabase-backed chat repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from dish_assistant.domain.chat import ChatMessage, ChatRole, ChatSession
from dish_assistant.services.admin import ChatStatsRepository
from dish_assistant.services.chat import ChatRepository

_SESSION_COLUMNS = "id, user_id, title, created_at, updated_at"
_MESSAGE_COLUMNS = "id, session_id, role, content, metadata, created_at"


@dataclass
class SupabaseChatRepository(ChatRepository, ChatStatsRepository):
    """Supabase implementation for AI chat sessions and messages."""

    client: Client

    def list_sessions(self, user_id: UUID) -> list[ChatSession]:
        """Return a user's sessions ordered by last update."""
        response = (
            self.client.table("ai_chat_sessions")
            .select(_SESSION_COLUMNS)
            .eq("user_id", str(user_id))
            .order("updated_at", desc=True)
            .execute()
        )
        return [_to_session(row) for row in response.data or []]

    def create_session(self, user_id: UUID, title: str) -> ChatSession:
        """Create a session row and return it."""
        response = (
            self.client.table("ai_chat_sessions")
            .insert({"user_id": str(user_id), "title": title})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create chat session")
        return _to_session(response.data[0])

    def get_session(self, session_id: UUID, user_id: UUID) -> ChatSession | None:
        """Return a session owned by the user, if present."""
        response = (
            self.client.table("ai_chat_sessions")
            .select(_SESSION_COLUMNS)
            .eq("id", str(session_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_session(response.data[0])

    def update_session_title(self, session_id: UUID, title: str) -> ChatSession:
        """Rename a session."""
        response = (
            self.client.table("ai_chat_sessions")
            .update({"title": title, "updated_at": _now_iso()})
            .eq("id", str(session_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update chat session")
        return _to_session(response.data[0])

    def delete_session(self, session_id: UUID) -> None:
        """Delete a session together with its messages."""
        self.client.table("ai_chat_messages").delete().eq(
            "session_id", str(session_id)
        ).execute()
        self.client.table("ai_chat_sessions").delete().eq(
            "id", str(session_id)
        ).execute()

    def touch_session(self, session_id: UUID) -> None:
        """Bump updated_at on a session."""
        self.client.table("ai_chat_sessions").update({"updated_at": _now_iso()}).eq(
            "id", str(session_id)
        ).execute()

    def list_messages(self, session_id: UUID) -> list[ChatMessage]:
        """Return messages for a session, oldest first."""
        response = (
            self.client.table("ai_chat_messages")
            .select(_MESSAGE_COLUMNS)
            .eq("session_id", str(session_id))
            .order("created_at")
            .execute()
        )
        return [_to_message(row) for row in response.data or []]

    def add_message(
        self,
        session_id: UUID,
        role: ChatRole,
        content: str,
        metadata: dict[str, object],
    ) -> ChatMessage:
        """Insert a message row and return it."""
        response = (
            self.client.table("ai_chat_messages")
            .insert(
                {
                    "session_id": str(session_id),
                    "role": role,
                    "content": content,
                    "metadata": metadata,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to add chat message")
        return _to_message(response.data[0])

    def count_sessions(self, since: datetime | None = None) -> int:
        """Count sessions, optionally created on or after a moment."""
        query = self.client.table("ai_chat_sessions").select("id", count="exact")
        if since is not None:
            query = query.gte("created_at", since.isoformat())
        response = query.limit(1).execute()
        return response.count or 0

    def count_messages(self) -> int:
        """Count all chat messages."""
        response = (
            self.client.table("ai_chat_messages")
            .select("id", count="exact")
            .limit(1)
            .execute()
        )
        return response.count or 0

    def list_session_owner_ids(self) -> list[UUID]:
        """Return the owner of every session."""
        response = self.client.table("ai_chat_sessions").select("user_id").execute()
        return [UUID(row["user_id"]) for row in response.data or []]


def _now_iso() -> str:
    return datetime.now(tz=UTC).isoformat()


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def _to_session(row: dict[str, object]) -> ChatSession:
    return ChatSession(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title") or ""),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _to_message(row: dict[str, object]) -> ChatMessage:
    return ChatMessage(
        id=UUID(str(row["id"])),
        session_id=UUID(str(row["session_id"])),
        role="assistant" if row.get("role") == "assistant" else "user",
        content=str(row.get("content") or ""),
        metadata=row.get("metadata") or {},
        created_at=_parse_timestamp(row.get("created_at")),
    )
