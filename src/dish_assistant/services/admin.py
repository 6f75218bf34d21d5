"""Admin service for AI chat reporting."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from dish_assistant.domain.chat import ChatStats


class ChatStatsRepository(Protocol):
    """Persistence interface for chat statistics."""

    def count_sessions(self, since: datetime | None = None) -> int:
        """Count sessions, optionally only those created since a moment."""

    def count_messages(self) -> int:
        """Count all chat messages."""

    def list_session_owner_ids(self) -> list[UUID]:
        """Return the owner id of every session."""


@dataclass
class AdminService:
    """Service for admin dashboards."""

    stats_repository: ChatStatsRepository
    recent_window_days: int = 7

    def ai_chat_stats(self) -> ChatStats:
        """Return aggregate AI chat usage."""
        now = datetime.now(tz=UTC)
        return ChatStats(
            total_sessions=self.stats_repository.count_sessions(),
            total_messages=self.stats_repository.count_messages(),
            active_users=len(set(self.stats_repository.list_session_owner_ids())),
            recent_sessions=self.stats_repository.count_sessions(
                since=now - timedelta(days=self.recent_window_days)
            ),
            generated_at=now,
        )
