"""AI cooking chat with persisted sessions."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from dish_assistant.domain.chat import ChatMessage, ChatReply, ChatRole, ChatSession
from dish_assistant.services.generation import TextGenerator

DEFAULT_SESSION_TITLE = "New Chat"
AI_UNAVAILABLE_ERROR = "AI service not available"
GENERATION_FAILED_ERROR = "AI response generation failed"
GENERATION_FAILED_REPLY = (
    "На жаль, сталася помилка при генерації відповіді. Спробуйте ще раз пізніше."
)

CHAT_INSTRUCTIONS = """\
Ти корисний асистент, який допомагає користувачам з питаннями про кулінарію, \
страви та інгредієнти.
Ти можеш надавати поради щодо приготування, пропонувати страви на основі \
наявних інгредієнтів, пояснювати кулінарні техніки та відповідати на загальні \
питання.
Форматуй свої відповіді у markdown для кращої читабельності.
Будь дружнім, корисним та інформативним."""


class ChatRepository(Protocol):
    """Persistence interface for chat sessions and messages."""

    def list_sessions(self, user_id: UUID) -> list[ChatSession]:
        """Return a user's sessions, most recently updated first."""

    def create_session(self, user_id: UUID, title: str) -> ChatSession:
        """Create a session and return it."""

    def get_session(self, session_id: UUID, user_id: UUID) -> ChatSession | None:
        """Return a session if it exists and belongs to the user."""

    def update_session_title(self, session_id: UUID, title: str) -> ChatSession:
        """Rename a session and return the updated row."""

    def delete_session(self, session_id: UUID) -> None:
        """Delete a session and its messages."""

    def touch_session(self, session_id: UUID) -> None:
        """Bump a session's updated_at timestamp."""

    def list_messages(self, session_id: UUID) -> list[ChatMessage]:
        """Return messages for a session in creation order."""

    def add_message(
        self,
        session_id: UUID,
        role: ChatRole,
        content: str,
        metadata: dict[str, object],
    ) -> ChatMessage:
        """Store a message and return it."""


@dataclass
class ChatService:
    """Service for chat sessions and assistant replies."""

    repository: ChatRepository
    text_generator: TextGenerator | None
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__)
    )

    def list_sessions(self, user_id: UUID) -> list[ChatSession]:
        return self.repository.list_sessions(user_id)

    def create_session(self, user_id: UUID, title: str | None = None) -> ChatSession:
        return self.repository.create_session(user_id, title or DEFAULT_SESSION_TITLE)

    def rename_session(
        self, session_id: UUID, user_id: UUID, title: str | None
    ) -> ChatSession | None:
        """Rename an owned session; returns None when it is not accessible."""
        session = self.repository.get_session(session_id, user_id)
        if session is None:
            return None
        if title is None:
            return session
        return self.repository.update_session_title(session_id, title)

    def delete_session(self, session_id: UUID, user_id: UUID) -> bool:
        """Delete an owned session; returns False when it is not accessible."""
        if self.repository.get_session(session_id, user_id) is None:
            return False
        self.repository.delete_session(session_id)
        return True

    def get_messages(
        self, session_id: UUID, user_id: UUID
    ) -> tuple[ChatSession, list[ChatMessage]] | None:
        session = self.repository.get_session(session_id, user_id)
        if session is None:
            return None
        return session, self.repository.list_messages(session_id)

    def add_message(
        self,
        session_id: UUID,
        user_id: UUID,
        content: str,
        role: ChatRole = "user",
        metadata: dict[str, object] | None = None,
    ) -> ChatMessage | None:
        """Append a message to an owned session."""
        if self.repository.get_session(session_id, user_id) is None:
            return None
        message = self.repository.add_message(
            session_id, role, content, metadata or {}
        )
        self.repository.touch_session(session_id)
        return message

    async def generate_response(
        self,
        session_id: UUID,
        user_id: UUID,
        user_message: str,
        previous_messages: list[dict[str, str]] | None = None,
    ) -> ChatReply | None:
        """Store the user's message and the assistant's reply.

        Returns None when the session is not accessible to the user.
        """
        if self.repository.get_session(session_id, user_id) is None:
            return None
        if self.text_generator is None:
            self.logger.error("Chat reply requested but OpenAI API key is missing")
            return ChatReply(success=False, error=AI_UNAVAILABLE_ERROR)

        saved_user_message = self.repository.add_message(
            session_id, "user", user_message, {}
        )
        history = [
            {
                "role": _normalize_role(message.get("role")),
                "content": message.get("content", ""),
            }
            for message in previous_messages or []
        ]
        history.append({"role": "user", "content": user_message})

        result = await self.text_generator.generate(
            instructions=CHAT_INSTRUCTIONS, messages=history
        )
        if not result.ok:
            self.logger.error(
                "AI response generation error: session_id=%s error=%s",
                session_id,
                result.error,
            )
            error_message: ChatMessage | None
            try:
                error_message = self.repository.add_message(
                    session_id, "assistant", GENERATION_FAILED_REPLY, {"error": True}
                )
            except Exception as exc:  # noqa: BLE001
                self.logger.error(
                    "Error saving AI error response: session_id=%s error=%s",
                    session_id,
                    exc,
                )
                error_message = None
            return ChatReply(
                success=False,
                user_message=saved_user_message,
                ai_message=error_message,
                error=GENERATION_FAILED_ERROR,
            )

        ai_message = self.repository.add_message(
            session_id, "assistant", result.text or "", {}
        )
        self.repository.touch_session(session_id)
        return ChatReply(
            success=True, user_message=saved_user_message, ai_message=ai_message
        )


def _normalize_role(role: str | None) -> ChatRole:
    return "assistant" if role == "assistant" else "user"
