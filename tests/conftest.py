"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from dish_assistant.adapters.edamam_client import EdamamClient
from dish_assistant.config import Settings
from dish_assistant.containers import AppContainer
from dish_assistant.domain.chat import ChatMessage, ChatRole, ChatSession
from dish_assistant.domain.generation import GenerationResult
from dish_assistant.services.admin import AdminService, ChatStatsRepository
from dish_assistant.services.assistant import AssistantService
from dish_assistant.services.chat import ChatRepository, ChatService
from dish_assistant.services.foods import FoodDatabaseService
from dish_assistant.services.generation import TextGenerator

USER_ID = UUID("6f1c1d2e-3a4b-4c5d-8e9f-0a1b2c3d4e5f")
OTHER_USER_ID = UUID("0b9e8d7c-6b5a-4f3e-9d2c-1b0a9f8e7d6c")


@dataclass
class FakeEdamamClient(EdamamClient):
    """Fake Edamam client with in-memory responses."""

    parse_payload: dict[str, object] = field(
        default_factory=lambda: {
            "text": "tomato",
            "parsed": [
                {
                    "food": {
                        "foodId": "food_tomato",
                        "label": "Tomato",
                        "category": "Generic foods",
                        "image": "https://example.test/tomato.jpg",
                        "nutrients": {"ENERC_KCAL": 18.0, "PROCNT": 0.88},
                    }
                }
            ],
        }
    )
    nutrients_payload: dict[str, object] = field(
        default_factory=lambda: {
            "calories": 18,
            "totalWeight": 100.0,
            "totalNutrients": {
                "ENERC_KCAL": {"label": "Energy", "quantity": 18.0, "unit": "kcal"}
            },
        }
    )
    error: Exception | None = None
    parse_calls: list[tuple[str, int]] = field(default_factory=list)
    nutrients_calls: list[tuple[str, float]] = field(default_factory=list)

    async def parse(self, ingredient: str, limit: int) -> dict[str, object]:
        self.parse_calls.append((ingredient, limit))
        if self.error is not None:
            raise self.error
        return self.parse_payload

    async def nutrients(self, food_id: str, grams: float = 100) -> dict[str, object]:
        self.nutrients_calls.append((food_id, grams))
        if self.error is not None:
            raise self.error
        return self.nutrients_payload


@dataclass
class FakeTextGenerator(TextGenerator):
    """Fake text generator returning a fixed result and recording prompts."""

    result: GenerationResult = field(
        default_factory=lambda: GenerationResult.success("# Tomato rice\n\nCook it.")
    )
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(
        self, *, instructions: str, messages: list[dict[str, str]]
    ) -> GenerationResult:
        self.calls.append({"instructions": instructions, "messages": messages})
        return self.result


@dataclass
class InMemoryChatRepository(ChatRepository, ChatStatsRepository):
    """In-memory chat repository for tests."""

    sessions: dict[UUID, ChatSession] = field(default_factory=dict)
    messages: list[ChatMessage] = field(default_factory=list)
    touched: list[UUID] = field(default_factory=list)
    _clock: datetime = field(
        default_factory=lambda: datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
    )

    def _tick(self) -> datetime:
        self._clock = self._clock + timedelta(seconds=1)
        return self._clock

    def list_sessions(self, user_id: UUID) -> list[ChatSession]:
        owned = [s for s in self.sessions.values() if s.user_id == user_id]
        return sorted(owned, key=lambda s: s.updated_at, reverse=True)

    def create_session(self, user_id: UUID, title: str) -> ChatSession:
        now = self._tick()
        session = ChatSession(
            id=uuid4(), user_id=user_id, title=title, created_at=now, updated_at=now
        )
        self.sessions[session.id] = session
        return session

    def get_session(self, session_id: UUID, user_id: UUID) -> ChatSession | None:
        session = self.sessions.get(session_id)
        if session is None or session.user_id != user_id:
            return None
        return session

    def update_session_title(self, session_id: UUID, title: str) -> ChatSession:
        current = self.sessions[session_id]
        updated = ChatSession(
            id=current.id,
            user_id=current.user_id,
            title=title,
            created_at=current.created_at,
            updated_at=self._tick(),
        )
        self.sessions[session_id] = updated
        return updated

    def delete_session(self, session_id: UUID) -> None:
        self.sessions.pop(session_id, None)
        self.messages = [m for m in self.messages if m.session_id != session_id]

    def touch_session(self, session_id: UUID) -> None:
        self.touched.append(session_id)
        current = self.sessions[session_id]
        self.sessions[session_id] = ChatSession(
            id=current.id,
            user_id=current.user_id,
            title=current.title,
            created_at=current.created_at,
            updated_at=self._tick(),
        )

    def list_messages(self, session_id: UUID) -> list[ChatMessage]:
        return [m for m in self.messages if m.session_id == session_id]

    def add_message(
        self,
        session_id: UUID,
        role: ChatRole,
        content: str,
        metadata: dict[str, object],
    ) -> ChatMessage:
        message = ChatMessage(
            id=uuid4(),
            session_id=session_id,
            role=role,
            content=content,
            metadata=metadata,
            created_at=self._tick(),
        )
        self.messages.append(message)
        return message

    def count_sessions(self, since: datetime | None = None) -> int:
        return sum(
            1
            for s in self.sessions.values()
            if since is None or (s.created_at is not None and s.created_at >= since)
        )

    def count_messages(self) -> int:
        return len(self.messages)

    def list_session_owner_ids(self) -> list[UUID]:
        return [s.user_id for s in self.sessions.values()]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        admin_token="admin-token",
        openai_api_key="openai-key",
        edamam_app_id="app-id",
        edamam_app_key="app-key",
    )


@pytest.fixture
def edamam_client() -> FakeEdamamClient:
    return FakeEdamamClient()


@pytest.fixture
def text_generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def chat_repository() -> InMemoryChatRepository:
    return InMemoryChatRepository()


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"X-User-Id": str(USER_ID)}


@pytest.fixture
def container(
    settings: Settings,
    edamam_client: FakeEdamamClient,
    text_generator: FakeTextGenerator,
    chat_repository: InMemoryChatRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        assistant_service=AssistantService(
            food_client=edamam_client, text_generator=text_generator
        ),
        food_database_service=FoodDatabaseService(client=edamam_client),
        chat_service=ChatService(
            repository=chat_repository, text_generator=text_generator
        ),
        admin_service=AdminService(stats_repository=chat_repository),
        close_resources=close_resources,
    )
