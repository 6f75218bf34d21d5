"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from dish_assistant.adapters.edamam_client import HttpxEdamamClient
from dish_assistant.adapters.openai_text_client import OpenAITextClient
from dish_assistant.adapters.supabase_chat_repository import SupabaseChatRepository
from dish_assistant.config import Settings
from dish_assistant.services.admin import AdminService
from dish_assistant.services.assistant import AssistantService
from dish_assistant.services.chat import ChatService
from dish_assistant.services.foods import FoodDatabaseService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    assistant_service: AssistantService
    food_database_service: FoodDatabaseService | None
    chat_service: ChatService
    admin_service: AdminService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    chat_repository = SupabaseChatRepository(supabase_client)

    edamam_client: HttpxEdamamClient | None = None
    if resolved_settings.has_edamam_credentials:
        edamam_client = HttpxEdamamClient.create(
            app_id=resolved_settings.edamam_app_id or "",
            app_key=resolved_settings.edamam_app_key or "",
            base_url=resolved_settings.edamam_base_url,
            timeout=resolved_settings.edamam_timeout_seconds,
        )

    text_client: OpenAITextClient | None = None
    if resolved_settings.has_openai_credentials:
        text_client = OpenAITextClient.create(
            api_key=resolved_settings.openai_api_key or "",
            model=resolved_settings.openai_model,
            temperature=resolved_settings.openai_temperature,
            max_output_tokens=resolved_settings.openai_max_output_tokens,
        )

    assistant_service = AssistantService(
        food_client=edamam_client,
        text_generator=text_client,
    )
    food_database_service = (
        FoodDatabaseService(client=edamam_client) if edamam_client else None
    )
    chat_service = ChatService(
        repository=chat_repository,
        text_generator=text_client,
    )
    admin_service = AdminService(stats_repository=chat_repository)

    async def close_resources() -> None:
        if edamam_client is not None:
            await edamam_client.close()
        if text_client is not None:
            await text_client.close()

    return AppContainer(
        settings=resolved_settings,
        assistant_service=assistant_service,
        food_database_service=food_database_service,
        chat_service=chat_service,
        admin_service=admin_service,
        close_resources=close_resources,
    )
