"""Pydantic models for API request bodies."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from dish_assistant.domain.chat import ChatRole


class SearchIngredientsRequest(BaseModel):
    """Ingredient search body."""

    query: str = Field(min_length=1)
    limit: int = Field(default=5, ge=1, le=20)


class RecipeSuggestionsRequest(BaseModel):
    """Recipe suggestion body."""

    ingredients: list[str] = Field(min_length=1)
    preferences: str | None = None


class CreateSessionRequest(BaseModel):
    """Chat session creation body."""

    title: str | None = None


class UpdateSessionRequest(BaseModel):
    """Chat session update body."""

    title: str | None = None


class AddMessageRequest(BaseModel):
    """Chat message body."""

    content: str
    role: ChatRole = "user"
    metadata: dict[str, object] = Field(default_factory=dict)


class PreviousMessage(BaseModel):
    """Prior chat turn sent as context."""

    role: ChatRole
    content: str


class GenerateResponseRequest(BaseModel):
    """Assistant reply generation body."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: UUID = Field(alias="sessionId")
    user_message: str = Field(alias="userMessage")
    previous_messages: list[PreviousMessage] = Field(
        default_factory=list, alias="previousMessages"
    )
