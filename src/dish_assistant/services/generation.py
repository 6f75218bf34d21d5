"""Text generation interface shared by the assistant and chat services."""

from typing import Protocol

from dish_assistant.domain.generation import GenerationResult


class TextGenerator(Protocol):
    """Interface for LLM text generation.

    Implementations report failures through the returned value instead of
    raising.
    """

    async def generate(
        self, *, instructions: str, messages: list[dict[str, str]]
    ) -> GenerationResult:
        """Return generated text for a system instruction and message list."""
