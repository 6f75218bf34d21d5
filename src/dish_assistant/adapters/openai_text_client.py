"""OpenAI Responses API client for text generation."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from dish_assistant.domain.generation import GenerationResult
from dish_assistant.services.generation import TextGenerator


@dataclass
class OpenAITextClient(TextGenerator):
    """Text generator backed by the OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    temperature: float | None = None
    max_output_tokens: int | None = None

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> "OpenAITextClient":
        """Create an OpenAI text client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key),
            model=model,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )

    async def generate(
        self, *, instructions: str, messages: list[dict[str, str]]
    ) -> GenerationResult:
        """Call OpenAI and wrap the outcome in a GenerationResult."""
        request_payload: dict[str, object] = {
            "model": self.model,
            "instructions": instructions,
            "input": messages,
        }
        if self.temperature is not None:
            request_payload["temperature"] = self.temperature
        if self.max_output_tokens is not None:
            request_payload["max_output_tokens"] = self.max_output_tokens

        try:
            response = await self.client.responses.create(**request_payload)
            output_text = response.output_text
        except Exception as exc:  # noqa: BLE001
            return GenerationResult.failure(f"OpenAI API error: {exc}")
        if not output_text:
            return GenerationResult.failure("OpenAI returned an empty response")
        return GenerationResult.success(output_text)

    async def close(self) -> None:
        """Close the underlying OpenAI HTTP session."""
        await self.client.close()
