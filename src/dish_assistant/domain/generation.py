"""Result type for text generation calls."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationResult:
    """Either generated text or the reason generation failed."""

    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def success(cls, text: str) -> "GenerationResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: str) -> "GenerationResult":
        return cls(error=error)
