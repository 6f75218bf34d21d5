"""Models for recipe suggestions."""

from dataclasses import dataclass
from typing import Literal

SuggestionSource = Literal["model", "fallback"]
FallbackReason = Literal["missing_credentials", "upstream_error"]


@dataclass(frozen=True)
class SuggestionRequest:
    """Ingredients and free-text preferences for a suggestion."""

    ingredients: list[str]
    preferences: str = ""

    @property
    def has_preferences(self) -> bool:
        return bool(self.preferences.strip())


@dataclass(frozen=True)
class SuggestionResult:
    """Recipe suggestion returned to callers.

    ``source`` and ``fallback_reason`` are for diagnostics only; the HTTP
    payload exposes just ``success`` and ``suggestion``.
    """

    success: bool
    suggestion: str
    source: SuggestionSource
    fallback_reason: FallbackReason | None = None
