"""Recipe suggestion assistant backed by Edamam and a language model."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from dish_assistant.adapters.edamam_client import EdamamApiError, EdamamClient
from dish_assistant.domain.foods import (
    IngredientQuery,
    IngredientSearchResult,
    parse_food_results,
)
from dish_assistant.domain.suggestions import (
    FallbackReason,
    SuggestionRequest,
    SuggestionResult,
)
from dish_assistant.services.fallback import render_fallback_suggestion
from dish_assistant.services.generation import TextGenerator

CREDENTIALS_MISSING_ERROR = "Edamam API credentials missing"

SYSTEM_PROMPT = """\
You are a helpful cooking assistant that suggests recipes based on available \
ingredients.
Focus on practical, easy-to-follow recipes that use the ingredients provided.
Format your response in markdown with clear sections:
1. Recipe name (as a heading)
2. Brief description
3. Ingredients list (with quantities)
4. Step-by-step instructions
5. Cooking time and difficulty level

If the user has dietary preferences or restrictions, adapt your suggestions \
accordingly.
If the ingredients list is very limited, suggest simple recipes or recommend a \
few additional ingredients that would enable more options."""


@dataclass
class AssistantService:
    """Ingredient search and recipe suggestions for the AI helper.

    ``food_client`` and ``text_generator`` are ``None`` when their
    credentials are not configured.
    """

    food_client: EdamamClient | None
    text_generator: TextGenerator | None
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__)
    )

    async def search_ingredients(
        self, query: str, limit: int = 5
    ) -> IngredientSearchResult:
        """Search Edamam for ingredients; failures are returned, not raised."""
        if self.food_client is None:
            self.logger.error(CREDENTIALS_MISSING_ERROR)
            return IngredientSearchResult(
                success=False, error=CREDENTIALS_MISSING_ERROR
            )

        try:
            ingredient_query = IngredientQuery(query=query, limit=limit)
            self.logger.info(
                "Searching ingredients with Edamam: query=%s limit=%s",
                ingredient_query.query,
                ingredient_query.limit,
            )
            payload = await self.food_client.parse(
                ingredient_query.query, ingredient_query.limit
            )
            foods = parse_food_results(payload)
        except EdamamApiError as exc:
            self.logger.error(
                "Edamam API error: status=%s message=%s",
                exc.status_code,
                exc.upstream_message,
            )
            return IngredientSearchResult(success=False, error=str(exc))
        except Exception as exc:  # noqa: BLE001
            self.logger.error("Error searching ingredients: %s", exc)
            return IngredientSearchResult(success=False, error=str(exc))

        self.logger.info("Ingredients search successful: count=%s", len(foods))
        return IngredientSearchResult(success=True, foods=foods)

    async def get_recipe_suggestions(
        self, ingredients: Sequence[str], preferences: str = ""
    ) -> SuggestionResult:
        """Suggest recipes, falling back to a local template on any failure."""
        request = SuggestionRequest(
            ingredients=list(ingredients), preferences=preferences or ""
        )
        if self.text_generator is None:
            self.logger.warning("OpenAI API key missing, using fallback suggestion")
            return _fallback(request, "missing_credentials")

        self.logger.info(
            "Getting recipe suggestions: ingredients=%s has_preferences=%s",
            len(request.ingredients),
            request.has_preferences,
        )
        try:
            result = await self.text_generator.generate(
                instructions=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": build_user_message(request)}],
            )
        except Exception as exc:  # noqa: BLE001
            self.logger.error(
                "Recipe suggestion failed, using fallback suggestion: %s", exc
            )
            return _fallback(request, "upstream_error")
        if not result.ok:
            self.logger.error(
                "Recipe suggestion failed, using fallback suggestion: %s",
                result.error,
            )
            return _fallback(request, "upstream_error")

        suggestion = result.text or ""
        self.logger.info(
            "Recipe suggestion generated: response_length=%s", len(suggestion)
        )
        return SuggestionResult(success=True, suggestion=suggestion, source="model")


def build_user_message(request: SuggestionRequest) -> str:
    """Build the user prompt from ingredients and optional preferences."""
    parts = [f"I have these ingredients: {', '.join(request.ingredients)}."]
    if request.has_preferences:
        parts.append(f"My preferences: {request.preferences}.")
    parts.append("What can I cook?")
    return " ".join(parts)


def _fallback(request: SuggestionRequest, reason: FallbackReason) -> SuggestionResult:
    return SuggestionResult(
        success=True,
        suggestion=render_fallback_suggestion(request.ingredients, request.preferences),
        source="fallback",
        fallback_reason=reason,
    )
