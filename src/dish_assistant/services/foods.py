"""Food database lookups backing the Edamam routes."""

import logging
from dataclasses import dataclass, field

from dish_assistant.adapters.edamam_client import EdamamClient
from dish_assistant.domain.foods import (
    FoodDetails,
    FoodDetailsResult,
    IngredientSearchResult,
    parse_food_results,
)


@dataclass
class FoodDatabaseService:
    """Service for Edamam food search and nutrient details."""

    client: EdamamClient
    details_grams: float = 100
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__)
    )

    async def search(self, query: str, limit: int = 20) -> IngredientSearchResult:
        """Search foods by name."""
        try:
            payload = await self.client.parse(query, limit)
            foods = parse_food_results(payload)
        except Exception as exc:  # noqa: BLE001
            self.logger.error("Edamam search failed: query=%s error=%s", query, exc)
            return IngredientSearchResult(success=False, error=str(exc))
        return IngredientSearchResult(success=True, foods=foods)

    async def get_food_details(self, food_id: str) -> FoodDetailsResult:
        """Fetch nutrient totals for a single food."""
        try:
            payload = await self.client.nutrients(food_id, grams=self.details_grams)
            details = FoodDetails(
                nutrients=payload.get("totalNutrients") or {},
                calories=payload.get("calories"),
                weight=payload.get("totalWeight"),
            )
        except Exception as exc:  # noqa: BLE001
            self.logger.error(
                "Edamam food details failed: food_id=%s error=%s", food_id, exc
            )
            return FoodDetailsResult(success=False, error=str(exc))
        return FoodDetailsResult(success=True, details=details)
