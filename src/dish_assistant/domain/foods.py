"""Food database domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IngredientQuery:
    """Ingredient search request."""

    query: str
    limit: int = 5

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be a positive integer")


@dataclass(frozen=True)
class FoodResult:
    """Normalized food match from the Edamam parser."""

    food_id: str
    label: str
    category: str | None
    image: str | None
    nutrients: dict[str, float]

    def to_payload(self) -> dict[str, object]:
        """Return the wire representation used by the HTTP API."""
        return {
            "foodId": self.food_id,
            "label": self.label,
            "category": self.category,
            "image": self.image,
            "nutrients": self.nutrients,
        }


@dataclass(frozen=True)
class IngredientSearchResult:
    """Outcome of an ingredient search."""

    success: bool
    foods: list[FoodResult] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class FoodDetails:
    """Nutrient totals for a 100 g portion of a food."""

    nutrients: dict[str, object]
    calories: float | None
    weight: float | None


@dataclass(frozen=True)
class FoodDetailsResult:
    """Outcome of a food details lookup."""

    success: bool
    details: FoodDetails | None = None
    error: str | None = None


def parse_food_results(payload: dict[str, object]) -> list[FoodResult]:
    """Map an Edamam parser payload into food results, keeping upstream order."""
    parsed = payload.get("parsed") or []
    foods: list[FoodResult] = []
    for item in parsed:
        food = item["food"]
        foods.append(
            FoodResult(
                food_id=food["foodId"],
                label=food["label"],
                category=food.get("category"),
                image=food.get("image"),
                nutrients=food.get("nutrients") or {},
            )
        )
    return foods
