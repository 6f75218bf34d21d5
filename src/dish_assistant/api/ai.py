"""Ingredient search and recipe suggestion endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from dish_assistant.api.dependencies import (
    error_response,
    get_container,
    require_user_id,
)
from dish_assistant.api.schemas import (  # noqa: TC001
    RecipeSuggestionsRequest,
    SearchIngredientsRequest,
)

router = APIRouter(
    prefix="/api/ai", tags=["ai"], dependencies=[Depends(require_user_id)]
)


@router.post("/search-ingredients", response_model=None)
async def search_ingredients(
    body: SearchIngredientsRequest, request: Request
) -> dict[str, object] | JSONResponse:
    """Search ingredients in the food database."""
    container = get_container(request)
    result = await container.assistant_service.search_ingredients(
        body.query, body.limit
    )
    if not result.success:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            result.error or "Unknown error",
            "Не вдалося знайти інгредієнти",
        )
    return {
        "success": True,
        "foods": [food.to_payload() for food in result.foods],
        "query": body.query,
    }


@router.post("/recipe-suggestions")
async def recipe_suggestions(
    body: RecipeSuggestionsRequest, request: Request
) -> dict[str, object]:
    """Suggest recipes for the given ingredients."""
    container = get_container(request)
    result = await container.assistant_service.get_recipe_suggestions(
        body.ingredients, body.preferences or ""
    )
    return {"success": result.success, "suggestion": result.suggestion}
