"""Food database endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from dish_assistant.api.dependencies import error_response, get_container

router = APIRouter(prefix="/api/edamam", tags=["edamam"])

_SERVICE_UNAVAILABLE = "Edamam service not available"


@router.get("/search", response_model=None)
async def search_foods(
    request: Request,
    query: str = Query(min_length=1),
    limit: int = Query(default=20, ge=1, le=50),
) -> dict[str, object] | JSONResponse:
    """Search foods by name."""
    service = get_container(request).food_database_service
    if service is None:
        return error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            _SERVICE_UNAVAILABLE,
            "Сервіс пошуку інгредієнтів тимчасово недоступний",
        )
    result = await service.search(query, limit)
    if not result.success:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            result.error or "Unknown error",
            "Не вдалося знайти інгредієнти",
        )
    return {
        "success": True,
        "foods": [food.to_payload() for food in result.foods],
        "query": query,
    }


@router.get("/food/{food_id}", response_model=None)
async def food_details(
    food_id: str, request: Request
) -> dict[str, object] | JSONResponse:
    """Return nutrient totals for 100 g of a food."""
    service = get_container(request).food_database_service
    if service is None:
        return error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            _SERVICE_UNAVAILABLE,
            "Сервіс інформації про інгредієнти тимчасово недоступний",
        )
    result = await service.get_food_details(food_id)
    if not result.success or result.details is None:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            result.error or "Unknown error",
            "Не вдалося отримати інформацію про інгредієнт",
        )
    return {
        "success": True,
        "nutrients": result.details.nutrients,
        "calories": result.details.calories,
        "weight": result.details.weight,
    }
