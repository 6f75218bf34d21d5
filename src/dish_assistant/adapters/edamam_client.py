"""Edamam Food Database API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_GRAM_MEASURE_URI = "http://www.edamam.com/ontologies/edamam.owl#Measure_gram"


class EdamamApiError(Exception):
    """Raised when Edamam answers with a non-success status."""

    def __init__(self, status_code: int, message: str | None) -> None:
        self.status_code = status_code
        self.upstream_message = message
        super().__init__(f"Edamam API error: {message or 'Unknown error'}")


class EdamamClient(Protocol):
    """Interface for Edamam food database interactions."""

    async def parse(self, ingredient: str, limit: int) -> dict[str, object]:
        """Search foods matching an ingredient string and return raw API data."""

    async def nutrients(self, food_id: str, grams: float = 100) -> dict[str, object]:
        """Fetch nutrient totals for a food and return raw API data."""


@dataclass
class HttpxEdamamClient(EdamamClient):
    """HTTPX-backed Edamam client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, app_id: str, app_key: str, base_url: str, timeout: float = 15.0
    ) -> "HttpxEdamamClient":
        """Create an Edamam client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(timeout=timeout),
        )

    async def parse(self, ingredient: str, limit: int) -> dict[str, object]:
        """Search the food database parser endpoint."""
        response = await self.http_client.get(
            f"{self.base_url}/parser",
            params={
                "app_id": self.app_id,
                "app_key": self.app_key,
                "ingr": ingredient,
                "limit": limit,
            },
        )
        return _json_or_raise(response)

    async def nutrients(self, food_id: str, grams: float = 100) -> dict[str, object]:
        """Request nutrient totals for a gram quantity of a food."""
        response = await self.http_client.post(
            f"{self.base_url}/nutrients",
            params={"app_id": self.app_id, "app_key": self.app_key},
            json={
                "ingredients": [
                    {
                        "quantity": grams,
                        "measureURI": _GRAM_MEASURE_URI,
                        "foodId": food_id,
                    }
                ]
            },
        )
        return _json_or_raise(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _json_or_raise(response: httpx.Response) -> dict[str, object]:
    """Return the JSON body, raising EdamamApiError for error statuses."""
    if response.is_success:
        return response.json()
    try:
        body = response.json()
    except ValueError:
        body = None
    message = body.get("message") if isinstance(body, dict) else None
    raise EdamamApiError(response.status_code, message)
