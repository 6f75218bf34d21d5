"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from dish_assistant.adapters.edamam_client import EdamamApiError, HttpxEdamamClient
from dish_assistant.adapters.openai_text_client import OpenAITextClient


class _FakeResponses:
    def __init__(self, output_text: str = "# Soup") -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str = "# Soup") -> None:
        self.responses = _FakeResponses(output_text)


class _FailingResponses:
    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        raise ValueError("rate limited")


class _FailingOpenAI:
    def __init__(self) -> None:
        self.responses = _FailingResponses()


def _edamam_client(handler) -> HttpxEdamamClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxEdamamClient(
        app_id="app-id",
        app_key="app-key",
        base_url="https://api.test/food-database/v2",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_edamam_parse_sends_credentials_and_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"parsed": []})

    client = _edamam_client(handler)

    payload = asyncio.run(client.parse("green tomato", 5))

    assert payload == {"parsed": []}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/food-database/v2/parser"
    assert request.url.params["app_id"] == "app-id"
    assert request.url.params["app_key"] == "app-key"
    assert request.url.params["ingr"] == "green tomato"
    assert request.url.params["limit"] == "5"


def test_edamam_error_uses_upstream_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "bad request"})

    client = _edamam_client(handler)

    with pytest.raises(EdamamApiError) as exc_info:
        asyncio.run(client.parse("tomato", 5))

    assert str(exc_info.value) == "Edamam API error: bad request"
    assert exc_info.value.status_code == 400


def test_edamam_error_without_message_is_unknown() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="upstream exploded")

    client = _edamam_client(handler)

    with pytest.raises(EdamamApiError) as exc_info:
        asyncio.run(client.parse("tomato", 5))

    assert str(exc_info.value) == "Edamam API error: Unknown error"


def test_edamam_nutrients_posts_gram_measure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path.endswith("/nutrients")
        body = json.loads(request.content.decode())
        ingredient = body["ingredients"][0]
        assert ingredient["foodId"] == "food_abc"
        assert ingredient["quantity"] == 100
        assert ingredient["measureURI"].endswith("#Measure_gram")
        return httpx.Response(200, json={"calories": 18, "totalWeight": 100})

    client = _edamam_client(handler)

    payload = asyncio.run(client.nutrients("food_abc"))

    assert payload["calories"] == 18


def test_openai_text_client_returns_text() -> None:
    fake = _FakeOpenAI("# Tomato soup")
    client = OpenAITextClient(
        client=fake, model="gpt-test", temperature=0.7, max_output_tokens=1000
    )

    result = asyncio.run(
        client.generate(
            instructions="Be helpful",
            messages=[{"role": "user", "content": "tomato"}],
        )
    )

    assert result.ok
    assert result.text == "# Tomato soup"
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-test"
    assert payload["instructions"] == "Be helpful"
    assert payload["input"] == [{"role": "user", "content": "tomato"}]
    assert payload["temperature"] == 0.7
    assert payload["max_output_tokens"] == 1000


def test_openai_text_client_wraps_exceptions() -> None:
    client = OpenAITextClient(client=_FailingOpenAI(), model="gpt-test")

    result = asyncio.run(client.generate(instructions="x", messages=[]))

    assert not result.ok
    assert result.error == "OpenAI API error: rate limited"


def test_openai_text_client_treats_empty_output_as_failure() -> None:
    client = OpenAITextClient(client=_FakeOpenAI(""), model="gpt-test")

    result = asyncio.run(client.generate(instructions="x", messages=[]))

    assert not result.ok
    assert result.error == "OpenAI returned an empty response"
