"""Tests for AI provider adapters."""

import asyncio
import json
from types import SimpleNamespace

import httpx
import pytest

from diabetes_nutrition.adapters.gemini_provider import GeminiProvider
from diabetes_nutrition.adapters.openai_provider import OpenAIProvider
from diabetes_nutrition.adapters.perplexity_provider import PerplexityProvider
from diabetes_nutrition.services.recognition import encode_image
from tests.conftest import JPEG_BYTES


class _FakeCompletions:
    def __init__(self, content: str | None) -> None:
        self.content = content
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class _FakeOpenAI:
    def __init__(self, content: str | None) -> None:
        self.chat = SimpleNamespace(completions=_FakeCompletions(content))


class _FakeGeminiModels:
    def __init__(self, text: str | None) -> None:
        self.text = text
        self.last_payload: dict[str, object] | None = None

    async def generate_content(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return SimpleNamespace(text=self.text)


class _FakeGeminiAio:
    def __init__(self, text: str | None) -> None:
        self.models = _FakeGeminiModels(text)
        self.closed = False

    async def aclose(self) -> None:
        self.closed = True


class _FakeGemini:
    def __init__(self, text: str | None) -> None:
        self.aio = _FakeGeminiAio(text)


def test_openai_provider_describes_image() -> None:
    fake = _FakeOpenAI('{"foods": [{"name": "Hummus", "confidence": 0.9}]}')
    provider = OpenAIProvider(client=fake, model="gpt-4o")
    image = encode_image(JPEG_BYTES)

    text = asyncio.run(provider.describe_image(image, "Detect foods."))
    items = provider.parse_foods(text, 0.8)

    payload = fake.chat.completions.last_payload
    assert payload is not None
    assert payload["response_format"] == {"type": "json_object"}
    content = payload["messages"][0]["content"]
    assert content[1]["image_url"]["url"] == image.data_url
    assert [(item.name, item.confidence) for item in items] == [("Hummus", 0.9)]


def test_openai_provider_rejects_empty_content() -> None:
    provider = OpenAIProvider(client=_FakeOpenAI(None), model="gpt-4o")

    with pytest.raises(RuntimeError):
        asyncio.run(provider.describe_image(encode_image(JPEG_BYTES), "Detect"))


def test_openai_provider_chat() -> None:
    fake = _FakeOpenAI("Prefer brown rice.")
    provider = OpenAIProvider(client=fake, model="gpt-4o")

    answer = asyncio.run(provider.complete("You are a dietitian.", "Rice?"))

    payload = fake.chat.completions.last_payload
    assert answer == "Prefer brown rice."
    assert payload is not None
    assert payload["messages"][0] == {
        "role": "system",
        "content": "You are a dietitian.",
    }


def test_gemini_provider_describes_image() -> None:
    fake = _FakeGemini('```json\n[{"name": "Dates", "confidence": 0.75}]\n```')
    provider = GeminiProvider(client=fake, model="gemini-1.5-flash")

    text = asyncio.run(provider.describe_image(encode_image(JPEG_BYTES), "Detect"))
    items = provider.parse_foods(text, 0.8)

    payload = fake.aio.models.last_payload
    assert payload is not None
    assert payload["model"] == "gemini-1.5-flash"
    assert payload["contents"][0] == "Detect"
    assert [item.name for item in items] == ["Dates"]


def test_gemini_provider_chat_and_empty_image_response() -> None:
    provider = GeminiProvider(client=_FakeGemini(None), model="gemini")

    assert asyncio.run(provider.complete("system", "hello")) == ""
    with pytest.raises(RuntimeError):
        asyncio.run(provider.describe_image(encode_image(JPEG_BYTES), "Detect"))


def test_gemini_provider_closes_async_session() -> None:
    fake = _FakeGemini("ok")
    provider = GeminiProvider(client=fake, model="gemini")

    asyncio.run(provider.close())

    assert fake.aio.closed is True


def test_perplexity_provider_posts_chat_completion() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"choices": [{"message": {"content": '["Okra", "Bread"]'}}]},
        )

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    provider = PerplexityProvider(
        api_key="pplx-key",
        model="sonar",
        base_url="https://api.test",
        http_client=async_client,
    )

    text = asyncio.run(provider.describe_image(encode_image(JPEG_BYTES), "Detect"))
    items = provider.parse_foods(text, 0.8)

    request = seen[0]
    payload = json.loads(request.content.decode())
    assert request.url == "https://api.test/chat/completions"
    assert request.headers["Authorization"] == "Bearer pplx-key"
    assert payload["model"] == "sonar"
    assert payload["max_tokens"] == 500
    assert [(item.name, item.confidence) for item in items] == [
        ("Okra", 0.8),
        ("Bread", 0.8),
    ]


def test_perplexity_provider_raises_on_errors() -> None:
    def failing(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "down"})

    def empty(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": []})

    def provider_for(handler) -> PerplexityProvider:  # type: ignore[no-untyped-def]
        return PerplexityProvider(
            api_key="key",
            model="sonar",
            base_url="https://api.test",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(provider_for(failing).complete("system", "hello"))
    with pytest.raises(RuntimeError):
        asyncio.run(provider_for(empty).complete("system", "hello"))
