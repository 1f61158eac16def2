"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from diabetes_nutrition.adapters.memory_repositories import (
    InMemoryCatalogRepository,
    InMemoryChatMessageRepository,
    InMemoryMealLogRepository,
    InMemoryProfileRepository,
)
from diabetes_nutrition.catalog_seed import seed_foods
from diabetes_nutrition.config import Settings
from diabetes_nutrition.containers import AppContainer
from diabetes_nutrition.domain.catalog import FoodRecord
from diabetes_nutrition.domain.fallbacks import FallbackPolicy
from diabetes_nutrition.domain.vision import EncodedImage, RecognizedItem
from diabetes_nutrition.services.analysis import AnalysisService
from diabetes_nutrition.services.catalog import CatalogService
from diabetes_nutrition.services.chat import ChatOrchestrator
from diabetes_nutrition.services.chat_history import ChatHistoryService
from diabetes_nutrition.services.meal_log import MealLogService
from diabetes_nutrition.services.profile import ProfileService
from diabetes_nutrition.services.parsing import parse_food_array, parse_with_fallback
from diabetes_nutrition.services.providers import ChatProvider, VisionProvider
from diabetes_nutrition.services.recognition import RecognitionService

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"fake-jpeg-body"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"fake-png-body"


@dataclass
class FakeVisionProvider(VisionProvider):
    """Fake vision provider returning a canned response."""

    name: str
    response: str = "[]"
    error: Exception | None = None
    fail_times: int | None = None
    delay_seconds: float = 0.0
    images: list[EncodedImage] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)

    @property
    def calls(self) -> int:
        return len(self.images)

    async def describe_image(self, image: EncodedImage, prompt: str) -> str:
        self.images.append(image)
        self.prompts.append(prompt)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None and (
            self.fail_times is None or self.calls <= self.fail_times
        ):
            raise self.error
        return self.response

    def parse_foods(
        self, text: str, default_confidence: float
    ) -> list[RecognizedItem]:
        return parse_with_fallback(parse_food_array, text, default_confidence)


@dataclass
class FakeChatProvider(ChatProvider):
    """Fake chat provider that records the prompts it receives."""

    name: str
    answer: str = ""
    error: Exception | None = None
    delay_seconds: float = 0.0
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def complete(self, system_prompt: str, message: str) -> str:
        self.calls.append((system_prompt, message))
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def settings() -> Settings:
    return Settings(
        admin_token="admin-token",
        openai_api_key=None,
        gemini_api_key=None,
        perplexity_api_key=None,
        storage_backend="memory",
        supabase_url=None,
        supabase_service_key=None,
    )


@pytest.fixture
def catalog() -> list[FoodRecord]:
    return seed_foods()


@pytest.fixture
def catalog_service() -> CatalogService:
    return CatalogService(InMemoryCatalogRepository())


@pytest.fixture
def fallbacks() -> FallbackPolicy:
    return FallbackPolicy()


@pytest.fixture
def vision_providers() -> list[FakeVisionProvider]:
    return [
        FakeVisionProvider(
            name="gemini",
            response=(
                '[{"name": "White Rice", "confidence": 0.9}, '
                '{"name": "Grilled Chicken Breast", "confidence": 0.8}]'
            ),
        ),
        FakeVisionProvider(
            name="perplexity",
            response='```json\n[{"name": "white rice", "confidence": 0.7}]\n```',
        ),
    ]


@pytest.fixture
def chat_providers() -> list[FakeChatProvider]:
    return [
        FakeChatProvider(name="openai", answer="Choose whole grains."),
        FakeChatProvider(name="gemini", answer="Gemini answer."),
    ]


@pytest.fixture
def container(
    settings: Settings,
    catalog_service: CatalogService,
    fallbacks: FallbackPolicy,
    vision_providers: list[FakeVisionProvider],
    chat_providers: list[FakeChatProvider],
) -> AppContainer:
    recognition_service = RecognitionService(
        providers=list(vision_providers),
        fallbacks=fallbacks,
        retry_delay_seconds=0.0,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_service=catalog_service,
        recognition_service=recognition_service,
        analysis_service=AnalysisService(
            catalog_service=catalog_service,
            recognition_service=recognition_service,
            fallbacks=fallbacks,
        ),
        chat_orchestrator=ChatOrchestrator(
            providers=list(chat_providers), fallbacks=fallbacks
        ),
        chat_history_service=ChatHistoryService(InMemoryChatMessageRepository()),
        meal_log_service=MealLogService(
            repository=InMemoryMealLogRepository(), catalog_service=catalog_service
        ),
        profile_service=ProfileService(InMemoryProfileRepository()),
        close_resources=close_resources,
    )
