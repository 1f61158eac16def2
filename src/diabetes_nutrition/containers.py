"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from diabetes_nutrition.adapters.gemini_provider import GeminiProvider
from diabetes_nutrition.adapters.memory_repositories import (
    InMemoryCatalogRepository,
    InMemoryChatMessageRepository,
    InMemoryMealLogRepository,
    InMemoryProfileRepository,
)
from diabetes_nutrition.adapters.openai_provider import OpenAIProvider
from diabetes_nutrition.adapters.perplexity_provider import PerplexityProvider
from diabetes_nutrition.adapters.supabase_chat_repository import (
    SupabaseChatMessageRepository,
)
from diabetes_nutrition.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from diabetes_nutrition.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from diabetes_nutrition.config import Settings, parse_provider_order
from diabetes_nutrition.domain.fallbacks import FallbackPolicy
from diabetes_nutrition.services.analysis import AnalysisService
from diabetes_nutrition.services.catalog import CatalogService
from diabetes_nutrition.services.chat import ChatOrchestrator
from diabetes_nutrition.services.chat_history import (
    ChatHistoryService,
    ChatMessageRepository,
)
from diabetes_nutrition.services.meal_log import MealLogRepository, MealLogService
from diabetes_nutrition.services.profile import ProfileRepository, ProfileService
from diabetes_nutrition.services.providers import ChatProvider, VisionProvider
from diabetes_nutrition.services.recognition import RecognitionService

_logger = logging.getLogger(__name__)

_Provider = OpenAIProvider | GeminiProvider | PerplexityProvider


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    recognition_service: RecognitionService
    analysis_service: AnalysisService
    chat_orchestrator: ChatOrchestrator
    chat_history_service: ChatHistoryService
    meal_log_service: MealLogService
    profile_service: ProfileService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    fallbacks = FallbackPolicy(default_language=resolved_settings.default_language)

    providers = _build_providers(resolved_settings)
    if not providers:
        _logger.warning("No AI provider keys configured; AI features are offline")

    vision_providers: list[VisionProvider] = list(providers.values())
    catalog_service = CatalogService(InMemoryCatalogRepository())
    recognition_service = RecognitionService(
        providers=vision_providers,
        fallbacks=fallbacks,
        max_items=resolved_settings.max_recognized_items,
        timeout_seconds=resolved_settings.provider_timeout_seconds,
        retry_attempts=resolved_settings.provider_retry_attempts,
    )
    chat_providers: list[ChatProvider] = [
        providers[name]
        for name in parse_provider_order(resolved_settings.chat_provider_order)
        if name in providers
    ]
    chat_orchestrator = ChatOrchestrator(
        providers=chat_providers,
        fallbacks=fallbacks,
        timeout_seconds=resolved_settings.provider_timeout_seconds,
    )
    analysis_service = AnalysisService(
        catalog_service=catalog_service,
        recognition_service=recognition_service,
        fallbacks=fallbacks,
    )
    meal_log_repository, chat_repository, profile_repository = _build_repositories(
        resolved_settings
    )

    async def close_resources() -> None:
        for provider in providers.values():
            close = getattr(provider, "close", None)
            if close is not None:
                await close()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        recognition_service=recognition_service,
        analysis_service=analysis_service,
        chat_orchestrator=chat_orchestrator,
        chat_history_service=ChatHistoryService(chat_repository),
        meal_log_service=MealLogService(
            repository=meal_log_repository, catalog_service=catalog_service
        ),
        profile_service=ProfileService(profile_repository),
        close_resources=close_resources,
    )


def _build_providers(settings: Settings) -> dict[str, _Provider]:
    """Create a provider for every configured API key."""
    providers: dict[str, _Provider] = {}
    if settings.openai_api_key:
        providers["openai"] = OpenAIProvider.create(
            api_key=settings.openai_api_key, model=settings.openai_model
        )
    if settings.gemini_api_key:
        providers["gemini"] = GeminiProvider.create(
            api_key=settings.gemini_api_key, model=settings.gemini_model
        )
    if settings.perplexity_api_key:
        providers["perplexity"] = PerplexityProvider.create(
            api_key=settings.perplexity_api_key,
            model=settings.perplexity_model,
            base_url=settings.perplexity_base_url,
        )
    return providers


def _build_repositories(
    settings: Settings,
) -> tuple[MealLogRepository, ChatMessageRepository, ProfileRepository]:
    """Select meal log, chat and profile storage for the configured backend."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "Supabase storage requires SUPABASE_URL and SUPABASE_SERVICE_KEY"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return (
            SupabaseMealLogRepository(client),
            SupabaseChatMessageRepository(client),
            SupabaseProfileRepository(client),
        )
    if settings.storage_backend != "memory":
        raise ValueError(f"Unknown storage backend: {settings.storage_backend}")
    return (
        InMemoryMealLogRepository(),
        InMemoryChatMessageRepository(),
        InMemoryProfileRepository(),
    )
