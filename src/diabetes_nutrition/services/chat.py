"""Nutrition chat with ordered provider fallback."""

import asyncio
import logging
import re
from dataclasses import dataclass, field

from diabetes_nutrition.domain.fallbacks import FallbackPolicy
from diabetes_nutrition.services.providers import (
    ChatProvider,
    status_code_from_exception,
)

_logger = logging.getLogger(__name__)

_ARABIC_SCRIPT = re.compile(r"[؀-ۿ]")

_BASE_PROMPT = (
    "You are a helpful nutrition assistant for people with diabetes. "
    "Provide accurate, evidence-based information about diet and nutrition "
    "for diabetes management. Keep responses concise (max 3 paragraphs). "
    "If you don't know the answer, say so rather than making up information. "
    "Focus specifically on diabetic nutrition."
)

CHAT_SYSTEM_PROMPTS: dict[str, str] = {
    "ar": _BASE_PROMPT + " Always respond in fluent, grammatically correct Arabic.",
    "en": _BASE_PROMPT + " Always respond in fluent, grammatically correct English.",
}


def reply_language(message: str, requested: str) -> str:
    """Answer in Arabic whenever the user wrote Arabic."""
    if _ARABIC_SCRIPT.search(message):
        return "ar"
    return requested


@dataclass
class ChatOrchestrator:
    """Ask chat providers in priority order until one answers."""

    providers: list[ChatProvider]
    fallbacks: FallbackPolicy = field(default_factory=FallbackPolicy)
    timeout_seconds: float = 10.0

    async def chat(self, message: str, language: str | None = None) -> str:
        """Return the first non-empty provider answer or a localized apology."""
        requested = self.fallbacks.language(language)
        reply_in = reply_language(message, requested)
        system_prompt = CHAT_SYSTEM_PROMPTS[reply_in]
        for provider in self.providers:
            try:
                answer = await asyncio.wait_for(
                    provider.complete(system_prompt, message),
                    timeout=self.timeout_seconds,
                )
            except Exception as exc:
                _logger.warning(
                    "Chat provider %s failed (status=%s): %r",
                    provider.name,
                    status_code_from_exception(exc),
                    exc,
                )
                continue
            if answer and answer.strip():
                _logger.info("Chat answered by %s", provider.name)
                return answer.strip()
            _logger.warning("Chat provider %s returned an empty answer", provider.name)
        return self.fallbacks.chat_apology(reply_in)
