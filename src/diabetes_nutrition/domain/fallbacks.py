"""Fallback responses shared by the recognition and chat orchestrators."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from diabetes_nutrition.domain.vision import RecognizedItem

SUPPORTED_LANGUAGES = ("ar", "en")

DEFAULT_CHAT_APOLOGIES: dict[str, str] = {
    "ar": "عذراً، حدث خطأ في الاتصال. يرجى المحاولة مرة أخرى لاحقاً.",
    "en": "Sorry, there was a connection error. Please try again later.",
}

DEFAULT_UNRESOLVED_REASONS: dict[str, str] = {
    "ar": (
        "لا تتوفر بيانات غذائية عن {name} في قاعدة البيانات. "
        "ينصح بتناوله بكميات معتدلة ومراقبة مستوى السكر بعد تناوله."
    ),
    "en": (
        "No nutrition data is available for {name}. "
        "Eat it in moderate amounts and monitor your blood sugar afterwards."
    ),
}


@dataclass(frozen=True)
class FallbackPolicy:
    """Localized fallbacks used when providers or the catalog come up empty."""

    default_language: str = "ar"
    default_confidence: float = 0.8
    recognition_foods: tuple[RecognizedItem, ...] = ()
    chat_apologies: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_CHAT_APOLOGIES)
    )
    unresolved_reasons: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_UNRESOLVED_REASONS)
    )

    def language(self, requested: str | None) -> str:
        """Return the requested language when supported, else the default."""
        if requested in SUPPORTED_LANGUAGES:
            return requested
        return self.default_language

    def chat_apology(self, language: str | None) -> str:
        """Return the apology shown when every chat provider failed."""
        resolved = self.language(language)
        return self.chat_apologies.get(
            resolved, DEFAULT_CHAT_APOLOGIES[self.default_language]
        )

    def unresolved_reason(self, food_name: str, language: str | None) -> str:
        """Return the disclaimer for a food missing from the catalog."""
        resolved = self.language(language)
        template = self.unresolved_reasons.get(
            resolved, DEFAULT_UNRESOLVED_REASONS[self.default_language]
        )
        return template.format(name=food_name)

    def fallback_recognition(self) -> list[RecognizedItem]:
        """Return the items reported when no provider recognized anything."""
        return list(self.recognition_foods)
