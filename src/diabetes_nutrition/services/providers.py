"""Interfaces for external AI providers."""

from typing import Protocol

from diabetes_nutrition.domain.vision import EncodedImage, RecognizedItem


class VisionProvider(Protocol):
    """A vision-capable model that lists the foods in an image."""

    name: str

    async def describe_image(self, image: EncodedImage, prompt: str) -> str:
        """Return the raw model text for the image."""

    def parse_foods(
        self, text: str, default_confidence: float
    ) -> list[RecognizedItem]:
        """Normalize this provider's response text into recognized items."""


class ChatProvider(Protocol):
    """A chat completion model answering a single user message."""

    name: str

    async def complete(self, system_prompt: str, message: str) -> str:
        """Return the model answer for the message."""


def status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    status_code = getattr(exc, "status_code", None)
    if status_code is None:
        response = getattr(exc, "response", None)
        status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
