"""Google Gemini client for vision and chat."""

from dataclasses import dataclass

from google import genai
from google.genai import types

from diabetes_nutrition.domain.vision import EncodedImage, RecognizedItem
from diabetes_nutrition.services.parsing import parse_food_array, parse_with_fallback
from diabetes_nutrition.services.providers import ChatProvider, VisionProvider


@dataclass
class GeminiProvider(VisionProvider, ChatProvider):
    """Provider backed by the google-genai async models API."""

    client: genai.Client
    model: str
    name: str = "gemini"

    @classmethod
    def create(cls, api_key: str, model: str) -> "GeminiProvider":
        """Create a Gemini provider."""
        return cls(client=genai.Client(api_key=api_key), model=model)

    async def describe_image(self, image: EncodedImage, prompt: str) -> str:
        """Ask the model for the foods in an image as a JSON array."""
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=[
                prompt,
                types.Part.from_bytes(data=image.raw, mime_type=image.mime_type),
            ],
            config=types.GenerateContentConfig(
                temperature=0.2,
                max_output_tokens=500,
            ),
        )
        text = response.text
        if not text:
            raise RuntimeError("Gemini returned an empty response")
        return text

    def parse_foods(
        self, text: str, default_confidence: float
    ) -> list[RecognizedItem]:
        """Parse a bare JSON array, then fall back to lenient parsing."""
        return parse_with_fallback(parse_food_array, text, default_confidence)

    async def complete(self, system_prompt: str, message: str) -> str:
        """Answer a chat message."""
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=message,
            config=types.GenerateContentConfig(
                system_instruction=system_prompt,
                temperature=0.7,
                max_output_tokens=500,
            ),
        )
        return response.text or ""

    async def close(self) -> None:
        """Close the async HTTP session."""
        await self.client.aio.aclose()
