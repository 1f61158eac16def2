"""OpenAI chat completions client for vision and chat."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from diabetes_nutrition.domain.vision import EncodedImage, RecognizedItem
from diabetes_nutrition.services.parsing import parse_foods_object, parse_with_fallback
from diabetes_nutrition.services.providers import ChatProvider, VisionProvider

_FOODS_OBJECT_HINT = ' Wrap the list in a JSON object: {"foods": [...]}.'


@dataclass
class OpenAIProvider(VisionProvider, ChatProvider):
    """Provider backed by OpenAI chat completions."""

    client: AsyncOpenAI
    model: str
    name: str = "openai"

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAIProvider":
        """Create an OpenAI provider."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def describe_image(self, image: EncodedImage, prompt: str) -> str:
        """Ask the model for the foods in an image as a JSON object."""
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt + _FOODS_OBJECT_HINT},
                        {"type": "image_url", "image_url": {"url": image.data_url}},
                    ],
                }
            ],
            response_format={"type": "json_object"},
            max_tokens=500,
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise RuntimeError("OpenAI returned an empty response")
        return content

    def parse_foods(
        self, text: str, default_confidence: float
    ) -> list[RecognizedItem]:
        """Parse ``{"foods": [...]}``, then fall back to lenient parsing."""
        return parse_with_fallback(parse_foods_object, text, default_confidence)

    async def complete(self, system_prompt: str, message: str) -> str:
        """Answer a chat message."""
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": message},
            ],
            temperature=0.7,
            max_tokens=500,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
