"""Perplexity chat completions client over HTTPX."""

from dataclasses import dataclass

import httpx

from diabetes_nutrition.domain.vision import EncodedImage, RecognizedItem
from diabetes_nutrition.services.parsing import parse_food_array, parse_with_fallback
from diabetes_nutrition.services.providers import ChatProvider, VisionProvider


@dataclass
class PerplexityProvider(VisionProvider, ChatProvider):
    """HTTPX-backed Perplexity provider."""

    api_key: str
    model: str
    base_url: str
    http_client: httpx.AsyncClient
    name: str = "perplexity"

    @classmethod
    def create(cls, api_key: str, model: str, base_url: str) -> "PerplexityProvider":
        """Create a Perplexity provider with a managed httpx session."""
        return cls(
            api_key=api_key,
            model=model,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    async def describe_image(self, image: EncodedImage, prompt: str) -> str:
        """Ask the model for the foods in an image as a JSON array."""
        return await self._chat_completion(
            [
                {
                    "role": "system",
                    "content": "You identify foods in photos and reply with JSON only.",
                },
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {"type": "image_url", "image_url": {"url": image.data_url}},
                    ],
                },
            ],
            temperature=0.2,
        )

    def parse_foods(
        self, text: str, default_confidence: float
    ) -> list[RecognizedItem]:
        """Parse a bare JSON array, then fall back to lenient parsing."""
        return parse_with_fallback(parse_food_array, text, default_confidence)

    async def complete(self, system_prompt: str, message: str) -> str:
        """Answer a chat message."""
        return await self._chat_completion(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": message},
            ],
            temperature=0.7,
        )

    async def _chat_completion(
        self, messages: list[dict[str, object]], *, temperature: float
    ) -> str:
        response = await self.http_client.post(
            f"{self.base_url}/chat/completions",
            headers={"Authorization": f"Bearer {self.api_key}"},
            json={
                "model": self.model,
                "messages": messages,
                "temperature": temperature,
                "max_tokens": 500,
            },
            timeout=15,
        )
        response.raise_for_status()
        payload = response.json()
        choices = payload.get("choices") or []
        content = choices[0].get("message", {}).get("content") if choices else None
        if not content:
            raise RuntimeError("Perplexity returned an empty response")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
