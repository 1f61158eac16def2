"""Food recognition across several vision providers."""

import asyncio
import base64
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from diabetes_nutrition.domain.fallbacks import FallbackPolicy
from diabetes_nutrition.domain.vision import (
    OUTCOME_NETWORK_ERROR,
    OUTCOME_OK,
    OUTCOME_PARSE_ERROR,
    EncodedImage,
    ProviderOutcome,
    RecognizedItem,
)
from diabetes_nutrition.services.providers import (
    VisionProvider,
    status_code_from_exception,
)
from diabetes_nutrition.services.resolver import normalize_name

_logger = logging.getLogger(__name__)

VISION_PROMPT = (
    "Identify every food or dish visible in this image. "
    "Reply with JSON only: a list of objects with a short English food name "
    'in "name" and your confidence between 0 and 1 in "confidence", e.g. '
    '[{"name": "Rice", "confidence": 0.9}]. '
    "Return an empty list when no food is visible."
)


@dataclass
class RecognitionService:
    """Fan an image out to every vision provider and merge their answers."""

    providers: list[VisionProvider]
    fallbacks: FallbackPolicy = field(default_factory=FallbackPolicy)
    max_items: int = 5
    timeout_seconds: float = 10.0
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def recognize(self, image_bytes: bytes) -> list[RecognizedItem]:
        """Return merged items ranked by confidence, at most ``max_items``."""
        image = encode_image(image_bytes)
        outcomes = await self.collect_outcomes(image)
        items = [item for outcome in outcomes if outcome.ok for item in outcome.items]
        merged = merge_recognized_items(items)[: self.max_items]
        if merged:
            return merged
        _logger.warning(
            "Recognition returned no foods: %s",
            ", ".join(f"{o.provider}={o.status}" for o in outcomes) or "no providers",
        )
        return self.fallbacks.fallback_recognition()[: self.max_items]

    async def collect_outcomes(self, image: EncodedImage) -> list[ProviderOutcome]:
        """Run every provider concurrently and return one outcome each."""
        results = await asyncio.gather(
            *(self._run_provider(provider, image) for provider in self.providers)
        )
        return list(results)

    async def _run_provider(
        self, provider: VisionProvider, image: EncodedImage
    ) -> ProviderOutcome:
        try:
            raw = await self._call_with_retry(provider, image)
        except Exception as exc:
            _logger.warning(
                "Vision provider %s failed (status=%s): %r",
                provider.name,
                status_code_from_exception(exc),
                exc,
            )
            return ProviderOutcome(
                provider=provider.name,
                status=OUTCOME_NETWORK_ERROR,
                error=str(exc) or type(exc).__name__,
            )

        try:
            items = provider.parse_foods(raw, self.fallbacks.default_confidence)
        except Exception as exc:
            _logger.warning(
                "Vision provider %s returned an unreadable response: %s",
                provider.name,
                exc,
            )
            return ProviderOutcome(
                provider=provider.name,
                status=OUTCOME_PARSE_ERROR,
                error=str(exc) or type(exc).__name__,
            )

        _logger.info(
            "Vision provider %s recognized %s items", provider.name, len(items)
        )
        return ProviderOutcome(provider=provider.name, status=OUTCOME_OK, items=items)

    async def _call_with_retry(
        self, provider: VisionProvider, image: EncodedImage
    ) -> str:
        """Call a provider with a timeout and a short retry."""
        attempt = 0
        while True:
            try:
                return await asyncio.wait_for(
                    provider.describe_image(image, VISION_PROMPT),
                    timeout=self.timeout_seconds,
                )
            except Exception as exc:
                attempt += 1
                if attempt > self.retry_attempts:
                    raise
                _logger.info(
                    "Vision provider %s attempt %s/%s failed: %r",
                    provider.name,
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                await asyncio.sleep(self.retry_delay_seconds)


def merge_recognized_items(items: Iterable[RecognizedItem]) -> list[RecognizedItem]:
    """Merge case-insensitive duplicates and sort by confidence.

    Duplicates keep the first spelling seen and the mean confidence. Ties keep
    their first-seen order.
    """
    groups: dict[str, tuple[str, list[float]]] = {}
    for item in items:
        key = normalize_name(item.name)
        if not key:
            continue
        if key not in groups:
            groups[key] = (" ".join(item.name.split()), [])
        groups[key][1].append(item.confidence)

    merged = [
        RecognizedItem(name=name, confidence=round(sum(scores) / len(scores), 4))
        for name, scores in groups.values()
    ]
    return sorted(merged, key=lambda item: item.confidence, reverse=True)


def encode_image(image_bytes: bytes) -> EncodedImage:
    """Base64-encode image bytes once for every provider."""
    return EncodedImage(
        raw=image_bytes,
        base64=base64.b64encode(image_bytes).decode("utf-8"),
        mime_type=detect_mime_type(image_bytes),
    )


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in (b"GIF87a", b"GIF89a"):
        return "image/gif"
    return "image/jpeg"
