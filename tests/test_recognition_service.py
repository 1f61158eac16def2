"""Tests for multi-provider food recognition."""

import asyncio

import pytest

from diabetes_nutrition.domain.fallbacks import FallbackPolicy
from diabetes_nutrition.domain.vision import RecognizedItem
from diabetes_nutrition.services.recognition import (
    RecognitionService,
    detect_mime_type,
    encode_image,
    merge_recognized_items,
)
from tests.conftest import JPEG_BYTES, PNG_BYTES, FakeVisionProvider


def _service(
    providers: list[FakeVisionProvider], **kwargs: object
) -> RecognitionService:
    return RecognitionService(
        providers=list(providers), retry_delay_seconds=0.0, **kwargs
    )


def test_merge_averages_case_insensitive_duplicates() -> None:
    merged = merge_recognized_items(
        [
            RecognizedItem(name="Apple", confidence=0.9),
            RecognizedItem(name="apple", confidence=0.7),
        ]
    )

    assert len(merged) == 1
    assert merged[0].name == "Apple"
    assert merged[0].confidence == pytest.approx(0.8)


def test_merge_sorts_descending_and_keeps_tie_order() -> None:
    merged = merge_recognized_items(
        [
            RecognizedItem(name="Bread", confidence=0.5),
            RecognizedItem(name="Rice", confidence=0.9),
            RecognizedItem(name="Tea", confidence=0.5),
        ]
    )

    assert [item.name for item in merged] == ["Rice", "Bread", "Tea"]


def test_recognize_merges_providers(vision_providers) -> None:
    service = _service(vision_providers)

    items = asyncio.run(service.recognize(JPEG_BYTES))

    assert [item.name for item in items] == ["White Rice", "Grilled Chicken Breast"]
    assert items[0].confidence == pytest.approx(0.8)


def test_recognize_sends_one_encoded_image_to_every_provider(vision_providers) -> None:
    service = _service(vision_providers)

    asyncio.run(service.recognize(PNG_BYTES))

    first, second = (provider.images[0] for provider in vision_providers)
    assert first is second
    assert first.mime_type == "image/png"
    assert first.data_url.startswith("data:image/png;base64,")


def test_recognize_truncates_to_max_items() -> None:
    names = ["Rice", "Bread", "Tea", "Dates", "Okra", "Tuna", "Figs"]
    response = "[" + ", ".join(
        f'{{"name": "{name}", "confidence": {0.3 + index / 10:.1f}}}'
        for index, name in enumerate(names)
    ) + "]"
    service = _service([FakeVisionProvider(name="gemini", response=response)])

    items = asyncio.run(service.recognize(JPEG_BYTES))

    assert len(items) == 5
    confidences = [item.confidence for item in items]
    assert confidences == sorted(confidences, reverse=True)
    assert items[0].name == "Figs"


def test_recognize_returns_empty_when_every_provider_fails() -> None:
    providers = [
        FakeVisionProvider(name=name, error=RuntimeError("boom"))
        for name in ("openai", "gemini", "perplexity")
    ]
    service = _service(providers)

    items = asyncio.run(service.recognize(JPEG_BYTES))

    assert items == []
    assert all(provider.calls == 2 for provider in providers)


def test_recognize_uses_configured_fallback_foods() -> None:
    policy = FallbackPolicy(
        recognition_foods=(RecognizedItem(name="Mixed Vegetables", confidence=0.5),)
    )
    service = _service(
        [FakeVisionProvider(name="gemini", error=RuntimeError("down"))],
        fallbacks=policy,
    )

    items = asyncio.run(service.recognize(JPEG_BYTES))

    assert [item.name for item in items] == ["Mixed Vegetables"]


def test_recognize_retries_once_then_succeeds() -> None:
    provider = FakeVisionProvider(
        name="gemini",
        response='[{"name": "Hummus", "confidence": 0.6}]',
        error=RuntimeError("flaky"),
        fail_times=1,
    )
    service = _service([provider])

    items = asyncio.run(service.recognize(JPEG_BYTES))

    assert provider.calls == 2
    assert [item.name for item in items] == ["Hummus"]


def test_recognize_excludes_timed_out_provider() -> None:
    slow = FakeVisionProvider(
        name="openai", response='[{"name": "Cake"}]', delay_seconds=0.5
    )
    fast = FakeVisionProvider(name="gemini", response='[{"name": "Quinoa"}]')
    service = _service([slow, fast], timeout_seconds=0.05, retry_attempts=0)

    items = asyncio.run(service.recognize(JPEG_BYTES))

    assert [item.name for item in items] == ["Quinoa"]
    assert items[0].confidence == pytest.approx(0.8)


def test_outcomes_are_tagged_per_provider() -> None:
    providers = [
        FakeVisionProvider(name="openai", response='[{"name": "Rice"}]'),
        FakeVisionProvider(name="gemini", response="I see a cat."),
        FakeVisionProvider(name="perplexity", error=ConnectionError("offline")),
    ]
    service = _service(providers, retry_attempts=0)

    outcomes = asyncio.run(service.collect_outcomes(encode_image(JPEG_BYTES)))

    assert [(outcome.provider, outcome.status) for outcome in outcomes] == [
        ("openai", "ok"),
        ("gemini", "parse_error"),
        ("perplexity", "network_error"),
    ]
    assert outcomes[2].error == "offline"


def test_detect_mime_type() -> None:
    assert detect_mime_type(JPEG_BYTES) == "image/jpeg"
    assert detect_mime_type(PNG_BYTES) == "image/png"
    assert detect_mime_type(b"RIFF\x00\x00\x00\x00WEBPVP8 ") == "image/webp"
    assert detect_mime_type(b"unknown") == "image/jpeg"
