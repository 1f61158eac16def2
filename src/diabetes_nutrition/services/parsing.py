"""Parsing helpers for free-form provider responses.

Providers are asked for JSON but often wrap it in markdown fences or prose.
Each provider adapter parses its own documented shape first and only falls
back to :func:`parse_leniently` when the model ignored the requested format.
"""

import json
import math
import re
from collections.abc import Callable, Iterable, Iterator

from diabetes_nutrition.domain.vision import RecognizedItem

_FENCED_JSON = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)
_FENCED_ANY = re.compile(r"```\s*(.*?)\s*```", re.DOTALL)
_NAME_FIELD = re.compile(r'"name"\s*:\s*"([^"]+)"')


class ProviderParseError(ValueError):
    """Raised when a provider response holds no usable food list."""


def decode_json_text(text: str) -> object:
    """Decode the first JSON payload found in provider text."""
    for candidate in _json_candidates(text):
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue
    raise ProviderParseError("No JSON payload found in provider response")


def _json_candidates(text: str) -> Iterator[str]:
    stripped = text.strip()
    for pattern in (_FENCED_JSON, _FENCED_ANY):
        match = pattern.search(stripped)
        if match:
            yield match.group(1)
    yield stripped
    spans: list[tuple[int, int]] = []
    for opener, closer in (("[", "]"), ("{", "}")):
        start = stripped.find(opener)
        end = stripped.rfind(closer)
        if start != -1 and end > start:
            spans.append((start, end))
    # Outermost bracket first.
    for start, end in sorted(spans):
        yield stripped[start : end + 1]


def coerce_items(
    entries: Iterable[object], default_confidence: float
) -> list[RecognizedItem]:
    """Build items from bare names or ``{name, confidence}`` objects."""
    items: list[RecognizedItem] = []
    for entry in entries:
        raw_confidence: object = None
        if isinstance(entry, str):
            name: object = entry
        elif isinstance(entry, dict):
            name = entry.get("name") or entry.get("food")
            raw_confidence = entry.get("confidence")
        else:
            continue
        if not isinstance(name, str) or not name.strip():
            continue
        items.append(
            RecognizedItem(
                name=name.strip(),
                confidence=_confidence(raw_confidence, default_confidence),
            )
        )
    return items


def _confidence(raw: object, default: float) -> float:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    if math.isnan(value):
        return default
    return min(max(value, 0.0), 1.0)


def parse_food_array(text: str, default_confidence: float) -> list[RecognizedItem]:
    """Parse a response shaped as a bare JSON array of foods."""
    payload = decode_json_text(text)
    if not isinstance(payload, list):
        raise ProviderParseError("Expected a JSON array of foods")
    return coerce_items(payload, default_confidence)


def parse_foods_object(text: str, default_confidence: float) -> list[RecognizedItem]:
    """Parse a response shaped as ``{"foods": [...]}``."""
    payload = decode_json_text(text)
    if not isinstance(payload, dict) or not isinstance(payload.get("foods"), list):
        raise ProviderParseError('Expected a JSON object with a "foods" array')
    return coerce_items(payload["foods"], default_confidence)


def parse_leniently(text: str, default_confidence: float) -> list[RecognizedItem]:
    """Last-resort parsing for responses that ignored the requested shape."""
    try:
        payload = decode_json_text(text)
    except ProviderParseError:
        payload = None
    if isinstance(payload, list):
        return coerce_items(payload, default_confidence)
    if isinstance(payload, dict):
        if "name" in payload or "food" in payload:
            single = coerce_items([payload], default_confidence)
            if single:
                return single
        foods = payload.get("foods")
        if isinstance(foods, list):
            return coerce_items(foods, default_confidence)
        for value in payload.values():
            if isinstance(value, list):
                return coerce_items(value, default_confidence)

    names = [name.strip() for name in _NAME_FIELD.findall(text) if name.strip()]
    if names:
        return [
            RecognizedItem(name=name, confidence=default_confidence) for name in names
        ]
    raise ProviderParseError("Could not find foods in provider response")


def parse_with_fallback(
    parser: Callable[[str, float], list[RecognizedItem]],
    text: str,
    default_confidence: float,
) -> list[RecognizedItem]:
    """Apply a provider's strict parser, then the lenient one."""
    try:
        return parser(text, default_confidence)
    except ProviderParseError:
        return parse_leniently(text, default_confidence)
