"""Match free-text food names against the bilingual catalog."""

from collections.abc import Sequence

from diabetes_nutrition.domain.catalog import FoodRecord


def normalize_name(value: str) -> str:
    """Return a comparison key for a food name."""
    return " ".join(value.split()).casefold()


def resolve_food_name(
    free_text: str, catalog: Sequence[FoodRecord]
) -> FoodRecord | None:
    """Resolve a recognized food name to a catalog record.

    Rules are tried in order over the whole catalog and the first hit wins:
    exact primary name, exact alternate name, then substring containment in
    either direction against the primary and alternate names.
    """
    query = normalize_name(free_text)
    if not query:
        return None

    for food in catalog:
        if normalize_name(food.name) == query:
            return food
    for food in catalog:
        if normalize_name(food.alternate_name) == query:
            return food
    for food in catalog:
        for candidate in (food.name, food.alternate_name):
            key = normalize_name(candidate)
            if key and (query in key or key in query):
                return food
    return None
