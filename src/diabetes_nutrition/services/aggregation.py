"""Nutrition totals for a set of catalog foods."""

import math
from collections.abc import Iterable, Sequence

from diabetes_nutrition.domain.analysis import NutritionTotals
from diabetes_nutrition.domain.catalog import FoodRecord


def aggregate(records: Sequence[FoodRecord]) -> NutritionTotals | None:
    """Sum macros and average glycemic index; None means no food data."""
    if not records:
        return None
    glycemic_sum = sum(record.glycemic_index or 0 for record in records)
    return NutritionTotals(
        calories=_total(record.calories for record in records),
        carbs_g=_total(record.carbs_g for record in records),
        protein_g=_total(record.protein_g for record in records),
        fat_g=_total(record.fat_g for record in records),
        sugar_g=_total(record.sugar_g for record in records),
        glycemic_index=_round_half_up(glycemic_sum / len(records)),
    )


def _total(values: Iterable[float]) -> float:
    return round(sum(values), 1)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)

