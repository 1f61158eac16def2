"""Tests for nutrition aggregation."""

import math

from diabetes_nutrition.domain.catalog import FoodRecord
from diabetes_nutrition.services.aggregation import aggregate


def _food(
    carbs: float, sugar: float, glycemic_index: int | None, calories: float = 100
) -> FoodRecord:
    return FoodRecord(
        id=1,
        name="طعام",
        alternate_name="Food",
        calories=calories,
        carbs_g=carbs,
        protein_g=2.5,
        fat_g=1.25,
        sugar_g=sugar,
        glycemic_index=glycemic_index,
        suitability="safe",
    )


def test_aggregate_empty_is_explicit_no_data() -> None:
    assert aggregate([]) is None


def test_aggregate_sums_macros() -> None:
    totals = aggregate([_food(20, 2.2, 40, 150), _food(10.1, 1.1, 60, 80)])

    assert totals is not None
    assert totals.calories == 230
    assert totals.carbs_g == 30.1
    assert totals.sugar_g == 3.3
    assert totals.protein_g == 5.0
    assert totals.fat_g == 2.5
    assert totals.glycemic_index == 50


def test_aggregate_glycemic_mean_rounds_half_up() -> None:
    totals = aggregate([_food(1, 1, 55), _food(1, 1, 56)])

    assert totals is not None
    assert totals.glycemic_index == 56


def test_aggregate_missing_glycemic_index_counts_as_zero() -> None:
    totals = aggregate([_food(1, 1, None), _food(1, 1, 70)])

    assert totals is not None
    assert totals.glycemic_index == 35


def test_aggregate_catalog_is_finite(catalog) -> None:
    totals = aggregate(catalog)

    assert totals is not None
    for value in (
        totals.calories,
        totals.carbs_g,
        totals.protein_g,
        totals.fat_g,
        totals.sugar_g,
    ):
        assert math.isfinite(value)
    assert 0 <= totals.glycemic_index <= 100
