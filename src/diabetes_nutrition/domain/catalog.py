"""Domain models for the food catalog."""

from dataclasses import dataclass

SAFE = "safe"
MODERATE = "moderate"
AVOID = "avoid"

SUITABILITY_LEVELS = (SAFE, MODERATE, AVOID)


@dataclass(frozen=True)
class FoodRecord:
    """A catalog food with nutrition per 100 g serving."""

    id: int
    name: str
    alternate_name: str
    calories: float
    carbs_g: float
    protein_g: float
    fat_g: float
    sugar_g: float
    glycemic_index: int | None
    suitability: str
    category: str | None = None
