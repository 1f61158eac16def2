"""Domain models for meal analysis."""

from dataclasses import dataclass, field

from diabetes_nutrition.domain.vision import RecognizedItem


@dataclass(frozen=True)
class NutritionTotals:
    """Aggregate nutrition for a set of catalog foods."""

    calories: float
    carbs_g: float
    protein_g: float
    fat_g: float
    sugar_g: float
    glycemic_index: int


@dataclass(frozen=True)
class FoodSuitability:
    """Suitability assessment for one food."""

    suitability: str
    reason: str


@dataclass(frozen=True)
class SuitabilityVerdict:
    """Overall meal verdict with per-food detail."""

    overall: str
    details: dict[str, FoodSuitability] = field(default_factory=dict)


@dataclass(frozen=True)
class FoodAnalysis:
    """Result of analyzing a meal from an image or manual selection."""

    recognized: list[RecognizedItem]
    totals: NutritionTotals | None
    verdict: SuitabilityVerdict

    @property
    def food_detected(self) -> bool:
        return self.totals is not None
