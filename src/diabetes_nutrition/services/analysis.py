"""Meal analysis from images or manual food selection."""

import logging
from dataclasses import dataclass, field

from diabetes_nutrition.domain.analysis import FoodAnalysis, SuitabilityVerdict
from diabetes_nutrition.domain.catalog import MODERATE
from diabetes_nutrition.domain.fallbacks import FallbackPolicy
from diabetes_nutrition.domain.vision import RecognizedItem
from diabetes_nutrition.services.aggregation import aggregate
from diabetes_nutrition.services.catalog import CatalogService, FoodNotFoundError
from diabetes_nutrition.services.recognition import RecognitionService
from diabetes_nutrition.services.resolver import resolve_food_name
from diabetes_nutrition.services.suitability import evaluate

_logger = logging.getLogger(__name__)


class AnalysisRequestError(ValueError):
    """Raised when an analysis request cannot be processed."""


@dataclass
class AnalysisService:
    """Run recognition, resolution, aggregation and suitability rules."""

    catalog_service: CatalogService
    recognition_service: RecognitionService
    fallbacks: FallbackPolicy = field(default_factory=FallbackPolicy)

    async def analyze_image(
        self, image_bytes: bytes, language: str | None = None
    ) -> FoodAnalysis:
        """Recognize foods in an image and evaluate the meal."""
        if not image_bytes:
            raise AnalysisRequestError("No image file provided")
        recognized = await self.recognition_service.recognize(image_bytes)
        analysis = self._analyze(recognized, language)
        _logger.info(
            "Image analysis: recognized=%s detected=%s overall=%s",
            len(recognized),
            analysis.food_detected,
            analysis.verdict.overall,
        )
        return analysis

    def analyze_manual(
        self, food_ids: list[int], language: str | None = None
    ) -> FoodAnalysis:
        """Evaluate a meal built from catalog food ids."""
        if not food_ids:
            raise AnalysisRequestError("No foods selected")
        foods = self.catalog_service.get_foods(food_ids)
        if not foods:
            raise FoodNotFoundError("No valid foods found")
        recognized = [RecognizedItem(name=food.name, confidence=1.0) for food in foods]
        return self._analyze(recognized, language)

    def _analyze(
        self, recognized: list[RecognizedItem], language: str | None
    ) -> FoodAnalysis:
        names = [item.name for item in recognized]
        if not names:
            return FoodAnalysis(
                recognized=[],
                totals=None,
                verdict=SuitabilityVerdict(overall=MODERATE),
            )
        catalog = self.catalog_service.list_foods()
        records = [
            food
            for food in (resolve_food_name(name, catalog) for name in names)
            if food is not None
        ]
        totals = aggregate(records)
        verdict = evaluate(
            names,
            totals,
            catalog,
            language=self.fallbacks.language(language),
            fallbacks=self.fallbacks,
        )
        return FoodAnalysis(recognized=recognized, totals=totals, verdict=verdict)
