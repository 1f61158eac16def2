"""Pydantic models for API request payloads."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from diabetes_nutrition.domain.meals import DEFAULT_AMOUNT_GRAMS


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ManualAnalysisRequest(_CamelModel):
    """Manual meal analysis payload."""

    food_ids: list[int] = Field(alias="foodIds")
    language: str | None = None


class MealLogFood(_CamelModel):
    """Single food in a meal log request."""

    food_id: int = Field(alias="foodId")
    amount: float = Field(default=DEFAULT_AMOUNT_GRAMS, gt=0)
    notes: str | None = None


class MealLogCreateRequest(_CamelModel):
    """Meal log creation payload."""

    foods: list[MealLogFood]


class ChatRequest(_CamelModel):
    """Chat message payload."""

    message: str = Field(min_length=1, max_length=4000)
    language: str | None = None


class FoodCreateRequest(_CamelModel):
    """Admin payload for adding a catalog food."""

    name: str = Field(min_length=1)
    name_en: str = Field(default="", alias="nameEn")
    calories: float = Field(ge=0)
    carbs: float = Field(ge=0)
    protein: float = Field(ge=0)
    fat: float = Field(ge=0)
    sugar: float = Field(ge=0)
    glycemic_index: int | None = Field(
        default=None, ge=0, le=100, alias="glycemicIndex"
    )
    diabetic_suitability: Literal["safe", "moderate", "avoid"] = Field(
        alias="diabeticSuitability"
    )
    category: str | None = None


class ProfileUpdateRequest(_CamelModel):
    """Partial profile update; omitted fields stay unchanged."""

    name: str | None = None
    age: int | None = Field(default=None, ge=0, le=130)
    diabetes_type: str | None = Field(default=None, alias="diabetesType")
    preferences: str | None = None
    language: Literal["ar", "en"] | None = None
