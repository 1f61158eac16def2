"""Services for the static food catalog."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from diabetes_nutrition.domain.catalog import SUITABILITY_LEVELS, FoodRecord


class FoodNotFoundError(LookupError):
    """Raised when requested catalog foods do not exist."""


class CatalogRepository(Protocol):
    """Storage interface for catalog foods."""

    def list_foods(self) -> list[FoodRecord]:
        """Return every catalog food in catalog order."""

    def get_food(self, food_id: int) -> FoodRecord | None:
        """Return a food by id, if present."""

    def add_food(self, payload: dict[str, object]) -> FoodRecord:
        """Add a food, assigning its id, and return it."""


@dataclass
class CatalogService:
    """Read access to the catalog plus the admin add path."""

    repository: CatalogRepository

    def list_foods(self) -> list[FoodRecord]:
        """Return all catalog foods."""
        return self.repository.list_foods()

    def get_food(self, food_id: int) -> FoodRecord:
        """Return a single food or raise when it is unknown."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise FoodNotFoundError(f"Food {food_id} not found")
        return food

    def get_foods(self, food_ids: Iterable[int]) -> list[FoodRecord]:
        """Return known foods for the ids, preserving request order."""
        foods: list[FoodRecord] = []
        for food_id in food_ids:
            food = self.repository.get_food(food_id)
            if food is not None:
                foods.append(food)
        return foods

    def add_food(self, payload: dict[str, object]) -> FoodRecord:
        """Add a food to the catalog after checking its suitability tag."""
        suitability = payload.get("suitability")
        if suitability not in SUITABILITY_LEVELS:
            raise ValueError(f"Unknown suitability tag: {suitability!r}")
        return self.repository.add_food(payload)
