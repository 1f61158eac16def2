"""Tests for meal log service."""

from datetime import UTC, datetime, timedelta

import pytest

from diabetes_nutrition.adapters.memory_repositories import InMemoryMealLogRepository
from diabetes_nutrition.domain.meals import MealLogItem
from diabetes_nutrition.services.catalog import FoodNotFoundError
from diabetes_nutrition.services.meal_log import (
    MealLogAccessError,
    MealLogNotFoundError,
    MealLogRequestError,
    MealLogService,
)


@pytest.fixture
def service(catalog_service) -> MealLogService:
    return MealLogService(
        repository=InMemoryMealLogRepository(), catalog_service=catalog_service
    )


def test_log_foods_creates_one_entry_per_item(service) -> None:
    entries = service.log_foods(
        "user-1",
        [
            MealLogItem(food_id=1),
            MealLogItem(food_id=3, amount_grams=150, notes="lunch"),
        ],
    )

    assert [entry.food_id for entry in entries] == [1, 3]
    assert entries[0].amount_grams == 100
    assert entries[1].notes == "lunch"
    assert entries[0].id != entries[1].id
    assert entries[0].logged_at.tzinfo is not None


def test_log_foods_rejects_empty_and_unknown_food(service) -> None:
    with pytest.raises(MealLogRequestError):
        service.log_foods("user-1", [])
    with pytest.raises(FoodNotFoundError):
        service.log_foods("user-1", [MealLogItem(food_id=1), MealLogItem(food_id=999)])

    assert service.list_entries("user-1") == []


def test_list_entries_newest_first_with_food(service) -> None:
    repository = service.repository
    now = datetime.now(tz=UTC)
    repository.create("user-1", 1, 100, now - timedelta(hours=2), None)
    repository.create("user-1", 5, 80, now, None)
    repository.create("user-2", 3, 50, now, None)

    views = service.list_entries("user-1")

    assert [view.entry.food_id for view in views] == [5, 1]
    assert views[0].food is not None
    assert views[0].food.alternate_name == "White Rice"


def test_list_entries_keeps_entries_for_removed_foods(service) -> None:
    service.repository.create("user-1", 999, 100, datetime.now(tz=UTC), None)

    views = service.list_entries("user-1")

    assert len(views) == 1
    assert views[0].food is None


def test_delete_entry_by_other_user_is_forbidden(service) -> None:
    entry = service.log_foods("owner", [MealLogItem(food_id=2)])[0]

    with pytest.raises(MealLogAccessError):
        service.delete_entry("intruder", entry.id)

    assert service.repository.get(entry.id) == entry
    assert [view.entry for view in service.list_entries("owner")] == [entry]


def test_delete_entry(service) -> None:
    entry = service.log_foods("owner", [MealLogItem(food_id=2)])[0]

    service.delete_entry("owner", entry.id)

    assert service.repository.get(entry.id) is None
    with pytest.raises(MealLogNotFoundError):
        service.delete_entry("owner", entry.id)


class _VanishingMealLogRepository(InMemoryMealLogRepository):
    """Reports every delete as a miss, as if another request removed it first."""

    def delete(self, entry_id: int) -> bool:
        return False


def test_delete_entry_reports_concurrent_removal(catalog_service) -> None:
    service = MealLogService(
        repository=_VanishingMealLogRepository(), catalog_service=catalog_service
    )
    entry = service.log_foods("owner", [MealLogItem(food_id=2)])[0]

    with pytest.raises(MealLogNotFoundError):
        service.delete_entry("owner", entry.id)
