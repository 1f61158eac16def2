"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from diabetes_nutrition.domain.meals import MealLogEntry, MealLogItem, MealLogView
from diabetes_nutrition.services.catalog import CatalogService, FoodNotFoundError

_logger = logging.getLogger(__name__)


class MealLogRequestError(ValueError):
    """Raised when a meal log request is invalid."""


class MealLogNotFoundError(LookupError):
    """Raised when a meal log entry does not exist."""


class MealLogAccessError(PermissionError):
    """Raised when a user touches another user's meal log entry."""


class MealLogRepository(Protocol):
    """Persistence interface for meal logs."""

    def create(  # noqa: PLR0913
        self,
        user_id: str,
        food_id: int,
        amount_grams: float,
        logged_at: datetime,
        notes: str | None,
    ) -> MealLogEntry:
        """Create an entry and return it with its assigned id."""

    def get(self, entry_id: int) -> MealLogEntry | None:
        """Return an entry by id."""

    def list_by_user(self, user_id: str) -> list[MealLogEntry]:
        """Return entries owned by a user."""

    def delete(self, entry_id: int) -> bool:
        """Delete an entry; return whether it existed."""


@dataclass
class MealLogService:
    """Service that persists meal logs and enforces ownership."""

    repository: MealLogRepository
    catalog_service: CatalogService

    def log_foods(self, user_id: str, items: list[MealLogItem]) -> list[MealLogEntry]:
        """Create one entry per item after checking every food exists."""
        if not items:
            raise MealLogRequestError("No foods provided")
        for item in items:
            if item.amount_grams <= 0:
                raise MealLogRequestError("Amount must be positive")
            self.catalog_service.get_food(item.food_id)

        logged_at = datetime.now(tz=UTC)
        entries = [
            self.repository.create(
                user_id=user_id,
                food_id=item.food_id,
                amount_grams=item.amount_grams,
                logged_at=logged_at,
                notes=item.notes,
            )
            for item in items
        ]
        _logger.info("Meal log created: user=%s entries=%s", user_id, len(entries))
        return entries

    def list_entries(self, user_id: str) -> list[MealLogView]:
        """Return the user's entries newest first, joined with their foods."""
        entries = sorted(
            self.repository.list_by_user(user_id),
            key=lambda entry: (entry.logged_at, entry.id),
            reverse=True,
        )
        views: list[MealLogView] = []
        for entry in entries:
            try:
                food = self.catalog_service.get_food(entry.food_id)
            except FoodNotFoundError:
                food = None
            views.append(MealLogView(entry=entry, food=food))
        return views

    def delete_entry(self, user_id: str, entry_id: int) -> None:
        """Delete an entry owned by the user."""
        entry = self.repository.get(entry_id)
        if entry is None:
            raise MealLogNotFoundError(f"Meal log {entry_id} not found")
        if entry.user_id != user_id:
            raise MealLogAccessError(f"Meal log {entry_id} belongs to another user")
        if not self.repository.delete(entry_id):
            raise MealLogNotFoundError(f"Meal log {entry_id} not found")
        _logger.info("Meal log deleted: user=%s entry=%s", user_id, entry_id)
