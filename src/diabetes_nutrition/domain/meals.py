"""Domain models for meal logging and chat history."""

from dataclasses import dataclass
from datetime import datetime

from diabetes_nutrition.domain.catalog import FoodRecord

DEFAULT_AMOUNT_GRAMS = 100.0


@dataclass(frozen=True)
class MealLogEntry:
    """A single logged food owned by one user."""

    id: int
    user_id: str
    food_id: int
    amount_grams: float
    logged_at: datetime
    notes: str | None = None


@dataclass(frozen=True)
class MealLogItem:
    """Requested food for a new meal log entry."""

    food_id: int
    amount_grams: float = DEFAULT_AMOUNT_GRAMS
    notes: str | None = None


@dataclass(frozen=True)
class MealLogView:
    """Meal log entry joined with its catalog food."""

    entry: MealLogEntry
    food: FoodRecord | None


@dataclass(frozen=True)
class ChatExchange:
    """One persisted chat message, from the user or the assistant."""

    id: int
    user_id: str
    message: str
    is_from_user: bool
    created_at: datetime
