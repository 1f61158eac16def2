"""In-memory repositories for the catalog, meal logs, chat and profiles."""

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime

from diabetes_nutrition.catalog_seed import seed_foods
from diabetes_nutrition.domain.catalog import FoodRecord
from diabetes_nutrition.domain.meals import ChatExchange, MealLogEntry
from diabetes_nutrition.domain.profile import UserProfile
from diabetes_nutrition.services.catalog import CatalogRepository
from diabetes_nutrition.services.chat_history import ChatMessageRepository
from diabetes_nutrition.services.meal_log import MealLogRepository
from diabetes_nutrition.services.profile import ProfileRepository


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """Catalog held in process memory, seeded at startup."""

    foods: list[FoodRecord] = field(default_factory=seed_foods)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def list_foods(self) -> list[FoodRecord]:
        """Return every food in catalog order."""
        with self._lock:
            return list(self.foods)

    def get_food(self, food_id: int) -> FoodRecord | None:
        """Return a food by id."""
        with self._lock:
            for food in self.foods:
                if food.id == food_id:
                    return food
        return None

    def add_food(self, payload: dict[str, object]) -> FoodRecord:
        """Append a food with the next free id."""
        with self._lock:
            next_id = max((food.id for food in self.foods), default=0) + 1
            glycemic_index = payload.get("glycemic_index")
            food = FoodRecord(
                id=next_id,
                name=str(payload["name"]),
                alternate_name=str(payload.get("alternate_name") or ""),
                calories=float(payload.get("calories", 0.0)),
                carbs_g=float(payload.get("carbs_g", 0.0)),
                protein_g=float(payload.get("protein_g", 0.0)),
                fat_g=float(payload.get("fat_g", 0.0)),
                sugar_g=float(payload.get("sugar_g", 0.0)),
                glycemic_index=(
                    int(glycemic_index) if glycemic_index is not None else None
                ),
                suitability=str(payload["suitability"]),
                category=(
                    str(payload["category"]) if payload.get("category") else None
                ),
            )
            self.foods.append(food)
            return food


@dataclass
class InMemoryMealLogRepository(MealLogRepository):
    """Meal log entries keyed by id."""

    _entries: dict[int, MealLogEntry] = field(default_factory=dict)
    _next_id: int = 1
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def create(  # noqa: PLR0913
        self,
        user_id: str,
        food_id: int,
        amount_grams: float,
        logged_at: datetime,
        notes: str | None,
    ) -> MealLogEntry:
        """Store an entry and assign its id."""
        with self._lock:
            entry = MealLogEntry(
                id=self._next_id,
                user_id=user_id,
                food_id=food_id,
                amount_grams=amount_grams,
                logged_at=logged_at,
                notes=notes,
            )
            self._entries[entry.id] = entry
            self._next_id += 1
            return entry

    def get(self, entry_id: int) -> MealLogEntry | None:
        """Return an entry by id."""
        with self._lock:
            return self._entries.get(entry_id)

    def list_by_user(self, user_id: str) -> list[MealLogEntry]:
        """Return a user's entries in insertion order."""
        with self._lock:
            entries = list(self._entries.values())
        return [entry for entry in entries if entry.user_id == user_id]

    def delete(self, entry_id: int) -> bool:
        """Remove an entry."""
        with self._lock:
            return self._entries.pop(entry_id, None) is not None


@dataclass
class InMemoryChatMessageRepository(ChatMessageRepository):
    """Chat messages in insertion order."""

    _messages: list[ChatExchange] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def create(
        self, user_id: str, message: str, is_from_user: bool, created_at: datetime
    ) -> ChatExchange:
        """Store a message and assign its id."""
        with self._lock:
            exchange = ChatExchange(
                id=len(self._messages) + 1,
                user_id=user_id,
                message=message,
                is_from_user=is_from_user,
                created_at=created_at,
            )
            self._messages.append(exchange)
            return exchange

    def list_by_user(self, user_id: str) -> list[ChatExchange]:
        """Return a user's messages in insertion order."""
        with self._lock:
            messages = list(self._messages)
        return [message for message in messages if message.user_id == user_id]


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """User profiles keyed by user id."""

    _profiles: dict[str, UserProfile] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get(self, user_id: str) -> UserProfile | None:
        """Return a user's profile."""
        with self._lock:
            return self._profiles.get(user_id)

    def create(
        self, user_id: str, fields: Mapping[str, object], created_at: datetime
    ) -> UserProfile:
        """Store a new profile."""
        with self._lock:
            profile = UserProfile(user_id=user_id, created_at=created_at, **fields)
            self._profiles[user_id] = profile
            return profile

    def update(self, user_id: str, fields: Mapping[str, object]) -> UserProfile:
        """Replace changed fields on a stored profile."""
        with self._lock:
            profile = replace(self._profiles[user_id], **fields)
            self._profiles[user_id] = profile
            return profile
