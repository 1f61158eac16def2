"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from diabetes_nutrition.domain.meals import MealLogEntry
from diabetes_nutrition.services.meal_log import MealLogRepository

_COLUMNS = "id, user_id, food_id, amount, notes, date"


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs."""

    client: Client

    def create(  # noqa: PLR0913
        self,
        user_id: str,
        food_id: int,
        amount_grams: float,
        logged_at: datetime,
        notes: str | None,
    ) -> MealLogEntry:
        """Create a meal log row and return it."""
        response = (
            self.client.table("meal_logs")
            .insert(
                {
                    "user_id": user_id,
                    "food_id": food_id,
                    "amount": amount_grams,
                    "notes": notes,
                    "date": logged_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return _parse_entry(response.data[0])

    def get(self, entry_id: int) -> MealLogEntry | None:
        """Return a meal log row by id."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("id", entry_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_by_user(self, user_id: str) -> list[MealLogEntry]:
        """Return meal logs for a user, newest first."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("date", desc=True)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def delete(self, entry_id: int) -> bool:
        """Delete a meal log row."""
        response = self.client.table("meal_logs").delete().eq("id", entry_id).execute()
        return bool(response.data)


def _parse_entry(row: dict[str, object]) -> MealLogEntry:
    notes = row.get("notes")
    return MealLogEntry(
        id=int(row["id"]),
        user_id=str(row["user_id"]),
        food_id=int(row["food_id"]),
        amount_grams=float(row.get("amount") or 0.0),
        logged_at=datetime.fromisoformat(str(row["date"])),
        notes=str(notes) if notes is not None else None,
    )
