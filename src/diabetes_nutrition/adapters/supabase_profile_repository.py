"""Supabase repository for user profiles."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from diabetes_nutrition.domain.profile import DEFAULT_PROFILE_LANGUAGE, UserProfile
from diabetes_nutrition.services.profile import ProfileRepository

_COLUMNS = "user_id, name, age, diabetes_type, preferences, language, created_at"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user profiles."""

    client: Client

    def get(self, user_id: str) -> UserProfile | None:
        """Return the profile row for a user."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def create(
        self, user_id: str, fields: Mapping[str, object], created_at: datetime
    ) -> UserProfile:
        """Insert a profile row and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "user_id": user_id,
                    "language": DEFAULT_PROFILE_LANGUAGE,
                    **fields,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user profile")
        return _parse_profile(response.data[0])

    def update(self, user_id: str, fields: Mapping[str, object]) -> UserProfile:
        """Update a profile row and return it."""
        if not fields:
            profile = self.get(user_id)
            if profile is None:
                raise RuntimeError("User profile disappeared during update")
            return profile
        response = (
            self.client.table("users")
            .update(dict(fields))
            .eq("user_id", user_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    age = row.get("age")
    return UserProfile(
        user_id=str(row["user_id"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        name=_optional_text(row.get("name")),
        age=int(age) if age is not None else None,
        diabetes_type=_optional_text(row.get("diabetes_type")),
        preferences=_optional_text(row.get("preferences")),
        language=str(row.get("language") or DEFAULT_PROFILE_LANGUAGE),
    )


def _optional_text(value: object) -> str | None:
    return str(value) if value is not None else None
