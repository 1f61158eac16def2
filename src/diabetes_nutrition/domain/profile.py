"""Domain model for user profiles."""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_PROFILE_LANGUAGE = "ar"

PROFILE_FIELDS = ("name", "age", "diabetes_type", "preferences", "language")


@dataclass(frozen=True)
class UserProfile:
    """Personal details and preferred language of one user."""

    user_id: str
    created_at: datetime
    name: str | None = None
    age: int | None = None
    diabetes_type: str | None = None
    preferences: str | None = None
    language: str = DEFAULT_PROFILE_LANGUAGE
