"""User profile service."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from diabetes_nutrition.domain.fallbacks import SUPPORTED_LANGUAGES
from diabetes_nutrition.domain.profile import PROFILE_FIELDS, UserProfile

_logger = logging.getLogger(__name__)


class ProfileNotFoundError(LookupError):
    """Raised when a user has no stored profile."""


class ProfileRequestError(ValueError):
    """Raised when a profile update is invalid."""


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get(self, user_id: str) -> UserProfile | None:
        """Return a user's profile, if present."""

    def create(
        self, user_id: str, fields: Mapping[str, object], created_at: datetime
    ) -> UserProfile:
        """Store a new profile and return it."""

    def update(self, user_id: str, fields: Mapping[str, object]) -> UserProfile:
        """Apply field changes to an existing profile and return it."""


@dataclass
class ProfileService:
    """Reads and updates user profiles."""

    repository: ProfileRepository

    def get_profile(self, user_id: str) -> UserProfile:
        """Return the user's profile or raise when none exists."""
        profile = self.repository.get(user_id)
        if profile is None:
            raise ProfileNotFoundError("User not found")
        return profile

    def update_profile(
        self, user_id: str, changes: Mapping[str, object]
    ) -> UserProfile:
        """Apply changes, creating the profile on first update."""
        unknown = set(changes) - set(PROFILE_FIELDS)
        if unknown:
            raise ProfileRequestError(
                f"Unknown profile fields: {', '.join(sorted(unknown))}"
            )
        if "language" in changes and changes["language"] not in SUPPORTED_LANGUAGES:
            raise ProfileRequestError(f"Unsupported language: {changes['language']!r}")

        if self.repository.get(user_id) is None:
            profile = self.repository.create(
                user_id, dict(changes), datetime.now(tz=UTC)
            )
            _logger.info("Profile created: user=%s", user_id)
            return profile
        profile = self.repository.update(user_id, dict(changes))
        _logger.info("Profile updated: user=%s fields=%s", user_id, sorted(changes))
        return profile

    def preferred_language(
        self, user_id: str | None, requested: str | None
    ) -> str | None:
        """Return the requested language, else the stored profile language."""
        if requested or not user_id:
            return requested
        profile = self.repository.get(user_id)
        return profile.language if profile is not None else None
