"""Tests for user profiles."""

import pytest

from diabetes_nutrition.adapters.memory_repositories import InMemoryProfileRepository
from diabetes_nutrition.services.profile import (
    ProfileNotFoundError,
    ProfileRequestError,
    ProfileService,
)


@pytest.fixture
def service() -> ProfileService:
    return ProfileService(InMemoryProfileRepository())


def test_get_profile_missing_raises(service) -> None:
    with pytest.raises(ProfileNotFoundError):
        service.get_profile("user-1")


def test_first_update_creates_profile_with_default_language(service) -> None:
    profile = service.update_profile("user-1", {"name": "Layla", "age": 52})

    assert profile.name == "Layla"
    assert profile.age == 52
    assert profile.language == "ar"
    assert profile.created_at.tzinfo is not None
    assert service.get_profile("user-1") == profile


def test_update_changes_only_given_fields(service) -> None:
    created = service.update_profile(
        "user-1", {"name": "Omar", "diabetes_type": "type2"}
    )

    updated = service.update_profile(
        "user-1", {"language": "en", "preferences": "vegetarian"}
    )

    assert updated.name == "Omar"
    assert updated.diabetes_type == "type2"
    assert updated.language == "en"
    assert updated.preferences == "vegetarian"
    assert updated.created_at == created.created_at


def test_update_rejects_bad_fields(service) -> None:
    with pytest.raises(ProfileRequestError):
        service.update_profile("user-1", {"language": "fr"})
    with pytest.raises(ProfileRequestError):
        service.update_profile("user-1", {"password": "secret"})
    with pytest.raises(ProfileNotFoundError):
        service.get_profile("user-1")


def test_preferred_language(service) -> None:
    service.update_profile("user-1", {"language": "en"})

    assert service.preferred_language("user-1", None) == "en"
    assert service.preferred_language("user-1", "ar") == "ar"
    assert service.preferred_language("user-2", None) is None
    assert service.preferred_language(None, None) is None
