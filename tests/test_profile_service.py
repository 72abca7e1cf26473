"""
Tests for profile creation, update and retrieval.
"""
import json

import pytest
from unittest.mock import AsyncMock

from conference_central.modules.conferences.domain import ProfileKey, TeeShirtSize
from conference_central.modules.conferences.exceptions import UnauthenticatedError
from conference_central.modules.conferences.services import ProfileService


@pytest.mark.asyncio
async def test_first_save_creates_profile_with_default_name(profile_service):
    profile = await profile_service.save_profile("u1", "u1@example.com")

    assert profile.user_id == "u1"
    assert profile.display_name == "u1"
    assert profile.main_email == "u1@example.com"
    assert profile.tee_shirt_size is TeeShirtSize.NOT_SPECIFIED

    stored = await profile_service.get_profile("u1")
    assert stored == profile


@pytest.mark.asyncio
async def test_first_save_keeps_supplied_display_name(profile_service):
    profile = await profile_service.save_profile(
        "u2", "u2@example.com", display_name="Lemon Cake", tee_shirt_size=TeeShirtSize.L
    )

    assert profile.display_name == "Lemon Cake"
    assert profile.tee_shirt_size is TeeShirtSize.L


@pytest.mark.asyncio
async def test_blank_display_name_counts_as_missing(profile_service):
    profile = await profile_service.save_profile("u3", "cake@example.com", display_name="   ")
    assert profile.display_name == "cake"


@pytest.mark.asyncio
async def test_update_changes_size_and_keeps_name_and_email(profile_service):
    await profile_service.save_profile("u1", "u1@example.com")

    updated = await profile_service.save_profile(
        "u1", "other@example.com", tee_shirt_size=TeeShirtSize.M
    )

    assert updated.tee_shirt_size is TeeShirtSize.M
    assert updated.display_name == "u1"
    assert updated.main_email == "u1@example.com"
    assert updated.user_id == "u1"

    stored = await profile_service.get_profile("u1")
    assert stored.tee_shirt_size is TeeShirtSize.M
    assert stored.main_email == "u1@example.com"


@pytest.mark.asyncio
async def test_update_with_new_display_name(profile_service):
    await profile_service.save_profile("u1", "u1@example.com", tee_shirt_size=TeeShirtSize.S)

    updated = await profile_service.save_profile("u1", "u1@example.com", display_name="New Name")

    assert updated.display_name == "New Name"
    # size not supplied on save means NOT_SPECIFIED
    assert updated.tee_shirt_size is TeeShirtSize.NOT_SPECIFIED


@pytest.mark.asyncio
async def test_update_does_not_rederive_name_from_email(profile_service):
    await profile_service.save_profile("u1", "u1@example.com", display_name="Chosen")

    updated = await profile_service.save_profile("u1", "u1@example.com")
    assert updated.display_name == "Chosen"


@pytest.mark.asyncio
async def test_get_profile_returns_none_without_creating(profile_service, profile_repository):
    assert await profile_service.get_profile("nobody") is None
    assert await profile_repository.get(ProfileKey("nobody")) is None


@pytest.mark.asyncio
async def test_get_profile_or_default_does_not_persist(profile_service):
    profile = await profile_service.get_profile_or_default("u9", "nine@example.com")

    assert profile.display_name == "nine"
    assert profile.tee_shirt_size is TeeShirtSize.NOT_SPECIFIED
    assert await profile_service.get_profile("u9") is None


@pytest.mark.asyncio
async def test_get_profile_or_default_returns_stored_profile(profile_service):
    await profile_service.save_profile("u1", "u1@example.com", display_name="Stored")

    profile = await profile_service.get_profile_or_default("u1", "u1@example.com")
    assert profile.display_name == "Stored"


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", [None, ""])
async def test_unauthenticated_calls_never_touch_the_store(user_id):
    repository = AsyncMock()
    service = ProfileService(repository)

    with pytest.raises(UnauthenticatedError):
        await service.save_profile(user_id, "x@example.com", display_name="X")
    with pytest.raises(UnauthenticatedError):
        await service.get_profile(user_id)
    with pytest.raises(UnauthenticatedError):
        await service.get_profile_or_default(user_id, "x@example.com")

    repository.get.assert_not_awaited()
    repository.save.assert_not_awaited()


@pytest.mark.asyncio
async def test_store_failure_propagates():
    repository = AsyncMock()
    repository.get.return_value = None
    repository.save.side_effect = RuntimeError("datastore unavailable")
    service = ProfileService(repository)

    with pytest.raises(RuntimeError, match="datastore unavailable"):
        await service.save_profile("u1", "u1@example.com")


@pytest.mark.asyncio
async def test_corrupt_stored_json_is_a_store_failure(db, profile_service):
    await db.execute(
        "INSERT INTO profiles (user_id, main_email, conference_keys_to_attend) "
        "VALUES (:user_id, :main_email, :keys)",
        {"user_id": "u1", "main_email": "u1@example.com", "keys": "[not json"},
    )

    with pytest.raises(json.JSONDecodeError):
        await profile_service.get_profile("u1")
