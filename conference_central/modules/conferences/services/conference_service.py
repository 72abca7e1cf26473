"""
Conference Service

Business logic for creating, fetching and listing conferences.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional
from conference_central.modules.conferences.domain.conference import Conference, ConferenceKey
from conference_central.modules.conferences.domain.profile import ProfileKey
from conference_central.modules.conferences.exceptions import ConferenceNotFoundError
from conference_central.modules.conferences.repositories.conference_repository import ConferenceRepository
from conference_central.modules.conferences.services.profile_service import (
    ProfileService,
    require_caller,
)

logger = logging.getLogger("conference_central.conferences.service")


class ConferenceService:
    """Service for conference business logic."""

    def __init__(
        self,
        repository: Optional[ConferenceRepository] = None,
        profile_service: Optional[ProfileService] = None
    ):
        self.repository = repository or ConferenceRepository()
        self.profile_service = profile_service or ProfileService()

    async def create_conference(
        self,
        user_id: Optional[str],
        email: Optional[str],
        form: Mapping[str, Any]
    ) -> Conference:
        """
        Create a new conference owned by the caller.

        The conference id is allocated under the caller's profile key. The
        caller's profile (stored or default) and the conference are written
        in a single transaction.
        """
        user_id = require_caller(user_id)
        logger.debug(f"[ConferenceService.create_conference] user_id={user_id}, name={form.get('name')!r}")

        profile = await self.profile_service.get_profile_or_default(user_id, email)
        conference_id = await self.repository.allocate_id(profile.key)
        conference = Conference.from_form(conference_id, user_id, form)

        async with self.repository.transaction():
            await self.profile_service.repository.save(profile.to_dict())
            await self.repository.insert(conference.to_dict())

        logger.info(f"[ConferenceService.create_conference] Created conference {conference.id} for {user_id}")
        return conference

    async def query_conferences(self) -> List[Conference]:
        """Return every conference ordered by name."""
        rows = await self.repository.list_ordered_by_name()
        return [Conference.from_dict(row) for row in rows]

    async def get_conference(self, websafe_key: str) -> Conference:
        """Return the conference with the given websafe key."""
        key = ConferenceKey.from_urlsafe(websafe_key)
        data = await self.repository.get(key)
        if not data:
            raise ConferenceNotFoundError(f"No conference found with key: {websafe_key}")
        return Conference.from_dict(data)

    async def get_conferences_created(self, user_id: Optional[str]) -> List[Conference]:
        """Return the conferences created by the caller."""
        user_id = require_caller(user_id)
        rows = await self.repository.list_by_parent(ProfileKey(user_id))
        return [Conference.from_dict(row) for row in rows]

    async def organizer_display_names(self, conferences: List[Conference]) -> Dict[str, Optional[str]]:
        """Map organizer user ids to their profile display names."""
        keys = [conference.key.parent for conference in conferences]
        profiles = await self.profile_service.repository.get_multi(keys)
        return {user_id: data.get("display_name") for user_id, data in profiles.items()}
