"""
Profile Service

Business logic for creating, updating and reading caller profiles.
"""
import logging
from typing import Optional
from conference_central.modules.conferences.domain.profile import (
    Profile,
    ProfileKey,
    TeeShirtSize,
    default_profile,
)
from conference_central.modules.conferences.exceptions import UnauthenticatedError
from conference_central.modules.conferences.repositories.profile_repository import ProfileRepository

logger = logging.getLogger("conference_central.profiles.service")


def require_caller(user_id: Optional[str]) -> str:
    """Return the caller identity or raise UnauthenticatedError."""
    if not user_id:
        raise UnauthenticatedError()
    return user_id


class ProfileService:
    """Service for profile business logic."""

    def __init__(self, repository: Optional[ProfileRepository] = None):
        self.repository = repository or ProfileRepository()

    async def get_profile(self, user_id: Optional[str]) -> Optional[Profile]:
        """Get the caller's stored profile, or None. Never creates one."""
        user_id = require_caller(user_id)
        logger.debug(f"[ProfileService.get_profile] user_id={user_id}")

        data = await self.repository.get(ProfileKey(user_id))
        if not data:
            return None
        return Profile.from_dict(data)

    async def get_profile_or_default(self, user_id: Optional[str], email: Optional[str]) -> Profile:
        """
        Get the caller's profile, or an unsaved default one built from the
        caller's email when none is stored yet.
        """
        profile = await self.get_profile(user_id)
        if profile is None:
            profile = default_profile(user_id, email)
        return profile

    async def save_profile(
        self,
        user_id: Optional[str],
        email: Optional[str],
        display_name: Optional[str] = None,
        tee_shirt_size: Optional[TeeShirtSize] = None
    ) -> Profile:
        """
        Create or update the caller's profile.

        A missing size is stored as NOT_SPECIFIED. A missing display name is
        derived from the email on creation and leaves the stored name alone
        on update. The email is only recorded on creation.
        """
        user_id = require_caller(user_id)
        logger.debug(
            f"[ProfileService.save_profile] user_id={user_id}, "
            f"display_name={display_name!r}, tee_shirt_size={tee_shirt_size}"
        )

        if display_name is not None and not display_name.strip():
            display_name = None
        if tee_shirt_size is None:
            tee_shirt_size = TeeShirtSize.NOT_SPECIFIED

        profile = await self.get_profile(user_id)
        if profile is None:
            profile = default_profile(user_id, email)
            if display_name is not None:
                profile.display_name = display_name
            profile.tee_shirt_size = tee_shirt_size
            logger.info(f"[ProfileService.save_profile] Creating profile: {user_id}")
        else:
            profile.update(display_name, tee_shirt_size)

        await self.repository.save(profile.to_dict())
        return profile
