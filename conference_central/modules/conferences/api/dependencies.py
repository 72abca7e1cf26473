"""
Service dependencies for the API routers.

Both services share the module-level database so the conference-creation
transaction covers profile and conference writes.
"""
from conference_central.modules.conferences.services.profile_service import ProfileService
from conference_central.modules.conferences.services.conference_service import ConferenceService

# Service instances
_profile_service = ProfileService()
_conference_service = ConferenceService(profile_service=_profile_service)


def get_profile_service() -> ProfileService:
    """FastAPI dependency yielding the profile service."""
    return _profile_service


def get_conference_service() -> ConferenceService:
    """FastAPI dependency yielding the conference service."""
    return _conference_service
