"""
Business Logic Services

Services contain business logic and orchestrate repository calls.
"""

from .profile_service import ProfileService
from .conference_service import ConferenceService

__all__ = [
    "ProfileService",
    "ConferenceService",
]
