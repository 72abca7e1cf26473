"""
Data Access Layer (Repositories)

Repositories handle all database interactions.
"""

from .profile_repository import ProfileRepository
from .conference_repository import ConferenceRepository

__all__ = [
    "ProfileRepository",
    "ConferenceRepository",
]
