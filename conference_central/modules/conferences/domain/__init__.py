"""
Domain Models

Pure data models representing profile and conference entities.
"""

from .profile import (
    Profile,
    ProfileKey,
    TeeShirtSize,
    default_profile,
    extract_default_display_name,
)
from .conference import Conference, ConferenceKey

__all__ = [
    "Profile",
    "ProfileKey",
    "TeeShirtSize",
    "default_profile",
    "extract_default_display_name",
    "Conference",
    "ConferenceKey",
]
