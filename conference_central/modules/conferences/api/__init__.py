"""
REST API Endpoints

Thin API layer that delegates to services.
"""

from .profile_endpoints import router as profile_router
from .conference_endpoints import router as conference_router

__all__ = [
    "profile_router",
    "conference_router",
]
