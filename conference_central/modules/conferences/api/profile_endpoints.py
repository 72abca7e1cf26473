"""
Profile API Endpoints

REST API endpoints for the caller's profile.
"""
import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends
from conference_central.modules.conferences.api.dependencies import get_profile_service
from conference_central.modules.conferences.api.forms import ProfileForm, ProfileMiniForm
from conference_central.modules.conferences.auth.middleware import Caller, get_caller
from conference_central.modules.conferences.exceptions import UnauthenticatedError
from conference_central.modules.conferences.services.profile_service import ProfileService

logger = logging.getLogger("conference_central.profiles.api")

router = APIRouter(prefix="/api/conference/v1", tags=["profile"])


@router.post("/profile", response_model=ProfileForm)
async def save_profile(
    request: ProfileMiniForm,
    caller: Optional[Caller] = Depends(get_caller),
    service: ProfileService = Depends(get_profile_service)
):
    """Update & return user profile."""
    try:
        profile = await service.save_profile(
            user_id=caller.user_id if caller else None,
            email=caller.email if caller else None,
            display_name=request.display_name,
            tee_shirt_size=request.tee_shirt_size,
        )
        return ProfileForm.from_profile(profile)
    except UnauthenticatedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        logger.error(f"[profile_endpoints.save_profile] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/profile", response_model=ProfileForm)
async def get_profile(
    caller: Optional[Caller] = Depends(get_caller),
    service: ProfileService = Depends(get_profile_service)
):
    """Return user profile."""
    try:
        profile = await service.get_profile(caller.user_id if caller else None)
    except UnauthenticatedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        logger.error(f"[profile_endpoints.get_profile] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ProfileForm.from_profile(profile)
