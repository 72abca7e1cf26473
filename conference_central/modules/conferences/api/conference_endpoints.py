"""
Conference API Endpoints

REST API endpoints for creating, fetching and listing conferences.
"""
import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends
from conference_central.modules.conferences.api.dependencies import get_conference_service
from conference_central.modules.conferences.api.forms import (
    ConferenceForm,
    ConferenceForms,
    ConferenceOutForm,
)
from conference_central.modules.conferences.auth.middleware import Caller, get_caller
from conference_central.modules.conferences.exceptions import (
    ConferenceNotFoundError,
    InvalidConferenceKeyError,
    UnauthenticatedError,
)
from conference_central.modules.conferences.services.conference_service import ConferenceService

logger = logging.getLogger("conference_central.conferences.api")

router = APIRouter(prefix="/api/conference/v1", tags=["conference"])


@router.post("/conference", response_model=ConferenceOutForm)
async def create_conference(
    request: ConferenceForm,
    caller: Optional[Caller] = Depends(get_caller),
    service: ConferenceService = Depends(get_conference_service)
):
    """Create new conference."""
    try:
        conference = await service.create_conference(
            user_id=caller.user_id if caller else None,
            email=caller.email if caller else None,
            form=request.model_dump(),
        )
    except UnauthenticatedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        logger.error(f"[conference_endpoints.create_conference] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    # conference is already committed here
    try:
        names = await service.organizer_display_names([conference])
    except Exception as e:
        logger.warning(
            f"[conference_endpoints.create_conference] Organizer name lookup failed: {e}",
            exc_info=True
        )
        names = {}
    return ConferenceOutForm.from_conference(conference, names.get(conference.organizer_user_id))


@router.post("/queryConferences", response_model=ConferenceForms)
async def query_conferences(
    service: ConferenceService = Depends(get_conference_service)
):
    """Query for conferences, ordered by name."""
    try:
        conferences = await service.query_conferences()
        names = await service.organizer_display_names(conferences)
        return ConferenceForms.from_conferences(conferences, names)
    except Exception as e:
        logger.error(f"[conference_endpoints.query_conferences] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/conference/{websafe_conference_key}", response_model=ConferenceOutForm)
async def get_conference(
    websafe_conference_key: str,
    service: ConferenceService = Depends(get_conference_service)
):
    """Return requested conference (by websafeConferenceKey)."""
    try:
        conference = await service.get_conference(websafe_conference_key)
        names = await service.organizer_display_names([conference])
        return ConferenceOutForm.from_conference(conference, names.get(conference.organizer_user_id))
    except InvalidConferenceKeyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConferenceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"[conference_endpoints.get_conference] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/getConferencesCreated", response_model=ConferenceForms)
async def get_conferences_created(
    caller: Optional[Caller] = Depends(get_caller),
    service: ConferenceService = Depends(get_conference_service)
):
    """Return conferences created by user."""
    try:
        conferences = await service.get_conferences_created(caller.user_id if caller else None)
        names = await service.organizer_display_names(conferences)
        return ConferenceForms.from_conferences(conferences, names)
    except UnauthenticatedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        logger.error(f"[conference_endpoints.get_conferences_created] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
