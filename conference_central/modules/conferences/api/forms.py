"""
Request/Response Forms

Wire shapes of the conference API. Field names are camelCase on the wire.
"""
from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from conference_central.modules.conferences.domain.conference import Conference
from conference_central.modules.conferences.domain.profile import Profile, TeeShirtSize


class Form(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileMiniForm(Form):
    """Update Profile form: the user-modifiable fields."""
    display_name: Optional[str] = None
    tee_shirt_size: Optional[TeeShirtSize] = None


class ProfileForm(Form):
    """Profile outbound form."""
    user_id: str
    display_name: Optional[str] = None
    main_email: Optional[str] = None
    tee_shirt_size: TeeShirtSize = TeeShirtSize.NOT_SPECIFIED
    conference_keys_to_attend: List[str] = []

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileForm":
        return cls(
            user_id=profile.user_id,
            display_name=profile.display_name,
            main_email=profile.main_email,
            tee_shirt_size=profile.tee_shirt_size,
            conference_keys_to_attend=profile.conference_keys_to_attend,
        )


class ConferenceForm(Form):
    """Conference creation form."""
    name: str = Field(min_length=1)
    description: Optional[str] = None
    topics: Optional[List[str]] = None
    city: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    max_attendees: Optional[int] = Field(default=None, ge=0)


class ConferenceOutForm(Form):
    """Conference outbound form."""
    websafe_key: str
    name: str
    description: Optional[str] = None
    organizer_user_id: str
    organizer_display_name: Optional[str] = None
    topics: List[str] = []
    city: Optional[str] = None
    start_date: Optional[date] = None
    month: int = 0
    end_date: Optional[date] = None
    max_attendees: int = 0
    seats_available: int = 0

    @classmethod
    def from_conference(
        cls,
        conference: Conference,
        display_name: Optional[str] = None
    ) -> "ConferenceOutForm":
        return cls(
            websafe_key=conference.websafe_key,
            organizer_display_name=display_name,
            **{k: v for k, v in conference.to_dict().items() if k != "id"},
        )


class ConferenceForms(Form):
    """Multiple conference outbound forms."""
    items: List[ConferenceOutForm] = []

    @classmethod
    def from_conferences(
        cls,
        conferences: List[Conference],
        names: Dict[str, Optional[str]]
    ) -> "ConferenceForms":
        return cls(items=[
            ConferenceOutForm.from_conference(conf, names.get(conf.organizer_user_id))
            for conf in conferences
        ])
