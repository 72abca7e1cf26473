"""
Conference Domain Model

Pure data model for conferences and the parent/child key that scopes a
conference under the profile of its organizer.
"""
import base64
import binascii
import json
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, List, Dict, Any, Mapping

from conference_central.modules.conferences.domain.profile import ProfileKey
from conference_central.modules.conferences.exceptions import InvalidConferenceKeyError

# Form fields copied verbatim onto a new conference.
FORM_FIELDS = (
    "name",
    "description",
    "topics",
    "city",
    "start_date",
    "end_date",
    "max_attendees",
)


@dataclass(frozen=True)
class ConferenceKey:
    """Conference key: an allocated id under the organizer's profile key."""
    parent: ProfileKey
    id: int

    def urlsafe(self) -> str:
        """Encode the key as an opaque string safe for URLs."""
        raw = json.dumps(["Profile", self.parent.user_id, "Conference", self.id])
        return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")

    @classmethod
    def from_urlsafe(cls, websafe_key: str) -> "ConferenceKey":
        """Parse a key produced by urlsafe()."""
        padded = websafe_key + "=" * (-len(websafe_key) % 4)
        try:
            parts = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
        except (ValueError, binascii.Error, UnicodeError):
            raise InvalidConferenceKeyError(f"Malformed conference key: {websafe_key}")

        if (
            not isinstance(parts, list)
            or len(parts) != 4
            or parts[0] != "Profile"
            or parts[2] != "Conference"
            or not isinstance(parts[1], str)
            or not isinstance(parts[3], int)
            or isinstance(parts[3], bool)
        ):
            raise InvalidConferenceKeyError(f"Not a conference key: {websafe_key}")

        key = cls(parent=ProfileKey(parts[1]), id=parts[3])
        # each key has exactly one websafe form
        if key.urlsafe() != websafe_key:
            raise InvalidConferenceKeyError(f"Non-canonical conference key: {websafe_key}")
        return key


def _to_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # ISO strings, possibly with a time part: only the date is kept
    return date.fromisoformat(str(value)[:10])


@dataclass
class Conference:
    """Conference domain model."""
    id: int
    organizer_user_id: str
    name: str
    description: Optional[str] = None
    topics: List[str] = field(default_factory=list)
    city: Optional[str] = None
    start_date: Optional[date] = None
    month: int = 0
    end_date: Optional[date] = None
    max_attendees: int = 0
    seats_available: int = 0

    @property
    def key(self) -> ConferenceKey:
        return ConferenceKey(parent=ProfileKey(self.organizer_user_id), id=self.id)

    @property
    def websafe_key(self) -> str:
        return self.key.urlsafe()

    @classmethod
    def from_form(
        cls,
        conference_id: int,
        organizer_user_id: str,
        form: Mapping[str, Any]
    ) -> "Conference":
        """
        Create a new Conference from the fields of a creation form.

        The month is taken from the start date (0 without one) and all seats
        are available on creation.
        """
        data = {name: form.get(name) for name in FORM_FIELDS}
        start_date = _to_date(data["start_date"])
        max_attendees = data["max_attendees"] or 0
        return cls(
            id=conference_id,
            organizer_user_id=organizer_user_id,
            name=data["name"],
            description=data["description"],
            topics=list(data["topics"] or []),
            city=data["city"],
            start_date=start_date,
            month=start_date.month if start_date else 0,
            end_date=_to_date(data["end_date"]),
            max_attendees=max_attendees,
            seats_available=max_attendees,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Conference":
        """Create Conference from dictionary (e.g., from database row)."""
        return cls(
            id=int(data["id"]),
            organizer_user_id=data["organizer_user_id"],
            name=data["name"],
            description=data.get("description"),
            topics=list(data.get("topics") or []),
            city=data.get("city"),
            start_date=_to_date(data.get("start_date")),
            month=data.get("month") or 0,
            end_date=_to_date(data.get("end_date")),
            max_attendees=data.get("max_attendees") or 0,
            seats_available=data.get("seats_available") or 0,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Conference to dictionary."""
        return {
            "id": self.id,
            "organizer_user_id": self.organizer_user_id,
            "name": self.name,
            "description": self.description,
            "topics": list(self.topics),
            "city": self.city,
            "start_date": self.start_date,
            "month": self.month,
            "end_date": self.end_date,
            "max_attendees": self.max_attendees,
            "seats_available": self.seats_available,
        }
